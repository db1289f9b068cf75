# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/colortag/cli/options.py
#   project      : ColorTag
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for ColorTag.

This module centralizes reusable options (verbosity, color, text input) and
their resolution logic, so commands and groups can stay thin. The helpers here
are Click-aware.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from colortag.cli.cli_types import EnumChoiceParam
from colortag.cli.errors import ColortagIOError, ColortagUsageError
from colortag.config.logging import LEVEL_NAMES
from colortag.rendering.policy import ColorMode, ColorPolicy, get_policy

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final program-output level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as an integer.

    Raises:
        ColortagUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One -q flag sets ERROR level (only warnings and errors are shown).
        Two or more -q flags set CRITICAL level (only errors are shown).
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ColortagUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LEVEL_NAMES["TRACE"]
    if verbose_count == 2:  # -vv
        return LEVEL_NAMES["DEBUG"]
    if verbose_count == 1:  # -v
        return LEVEL_NAMES["INFO"]

    if quiet_count >= 2:  # -qq
        return LEVEL_NAMES["CRITICAL"]
    if quiet_count == 1:  # -q
        return LEVEL_NAMES["ERROR"]

    return LEVEL_NAMES["WARNING"]


def resolve_cli_policy(color_mode: ColorMode | None, no_color: bool) -> ColorPolicy:
    """Return the colour policy for this invocation.

    ``--no-color`` wins over ``--color``; without either flag the process-wide
    policy derived from the environment applies.

    Args:
        color_mode: Explicit mode from ``--color`` (or ``None``).
        no_color: Whether ``--no-color`` was passed.

    Returns:
        The effective policy.
    """
    if no_color:
        return ColorPolicy.from_mode(ColorMode.OFF)
    if color_mode is not None:
        return ColorPolicy.from_mode(color_mode)
    return get_policy()


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Show only warnings and errors; twice for errors only.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.

    Behavior:
        Adds --color with choices (auto, on, off), overriding NO_COLOR and
        COLORTAG_COLOR. Adds --no-color, equivalent to --color=off.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), on, or off. Overrides the environment.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=off).",
    )(f)
    return f


def text_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the TEXT arguments and -n flag shared by `render` and `strip`.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "-n",
        "no_newline",
        is_flag=True,
        default=False,
        help="Do not output the trailing newline.",
    )(f)
    f = click.argument("text", nargs=-1)(f)
    return f


def read_text_input(text: tuple[str, ...]) -> str:
    """Return the template to render from TEXT arguments or STDIN.

    With no arguments, or a single ``-``, the whole of STDIN is read.
    Otherwise the arguments are joined with single spaces.

    Args:
        text: Positional TEXT arguments.

    Returns:
        The template text.

    Raises:
        ColortagUsageError: If ``-`` is mixed with other arguments.
        ColortagIOError: If STDIN cannot be read or is not valid text.
    """
    if text and "-" not in text:
        return " ".join(text)
    if len(text) > 1:
        raise ColortagUsageError("'-' (STDIN) cannot be combined with other TEXT arguments.")
    try:
        return click.get_text_stream("stdin").read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ColortagIOError(f"Cannot read STDIN: {exc}") from exc
