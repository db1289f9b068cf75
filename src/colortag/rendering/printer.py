# topmark:header:start
#
#   project      : ColorTag
#   file         : printer.py
#   file_relpath : src/colortag/rendering/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity-tagged formatted printing on top of the markup renderer.

`print_tagged()` prepends a coloured ``[LABEL]`` prefix chosen by `Severity`,
expands the printf-style format against its arguments, renders the markup and
writes the result without a trailing newline. `print_plain()` does the same
without a prefix and always writes to standard output.

The format is always expanded, even without arguments, so ``%%`` yields ``%``.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import IO, TYPE_CHECKING, Any, Final

import click

from colortag.config.logging import get_logger
from colortag.errors import MarkupFormatError
from colortag.rendering.policy import get_policy
from colortag.rendering.renderer import MarkupRenderer

if TYPE_CHECKING:
    from colortag.config.logging import ColortagLogger
    from colortag.rendering.policy import ColorPolicy

logger: ColortagLogger = get_logger(__name__)


class Severity(str, Enum):
    """Message severity, each with a fixed colour-tagged prefix template."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    CONFIRM = "confirm"
    SUCCESS = "success"

    @property
    def prefix(self) -> str:
        """Return the prefix markup template for this severity."""
        return SEVERITY_PREFIXES[self]


SEVERITY_PREFIXES: Final[dict[Severity, str]] = {
    Severity.ERROR: "#ERROR#[ERROR]#RST# ",
    Severity.WARNING: "#WARNING#[WARNING]#RST# ",
    Severity.INFO: "#INFO#[INFO]#RST# ",
    Severity.CONFIRM: "#CONFIRM#[CONFIRMATION]#RST# ",
    Severity.SUCCESS: "#SUCCESS#[OK]#RST# ",
}


def expand(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply printf-style ``%`` substitution.

    Args:
        fmt (str): Format string.
        args (tuple[Any, ...]): Positional arguments.

    Returns:
        str: The expanded string.

    Raises:
        MarkupFormatError: If ``fmt`` does not match ``args``.
    """
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise MarkupFormatError(fmt, str(exc)) from exc


def format_plain(fmt: str, *args: Any, policy: ColorPolicy | None = None) -> str:
    """Expand and render ``fmt`` without a severity prefix.

    Args:
        fmt (str): printf-style format containing tag markup.
        *args (Any): Format arguments.
        policy (ColorPolicy | None): Colour policy; the process-wide one if None.

    Returns:
        str: The rendered text.
    """
    return MarkupRenderer(policy).render(expand(fmt, args))


def format_tagged(
    severity: Severity, fmt: str, *args: Any, policy: ColorPolicy | None = None
) -> str:
    """Expand and render ``fmt`` behind the prefix for ``severity``.

    Args:
        severity (Severity): Message severity.
        fmt (str): printf-style format containing tag markup.
        *args (Any): Format arguments.
        policy (ColorPolicy | None): Colour policy; the process-wide one if None.

    Returns:
        str: The rendered text.
    """
    return format_plain(severity.prefix + fmt, *args, policy=policy)


def emit(stream: IO[str], text: str, *, nl: bool = False) -> None:
    """Write already-rendered ``text`` to ``stream`` unchanged.

    Escape sequences are never stripped here; the renderer has already
    applied the colour policy.
    """
    click.echo(text, file=stream, nl=nl, color=True)


def print_tagged(
    stream: IO[str],
    severity: Severity,
    fmt: str,
    *args: Any,
    policy: ColorPolicy | None = None,
) -> None:
    """Write a severity-prefixed, rendered message to ``stream``.

    No newline is appended; end ``fmt`` with ``\\n`` for a full line. If memory
    runs out while expanding or rendering, nothing is written.

    Args:
        stream (IO[str]): Destination text stream.
        severity (Severity): Message severity.
        fmt (str): printf-style format containing tag markup.
        *args (Any): Format arguments.
        policy (ColorPolicy | None): Colour policy; the process-wide one if None.
    """
    pol: ColorPolicy = policy if policy is not None else get_policy()
    try:
        text = format_tagged(severity, fmt, *args, policy=pol)
    except MemoryError:
        logger.error("Out of memory formatting %s message; nothing written", severity.value)
        return
    emit(stream, text)


def print_plain(fmt: str, *args: Any, policy: ColorPolicy | None = None) -> None:
    """Write a rendered message to standard output.

    Args:
        fmt (str): printf-style format containing tag markup.
        *args (Any): Format arguments.
        policy (ColorPolicy | None): Colour policy; the process-wide one if None.
    """
    pol: ColorPolicy = policy if policy is not None else get_policy()
    try:
        text = format_plain(fmt, *args, policy=pol)
    except MemoryError:
        logger.error("Out of memory formatting message; nothing written")
        return
    emit(sys.stdout, text)
