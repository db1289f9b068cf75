# topmark:header:start
#
#   project      : ColorTag
#   file         : say.py
#   file_relpath : src/colortag/cli/commands/say.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag `say` command.

Prints a severity-tagged, printf-style formatted message, the way application
code does through `colortag.rendering.printer.print_tagged`. Errors and
warnings go to stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from colortag.cli.cli_types import EnumChoiceParam
from colortag.cli.errors import ColortagUsageError
from colortag.errors import MarkupFormatError
from colortag.rendering.printer import Severity

if TYPE_CHECKING:
    from colortag.cli.console import TagConsole


@click.command(
    name="say",
    help="Print FORMAT, expanded with ARGS, behind a coloured SEVERITY prefix.",
)
@click.argument("severity", type=EnumChoiceParam(Severity))
@click.argument("fmt", metavar="FORMAT")
@click.argument("args", nargs=-1)
@click.option(
    "-n",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not output the trailing newline.",
)
def say_command(
    *,
    severity: Severity,
    fmt: str,
    args: tuple[str, ...],
    no_newline: bool,
) -> None:
    """Print a tagged message.

    Args:
        severity (Severity): Message severity.
        fmt (str): printf-style format (``%s`` placeholders) with tag markup.
        args (tuple[str, ...]): Format arguments.
        no_newline (bool): Suppress the trailing newline.

    Raises:
        ColortagUsageError: If FORMAT does not match ARGS.
    """
    ctx = click.get_current_context()
    console: TagConsole = ctx.obj["console"]

    try:
        console.tagged(severity, fmt if no_newline else fmt + "\n", *args)
    except MarkupFormatError as exc:
        raise ColortagUsageError(f"FORMAT {fmt!r} does not match ARGS: {exc.reason}") from exc
