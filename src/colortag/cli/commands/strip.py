# topmark:header:start
#
#   project      : ColorTag
#   file         : strip.py
#   file_relpath : src/colortag/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag `strip` command.

Removes every tag span from TEXT (or STDIN), whatever the colour policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from colortag.cli.options import read_text_input, text_input_options
from colortag.rendering.renderer import strip_tags

if TYPE_CHECKING:
    from colortag.cli.console import TagConsole


@click.command(
    name="strip",
    help="Strip #NAME# markup from TEXT (or STDIN), producing plain text.",
)
@text_input_options
def strip_command(*, text: tuple[str, ...], no_newline: bool) -> None:
    """Strip markup from TEXT.

    Args:
        text (tuple[str, ...]): Words to strip, joined by spaces.
        no_newline (bool): Suppress the trailing newline.
    """
    ctx = click.get_current_context()
    console: TagConsole = ctx.obj["console"]

    console.write(strip_tags(read_text_input(text)), nl=not no_newline)
