# topmark:header:start
#
#   project      : ColorTag
#   file         : render.py
#   file_relpath : src/colortag/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag `render` command.

Renders ``#NAME#`` markup from TEXT arguments (or STDIN) with the effective
colour policy and writes the result to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from colortag.cli.options import read_text_input, text_input_options

if TYPE_CHECKING:
    from colortag.cli.console import TagConsole


@click.command(
    name="render",
    help="Render #NAME# colour markup from TEXT (or STDIN when TEXT is omitted or '-').",
)
@text_input_options
def render_command(*, text: tuple[str, ...], no_newline: bool) -> None:
    """Render TEXT with the effective colour policy.

    Args:
        text (tuple[str, ...]): Words to render, joined by spaces.
        no_newline (bool): Suppress the trailing newline.
    """
    ctx = click.get_current_context()
    console: TagConsole = ctx.obj["console"]

    template: str = read_text_input(text)
    console.write(console.render(template), nl=not no_newline)
