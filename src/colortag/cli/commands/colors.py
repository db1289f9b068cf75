# topmark:header:start
#
#   project      : ColorTag
#   file         : colors.py
#   file_relpath : src/colortag/cli/commands/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag `colors` command.

Lists the tag vocabulary, each name followed by a sample rendered in its own
colour.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from colortag.rendering.color_table import COLOR_TABLE

if TYPE_CHECKING:
    from colortag.cli.console import TagConsole


@click.command(
    name="colors",
    help="List the available #NAME# tags.",
)
@click.option(
    "--names-only",
    is_flag=True,
    default=False,
    help="Print only the tag names, one per line.",
)
def colors_command(*, names_only: bool) -> None:
    """List tag names with a rendered sample.

    Args:
        names_only (bool): Print just the names.
    """
    ctx = click.get_current_context()
    console: TagConsole = ctx.obj["console"]

    width: int = max(len(entry.name) for entry in COLOR_TABLE)
    for entry in COLOR_TABLE:
        if names_only:
            console.print("%s", entry.name)
        else:
            # Names are known tags, so the sample resolves to the entry's own code
            console.print("%-*s  #%s#sample#RST#", width, entry.name, entry.name)
