# topmark:header:start
#
#   project      : ColorTag
#   file         : version.py
#   file_relpath : src/colortag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag `version` command.

Prints the current ColorTag version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from colortag.constants import COLORTAG_VERSION

if TYPE_CHECKING:
    from colortag.cli.console import TagConsole


@click.command(
    name="version",
    help="Show the current version of ColorTag.",
)
def version_command() -> None:
    """Show the current version of ColorTag."""
    ctx = click.get_current_context()
    console: TagConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.print("ColorTag version:")
        console.print("    #BOLD#%s#RST#", COLORTAG_VERSION)
    else:
        console.print("#BOLD#%s#RST#", COLORTAG_VERSION)
