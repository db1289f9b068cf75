# topmark:header:start
#
#   project      : ColorTag
#   file         : policy.py
#   file_relpath : src/colortag/cli/commands/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag `policy` command.

Shows the colour mode in effect and where it came from (CLI flag,
``COLORTAG_COLOR``, ``NO_COLOR`` or the default).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from colortag.cli.console import TagConsole


@click.command(
    name="policy",
    help="Show the effective colour mode and its source.",
)
def policy_command() -> None:
    """Print ``<mode> (<source>)`` for the effective policy."""
    ctx = click.get_current_context()
    console: TagConsole = ctx.obj["console"]

    policy = console.policy
    state = "#STRUE#enabled#RST#" if policy.enabled else "#SFALSE#disabled#RST#"
    console.print("%s (%s): colour %s", policy.mode.value, policy.source, state)
