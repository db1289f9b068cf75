# topmark:header:start
#
#   project      : ColorTag
#   file         : __init__.py
#   file_relpath : src/colortag/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag CLI package.

This package groups all Click command definitions and supporting utilities
for the ColorTag command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        colortag = "colortag.cli.main:cli"

All subcommands live in [`colortag.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
