# topmark:header:start
#
#   project      : ColorTag
#   file         : __init__.py
#   file_relpath : src/colortag/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag CLI subcommands.

Each module defines one Click command; `colortag.cli.main` registers them on
the root group.
"""

from __future__ import annotations
