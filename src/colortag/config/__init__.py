# topmark:header:start
#
#   project      : ColorTag
#   file         : __init__.py
#   file_relpath : src/colortag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for ColorTag.

ColorTag is configured from the process environment only:

- ``NO_COLOR``: presence disables colour (see `colortag.rendering.policy`).
- ``COLORTAG_COLOR``: explicit on/off/auto override, wins over ``NO_COLOR``.
- ``COLORTAG_LOG_LEVEL``: diagnostic log level (see `colortag.config.logging`).
"""

from __future__ import annotations
