# topmark:header:start
#
#   project      : ColorTag
#   file         : __init__.py
#   file_relpath : src/colortag/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup rendering for ColorTag.

Public modules:
    - colortag.rendering.color_table
    - colortag.rendering.policy
    - colortag.rendering.renderer
    - colortag.rendering.printer

"""

from __future__ import annotations
