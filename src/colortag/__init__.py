# topmark:header:start
#
#   project      : ColorTag
#   file         : __init__.py
#   file_relpath : src/colortag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag package.

ColorTag renders inline ``#NAME#`` colour markup into ANSI escape codes, or
strips it when colour is disabled, and prints severity-tagged messages built on
that markup. It exposes a small typed API and a Click CLI.

Example:
    ```python
    import sys

    from colortag import Severity, print_tagged, render

    render("#BOLD#hello#RST#")
    print_tagged(sys.stderr, Severity.ERROR, "%s failed\\n", "upload")
    ```
"""

from __future__ import annotations

from colortag.errors import ColortagError, MarkupFormatError
from colortag.rendering.color_table import COLOR_TABLE, ColorEntry, color_names, lookup
from colortag.rendering.policy import ColorMode, ColorPolicy, get_policy, resolve_policy
from colortag.rendering.printer import (
    Severity,
    format_plain,
    format_tagged,
    print_plain,
    print_tagged,
)
from colortag.rendering.renderer import MarkupRenderer, render, strip_tags

__all__: list[str] = [
    "COLOR_TABLE",
    "ColorEntry",
    "ColorMode",
    "ColorPolicy",
    "ColortagError",
    "MarkupFormatError",
    "MarkupRenderer",
    "Severity",
    "color_names",
    "format_plain",
    "format_tagged",
    "get_policy",
    "lookup",
    "print_plain",
    "print_tagged",
    "render",
    "resolve_policy",
    "strip_tags",
]
