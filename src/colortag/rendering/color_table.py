# topmark:header:start
#
#   project      : ColorTag
#   file         : color_table.py
#   file_relpath : src/colortag/rendering/color_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static table of markup tag names and their ANSI escape codes.

Tags are matched by exact, case-sensitive name. The table doubles as the
documentation of the markup vocabulary available to templates: anything not
listed here is rendered as literal text.

Semantic aliases (``ERROR``, ``SUCCESS``, ``STRUE`` ...) point at the same codes
as the raw palette entries so templates can say what they mean rather than
which colour they want.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ColorEntry:
    """One tag name and the escape code it expands to.

    Attributes:
        name (str): Exact tag name as written between ``#`` delimiters.
        code (str): Escape sequence to emit. May be empty, in which case the
            tag renders to nothing.
    """

    name: str
    code: str


# 256-colour SGR foreground codes
TC_HI_YELLOW: Final[str] = "\x1b[38;5;11m"
TC_HI_GREEN: Final[str] = "\x1b[38;5;10m"
TC_HI_RED: Final[str] = "\x1b[38;5;9m"
TC_HI_BLUE: Final[str] = "\x1b[38;5;33m"
TC_GREEN: Final[str] = "\x1b[38;5;40m"
TC_RED: Final[str] = "\x1b[38;5;160m"
TC_BLUE: Final[str] = "\x1b[38;5;75m"
TC_CHARC: Final[str] = "\x1b[38;5;8m"
TC_TANG: Final[str] = "\x1b[38;5;220m"

TC_BOLD: Final[str] = "\x1b[1m"
TC_RST: Final[str] = "\x1b[0m"

COLOR_TABLE: Final[tuple[ColorEntry, ...]] = (
    ColorEntry("HI_YELLOW", TC_HI_YELLOW),
    ColorEntry("HI_GREEN", TC_HI_GREEN),
    ColorEntry("HI_RED", TC_HI_RED),
    ColorEntry("HI_BLUE", TC_HI_BLUE),
    ColorEntry("GREEN", TC_GREEN),
    ColorEntry("RED", TC_RED),
    ColorEntry("BLUE", TC_BLUE),
    ColorEntry("CHARC", TC_CHARC),
    ColorEntry("TANG", TC_TANG),
    ColorEntry("BOLD", TC_BOLD),
    ColorEntry("RST", TC_RST),
    # Message section headings
    ColorEntry("MSG_INFO", TC_HI_BLUE),
    ColorEntry("MSG_WARN", TC_HI_YELLOW),
    ColorEntry("MSG_ERR", TC_HI_RED),
    # Severity prefixes
    ColorEntry("INFO", TC_BLUE),
    ColorEntry("CONFIRM", TC_CHARC),
    ColorEntry("WARNING", TC_HI_YELLOW),
    ColorEntry("SUCCESS", TC_HI_GREEN),
    ColorEntry("ERROR", TC_HI_RED),
    # Boolean values
    ColorEntry("STRUE", TC_HI_GREEN),
    ColorEntry("SFALSE", TC_HI_RED),
)


def lookup(name: str) -> str | None:
    """Return the escape code for tag ``name``, or None if there is no such tag.

    Args:
        name (str): Candidate tag name (without delimiters).

    Returns:
        str | None: The escape code (possibly empty) or None when not found.
    """
    for entry in COLOR_TABLE:
        if entry.name == name:
            return entry.code
    return None


def color_names() -> tuple[str, ...]:
    """Return all tag names in table order."""
    return tuple(entry.name for entry in COLOR_TABLE)
