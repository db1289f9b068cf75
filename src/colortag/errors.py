# topmark:header:start
#
#   project      : ColorTag
#   file         : errors.py
#   file_relpath : src/colortag/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for ColorTag.

Malformed markup is never an error; these exceptions only cover misuse of the
printing helpers. CLI-facing exceptions live in `colortag.cli.errors`.
"""

from __future__ import annotations


class ColortagError(Exception):
    """Base class for all ColorTag library errors."""


class MarkupFormatError(ColortagError, ValueError):
    """A printf-style format string did not match its arguments.

    Attributes:
        fmt (str): The full format string, severity prefix included.
        reason (str): Why the expansion failed.
    """

    def __init__(self, fmt: str, reason: str) -> None:
        super().__init__(f"Cannot expand format {fmt!r}: {reason}")
        self.fmt: str = fmt
        self.reason: str = reason
