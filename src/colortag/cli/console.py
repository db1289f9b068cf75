# topmark:header:start
#
#   project      : ColorTag
#   file         : console.py
#   file_relpath : src/colortag/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`TagConsole` binds the severity printers to a colour policy and a pair of
streams. Use it for messages intended for end users, while reserving `logging`
for diagnostics. Errors and warnings go to the error stream; everything else
goes to standard output.

The console also carries the program-output verbosity from ``-v``/``-q``:
``-q`` keeps only warnings and errors, ``-qq`` keeps only errors. Command
results written with `write()` are never suppressed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Final, TextIO

from colortag.rendering.policy import ColorPolicy, get_policy
from colortag.rendering.printer import Severity, emit, format_plain, print_tagged
from colortag.rendering.renderer import MarkupRenderer

# Highest verbosity level at which each kind of message is still shown
SHOW_UP_TO: Final[dict[Severity | None, int]] = {
    Severity.ERROR: logging.CRITICAL,
    Severity.WARNING: logging.ERROR,
    Severity.INFO: logging.WARNING,
    Severity.CONFIRM: logging.WARNING,
    Severity.SUCCESS: logging.WARNING,
    None: logging.WARNING,
}


class TagConsole:
    """Program-output console, independent from the logger.

    Args:
        policy (ColorPolicy | None): Colour policy; the process-wide one if None.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
        verbosity_level (int): Program-output level from
            [`resolve_verbosity`][colortag.cli.options.resolve_verbosity].

    Attributes:
        policy (ColorPolicy): Colour policy applied to every message.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for error and warning output.
        verbosity_level (int): Messages are dropped when this exceeds their
            entry in `SHOW_UP_TO`.
    """

    policy: ColorPolicy
    out: TextIO
    err: TextIO
    verbosity_level: int

    def __init__(
        self,
        *,
        policy: ColorPolicy | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        verbosity_level: int = logging.WARNING,
    ) -> None:
        self.policy = policy if policy is not None else get_policy()
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.verbosity_level = verbosity_level

    def shows(self, severity: Severity | None) -> bool:
        """Return True if messages of ``severity`` (None: untagged) are shown."""
        return self.verbosity_level <= SHOW_UP_TO[severity]

    @property
    def enable_color(self) -> bool:
        """Whether this console emits escape codes."""
        return self.policy.enabled

    def render(self, text: str) -> str:
        """Render markup in ``text`` with this console's policy."""
        return MarkupRenderer(self.policy).render(text)

    def print(self, fmt: str = "", *args: Any, nl: bool = True) -> None:
        """Write an untagged, rendered message to stdout.

        Args:
            fmt (str): printf-style format containing tag markup.
            *args (Any): Format arguments.
            nl (bool): If True, append a newline.
        """
        if not self.shows(None):
            return
        emit(self.out, format_plain(fmt, *args, policy=self.policy), nl=nl)

    def write(self, text: str, *, nl: bool = True) -> None:
        """Write a command result to stdout as is, whatever the verbosity."""
        emit(self.out, text, nl=nl)

    def tagged(self, severity: Severity, fmt: str, *args: Any) -> None:
        """Write a severity-prefixed message to the stream matching ``severity``.

        Args:
            severity (Severity): Message severity.
            fmt (str): printf-style format containing tag markup.
            *args (Any): Format arguments.
        """
        if not self.shows(severity):
            return
        stream = self.err if severity in (Severity.ERROR, Severity.WARNING) else self.out
        print_tagged(stream, severity, fmt, *args, policy=self.policy)

    def error(self, fmt: str, *args: Any) -> None:
        """Write an ``[ERROR]`` message to stderr."""
        self.tagged(Severity.ERROR, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        """Write a ``[WARNING]`` message to stderr."""
        self.tagged(Severity.WARNING, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        """Write an ``[INFO]`` message to stdout."""
        self.tagged(Severity.INFO, fmt, *args)

    def confirm(self, fmt: str, *args: Any) -> None:
        """Write a ``[CONFIRMATION]`` prompt to stdout."""
        self.tagged(Severity.CONFIRM, fmt, *args)

    def success(self, fmt: str, *args: Any) -> None:
        """Write an ``[OK]`` message to stdout."""
        self.tagged(Severity.SUCCESS, fmt, *args)
