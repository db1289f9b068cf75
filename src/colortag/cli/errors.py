# topmark:header:start
#
#   project      : ColorTag
#   file         : errors.py
#   file_relpath : src/colortag/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ColorTag CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Click displays errors after the command context has been torn down, so the
    root group attaches its `TagConsole` to the exception on the way out (see
    `ColortagGroup` in `colortag.cli.main`). `show()` then prints an
    ``[ERROR]`` line through that console. Errors raised before the console
    exists fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from colortag.cli.exit_codes import ExitCode
from colortag.rendering.printer import emit

if TYPE_CHECKING:
    from colortag.cli.console import TagConsole


class ColortagCliError(click.ClickException):
    """Base class for all ColorTag CLI errors.

    Attributes:
        console (TagConsole | None): Console to report through, if one was attached.
    """

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.console: TagConsole | None = None

    def format_message(self) -> str:
        """Return the plain error message text."""
        return self.message

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the attached console, else as Click does.

        The message is written after the prefix without markup rendering, so
        user input quoted in it (such as a FORMAT) appears as typed.
        """
        if self.console is None:
            super().show(file)
            return
        self.console.error("")
        emit(self.console.err, self.format_message(), nl=True)


class ColortagUsageError(ColortagCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ColortagIOError(ColortagCliError):
    """Error when standard input cannot be read."""

    exit_code = ExitCode.IO_ERROR


class ColortagUnexpectedError(ColortagCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
