# topmark:header:start
#
#   project      : ColorTag
#   file         : exit_codes.py
#   file_relpath : src/colortag/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ColorTag CLI.

ColorTag aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ColorTag CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args, or a
            format string that does not match its arguments). Mirrors BSD
            ``EX_USAGE (64)``.
        IO_ERROR: Reading standard input failed. Mirrors BSD ``EX_IOERR (74)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort). Mirrors BSD
            ``EX_SOFTWARE (70)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    UNEXPECTED_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
