# topmark:header:start
#
#   project      : ColorTag
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ColorTag through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from colortag.cli.exit_codes import ExitCode
from colortag.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI and return the Click result.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["render", "#BOLD#x"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command succeeded.

    Args:
        result (Result): Result to check.
    """
    assert result.exception is None, result.output
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command failed with a ColorTag usage error.

    Args:
        result (Result): Result to check.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
