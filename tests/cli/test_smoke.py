# topmark:header:start
#
#   project      : ColorTag
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for ColorTag.

Provides minimal coverage that the CLI entry point is callable and that
`--help` and `version` commands succeed.
"""

from __future__ import annotations

from colortag.constants import COLORTAG_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_cli_entry() -> None:
    """`--help` shows usage information and exits SUCCESS."""
    result = run_cli(["--help"])
    assert_SUCCESS(result)
    assert "Usage" in result.output


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    """Without a subcommand the group prints a hint and its help."""
    result = run_cli([])
    assert_SUCCESS(result)
    assert "colortag render TEXT" in result.output
    assert "Usage" in result.output


@mark_cli
def test_version() -> None:
    """`version` prints the installed version."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output == f"{COLORTAG_VERSION}\n"


@mark_cli
def test_version_verbose() -> None:
    """`-v version` adds a heading."""
    result = run_cli(["-v", "--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output == f"ColorTag version:\n    {COLORTAG_VERSION}\n"


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """`-v` and `-q` together are a usage error."""
    assert_USAGE_ERROR(run_cli(["-v", "-q", "version"]))


@mark_cli
def test_invalid_color_mode() -> None:
    """Unknown `--color` values are rejected by Click."""
    result = run_cli(["--color", "sometimes", "version"])
    assert result.exit_code != 0
    assert "sometimes" in result.output
