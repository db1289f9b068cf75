# topmark:header:start
#
#   project      : ColorTag
#   file         : test_render_cmd.py
#   file_relpath : tests/cli/test_render_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `render` and `strip` commands."""

from __future__ import annotations

import pytest

from colortag.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import code, mark_cli

BOLD = code("BOLD")
RST = code("RST")


@mark_cli
def test_render_with_color_on() -> None:
    """`--color on` expands tags to escape codes."""
    result = run_cli(["--color", "on", "render", "#BOLD#hi#RST#"])
    assert_SUCCESS(result)
    assert result.output == f"{BOLD}hi{RST}\n"


@mark_cli
def test_render_default_policy_is_auto() -> None:
    """With a clean environment the policy is AUTO, which renders colour."""
    result = run_cli(["render", "#BOLD#hi#RST#"])
    assert_SUCCESS(result)
    assert result.output == f"{BOLD}hi{RST}\n"


@mark_cli
def test_render_no_color_flag() -> None:
    """`--no-color` strips tags."""
    result = run_cli(["--no-color", "render", "#BOLD#hi#RST#"])
    assert_SUCCESS(result)
    assert result.output == "hi\n"


@mark_cli
def test_render_respects_no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """NO_COLOR in the environment strips tags when no flag is given."""
    monkeypatch.setenv("NO_COLOR", "")
    result = run_cli(["render", "#BOLD#hi#RST#"])
    assert_SUCCESS(result)
    assert result.output == "hi\n"


@mark_cli
def test_color_flag_beats_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--color on` wins over NO_COLOR and COLORTAG_COLOR."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("COLORTAG_COLOR", "no")
    result = run_cli(["--color", "on", "render", "#BOLD#hi#RST#"])
    assert_SUCCESS(result)
    assert result.output == f"{BOLD}hi{RST}\n"


@mark_cli
def test_render_joins_words_and_suppresses_newline() -> None:
    """Multiple TEXT arguments are joined by spaces; `-n` drops the newline."""
    result = run_cli(["--no-color", "render", "-n", "#RED#a#RST#", "b"])
    assert_SUCCESS(result)
    assert result.output == "a b"


@mark_cli
def test_render_unknown_tag_is_literal() -> None:
    """Unknown names are printed as written."""
    result = run_cli(["--color", "on", "render", "#NOPE#hi#RST#"])
    assert_SUCCESS(result)
    assert result.output == f"#NOPE#hi{RST}\n"


@mark_cli
@pytest.mark.parametrize("argv", [["render"], ["render", "-"]])
def test_render_from_stdin(argv: list[str]) -> None:
    """With no TEXT or '-', the template is read from STDIN."""
    result = run_cli(["--no-color", *argv, "-n"], input_text="#GREEN#line one#RST#\nline two\n")
    assert_SUCCESS(result)
    assert result.output == "line one\nline two\n"


@mark_cli
def test_render_dash_mixed_with_text() -> None:
    """'-' cannot be combined with other TEXT arguments."""
    assert_USAGE_ERROR(run_cli(["render", "-", "more"]))


@mark_cli
def test_strip_ignores_color_on() -> None:
    """`strip` produces plain text even when colour is forced on."""
    result = run_cli(["--color", "on", "strip", "#RED#a#RST# #X# b"])
    assert_SUCCESS(result)
    assert result.output == "a  b\n"


@mark_cli
def test_strip_from_stdin() -> None:
    """`strip` reads STDIN like `render`."""
    result = run_cli(["strip", "-n"], input_text="#BOLD#x#RST#")
    assert_SUCCESS(result)
    assert result.output == "x"


@mark_cli
def test_render_quiet_still_writes_result() -> None:
    """`-q` silences messages, not the rendered text itself."""
    result = run_cli(["-qq", "--no-color", "render", "#BOLD#hi#RST#"])
    assert_SUCCESS(result)
    assert result.output == "hi\n"


@mark_cli
def test_render_no_color_keeps_escape_codes_in_input() -> None:
    """Only tags are affected by the policy; raw escape codes pass through."""
    result = run_cli(["--no-color", "render", "\x1b[1mx\x1b[0m#BOLD#"])
    assert_SUCCESS(result)
    assert result.output == "\x1b[1mx\x1b[0m\n"


@mark_cli
@pytest.mark.parametrize("command", ["render", "strip"])
def test_invalid_utf8_on_stdin_is_io_error(command: str) -> None:
    """Undecodable STDIN is reported as an I/O error, not a traceback."""
    result = run_cli(["--no-color", command], input_text=b"ab\xffcd")
    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "[ERROR] Cannot read STDIN" in result.output


@mark_cli
def test_unexpected_exception_exits_with_software_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Exceptions outside the CLI error hierarchy exit with UNEXPECTED_ERROR."""

    def _boom(_text: tuple[str, ...]) -> str:
        raise RuntimeError("boom")

    monkeypatch.setattr("colortag.cli.commands.render.read_text_input", _boom)
    result = run_cli(["--no-color", "render", "x"])
    assert result.exit_code == ExitCode.UNEXPECTED_ERROR, result.output
    assert "[ERROR] Unexpected error: RuntimeError('boom')" in result.output
