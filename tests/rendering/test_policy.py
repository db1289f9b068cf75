# topmark:header:start
#
#   project      : ColorTag
#   file         : test_policy.py
#   file_relpath : tests/rendering/test_policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for colour policy resolution in `colortag.rendering.policy`."""

from __future__ import annotations

import pytest

from colortag.rendering.policy import ColorMode, ColorPolicy, get_policy, resolve_policy
from tests.conftest import parametrize


@parametrize(
    "override, expected",
    [
        ("t", ColorMode.ON),
        ("true", ColorMode.ON),
        ("Yes", ColorMode.ON),
        ("YES", ColorMode.ON),
        ("f", ColorMode.OFF),
        ("False", ColorMode.OFF),
        ("no", ColorMode.OFF),
        ("N", ColorMode.OFF),
        ("auto", ColorMode.AUTO),
        ("1", ColorMode.AUTO),
        ("", ColorMode.AUTO),
        ("on", ColorMode.AUTO),  # first character 'o' selects nothing
    ],
)
@parametrize("disabled", [False, True])
def test_override_first_character(override: str, expected: ColorMode, disabled: bool) -> None:
    """The override's first character decides, whatever the disable signal says."""
    assert resolve_policy(disabled, override) is expected


def test_disable_signal_without_override() -> None:
    """Without an override, the disable signal alone selects OFF."""
    assert resolve_policy(True, None) is ColorMode.OFF
    assert resolve_policy(False, None) is ColorMode.AUTO


def test_from_env_no_color_presence_only() -> None:
    """NO_COLOR disables colour even when set to an empty string."""
    policy = ColorPolicy.from_env({"NO_COLOR": ""})
    assert policy.mode is ColorMode.OFF
    assert policy.source == "no-color"
    assert not policy.enabled


def test_from_env_override_beats_no_color() -> None:
    """COLORTAG_COLOR takes precedence over NO_COLOR."""
    policy = ColorPolicy.from_env({"NO_COLOR": "1", "COLORTAG_COLOR": "yes"})
    assert policy.mode is ColorMode.ON
    assert policy.source == "override"
    assert policy.enabled


def test_from_env_default_is_auto() -> None:
    """An empty environment yields AUTO, which renders colour."""
    policy = ColorPolicy.from_env({})
    assert policy == ColorPolicy(mode=ColorMode.AUTO, source="default")
    assert policy.enabled


def test_from_mode_accepts_strings() -> None:
    """`from_mode` accepts enum members and their string values."""
    assert ColorPolicy.from_mode("off").mode is ColorMode.OFF
    assert ColorPolicy.from_mode(ColorMode.ON).source == "cli"
    with pytest.raises(ValueError):
        ColorPolicy.from_mode("sometimes")


def test_policy_is_immutable() -> None:
    """Policies are frozen values."""
    policy = ColorPolicy()
    with pytest.raises(AttributeError):
        policy.mode = ColorMode.OFF  # type: ignore[misc]


def test_get_policy_is_computed_once(monkeypatch: pytest.MonkeyPatch) -> None:
    """The process policy is read from the environment once and then cached."""
    monkeypatch.setenv("NO_COLOR", "1")
    first = get_policy()
    assert first.mode is ColorMode.OFF

    monkeypatch.delenv("NO_COLOR")
    assert get_policy() is first

    get_policy.cache_clear()
    assert get_policy().mode is ColorMode.AUTO
