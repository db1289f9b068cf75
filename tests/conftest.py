# topmark:header:start
#
#   project      : ColorTag
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ColorTag test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    The process-wide colour policy is cached on first use. The autouse
    `clean_color_env` fixture removes every colour-related environment variable
    and clears that cache, so each test starts from the AUTO default. Tests that
    need a specific mode should build a `ColorPolicy` explicitly rather than
    rely on the environment.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from colortag.config import logging
from colortag.constants import ENV_COLOR_OVERRIDE, ENV_LOG_LEVEL, ENV_NO_COLOR
from colortag.rendering.color_table import lookup
from colortag.rendering.policy import ColorMode, ColorPolicy, get_policy

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from an uncached AUTO policy and default log level.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(ENV_NO_COLOR, raising=False)
    monkeypatch.delenv(ENV_COLOR_OVERRIDE, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    get_policy.cache_clear()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def on_policy() -> ColorPolicy:
    """Return an explicit colour-on policy."""
    return ColorPolicy.from_mode(ColorMode.ON)


@pytest.fixture
def off_policy() -> ColorPolicy:
    """Return an explicit colour-off policy."""
    return ColorPolicy.from_mode(ColorMode.OFF)


def code(name: str) -> str:
    """Return the escape code for a known tag, failing loudly for unknown names.

    Args:
        name (str): Tag name.

    Returns:
        str: The escape code.
    """
    found = lookup(name)
    assert found is not None, name
    return found
