# topmark:header:start
#
#   project      : ColorTag
#   file         : policy.py
#   file_relpath : src/colortag/rendering/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colour policy resolution for ColorTag.

This module decides, once per process, whether tag markup should expand to
ANSI escape codes or be stripped. It provides:

- `ColorMode` enum (``auto``, ``on``, ``off``).
- `resolve_policy()`: the pure decision function over the two environment signals.
- `ColorPolicy`: the immutable value threaded into the renderer.
- `get_policy()`: the process-wide default, computed from the environment on first use.

The helpers are Click-free and are used from both
command-line entry points and library callers.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from colortag.config.logging import get_logger
from colortag.constants import ENV_COLOR_OVERRIDE, ENV_NO_COLOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from colortag.config.logging import ColortagLogger


logger: ColortagLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """Colour rendering mode.

    Attributes:
        AUTO: Default when nothing was requested. Renders colour.
        ON: Colour explicitly requested.
        OFF: Colour disabled; every tag span is stripped.

    AUTO and ON behave identically in the renderer. They are kept apart so
    diagnostics can tell an explicit request from the default.
    """

    AUTO = "auto"
    ON = "on"
    OFF = "off"


POLICY_SOURCE_OVERRIDE = "override"
POLICY_SOURCE_NO_COLOR = "no-color"
POLICY_SOURCE_DEFAULT = "default"
POLICY_SOURCE_CLI = "cli"


def resolve_policy(disable_signal_present: bool, override_value: str | None) -> ColorMode:
    """Determine the colour mode from the disable signal and the override value.

    Decision precedence:
        1. **Override**: if ``override_value`` is not None, its first character
           (case-insensitive) selects ``ON`` for ``t``/``y``, ``OFF`` for
           ``f``/``n`` and ``AUTO`` for anything else, including an empty value.
        2. **Disable signal**: ``OFF`` if present, whatever its value.
        3. ``AUTO`` otherwise.

    Args:
        disable_signal_present (bool): Whether the disable-colour signal is set.
        override_value (str | None): Raw override value, None when not set.

    Returns:
        ColorMode: The resolved mode.

    Examples:
        >>> resolve_policy(False, "yes")
        <ColorMode.ON: 'on'>
        >>> resolve_policy(True, None)
        <ColorMode.OFF: 'off'>
        >>> resolve_policy(True, "auto")
        <ColorMode.AUTO: 'auto'>
    """
    if override_value is not None:
        first = override_value[:1].lower()
        if first in ("t", "y"):
            return ColorMode.ON
        if first in ("f", "n"):
            return ColorMode.OFF
        return ColorMode.AUTO

    if disable_signal_present:
        return ColorMode.OFF
    return ColorMode.AUTO


@dataclass(frozen=True)
class ColorPolicy:
    """Immutable colour policy handed to the renderer.

    Attributes:
        mode (ColorMode): The resolved mode.
        source (str): Where the mode came from (``override``, ``no-color``,
            ``default`` or ``cli``); informational only.
    """

    mode: ColorMode = ColorMode.AUTO
    source: str = POLICY_SOURCE_DEFAULT

    @property
    def enabled(self) -> bool:
        """Return True if tags should expand to escape codes."""
        return self.mode is not ColorMode.OFF

    @classmethod
    def from_mode(cls, mode: ColorMode | str, source: str = POLICY_SOURCE_CLI) -> ColorPolicy:
        """Build a policy from an explicit mode (e.g. a ``--color`` flag).

        Args:
            mode (ColorMode | str): The mode or its string value.
            source (str): Provenance label.

        Returns:
            ColorPolicy: The new policy.
        """
        return cls(mode=ColorMode(mode), source=source)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ColorPolicy:
        """Build a policy from ``NO_COLOR`` and ``COLORTAG_COLOR``.

        Args:
            environ (Mapping[str, str] | None): Environment to read; defaults to `os.environ`.

        Returns:
            ColorPolicy: The resolved policy.
        """
        env = os.environ if environ is None else environ
        override: str | None = env.get(ENV_COLOR_OVERRIDE)
        disabled: bool = ENV_NO_COLOR in env
        mode: ColorMode = resolve_policy(disabled, override)

        if override is not None:
            source = POLICY_SOURCE_OVERRIDE
        elif disabled:
            source = POLICY_SOURCE_NO_COLOR
        else:
            source = POLICY_SOURCE_DEFAULT

        logger.debug("Colour policy resolved to %s (source: %s)", mode.value, source)
        return cls(mode=mode, source=source)


@functools.lru_cache(maxsize=1)
def get_policy() -> ColorPolicy:
    """Return the process-wide colour policy.

    The policy is read from the environment on the first call and cached for the
    life of the process. Call it during startup so later reads never race the
    environment. Tests reset it with ``get_policy.cache_clear()``.

    Returns:
        ColorPolicy: The process-wide policy.
    """
    return ColorPolicy.from_env()
