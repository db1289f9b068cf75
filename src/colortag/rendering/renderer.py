# topmark:header:start
#
#   project      : ColorTag
#   file         : renderer.py
#   file_relpath : src/colortag/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup renderer: expands ``#NAME#`` tags into escape codes or strips them.

The renderer is a two-state scanner (``COPY`` outside a tag, ``SCAN_NAME``
inside a candidate tag) over a single delimiter, ``#``. It never fails:

- A known name with a non-empty code replaces the whole ``#NAME#`` span.
- A known name with an empty code, or *any* name when the policy is OFF,
  removes the span.
- An unknown name leaves ``#NAME#`` verbatim, and its closing ``#`` is reread
  as the opening delimiter of a new candidate. ``#NOPE#hi#RST#`` therefore
  still resolves the trailing ``#RST#``.
- An unterminated candidate at end of input is left as written.
- A name longer than `MAX_TAG_NAME_LEN` is rejected as if unknown, in every mode.

Example:
    ```python
    from colortag.rendering.policy import ColorMode, ColorPolicy
    from colortag.rendering.renderer import render

    render("#BOLD#hi#RST#")                                   # '\\x1b[1mhi\\x1b[0m'
    render("#BOLD#hi#RST#", ColorPolicy.from_mode(ColorMode.OFF))  # 'hi'
    ```
"""

from __future__ import annotations

import io
from enum import Enum
from typing import TYPE_CHECKING, Final

from colortag.config.logging import get_logger
from colortag.constants import MAX_TAG_NAME_LEN, TAG_DELIMITER
from colortag.rendering import color_table
from colortag.rendering.policy import ColorMode, ColorPolicy, get_policy

if TYPE_CHECKING:
    from collections.abc import Callable

    from colortag.config.logging import ColortagLogger

logger: ColortagLogger = get_logger(__name__)

PLAIN_POLICY: Final[ColorPolicy] = ColorPolicy(mode=ColorMode.OFF, source="strip")


class ScanState(Enum):
    """Renderer scanner states."""

    COPY = "copy"
    SCAN_NAME = "scan_name"


class RenderBuffer:
    """Growable output buffer addressed by logical offsets.

    Offsets returned by `tell()` stay valid however much the buffer grows,
    so the start of an open tag can be recorded as a plain integer.
    """

    def __init__(self) -> None:
        self._buf = io.StringIO()

    def tell(self) -> int:
        """Return the current write offset."""
        return self._buf.tell()

    def write(self, text: str) -> None:
        """Append ``text`` at the write offset."""
        if text:
            self._buf.write(text)

    def truncate_to(self, offset: int) -> None:
        """Discard everything from ``offset`` onwards."""
        self._buf.seek(offset)
        self._buf.truncate()

    def splice(self, offset: int, text: str) -> None:
        """Replace everything from ``offset`` onwards with ``text``."""
        self.truncate_to(offset)
        self.write(text)

    def getvalue(self) -> str:
        """Return the buffer contents as a new string."""
        return self._buf.getvalue()


class TagName:
    """Bounded accumulator for the name of an open candidate tag.

    Characters past ``limit`` are dropped and `overflowed` is set; an
    overflowed name never resolves.
    """

    __slots__ = ("_chars", "limit", "overflowed")

    def __init__(self, limit: int = MAX_TAG_NAME_LEN) -> None:
        self.limit: int = limit
        self._chars: list[str] = []
        self.overflowed: bool = False

    def clear(self) -> None:
        """Reset to an empty, non-overflowed name."""
        self._chars.clear()
        self.overflowed = False

    def extend(self, text: str) -> None:
        """Append ``text``, truncating at the limit and flagging overflow."""
        room = self.limit - len(self._chars)
        if len(text) > room:
            self.overflowed = True
            text = text[: max(room, 0)]
        self._chars.extend(text)

    @property
    def text(self) -> str:
        """The accumulated (possibly truncated) name."""
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)


class MarkupRenderer:
    """Render tag markup according to a colour policy.

    Args:
        policy (ColorPolicy | None): Policy to apply; defaults to the process-wide
            policy from [`get_policy`][colortag.rendering.policy.get_policy].
        lookup (Callable[[str], str | None]): Tag resolver, by default the static
            colour table.
        max_name_len (int): Longest tag name that may resolve.

    Raises:
        ValueError: If ``max_name_len`` is smaller than 1.
    """

    def __init__(
        self,
        policy: ColorPolicy | None = None,
        *,
        lookup: Callable[[str], str | None] = color_table.lookup,
        max_name_len: int = MAX_TAG_NAME_LEN,
    ) -> None:
        if max_name_len < 1:
            raise ValueError(f"max_name_len must be >= 1 (got {max_name_len})")
        self.policy: ColorPolicy = policy if policy is not None else get_policy()
        self.lookup: Callable[[str], str | None] = lookup
        self.max_name_len: int = max_name_len

    def _resolve(self, name: TagName) -> str | None:
        """Return the replacement for a closed candidate, or None to keep it literal."""
        if name.overflowed:
            logger.trace("Tag name exceeds %d characters, kept literal", self.max_name_len)
            return None
        if not self.policy.enabled:
            return ""
        code = self.lookup(name.text)
        if code is None:
            logger.trace("Unknown tag %r kept literal", name.text)
        return code

    def render(self, text: str) -> str:
        """Render ``text`` in one forward pass.

        Args:
            text (str): Template containing ``#NAME#`` markup.

        Returns:
            str: The rendered text.
        """
        out = RenderBuffer()
        name = TagName(self.max_name_len)
        state: ScanState = ScanState.COPY
        mark: int = 0
        pos: int = 0
        end: int = len(text)

        while pos < end:
            hit: int = text.find(TAG_DELIMITER, pos)
            chunk: str = text[pos:] if hit < 0 else text[pos:hit]

            if state is ScanState.COPY:
                out.write(chunk)
                if hit < 0:
                    break
                mark = out.tell()
                out.write(TAG_DELIMITER)
                name.clear()
                state = ScanState.SCAN_NAME
                pos = hit + 1
                continue

            # SCAN_NAME: the name text is also copied so it survives if unresolved
            name.extend(chunk)
            out.write(chunk)
            if hit < 0:
                break
            pos = hit + 1

            code: str | None = self._resolve(name)
            if code is None:
                # Closing '#' becomes the opening '#' of the next candidate
                mark = out.tell()
                out.write(TAG_DELIMITER)
                name.clear()
            elif code:
                out.splice(mark, code)
                state = ScanState.COPY
            else:
                out.truncate_to(mark)
                state = ScanState.COPY

        return out.getvalue()


def render(text: str, policy: ColorPolicy | None = None) -> str:
    """Render tag markup in ``text``.

    Args:
        text (str): Template containing ``#NAME#`` markup.
        policy (ColorPolicy | None): Policy to apply; the process-wide policy if None.

    Returns:
        str: The rendered text.
    """
    return MarkupRenderer(policy).render(text)


def strip_tags(text: str) -> str:
    """Render ``text`` with colour off, removing every tag span.

    Args:
        text (str): Template containing ``#NAME#`` markup.

    Returns:
        str: Plain text.
    """
    return MarkupRenderer(PLAIN_POLICY).render(text)
