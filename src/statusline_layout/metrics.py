"""Rendering and measurement of segment content.

The layout engine only depends on the :class:`DisplayMetrics` protocol;
hosts supply their own implementation. :class:`TerminalMetrics` measures
character cells the way a terminal draws them.
"""

from __future__ import annotations

__all__ = [
    "DisplayMetrics",
    "TerminalMetrics",
    "cell_width",
    "display_width",
    "split_escapes",
    "strip_ansi",
]

import re
import unicodedata
from typing import Any, Iterator, Protocol

SGR_SEQUENCE_RE = re.compile(r"\x1b\[[0-9;]*m")

WIDE_CLASSES = frozenset({"F", "W"})
"""East Asian width classes drawn across two cells."""


class DisplayMetrics(Protocol):
    """Capability interface a host implements for the layout engine."""

    def render(self, content: Any) -> str: ...

    def width(self, text: str) -> int: ...

    def pixel_width(self, text: str) -> int: ...


def split_escapes(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(chunk, is_escape)`` pairs in order.

    SGR escape sequences come out whole; every other character comes out
    on its own.
    """
    pos = 0
    for match in SGR_SEQUENCE_RE.finditer(text):
        for ch in text[pos:match.start()]:
            yield ch, False
        yield match.group(), True
        pos = match.end()
    for ch in text[pos:]:
        yield ch, False


def strip_ansi(text: str) -> str:
    return "".join(chunk for chunk, is_escape in split_escapes(text) if not is_escape)


def cell_width(ch: str) -> int:
    """Return the number of cells a single visible character occupies."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in WIDE_CLASSES else 1


def display_width(text: str) -> int:
    return sum(
        cell_width(chunk) for chunk, is_escape in split_escapes(text) if not is_escape
    )


class TerminalMetrics:
    """Cell-based metrics for character terminals.

    Content may be a string, ``None``, a callable producing content, or a
    list/tuple of content pieces that are concatenated in order.
    """

    def __init__(self, char_width: int = 1) -> None:
        if char_width <= 0:
            raise ValueError("char_width must be positive")
        self.char_width = char_width

    def render(self, content: Any) -> str:
        if content is None:
            return ""
        if isinstance(content, str):
            return content
        if callable(content):
            return self.render(content())
        if isinstance(content, (list, tuple)):
            return "".join(self.render(piece) for piece in content)
        return str(content)

    def width(self, text: str) -> int:
        return display_width(text)

    def pixel_width(self, text: str) -> int:
        return display_width(text) * self.char_width
