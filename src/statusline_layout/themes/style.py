"""Glyph and appearance theme for status lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Glyphs and padding appearance for a status line."""

    name: str
    ellipsis: str
    overflow_glyph: str
    padding_face: str | None = None  # host face name; None = host default
