"""Width-aware string truncation with an ellipsis marker."""

from __future__ import annotations

__all__ = ["fill", "truncate"]

from typing import Callable

from statusline_layout.config import default_config
from statusline_layout.metrics import display_width, split_escapes
from statusline_layout.model import Direction


def _clip(
    text: str,
    budget: int,
    measure: Callable[[str], int],
    from_end: bool = False,
) -> str:
    """Longest run of visible characters from one end that fits in ``budget``.

    Escape sequences cost nothing and are all kept, wherever they sit, so
    style switches and their resets survive the cut.
    """
    chunks = list(split_escapes(text))
    if from_end:
        chunks.reverse()
    kept: list[str] = []
    used = 0
    full = False
    for chunk, is_escape in chunks:
        if is_escape:
            kept.append(chunk)
            continue
        if full:
            continue
        w = measure(chunk)
        if used + w > budget:
            full = True
            continue
        used += w
        kept.append(chunk)
    if from_end:
        kept.reverse()
    return "".join(kept)


def truncate(
    text: str,
    max_size: int,
    ellipsis: str | None = None,
    direction: Direction = Direction.RIGHT,
    measure: Callable[[str], int] = display_width,
) -> str:
    """Shorten ``text`` to at most ``max_size`` display units.

    ``direction`` names the edge that is cut: RIGHT keeps the start of the
    text and appends the ellipsis, LEFT keeps the end and prepends it.
    SGR escape sequences take no room and are never dropped.
    When not even the ellipsis fits, the ellipsis itself is clipped.
    """
    if measure(text) <= max_size:
        return text

    if ellipsis is None:
        ellipsis = default_config().ellipsis

    ellipsis_width = measure(ellipsis)
    if ellipsis_width > max_size:
        return _clip(ellipsis, max_size, measure)

    budget = max_size - ellipsis_width
    if direction is Direction.RIGHT:
        return _clip(text, budget, measure) + ellipsis
    return ellipsis + _clip(text, budget, measure, from_end=True)


def fill(glyph: str, size: int, measure: Callable[[str], int] = display_width) -> str:
    """Repeat ``glyph`` to fill ``size`` display units without exceeding it."""
    glyph_width = measure(glyph)
    if size <= 0 or glyph_width <= 0:
        return ""
    return _clip(glyph * (size // glyph_width + 1), size, measure)
