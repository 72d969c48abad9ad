"""Plain-text rendering of a layout result for character terminals.

Resolves padding directives against the window geometry and returns the
line as a string of exactly the cells the host would draw.
"""

from __future__ import annotations

from statusline_layout.layout.geometry import left_extra_pixels, right_extra_pixels
from statusline_layout.layout.truncate import truncate
from statusline_layout.metrics import DisplayMetrics, TerminalMetrics
from statusline_layout.model import (
    Boundary,
    BoundaryOffset,
    Characters,
    Edge,
    Geometry,
    LayoutResult,
    Pixels,
)


def boundary_position(geometry: Geometry, boundary: Boundary, edge: Edge) -> int:
    """Return the x coordinate, in pixels, of a boundary on one side."""
    if edge is Edge.LEFT:
        return geometry.left_decoration - left_extra_pixels(geometry, boundary)
    text_right = geometry.total_pixels - geometry.right_decoration
    return text_right + right_extra_pixels(geometry, boundary)


def _directive_cells(
    directive: Characters | Pixels | BoundaryOffset,
    geometry: Geometry,
    column: int,
) -> int:
    """Number of blank cells a directive reserves at ``column``."""
    if isinstance(directive, Characters):
        return max(0, directive.count)
    if isinstance(directive, Pixels):
        return max(0, directive.count // geometry.char_width)
    target = (
        boundary_position(geometry, directive.boundary, directive.edge)
        + directive.char_offset * geometry.char_width
        + directive.pixel_offset
    )
    return max(0, target // geometry.char_width - column)


def render_line(
    result: LayoutResult,
    geometry: Geometry,
    metrics: DisplayMetrics | None = None,
) -> str:
    """Render ``result`` to a string no wider than the whole window."""
    if metrics is None:
        metrics = TerminalMetrics(geometry.char_width)

    parts: list[str] = []
    column = 0
    for piece in result:
        if isinstance(piece, str):
            parts.append(piece)
            column += metrics.width(piece)
        else:
            cells = _directive_cells(piece, geometry, column)
            parts.append(" " * cells)
            column += cells

    total_cells = geometry.total_pixels // geometry.char_width
    return truncate("".join(parts), total_cells, "", measure=metrics.width)
