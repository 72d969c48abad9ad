"""Boundary arithmetic: how much decoration space each alignment claims.

Window decorations are ordered from the window edge inwards. By default
margins are outermost and fringes sit next to the text area; with
``fringes_outside_margins`` the order is swapped. Aligning a segment to a
boundary lets it extend over that area and every area inside it.
"""

from __future__ import annotations

from statusline_layout.model import (
    AlignmentSpec,
    Boundary,
    BoundaryAlign,
    BoundaryOffset,
    Edge,
    Geometry,
)


def _claimed_pixels(
    boundary: Boundary,
    margin: int,
    fringe: int,
    scroll_bar: int,
    fringes_outside_margins: bool,
) -> int:
    """Decoration pixels on one side covered by aligning to ``boundary``."""
    if boundary is Boundary.TEXT:
        return 0
    if boundary is Boundary.WINDOW:
        return margin + fringe + scroll_bar
    if fringes_outside_margins:
        # | fringe | margin | text
        if boundary is Boundary.MARGIN:
            return margin
        return margin + fringe
    # | margin | fringe | text
    if boundary is Boundary.FRINGE:
        return fringe
    return fringe + margin


def left_extra_pixels(geometry: Geometry, boundary: Boundary) -> int:
    scroll_bar = geometry.scroll_bar_width if geometry.scroll_bar_on_left else 0
    return _claimed_pixels(
        boundary,
        geometry.left_margin,
        geometry.left_fringe,
        scroll_bar,
        geometry.fringes_outside_margins,
    )


def right_extra_pixels(geometry: Geometry, boundary: Boundary) -> int:
    scroll_bar = 0 if geometry.scroll_bar_on_left else geometry.scroll_bar_width
    return _claimed_pixels(
        boundary,
        geometry.right_margin,
        geometry.right_fringe,
        scroll_bar,
        geometry.fringes_outside_margins,
    )


def extra_pixels(geometry: Geometry, alignment: AlignmentSpec) -> int:
    """Pixels gained beyond the text area, less the inward pixel offsets."""
    return (
        left_extra_pixels(geometry, alignment.left.boundary)
        + right_extra_pixels(geometry, alignment.right.boundary)
        - alignment.left.pixel_offset
        - alignment.right.pixel_offset
    )


def available_width(geometry: Geometry, alignment: AlignmentSpec) -> int:
    """Characters available between the two alignment boundaries."""
    extra = extra_pixels(geometry, alignment) // geometry.char_width
    width = (
        geometry.window_width
        + extra
        - alignment.left.char_offset
        - alignment.right.char_offset
    )
    return max(0, width)


def left_padding(align: BoundaryAlign) -> BoundaryOffset:
    """Directive placing content at the left boundary."""
    return BoundaryOffset(align.boundary, Edge.LEFT, align.char_offset, align.pixel_offset)


def right_gap(
    align: BoundaryAlign,
    right_width: int,
    right_pixel_width: int | None = None,
) -> BoundaryOffset:
    """Directive pushing a right segment flush against the right boundary.

    With ``right_pixel_width`` the segment's width is folded into the pixel
    offset instead of the character offset.
    """
    if right_pixel_width is None:
        return BoundaryOffset(
            align.boundary,
            Edge.RIGHT,
            -(align.char_offset + right_width),
            -align.pixel_offset,
        )
    return BoundaryOffset(
        align.boundary,
        Edge.RIGHT,
        -align.char_offset,
        -(align.pixel_offset + right_pixel_width),
    )


def right_padding() -> BoundaryOffset:
    """Directive filling the rest of the line up to the window edge."""
    return BoundaryOffset(Boundary.WINDOW, Edge.RIGHT)
