"""Layout coordinator: measures segments, fits them to the line, assembles pieces.

The line is laid out in four steps: measure both segments, derive the
available width from the window geometry, truncate according to the
configured policy when the segments do not fit, then emit the padding
directives and texts the host draws.
"""

from __future__ import annotations

import logging
from typing import Any

from statusline_layout.config import Config, default_config
from statusline_layout.layout.constants import (
    MIN_BOTH_SIDED_WIDTH,
    MIN_ONE_SIDED_WIDTH,
    MIN_TRUNCATED_WIDTH,
    SEPARATOR_WIDTH,
)
from statusline_layout.layout.geometry import (
    available_width,
    left_padding,
    right_gap,
    right_padding,
)
from statusline_layout.layout.truncate import fill, truncate
from statusline_layout.metrics import DisplayMetrics, TerminalMetrics
from statusline_layout.model import (
    AlignmentSpec,
    BoundaryOffset,
    Direction,
    Geometry,
    LayoutResult,
    Segment,
    TruncationPolicy,
)

logger = logging.getLogger(__name__)


def measure_segment(content: Any, metrics: DisplayMetrics) -> Segment:
    """Render segment content and measure it."""
    text = metrics.render(content)
    return Segment(text, metrics.width(text), metrics.pixel_width(text))


def _shrink(
    segment: Segment,
    size: int,
    direction: Direction,
    config: Config,
    metrics: DisplayMetrics,
) -> Segment:
    text = truncate(segment.text, size, config.ellipsis, direction, metrics.width)
    if text == segment.text:
        return segment
    return Segment(text, metrics.width(text), metrics.pixel_width(text))


def fit_segments(
    left: Segment,
    right: Segment,
    available: int,
    policy: TruncationPolicy,
    config: Config,
    metrics: DisplayMetrics,
) -> tuple[Segment, Segment] | None:
    """Shrink ``left`` and ``right`` to fit ``available`` cells.

    Returns ``None`` when the policy's minimum widths cannot be met.
    """
    deficit = available - (left.width + right.width + SEPARATOR_WIDTH)
    if deficit >= 0:
        return left, right

    logger.debug(
        "Line short by %d cells (available=%d, left=%d, right=%d, policy=%s)",
        -deficit, available, left.width, right.width, policy.value,
    )

    if policy is TruncationPolicy.TRUNCATE_BOTH:
        if available < MIN_BOTH_SIDED_WIDTH:
            return None
        budget = available - SEPARATOR_WIDTH
        half = budget // 2
        if left.width <= right.width:
            left_size = min(half, left.width)
            right_size = budget - left_size
        else:
            right_size = min(half, right.width)
            left_size = budget - right_size
        return (
            _shrink(left, left_size, Direction.RIGHT, config, metrics),
            _shrink(right, right_size, Direction.LEFT, config, metrics),
        )

    if available < MIN_ONE_SIDED_WIDTH:
        return None

    if policy is TruncationPolicy.TRUNCATE_LEFT:
        if right.width + MIN_ONE_SIDED_WIDTH <= available:
            size = available - right.width - SEPARATOR_WIDTH
            return _shrink(left, size, Direction.RIGHT, config, metrics), right
        return (
            _shrink(left, MIN_TRUNCATED_WIDTH, Direction.RIGHT, config, metrics),
            _shrink(right, available - MIN_ONE_SIDED_WIDTH, Direction.LEFT, config, metrics),
        )

    # TRUNCATE_RIGHT
    if left.width + MIN_ONE_SIDED_WIDTH <= available:
        size = available - left.width - SEPARATOR_WIDTH
        return left, _shrink(right, size, Direction.LEFT, config, metrics)
    return (
        _shrink(left, available - MIN_ONE_SIDED_WIDTH, Direction.RIGHT, config, metrics),
        _shrink(right, MIN_TRUNCATED_WIDTH, Direction.LEFT, config, metrics),
    )


def compute_padding(
    alignment: AlignmentSpec | None = None,
    config: Config | None = None,
) -> tuple[BoundaryOffset, BoundaryOffset]:
    """Return the (left, right) padding directives for an alignment.

    Only the left alignment shapes these: the left pad moves to the left
    boundary, while the right pad always runs to the window's right edge
    from wherever the right content ends. The right boundary only enters
    through the gap that :func:`compute_layout` emits.
    """
    if config is None:
        config = default_config()
    if alignment is None:
        alignment = config.alignment
    return left_padding(alignment.left), right_padding()


def compute_layout(
    left: Any,
    right: Any,
    geometry: Geometry,
    config: Config | None = None,
    metrics: DisplayMetrics | None = None,
    alignment: AlignmentSpec | None = None,
    policy: TruncationPolicy | None = None,
    pixel_exact: bool | None = None,
) -> LayoutResult:
    """Lay out a left and right segment on one line.

    ``alignment``, ``policy`` and ``pixel_exact`` override the values in
    ``config`` for this call only. Pixel-exact placement of the right
    segment only applies on graphical displays.
    """
    if config is None:
        config = default_config()
    if metrics is None:
        metrics = TerminalMetrics(geometry.char_width)
    if alignment is None:
        alignment = config.alignment
    if policy is None:
        policy = config.policy
    if pixel_exact is None:
        pixel_exact = config.pixel_exact
    pixel_exact = pixel_exact and geometry.graphical

    left_seg = measure_segment(left, metrics)
    right_seg = measure_segment(right, metrics)
    available = available_width(geometry, alignment)

    left_pad, right_pad = compute_padding(alignment, config)
    fitted = fit_segments(left_seg, right_seg, available, policy, config, metrics)

    if fitted is None:
        logger.debug(
            "Line of %d cells too narrow for policy %s, emitting overflow marker",
            available, policy.value,
        )
        return LayoutResult(
            left_pad=left_pad,
            left_text=fill(config.overflow_glyph, available, metrics.width),
            gap=right_gap(alignment.right, 0, 0 if pixel_exact else None),
            right_text="",
            right_pad=right_pad,
            truncated=True,
            overflow=True,
            face=config.padding_face,
        )

    new_left, new_right = fitted
    if pixel_exact:
        gap = right_gap(alignment.right, new_right.width, new_right.pixel_width)
    else:
        gap = right_gap(alignment.right, new_right.width)

    return LayoutResult(
        left_pad=left_pad,
        left_text=new_left.text,
        gap=gap,
        right_text=new_right.text,
        right_pad=right_pad,
        truncated=new_left is not left_seg or new_right is not right_seg,
        face=config.padding_face,
    )
