"""Data model for status line layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union


class Boundary(Enum):
    """Reference edge a segment can be flush-aligned against."""

    WINDOW = "window"
    MARGIN = "margin"
    FRINGE = "fringe"
    TEXT = "text"

    @classmethod
    def parse(cls, name: str) -> Boundary:
        """Look up a boundary by name, rejecting anything unknown."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(b.value for b in cls)
            raise ValueError(
                f"Unknown alignment boundary {name!r} (expected one of: {valid})"
            ) from None


class Edge(Enum):
    """Side of the window a padding directive refers to."""

    LEFT = "left"
    RIGHT = "right"


class Direction(Enum):
    """Edge of a string that gets cut off when truncating."""

    LEFT = "left"
    RIGHT = "right"


class TruncationPolicy(Enum):
    """Which segment(s) may be shortened when the line is too narrow."""

    TRUNCATE_LEFT = "left"
    TRUNCATE_RIGHT = "right"
    TRUNCATE_BOTH = "both"

    @classmethod
    def parse(cls, name: str) -> TruncationPolicy:
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown truncation policy {name!r} (expected one of: {valid})"
            ) from None


@dataclass(frozen=True)
class BoundaryAlign:
    """One side of an alignment.

    Offsets move the content inward, towards the text area.
    """

    boundary: Boundary
    char_offset: int = 0
    pixel_offset: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.boundary, Boundary):
            raise ValueError(f"Invalid alignment boundary: {self.boundary!r}")


@dataclass(frozen=True)
class AlignmentSpec:
    """Boundary pair the left and right segments are aligned to."""

    left: BoundaryAlign = field(default_factory=lambda: BoundaryAlign(Boundary.WINDOW))
    right: BoundaryAlign = field(default_factory=lambda: BoundaryAlign(Boundary.WINDOW))


@dataclass(frozen=True)
class Geometry:
    """Snapshot of the extents a host reports for one window.

    ``window_width`` is the text area width in characters; every other
    extent is in pixels. Terminal hosts use ``char_width=1`` and zero
    fringes.
    """

    window_width: int
    left_margin: int = 0
    right_margin: int = 0
    left_fringe: int = 0
    right_fringe: int = 0
    scroll_bar_width: int = 0
    scroll_bar_on_left: bool = False
    fringes_outside_margins: bool = False
    graphical: bool = False
    char_width: int = 1

    def __post_init__(self) -> None:
        extents = {
            "window_width": self.window_width,
            "left_margin": self.left_margin,
            "right_margin": self.right_margin,
            "left_fringe": self.left_fringe,
            "right_fringe": self.right_fringe,
            "scroll_bar_width": self.scroll_bar_width,
        }
        for name, value in extents.items():
            if value < 0:
                raise ValueError(f"Geometry {name} must not be negative, got {value}")
        if self.char_width <= 0:
            raise ValueError(f"Geometry char_width must be positive, got {self.char_width}")

    @property
    def left_decoration(self) -> int:
        """Pixels between the window's left edge and the text area."""
        scroll_bar = self.scroll_bar_width if self.scroll_bar_on_left else 0
        return self.left_margin + self.left_fringe + scroll_bar

    @property
    def right_decoration(self) -> int:
        """Pixels between the text area and the window's right edge."""
        scroll_bar = 0 if self.scroll_bar_on_left else self.scroll_bar_width
        return self.right_margin + self.right_fringe + scroll_bar

    @property
    def total_pixels(self) -> int:
        return (
            self.window_width * self.char_width
            + self.left_decoration
            + self.right_decoration
        )


@dataclass(frozen=True)
class Segment:
    """A rendered segment and its measured display width."""

    text: str
    width: int
    pixel_width: int


@dataclass(frozen=True)
class Characters:
    """Reserve ``count`` character cells.

    The engine itself only emits :class:`BoundaryOffset`; fixed-size
    directives are for hosts building their own pieces around a layout.
    """

    count: int


@dataclass(frozen=True)
class Pixels:
    """Reserve ``count`` pixels. Host-built, like :class:`Characters`."""

    count: int


@dataclass(frozen=True)
class BoundaryOffset:
    """Reserve space up to a boundary position.

    The target is the boundary's x coordinate on ``edge`` moved by the
    signed offsets (positive is rightwards). Hosts treat this as an
    align-to: nothing is reserved when the target is already behind.
    """

    boundary: Boundary
    edge: Edge
    char_offset: int = 0
    pixel_offset: int = 0


PaddingDirective = Union[Characters, Pixels, BoundaryOffset]


@dataclass(frozen=True)
class LayoutResult:
    """The five pieces of a laid-out line, in display order."""

    left_pad: PaddingDirective
    left_text: str
    gap: PaddingDirective
    right_text: str
    right_pad: PaddingDirective
    truncated: bool = False
    overflow: bool = False
    face: str | None = None

    def __iter__(self) -> Iterator[Union[PaddingDirective, str]]:
        yield self.left_pad
        yield self.left_text
        yield self.gap
        yield self.right_text
        yield self.right_pad

    def __len__(self) -> int:
        return 5
