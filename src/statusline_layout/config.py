"""Immutable configuration for status line layouts.

A :class:`Config` is threaded explicitly through every layout call so
that each call observes one consistent snapshot of the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from statusline_layout.model import (
    AlignmentSpec,
    Boundary,
    BoundaryAlign,
    TruncationPolicy,
)
from statusline_layout.themes import UNICODE_THEME, Theme


@dataclass(frozen=True)
class Config:
    """Defaults applied to every layout call."""

    alignment: AlignmentSpec = field(default_factory=AlignmentSpec)
    policy: TruncationPolicy = TruncationPolicy.TRUNCATE_LEFT
    ellipsis: str = UNICODE_THEME.ellipsis
    overflow_glyph: str = UNICODE_THEME.overflow_glyph
    padding_face: str | None = UNICODE_THEME.padding_face
    pixel_exact: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.alignment, AlignmentSpec):
            raise ValueError(f"Invalid alignment: {self.alignment!r}")
        if not isinstance(self.policy, TruncationPolicy):
            raise ValueError(f"Invalid truncation policy: {self.policy!r}")
        if not self.overflow_glyph:
            raise ValueError("overflow_glyph must not be empty")

    @classmethod
    def from_theme(cls, theme: Theme, **overrides) -> Config:
        """Build a config taking its glyphs and face from a theme."""
        return cls(
            ellipsis=theme.ellipsis,
            overflow_glyph=theme.overflow_glyph,
            padding_face=theme.padding_face,
            **overrides,
        )

    def with_overrides(self, **changes) -> Config:
        return replace(self, **changes)


_DEFAULT_CONFIG = Config()


def default_config() -> Config:
    """Return the process-wide default configuration."""
    return _DEFAULT_CONFIG


def parse_boundary_align(text: str) -> BoundaryAlign:
    """Parse ``boundary[:chars[:pixels]]``, e.g. ``fringe:2:3``."""
    parts = text.split(":")
    if len(parts) > 3:
        raise ValueError(f"Too many offsets in alignment {text!r}")
    boundary = Boundary.parse(parts[0])
    offsets = []
    for part in parts[1:]:
        try:
            offsets.append(int(part))
        except ValueError:
            raise ValueError(
                f"Alignment offset {part!r} in {text!r} is not an integer"
            ) from None
    return BoundaryAlign(boundary, *offsets)


def parse_alignment(left: str, right: str) -> AlignmentSpec:
    """Parse an alignment pair from two ``boundary[:chars[:pixels]]`` strings."""
    return AlignmentSpec(parse_boundary_align(left), parse_boundary_align(right))
