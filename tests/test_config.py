"""Tests for configuration values and parsing."""

import dataclasses

import pytest

from statusline_layout.config import (
    Config,
    default_config,
    parse_alignment,
    parse_boundary_align,
)
from statusline_layout.model import (
    AlignmentSpec,
    Boundary,
    BoundaryAlign,
    TruncationPolicy,
)
from statusline_layout.themes import ASCII_THEME, THEMES


def test_default_config_is_shared():
    """default_config returns the same instance every time."""
    assert default_config() is default_config()


def test_default_values():
    """Defaults align to the window and truncate the left segment."""
    config = default_config()
    assert config.policy is TruncationPolicy.TRUNCATE_LEFT
    assert config.ellipsis == "…"
    assert config.alignment == AlignmentSpec(
        BoundaryAlign(Boundary.WINDOW), BoundaryAlign(Boundary.WINDOW)
    )
    assert not config.pixel_exact


def test_config_is_frozen():
    """Configs cannot be mutated in place."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        default_config().policy = TruncationPolicy.TRUNCATE_BOTH


def test_with_overrides_leaves_original():
    """Overrides produce a copy and leave the default alone."""
    config = default_config().with_overrides(policy=TruncationPolicy.TRUNCATE_BOTH)
    assert config.policy is TruncationPolicy.TRUNCATE_BOTH
    assert default_config().policy is TruncationPolicy.TRUNCATE_LEFT


def test_from_theme():
    """Glyphs come from the theme, other fields from the overrides."""
    config = Config.from_theme(ASCII_THEME, policy=TruncationPolicy.TRUNCATE_RIGHT)
    assert config.ellipsis == "..."
    assert config.overflow_glyph == "$"
    assert config.policy is TruncationPolicy.TRUNCATE_RIGHT


def test_themes_registry():
    assert set(THEMES) == {"unicode", "ascii"}
    for name, theme in THEMES.items():
        assert theme.name == name
        assert theme.overflow_glyph


def test_config_rejects_bad_values():
    """Raw strings and empty glyphs are rejected at construction."""
    with pytest.raises(ValueError, match="truncation policy"):
        Config(policy="left")
    with pytest.raises(ValueError, match="overflow_glyph"):
        Config(overflow_glyph="")
    with pytest.raises(ValueError, match="alignment"):
        Config(alignment=("window", "text"))


def test_parse_boundary_align():
    """Boundary names parse with optional character and pixel offsets."""
    assert parse_boundary_align("fringe:2:3") == BoundaryAlign(Boundary.FRINGE, 2, 3)
    assert parse_boundary_align("TEXT") == BoundaryAlign(Boundary.TEXT)
    assert parse_boundary_align("margin:-1") == BoundaryAlign(Boundary.MARGIN, -1)


def test_parse_boundary_align_rejects_unknown():
    """Unknown boundaries and malformed offsets fail fast."""
    with pytest.raises(ValueError, match="Unknown alignment boundary"):
        parse_boundary_align("gutter")
    with pytest.raises(ValueError, match="not an integer"):
        parse_boundary_align("fringe:x")
    with pytest.raises(ValueError, match="Too many offsets"):
        parse_boundary_align("fringe:1:2:3")


def test_parse_alignment():
    alignment = parse_alignment("window", "fringe:1")
    assert alignment.left == BoundaryAlign(Boundary.WINDOW)
    assert alignment.right == BoundaryAlign(Boundary.FRINGE, 1)


def test_boundary_align_requires_enum():
    """Boundaries must be enum members, not strings."""
    with pytest.raises(ValueError, match="Invalid alignment boundary"):
        BoundaryAlign("window")


def test_policy_parse():
    """Policy names parse case-insensitively."""
    assert TruncationPolicy.parse("both") is TruncationPolicy.TRUNCATE_BOTH
    assert TruncationPolicy.parse(" Left ") is TruncationPolicy.TRUNCATE_LEFT
    with pytest.raises(ValueError, match="Unknown truncation policy"):
        TruncationPolicy.parse("middle")
