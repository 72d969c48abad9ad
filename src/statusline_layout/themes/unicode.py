"""Default theme using single-cell Unicode glyphs."""

from statusline_layout.themes.style import Theme

UNICODE_THEME = Theme(
    name="unicode",
    ellipsis="…",
    overflow_glyph="·",
)
