"""ASCII-only theme for terminals without Unicode support."""

from statusline_layout.themes.style import Theme

ASCII_THEME = Theme(
    name="ascii",
    ellipsis="...",
    overflow_glyph="$",
)
