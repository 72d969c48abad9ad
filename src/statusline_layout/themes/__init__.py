"""Theme definitions for status lines."""

from statusline_layout.themes.ascii import ASCII_THEME
from statusline_layout.themes.style import Theme
from statusline_layout.themes.unicode import UNICODE_THEME

THEMES = {
    "unicode": UNICODE_THEME,
    "ascii": ASCII_THEME,
}

__all__ = ["THEMES", "Theme", "UNICODE_THEME", "ASCII_THEME"]
