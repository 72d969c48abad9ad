"""Tests for the terminal display metrics."""

import pytest

from statusline_layout.metrics import (
    TerminalMetrics,
    display_width,
    split_escapes,
    strip_ansi,
)


def test_display_width_ascii():
    assert display_width("hello") == 5
    assert display_width("") == 0


def test_display_width_wide_and_combining():
    """Wide characters take two cells, combining marks none."""
    assert display_width("日本") == 4
    assert display_width("e\u0301") == 1


def test_ansi_sequences_have_no_width():
    """SGR sequences are stripped before measuring."""
    text = "\x1b[1;31mred\x1b[0m"
    assert strip_ansi(text) == "red"
    assert display_width(text) == 3


def test_split_escapes_keeps_sequences_whole():
    """Escape sequences come out as single chunks, text one char at a time."""
    chunks = list(split_escapes("a\x1b[1mbc\x1b[0m"))
    assert chunks == [
        ("a", False),
        ("\x1b[1m", True),
        ("b", False),
        ("c", False),
        ("\x1b[0m", True),
    ]


def test_render_content_kinds():
    """Strings, None, callables, lists and tuples all render to text."""
    metrics = TerminalMetrics()
    assert metrics.render(None) == ""
    assert metrics.render("abc") == "abc"
    assert metrics.render(lambda: ["a", ("b", None)]) == "ab"
    assert metrics.render(42) == "42"


def test_pixel_width():
    """Pixel width scales the cell count by the character width."""
    metrics = TerminalMetrics(char_width=8)
    assert metrics.width("日a") == 3
    assert metrics.pixel_width("日a") == 24


def test_char_width_must_be_positive():
    with pytest.raises(ValueError):
        TerminalMetrics(char_width=0)
