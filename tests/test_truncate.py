"""Tests for ellipsis truncation."""

from statusline_layout.layout.truncate import fill, truncate
from statusline_layout.metrics import display_width
from statusline_layout.model import Direction

RED = "\x1b[31m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"


def test_short_text_unchanged():
    """Text that already fits is returned as-is."""
    assert truncate("abc", 3, "...") == "abc"
    assert truncate("abc", 10) == "abc"
    assert truncate("", 0) == ""


def test_truncate_right_keeps_start():
    """Cutting the right edge keeps the start and appends the ellipsis."""
    assert truncate("HelloWorld", 7, "...", Direction.RIGHT) == "Hell..."


def test_truncate_left_keeps_end():
    """Cutting the left edge keeps the end and prepends the ellipsis."""
    result = truncate("HelloWorld", 7, "...", Direction.LEFT)
    assert result == "...orld"
    assert len(result) == 7


def test_ellipsis_clipped_when_it_does_not_fit():
    """An ellipsis wider than the budget is itself clipped."""
    assert truncate("Hello", 2, "...", Direction.RIGHT) == ".."
    assert truncate("Hello", 2, "...", Direction.LEFT) == ".."


def test_non_positive_size_gives_empty():
    assert truncate("Hello", 0, "...") == ""
    assert truncate("Hello", -4, "…") == ""


def test_default_ellipsis():
    """Without an explicit ellipsis the configured default is used."""
    assert truncate("HelloWorld", 5) == "Hell…"
    assert truncate("HelloWorld", 5, direction=Direction.LEFT) == "…orld"


def test_empty_ellipsis_clips():
    assert truncate("HelloWorld", 4, "") == "Hell"


def test_wide_characters_measured_by_cells():
    """Wide characters count two cells and are never split."""
    assert truncate("日本語テキスト", 5, "…") == "日本…"
    # "語" would straddle the budget and is dropped
    assert truncate("日本語", 4, "…") == "日…"
    assert truncate("日本語", 4, "…", Direction.LEFT) == "…語"


def test_output_never_exceeds_size():
    """Every truncation fits its budget, whatever the input."""
    texts = ["", "a", "HelloWorld", "日本語テキスト", "mixed 日本 text", RED + "styled" + RESET]
    for text in texts:
        for size in range(-1, 16):
            for direction in Direction:
                for ellipsis in ("", "…", "..."):
                    result = truncate(text, size, ellipsis, direction)
                    assert display_width(result) <= max(size, 0), (text, size, ellipsis)


def test_custom_measure():
    """A caller-supplied measure replaces cell counting."""
    # Count every character as two units
    result = truncate("abcdef", 6, ".", Direction.RIGHT, measure=lambda s: 2 * len(s))
    assert result == "ab."


def test_styled_text_fills_budget_from_right():
    """Escape sequences take no room and the reset survives a right cut."""
    result = truncate(RED + "HelloWorld" + RESET, 7, "…", Direction.RIGHT)
    assert result == RED + "HelloW" + RESET + "…"
    assert display_width(result) == 7


def test_styled_text_fills_budget_from_left():
    """The opening style survives a left cut."""
    result = truncate(RED + "HelloWorld" + RESET, 7, "…", Direction.LEFT)
    assert result == "…" + RED + "oWorld" + RESET
    assert display_width(result) == 7


def test_styled_text_within_budget_unchanged():
    """Escape sequences alone never trigger truncation."""
    text = BOLD + "abc" + RESET
    assert truncate(text, 3) == text


def test_escapes_in_the_middle_are_kept():
    """Style switches past the cut are still emitted."""
    result = truncate("ab" + BOLD + "cdef" + RESET + "gh", 5, "…")
    assert result == "ab" + BOLD + "cd" + RESET + "…"
    assert display_width(result) == 5


def test_fill_exact_width():
    """fill repeats a glyph up to, never past, the size."""
    assert fill("·", 3) == "···"
    assert fill("ab", 5) == "ababa"
    assert fill("日", 3) == "日"
    assert fill("x", 0) == ""
    assert fill("", 4) == ""
