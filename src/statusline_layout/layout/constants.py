"""Layout constants used across layout modules.

Centralizes the minimum widths used by truncation policy dispatch.
"""

# ---------------------------------------------------------------------------
# Separation
# ---------------------------------------------------------------------------
SEPARATOR_WIDTH: int = 1
"""Cells reserved between the left and right segments."""

# ---------------------------------------------------------------------------
# Truncation minimums
# ---------------------------------------------------------------------------
MIN_TRUNCATED_WIDTH: int = 2
"""Smallest width a segment is shrunk to under a one-sided policy."""

MIN_ONE_SIDED_WIDTH: int = MIN_TRUNCATED_WIDTH + SEPARATOR_WIDTH
"""Available width below which TRUNCATE_LEFT/TRUNCATE_RIGHT overflow."""

MIN_BOTH_SIDED_WIDTH: int = 2 * MIN_TRUNCATED_WIDTH + SEPARATOR_WIDTH
"""Available width below which TRUNCATE_BOTH overflows."""
