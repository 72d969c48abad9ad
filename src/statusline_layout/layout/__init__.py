"""Status line layout: truncation, boundary arithmetic and assembly.

Public API:
- compute_layout: Lay out a left and right segment on one line
- compute_padding: Padding directives for an alignment, without segments
- available_width: Characters available between two boundaries
- truncate: Width-aware truncation with an ellipsis
"""

from statusline_layout.layout.engine import compute_layout, compute_padding, fit_segments
from statusline_layout.layout.geometry import available_width, extra_pixels
from statusline_layout.layout.truncate import fill, truncate

__all__ = [
    "available_width",
    "compute_layout",
    "compute_padding",
    "extra_pixels",
    "fill",
    "fit_segments",
    "truncate",
]
