"""statusline-layout: two-part status lines aligned to window boundaries."""

__version__ = "0.1.0"

from statusline_layout.config import Config, default_config
from statusline_layout.layout import compute_layout, compute_padding, truncate
from statusline_layout.model import (
    AlignmentSpec,
    Boundary,
    BoundaryAlign,
    Direction,
    Geometry,
    LayoutResult,
    TruncationPolicy,
)

__all__ = [
    "AlignmentSpec",
    "Boundary",
    "BoundaryAlign",
    "Config",
    "Direction",
    "Geometry",
    "LayoutResult",
    "TruncationPolicy",
    "__version__",
    "compute_layout",
    "compute_padding",
    "default_config",
    "truncate",
]
