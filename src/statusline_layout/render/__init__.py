"""Reference host rendering of laid-out lines."""

from statusline_layout.render.terminal import boundary_position, render_line

__all__ = ["boundary_position", "render_line"]
