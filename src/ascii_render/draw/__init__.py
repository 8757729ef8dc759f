"""Raster drawing primitives."""

from ascii_render.draw.raster import (
    clear,
    draw_circle,
    draw_line,
    draw_rect,
    get_pixel,
    set_pixel,
)

__all__ = ["set_pixel", "get_pixel", "clear", "draw_line", "draw_rect", "draw_circle"]
