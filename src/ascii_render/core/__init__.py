"""Core data structures for pixel rendering."""

from ascii_render.core.buffer import InvalidDimensionsError, PixelBuffer, create_buffer
from ascii_render.core.cell import Cell, Grid
from ascii_render.core.color import Color, ColorMode
from ascii_render.core.options import LineStyle, RenderOptions

__all__ = [
    "Cell",
    "Grid",
    "Color",
    "ColorMode",
    "PixelBuffer",
    "InvalidDimensionsError",
    "create_buffer",
    "LineStyle",
    "RenderOptions",
]
