"""
ascii-render: render pixel buffers as Unicode terminal art

Draw into an RGBA pixel buffer and turn it into lines of glyphs with
optional 24-bit ANSI color.

Quick Start:
    >>> import ascii_render as ar
    >>> buffer = ar.create_buffer(40, 20)
    >>> ar.draw_circle(buffer, 20, 10, 8, ar.hex_color("#50FF00"), fill=True)
    >>> print(ar.render(buffer, symbol_set="quadrant"))

Features:
    - Five symbol sets: ascii (1x1), half (1x2), quadrant (2x2),
      sextant (2x3) and braille (2x4)
    - Truecolor output that only emits escape codes when a color changes
    - Lines with dash patterns, thickness and color gradients
    - Rectangles and circles, outlined or filled
    - Color helpers: rgb, hex_color, rainbow, blend, interpolate
"""

__version__ = "0.1.0"

from typing import Any

# Core types
from ascii_render.core.buffer import InvalidDimensionsError, PixelBuffer, create_buffer
from ascii_render.core.cell import Cell, Grid
from ascii_render.core.color import (
    BLACK,
    TRANSPARENT,
    WHITE,
    Color,
    ColorMode,
    average,
    blend,
    brightness,
    clamp_byte,
    colors_equal,
    hex,  # not in __all__, shadows the builtin
    hex_color,
    interpolate,
    invert,
    is_on,
    rainbow,
    rgb,
)
from ascii_render.core.options import LineStyle, RenderOptions

# Symbols
from ascii_render.symbols.catalog import (
    SymbolDefinition,
    SymbolSet,
    dimensions_for,
    find_best_symbol,
    symbols_for,
)

# Drawing
from ascii_render.draw.raster import (
    clear,
    draw_circle,
    draw_line,
    draw_rect,
    get_pixel,
    set_pixel,
)

# Rendering
from ascii_render.render.mapper import map_pixels_to_cells
from ascii_render.render.renderer import AsciiRenderer


def render(buffer: PixelBuffer, **options: Any) -> str:
    """Render a buffer with default options, overridden by ``options``."""
    return AsciiRenderer(**options).render(buffer)


def render_line(
    width: int,
    height: int,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    color: Color,
    style: LineStyle | None = None,
    **options: Any,
) -> str:
    """Draw one line on a fresh buffer and render it."""
    return AsciiRenderer(**options).render_line(width, height, x1, y1, x2, y2, color, style)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "Cell",
    "Grid",
    "PixelBuffer",
    "InvalidDimensionsError",
    "RenderOptions",
    "LineStyle",
    "SymbolSet",
    "SymbolDefinition",
    "AsciiRenderer",
    # Colors
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "rgb",
    "hex_color",
    "rainbow",
    "clamp_byte",
    "brightness",
    "is_on",
    "average",
    "blend",
    "interpolate",
    "invert",
    "colors_equal",
    # Symbols
    "symbols_for",
    "dimensions_for",
    "find_best_symbol",
    # Buffers and drawing
    "create_buffer",
    "set_pixel",
    "get_pixel",
    "clear",
    "draw_line",
    "draw_rect",
    "draw_circle",
    # Rendering
    "map_pixels_to_cells",
    "render",
    "render_line",
]
