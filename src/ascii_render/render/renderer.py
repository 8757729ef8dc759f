"""AsciiRenderer - turns pixel buffers into terminal text."""

from __future__ import annotations

import logging
from typing import Any

from ascii_render.core.buffer import PixelBuffer, create_buffer
from ascii_render.core.cell import Grid
from ascii_render.core.color import Color, ColorMode
from ascii_render.core.options import LineStyle, RenderOptions, parse_color_mode
from ascii_render.draw import raster
from ascii_render.render.mapper import PixelRows, map_pixels_to_cells
from ascii_render.render.terminal import TerminalRenderer
from ascii_render.render.text import TextRenderer
from ascii_render.symbols.catalog import SymbolSet

logger = logging.getLogger(__name__)


class AsciiRenderer:
    """
    Render pixel buffers using Unicode symbol sets with optional truecolor.

    The renderer owns a RenderOptions instance. ``options`` hands out a
    copy, and per-call overrides to ``render`` are never stored.

    Example:
        >>> renderer = AsciiRenderer(symbol_set="braille")
        >>> buffer = renderer.create_buffer(40, 20)
        >>> renderer.draw_circle(buffer, 20, 10, 8, hex_color("#50FF00"))
        >>> print(renderer.render(buffer))
    """

    def __init__(self, options: RenderOptions | None = None, **overrides: Any):
        base = options.copy() if options is not None else RenderOptions()
        self._options = base.merged(**overrides)
        self._terminal = TerminalRenderer()
        self._text = TextRenderer()

    @property
    def options(self) -> RenderOptions:
        """A copy of the current options."""
        return self._options.copy()

    def set_options(self, **overrides: Any) -> None:
        """Update stored options."""
        self._options = self._options.merged(**overrides)
        logger.debug("Render options updated: %s", self._options)

    def set_symbol_set(self, symbol_set: SymbolSet | str) -> None:
        self._options.symbol_set = SymbolSet.parse(symbol_set)

    def set_color_mode(self, color_mode: ColorMode | str) -> None:
        self._options.color_mode = parse_color_mode(color_mode)

    def set_threshold(self, threshold: int) -> None:
        self._options.threshold = threshold

    def map(self, pixels: PixelRows, **overrides: Any) -> Grid:
        """Map pixels to a cell grid without serializing it."""
        opts = self._options.merged(**overrides)
        return map_pixels_to_cells(pixels, opts.symbol_set, opts.threshold)

    def render(self, pixels: PixelRows, **overrides: Any) -> str:
        """
        Render a pixel buffer to a string.

        Args:
            pixels: PixelBuffer (or list of rows) to render
            **overrides: symbol_set, color_mode and/or threshold for this
                call only

        Returns:
            Newline-joined lines, with truecolor escapes unless the color
            mode is "none"
        """
        opts = self._options.merged(**overrides)
        grid = map_pixels_to_cells(pixels, opts.symbol_set, opts.threshold)
        if opts.color_mode is ColorMode.TRUECOLOR:
            return self._terminal.render(grid)
        return self._text.render(grid)

    # Buffer helpers

    def create_buffer(
        self, width: int, height: int, fill: Color | None = None
    ) -> PixelBuffer:
        """Create a buffer; raises InvalidDimensionsError for non-positive sizes."""
        return create_buffer(width, height, fill)

    def set_pixel(self, buffer: PixelBuffer, x: int, y: int, color: Color) -> PixelBuffer:
        return raster.set_pixel(buffer, x, y, color)

    def get_pixel(self, buffer: PixelBuffer, x: int, y: int) -> Color | None:
        return buffer.get_pixel(x, y)

    def clear(self, buffer: PixelBuffer, color: Color) -> PixelBuffer:
        return raster.clear(buffer, color)

    # Drawing

    def draw_line(
        self,
        buffer: PixelBuffer,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: Color,
        style: LineStyle | None = None,
    ) -> PixelBuffer:
        return raster.draw_line(buffer, x1, y1, x2, y2, color, style)

    def draw_rect(
        self,
        buffer: PixelBuffer,
        x: int,
        y: int,
        width: int,
        height: int,
        color: Color,
        fill: bool = False,
    ) -> PixelBuffer:
        return raster.draw_rect(buffer, x, y, width, height, color, fill)

    def draw_circle(
        self,
        buffer: PixelBuffer,
        cx: int,
        cy: int,
        radius: int,
        color: Color,
        fill: bool = False,
    ) -> PixelBuffer:
        return raster.draw_circle(buffer, cx, cy, radius, color, fill)

    def render_line(
        self,
        width: int,
        height: int,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: Color,
        style: LineStyle | None = None,
        **overrides: Any,
    ) -> str:
        """Draw a single line on a fresh black buffer and render it."""
        buffer = self.create_buffer(width, height)
        self.draw_line(buffer, x1, y1, x2, y2, color, style)
        return self.render(buffer, **overrides)
