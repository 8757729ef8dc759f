"""Map pixel regions to glyph cells.

Each terminal cell covers a sub-grid of source pixels. Pixels are split into
"on" and "off" by brightness. That split becomes a bit pattern, which picks
the glyph, and the two groups are averaged into the cell's foreground and
background colors.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

from ascii_render.core.cell import Cell, Grid
from ascii_render.core.color import BLACK, Color, average, is_on
from ascii_render.core.constants import BRAILLE_DOT_MAP
from ascii_render.symbols.catalog import (
    SymbolSet,
    braille_char,
    dimensions_for,
    find_best_symbol,
    symbols_for,
)

# Anything indexable as pixels[y][x]: a PixelBuffer or a plain list of rows
PixelRows = Sequence[Sequence[Color]]


class RegionSample(NamedTuple):
    """Quantized sub-grid: bit pattern plus averaged on/off colors."""
    pattern: int
    fg: Color
    bg: Color


def _sample(pixels: PixelRows, x: int, y: int) -> Color:
    """Read a pixel, treating anything outside the buffer as opaque black."""
    if 0 <= y < len(pixels):
        row = pixels[y]
        if 0 <= x < len(row):
            return row[x]
    return BLACK


def map_region_to_pattern(
    pixels: PixelRows,
    start_x: int,
    start_y: int,
    width: int,
    height: int,
    threshold: int,
) -> RegionSample:
    """
    Quantize a ``width`` x ``height`` region into a bit pattern.

    Bit ``i`` is set when the ``i``-th pixel in row-major order is on.

    Args:
        pixels: Source pixel rows
        start_x: Left edge of the region
        start_y: Top edge of the region
        width: Region width in pixels
        height: Region height in pixels
        threshold: Brightness threshold for "on"

    Returns:
        RegionSample with the pattern and the fg/bg averages
    """
    pattern = 0
    on_colors: list[Color] = []
    off_colors: list[Color] = []

    bit = 0
    for dy in range(height):
        for dx in range(width):
            color = _sample(pixels, start_x + dx, start_y + dy)
            if is_on(color, threshold):
                pattern |= 1 << bit
                on_colors.append(color)
            else:
                off_colors.append(color)
            bit += 1

    return RegionSample(pattern, average(on_colors), average(off_colors))


def map_braille_region(
    pixels: PixelRows,
    start_x: int,
    start_y: int,
    threshold: int,
) -> RegionSample:
    """
    Quantize a 2x4 region using braille dot numbering.

    The resulting pattern indexes the braille block directly, so the glyph
    is ``braille_char(pattern)``.
    """
    pattern = 0
    on_colors: list[Color] = []
    off_colors: list[Color] = []

    for dx, dy, mask in BRAILLE_DOT_MAP:
        color = _sample(pixels, start_x + dx, start_y + dy)
        if is_on(color, threshold):
            pattern |= mask
            on_colors.append(color)
        else:
            off_colors.append(color)

    return RegionSample(pattern, average(on_colors), average(off_colors))


def map_pixels_to_cells(
    pixels: PixelRows,
    symbol_set: SymbolSet | str,
    threshold: int,
) -> Grid:
    """
    Convert a pixel buffer to a grid of cells.

    The grid is ``ceil(width / sub_width)`` cells wide and
    ``ceil(height / sub_height)`` cells tall. Sub-grids hanging off the
    right or bottom edge read the missing pixels as opaque black.
    """
    if len(pixels) == 0 or len(pixels[0]) == 0:
        return []

    symbol_set = SymbolSet.parse(symbol_set)
    symbols = symbols_for(symbol_set)
    sub_width, sub_height = dimensions_for(symbol_set)

    pixel_height = len(pixels)
    pixel_width = len(pixels[0])
    cell_width = math.ceil(pixel_width / sub_width)
    cell_height = math.ceil(pixel_height / sub_height)

    grid: Grid = []
    for cy in range(cell_height):
        row: list[Cell] = []
        start_y = cy * sub_height
        for cx in range(cell_width):
            start_x = cx * sub_width
            if symbol_set is SymbolSet.BRAILLE:
                sample = map_braille_region(pixels, start_x, start_y, threshold)
                char = braille_char(sample.pattern)
            else:
                sample = map_region_to_pattern(
                    pixels, start_x, start_y, sub_width, sub_height, threshold
                )
                char = find_best_symbol(sample.pattern, symbols).char
            row.append(Cell(char=char, fg=sample.fg, bg=sample.bg))
        grid.append(row)

    return grid
