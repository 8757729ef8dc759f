"""Mapping and serialization of pixel buffers to terminal text."""

from ascii_render.render.mapper import (
    RegionSample,
    map_braille_region,
    map_pixels_to_cells,
    map_region_to_pattern,
)
from ascii_render.render.renderer import AsciiRenderer
from ascii_render.render.terminal import TerminalRenderer
from ascii_render.render.text import TextRenderer, strip_ansi

__all__ = [
    "AsciiRenderer",
    "TerminalRenderer",
    "TextRenderer",
    "RegionSample",
    "map_region_to_pattern",
    "map_braille_region",
    "map_pixels_to_cells",
    "strip_ansi",
]
