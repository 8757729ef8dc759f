"""Render and line-drawing options."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from ascii_render.core.color import Color, ColorMode
from ascii_render.symbols.catalog import SymbolSet

logger = logging.getLogger(__name__)


def parse_color_mode(value: ColorMode | str) -> ColorMode:
    """Resolve a color mode name; unknown names render without color."""
    if isinstance(value, ColorMode):
        return value
    try:
        return ColorMode(str(value).lower())
    except ValueError:
        logger.warning("Unknown color mode %r, using %s", value, ColorMode.NONE.value)
        return ColorMode.NONE


@dataclass
class RenderOptions:
    """
    Options controlling how a pixel buffer becomes text.

    Attributes:
        symbol_set: Glyph family, and with it the sub-grid size per cell
        color_mode: Whether to emit truecolor escape sequences
        threshold: Brightness (0-255) at which a pixel counts as "on"
    """
    symbol_set: SymbolSet = SymbolSet.HALF
    color_mode: ColorMode = ColorMode.TRUECOLOR
    threshold: int = 128

    def __post_init__(self) -> None:
        self.symbol_set = SymbolSet.parse(self.symbol_set)
        self.color_mode = parse_color_mode(self.color_mode)

    @classmethod
    def monochrome(cls, symbol_set: SymbolSet | str = SymbolSet.HALF) -> RenderOptions:
        """Options for glyph-only output."""
        return cls(symbol_set=symbol_set, color_mode=ColorMode.NONE)

    def copy(self) -> RenderOptions:
        return dataclasses.replace(self)

    def merged(self, **overrides: Any) -> RenderOptions:
        """
        Return a new instance with ``overrides`` applied.

        None values are skipped, so callers can pass optional settings
        straight through. Unknown names raise TypeError.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


@dataclass
class LineStyle:
    """
    Style applied by draw_line.

    Attributes:
        pattern: Dash pattern of 0/1 flags, cycled by step index
        thickness: Line width in pixels, perpendicular to the line
        start_color: Gradient color at the first pixel
        end_color: Gradient color at the last pixel
    """
    pattern: Sequence[int] | None = None
    thickness: int = 1
    start_color: Color | None = None
    end_color: Color | None = None

    @classmethod
    def dashed(cls, on: int = 3, off: int = 2, thickness: int = 1) -> LineStyle:
        """Dashes of ``on`` pixels separated by ``off`` pixel gaps."""
        return cls(pattern=[1] * on + [0] * off, thickness=thickness)

    @classmethod
    def dotted(cls, gap: int = 2, thickness: int = 1) -> LineStyle:
        """Single pixels separated by ``gap`` pixel gaps."""
        return cls(pattern=[1] + [0] * gap, thickness=thickness)

    @classmethod
    def gradient(cls, start: Color, end: Color, thickness: int = 1) -> LineStyle:
        """Solid line fading from ``start`` to ``end``."""
        return cls(thickness=thickness, start_color=start, end_color=end)

    @property
    def has_gradient(self) -> bool:
        return self.start_color is not None and self.end_color is not None
