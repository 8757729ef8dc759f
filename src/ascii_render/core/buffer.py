"""PixelBuffer - rectangular grid of colors that drawing and rendering work on."""

from __future__ import annotations

import logging
from typing import Iterator

from ascii_render.core.color import BLACK, Color

logger = logging.getLogger(__name__)


class InvalidDimensionsError(ValueError):
    """Raised when a buffer is created with a non-positive width or height."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Buffer dimensions must be positive: {width}x{height}")
        self.width = width
        self.height = height


class PixelBuffer:
    """
    A 2D grid of Color values addressed by (x, y).

    Every row has ``width`` entries and there are ``height`` rows.
    Addressing never raises:

    - ``get_pixel`` returns None outside the buffer
    - ``sample`` returns opaque black outside the buffer
    - ``set_pixel`` ignores writes outside the buffer

    The buffer also behaves as a sequence of rows (``len(buffer)`` is the
    height and ``buffer[y]`` is row ``y``), so code written against plain
    lists of rows accepts it unchanged.
    """

    def __init__(self, width: int, height: int, fill: Color | None = None):
        """
        Initialize a buffer filled with a single color.

        Args:
            width: Width in pixels (must be positive)
            height: Height in pixels (must be positive)
            fill: Initial color for every pixel (default: opaque black)

        Raises:
            InvalidDimensionsError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            logger.debug("Rejected buffer size %sx%s", width, height)
            raise InvalidDimensionsError(width, height)

        color = fill if fill is not None else BLACK
        self._width = width
        self._height = height
        self._pixels: list[list[Color]] = [
            [color for _ in range(width)]
            for _ in range(height)
        ]

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_pixel(self, x: int, y: int) -> Color | None:
        """
        Get pixel at position.

        Returns:
            The color at (x, y), or None if the position is out of bounds
        """
        if not self.in_bounds(x, y):
            return None
        return self._pixels[y][x]

    def sample(self, x: int, y: int) -> Color:
        """Get pixel at position, reading opaque black outside the buffer."""
        if not self.in_bounds(x, y):
            return BLACK
        return self._pixels[y][x]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set pixel at position; out-of-bounds writes are dropped."""
        if not self.in_bounds(x, y):
            return
        self._pixels[y][x] = color

    def fill(self, color: Color) -> None:
        """Fill entire buffer with a single color."""
        for y in range(self._height):
            row = self._pixels[y]
            for x in range(self._width):
                row[x] = color

    def pixels(self) -> Iterator[tuple[int, int, Color]]:
        """Iterate over all pixels as (x, y, color) tuples."""
        for y, row in enumerate(self._pixels):
            for x, color in enumerate(row):
                yield x, y, color

    def rows(self) -> Iterator[list[Color]]:
        """Iterate over rows."""
        yield from self._pixels

    def __len__(self) -> int:
        return self._height

    def __getitem__(self, y: int) -> list[Color]:
        return self._pixels[y]

    def __iter__(self) -> Iterator[list[Color]]:
        return self.rows()

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self._width}, height={self._height})"


def create_buffer(width: int, height: int, fill: Color | None = None) -> PixelBuffer:
    """Create a new buffer; raises InvalidDimensionsError for non-positive sizes."""
    return PixelBuffer(width, height, fill)
