"""Shared pytest fixtures."""

import pytest

from ascii_render import AsciiRenderer, Color, PixelBuffer, create_buffer


@pytest.fixture
def black() -> Color:
    return Color(0, 0, 0, 255)


@pytest.fixture
def white() -> Color:
    return Color(255, 255, 255, 255)


@pytest.fixture
def renderer() -> AsciiRenderer:
    """Renderer with default options (half blocks, truecolor, threshold 128)."""
    return AsciiRenderer()


@pytest.fixture
def make_buffer():
    """Factory for black buffers of a given size."""
    def _make(width: int, height: int) -> PixelBuffer:
        return create_buffer(width, height, Color(0, 0, 0, 255))
    return _make


def lit_pixels(buffer: PixelBuffer, color: Color) -> set[tuple[int, int]]:
    """Positions of every pixel equal to ``color``."""
    return {(x, y) for x, y, c in buffer.pixels() if c == color}


@pytest.fixture
def lit():
    return lit_pixels
