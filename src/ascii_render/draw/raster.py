"""Raster drawing primitives for PixelBuffer.

Every primitive draws into the buffer it is given and returns that same
buffer, so calls can be chained. Coordinates outside the buffer are clipped
pixel by pixel. Degenerate shapes draw nothing and are not errors.
"""

from __future__ import annotations

import math

from ascii_render.core.buffer import PixelBuffer
from ascii_render.core.color import Color, interpolate
from ascii_render.core.options import LineStyle


def set_pixel(buffer: PixelBuffer, x: int, y: int, color: Color) -> PixelBuffer:
    """Set a single pixel; out-of-bounds writes are dropped."""
    buffer.set_pixel(x, y, color)
    return buffer


def get_pixel(buffer: PixelBuffer, x: int, y: int) -> Color | None:
    """Get a single pixel, or None outside the buffer."""
    return buffer.get_pixel(x, y)


def clear(buffer: PixelBuffer, color: Color) -> PixelBuffer:
    """Overwrite every pixel with ``color``."""
    buffer.fill(color)
    return buffer


def draw_line(
    buffer: PixelBuffer,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    color: Color,
    style: LineStyle | None = None,
) -> PixelBuffer:
    """
    Draw a line using Bresenham's algorithm.

    Endpoints are rounded (half up) to whole pixels. A non-finite endpoint
    makes the call a no-op.

    With a style:
    - pattern: pixel at step ``s`` is drawn only if ``pattern[s % len] == 1``
    - start/end colors: color at step ``s`` is interpolated by
      ``s / length`` where length is the Euclidean endpoint distance
    - thickness: extra pixels run perpendicular to the line's dominant axis,
      so thick dashed lines keep their gaps

    Args:
        buffer: Buffer to draw into
        x1, y1: Start point
        x2, y2: End point
        color: Line color (ignored where a gradient is given)
        style: Optional dash pattern, thickness and gradient

    Returns:
        The same buffer
    """
    if not all(math.isfinite(v) for v in (x1, y1, x2, y2)):
        return buffer

    x1, y1, x2, y2 = (math.floor(v + 0.5) for v in (x1, y1, x2, y2))

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    length = math.hypot(x2 - x1, y2 - y1)
    steep = dy > dx

    pattern = list(style.pattern) if style and style.pattern else None
    thickness = style.thickness if style else 1
    gradient = style is not None and style.has_gradient

    x, y = x1, y1
    step = 0
    while True:
        if pattern is None or pattern[step % len(pattern)] == 1:
            draw_color = color
            if gradient:
                t = step / length if length > 0 else 0.0
                draw_color = interpolate(style.start_color, style.end_color, t)

            if thickness > 1:
                _draw_thick_pixel(buffer, x, y, draw_color, thickness, steep)
            else:
                buffer.set_pixel(x, y, draw_color)

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
        step += 1

    return buffer


def _draw_thick_pixel(
    buffer: PixelBuffer,
    x: int,
    y: int,
    color: Color,
    thickness: int,
    steep: bool,
) -> None:
    """Draw ``thickness`` pixels across the line, centered on (x, y)."""
    offset = math.floor(thickness / 2)
    if steep:
        # Mostly vertical: widen along x
        start = x - offset
        for i in range(int(thickness)):
            buffer.set_pixel(start + i, y, color)
    else:
        # Mostly horizontal: widen along y
        start = y - offset
        for i in range(int(thickness)):
            buffer.set_pixel(x, start + i, color)


def draw_rect(
    buffer: PixelBuffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    fill: bool = False,
) -> PixelBuffer:
    """Draw a rectangle outline, or a solid rectangle when ``fill`` is set."""
    if width <= 0 or height <= 0:
        return buffer

    if fill:
        for py in range(y, y + height):
            for px in range(x, x + width):
                buffer.set_pixel(px, py, color)
        return buffer

    right = x + width - 1
    bottom = y + height - 1
    for px in range(x, x + width):
        buffer.set_pixel(px, y, color)
        buffer.set_pixel(px, bottom, color)
    for py in range(y, y + height):
        buffer.set_pixel(x, py, color)
        buffer.set_pixel(right, py, color)
    return buffer


def draw_circle(
    buffer: PixelBuffer,
    cx: int,
    cy: int,
    radius: int,
    color: Color,
    fill: bool = False,
) -> PixelBuffer:
    """
    Draw a circle with the midpoint algorithm.

    One octant is traced and mirrored into the other seven. A filled circle
    is drawn as horizontal spans between mirrored points. Radius 0 draws
    the center pixel; a negative radius draws nothing.
    """
    if radius < 0:
        return buffer

    x = radius
    y = 0
    err = 0

    while x >= y:
        if fill:
            for dx in range(-x, x + 1):
                buffer.set_pixel(cx + dx, cy + y, color)
                buffer.set_pixel(cx + dx, cy - y, color)
            for dx in range(-y, y + 1):
                buffer.set_pixel(cx + dx, cy + x, color)
                buffer.set_pixel(cx + dx, cy - x, color)
        else:
            buffer.set_pixel(cx + x, cy + y, color)
            buffer.set_pixel(cx + y, cy + x, color)
            buffer.set_pixel(cx - y, cy + x, color)
            buffer.set_pixel(cx - x, cy + y, color)
            buffer.set_pixel(cx - x, cy - y, color)
            buffer.set_pixel(cx - y, cy - x, color)
            buffer.set_pixel(cx + y, cy - x, color)
            buffer.set_pixel(cx + x, cy - y, color)

        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1

    return buffer
