"""Wireframe demo scene: a rotating cube or sphere drawn with draw_line.

Points live in a unit view volume. They are rotated, pushed back along z,
perspective-divided and mapped to pixel coordinates (y down).
"""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple

from ascii_render.core.buffer import PixelBuffer
from ascii_render.core.color import Color, hex_color
from ascii_render.draw.raster import clear, draw_line, draw_rect

BACKGROUND = hex_color("#1a1a1a")
FOREGROUND = hex_color("#50FF00")

# Points closer than this to the eye are not drawn
NEAR_PLANE = 0.1


class Point2(NamedTuple):
    x: float
    y: float


class Point3(NamedTuple):
    x: float
    y: float
    z: float


class Shape(Enum):
    """Shapes the demo can draw."""
    POINT = "point"
    CUBE = "cube"
    SPHERE = "sphere"


Edges = list[tuple[Point3, Point3]]


def rotate_xz(p: Point3, angle: float) -> Point3:
    """Rotate about the y axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    return Point3(p.x * c - p.z * s, p.y, p.x * s + p.z * c)


def rotate_yz(p: Point3, angle: float) -> Point3:
    """Rotate about the x axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    return Point3(p.x, p.y * c - p.z * s, p.y * s + p.z * c)


def translate_z(p: Point3, dz: float) -> Point3:
    return Point3(p.x, p.y, p.z + dz)


def project(p: Point3) -> Point2:
    """Perspective divide onto the z = 1 plane."""
    return Point2(p.x / p.z, p.y / p.z)


def to_screen(p: Point2, width: int, height: int) -> Point2:
    """Map [-1, 1] view coordinates to pixel coordinates, y pointing down."""
    return Point2((p.x + 1) / 2 * width, (1 - (p.y + 1) / 2) * height)


def cube_edges(half_size: float = 0.25) -> Edges:
    """The 12 edges of an axis-aligned cube centered on the origin."""
    s = half_size
    front = [Point3(s, s, s), Point3(-s, s, s), Point3(-s, -s, s), Point3(s, -s, s)]
    back = [Point3(x, y, -z) for x, y, z in front]

    edges: Edges = []
    for face in (front, back):
        for i in range(4):
            edges.append((face[i], face[(i + 1) % 4]))
    for a, b in zip(front, back):
        edges.append((a, b))
    return edges


def sphere_edges(segments: int = 12, radius: float = 0.5) -> Edges:
    """Latitude and longitude segments of a sphere tilted towards the viewer."""
    vertices: list[Point3] = []
    for lat in range(segments + 1):
        theta = lat / segments * math.pi
        for lon in range(segments):
            phi = lon / segments * 2 * math.pi
            v = Point3(
                radius * math.sin(theta) * math.cos(phi),
                radius * math.cos(theta),
                radius * math.sin(theta) * math.sin(phi),
            )
            vertices.append(rotate_yz(v, math.pi / 6))

    edges: Edges = []
    for lat in range(segments):
        for lon in range(segments):
            a = lat * segments + lon
            b = lat * segments + (lon + 1) % segments
            c = (lat + 1) * segments + lon
            edges.append((vertices[a], vertices[b]))  # latitude
            edges.append((vertices[a], vertices[c]))  # longitude
    return edges


def _screen_point(p: Point3, angle: float, dz: float, width: int, height: int) -> Point2 | None:
    view = translate_z(rotate_xz(p, angle), dz)
    if view.z < NEAR_PLANE:
        return None
    return to_screen(project(view), width, height)


def draw_wireframe(
    buffer: PixelBuffer,
    shape: Shape | str,
    angle: float,
    dz: float = 1.0,
    color: Color = FOREGROUND,
) -> PixelBuffer:
    """
    Clear ``buffer`` and draw one frame of the demo scene.

    Args:
        buffer: Buffer to draw into
        shape: point, cube or sphere
        angle: Rotation about the vertical axis, in radians
        dz: Distance pushed away from the eye
        color: Line color

    Returns:
        The same buffer
    """
    shape = Shape(shape)
    clear(buffer, BACKGROUND)

    if shape is Shape.POINT:
        p = _screen_point(Point3(0.5, 0, 0), angle, dz, buffer.width, buffer.height)
        if p is not None:
            size = 2
            draw_rect(buffer, round(p.x - size / 2), round(p.y - size / 2), size, size, color, fill=True)
        return buffer

    edges = cube_edges() if shape is Shape.CUBE else sphere_edges()
    for a, b in edges:
        pa = _screen_point(a, angle, dz, buffer.width, buffer.height)
        pb = _screen_point(b, angle, dz, buffer.width, buffer.height)
        if pa is None or pb is None:
            continue
        draw_line(buffer, pa.x, pa.y, pb.x, pb.y, color)

    return buffer
