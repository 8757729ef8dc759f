"""Tests for the wireframe demo scene."""

import math

import pytest

from ascii_render.core.buffer import PixelBuffer
from ascii_render.demo.wireframe import (
    BACKGROUND,
    FOREGROUND,
    Point2,
    Point3,
    Shape,
    cube_edges,
    draw_wireframe,
    project,
    rotate_xz,
    sphere_edges,
    to_screen,
)


class TestGeometry:
    """Tests for the projection helpers."""

    def test_edge_counts(self) -> None:
        assert len(cube_edges()) == 12
        assert len(sphere_edges()) == 288
        assert len(sphere_edges(segments=4)) == 32

    def test_rotate_quarter_turn(self) -> None:
        p = rotate_xz(Point3(1, 2, 0), math.pi / 2)
        assert p.x == pytest.approx(0)
        assert p.y == 2
        assert p.z == pytest.approx(1)

    def test_project(self) -> None:
        assert project(Point3(1, -1, 2)) == Point2(0.5, -0.5)

    def test_to_screen(self) -> None:
        assert to_screen(Point2(0, 0), 80, 40) == Point2(40, 20)
        assert to_screen(Point2(-1, 1), 80, 40) == Point2(0, 0)
        assert to_screen(Point2(1, -1), 80, 40) == Point2(80, 40)


class TestDrawWireframe:
    """Tests for draw_wireframe."""

    def test_point(self, lit) -> None:
        buffer = PixelBuffer(80, 80)
        assert draw_wireframe(buffer, Shape.POINT, 0.0) is buffer
        assert lit(buffer, FOREGROUND) == {(x, y) for x in (59, 60) for y in (39, 40)}

    def test_cube(self, lit) -> None:
        buffer = PixelBuffer(80, 80)
        draw_wireframe(buffer, "cube", math.radians(30))
        assert lit(buffer, FOREGROUND)
        assert buffer.get_pixel(0, 0) == BACKGROUND

    def test_sphere(self, lit) -> None:
        buffer = PixelBuffer(60, 60)
        draw_wireframe(buffer, Shape.SPHERE, 0.5)
        assert len(lit(buffer, FOREGROUND)) > 50

    def test_clears_previous_frame(self, lit) -> None:
        buffer = PixelBuffer(80, 80)
        draw_wireframe(buffer, Shape.CUBE, 0.0)
        draw_wireframe(buffer, Shape.POINT, 0.0)
        assert len(lit(buffer, FOREGROUND)) == 4

    def test_behind_eye_is_skipped(self, lit) -> None:
        buffer = PixelBuffer(20, 20)
        draw_wireframe(buffer, Shape.CUBE, 0.0, dz=-5.0)
        assert lit(buffer, FOREGROUND) == set()

    def test_invalid_shape(self) -> None:
        with pytest.raises(ValueError):
            draw_wireframe(PixelBuffer(4, 4), "triangle", 0.0)
