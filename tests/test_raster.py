"""Tests for raster drawing primitives."""

import math

from ascii_render.core.color import BLACK, WHITE, Color
from ascii_render.core.options import LineStyle
from ascii_render.draw.raster import (
    clear,
    draw_circle,
    draw_line,
    draw_rect,
    get_pixel,
    set_pixel,
)


class TestPixels:
    """Tests for set_pixel, get_pixel and clear."""

    def test_set_and_get(self, make_buffer) -> None:
        buffer = make_buffer(3, 3)
        assert set_pixel(buffer, 1, 2, WHITE) is buffer
        assert get_pixel(buffer, 1, 2) == WHITE

    def test_out_of_bounds(self, make_buffer, lit) -> None:
        buffer = make_buffer(3, 3)
        set_pixel(buffer, -1, 0, WHITE)
        set_pixel(buffer, 3, 0, WHITE)
        set_pixel(buffer, 0, 3, WHITE)
        assert lit(buffer, WHITE) == set()
        assert get_pixel(buffer, -1, 0) is None
        assert get_pixel(buffer, 0, 3) is None

    def test_clear(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 3)
        set_pixel(buffer, 0, 0, WHITE)
        assert clear(buffer, Color(1, 2, 3)) is buffer
        assert len(lit(buffer, Color(1, 2, 3))) == 12

    def test_clear_then_write_changes_one_pixel(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 3)
        clear(buffer, Color(9, 9, 9))
        set_pixel(buffer, 2, 1, WHITE)
        assert lit(buffer, WHITE) == {(2, 1)}
        assert len(lit(buffer, Color(9, 9, 9))) == 11


class TestDrawLine:
    """Tests for draw_line."""

    def test_horizontal(self, make_buffer, lit) -> None:
        buffer = make_buffer(5, 2)
        assert draw_line(buffer, 0, 0, 4, 0, WHITE) is buffer
        assert lit(buffer, WHITE) == {(x, 0) for x in range(5)}

    def test_diagonal(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 4)
        draw_line(buffer, 0, 0, 3, 3, WHITE)
        assert lit(buffer, WHITE) == {(0, 0), (1, 1), (2, 2), (3, 3)}

    def test_reversed_endpoints(self, make_buffer, lit) -> None:
        forward = make_buffer(8, 8)
        backward = make_buffer(8, 8)
        draw_line(forward, 0, 0, 7, 0, WHITE)
        draw_line(backward, 7, 0, 0, 0, WHITE)
        assert lit(forward, WHITE) == lit(backward, WHITE)

    def test_single_point(self, make_buffer, lit) -> None:
        buffer = make_buffer(3, 3)
        draw_line(buffer, 1, 1, 1, 1, WHITE)
        assert lit(buffer, WHITE) == {(1, 1)}

    def test_clipped(self, make_buffer, lit) -> None:
        buffer = make_buffer(3, 1)
        draw_line(buffer, -5, 0, 10, 0, WHITE)
        assert lit(buffer, WHITE) == {(0, 0), (1, 0), (2, 0)}

    def test_float_endpoints_rounded(self, make_buffer, lit) -> None:
        buffer = make_buffer(5, 2)
        draw_line(buffer, 0.4, 0.5, 2.5, 0.5, WHITE)
        assert lit(buffer, WHITE) == {(0, 1), (1, 1), (2, 1), (3, 1)}

    def test_non_finite_is_noop(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 4)
        assert draw_line(buffer, math.nan, 0, 3, 3, WHITE) is buffer
        draw_line(buffer, 0, 0, math.inf, 3, WHITE)
        assert lit(buffer, WHITE) == set()

    def test_thickness_horizontal(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 4)
        draw_line(buffer, 0, 1, 3, 1, WHITE, LineStyle(thickness=2))
        assert lit(buffer, WHITE) == {(x, y) for x in range(4) for y in (0, 1)}

    def test_thickness_centered(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 5)
        draw_line(buffer, 0, 2, 3, 2, WHITE, LineStyle(thickness=3))
        assert lit(buffer, WHITE) == {(x, y) for x in range(4) for y in (1, 2, 3)}

    def test_thickness_steep_widens_along_x(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 4)
        draw_line(buffer, 1, 0, 1, 3, WHITE, LineStyle(thickness=2))
        assert lit(buffer, WHITE) == {(x, y) for x in (0, 1) for y in range(4)}

    def test_thickness_at_edge_is_clipped(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 2)
        draw_line(buffer, 0, 0, 3, 0, WHITE, LineStyle(thickness=2))
        assert lit(buffer, WHITE) == {(x, 0) for x in range(4)}

    def test_dash_pattern(self, make_buffer, lit) -> None:
        buffer = make_buffer(20, 1)
        draw_line(buffer, 0, 0, 19, 0, WHITE, LineStyle(pattern=[1, 0, 0]))
        assert lit(buffer, WHITE) == {(x, 0) for x in range(0, 20, 3)}

    def test_dashed_preset(self, make_buffer, lit) -> None:
        buffer = make_buffer(10, 1)
        draw_line(buffer, 0, 0, 9, 0, WHITE, LineStyle.dashed(on=3, off=2))
        assert {x for x, _ in lit(buffer, WHITE)} == {0, 1, 2, 5, 6, 7}

    def test_thick_dashed_keeps_gaps(self, make_buffer, lit) -> None:
        buffer = make_buffer(6, 3)
        draw_line(buffer, 0, 1, 5, 1, WHITE, LineStyle(pattern=[1, 0], thickness=3))
        assert lit(buffer, WHITE) == {(x, y) for x in (0, 2, 4) for y in (0, 1, 2)}

    def test_gradient(self, make_buffer) -> None:
        buffer = make_buffer(11, 1)
        draw_line(buffer, 0, 0, 10, 0, Color(255, 0, 0), LineStyle.gradient(BLACK, WHITE))
        assert buffer.get_pixel(0, 0) == BLACK
        assert buffer.get_pixel(10, 0) == WHITE
        assert buffer.get_pixel(5, 0) == Color(128, 128, 128, 255)

    def test_gradient_needs_both_ends(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 1)
        red = Color(255, 0, 0)
        draw_line(buffer, 0, 0, 3, 0, red, LineStyle(start_color=WHITE))
        assert len(lit(buffer, red)) == 4

    def test_degenerate_gradient_uses_start(self, make_buffer) -> None:
        buffer = make_buffer(3, 3)
        start = Color(10, 20, 30, 255)
        draw_line(buffer, 1, 1, 1, 1, WHITE, LineStyle.gradient(start, WHITE))
        assert buffer.get_pixel(1, 1) == start


class TestDrawRect:
    """Tests for draw_rect."""

    def test_outline(self, make_buffer, lit) -> None:
        buffer = make_buffer(5, 5)
        assert draw_rect(buffer, 1, 1, 3, 3, WHITE) is buffer
        expected = {(x, y) for x in range(1, 4) for y in range(1, 4)} - {(2, 2)}
        assert lit(buffer, WHITE) == expected

    def test_fill(self, make_buffer, lit) -> None:
        buffer = make_buffer(5, 5)
        draw_rect(buffer, 1, 1, 3, 2, WHITE, fill=True)
        assert lit(buffer, WHITE) == {(x, y) for x in range(1, 4) for y in (1, 2)}

    def test_single_pixel(self, make_buffer, lit) -> None:
        buffer = make_buffer(3, 3)
        draw_rect(buffer, 2, 2, 1, 1, WHITE)
        assert lit(buffer, WHITE) == {(2, 2)}

    def test_non_positive_size_is_noop(self, make_buffer, lit) -> None:
        buffer = make_buffer(3, 3)
        draw_rect(buffer, 0, 0, 0, 3, WHITE, fill=True)
        draw_rect(buffer, 0, 0, 3, -1, WHITE)
        assert lit(buffer, WHITE) == set()

    def test_clipped(self, make_buffer, lit) -> None:
        buffer = make_buffer(3, 3)
        draw_rect(buffer, -1, -1, 3, 3, WHITE, fill=True)
        assert lit(buffer, WHITE) == {(0, 0), (1, 0), (0, 1), (1, 1)}


class TestDrawCircle:
    """Tests for draw_circle."""

    def test_negative_radius_is_noop(self, make_buffer, lit) -> None:
        buffer = make_buffer(5, 5)
        assert draw_circle(buffer, 2, 2, -1, WHITE) is buffer
        assert lit(buffer, WHITE) == set()

    def test_zero_radius(self, make_buffer, lit) -> None:
        buffer = make_buffer(5, 5)
        draw_circle(buffer, 2, 2, 0, WHITE)
        assert lit(buffer, WHITE) == {(2, 2)}
        draw_circle(buffer, 4, 4, 0, WHITE, fill=True)
        assert (4, 4) in lit(buffer, WHITE)

    def test_outline(self, make_buffer, lit) -> None:
        buffer = make_buffer(13, 9)
        draw_circle(buffer, 6, 4, 3, WHITE)
        offsets = {
            (3, 0), (-3, 0), (0, 3), (0, -3),
            (2, 1), (-2, 1), (2, -1), (-2, -1),
            (1, 2), (-1, 2), (1, -2), (-1, -2),
        }
        assert lit(buffer, WHITE) == {(6 + dx, 4 + dy) for dx, dy in offsets}

    def test_filled(self, make_buffer, lit) -> None:
        buffer = make_buffer(13, 9)
        draw_circle(buffer, 6, 4, 3, WHITE, fill=True)
        pixels = lit(buffer, WHITE)
        assert len(pixels) == 25
        for dy, extent in ((0, 3), (1, 2), (2, 1), (3, 0)):
            for y in (4 + dy, 4 - dy):
                assert {x for x, py in pixels if py == y} == set(range(6 - extent, 7 + extent))

    def test_filled_covers_outline(self, make_buffer, lit) -> None:
        outline = make_buffer(21, 21)
        filled = make_buffer(21, 21)
        draw_circle(outline, 10, 10, 8, WHITE)
        draw_circle(filled, 10, 10, 8, WHITE, fill=True)
        assert lit(outline, WHITE) <= lit(filled, WHITE)

    def test_clipped(self, make_buffer, lit) -> None:
        buffer = make_buffer(4, 4)
        draw_circle(buffer, 0, 0, 2, WHITE, fill=True)
        assert all(0 <= x < 4 and 0 <= y < 4 for x, y in lit(buffer, WHITE))
        assert (0, 0) in lit(buffer, WHITE)
