"""Demo scenes built on the drawing primitives."""

from ascii_render.demo.wireframe import Shape, draw_wireframe

__all__ = ["Shape", "draw_wireframe"]
