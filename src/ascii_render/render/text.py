"""Render a glyph grid to plain text (no colors)."""

import re

from ascii_render.core.cell import Grid

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*[a-zA-Z]')


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_PATTERN.sub('', text)


class TextRenderer:
    """Render a Grid to plain text without any styling."""

    def render(self, grid: Grid) -> str:
        """Render grid to plain text, one line per row."""
        return '\n'.join(''.join(cell.char for cell in row) for row in grid)
