"""Render a glyph grid to truecolor ANSI escape sequences."""

from ascii_render.core.cell import Grid
from ascii_render.core.color import Color, bg_truecolor, fg_truecolor, reset_colors


class TerminalRenderer:
    """
    Render a Grid to 24-bit ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when a color changes.
    Color state does not carry across lines: each line starts fresh and
    ends with a reset.
    """

    def render(self, grid: Grid) -> str:
        """Render grid to ANSI string."""
        lines: list[str] = []

        for row in grid:
            line_parts: list[str] = []
            last_fg: Color | None = None
            last_bg: Color | None = None

            for cell in row:
                if last_fg is None or last_fg != cell.fg:
                    line_parts.append(fg_truecolor(cell.fg))
                    last_fg = cell.fg

                if last_bg is None or last_bg != cell.bg:
                    line_parts.append(bg_truecolor(cell.bg))
                    last_bg = cell.bg

                line_parts.append(cell.char)

            # Reset at end of each line to prevent color bleeding
            line_parts.append(reset_colors())
            lines.append(''.join(line_parts))

        return '\n'.join(lines)
