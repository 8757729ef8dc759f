"""Cell - one position of the rendered glyph grid."""

from dataclasses import dataclass, field

from ascii_render.core.color import BLACK, Color


@dataclass(slots=True)
class Cell:
    """
    A single glyph with the colors it is drawn in.

    ``fg`` is the average of the sub-pixels that were "on" and ``bg`` the
    average of those that were "off".
    """
    char: str = ' '
    fg: Color = field(default=BLACK)
    bg: Color = field(default=BLACK)

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, fg=self.fg, bg=self.bg)


# Row-major grid of cells, rebuilt on every render
Grid = list[list[Cell]]
