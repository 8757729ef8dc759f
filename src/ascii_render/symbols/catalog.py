"""Symbol sets mapping sub-pixel patterns to display glyphs.

Every symbol set covers a fixed sub-grid of source pixels per terminal cell.
A pattern is a bit mask over that sub-grid: bit ``i`` is the ``i``-th pixel
in row-major order. Braille is the exception. Its bits follow Unicode dot
numbering, so the glyph is simply ``U+2800 + pattern``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ascii_render.core.constants import (
    BLOCK,
    BRAILLE_BASE,
    SEXTANT_BASE,
    SEXTANT_BLOCKS,
)

logger = logging.getLogger(__name__)


class SymbolSet(Enum):
    """Available symbol sets, named by their glyph family."""
    ASCII = "ascii"        # 1x1 density ramp
    HALF = "half"          # 1x2 half blocks
    QUADRANT = "quadrant"  # 2x2 quadrant blocks
    SEXTANT = "sextant"    # 2x3 sextants (Unicode 13.0+)
    BRAILLE = "braille"    # 2x4 braille dots

    @classmethod
    def parse(cls, value: "SymbolSet | str") -> "SymbolSet":
        """Resolve a name to a symbol set, falling back to half blocks."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            logger.warning("Unknown symbol set %r, using %s", value, cls.HALF.value)
            return cls.HALF


@dataclass(frozen=True, slots=True)
class SymbolDefinition:
    """A glyph and the sub-pixel pattern it depicts."""
    char: str
    pattern: int
    width: int
    height: int


# Ordered light to dark. Every non-blank glyph shares the single "on" bit,
# so pattern matching only distinguishes blank from non-blank.
ASCII_SYMBOLS: tuple[SymbolDefinition, ...] = tuple(
    SymbolDefinition(char, 0b0 if char == " " else 0b1, 1, 1)
    for char in " .,-~+=*#@"
)

# Bit 0 = top pixel, bit 1 = bottom pixel
HALF_BLOCK_SYMBOLS: tuple[SymbolDefinition, ...] = (
    SymbolDefinition(" ", 0b00, 1, 2),
    SymbolDefinition(BLOCK["upper"], 0b01, 1, 2),
    SymbolDefinition(BLOCK["lower"], 0b10, 1, 2),
    SymbolDefinition(BLOCK["full"], 0b11, 1, 2),
)

# Bits: 0 = top-left, 1 = top-right, 2 = bottom-left, 3 = bottom-right
QUADRANT_SYMBOLS: tuple[SymbolDefinition, ...] = (
    SymbolDefinition(" ", 0b0000, 2, 2),
    SymbolDefinition("\u2598", 0b0001, 2, 2),  # upper left
    SymbolDefinition("\u259D", 0b0010, 2, 2),  # upper right
    SymbolDefinition(BLOCK["upper"], 0b0011, 2, 2),
    SymbolDefinition("\u2596", 0b0100, 2, 2),  # lower left
    SymbolDefinition(BLOCK["left"], 0b0101, 2, 2),
    SymbolDefinition("\u259E", 0b0110, 2, 2),  # upper right + lower left
    SymbolDefinition("\u259B", 0b0111, 2, 2),  # all but lower right
    SymbolDefinition("\u2597", 0b1000, 2, 2),  # lower right
    SymbolDefinition("\u259A", 0b1001, 2, 2),  # upper left + lower right
    SymbolDefinition(BLOCK["right"], 0b1010, 2, 2),
    SymbolDefinition("\u259C", 0b1011, 2, 2),  # all but lower left
    SymbolDefinition(BLOCK["lower"], 0b1100, 2, 2),
    SymbolDefinition("\u2599", 0b1101, 2, 2),  # all but upper right
    SymbolDefinition("\u259F", 0b1110, 2, 2),  # all but upper left
    SymbolDefinition(BLOCK["full"], 0b1111, 2, 2),
)


def sextant_char(pattern: int) -> str:
    """
    Get the sextant glyph for a 6-bit pattern.

    Bits: 0/1 = top row, 2/3 = middle row, 4/5 = bottom row (left, right).
    """
    pattern &= 0b111111
    if pattern in SEXTANT_BLOCKS:
        return SEXTANT_BLOCKS[pattern]
    # The block skips empty, left half and right half before this pattern
    skipped = 1 + (pattern > 0b010101) + (pattern > 0b101010)
    return chr(SEXTANT_BASE + pattern - skipped)


SEXTANT_SYMBOLS: tuple[SymbolDefinition, ...] = tuple(
    SymbolDefinition(sextant_char(pattern), pattern, 2, 3)
    for pattern in range(64)
)


def braille_char(pattern: int) -> str:
    """Get the braille glyph for an 8-bit dot pattern."""
    return chr(BRAILLE_BASE + (pattern & 0xFF))


BRAILLE_SYMBOLS: tuple[SymbolDefinition, ...] = tuple(
    SymbolDefinition(braille_char(pattern), pattern, 2, 4)
    for pattern in range(256)
)

_SYMBOL_TABLES: dict[SymbolSet, tuple[SymbolDefinition, ...]] = {
    SymbolSet.ASCII: ASCII_SYMBOLS,
    SymbolSet.HALF: HALF_BLOCK_SYMBOLS,
    SymbolSet.QUADRANT: QUADRANT_SYMBOLS,
    SymbolSet.SEXTANT: SEXTANT_SYMBOLS,
    SymbolSet.BRAILLE: BRAILLE_SYMBOLS,
}

_BLANK = SymbolDefinition(" ", 0, 1, 1)


def symbols_for(name: SymbolSet | str) -> tuple[SymbolDefinition, ...]:
    """Get the symbol table for a set; unknown names get half blocks."""
    return _SYMBOL_TABLES[SymbolSet.parse(name)]


def dimensions_for(name: SymbolSet | str) -> tuple[int, int]:
    """Sub-grid (width, height) of a symbol set, from its first entry."""
    table = symbols_for(name)
    if not table:
        return (1, 2)
    return (table[0].width, table[0].height)


def find_best_symbol(
    pattern: int, symbols: tuple[SymbolDefinition, ...] | list[SymbolDefinition]
) -> SymbolDefinition:
    """
    Find the symbol whose pattern best matches ``pattern``.

    An exact match wins. Otherwise the symbol with the fewest differing
    bits is used, and on a tie the earlier table entry wins.
    """
    for symbol in symbols:
        if symbol.pattern == pattern:
            return symbol

    best = symbols[0] if symbols else _BLANK
    min_distance: int | None = None
    for symbol in symbols:
        distance = (pattern ^ symbol.pattern).bit_count()
        if min_distance is None or distance < min_distance:
            min_distance = distance
            best = symbol

    return best
