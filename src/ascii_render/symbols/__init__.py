"""Symbol sets and glyph lookup."""

from ascii_render.symbols.catalog import (
    ASCII_SYMBOLS,
    BRAILLE_SYMBOLS,
    HALF_BLOCK_SYMBOLS,
    QUADRANT_SYMBOLS,
    SEXTANT_SYMBOLS,
    SymbolDefinition,
    SymbolSet,
    braille_char,
    dimensions_for,
    find_best_symbol,
    sextant_char,
    symbols_for,
)

__all__ = [
    "SymbolSet",
    "SymbolDefinition",
    "ASCII_SYMBOLS",
    "HALF_BLOCK_SYMBOLS",
    "QUADRANT_SYMBOLS",
    "SEXTANT_SYMBOLS",
    "BRAILLE_SYMBOLS",
    "symbols_for",
    "dimensions_for",
    "find_best_symbol",
    "braille_char",
    "sextant_char",
]
