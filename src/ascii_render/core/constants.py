"""Shared constants for pixel-to-glyph rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Block drawing characters
BLOCK = {
    "full": "\u2588",   # Full block
    "upper": "\u2580",  # Upper half block
    "lower": "\u2584",  # Lower half block
    "left": "\u258C",   # Left half block
    "right": "\u2590",  # Right half block
}

# Unicode braille patterns occupy U+2800 - U+28FF; the low byte is the dot mask
BRAILLE_BASE = 0x2800

# Braille dot masks, per Unicode dot numbering:
#
#   dot1 dot4   (row 0)
#   dot2 dot5   (row 1)
#   dot3 dot6   (row 2)
#   dot7 dot8   (row 3)
BRAILLE_DOTS = {
    1: 0b00000001,  # row 0, left
    2: 0b00000010,  # row 1, left
    3: 0b00000100,  # row 2, left
    4: 0b00001000,  # row 0, right
    5: 0b00010000,  # row 1, right
    6: 0b00100000,  # row 2, right
    7: 0b01000000,  # row 3, left
    8: 0b10000000,  # row 3, right
}

# (dx, dy, mask) for each dot of a 2x4 braille cell
BRAILLE_DOT_MAP: tuple[tuple[int, int, int], ...] = (
    (0, 0, BRAILLE_DOTS[1]),
    (0, 1, BRAILLE_DOTS[2]),
    (0, 2, BRAILLE_DOTS[3]),
    (0, 3, BRAILLE_DOTS[7]),
    (1, 0, BRAILLE_DOTS[4]),
    (1, 1, BRAILLE_DOTS[5]),
    (1, 2, BRAILLE_DOTS[6]),
    (1, 3, BRAILLE_DOTS[8]),
)

# Sextants (2x3) live at U+1FB00 - U+1FB3B, skipping the four patterns
# that already exist as block characters
SEXTANT_BASE = 0x1FB00
SEXTANT_BLOCKS = {
    0b000000: " ",
    0b010101: BLOCK["left"],
    0b101010: BLOCK["right"],
    0b111111: BLOCK["full"],
}
