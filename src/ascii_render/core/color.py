"""Color representation and color math for pixel rendering."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable

from ascii_render.core.constants import CSI, RESET


# Pixels with alpha below this are never "on", whatever the brightness threshold
ALPHA_THRESHOLD = 128

HEX_PATTERN = re.compile(r'[0-9a-fA-F]{3}|[0-9a-fA-F]{6}')


class ColorMode(Enum):
    """Color mode for rendered output."""
    NONE = "none"            # Glyphs only, no escape sequences
    TRUECOLOR = "truecolor"  # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


def clamp_byte(value: float) -> int:
    """Round to the nearest integer (half up) and clamp to [0, 255]."""
    if math.isnan(value):
        return 0
    if value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    """
    An RGBA color value.

    Alpha is optional; ``None`` means fully opaque. Every channel is
    clamped to an integer in [0, 255] on construction, so arithmetic
    results can be passed straight in.
    """
    r: int
    g: int
    b: int
    a: int | None = None

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", clamp_byte(self.r))
        object.__setattr__(self, "g", clamp_byte(self.g))
        object.__setattr__(self, "b", clamp_byte(self.b))
        if self.a is not None:
            object.__setattr__(self, "a", clamp_byte(self.a))

    @property
    def alpha(self) -> int:
        """Alpha with a missing value read as opaque."""
        return 255 if self.a is None else self.a

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.alpha)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba == other.rgba

    def __hash__(self) -> int:
        return hash(self.rgba)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this color as foreground."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as background."""
        return f"48;2;{self.r};{self.g};{self.b}"


Color.BLACK = Color(0, 0, 0, 255)
Color.WHITE = Color(255, 255, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)

BLACK = Color.BLACK
WHITE = Color.WHITE
TRANSPARENT = Color.TRANSPARENT


def brightness(color: Color) -> int:
    """Perceived brightness (ITU-R BT.601 luma), 0-255."""
    return clamp_byte(0.299 * color.r + 0.587 * color.g + 0.114 * color.b)


def is_on(color: Color, threshold: int) -> bool:
    """Whether a pixel counts as "on" for pattern quantization."""
    if color.a is not None and color.a < ALPHA_THRESHOLD:
        return False
    return brightness(color) >= threshold


def average(colors: Iterable[Color]) -> Color:
    """Componentwise mean of colors; opaque black for no colors."""
    r = g = b = a = 0
    count = 0
    for color in colors:
        r += color.r
        g += color.g
        b += color.b
        a += color.alpha
        count += 1

    if count == 0:
        return BLACK

    return Color(r / count, g / count, b / count, a / count)


def blend(fg: Color, bg: Color) -> Color:
    """Composite ``fg`` over ``bg`` (source-over)."""
    fg_a = fg.alpha / 255
    bg_a = bg.alpha / 255
    out_a = fg_a + bg_a * (1 - fg_a)

    if out_a == 0:
        return TRANSPARENT

    return Color(
        r=(fg.r * fg_a + bg.r * bg_a * (1 - fg_a)) / out_a,
        g=(fg.g * fg_a + bg.g * bg_a * (1 - fg_a)) / out_a,
        b=(fg.b * fg_a + bg.b * bg_a * (1 - fg_a)) / out_a,
        a=out_a * 255,
    )


def interpolate(color1: Color, color2: Color, t: float) -> Color:
    """Linear interpolation between two colors; ``t`` is clamped to [0, 1]."""
    t = max(0.0, min(1.0, t))
    a1 = color1.alpha
    a2 = color2.alpha
    return Color(
        r=color1.r + (color2.r - color1.r) * t,
        g=color1.g + (color2.g - color1.g) * t,
        b=color1.b + (color2.b - color1.b) * t,
        a=a1 + (a2 - a1) * t,
    )


def invert(color: Color) -> Color:
    """Invert the RGB channels, keeping alpha."""
    return Color(255 - color.r, 255 - color.g, 255 - color.b, color.alpha)


def colors_equal(c1: Color, c2: Color) -> bool:
    """Channel-wise equality, treating a missing alpha as 255."""
    return c1.rgba == c2.rgba


def rgb(r: float, g: float, b: float, a: float | None = None) -> Color:
    """Create a color from RGB(A) values, clamping each channel."""
    return Color(r, g, b, a)


def hex_color(value: str) -> Color:
    """
    Create a color from a hex string.

    Accepts "#RGB", "#RRGGBB" and the same forms without "#". Anything
    else gives opaque black.
    """
    clean = value.replace("#", "", 1)
    if not HEX_PATTERN.fullmatch(clean):
        return BLACK

    if len(clean) == 3:
        # Short form: F0F -> FF00FF
        clean = clean[0] * 2 + clean[1] * 2 + clean[2] * 2

    return Color(int(clean[0:2], 16), int(clean[2:4], 16), int(clean[4:6], 16), 255)


# Short alias matching the common "hex" helper name
hex = hex_color


def rainbow(t: float) -> Color:
    """
    Color at position ``t`` on a repeating rainbow.

    Three sine waves offset by 120 degrees drive R, G and B.
    """
    phase = (t % 1) * math.pi * 2
    r = math.sin(phase) * 127 + 128
    g = math.sin(phase + math.pi * 2 / 3) * 127 + 128
    b = math.sin(phase + math.pi * 4 / 3) * 127 + 128
    return Color(r, g, b, 255)


def fg_truecolor(color: Color) -> str:
    """Escape sequence selecting ``color`` as foreground."""
    return f"{CSI}{color.to_sgr_fg()}m"


def bg_truecolor(color: Color) -> str:
    """Escape sequence selecting ``color`` as background."""
    return f"{CSI}{color.to_sgr_bg()}m"


def reset_colors() -> str:
    return RESET
