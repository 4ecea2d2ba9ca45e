"""Colour palettes used to shade escape-time fractals."""

from __future__ import annotations

from dataclasses import dataclass

COLOR_WHITE = 0xFFFFFF
COLOR_BLACK = 0x000000

GREEN_SHADES = (
    0x0D3300, 0x1A6600, 0x269900, 0x33CC00, 0x40FF00,
    0x66FF33, 0x8CFF66, 0xB3FF99, 0xD9FFCC,
)
BLUE_SHADES = (
    0x000033, 0x000066, 0x000099, 0x0000CC, 0x0000FF,
    0x3333FF, 0x6666FF, 0x9999FF, 0xCCCFFF,
)
RED_SHADES = (
    0x330000, 0x660000, 0x990000, 0xCC0000, 0xFF0000,
    0xFF3333, 0xFF6666, 0xFF9999, 0xFFCCCC,
)
GREY_SHADES = (
    0x1A1A1A, 0x333333, 0x4D4D4D, 0x666666, 0x808080,
    0x999999, 0xB3B3B3, 0xCCCCCC, 0xE6E6E6,
)

NEON_RED = 0xFE0000
NEON_ORANGE = 0xFF7400
NEON_YELLOW = 0xFDFE02
NEON_GREEN = 0xF0BFF01
NEON_LIGHT_GREEN = 0x74EE15
NEON_BLUE = 0x011EFE
NEON_LIGHT_BLUE = 0x4DEEEA
NEON_PURPLE = 0xFE00F6
NEON_LIGHT_PURPLE = 0xF000FF

RESET = "\x1b[0m"
RED = "\x1b[0;31m"


@dataclass(frozen=True)
class Palette:
    """Eleven colours, darkest to lightest, tagged with the palette's name."""

    name: str
    black: int
    a: int
    b: int
    c: int
    d: int
    e: int
    f: int
    g: int
    h: int
    i: int
    w: int

    def colors(self) -> tuple[int, ...]:
        """Return the colours in order from ``black`` to ``w``."""
        return (
            self.black, self.a, self.b, self.c, self.d, self.e,
            self.f, self.g, self.h, self.i, self.w,
        )

    def shifted(self) -> Palette:
        """Return the palette rotated by one step.

        The funk palette rotates all eleven colours; the others keep
        ``black`` fixed and rotate the remaining ten.
        """
        values = self.colors()
        if self.name == "funk":
            rotated = values[1:] + values[:1]
        else:
            rest = values[1:]
            rotated = (values[0],) + rest[1:] + rest[:1]
        return Palette(self.name, *rotated)


def _shaded(name: str, shades: tuple[int, ...]) -> Palette:
    return Palette(name, COLOR_BLACK, *shades, COLOR_WHITE)


def green_palette() -> Palette:
    """Green shades from black to white."""
    return _shaded("green", GREEN_SHADES)


def blue_palette() -> Palette:
    """Blue shades from black to white."""
    return _shaded("blue", BLUE_SHADES)


def red_palette() -> Palette:
    """Red shades from black to white."""
    return _shaded("red", RED_SHADES)


def grey_palette() -> Palette:
    """Grey shades from black to white."""
    return _shaded("grey", GREY_SHADES)


def funk_palette() -> Palette:
    """Neon colours that rotate as a whole."""
    return Palette(
        "funk",
        NEON_LIGHT_PURPLE,
        NEON_RED,
        NEON_ORANGE,
        NEON_YELLOW,
        NEON_GREEN,
        NEON_LIGHT_GREEN,
        NEON_BLUE,
        NEON_LIGHT_BLUE,
        NEON_LIGHT_PURPLE,
        NEON_PURPLE,
        NEON_LIGHT_PURPLE,
    )