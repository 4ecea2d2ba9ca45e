"""Escape-time computations for the Mandelbrot, Julia and Burning Ship sets."""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEFAULT_MAX_ITER = 200
DEFAULT_JULIA_C = complex(-0.787545, -0.134741)
ESCAPE_RADIUS_SQUARED = 4.0


class FractalKind(enum.Enum):
    """The fractals that can be explored."""

    MANDELBROT = "m"
    JULIA = "j"
    BURNING_SHIP = "b"

    @property
    def title(self) -> str:
        return {
            FractalKind.MANDELBROT: "Mandelbrot",
            FractalKind.JULIA: "Julia Set",
            FractalKind.BURNING_SHIP: "Burning Ship",
        }[self]


@dataclass(frozen=True)
class Viewport:
    """A rectangle of the complex plane mapped onto a pixel grid."""

    re_min: float
    re_max: float
    im_min: float
    im_max: float
    width: int
    height: int

    def width_span(self) -> float:
        """Extent of the real axis."""
        return self.re_max - self.re_min

    def height_span(self) -> float:
        """Extent of the imaginary axis."""
        return self.im_max - self.im_min

    def point(self, x: float, y: float) -> complex:
        """Complex number under pixel (x, y); y grows downwards."""
        real = self.re_min + x / self.width * self.width_span()
        imag = self.im_max - y / self.height * self.height_span()
        return complex(real, imag)


def default_viewport(kind: FractalKind, width: int, height: int) -> Viewport:
    """The starting view for a fractal on a window of the given size."""
    if width <= 0 or height <= 0:
        raise ValueError("viewport dimensions must be positive")
    if kind is FractalKind.MANDELBROT:
        re_min, re_max, im_min = -2.25, 1.05, -1.1
        im_max = im_min + (re_max - re_min) * height / width
        return Viewport(re_min, re_max, im_min, im_max, width, height)
    if kind is FractalKind.JULIA:
        re_min, re_max = -2.0, 2.0
    elif kind is FractalKind.BURNING_SHIP:
        re_min, re_max = -2.5, 1.5
    else:
        raise ValueError(f"unknown fractal kind: {kind!r}")
    im_max = (re_max - re_min) * height / width / 2.0
    return Viewport(re_min, re_max, -im_max, im_max, width, height)


def _escaped(z: complex) -> bool:
    return z.real * z.real + z.imag * z.imag > ESCAPE_RADIUS_SQUARED


def mandelbrot_iterations(viewport: Viewport, x: float, y: float, max_iter: int) -> int:
    """Steps of z -> z^2 + c until escape; ``max_iter + 1`` if none."""
    c = viewport.point(x, y)
    z = 0j
    for step in range(1, max_iter + 1):
        z = z * z + c
        if _escaped(z):
            return step
    return max(max_iter, 0) + 1


def julia_iterations(
    viewport: Viewport, x: float, y: float, max_iter: int, c: complex = DEFAULT_JULIA_C
) -> int:
    """Julia escape count starting from the pixel's point; counting starts at 2."""
    z = viewport.point(x, y)
    for step in range(1, max_iter):
        z = z * z + c
        if _escaped(z):
            return step + 1
    return max(max_iter, 1) + 1


def burning_ship_iterations(viewport: Viewport, x: float, y: float, max_iter: int) -> int:
    """Steps of the Burning Ship map completed before escape, at most ``max_iter``."""
    c = viewport.point(x, y)
    zx = zy = 0.0
    for step in range(max(max_iter, 0)):
        t = zx * zx - zy * zy + c.real
        zy = abs(2 * zx * zy - c.imag)
        zx = abs(t)
        if zx * zx + zy * zy > ESCAPE_RADIUS_SQUARED:
            return step
    return max(max_iter, 0)


def iterations(
    kind: FractalKind,
    viewport: Viewport,
    x: float,
    y: float,
    max_iter: int,
    c: complex = DEFAULT_JULIA_C,
) -> int:
    """Escape count for the given fractal at pixel (x, y)."""
    if kind is FractalKind.MANDELBROT:
        return mandelbrot_iterations(viewport, x, y, max_iter)
    if kind is FractalKind.JULIA:
        return julia_iterations(viewport, x, y, max_iter, c)
    if kind is FractalKind.BURNING_SHIP:
        return burning_ship_iterations(viewport, x, y, max_iter)
    raise ValueError(f"unknown fractal kind: {kind!r}")