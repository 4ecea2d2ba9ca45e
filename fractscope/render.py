"""Turning escape counts into pixels, and describing the current view."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import numpy as np

from fractscope.colors import RED, RESET, Palette, grey_palette
from fractscope.fractals import (
    DEFAULT_JULIA_C,
    ESCAPE_RADIUS_SQUARED,
    FractalKind,
    Viewport,
)

# (lower fraction, upper fraction, palette field): a count strictly above
# lower * max_iter and at most upper * max_iter takes that colour.  The gap
# between 0.05 and 0.06 is deliberate: those counts keep the background.
_BANDS = (
    (0.0, 0.01, "black"),
    (0.01, 0.02, "a"),
    (0.02, 0.03, "b"),
    (0.03, 0.04, "c"),
    (0.04, 0.05, "d"),
    (0.06, 0.07, "e"),
    (0.07, 0.08, "f"),
    (0.08, 0.09, "g"),
    (0.09, 0.10, "h"),
    (0.1, 0.2, "b"),
    (0.2, 0.3, "c"),
    (0.3, 0.4, "d"),
    (0.4, 0.6, "e"),
    (0.6, 0.7, "f"),
    (0.7, 0.8, "g"),
    (0.8, 0.9, "h"),
    (0.9, 1.0, "i"),
)

_Advance = Callable[
    [np.ndarray, np.ndarray, np.ndarray, np.ndarray], tuple[np.ndarray, np.ndarray]
]


def pick_color(count: int, max_iter: int, palette: Palette) -> int:
    """Colour of a pixel whose escape count is ``count``.

    Counts that reach ``max_iter`` exactly, and counts outside every band,
    are drawn in the palette's background colour.
    """
    if count == max_iter:
        return palette.black
    for low, high, field in _BANDS:
        if max_iter * low < count <= max_iter * high:
            if low == 0.0 and count <= 0:
                break
            return getattr(palette, field)
    return palette.black


def _plane(viewport: Viewport) -> tuple[np.ndarray, np.ndarray]:
    xs = np.arange(viewport.width, dtype=float)
    ys = np.arange(viewport.height, dtype=float)
    real = viewport.re_min + xs / viewport.width * viewport.width_span()
    imag = viewport.im_max - ys / viewport.height * viewport.height_span()
    re_grid, im_grid = np.meshgrid(real, imag)
    return re_grid, im_grid


def _quadratic(zx, zy, cx, cy):
    return zx * zx - zy * zy + cx, zx * zy + zy * zx + cy


def _burning(zx, zy, cx, cy):
    t = zx * zx - zy * zy + cx
    return np.abs(t), np.abs(2 * zx * zy - cy)


def _escape_counts(
    zx: np.ndarray,
    zy: np.ndarray,
    cx: np.ndarray,
    cy: np.ndarray,
    steps: Iterable[int],
    advance: _Advance,
    default: int,
    offset: int,
) -> np.ndarray:
    counts = np.full(zx.shape, default, dtype=np.int64)
    active = np.ones(zx.shape, dtype=bool)
    for step in steps:
        if not active.any():
            break
        nx, ny = advance(zx[active], zy[active], cx[active], cy[active])
        zx[active] = nx
        zy[active] = ny
        escaped = np.zeros_like(active)
        escaped[active] = nx * nx + ny * ny > ESCAPE_RADIUS_SQUARED
        counts[escaped] = step + offset
        active &= ~escaped
    return counts


def iteration_grid(
    kind: FractalKind,
    viewport: Viewport,
    max_iter: int,
    c: complex = DEFAULT_JULIA_C,
) -> np.ndarray:
    """Escape counts for every pixel, as a ``(height, width)`` array."""
    re_grid, im_grid = _plane(viewport)
    if kind is FractalKind.MANDELBROT:
        return _escape_counts(
            np.zeros_like(re_grid), np.zeros_like(im_grid), re_grid, im_grid,
            range(1, max_iter + 1), _quadratic, max(max_iter, 0) + 1, 0,
        )
    if kind is FractalKind.JULIA:
        return _escape_counts(
            re_grid.copy(), im_grid.copy(),
            np.full(re_grid.shape, c.real), np.full(im_grid.shape, c.imag),
            range(1, max_iter), _quadratic, max(max_iter, 1) + 1, 1,
        )
    if kind is FractalKind.BURNING_SHIP:
        return _escape_counts(
            np.zeros_like(re_grid), np.zeros_like(im_grid), re_grid, im_grid,
            range(max(max_iter, 0)), _burning, max(max_iter, 0), 0,
        )
    raise ValueError(f"unknown fractal kind: {kind!r}")


def render(
    kind: FractalKind,
    viewport: Viewport,
    max_iter: int,
    c: complex = DEFAULT_JULIA_C,
    palette: Palette | None = None,
) -> np.ndarray:
    """Image of the fractal as a ``(height, width)`` array of 0xRRGGBB values."""
    palette = palette if palette is not None else grey_palette()
    counts = iteration_grid(kind, viewport, max_iter, c)
    values, inverse = np.unique(counts, return_inverse=True)
    lookup = np.array(
        [pick_color(int(value), max_iter, palette) for value in values],
        dtype=np.uint32,
    )
    return lookup[inverse].reshape(counts.shape)


def describe(
    kind: FractalKind,
    viewport: Viewport,
    max_iter: int,
    c: complex = DEFAULT_JULIA_C,
) -> str:
    """Coloured summary of the view, as printed after each redraw."""
    lines = [
        f"{RED}{kind.title}",
        f"min_val: {viewport.re_min:.6f}, max_val: {viewport.re_max:.6f}",
        f"im_min: {viewport.im_min:.6f}, im_max: {viewport.im_max:.6f}",
    ]
    if kind is FractalKind.JULIA:
        lines.append(f"c1: {c.real:.6f}, c2: {c.imag:.6f}")
    lines.append(f"max_i: {max_iter}")
    return "\n".join(lines) + "\n" + RESET