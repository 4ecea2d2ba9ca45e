"""Interactive state of a fractal view: keys, mouse, zoom and panning."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import replace

import numpy as np

from fractscope.colors import (
    Palette,
    blue_palette,
    funk_palette,
    green_palette,
    grey_palette,
    red_palette,
)
from fractscope.fractals import (
    DEFAULT_JULIA_C,
    DEFAULT_MAX_ITER,
    FractalKind,
    Viewport,
    default_viewport,
)
from fractscope.render import render

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
LOCKED_ZOOM_FACTOR = 1.2
MOUSE_ZOOM_FACTOR = 1.5
PAN_DIVISOR = 20.0


class Key(enum.IntEnum):
    """Key codes understood by the explorer."""

    A = 0x00
    S = 0x01
    D = 0x02
    F = 0x03
    H = 0x04
    G = 0x05
    Z = 0x06
    X = 0x07
    C = 0x08
    V = 0x09
    B = 0x0B
    Q = 0x0C
    W = 0x0D
    E = 0x0E
    R = 0x0F
    Y = 0x10
    T = 0x11
    O = 0x1F
    U = 0x20
    I = 0x22  # noqa: E741
    P = 0x23
    L = 0x25
    J = 0x26
    K = 0x28
    N = 0x2D
    M = 0x2E
    CTRL = 0x100
    OPT = 0x105
    CMD = 0x103
    ESCAPE = 0x35
    SPACE = 0x31
    UP = 0x7E
    DOWN = 0x7D
    LEFT = 0x7B
    RIGHT = 0x7C
    MINUS = 0x1B
    PLUS = 0x18
    RETURN = 0x24
    NUM_0 = 0x10
    NUM_1 = 0x12
    NUM_2 = 0x13
    NUM_3 = 0x14
    NUM_4 = 0x15
    NUM_5 = 0x17
    NUM_6 = 0x16
    NUM_7 = 0x1A
    NUM_8 = 0x1C
    NUM_9 = 0x19


class MouseButton(enum.IntEnum):
    """Mouse buttons, with the wheel reported as buttons 4 and 5."""

    LEFT = 1
    RIGHT = 2
    MIDDLE = 3
    UP = 4
    DOWN = 5


class QuitRequested(Exception):
    """Raised when the user asks to leave the program."""


_INIT_KEYS = {Key.M: FractalKind.MANDELBROT, Key.J: FractalKind.JULIA, Key.B: FractalKind.BURNING_SHIP}
_ZOOM_KEYS = frozenset({Key.Z, Key.X, Key.MINUS, Key.PLUS, Key.L})
_ITER_KEYS = frozenset({Key.I, Key.O})
_COLOR_KEYS = frozenset({Key.NUM_1, Key.NUM_2, Key.NUM_3, Key.NUM_4, Key.NUM_5, Key.P})
_MOVE_KEYS = frozenset({Key.DOWN, Key.RIGHT, Key.UP, Key.LEFT})
_PARAM_KEYS = frozenset({Key.W, Key.S, Key.A, Key.D, Key.N})
_PALETTES: dict[int, Callable[[], Palette]] = {
    Key.NUM_1: blue_palette,
    Key.NUM_2: red_palette,
    Key.NUM_3: green_palette,
    Key.NUM_4: funk_palette,
    Key.NUM_5: grey_palette,
}


class Explorer:
    """The current fractal, its view, its colours and the input state.

    Every redraw stores the new image in ``image`` and then calls
    ``listener`` with the explorer, if one was given.
    """

    def __init__(
        self,
        kind: FractalKind,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        listener: Callable[[Explorer], None] | None = None,
    ) -> None:
        self.kind = kind
        self.width = width
        self.height = height
        self.listener = listener
        self.viewport: Viewport = default_viewport(kind, width, height)
        self.max_iter = DEFAULT_MAX_ITER
        self.c = DEFAULT_JULIA_C
        self.palette: Palette = grey_palette()
        self.active = False
        self.looping = False
        self.menu_open = False
        self.mouse_follow = False
        self.dragging = False
        self.mouse_x = 0
        self.mouse_y = 0
        self.drag_start = (0, 0)
        self.image: np.ndarray | None = None

    def start(self) -> None:
        """Initialise and draw the fractal chosen at construction."""
        self.init_fractal(self.kind)

    def init_fractal(self, kind: FractalKind) -> None:
        """Reset the view, iterations and colours for ``kind`` and draw it."""
        self.kind = kind
        self.viewport = default_viewport(kind, self.width, self.height)
        self.max_iter = DEFAULT_MAX_ITER
        if kind is FractalKind.JULIA:
            self.c = DEFAULT_JULIA_C
        if kind is not FractalKind.BURNING_SHIP:
            self.mouse_follow = False
        self.active = True
        self.looping = False
        self.palette = grey_palette()
        self.refresh()

    def refresh(self) -> None:
        """Redraw the current fractal."""
        self.image = render(self.kind, self.viewport, self.max_iter, self.c, self.palette)
        if self.listener is not None:
            self.listener(self)

    def press_key(self, key: int) -> None:
        """Handle a key press; raises :class:`QuitRequested` on escape."""
        if key == Key.RETURN:
            self.start()
        if key == Key.H:
            self.menu_open = not self.menu_open
            self.refresh()
        if key in _INIT_KEYS:
            self.init_fractal(_INIT_KEYS[key])
        if key == Key.ESCAPE:
            raise QuitRequested
        if self.active:
            self.modify_fractal(key)

    def modify_fractal(self, key: int) -> None:
        """Apply a key that changes the active fractal."""
        if key in _ZOOM_KEYS:
            self.zoom_locked(key)
            self.refresh()
        if key in _ITER_KEYS:
            self.change_iterations(key)
        if key in _COLOR_KEYS:
            self.choose_color(key)
        if key in _MOVE_KEYS:
            self.move(key)
        if key in _PARAM_KEYS:
            self.modify_params(key)
        if key == Key.NUM_6:
            self.toggle_palette_loop(key)

    def move(self, key: int) -> None:
        """Pan by a twentieth of the view in the arrow's direction and redraw."""
        vp = self.viewport
        step_re = vp.width_span() / PAN_DIVISOR
        step_im = vp.height_span() / PAN_DIVISOR
        if key == Key.DOWN:
            vp = replace(vp, im_min=vp.im_min - step_im, im_max=vp.im_max - step_im)
        if key == Key.RIGHT:
            vp = replace(vp, re_min=vp.re_min + step_re, re_max=vp.re_max + step_re)
        if key == Key.UP:
            vp = replace(vp, im_min=vp.im_min + step_im, im_max=vp.im_max + step_im)
        if key == Key.LEFT:
            vp = replace(vp, re_min=vp.re_min - step_re, re_max=vp.re_max - step_re)
        self.viewport = vp
        self.refresh()

    def modify_params(self, key: int) -> None:
        """Adjust the Julia constant or toggle mouse following (Julia only)."""
        if self.kind is not FractalKind.JULIA:
            return
        real, imag = self.c.real, self.c.imag
        if key == Key.W:
            real *= 1.1
        if key == Key.S:
            real *= 0.9
        if key == Key.A:
            imag *= 1.5
        if key == Key.D:
            imag *= 0.5
        if key == Key.N:
            self.mouse_follow = not self.mouse_follow
        self.c = complex(real, imag)
        self.refresh()
        self.palette = self.palette.shifted()

    def choose_color(self, key: int) -> None:
        """Switch or rotate the palette and redraw."""
        if not self.active:
            return
        if key in _PALETTES:
            self.palette = _PALETTES[key]()
        if key == Key.P:
            self.palette = self.palette.shifted()
        self.refresh()

    def change_iterations(self, key: int) -> None:
        """Raise or lower the iteration limit and redraw."""
        ship = self.kind is FractalKind.BURNING_SHIP
        if key == Key.I:
            self.max_iter = self.max_iter + 5 if ship else int(self.max_iter * 1.1)
        if key == Key.O and self.max_iter > 4:
            self.max_iter = self.max_iter - 5 if ship else int(self.max_iter / 1.1)
        self.refresh()

    def zoom_locked(self, key: int) -> None:
        """Zoom about the centre of the view: in on Z, out on X."""
        if key not in (Key.Z, Key.X):
            return
        factor = LOCKED_ZOOM_FACTOR if key == Key.Z else 1 / LOCKED_ZOOM_FACTOR
        vp = self.viewport
        center_re = vp.re_min + vp.width_span() / 2.0
        center_im = vp.im_min + vp.height_span() / 2.0
        self.viewport = replace(
            vp,
            re_min=center_re + (vp.re_min - center_re) / factor,
            re_max=center_re + (vp.re_max - center_re) / factor,
            im_min=center_im + (vp.im_min - center_im) / factor,
            im_max=center_im + (vp.im_max - center_im) / factor,
        )

    def zoom_at_mouse(self, zoom_in: bool) -> None:
        """Zoom keeping the point under the last mouse position fixed."""
        vp = self.viewport
        range_re = vp.width_span()
        range_im = vp.height_span()
        rel_x = self.mouse_x / self.width
        rel_y = (self.height - self.mouse_y) / self.height
        mouse_re = vp.re_min + rel_x * range_re
        mouse_im = vp.im_min + rel_y * range_im
        if zoom_in:
            new_re, new_im = range_re / MOUSE_ZOOM_FACTOR, range_im / MOUSE_ZOOM_FACTOR
        else:
            new_re, new_im = range_re * MOUSE_ZOOM_FACTOR, range_im * MOUSE_ZOOM_FACTOR
        re_min = mouse_re - rel_x * new_re
        im_min = mouse_im - rel_y * new_im
        self.viewport = replace(
            vp, re_min=re_min, re_max=re_min + new_re, im_min=im_min, im_max=im_min + new_im
        )

    def move_mouse(self, x: int, y: int) -> None:
        """Drag the view while the left button is held, else track the pointer."""
        if self.dragging:
            start_x, start_y = self.drag_start
            vp = self.viewport
            dx = (x - start_x) / self.width * vp.width_span()
            dy = (y - start_y) / self.height * vp.height_span()
            self.viewport = replace(
                vp,
                re_min=vp.re_min - dx,
                re_max=vp.re_max - dx,
                im_min=vp.im_min + dy,
                im_max=vp.im_max + dy,
            )
            self.drag_start = (x, y)
            self.refresh()
            return
        self.mouse_x = x
        self.mouse_y = y
        if self.looping or (self.kind is FractalKind.JULIA and self.mouse_follow):
            self.refresh()

    def press_mouse(self, button: int, x: int, y: int) -> None:
        """Start a drag on the left button; zoom on the wheel."""
        if button == MouseButton.LEFT:
            self.dragging = True
            self.drag_start = (x, y)
        elif button == MouseButton.UP:
            self.zoom_at_mouse(True)
            self.refresh()
        elif button == MouseButton.DOWN:
            self.zoom_at_mouse(False)
            self.refresh()

    def release_mouse(self, button: int, x: int, y: int) -> None:
        """End a drag when the left button is released."""
        if button == MouseButton.LEFT:
            self.dragging = False

    def toggle_palette_loop(self, key: int) -> None:
        """Toggle redrawing on every mouse move."""
        if key == Key.NUM_6:
            self.looping = not self.looping