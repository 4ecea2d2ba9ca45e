"""Command-line entry point that opens the fractal window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import numpy as np
import pygame

from fractscope.explorer import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    Explorer,
    Key,
    MouseButton,
    QuitRequested,
)
from fractscope.fractals import FractalKind
from fractscope.menu import menu_lines
from fractscope.render import describe

USAGE = (
    "Error\n"
    'Usage : fractscope "fractal wanted"\n'
    "Available = mandle ,julia or ship\n"
    "Once in program ; press h for help with parameters"
)

_NAMES = {
    "mandle": FractalKind.MANDELBROT,
    "julia": FractalKind.JULIA,
    "ship": FractalKind.BURNING_SHIP,
}

_KEYS = {getattr(pygame, f"K_{name.lower()}"): Key[name] for name in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
_KEYS.update({getattr(pygame, f"K_{digit}"): Key[f"NUM_{digit}"] for digit in range(10)})
_KEYS.update(
    {
        pygame.K_RETURN: Key.RETURN,
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP_MINUS: Key.MINUS,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_LCTRL: Key.CTRL,
        pygame.K_LALT: Key.OPT,
        pygame.K_LMETA: Key.CMD,
    }
)

_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    4: MouseButton.UP,
    5: MouseButton.DOWN,
}


def parse_fractal(name: str) -> FractalKind:
    """Fractal named on the command line; raises ValueError for unknown names."""
    try:
        return _NAMES[name]
    except KeyError:
        raise ValueError(f"unknown fractal: {name!r}") from None


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


class _Window:
    """Draws each new frame and prints the view summary."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.screen = screen
        self.font = font

    def __call__(self, explorer: Explorer) -> None:
        print(describe(explorer.kind, explorer.viewport, explorer.max_iter, explorer.c), end="")
        self.draw(explorer)

    def draw(self, explorer: Explorer) -> None:
        if explorer.image is not None:
            image = explorer.image
            rgb = np.stack(((image >> 16) & 0xFF, (image >> 8) & 0xFF, image & 0xFF), axis=-1)
            surface = pygame.surfarray.make_surface(rgb.astype(np.uint8).swapaxes(0, 1))
            self.screen.blit(surface, (0, 0))
        text_color = _rgb(explorer.palette.w)
        for line in menu_lines(explorer.menu_open):
            self.screen.blit(self.font.render(line.text, True, text_color), (line.x, line.y))
        pygame.display.flip()


def _run(kind: FractalKind) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((DEFAULT_WIDTH, DEFAULT_HEIGHT))
        pygame.display.set_caption("fractscope")
        window = _Window(screen, pygame.font.Font(None, 22))
        explorer = Explorer(kind, DEFAULT_WIDTH, DEFAULT_HEIGHT, listener=window)
        explorer.start()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    key = _KEYS.get(event.key)
                    if key is not None:
                        explorer.press_key(key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    button = _BUTTONS.get(event.button)
                    if button is not None:
                        explorer.press_mouse(button, *event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    button = _BUTTONS.get(event.button)
                    if button is not None:
                        explorer.release_mouse(button, *event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    explorer.move_mouse(*event.pos)
            clock.tick(60)
    except QuitRequested:
        return
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the explorer on the fractal named in ``argv``; 1 on bad usage."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    try:
        kind = parse_fractal(args[0])
    except ValueError:
        print(USAGE)
        return 1
    _run(kind)
    return 0


if __name__ == "__main__":
    sys.exit(main())