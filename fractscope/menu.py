"""Help text drawn over the fractal."""

from __future__ import annotations

from dataclasses import dataclass

HELP_HINT = "TO OPEN OR CLOSE HELP MENU PRESS H"

_HELP_ENTRIES = (
    (30, "ARROWS | WASD - MOVE FRACTAL"),
    (50, "RETURN - INIT FRACTALS"),
    (70, "Z or X or Mouse wheel - ZOOM IN OR OUT"),
    (90, "I or O - INCREASE/DECREASE ITERATIONS"),
    (110, "WASD OR MOUSE IF ACTIVATED - PLAY WITH JULIA"),
    (130, "N - Activate mouse movement in Julia"),
    (150, "1 to 5 - CHANGE COLOR"),
    (170, "P - ROTATE COLOR PALETTE"),
    (210, "+ o - - ARROW SENSITIVITY"),
    (230, "ESC - EXIT PROGRAM"),
)


@dataclass(frozen=True)
class MenuLine:
    """One line of text and where its top-left corner goes on screen."""

    x: int
    y: int
    text: str


def menu_lines(open_menu: bool) -> list[MenuLine]:
    """Lines to draw: the hint always, the full help when the menu is open."""
    lines = [MenuLine(20, 10, HELP_HINT)]
    if open_menu:
        lines.extend(MenuLine(30, y, text) for y, text in _HELP_ENTRIES)
    return lines