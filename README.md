# fractscope

An interactive window for exploring three escape-time fractals: the
Mandelbrot set, a Julia set and the Burning Ship. You can pan, zoom,
change the iteration limit and switch or rotate colour palettes.

## Installation

```
pip install .
```

The window uses `pygame`. The fractal arithmetic uses `numpy`.

## Running

Start the explorer and name the fractal to open first:

```
fractscope mandle
fractscope julia
fractscope ship
```

With any other argument, or with no argument or more than one, it prints
a short usage message and exits with status 1.

The window is 1280×720. The chosen fractal is drawn as soon as the
window opens.

## Controls

| Input                  | Action                                                    |
|------------------------|-----------------------------------------------------------|
| Return                 | Reset the fractal chosen at start-up                      |
| M / J / B              | Switch to Mandelbrot / Julia / Burning Ship and reset     |
| H                      | Open or close the help menu                               |
| Arrow keys             | Move the view by a twentieth of its size                  |
| Left mouse drag        | Pan the view                                              |
| Mouse wheel            | Zoom in or out around the pointer (factor 1.5)            |
| Z / X                  | Zoom in / out around the centre (factor 1.2)              |
| I / O                  | Raise / lower the iteration limit                         |
| 1 – 5                  | Blue, red, green, neon or grey palette                    |
| P                      | Rotate the colour palette one step                        |
| 6                      | Toggle redrawing on every mouse move                      |
| W / S (Julia)          | Multiply the real part of *c* by 1.1 / 0.9                |
| A / D (Julia)          | Multiply the imaginary part of *c* by 1.5 / 0.5           |
| N (Julia)              | Toggle redrawing the Julia set on every mouse move        |
| Esc                    | Quit                                                      |

On the Burning Ship, I and O change the iteration limit by 5; on the
other fractals they scale it by 1.1. O does nothing once the limit is 4
or lower. Each W, S, A, D or N press in Julia mode also rotates the
palette one step after redrawing.

Every redraw prints the current view bounds, the Julia constant where it
applies, and the iteration limit to the terminal.

## Using it as a library

The pieces behind the window work without it:

```python
from fractscope.colors import blue_palette
from fractscope.fractals import FractalKind, default_viewport
from fractscope.render import describe, iteration_grid, render

view = default_viewport(FractalKind.MANDELBROT, 320, 180)
counts = iteration_grid(FractalKind.MANDELBROT, view, 200)
image = render(FractalKind.MANDELBROT, view, 200, palette=blue_palette())
print(describe(FractalKind.MANDELBROT, view, 200))
```

- `fractscope.fractals` has `FractalKind`, the `Viewport` that maps
  pixels onto the complex plane, `default_viewport`, and per-pixel escape
  counts: `mandelbrot_iterations`, `julia_iterations`,
  `burning_ship_iterations` and `iterations`.
- `fractscope.render` has `iteration_grid`, which returns a
  `(height, width)` array of escape counts; `render`, which maps those
  counts through a palette to packed `0xRRGGBB` values; `pick_color` for
  a single count; and `describe` for the printed summary.
- `fractscope.colors` has the `Palette` dataclass, with `colors()` and
  `shifted()`, and `green_palette`, `blue_palette`, `red_palette`,
  `grey_palette` and `funk_palette`.
- `fractscope.menu.menu_lines` gives the help text as `MenuLine`
  entries with their screen positions.
- `fractscope.explorer.Explorer` holds the interactive state and reacts
  to `Key` and `MouseButton` values through `press_key`, `press_mouse`,
  `release_mouse` and `move_mouse`, with no window involved. Each redraw
  stores the new image in `Explorer.image` and calls the optional
  listener. Esc raises `QuitRequested`.

## Limitations

- The window size is fixed at 1280×720 and cannot be resized.
- Images are only shown on screen. They cannot be saved to a file.
- Mouse movement in Julia mode only redraws the set. It does not change
  the constant *c*, which only the W, S, A and D keys change.