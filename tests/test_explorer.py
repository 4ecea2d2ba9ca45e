import pytest

from fractscope.colors import blue_palette, funk_palette, grey_palette, red_palette
from fractscope.explorer import Explorer, Key, MouseButton, QuitRequested
from fractscope.fractals import (
    DEFAULT_JULIA_C,
    DEFAULT_MAX_ITER,
    FractalKind,
    default_viewport,
)

WIDTH, HEIGHT = 40, 30


def make(kind=FractalKind.MANDELBROT, start=True):
    calls = []
    explorer = Explorer(kind, WIDTH, HEIGHT, listener=calls.append)
    if start:
        explorer.start()
    return explorer, calls


def test_key_codes_match_keyboard_layout():
    assert Key(0x24) is Key.RETURN
    assert Key(0x35) is Key.ESCAPE
    assert MouseButton(4) is MouseButton.UP


def test_start_initialises_view_and_draws():
    explorer, calls = make()
    assert explorer.viewport == default_viewport(FractalKind.MANDELBROT, WIDTH, HEIGHT)
    assert explorer.max_iter == DEFAULT_MAX_ITER
    assert explorer.active
    assert explorer.image.shape == (HEIGHT, WIDTH)
    assert calls == [explorer]


def test_inactive_explorer_ignores_modifying_keys():
    explorer, calls = make(start=False)
    explorer.press_key(Key.I)
    assert explorer.max_iter == DEFAULT_MAX_ITER
    assert calls == []


def test_escape_raises_quit():
    explorer, _ = make()
    with pytest.raises(QuitRequested):
        explorer.press_key(Key.ESCAPE)


def test_h_toggles_menu_and_redraws():
    explorer, calls = make()
    explorer.press_key(Key.H)
    assert explorer.menu_open
    explorer.press_key(Key.H)
    assert not explorer.menu_open
    assert len(calls) == 3


@pytest.mark.parametrize(
    "key, kind",
    [(Key.M, FractalKind.MANDELBROT), (Key.J, FractalKind.JULIA), (Key.B, FractalKind.BURNING_SHIP)],
)
def test_fractal_keys_switch_kind(key, kind):
    explorer, _ = make(FractalKind.JULIA if kind is not FractalKind.JULIA else FractalKind.MANDELBROT)
    explorer.press_key(key)
    assert explorer.kind is kind
    assert explorer.viewport == default_viewport(kind, WIDTH, HEIGHT)


def test_t_key_does_not_change_fractal():
    explorer, _ = make(FractalKind.JULIA)
    explorer.press_key(Key.T)
    assert explorer.kind is FractalKind.JULIA


def test_return_resets_view():
    explorer, _ = make()
    explorer.press_key(Key.RIGHT)
    explorer.press_key(Key.I)
    explorer.press_key(Key.RETURN)
    assert explorer.viewport == default_viewport(FractalKind.MANDELBROT, WIDTH, HEIGHT)
    assert explorer.max_iter == DEFAULT_MAX_ITER


def test_arrow_moves_by_a_twentieth():
    explorer, _ = make()
    before = explorer.viewport
    explorer.press_key(Key.RIGHT)
    after = explorer.viewport
    assert after.re_min - before.re_min == pytest.approx(before.width_span() / 20)
    assert after.width_span() == pytest.approx(before.width_span())
    assert after.im_min == before.im_min


def test_up_then_down_returns():
    explorer, _ = make()
    before = explorer.viewport
    explorer.press_key(Key.UP)
    assert explorer.viewport.im_max > before.im_max
    explorer.press_key(Key.DOWN)
    assert explorer.viewport.im_min == pytest.approx(before.im_min)
    assert explorer.viewport.im_max == pytest.approx(before.im_max)


def test_locked_zoom_keeps_centre_and_scales():
    explorer, _ = make()
    before = explorer.viewport
    explorer.press_key(Key.Z)
    after = explorer.viewport
    assert after.width_span() == pytest.approx(before.width_span() / 1.2)
    assert (after.re_min + after.re_max) / 2 == pytest.approx((before.re_min + before.re_max) / 2)
    assert (after.im_min + after.im_max) / 2 == pytest.approx((before.im_min + before.im_max) / 2)
    explorer.press_key(Key.X)
    assert explorer.viewport.width_span() == pytest.approx(before.width_span())


def test_plus_key_redraws_without_zooming():
    explorer, calls = make()
    before = explorer.viewport
    explorer.press_key(Key.PLUS)
    assert explorer.viewport == before
    assert len(calls) == 2


def test_iterations_grow_and_shrink_for_mandelbrot():
    explorer, _ = make()
    explorer.press_key(Key.I)
    assert explorer.max_iter == int(DEFAULT_MAX_ITER * 1.1)
    explorer.press_key(Key.O)
    assert explorer.max_iter <= int(DEFAULT_MAX_ITER * 1.1)
    assert explorer.max_iter < int(DEFAULT_MAX_ITER * 1.1)


def test_iterations_step_by_five_for_ship():
    explorer, _ = make(FractalKind.BURNING_SHIP)
    explorer.press_key(Key.I)
    assert explorer.max_iter == DEFAULT_MAX_ITER + 5
    explorer.press_key(Key.O)
    assert explorer.max_iter == DEFAULT_MAX_ITER


def test_iterations_do_not_drop_below_floor():
    explorer, _ = make(FractalKind.BURNING_SHIP)
    explorer.max_iter = 4
    explorer.press_key(Key.O)
    assert explorer.max_iter == 4


def test_julia_constant_changes_and_palette_shifts():
    explorer, _ = make(FractalKind.JULIA)
    explorer.press_key(Key.W)
    assert explorer.c.real == pytest.approx(DEFAULT_JULIA_C.real * 1.1)
    assert explorer.c.imag == pytest.approx(DEFAULT_JULIA_C.imag)
    assert explorer.palette == grey_palette().shifted()
    explorer.press_key(Key.D)
    assert explorer.c.imag == pytest.approx(DEFAULT_JULIA_C.imag * 0.5)


def test_n_toggles_mouse_follow_for_julia():
    explorer, _ = make(FractalKind.JULIA)
    explorer.press_key(Key.N)
    assert explorer.mouse_follow
    explorer.press_key(Key.N)
    assert not explorer.mouse_follow


def test_params_ignored_outside_julia():
    explorer, calls = make()
    explorer.press_key(Key.W)
    assert explorer.c == DEFAULT_JULIA_C
    assert explorer.palette == grey_palette()
    assert len(calls) == 1


@pytest.mark.parametrize(
    "key, factory",
    [(Key.NUM_1, blue_palette), (Key.NUM_2, red_palette), (Key.NUM_4, funk_palette)],
)
def test_number_keys_choose_palette(key, factory):
    explorer, _ = make()
    explorer.press_key(key)
    assert explorer.palette == factory()


def test_p_rotates_palette():
    explorer, _ = make()
    explorer.press_key(Key.P)
    assert explorer.palette == grey_palette().shifted()


def test_six_toggles_looping():
    explorer, _ = make()
    explorer.press_key(Key.NUM_6)
    assert explorer.looping
    explorer.press_key(Key.NUM_6)
    assert not explorer.looping


def test_mouse_zoom_keeps_point_under_pointer():
    explorer, _ = make()
    explorer.move_mouse(10, 20)
    before = explorer.viewport
    x_frac = 10 / WIDTH
    y_frac = (HEIGHT - 20) / HEIGHT
    point_before = (
        before.re_min + x_frac * before.width_span(),
        before.im_min + y_frac * before.height_span(),
    )
    explorer.press_mouse(MouseButton.UP, 10, 20)
    after = explorer.viewport
    assert after.width_span() == pytest.approx(before.width_span() / 1.5)
    assert after.re_min + x_frac * after.width_span() == pytest.approx(point_before[0])
    assert after.im_min + y_frac * after.height_span() == pytest.approx(point_before[1])


def test_mouse_zoom_in_then_out_restores_span():
    explorer, _ = make()
    before = explorer.viewport
    explorer.press_mouse(MouseButton.UP, 0, 0)
    explorer.press_mouse(MouseButton.DOWN, 0, 0)
    assert explorer.viewport.width_span() == pytest.approx(before.width_span())
    assert explorer.viewport.height_span() == pytest.approx(before.height_span())


def test_drag_pans_view():
    explorer, calls = make()
    before = explorer.viewport
    explorer.press_mouse(MouseButton.LEFT, 10, 10)
    explorer.move_mouse(20, 10)
    after = explorer.viewport
    assert before.re_min - after.re_min == pytest.approx(10 / WIDTH * before.width_span())
    assert after.im_min == pytest.approx(before.im_min)
    assert len(calls) == 2
    explorer.release_mouse(MouseButton.LEFT, 20, 10)
    explorer.move_mouse(30, 10)
    assert explorer.viewport == after
    assert (explorer.mouse_x, explorer.mouse_y) == (30, 10)


def test_mouse_move_redraws_only_when_following():
    explorer, calls = make(FractalKind.JULIA)
    explorer.move_mouse(5, 5)
    assert len(calls) == 1
    explorer.press_key(Key.N)
    count = len(calls)
    explorer.move_mouse(6, 6)
    assert len(calls) == count + 1