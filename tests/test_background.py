import itertools

import pytest

from megadash.core.input import Direction, InputState
from megadash.entities import Background

VIEW = (640, 480)


def _bg(**kw):
    return Background(0, 0, 2560, 1600, 0, 0, "none", view_size=VIEW, **kw)


def test_right_scrolls_left_by_ceil_modifier():
    bg = _bg()
    bg.update(41, InputState([Direction.RIGHT]))
    # ceil(41 / 24) = 2 -> 2 * 5.0
    assert bg.x == -10.0
    assert bg.y == 0


def test_zero_delta_does_not_move():
    bg = _bg()
    bg.update(0, InputState([Direction.RIGHT, Direction.DOWN]))
    assert (bg.x, bg.y) == (0, 0)


def test_left_and_up_clamp_at_origin():
    bg = _bg()
    bg.update(500, InputState([Direction.LEFT, Direction.UP]))
    assert (bg.x, bg.y) == (0, 0)


def test_diagonal_scroll_moves_both_axes():
    bg = _bg(scroll_rate=2.0)
    bg.update(24, InputState([Direction.RIGHT, Direction.DOWN]))
    assert (bg.x, bg.y) == (-2.0, -2.0)


def test_clamps_at_far_edges():
    bg = _bg()
    bg.update(100_000, InputState([Direction.RIGHT, Direction.DOWN]))
    assert bg.x == 640 - 2560
    assert bg.y == 480 - 1600


@pytest.mark.parametrize("dt", [0, 1, 24, 41, 250, 10_000])
def test_position_stays_in_bounds(dt):
    bg = _bg()
    combos = [
        set(c)
        for n in range(len(Direction) + 1)
        for c in itertools.combinations(Direction, n)
    ]
    for _ in range(3):
        for combo in combos:
            bg.update(dt, InputState(combo))
            assert 640 - 2560 <= bg.x <= 0
            assert 480 - 1600 <= bg.y <= 0
