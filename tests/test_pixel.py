import random

from megadash.core.input import InputState
from megadash.entities import Pixel


def test_update_warps_color_in_range(canvas):
    px = Pixel(3, 4, 0, 0, 0, 255, rng=random.Random(7))
    px.update(41, InputState())
    for channel in (px.r, px.g, px.b):
        assert 0 <= channel <= 255
    assert px.a == 255

    px.render(canvas)
    assert canvas.calls == [("plot", (3, 4), px.color)]


def test_same_seed_same_colors():
    a = Pixel(0, 0, rng=random.Random(1))
    b = Pixel(0, 0, rng=random.Random(1))
    a.warp_color()
    b.warp_color()
    assert a.color == b.color
