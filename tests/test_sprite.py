import pytest

from conftest import make_ready
from megadash.core.errors import AnimationError
from megadash.entities import AnimatedSprite, AnimClip, Frame, Sprite


def test_render_skips_until_ready(canvas, keys):
    s = Sprite(10, 20, 30, 40, 5, 6, "img/x.png")
    s.update(41, keys)
    s.render(canvas)
    assert canvas.calls == []

    make_ready(s.resource)
    s.render(canvas)
    s.render(canvas)
    assert canvas.calls == [
        ("blit", "img/x.png", (5, 6, 30, 40), (10, 20)),
        ("blit", "img/x.png", (5, 6, 30, 40), (10, 20)),
    ]


def test_none_path_has_no_resource(canvas):
    s = Sprite(0, 0, 1, 1, 0, 0, "none")
    assert s.resource is None
    assert not s.ready
    s.render(canvas)
    assert canvas.calls == []


def test_on_spawn_requests_once():
    from conftest import FakeLoader

    class _App:
        images = FakeLoader()

    s = Sprite(0, 0, 1, 1, 0, 0, "img/x.png")
    s.on_spawn(_App)
    first = _App.images.requests["img/x.png"]
    s.on_spawn(_App)
    assert _App.images.requests["img/x.png"] is first


def test_describe():
    s = Sprite(1, 2, 3, 4, 5, 6, "img/x.png")
    assert s.describe() == "SRC: img/x.png X: 1 Y: 2 W: 3 H: 4 SX: 5 SY: 6"


def test_empty_clip_is_an_error():
    with pytest.raises(AnimationError):
        AnimClip([])


def test_looping_clip_wraps_and_one_shot_clamps():
    frames = [Frame(1, 1, i, 0) for i in range(3)]
    assert AnimClip(frames, loop=True).frame(4) == frames[1]
    assert AnimClip(frames, loop=False).frame(4) == frames[2]
    assert AnimClip(frames, loop=False).frame(0) == frames[0]


def test_unknown_state_fails_fast():
    clips = {"idle": AnimClip([Frame(1, 1, 0, 0)])}
    with pytest.raises(AnimationError):
        AnimatedSprite(0, 0, 1, 1, 0, 0, "none", animations=clips, state="run")

    s = AnimatedSprite(0, 0, 1, 1, 0, 0, "none", animations=clips, state="idle")
    with pytest.raises(AnimationError):
        s.set_state("run")
    assert s.anim_state == "idle"


def test_apply_frame_copies_rect():
    s = Sprite(0, 0, 1, 1, 0, 0, "none")
    s.apply_frame(Frame(42, 35, 315, 123))
    assert (s.w, s.h, s.sx, s.sy) == (42, 35, 315, 123)
