from __future__ import annotations

from megadash.core.input import InputState
from megadash.entities.sprite import AnimatedSprite, AnimClip, Frame

NEUTRAL = "neutral"
DASH = "dash"


def megaman_animations() -> dict[str, AnimClip]:
    return {
        NEUTRAL: AnimClip([Frame(30, 35, 213, 17)]),
        DASH: AnimClip(
            [
                Frame(30, 35, 285, 123),
                Frame(42, 35, 315, 123),
            ],
            loop=False,
        ),
    }


class Megaman(AnimatedSprite):
    """
    Personaje del jugador. Máquina de estados neutral <-> dash.

    En dash, ``anim_seq`` (0 o 1) indexa el clip: avanza mientras haya input y
    se deshace al soltar; solo vuelve a neutral cuando llega a 0.
    """

    SPRITESHEET = "img/x-r.gif"

    def __init__(self, x: float, y: float) -> None:
        super().__init__(
            x, y,
            40, 35,
            212, 17,
            self.SPRITESHEET,
            animations=megaman_animations(),
            state=NEUTRAL,
        )
        self.anim_seq = 0
        # orientación: el movimiento está desactivado, se conserva el dato
        self.facing = "r"

    def update(self, dt: float, keys: InputState) -> None:
        if keys.any_direction():
            if self.anim_state == NEUTRAL:
                self.set_state(DASH)
                self.anim_seq = 0
            else:
                self.anim_seq = min(self.anim_seq + 1, 1)
        elif self.anim_state == DASH:
            if self.anim_seq == 0:
                self.set_state(NEUTRAL)
            else:
                self.anim_seq = max(self.anim_seq - 1, 0)

        # índice exacto: un anim_seq fuera de rango es un bug, no se recorta
        self.apply_frame(self.clip.frames[self.anim_seq])
