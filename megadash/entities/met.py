from __future__ import annotations

import math

from megadash.core.input import InputState
from megadash.entities.sprite import AnimatedSprite, AnimClip, Frame


def met_animations() -> dict[str, AnimClip]:
    return {
        "neutral": AnimClip([Frame(20, 20, 60, 16)]),
        "walking": AnimClip(
            [
                Frame(20, 20, 79, 16),
                Frame(20, 20, 56, 16),
                Frame(20, 20, 103, 16),
                Frame(20, 20, 56, 16),
            ],
            loop=True,
        ),
    }


class Met(AnimatedSprite):
    """Enemigo que camina en el sitio: animación en bucle, ignora el input."""

    SPRITESHEET = "img/mm-enemies.png"
    WALK_STEP = 0.4  # frames por tick

    def __init__(self, x: float, y: float, *, state: str = "walking") -> None:
        super().__init__(
            x, y,
            20, 20,
            60, 16,
            self.SPRITESHEET,
            animations=met_animations(),
            state=state,
        )
        self.ticks = 0

    @property
    def anim_seq(self) -> float:
        # contador entero * paso: evita acumular error de coma flotante
        return self.ticks * self.WALK_STEP

    @property
    def frame_index(self) -> int:
        return math.floor(self.anim_seq) % len(self.clip)

    def update(self, dt: float, keys: InputState) -> None:
        self.ticks += 1
        self.apply_frame(self.clip.frame(math.floor(self.anim_seq)))
