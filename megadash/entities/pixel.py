from __future__ import annotations

import math
import random

from megadash.core.canvas import Surface
from megadash.core.input import InputState
from megadash.entities.base import Entity


class Pixel(Entity):
    """Un único píxel que cambia de color cada tick. Solo para depurar."""

    def __init__(
        self,
        x: int,
        y: int,
        r: int = 255,
        g: int = 255,
        b: int = 255,
        a: int = 255,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.x = x
        self.y = y
        self.r, self.g, self.b, self.a = r, g, b, a
        self._rng = rng or random.Random()

    @property
    def color(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def warp_color(self) -> None:
        self.r = math.ceil(self._rng.random() * 255)
        self.g = math.ceil(self._rng.random() * 255)
        self.b = math.ceil(self._rng.random() * 255)

    def update(self, dt: float, keys: InputState) -> None:
        self.warp_color()

    def render(self, canvas: Surface) -> None:
        canvas.plot(int(self.x), int(self.y), self.color)
