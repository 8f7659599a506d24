from __future__ import annotations

import math

from megadash.core.input import Direction, InputState
from megadash.entities.sprite import Sprite


class Background(Sprite):
    """
    Fondo que se desplaza en sentido contrario al input: simula la cámara
    moviendo el fondo. Nunca deja ver más allá de sus bordes.
    """

    def __init__(
        self,
        x: float,
        y: float,
        w: int,
        h: int,
        sx: int,
        sy: int,
        src: str | None,
        *,
        view_size: tuple[int, int],
        scroll_rate: float = 5.0,
    ) -> None:
        super().__init__(x, y, w, h, sx, sy, src)
        self.view_w, self.view_h = view_size
        self.scroll_rate = scroll_rate

    @property
    def min_x(self) -> float:
        return self.view_w - self.w

    @property
    def min_y(self) -> float:
        return self.view_h - self.h

    def update(self, dt: float, keys: InputState) -> None:
        modifier = math.ceil(dt / 24)
        distance = modifier * self.scroll_rate

        if Direction.LEFT in keys:
            self.x = min(self.x + distance, 0)
        if Direction.RIGHT in keys:
            self.x = max(self.x - distance, self.min_x)
        if Direction.UP in keys:
            self.y = min(self.y + distance, 0)
        if Direction.DOWN in keys:
            self.y = max(self.y - distance, self.min_y)
