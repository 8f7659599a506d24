"""Driver del loop: mide el delta real de cada tick y lo reparte a la escena."""

from __future__ import annotations

import logging
import math
from typing import Callable, Protocol

import pygame

from megadash.core.canvas import Surface
from megadash.core.input import InputState

log = logging.getLogger(__name__)


class SceneLike(Protocol):
    def update(self, dt: float, keys: InputState) -> None:
        ...

    def render(self, canvas: Surface) -> None:
        ...


class GameLoop:
    """
    Un tick = update + render.

    El delta se mide (no se asume): los ticks no se solapan pero tampoco
    compensan el retraso del anterior.
    """

    def __init__(
        self,
        scene: SceneLike,
        keys: InputState,
        canvas: Surface,
        *,
        clock: Callable[[], float] = pygame.time.get_ticks,
        on_fps: Callable[[float], None] | None = None,
        sample_every: int = 24,
    ) -> None:
        self.scene = scene
        self.keys = keys
        self.canvas = canvas
        self.clock = clock
        self.on_fps = on_fps
        self.sample_every = sample_every

        self.last_tick: float | None = None
        self.tick_count = 0
        self.last_fps: float | None = None

    def start(self) -> None:
        self.last_tick = self.clock()
        self.tick_count = 0

    def tick(self) -> float:
        if self.last_tick is None:
            self.start()

        now = self.clock()
        delta = now - self.last_tick

        self.scene.update(delta, self.keys)
        self.scene.render(self.canvas)

        self.last_tick = now
        self.tick_count += 1
        if self.tick_count >= self.sample_every:
            self._sample_fps(delta)
            self.tick_count = 0
        return delta

    def _sample_fps(self, delta: float) -> None:
        # muestra instantánea del tick actual, no un promedio
        fps = 1000.0 / delta if delta > 0 else math.inf
        self.last_fps = fps
        log.debug("FPS: %.2f", fps)
        if self.on_fps is not None:
            self.on_fps(fps)


class FpsDisplay:
    """Contador de FPS en pantalla; se actualiza cada vez que el loop publica."""

    def __init__(self, pos: tuple[int, int] = (8, 8)) -> None:
        self.pos = pos
        self.text = "FPS: --"

    def publish(self, fps: float) -> None:
        self.text = f"FPS: {fps}"

    def render(self, canvas) -> None:
        canvas.draw_text(self.text, self.pos)
