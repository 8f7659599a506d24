from __future__ import annotations

import logging

from megadash.core.canvas import Surface
from megadash.core.input import InputState
from megadash.entities import Background, Entity, Megaman, Met, Pixel, Sprite
from megadash.scenes.base import AppLike, Scene

log = logging.getLogger(__name__)

BACKGROUND_SRC = "img/smb-bg.jpg"
BACKGROUND_SIZE = (2560, 1600)


class MainScene(Scene):
    """
    Lista ordenada de entidades.

    El orden de inserción es el orden de dibujo: el fondo primero, los
    actores después.
    """

    def __init__(self) -> None:
        self.entities: list[Entity] = []
        self._app: AppLike | None = None

    def add_entity(self, entity: Entity) -> Entity:
        self.entities.append(entity)
        if self._app is not None:
            entity.on_spawn(self._app)
        return entity

    def on_enter(self, app: AppLike) -> None:
        self._app = app
        for ent in self.entities:
            ent.on_spawn(app)

        if not self.entities:
            self.populate(app)

    def populate(self, app: AppLike) -> None:
        cfg = app.config
        cx, cy = cfg.center

        self.add_entity(
            Background(
                0, 0,
                *BACKGROUND_SIZE,
                0, 0,
                BACKGROUND_SRC,
                view_size=cfg.size,
                scroll_rate=cfg.scroll_rate,
            )
        )
        self.add_entity(Megaman(cx, cy))
        self.add_entity(Met(cx + 7, cy - 17))

        if cfg.debug_pixel:
            self.add_entity(Pixel(int(cx), int(cy) - 40))

        for ent in self.entities:
            if isinstance(ent, Sprite):
                log.debug("%s", ent.describe())

    def on_exit(self, app: AppLike) -> None:
        self._app = None

    def update(self, dt: float, keys: InputState) -> None:
        for ent in self.entities:
            ent.update(dt, keys)

    def render(self, canvas: Surface) -> None:
        for ent in self.entities:
            ent.render(canvas)
