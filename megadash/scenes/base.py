from __future__ import annotations
from typing import TYPE_CHECKING, Protocol

import pygame

if TYPE_CHECKING:
    from megadash.core.canvas import Surface
    from megadash.core.config import GameConfig
    from megadash.core.input import InputState
    from megadash.core.resources import ImageLoader


class AppLike(Protocol):
    running: bool
    config: GameConfig
    images: ImageLoader


class Scene:
    def on_enter(self, app: AppLike) -> None:
        pass

    def on_exit(self, app: AppLike) -> None:
        pass

    def handle_event(self, app: AppLike, ev: pygame.event.Event) -> None:
        pass

    def update(self, dt: float, keys: InputState) -> None:
        pass

    def render(self, canvas: Surface) -> None:
        pass
