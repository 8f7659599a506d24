from __future__ import annotations

from typing import Protocol

import pygame

from megadash.core.errors import MegadashError
from megadash.core.resources import ImageResource

ColorLike = pygame.Color | str | tuple[int, int, int] | tuple[int, int, int, int]


class Surface(Protocol):
    """Lo mínimo que una entidad necesita para dibujarse."""

    width: int
    height: int

    def blit_region(
        self,
        resource: ImageResource,
        src: tuple[float, float, float, float],
        dest: tuple[float, float],
    ) -> None:
        ...

    def plot(self, x: int, y: int, color: ColorLike) -> None:
        ...


class Canvas:
    """Envoltorio fino sobre pygame.Surface."""

    _hud_font: pygame.font.Font | None = None

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen

    @property
    def width(self) -> int:
        return self.screen.get_width()

    @property
    def height(self) -> int:
        return self.screen.get_height()

    def clear(self, color: ColorLike = "black") -> None:
        self.screen.fill(color)

    def blit_region(
        self,
        resource: ImageResource,
        src: tuple[float, float, float, float],
        dest: tuple[float, float],
    ) -> None:
        if not resource.ready or resource.image is None:
            raise MegadashError(f"{resource!r} no está lista")
        sx, sy, w, h = src
        area = pygame.Rect(int(sx), int(sy), int(w), int(h))
        self.screen.blit(resource.image, (int(dest[0]), int(dest[1])), area)

    def plot(self, x: int, y: int, color: ColorLike) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.screen.set_at((x, y), color)

    def draw_text(self, text: str, pos: tuple[int, int], color: ColorLike = "white") -> None:
        font = self._get_hud_font()
        self.screen.blit(font.render(text, True, color), pos)

    @classmethod
    def _get_hud_font(cls) -> pygame.font.Font:
        if cls._hud_font is None:
            cls._hud_font = pygame.font.Font(None, 18)
        return cls._hud_font
