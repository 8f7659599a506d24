from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from megadash.core.canvas import Surface
from megadash.core.errors import AnimationError
from megadash.core.resources import ImageResource
from megadash.entities.base import Entity

if TYPE_CHECKING:
    from megadash.scenes.base import AppLike

log = logging.getLogger(__name__)

NO_IMAGE = "none"


@dataclass(frozen=True)
class Frame:
    """Rectángulo de un frame dentro del spritesheet."""

    w: int
    h: int
    sx: int
    sy: int


@dataclass
class AnimClip:
    frames: list[Frame]
    loop: bool = True

    def __post_init__(self) -> None:
        if not self.frames:
            raise AnimationError("AnimClip sin frames")

    def __len__(self) -> int:
        return len(self.frames)

    def frame(self, index: int) -> Frame:
        if self.loop:
            return self.frames[index % len(self.frames)]
        return self.frames[max(0, min(index, len(self.frames) - 1))]


class Sprite(Entity):
    """
    Entidad respaldada por una región de un spritesheet.

    x, y: posición en el canvas (esquina superior izquierda)
    w, h: tamaño (puede cambiar si está animado)
    sx, sy: esquina del frame dentro del spritesheet
    src: ruta relativa a assets/, o "none" para no cargar nada
    """

    def __init__(
        self,
        x: float,
        y: float,
        w: int,
        h: int,
        sx: int,
        sy: int,
        src: str | None = NO_IMAGE,
    ) -> None:
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.sx = sx
        self.sy = sy
        self.src = src
        self.resource: ImageResource | None = None
        if src is not None and src != NO_IMAGE:
            self.resource = ImageResource(src)

    @property
    def ready(self) -> bool:
        return self.resource is not None and self.resource.ready

    def on_spawn(self, app: AppLike) -> None:
        if self.resource is not None and not self.resource.ready and not self.resource.pending:
            app.images.request(self.resource)

    def render(self, canvas: Surface) -> None:
        # hasta que la imagen llegue, no se dibuja nada
        if not self.ready:
            return
        canvas.blit_region(self.resource, (self.sx, self.sy, self.w, self.h), (self.x, self.y))

    def describe(self) -> str:
        return (
            f"SRC: {self.src} X: {self.x} Y: {self.y} "
            f"W: {self.w} H: {self.h} SX: {self.sx} SY: {self.sy}"
        )

    def apply_frame(self, frame: Frame) -> None:
        self.w, self.h = frame.w, frame.h
        self.sx, self.sy = frame.sx, frame.sy


class AnimatedSprite(Sprite):
    """Sprite con clips nombrados y un estado de animación activo."""

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
        animations: dict[str, AnimClip],
        state: str,
    ) -> None:
        super().__init__(x, y, w, h, sx, sy, src)
        self.animations = animations
        self.anim_state = ""
        self.set_state(state)

    def set_state(self, state: str) -> None:
        if state not in self.animations:
            raise AnimationError(
                f"{type(self).__name__}: estado {state!r} no existe "
                f"(hay {sorted(self.animations)})"
            )
        self.anim_state = state

    @property
    def clip(self) -> AnimClip:
        return self.animations[self.anim_state]
