from __future__ import annotations

import enum
from typing import Iterable, Iterator

import pygame


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

# Un toque en pantalla equivale a mantener derecha + abajo
TOUCH_DIRECTIONS: tuple[Direction, ...] = (Direction.RIGHT, Direction.DOWN)


class InputState:
    """
    Conjunto vivo de direcciones pulsadas.

    - Lo escriben los eventos de teclado/táctiles
    - Las entidades solo consultan pertenencia
    """

    def __init__(self, initial: Iterable[Direction] = ()) -> None:
        self._down: set[Direction] = set(initial)

    def press(self, *directions: Direction) -> None:
        self._down.update(directions)

    def release(self, *directions: Direction) -> None:
        for d in directions:
            self._down.discard(d)

    def clear(self) -> None:
        self._down.clear()

    def any_direction(self) -> bool:
        return bool(self._down)

    def __contains__(self, direction: object) -> bool:
        return direction in self._down

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._down)

    def __len__(self) -> int:
        return len(self._down)

    def __repr__(self) -> str:
        names = sorted(d.name for d in self._down)
        return f"InputState({names})"

    # ------------------------------------------------------------------
    def handle_event(self, ev: pygame.event.Event) -> bool:
        """Traduce un evento de pygame. Devuelve True si lo consumió."""
        if ev.type == pygame.KEYDOWN:
            direction = KEY_DIRECTIONS.get(ev.key)
            if direction is None:
                return False
            self.press(direction)
            return True

        if ev.type == pygame.KEYUP:
            direction = KEY_DIRECTIONS.get(ev.key)
            if direction is None:
                return False
            self.release(direction)
            return True

        if ev.type == pygame.FINGERDOWN:
            self.press(*TOUCH_DIRECTIONS)
            return True

        if ev.type == pygame.FINGERUP:
            self.release(*TOUCH_DIRECTIONS)
            return True

        # SDL sintetiza clicks a partir de toques: los tragamos para no
        # reaccionar dos veces al mismo dedo
        if ev.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            return bool(getattr(ev, "touch", False))

        return False
