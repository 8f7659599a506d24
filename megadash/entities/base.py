from __future__ import annotations


from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from megadash.core.canvas import Surface
    from megadash.core.input import InputState
    from megadash.scenes.base import AppLike


class Entity:
    """
    Unidad básica del juego (Drawable).

    - No conoce escenas
    - No lee dispositivos: recibe el InputState ya traducido
    - No gestiona el loop
    """

    def on_spawn(self, app: AppLike) -> None:
        """Se llama cuando la entidad entra en escena."""
        pass

    def update(self, dt: float, keys: InputState) -> None:
        """Lógica por tick. dt en milisegundos."""
        pass

    def render(self, canvas: Surface) -> None:
        """Dibujo. No debe tocar el estado."""
        pass
