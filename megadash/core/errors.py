from __future__ import annotations


class MegadashError(Exception):
    """Error base del juego."""


class ConfigError(MegadashError):
    """settings.toml con valores de tipo incorrecto."""


class AnimationError(MegadashError):
    """Clip vacío o estado de animación inexistente (error de programación)."""
