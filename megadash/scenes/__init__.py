from .base import Scene
from .main import MainScene

__all__ = [
    "Scene",
    "MainScene",
]
