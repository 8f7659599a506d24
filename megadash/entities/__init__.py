
from .base import Entity
from .sprite import AnimatedSprite, AnimClip, Frame, Sprite
from .background import Background
from .met import Met
from .megaman import Megaman
from .pixel import Pixel
__all__ = [
    "Entity",
    "Sprite",
    "AnimatedSprite",
    "AnimClip",
    "Frame",
    "Background",
    "Met",
    "Megaman",
    "Pixel",
]
