from .config import GameConfig, load_window_config
from .errors import AnimationError, ConfigError, MegadashError
from .input import Direction, InputState

__all__ = [
    "GameConfig",
    "load_window_config",
    "MegadashError",
    "ConfigError",
    "AnimationError",
    "Direction",
    "InputState",
]
