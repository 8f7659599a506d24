from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from megadash.core.errors import ConfigError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    width: int = 640
    height: int = 480
    title: str = "Megadash"

    # setInterval clásico: ~24 ticks por segundo
    tick_interval_ms: int = 41
    fps_sample_every: int = 24

    assets_root: str = "assets"
    log_level: str = "INFO"

    show_fps: bool = True
    debug_pixel: bool = False
    scroll_rate: float = 5.0

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)


# (tabla, clave) -> (campo, tipos aceptados)
_FIELDS: dict[tuple[str, str], tuple[str, tuple[type, ...]]] = {
    ("window", "width"): ("width", (int,)),
    ("window", "height"): ("height", (int,)),
    ("window", "title"): ("title", (str,)),
    ("loop", "tick_interval_ms"): ("tick_interval_ms", (int,)),
    ("loop", "fps_sample_every"): ("fps_sample_every", (int,)),
    ("assets", "root"): ("assets_root", (str,)),
    ("logging", "level"): ("log_level", (str,)),
    ("debug", "show_fps"): ("show_fps", (bool,)),
    ("debug", "pixel"): ("debug_pixel", (bool,)),
    ("background", "scroll_rate"): ("scroll_rate", (int, float)),
}


def _coerce(table: str, key: str, value: Any, types: tuple[type, ...]) -> Any:
    # bool es subclase de int: no aceptarlo como número
    if isinstance(value, bool) and bool not in types:
        raise ConfigError(f"[{table}].{key}: se esperaba {types[0].__name__}, llegó bool")
    if not isinstance(value, types):
        raise ConfigError(
            f"[{table}].{key}: se esperaba {types[0].__name__}, llegó {type(value).__name__}"
        )
    if float in types:
        return float(value)
    return value


def parse_config(data: dict[str, Any]) -> GameConfig:
    values: dict[str, Any] = {}
    for (table, key), (name, types) in _FIELDS.items():
        section = data.get(table)
        if not isinstance(section, dict) or key not in section:
            continue
        values[name] = _coerce(table, key, section[key], types)

    cfg = GameConfig(**values)
    if cfg.width <= 0 or cfg.height <= 0:
        raise ConfigError(f"tamaño de ventana inválido: {cfg.size}")
    if cfg.tick_interval_ms <= 0 or cfg.fps_sample_every <= 0:
        raise ConfigError("[loop] necesita valores positivos")
    return cfg


def load_window_config(path: Path | str) -> GameConfig:
    """Lee settings.toml; si no existe, devuelve los valores por defecto."""
    path = Path(path)
    if not path.is_file():
        log.warning("No existe %s, usando configuración por defecto", path)
        return GameConfig()

    with path.open("rb") as fh:
        try:
            data = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc

    cfg = parse_config(data)
    log.debug("Configuración cargada de %s: %s", path, cfg)
    return cfg
