from __future__ import annotations

import logging
from pathlib import Path
import sysconfig

from megadash.core.app import App
from megadash.core.config import load_window_config


def _share_path(*parts: str) -> Path:
    scheme = sysconfig.get_default_scheme()
    data = Path(sysconfig.get_path("data", scheme=scheme))
    return (data / "share" / "megadash").joinpath(*parts)


def _settings_path() -> Path:
    # instalado: <prefix>/share/megadash/settings.toml; en desarrollo, el del paquete
    installed = _share_path("settings.toml")
    if installed.is_file():
        return installed
    return Path(__file__).with_name("settings.toml")


def main() -> None:
    cfg = load_window_config(_settings_path())
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    App(cfg).run()


if __name__ == "__main__":
    main()
