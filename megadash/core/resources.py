"""Carga asíncrona de imágenes.

Cada ``ImageResource`` pasa de ``ready = False`` a ``ready = True`` una sola vez,
cuando el future de su carga se completa. El loop solo lee la bandera; solo el
callback del future la escribe.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable

import pygame

log = logging.getLogger(__name__)

ImageLoadFn = Callable[[str], pygame.Surface]


class ImageResource:
    def __init__(self, path: str) -> None:
        self.path = path
        self.image: pygame.Surface | None = None
        self._ready = False
        self._future: Future[pygame.Surface] | None = None

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def pending(self) -> bool:
        return self._future is not None and not self._future.done()

    def watch(self, future: Future[pygame.Surface]) -> None:
        """Engancha la señal de carga (one-shot)."""
        self._future = future
        future.add_done_callback(self._on_loaded)

    def _on_loaded(self, future: Future[pygame.Surface]) -> None:
        if self._ready:
            # monótono: una segunda señal no cambia nada
            return
        if future.cancelled():
            log.warning("Carga cancelada: %s", self.path)
            return
        exc = future.exception()
        if exc is not None:
            log.warning("No se pudo cargar %s: %s", self.path, exc)
            return
        self.image = future.result()
        self._ready = True
        log.debug("Imagen lista: %s", self.path)

    def __repr__(self) -> str:
        return f"ImageResource({self.path!r}, ready={self._ready})"


class ImageLoader:
    """Pool de hilos que resuelve rutas relativas a assets/ y carga imágenes."""

    def __init__(
        self,
        assets_root: Path | str,
        *,
        max_workers: int = 2,
        load_fn: ImageLoadFn | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.assets_root = Path(assets_root)
        self._load_fn = load_fn or pygame.image.load
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="img"
        )

    def path(self, rel: str) -> Path:
        return self.assets_root / rel

    def request(self, resource: ImageResource) -> Future[pygame.Surface]:
        full = self.path(resource.path).as_posix()
        log.debug("Cargando %s", full)
        future = self._executor.submit(self._load_fn, full)
        resource.watch(future)
        return future

    def shutdown(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
