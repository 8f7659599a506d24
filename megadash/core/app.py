from __future__ import annotations

import logging

import pygame

from megadash.core.canvas import Canvas
from megadash.core.config import GameConfig
from megadash.core.input import InputState
from megadash.core.loop import FpsDisplay, GameLoop
from megadash.core.resources import ImageLoader
from megadash.scenes import MainScene, Scene

log = logging.getLogger(__name__)


class App:
    """Ventana, input, carga de imágenes y el loop; la escena hace el resto."""

    def __init__(self, config: GameConfig, scene: Scene | None = None) -> None:
        self.config = config
        self.running = False

        pygame.init()
        pygame.display.set_caption(config.title)
        self.screen = pygame.display.set_mode(config.size)
        self.canvas = Canvas(self.screen)

        self.keys = InputState()
        self.images = ImageLoader(config.assets_root)
        self.fps_display = FpsDisplay() if config.show_fps else None

        self.scene = scene or MainScene()
        self.loop = GameLoop(
            self.scene,
            self.keys,
            self.canvas,
            on_fps=self.fps_display.publish if self.fps_display else None,
            sample_every=config.fps_sample_every,
        )

    def handle_events(self) -> None:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
                self.running = False
                continue
            if self.keys.handle_event(ev):
                continue
            self.scene.handle_event(self, ev)

    def run(self) -> None:
        self.running = True
        self.scene.on_enter(self)
        self.loop.start()
        log.info("Loop iniciado: %dx%d cada %d ms", *self.config.size, self.config.tick_interval_ms)
        try:
            while self.running:
                # como setInterval: espera fija antes de cada tick, sin compensar el anterior
                pygame.time.wait(self.config.tick_interval_ms)
                self.handle_events()
                if not self.running:
                    break

                self.canvas.clear()
                self.loop.tick()
                if self.fps_display is not None:
                    self.fps_display.render(self.canvas)
                pygame.display.flip()
        finally:
            self.scene.on_exit(self)
            self.images.shutdown()
            pygame.quit()
