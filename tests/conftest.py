# tests/conftest.py
import os
import sys
from concurrent.futures import Future
from pathlib import Path

import pytest

# Add repo root (parent of this file) to import search path
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

# sin ventana ni audio reales
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from megadash.core.input import InputState  # noqa: E402


class RecordingCanvas:
    """Canvas falso: guarda las llamadas de dibujo en orden."""

    def __init__(self, width=640, height=480):
        self.width = width
        self.height = height
        self.calls = []

    def blit_region(self, resource, src, dest):
        assert resource.ready
        self.calls.append(("blit", resource.path, tuple(src), tuple(dest)))

    def plot(self, x, y, color):
        self.calls.append(("plot", (x, y), tuple(color)))

    def draw_text(self, text, pos):
        self.calls.append(("text", text, pos))


class ManualClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FakeLoader:
    """Sustituye a ImageLoader: guarda los futures para completarlos a mano."""

    def __init__(self):
        self.requests = {}

    def request(self, resource):
        future = Future()
        resource.watch(future)
        self.requests[resource.path] = future
        return future


class FakeApp:
    def __init__(self, config):
        self.config = config
        self.images = FakeLoader()
        self.running = True


def make_ready(resource, image=object()):
    future = Future()
    resource.watch(future)
    future.set_result(image)
    return future


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def clock():
    return ManualClock(start=1000.0)


@pytest.fixture
def keys():
    return InputState()
