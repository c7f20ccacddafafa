"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Pygame must not try to open a real display or audio device in tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from config import ParticleConfig, TypingConfig  # noqa: E402
from host import PointerState, Viewport  # noqa: E402
from scheduler import FrameScheduler  # noqa: E402


class RecordingParticleSurface:
    """Render sink that remembers everything pushed to it."""

    def __init__(self):
        self.added = []
        self.moves = []
        self.clear_calls = 0

    def add_particle(self, x, y, size, opacity):
        self.added.append((x, y, size, opacity))

    def move_particles(self, positions):
        self.moves.append(np.array(positions, copy=True))

    def clear(self):
        self.clear_calls += 1


class RecordingTextSurface:
    def __init__(self):
        self.texts = []

    def set_text(self, text):
        self.texts.append(text)

    @property
    def text(self):
        return self.texts[-1] if self.texts else None


class RecordingToastSurface:
    def __init__(self):
        self.shown = []
        self.hide_calls = 0
        self.message = None

    def show(self, message, kind):
        self.shown.append((message, kind))
        self.message = message

    def hide(self):
        self.hide_calls += 1
        self.message = None


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def viewport():
    return Viewport(800, 600)


@pytest.fixture
def pointer():
    # Far outside the viewport so the force field stays out of the way.
    return PointerState(-10_000.0, -10_000.0)


@pytest.fixture
def particle_surface():
    return RecordingParticleSurface()


@pytest.fixture
def text_surface():
    return RecordingTextSurface()


@pytest.fixture
def toast_surface():
    return RecordingToastSurface()


@pytest.fixture
def particle_config():
    return ParticleConfig(count=20, speed=0.5, size_min=2.0, size_max=6.0, seed=42)


@pytest.fixture
def typing_config():
    return TypingConfig(
        type_delay=150, delete_delay=75, pause_delay=2000,
        cycle_delay=500, start_delay=3000, phrases=("A", "BB"),
    )
