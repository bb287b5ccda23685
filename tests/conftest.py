import os
import random

import pytest

from config.settings import Settings
from spinwheel.animation.scheduler import FrameScheduler
from spinwheel.core.events import EventBus
from spinwheel.persistence.store import MemoryStore


class FixedRandom:
    """Random stand-in that always draws the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Defaults only: no stray SPINWHEEL_* variables or .env file."""
    for name in list(os.environ):
        if name.startswith("SPINWHEEL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return Settings(state_file=tmp_path / "state.json")
