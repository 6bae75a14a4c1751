import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from snake_arcade.engine import GameEngine
from snake_arcade.storage import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_engine(store):
    """Build a running engine with a chosen body, heading and food cell."""

    def _make(snake=None, direction=None, food=None, playing=True, **kwargs):
        kwargs.setdefault("store", store)
        kwargs.setdefault("rng", random.Random(1234))
        engine = GameEngine(**kwargs)
        if snake is not None:
            engine.snake.reset(snake)
        if direction is not None:
            engine.direction = direction
        if food is not None:
            engine.food.position = food
        if playing:
            engine.start()
        return engine

    return _make
