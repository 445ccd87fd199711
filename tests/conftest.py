import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from collections import deque

import numpy as np
import pytest

from gridsnake.config import Config, RIGHT
from gridsnake.game import Status, new_game_state
from gridsnake.session import Session
from gridsnake.storage import MemoryScoreStore


@pytest.fixture
def cfg():
    return Config(seed=7)


@pytest.fixture
def state(cfg):
    return new_game_state(cfg, np.random.default_rng(cfg.seed))


@pytest.fixture
def running(state):
    state.status = Status.RUNNING
    return state


@pytest.fixture
def session(cfg):
    return Session(MemoryScoreStore(), cfg=cfg)


@pytest.fixture
def place():
    """Overwrite the snake (tail first) and food for a hand-built position."""
    def _place(state, body, direction=RIGHT, food=None):
        state.snake = deque(body)
        state.direction = direction
        state.pending = direction
        state.food = food
        return state
    return _place
