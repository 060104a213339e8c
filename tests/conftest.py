import os
import random

# No window or audio device in test runs
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from src.snake.config import Config
from src.snake.game import Game


@pytest.fixture
def make_game():
    """Build a seeded Game on a board of the given size."""
    def _make(width=40, height=40, seed=0):
        return Game(Config(board_w=width, board_h=height, seed=seed),
                    rng=random.Random(seed))
    return _make
