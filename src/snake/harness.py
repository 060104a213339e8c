# src/snake/harness.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Union
import random

from src.snake.config import Config
from src.snake.game import Game, Phase, Snapshot
from src.snake.geometry import Direction

# -----------------------------------------------------------------------------
# Key names accepted by press_key()
# -----------------------------------------------------------------------------
KEYS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}
SPACE = "space"


@dataclass
class HeadlessGame:
    """
    Drives a Game without a window or a clock: every tick() is exactly one
    simulation step. Seeded, so two harnesses with the same seed replay the
    same apples.
    """
    board_w: int    = 40
    board_h: int    = 40
    seed_value: int = 0

    def __post_init__(self):
        self.cfg = Config(board_w=self.board_w, board_h=self.board_h,
                          seed=self.seed_value)
        self.reset()

    def reset(self, seed: int | None = None) -> Snapshot:
        """Start over in NOT_STARTED. Returns the initial state."""
        if seed is not None:
            self.seed_value = seed
        self.game = Game(cfg=self.cfg, rng=random.Random(self.seed_value))
        return self.get_state()

    def press_key(self, key: Union[Direction, str]) -> None:
        """Feed one key: a Direction, a direction name, or "space"."""
        if isinstance(key, Direction):
            self.game.set_pending_heading(key)
            return
        if not isinstance(key, str):
            raise ValueError(f"Unknown key: {key!r}")
        name = key.lower()
        if name == SPACE:
            self.game.press_space()
        elif name in KEYS:
            self.game.set_pending_heading(KEYS[name])
        else:
            raise ValueError(f"Unknown key: {key}")

    def tick(self, n: int = 1) -> Snapshot:
        """Run n simulation steps and return the resulting state."""
        for _ in range(n):
            self.game.tick()
        return self.get_state()

    def get_state(self) -> Snapshot:
        return self.game.snapshot()

    @property
    def phase(self) -> Phase:
        return self.game.phase
