# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import random

from src.snake.config import Config
from src.snake.geometry import Cell, Direction, center
from src.snake.model import Snake, BoardFull, spawn_apple
from src.snake.collision import hits_wall, hits_self


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING     = "running"
    PAUSED      = "paused"
    DEAD        = "dead"
    WON         = "won"


# Phases that the start signal (re)starts from
RESTARTABLE = (Phase.NOT_STARTED, Phase.DEAD, Phase.WON)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers and tests."""
    snake_body: Tuple[Cell, ...]
    heading: Direction
    apple: Cell
    phase: Phase
    score: int


# ---------- State ----------
@dataclass
class Game:
    """
    The whole game: snake, apple and phase, owned in one place.

    Input handlers call set_pending_heading / toggle_start / toggle_pause;
    the scheduler calls tick(); renderers only ever see snapshot().
    """
    cfg: Config = field(default_factory=Config)
    rng: Optional[random.Random] = None

    def __post_init__(self):
        if self.cfg.board_w * self.cfg.board_h < 2:
            raise ValueError("Board needs at least two cells (one snake, one apple)")
        if self.rng is None:
            self.rng = random.Random(self.cfg.seed)
        self.phase = Phase.NOT_STARTED
        self.new_round()

    def new_round(self) -> None:
        """Replace the snake and apple with fresh ones; the phase is left alone."""
        self.snake = Snake.at(center(self.cfg.board_w, self.cfg.board_h))
        self.apple = spawn_apple(self.snake.body, self.cfg.board_w,
                                 self.cfg.board_h, self.rng)

    @property
    def score(self) -> int:
        return len(self.snake) - 1

    # ---------- Input signals ----------
    def set_pending_heading(self, direction: Direction) -> bool:
        return self.snake.set_pending_heading(direction)

    def toggle_start(self) -> None:
        if self.phase not in RESTARTABLE:
            return
        if self.phase is not Phase.NOT_STARTED:
            self.new_round()
        self.phase = Phase.RUNNING

    def toggle_pause(self) -> None:
        if self.phase is Phase.RUNNING:
            self.phase = Phase.PAUSED
        elif self.phase is Phase.PAUSED:
            self.phase = Phase.RUNNING

    def press_space(self) -> None:
        """One key for everything: start, restart, or pause/resume."""
        if self.phase in RESTARTABLE:
            self.toggle_start()
        else:
            self.toggle_pause()

    # ---------- Update ----------
    def tick(self) -> Phase:
        """
        Advance the simulation by one step. Does nothing unless RUNNING.
        Order: move, then walls/self (death wins), then apple.
        Returns the phase after the step.
        """
        if self.phase is not Phase.RUNNING:
            return self.phase

        removed = self.snake.advance()

        if (hits_wall(self.snake.head, self.cfg.board_w, self.cfg.board_h)
                or hits_self(self.snake.body)):
            self.snake.restore(removed)
            self.phase = Phase.DEAD
            return self.phase

        if self.snake.head == self.apple:
            self.snake.grow()
            try:
                self.apple = spawn_apple(self.snake.body, self.cfg.board_w,
                                         self.cfg.board_h, self.rng)
            except BoardFull:
                self.phase = Phase.WON

        return self.phase

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake_body=tuple(self.snake.body),
            heading=self.snake.heading,
            apple=self.apple,
            phase=self.phase,
            score=self.score,
        )
