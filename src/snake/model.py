# model.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional
import random

from src.snake.geometry import Cell, Direction, is_opposite

# Random draws before falling back to an explicit scan of free cells
MAX_SPAWN_ATTEMPTS = 64


class BoardFull(RuntimeError):
    """Raised when there is no free cell left to place an apple on."""


# ---------- Snake ----------
@dataclass
class Snake:
    body: List[Cell]                # tail at index 0, head at the end
    heading: Direction = Direction.RIGHT
    pending_heading: Optional[Direction] = None

    def __post_init__(self):
        if not self.body:
            raise ValueError("Snake body must contain at least one cell")
        self.body = [Cell(*c) for c in self.body]
        if self.pending_heading is None:
            self.pending_heading = self.heading

    @classmethod
    def at(cls, cell: Cell, heading: Direction = Direction.RIGHT) -> "Snake":
        return cls(body=[cell], heading=heading)

    @property
    def head(self) -> Cell:
        return self.body[-1]

    @property
    def tail(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def set_pending_heading(self, direction: Direction) -> bool:
        """
        Queue a turn for the next advance().
        Reversals are checked against the live heading, not the pending one,
        so a burst of key presses inside one tick can never queue a 180° turn.
        Returns False when the request was dropped.
        """
        if is_opposite(direction, self.heading):
            return False
        self.pending_heading = direction
        return True

    def advance(self) -> Cell:
        """Commit the pending heading, step the head one cell and drop the oldest cell.

        Returns the dropped cell so a fatal move can be undone with restore().
        """
        self.heading = self.pending_heading
        self.body.append(self.head.offset(self.heading))
        return self.body.pop(0)

    def grow(self) -> None:
        # Doubling the tail keeps it in place for one advance(), so the
        # length goes up by one right away.
        self.body.insert(0, self.tail)

    def restore(self, removed: Cell) -> None:
        """Undo the last advance() so the final frame shows the body before death."""
        self.body.pop()
        self.body.insert(0, removed)


# ---------- Apple ----------
def spawn_apple(body: Iterable[Cell], width: int, height: int,
                rng: random.Random) -> Cell:
    """
    Return a uniformly random cell that the snake does not occupy.
    Rejection sampling first; if the board is crowded, pick from the free list.
    """
    occupied = set(body)
    if len(occupied) >= width * height:
        raise BoardFull(f"no free cell on a {width}x{height} board")

    for _ in range(MAX_SPAWN_ATTEMPTS):
        cand = Cell(rng.randrange(width), rng.randrange(height))
        if cand not in occupied:
            return cand

    free = [Cell(x, y) for y in range(height) for x in range(width)
            if (x, y) not in occupied]
    return rng.choice(free)
