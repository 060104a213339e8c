# collision.py
from typing import Sequence

from src.snake.geometry import Cell, in_bounds


def hits_wall(head: Cell, width: int, height: int) -> bool:
    """True once the head has stepped past any edge (x == -1, x == width, ...)."""
    return not in_bounds(head, width, height)


def hits_self(body: Sequence[Cell]) -> bool:
    """True if the head (last cell) overlaps any other segment."""
    head = body[-1]
    return any(cell == head for cell in body[:-1])
