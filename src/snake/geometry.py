# geometry.py
from enum import Enum
from typing import NamedTuple, Tuple


class Cell(NamedTuple):
    """A grid position in cell units (not pixels)."""
    x: int
    y: int

    def offset(self, direction: "Direction") -> "Cell":
        dx, dy = direction.value
        return Cell(self.x + dx, self.y + dy)


class Direction(Enum):
    # (dx, dy) in screen coordinates: y grows downwards
    UP    = (0, -1)
    DOWN  = (0, 1)
    LEFT  = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


def in_bounds(cell: Tuple[int, int], width: int, height: int) -> bool:
    """Check if a cell is inside the board."""
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def center(width: int, height: int) -> Cell:
    return Cell(width // 2, height // 2)
