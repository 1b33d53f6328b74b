"""
Grid cells and roll directions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class RollDirection(Enum):
    """The four directions the cube can be tipped in."""
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


@dataclass(frozen=True)
class Cell:
    """Integer grid coordinate. y grows upwards."""
    x: int
    y: int

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def neighbours(self) -> List["Cell"]:
        """The 4 orthogonal neighbours, in Up/Down/Left/Right order."""
        return [neighbour_to(d, self) for d in RollDirection]


_OFFSETS = {
    RollDirection.UP: (0, 1),
    RollDirection.DOWN: (0, -1),
    RollDirection.LEFT: (-1, 0),
    RollDirection.RIGHT: (1, 0),
}

_OPPOSITES = {
    RollDirection.UP: RollDirection.DOWN,
    RollDirection.DOWN: RollDirection.UP,
    RollDirection.LEFT: RollDirection.RIGHT,
    RollDirection.RIGHT: RollDirection.LEFT,
}


def neighbour_to(direction: RollDirection, cell: Cell) -> Cell:
    """Cell reached by one step from `cell` in `direction`."""
    dx, dy = _OFFSETS[direction]
    return Cell(cell.x + dx, cell.y + dy)


def opposite(direction: RollDirection) -> RollDirection:
    return _OPPOSITES[direction]


def roll_direction_between(source: Cell, target: Cell) -> RollDirection:
    """
    Direction that moves from `source` onto the adjacent `target`.

    Raises:
        ValueError: If the two cells are not orthogonal neighbours
    """
    offset = (target.x - source.x, target.y - source.y)
    for direction, delta in _OFFSETS.items():
        if delta == offset:
            return direction
    raise ValueError(f"Cells {source.to_tuple()} and {target.to_tuple()} are not adjacent")
