"""
The rolling cube: a cell plus the orientation of its red face.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from cuberoll.core.geometry import Cell, RollDirection, neighbour_to
from cuberoll.core.rotation import (
    ALL_ORIENTATIONS, RED_FACE_UP, RedFaceDirection,
    rotate_about_x, rotate_about_y,
)


@dataclass(frozen=True)
class Cube:
    cell: Cell
    orientation: RedFaceDirection = RED_FACE_UP


def _power(turn: Callable[[RedFaceDirection], RedFaceDirection], times: int) -> Dict[RedFaceDirection, RedFaceDirection]:
    table = {}
    for o in ALL_ORIENTATIONS:
        result = o
        for _ in range(times):
            result = turn(result)
        table[o] = result
    return table


# Up/Left are the inverse quarter turns (three forward turns)
ROLL_TABLES: Dict[RollDirection, Dict[RedFaceDirection, RedFaceDirection]] = {
    RollDirection.UP: _power(rotate_about_x, 3),
    RollDirection.DOWN: _power(rotate_about_x, 1),
    RollDirection.LEFT: _power(rotate_about_y, 3),
    RollDirection.RIGHT: _power(rotate_about_y, 1),
}


def roll(direction: RollDirection, cube: Cube) -> Cube:
    """Tip the cube one cell over. Total: board membership is not checked here."""
    return Cube(
        cell=neighbour_to(direction, cube.cell),
        orientation=ROLL_TABLES[direction][cube.orientation],
    )


def roll_many(directions: List[RollDirection], cube: Cube) -> Cube:
    for direction in directions:
        cube = roll(direction, cube)
    return cube
