"""
Puzzle state: the player's traversal and the board being authored.
"""

from dataclasses import dataclass, replace
from typing import FrozenSet, Tuple

from cuberoll.core.cube import Cube, roll_many
from cuberoll.core.geometry import Cell
from cuberoll.core.path import Path, directions
from cuberoll.core.rotation import RED_FACE_UP

DEFAULT_START_CELL = Cell(0, 0)


@dataclass(frozen=True)
class World:
    """
    The whole puzzle state.

    `level_editing_path` defines the board: its cells, its first cell (the
    start) and its last cell (the finish). `player_cube`/`player_path`
    track the player's traversal of that board. `calculated_solutions` is
    filled on demand by the solver and is otherwise empty.
    """
    player_cube: Cube
    player_path: Path
    level_editing_cube: Cube
    level_editing_path: Path
    calculated_solutions: Tuple[Path, ...] = ()

    def __post_init__(self):
        if not isinstance(self.calculated_solutions, tuple):
            object.__setattr__(self, "calculated_solutions", tuple(self.calculated_solutions))

    @property
    def board(self) -> FrozenSet[Cell]:
        return self.level_editing_path.cell_set

    @property
    def start_cell(self) -> Cell:
        return self.level_editing_path.first_cell

    @property
    def finish_cell(self) -> Cell:
        return self.level_editing_path.last

    @property
    def unvisited_cells(self) -> FrozenSet[Cell]:
        """Board cells the player has not stepped on yet."""
        return self.board - self.player_path.cell_set


def default_world(start_cell: Cell = DEFAULT_START_CELL) -> World:
    """A one-cell board with both cubes at `start_cell`, red face up."""
    cube = Cube(start_cell, RED_FACE_UP)
    path = Path.single(start_cell)
    return World(
        player_cube=cube,
        player_path=path,
        level_editing_cube=cube,
        level_editing_path=path,
    )


def reset(world: World) -> World:
    """Put the player back on the board's start cell with the red face up."""
    start = world.start_cell
    return replace(
        world,
        player_cube=Cube(start, RED_FACE_UP),
        player_path=Path.single(start),
    )


def from_board_path(board_path: Path, editing_cube: Cube = None) -> World:
    """
    World for a board given by its reference path, player at the start.

    Args:
        board_path: Reference path; first cell is the start, last cell the finish
        editing_cube: Level editing cube; defaults to the cube obtained by
            rolling along the board path from its start

    Raises:
        ValueError: If consecutive board cells are not adjacent
    """
    if editing_cube is None:
        editing_cube = roll_many(directions(board_path), Cube(board_path.first_cell, RED_FACE_UP))
    start = board_path.first_cell
    return World(
        player_cube=Cube(start, RED_FACE_UP),
        player_path=Path.single(start),
        level_editing_cube=editing_cube,
        level_editing_path=board_path,
    )
