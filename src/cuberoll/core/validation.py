"""
Consistency checks for loaded or hand-written levels.
"""

from typing import List

from cuberoll.core.cube import Cube, roll_many
from cuberoll.core.path import Path, directions
from cuberoll.core.rotation import RED_FACE_UP, red_face_is_on_top
from cuberoll.core.world import World


def _replay(path: Path) -> Cube:
    return roll_many(directions(path), Cube(path.first_cell, RED_FACE_UP))


def validate_level(world: World) -> List[str]:
    """
    Validate a world and return a list of warnings/errors.

    Args:
        world: World to check

    Returns:
        Messages prefixed with "ERROR: " or "WARNING: "
    """
    issues = []
    board = world.level_editing_path

    try:
        editing_end = _replay(board)
    except ValueError as e:
        issues.append(f"ERROR: Board path is not a chain of adjacent cells ({e})")
        editing_end = None

    if editing_end is not None:
        if editing_end != world.level_editing_cube:
            issues.append(
                f"ERROR: Level editing cube {world.level_editing_cube.cell.to_tuple()} "
                f"{world.level_editing_cube.orientation} does not match the board path "
                f"(expected {editing_end.cell.to_tuple()} {editing_end.orientation})"
            )
        if board.length == 1:
            issues.append("WARNING: Board has a single cell")
        elif not red_face_is_on_top(editing_end.orientation):
            issues.append("WARNING: Board path does not end with the red face up; the level may be unsolvable")

    player = world.player_path
    if player.first_cell != world.start_cell:
        issues.append(
            f"ERROR: Player path starts at {player.first_cell.to_tuple()}, "
            f"board starts at {world.start_cell.to_tuple()}"
        )
    off_board = [c.to_tuple() for c in player.cells if c not in world.board]
    if off_board:
        issues.append(f"ERROR: Player path leaves the board at {off_board}")

    try:
        player_end = _replay(player)
    except ValueError as e:
        issues.append(f"ERROR: Player path is not a chain of adjacent cells ({e})")
    else:
        if player_end != world.player_cube:
            issues.append("ERROR: Player cube does not match the player path")

    for i, solution in enumerate(world.calculated_solutions):
        if solution.length != board.length or solution.cell_set != world.board:
            issues.append(f"WARNING: Cached solution {i} does not cover the current board")

    return issues
