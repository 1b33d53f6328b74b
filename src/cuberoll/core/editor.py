"""
Level-editing step function: rolling the editing cube draws the board.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from cuberoll.core.cube import roll
from cuberoll.core.geometry import RollDirection
from cuberoll.core.path import extend, is_on_path, pop
from cuberoll.core.registry import register_step
from cuberoll.core.rotation import red_face_is_on_top
from cuberoll.core.world import World


class EditViolation(Enum):
    LEVEL_FINISHED_BECAUSE_TOP_FACE_IS_RED = "CannotRoll_LevelFinishedBecauseTopFaceIsRed"
    CANNOT_CROSS_PATH = "CannotRoll_CannotCrossPath"


@dataclass(frozen=True)
class CannotRoll:
    kind: EditViolation


@dataclass(frozen=True)
class RollAndEditLevelPath:
    world: World


EditOutcome = Union[CannotRoll, RollAndEditLevelPath]


@register_step("edit")
def edit_step(direction: RollDirection, world: World) -> EditOutcome:
    """
    Roll the level editing cube, growing or shrinking the board path.

    Rolling back onto the previous cell removes the last board cell. Once
    the editing cube shows its red face on top (away from the start cell)
    the level is finished and cannot be extended. A successful edit
    invalidates any cached solutions.
    """
    target = roll(direction, world.level_editing_cube)
    path = world.level_editing_path

    if path.rest and path.rest[0] == target.cell:
        return RollAndEditLevelPath(replace(
            world,
            level_editing_cube=target,
            level_editing_path=pop(path),
            calculated_solutions=(),
        ))

    if path.rest and red_face_is_on_top(world.level_editing_cube.orientation):
        return CannotRoll(EditViolation.LEVEL_FINISHED_BECAUSE_TOP_FACE_IS_RED)

    if is_on_path(target.cell, path):
        return CannotRoll(EditViolation.CANNOT_CROSS_PATH)

    return RollAndEditLevelPath(replace(
        world,
        level_editing_cube=target,
        level_editing_path=extend(path, target.cell),
        calculated_solutions=(),
    ))


def level_is_finished(world: World) -> bool:
    """The authored path ends with the red face up on a cell other than the start."""
    return bool(world.level_editing_path.rest) and red_face_is_on_top(world.level_editing_cube.orientation)
