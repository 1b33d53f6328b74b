"""
Player step function: validates one roll against the board rules.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from cuberoll.core.cube import roll
from cuberoll.core.editor import CannotRoll, EditOutcome
from cuberoll.core.geometry import RollDirection
from cuberoll.core.path import extend, is_on_path, pop
from cuberoll.core.registry import register_step
from cuberoll.core.rotation import red_face_is_on_top
from cuberoll.core.world import World


class RuleViolation(Enum):
    """Why a roll was rejected"""
    MUST_VISIT_EACH_CELL_BEFORE_REACHING_FINISH_CELL = "MustVisitEachCellBeforeReachingFinishCell"
    TOP_FACE_CANNOT_BE_RED = "TopFaceCannotBeRed"
    MUST_BE_INSIDE_BOARD = "MustBeInsideBoard"
    CANNOT_CROSS_PATH = "CannotCrossPath"


@dataclass(frozen=True)
class ViolatesRule:
    kind: RuleViolation


@dataclass(frozen=True)
class RollBack:
    world: World


@dataclass(frozen=True)
class RollForward:
    world: World


@dataclass(frozen=True)
class RollAndSolve:
    world: World


Outcome = Union[ViolatesRule, RollBack, RollForward, RollAndSolve]


@register_step("play")
def step(direction: RollDirection, world: World) -> Outcome:
    """
    Roll the player cube one cell and check the move against the board.

    Rolling back onto the previous cell undoes the last move. Otherwise the
    target must be a board cell not yet visited; the finish cell may only
    be entered last, with the whole board covered and the red face up, and
    no other cell may be entered with the red face up.

    Args:
        direction: Roll direction
        world: Current state

    Returns:
        One of ViolatesRule, RollBack, RollForward, RollAndSolve
    """
    target = roll(direction, world.player_cube)
    target_cell = target.cell
    path = world.player_path

    if path.rest and path.rest[0] == target_cell:
        return RollBack(replace(world, player_cube=target, player_path=pop(path)))

    if not is_on_path(target_cell, world.level_editing_path):
        return ViolatesRule(RuleViolation.MUST_BE_INSIDE_BOARD)

    if is_on_path(target_cell, path):
        return ViolatesRule(RuleViolation.CANNOT_CROSS_PATH)

    new_path = extend(path, target_cell)
    on_top = red_face_is_on_top(target.orientation)

    if target_cell == world.finish_cell:
        if new_path.length == world.level_editing_path.length and on_top:
            return RollAndSolve(replace(world, player_cube=target, player_path=new_path))
        return ViolatesRule(RuleViolation.MUST_VISIT_EACH_CELL_BEFORE_REACHING_FINISH_CELL)

    if on_top:
        return ViolatesRule(RuleViolation.TOP_FACE_CANNOT_BE_RED)

    return RollForward(replace(world, player_cube=target, player_path=new_path))


def world_after(outcome: Union[Outcome, EditOutcome], world: World) -> World:
    """The world an outcome leaves behind; rejected moves return `world` itself."""
    if isinstance(outcome, (ViolatesRule, CannotRoll)):
        return world
    return outcome.world


def is_solved(world: World) -> bool:
    """True once the player has covered the board and rests on the finish cell, red face up."""
    return (
        world.player_path.last == world.finish_cell
        and world.player_path.length == world.level_editing_path.length
        and red_face_is_on_top(world.player_cube.orientation)
    )
