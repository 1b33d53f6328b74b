import random

import pytest

from cuberoll.core.cube import Cube
from cuberoll.core.geometry import Cell, RollDirection
from cuberoll.core.registry import get_step
from cuberoll.core.rotation import RED_FACE_UP, Axis, RedFaceDirection, Sign
from cuberoll.core.rules import (
    RollAndSolve, RollBack, RollForward, RuleViolation, ViolatesRule,
    is_solved, step, world_after,
)
from cuberoll.core.world import default_world, reset

R, L, U, D = RollDirection.RIGHT, RollDirection.LEFT, RollDirection.UP, RollDirection.DOWN


def play(world, *moves):
    outcome = None
    for direction in moves:
        outcome = step(direction, world)
        world = world_after(outcome, world)
    return outcome, world


def test_play_step_is_registered():
    assert get_step("play") is step
    with pytest.raises(KeyError):
        get_step("spectate")


def test_roll_forward(straight3):
    outcome = step(R, straight3)
    assert isinstance(outcome, RollForward)
    world = outcome.world
    assert world.player_cube == Cube(Cell(1, 0), RedFaceDirection(Axis.X, Sign.POSITIVE))
    assert world.player_path.cells == [Cell(1, 0), Cell(0, 0)]
    assert world.level_editing_path == straight3.level_editing_path


def test_finish_reached_too_early_or_face_down(straight3):
    # (2, 0) is entered with the red face down
    outcome, _ = play(straight3, R, R)
    assert outcome == ViolatesRule(RuleViolation.MUST_VISIT_EACH_CELL_BEFORE_REACHING_FINISH_CELL)


def test_finish_reached_before_covering_board(square):
    outcome = step(U, square)
    assert outcome == ViolatesRule(RuleViolation.MUST_VISIT_EACH_CELL_BEFORE_REACHING_FINISH_CELL)


def test_must_be_inside_board(straight3):
    assert step(U, straight3) == ViolatesRule(RuleViolation.MUST_BE_INSIDE_BOARD)
    assert step(L, straight3) == ViolatesRule(RuleViolation.MUST_BE_INSIDE_BOARD)


def test_top_face_cannot_be_red(straight6):
    outcome, world = play(straight6, R, R, R)
    assert isinstance(outcome, RollForward)
    outcome = step(R, world)
    assert outcome == ViolatesRule(RuleViolation.TOP_FACE_CANNOT_BE_RED)


def test_cannot_cross_path(two_by_four):
    outcome, world = play(two_by_four, R, R, U, L)
    assert isinstance(outcome, RollForward)
    assert world.player_cube.cell == Cell(1, 1)
    assert step(D, world) == ViolatesRule(RuleViolation.CANNOT_CROSS_PATH)


def test_roll_back_undoes_last_move(square):
    _, world = play(square, R)
    outcome = step(L, world)
    assert isinstance(outcome, RollBack)
    assert outcome.world == square


def test_roll_back_several_moves(two_by_four):
    _, forward = play(two_by_four, R, R, R, U)
    outcome, back = play(forward, D, L, L, L)
    assert isinstance(outcome, RollBack)
    assert back == two_by_four


def test_solve_straight_line(straight5):
    outcome, world = play(straight5, R, R, R, R)
    assert isinstance(outcome, RollAndSolve)
    assert is_solved(world)
    assert world.player_cube == Cube(Cell(4, 0), RED_FACE_UP)
    assert world.player_path == straight5.level_editing_path


def test_solve_square(square):
    outcome, world = play(square, R, U, L)
    assert isinstance(outcome, RollAndSolve)
    assert is_solved(world)


def test_rejected_move_leaves_world_untouched(straight3):
    outcome = step(D, straight3)
    assert isinstance(outcome, ViolatesRule)
    assert world_after(outcome, straight3) is straight3


def test_single_cell_board_is_solved_at_start():
    world = default_world()
    assert is_solved(world)
    for direction in RollDirection:
        assert step(direction, world) == ViolatesRule(RuleViolation.MUST_BE_INSIDE_BOARD)


@pytest.mark.parametrize("fixture", ["snake_block", "two_by_four", "two_by_three", "dumbbell"])
def test_random_play_keeps_world_consistent(fixture, request):
    world = request.getfixturevalue(fixture)
    board = world.board
    rng = random.Random(0)
    for _ in range(500):
        direction = rng.choice(list(RollDirection))
        outcome = step(direction, world)
        after = world_after(outcome, world)
        if isinstance(outcome, ViolatesRule):
            assert after is world
        else:
            assert after.player_cube.cell == after.player_path.last
            assert after.player_path.cell_set <= board
            assert after.player_path.first_cell == world.start_cell
            assert after.level_editing_path == world.level_editing_path
            assert after.level_editing_cube == world.level_editing_cube
        if isinstance(outcome, RollAndSolve):
            assert is_solved(after)
            after = reset(after)
        world = after
