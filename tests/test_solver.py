from dataclasses import replace

import pytest

from cuberoll.core.connectivity import is_disconnected
from cuberoll.core.cube import Cube, roll
from cuberoll.core.geometry import Cell
from cuberoll.core.path import Path, directions
from cuberoll.core.rotation import RED_FACE_UP, red_face_is_on_top
from cuberoll.core.solver import SolutionSearch, calculate_solutions, with_calculated_solutions
from cuberoll.core.world import default_world

BOARDS = ["straight3", "straight5", "square", "two_by_three", "two_by_four", "snake_block", "dumbbell"]


def assert_is_solution(path, world):
    board = world.level_editing_path
    assert path.length == board.length
    assert path.cell_set == world.board
    assert path.first_cell == world.start_cell
    assert path.last == world.finish_cell

    cube = Cube(path.first_cell, RED_FACE_UP)
    moves = directions(path)
    for i, direction in enumerate(moves):
        cube = roll(direction, cube)
        if i < len(moves) - 1:
            assert not red_face_is_on_top(cube.orientation)
    assert red_face_is_on_top(cube.orientation)


@pytest.mark.parametrize("fixture", ["straight5", "square", "two_by_four", "snake_block"])
def test_reference_path_is_the_only_solution(fixture, request):
    world = request.getfixturevalue(fixture)
    assert calculate_solutions(world) == [world.level_editing_path]


@pytest.mark.parametrize("fixture", ["straight3", "two_by_three"])
def test_unsolvable_boards(fixture, request):
    world = request.getfixturevalue(fixture)
    assert calculate_solutions(world) == []


def test_single_cell_board_has_trivial_solution():
    assert calculate_solutions(default_world(Cell(2, 3))) == [Path.single(Cell(2, 3))]


@pytest.mark.parametrize("fixture", BOARDS)
def test_every_result_is_a_solution(fixture, request):
    world = request.getfixturevalue(fixture)
    for path in calculate_solutions(world, prune_disconnected=False):
        assert_is_solution(path, world)


@pytest.mark.parametrize("fixture", BOARDS)
def test_pruning_keeps_the_same_solutions(fixture, request):
    world = request.getfixturevalue(fixture)
    pruned = calculate_solutions(world, prune_disconnected=True)
    full = calculate_solutions(world, prune_disconnected=False)
    assert set(pruned) == set(full)
    assert len(pruned) == len(full)


@pytest.mark.parametrize("fixture", BOARDS)
def test_expanded_states_have_connected_unvisited_cells(fixture, request):
    search = SolutionSearch(request.getfixturevalue(fixture))
    search.run()
    assert search.expanded == len(search.explored)
    for state in search.explored:
        assert not is_disconnected(state.unvisited_cells)


def test_pruning_cuts_the_search(two_by_four):
    pruned = SolutionSearch(two_by_four)
    pruned.run()
    full = SolutionSearch(two_by_four, prune_disconnected=False)
    full.run()
    assert pruned.pruned >= 1
    assert full.pruned == 0
    assert pruned.expanded < full.expanded


def test_search_never_walks_past_a_bridge_early(dumbbell):
    bridge = Cell(2, 0)
    left_block = {Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1)}

    def crossed_early(state):
        visited = state.player_path.cell_set
        return bridge in visited and not left_block <= visited

    full = SolutionSearch(dumbbell, prune_disconnected=False)
    full.run()
    assert any(crossed_early(state) for state in full.explored)

    pruned = SolutionSearch(dumbbell)
    pruned.run()
    assert not any(crossed_early(state) for state in pruned.explored)


def test_search_starts_from_reset_state(two_by_four):
    moved = replace(two_by_four, player_cube=Cube(Cell(1, 0)), player_path=Path(Cell(1, 0), (Cell(0, 0),)))
    assert calculate_solutions(moved) == calculate_solutions(two_by_four)


def test_with_calculated_solutions(square):
    world = with_calculated_solutions(square)
    assert world.calculated_solutions == (square.level_editing_path,)
    assert world.player_path == square.player_path
