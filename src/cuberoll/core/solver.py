"""
Exhaustive solution search.

Breadth-first enumeration of every legal roll sequence from the board's
start, using the player step function as the move generator. Undo moves
and rejected moves are never explored. A state whose unvisited board cells
fall apart into separate pockets cannot be completed (the rest of a
traversal walks through them cell by cell), so it is dropped before it is
expanded.
"""

from dataclasses import replace
from typing import List

from cuberoll.core.connectivity import is_disconnected
from cuberoll.core.geometry import RollDirection
from cuberoll.core.path import Path
from cuberoll.core.rules import RollAndSolve, RollForward, step
from cuberoll.core.world import World, reset


class SolutionSearch:
    """
    One run of the solver over a board.

    Attributes:
        expanded: Number of states whose 4 rolls were tried
        pruned: Number of states dropped by the connectivity check
        visited: Every state reached, in discovery order
        explored: The states that were expanded
    """

    def __init__(self, world: World, prune_disconnected: bool = True):
        self.world = world
        self.prune_disconnected = prune_disconnected
        self.expanded = 0
        self.pruned = 0
        self.visited: List[World] = []
        self.explored: List[World] = []

    def _should_prune(self, state: World) -> bool:
        return self.prune_disconnected and is_disconnected(state.unvisited_cells)

    def _successors(self, state: World) -> List[World]:
        successors = []
        for direction in RollDirection:
            outcome = step(direction, state)
            if isinstance(outcome, (RollForward, RollAndSolve)):
                successors.append(outcome.world)
        return successors

    def run(self) -> List[Path]:
        """Enumerate and return every complete traversal of the board."""
        frontier = [reset(self.world)]
        while frontier:
            self.visited.extend(frontier)
            next_frontier = []
            for state in frontier:
                if self._should_prune(state):
                    self.pruned += 1
                    continue
                self.expanded += 1
                self.explored.append(state)
                next_frontier.extend(self._successors(state))
            frontier = next_frontier

        board_length = self.world.level_editing_path.length
        return [
            state.player_path
            for state in self.visited
            if state.player_path.length == board_length
        ]


def calculate_solutions(world: World, prune_disconnected: bool = True) -> List[Path]:
    """
    Every path that legally solves the board of `world`.

    Args:
        world: Any world; only its board (level editing path) is used
        prune_disconnected: Drop states whose unvisited cells are disconnected

    Returns:
        Solution paths in discovery order
    """
    return SolutionSearch(world, prune_disconnected=prune_disconnected).run()


def with_calculated_solutions(world: World, prune_disconnected: bool = True) -> World:
    """`world` with its solution cache filled."""
    return replace(world, calculated_solutions=tuple(calculate_solutions(world, prune_disconnected)))
