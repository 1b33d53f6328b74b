"""
Flood-fill connectivity over a set of grid cells.
"""

from collections import deque
from typing import AbstractSet, Set

from cuberoll.core.geometry import Cell


def connected_component_of(start: Cell, cells: AbstractSet[Cell]) -> Set[Cell]:
    """
    Cells of `cells` reachable from `start` through 4-neighbours in `cells`.

    Args:
        start: Seed cell; returns an empty set if it is not in `cells`
        cells: Cell set to flood

    Returns:
        The reachable subset, `start` included
    """
    if start not in cells:
        return set()

    reached = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for n in current.neighbours():
            if n in cells and n not in reached:
                reached.add(n)
                queue.append(n)
    return reached


def is_disconnected(cells: AbstractSet[Cell]) -> bool:
    """True if `cells` splits into more than one component. The empty set is connected."""
    if not cells:
        return False
    seed = next(iter(cells))
    return len(connected_component_of(seed, cells)) < len(cells)
