"""
Duplicate-free trail of visited cells.

A path is stored most-recent-first: `last` is the current cell and `rest`
holds the earlier cells, second-most-recent first and the oldest at the
end. The same ordering is used on the wire.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import FrozenSet, Iterable, List, Tuple

from cuberoll.core.geometry import Cell, RollDirection, roll_direction_between


@dataclass(frozen=True)
class Path:
    last: Cell
    rest: Tuple[Cell, ...] = ()

    def __post_init__(self):
        if not isinstance(self.rest, tuple):
            object.__setattr__(self, "rest", tuple(self.rest))
        if len(self.cell_set) != len(self.rest) + 1:
            raise ValueError(f"Path visits a cell more than once: {[c.to_tuple() for c in self.cells]}")

    @cached_property
    def cell_set(self) -> FrozenSet[Cell]:
        return frozenset((self.last,) + self.rest)

    @property
    def cells(self) -> List[Cell]:
        """All cells, most recent first."""
        return [self.last, *self.rest]

    @property
    def first_cell(self) -> Cell:
        return self.rest[-1] if self.rest else self.last

    @property
    def length(self) -> int:
        return 1 + len(self.rest)

    def __len__(self) -> int:
        return self.length

    @classmethod
    def single(cls, cell: Cell) -> "Path":
        return cls(last=cell, rest=())

    @classmethod
    def from_cells(cls, chronological_cells: Iterable[Cell]) -> "Path":
        """Build a path from cells given oldest first."""
        ordered = list(chronological_cells)
        if not ordered:
            raise ValueError("A path needs at least one cell")
        ordered.reverse()
        return cls(last=ordered[0], rest=tuple(ordered[1:]))


def is_on_path(cell: Cell, path: Path) -> bool:
    return cell in path.cell_set


def extend(path: Path, cell: Cell) -> Path:
    """Make `cell` the new most-recent cell."""
    return Path(last=cell, rest=(path.last,) + path.rest)


def pop(path: Path) -> Path:
    """Drop the most-recent cell."""
    if not path.rest:
        raise ValueError("Cannot pop the only cell of a path")
    return Path(last=path.rest[0], rest=path.rest[1:])


def chronological(path: Path) -> List[Cell]:
    """Cells oldest first."""
    return list(reversed(path.cells))


def directions(path: Path) -> List[RollDirection]:
    """Roll directions that replay the path from its first cell."""
    ordered = chronological(path)
    return [roll_direction_between(a, b) for a, b in zip(ordered, ordered[1:])]
