from pathlib import Path as FilePath

import pytest

from cuberoll.core.geometry import Cell
from cuberoll.core.path import Path
from cuberoll.core.world import from_board_path

EXAMPLE_LEVELS = FilePath(__file__).resolve().parent.parent / "examples" / "levels.json"


def board(*coords):
    """World whose board path visits `coords` in the given (oldest first) order."""
    return from_board_path(Path.from_cells([Cell(x, y) for x, y in coords]))


@pytest.fixture(autouse=True)
def _no_levels_env(monkeypatch):
    monkeypatch.delenv("CUBEROLL_LEVELS", raising=False)


@pytest.fixture
def straight3():
    return board((0, 0), (1, 0), (2, 0))


@pytest.fixture
def straight5():
    return board((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))


@pytest.fixture
def straight6():
    return board((0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0))


@pytest.fixture
def square():
    return board((0, 0), (1, 0), (1, 1), (0, 1))


@pytest.fixture
def two_by_three():
    return board((0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1))


@pytest.fixture
def two_by_four():
    return board((0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (2, 1), (1, 1), (0, 1))


@pytest.fixture
def snake_block():
    return board(
        (-1, 0), (0, 0), (1, 0), (2, 0), (2, 1), (1, 1),
        (0, 1), (0, 2), (1, 2), (2, 2), (3, 2),
    )


@pytest.fixture
def dumbbell():
    # two 2x2 blocks joined through the single cell (2, 0)
    return board(
        (0, 0), (0, 1), (1, 1), (1, 0), (2, 0),
        (3, 0), (3, 1), (4, 1), (4, 0),
    )


@pytest.fixture
def example_levels_path():
    return str(EXAMPLE_LEVELS)
