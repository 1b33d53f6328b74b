"""
cuberoll: a cube-rolling puzzle engine

Roll a cube with one red face across a board of grid cells. Every cell
must be visited exactly once, the red face may only point up on the final
(finish) cell, and the level is solved when the cube reaches the finish
with the whole board covered and the red face up.

Example Usage:
```python
from cuberoll import Cell, Path, RollDirection, from_board_path, step, calculate_solutions

board = Path.from_cells([Cell(x, 0) for x in range(5)])
world = from_board_path(board)
outcome = step(RollDirection.RIGHT, world)
solutions = calculate_solutions(world)
```

Command-line Usage:
```bash
cuberoll play --levels examples/levels.json
cuberoll solve --levels examples/levels.json --level "Two by four"
cuberoll validate-level --levels examples/levels.json
```
"""

from cuberoll.core import (
    Cell, RollDirection, Axis, Sign, RedFaceDirection, RED_FACE_UP,
    Cube, roll, Path, World, default_world, reset, from_board_path,
    RuleViolation, ViolatesRule, RollBack, RollForward, RollAndSolve, step, world_after,
    EditViolation, CannotRoll, RollAndEditLevelPath, edit_step,
    SolutionSearch, calculate_solutions, with_calculated_solutions,
    DecodeError, encode_world, decode_world,
    Config, load_config, validate_config,
)

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "RollDirection",
    "Axis",
    "Sign",
    "RedFaceDirection",
    "RED_FACE_UP",
    "Cube",
    "roll",
    "Path",
    "World",
    "default_world",
    "reset",
    "from_board_path",
    "RuleViolation",
    "ViolatesRule",
    "RollBack",
    "RollForward",
    "RollAndSolve",
    "step",
    "world_after",
    "EditViolation",
    "CannotRoll",
    "RollAndEditLevelPath",
    "edit_step",
    "SolutionSearch",
    "calculate_solutions",
    "with_calculated_solutions",
    "DecodeError",
    "encode_world",
    "decode_world",
    "Config",
    "load_config",
    "validate_config",
]
