"""
Core modules for cuberoll.

This package contains the puzzle engine:
- Cells, roll directions and red-face orientations
- The cube and its roll operation
- Paths and board connectivity
- The player and level-editing step functions
- The exhaustive solution search
- JSON codec, level validation and configuration
"""

from cuberoll.core.geometry import Cell, RollDirection, neighbour_to, opposite, roll_direction_between
from cuberoll.core.rotation import (
    Axis, Sign, RedFaceDirection, RED_FACE_UP, ALL_ORIENTATIONS,
    rotate_about_x, rotate_about_y, red_face_is_on_top,
)
from cuberoll.core.cube import Cube, roll, roll_many
from cuberoll.core.path import Path, is_on_path, extend, pop, chronological, directions
from cuberoll.core.connectivity import connected_component_of, is_disconnected
from cuberoll.core.world import World, default_world, reset, from_board_path
from cuberoll.core.editor import EditViolation, CannotRoll, RollAndEditLevelPath, edit_step, level_is_finished
from cuberoll.core.rules import (
    RuleViolation, ViolatesRule, RollBack, RollForward, RollAndSolve,
    step, world_after, is_solved,
)
from cuberoll.core.solver import SolutionSearch, calculate_solutions, with_calculated_solutions
from cuberoll.core.registry import STEP_REGISTRY, register_step, get_step
from cuberoll.core.codec import DecodeError, encode_world, decode_world, world_to_json, world_from_json
from cuberoll.core.validation import validate_level
from cuberoll.core.config import Config, load_config, create_default_config, validate_config

__all__ = [
    "Cell",
    "RollDirection",
    "neighbour_to",
    "opposite",
    "roll_direction_between",
    "Axis",
    "Sign",
    "RedFaceDirection",
    "RED_FACE_UP",
    "ALL_ORIENTATIONS",
    "rotate_about_x",
    "rotate_about_y",
    "red_face_is_on_top",
    "Cube",
    "roll",
    "roll_many",
    "Path",
    "is_on_path",
    "extend",
    "pop",
    "chronological",
    "directions",
    "connected_component_of",
    "is_disconnected",
    "World",
    "default_world",
    "reset",
    "from_board_path",
    "EditViolation",
    "CannotRoll",
    "RollAndEditLevelPath",
    "edit_step",
    "level_is_finished",
    "RuleViolation",
    "ViolatesRule",
    "RollBack",
    "RollForward",
    "RollAndSolve",
    "step",
    "world_after",
    "is_solved",
    "SolutionSearch",
    "calculate_solutions",
    "with_calculated_solutions",
    "STEP_REGISTRY",
    "register_step",
    "get_step",
    "DecodeError",
    "encode_world",
    "decode_world",
    "world_to_json",
    "world_from_json",
    "validate_level",
    "Config",
    "load_config",
    "create_default_config",
    "validate_config",
]
