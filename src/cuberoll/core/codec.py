"""
JSON wire format for cells, cubes, paths and worlds.

Field names are fixed by the persisted level format:

    Cell              {"A1": x, "A2": y}
    RedFaceDirection  {"A1": "X"|"Y"|"Z", "A2": "Positive"|"Negative"}
    Cube              {"A1": <Cell>, "A2": <RedFaceDirection>}
    Path              {"last": <Cell>, "rest": [<Cell>, ...]}
    World             {"playerCube", "playerPath", "levelEditingCube",
                       "levelEditingPath", "calculatedSolutions"}

Decoders raise DecodeError on anything malformed; callers decide what to
fall back to.
"""

import json
from typing import Any, Dict

from cuberoll.core.cube import Cube
from cuberoll.core.geometry import Cell
from cuberoll.core.path import Path
from cuberoll.core.rotation import Axis, RedFaceDirection, Sign
from cuberoll.core.world import World


class DecodeError(ValueError):
    """Persisted data does not match the wire format."""


def encode_cell(cell: Cell) -> Dict[str, Any]:
    return {"A1": cell.x, "A2": cell.y}


def encode_orientation(orientation: RedFaceDirection) -> Dict[str, Any]:
    return {"A1": orientation.axis.value, "A2": orientation.sign.value}


def encode_cube(cube: Cube) -> Dict[str, Any]:
    return {"A1": encode_cell(cube.cell), "A2": encode_orientation(cube.orientation)}


def encode_path(path: Path) -> Dict[str, Any]:
    return {"last": encode_cell(path.last), "rest": [encode_cell(c) for c in path.rest]}


def encode_world(world: World) -> Dict[str, Any]:
    return {
        "playerCube": encode_cube(world.player_cube),
        "playerPath": encode_path(world.player_path),
        "levelEditingCube": encode_cube(world.level_editing_cube),
        "levelEditingPath": encode_path(world.level_editing_path),
        "calculatedSolutions": [encode_path(p) for p in world.calculated_solutions],
    }


def _field(data: Any, key: str, what: str) -> Any:
    if not isinstance(data, dict):
        raise DecodeError(f"{what}: expected an object, got {type(data).__name__}")
    if key not in data:
        raise DecodeError(f"{what}: missing field '{key}'")
    return data[key]


def decode_cell(data: Any) -> Cell:
    x = _field(data, "A1", "Cell")
    y = _field(data, "A2", "Cell")
    for value in (x, y):
        # bool is an int subclass but never a coordinate
        if not isinstance(value, int) or isinstance(value, bool):
            raise DecodeError(f"Cell: coordinates must be integers, got {value!r}")
    return Cell(x, y)


def decode_orientation(data: Any) -> RedFaceDirection:
    axis = _field(data, "A1", "RedFaceDirection")
    sign = _field(data, "A2", "RedFaceDirection")
    try:
        return RedFaceDirection(Axis(axis), Sign(sign))
    except ValueError as e:
        raise DecodeError(f"RedFaceDirection: {e}") from e


def decode_cube(data: Any) -> Cube:
    return Cube(
        cell=decode_cell(_field(data, "A1", "Cube")),
        orientation=decode_orientation(_field(data, "A2", "Cube")),
    )


def decode_path(data: Any) -> Path:
    last = decode_cell(_field(data, "last", "Path"))
    rest = _field(data, "rest", "Path")
    if not isinstance(rest, list):
        raise DecodeError("Path: 'rest' must be a list")
    try:
        return Path(last=last, rest=tuple(decode_cell(c) for c in rest))
    except DecodeError:
        raise
    except ValueError as e:
        raise DecodeError(f"Path: {e}") from e


def decode_world(data: Any) -> World:
    solutions = _field(data, "calculatedSolutions", "World")
    if not isinstance(solutions, list):
        raise DecodeError("World: 'calculatedSolutions' must be a list")
    return World(
        player_cube=decode_cube(_field(data, "playerCube", "World")),
        player_path=decode_path(_field(data, "playerPath", "World")),
        level_editing_cube=decode_cube(_field(data, "levelEditingCube", "World")),
        level_editing_path=decode_path(_field(data, "levelEditingPath", "World")),
        calculated_solutions=tuple(decode_path(p) for p in solutions),
    )


def world_to_json(world: World, indent: int = None) -> str:
    return json.dumps(encode_world(world), indent=indent)


def world_from_json(text: str) -> World:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e
    return decode_world(data)
