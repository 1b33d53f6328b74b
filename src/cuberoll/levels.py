"""
Level bank loader - reads and writes lists of named levels.

A level bank file is a JSON array of entries `{"name": ..., "page": <World>}`.
"""

import json
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from cuberoll.core.codec import DecodeError, decode_world, encode_world
from cuberoll.core.geometry import Cell
from cuberoll.core.world import DEFAULT_START_CELL, World, default_world


@dataclass(frozen=True)
class Level:
    """A named board."""
    name: str
    world: World

    def to_dict(self):
        return {"name": self.name, "page": encode_world(self.world)}


def decode_level(data: Any) -> Level:
    if not isinstance(data, dict) or "name" not in data or "page" not in data:
        raise DecodeError("Level: expected an object with 'name' and 'page'")
    if not isinstance(data["name"], str):
        raise DecodeError("Level: 'name' must be a string")
    return Level(name=data["name"], world=decode_world(data["page"]))


def load_world_or_default(data: Any, start_cell: Cell = DEFAULT_START_CELL) -> World:
    """
    Decode a persisted world, falling back to an empty board.

    Args:
        data: Parsed JSON for a World
        start_cell: Start cell of the fallback world

    Returns:
        The decoded world, or `default_world(start_cell)` if decoding fails
    """
    try:
        return decode_world(data)
    except DecodeError as e:
        warnings.warn(f"Could not decode saved level ({e}); using an empty board instead.")
        return default_world(start_cell)


def load_level_bank(json_path: str) -> List[Level]:
    """
    Load every level of a level bank file.

    Entries that fail to decode are skipped with a warning.

    Args:
        json_path: Path to the level bank JSON file

    Returns:
        Levels in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        DecodeError: If the file is not a JSON array
    """
    path = Path(json_path)
    if not path.exists():
        raise FileNotFoundError(f"Level bank not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Error parsing level bank {path}: {e}") from e

    if not isinstance(data, list):
        raise DecodeError(f"Level bank {path} must contain a list of levels")

    levels = []
    for i, entry in enumerate(data):
        try:
            levels.append(decode_level(entry))
        except DecodeError as e:
            warnings.warn(f"Skipping level #{i} in {path}: {e}")
    return levels


def save_level_bank(json_path: str, levels: List[Level]) -> None:
    path = Path(json_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump([level.to_dict() for level in levels], f, indent=2)


def find_level(levels: List[Level], name: str) -> Optional[Level]:
    for level in levels:
        if level.name == name:
            return level
    return None


def upsert_level(levels: List[Level], level: Level) -> List[Level]:
    """Replace the level with the same name, or append it."""
    updated = [level if existing.name == level.name else existing for existing in levels]
    if find_level(levels, level.name) is None:
        updated.append(level)
    return updated
