import json

import pytest

from cuberoll.core.codec import DecodeError, encode_world
from cuberoll.core.geometry import Cell
from cuberoll.core.world import default_world
from cuberoll.levels import (
    Level, decode_level, find_level, load_level_bank, load_world_or_default,
    save_level_bank, upsert_level,
)


def test_load_example_bank(example_levels_path, straight5, square, two_by_four, snake_block):
    levels = load_level_bank(example_levels_path)
    assert [level.name for level in levels] == ["Straight five", "Square", "Two by four", "Snake block"]
    assert find_level(levels, "Straight five").world == straight5
    assert find_level(levels, "Square").world == square
    assert find_level(levels, "Two by four").world == two_by_four
    assert find_level(levels, "Snake block").world == snake_block
    assert find_level(levels, "Nope") is None


def test_save_and_reload(tmp_path, square, two_by_four):
    path = tmp_path / "bank" / "levels.json"
    levels = [Level("Square", square), Level("Two by four", two_by_four)]
    save_level_bank(str(path), levels)
    assert load_level_bank(str(path)) == levels


def test_bad_entries_are_skipped(tmp_path, square):
    path = tmp_path / "levels.json"
    path.write_text(json.dumps([
        {"name": "Square", "page": encode_world(square)},
        {"name": "Broken", "page": {"playerCube": {}}},
        {"page": encode_world(square)},
    ]))
    with pytest.warns(UserWarning, match="Skipping level"):
        levels = load_level_bank(str(path))
    assert [level.name for level in levels] == ["Square"]


def test_bank_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_level_bank(str(tmp_path / "missing.json"))

    not_a_list = tmp_path / "object.json"
    not_a_list.write_text('{"name": "x"}')
    with pytest.raises(DecodeError):
        load_level_bank(str(not_a_list))

    garbage = tmp_path / "garbage.json"
    garbage.write_text("[{")
    with pytest.raises(DecodeError):
        load_level_bank(str(garbage))


def test_decode_level_requires_name(square):
    with pytest.raises(DecodeError):
        decode_level({"name": 3, "page": encode_world(square)})
    assert decode_level({"name": "Square", "page": encode_world(square)}) == Level("Square", square)


def test_load_world_or_default(square):
    assert load_world_or_default(encode_world(square)) == square
    with pytest.warns(UserWarning, match="empty board"):
        world = load_world_or_default({"garbage": True}, start_cell=Cell(1, 1))
    assert world == default_world(Cell(1, 1))


def test_upsert_level(square, two_by_four):
    levels = [Level("A", square)]
    replaced = upsert_level(levels, Level("A", two_by_four))
    assert replaced == [Level("A", two_by_four)]
    appended = upsert_level(replaced, Level("B", square))
    assert [level.name for level in appended] == ["A", "B"]
    assert levels == [Level("A", square)]
