import pytest
import yaml

from cuberoll.core.config import (
    Config, GameConfig, InputConfig, LoggingConfig, SolverConfig,
    create_default_config, load_config, validate_config,
)


def test_defaults():
    config = Config()
    assert config.game.levels_path is None
    assert config.game.start_cell == (0, 0)
    assert config.solver.prune_disconnected is True
    assert config.solver.max_solutions_shown == 10
    assert config.input.swipe_threshold == 30.0
    assert config.logging.export_format == "csv"
    assert validate_config(config) == []


def test_levels_path_from_environment(monkeypatch):
    monkeypatch.setenv("CUBEROLL_LEVELS", "/tmp/bank.json")
    assert GameConfig().levels_path == "/tmp/bank.json"
    assert GameConfig(levels_path="mine.json").levels_path == "mine.json"


def test_invalid_values():
    with pytest.raises(ValueError):
        GameConfig(start_cell=(0, 0, 0))
    with pytest.raises(ValueError):
        GameConfig(start_cell=(0.5, 0))
    with pytest.raises(ValueError):
        SolverConfig(max_solutions_shown=-1)
    with pytest.raises(ValueError):
        InputConfig(swipe_threshold=0)
    with pytest.raises(ValueError):
        LoggingConfig(export_format="xml")


def test_disabling_pruning_warns():
    with pytest.warns(UserWarning, match="pruning"):
        config = SolverConfig(prune_disconnected=False)
    assert not config.prune_disconnected


def test_from_dict_partial():
    config = Config.from_dict({"game": {"start_cell": [2, 3]}, "solver": None})
    assert config.game.start_cell == (2, 3)
    assert config.solver == SolverConfig()


def test_create_and_load(tmp_path):
    output = tmp_path / "cuberoll.yaml"
    created = create_default_config(str(output))
    with open(output) as f:
        assert yaml.safe_load(f) == created.to_dict()
    loaded = load_config(str(output))
    assert loaded.to_dict() == created.to_dict()


def test_load_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    with pytest.raises(ValueError):
        load_config(str(empty))

    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("solver:\n  depth: 3\n")
    with pytest.raises(ValueError):
        load_config(str(unknown))

    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(listing))


def test_validate_config(tmp_path):
    config = Config(game=GameConfig(levels_path=str(tmp_path / "nope.json"), default_level="Square"))
    issues = validate_config(config)
    assert any(i.startswith("ERROR") and "nope.json" in i for i in issues)

    config = Config(game=GameConfig(default_level="Square"))
    assert validate_config(config) == ["WARNING: default_level is set but no levels_path is configured"]

    with pytest.warns(UserWarning):
        config = Config(solver=SolverConfig(prune_disconnected=False))
    assert any("pruning" in i for i in validate_config(config))
