"""
Configuration management for cuberoll.

This module handles loading and validation of configuration files,
environment variables, and provides typed configuration objects.
"""

import os
import yaml
from typing import Any, Dict, Optional, List, Tuple
from dataclasses import dataclass, field
from pathlib import Path

EXPORT_FORMATS = ["csv", "excel", "json"]


@dataclass
class GameConfig:
    """Where levels come from and where an empty board starts."""
    levels_path: Optional[str] = None
    default_level: Optional[str] = None
    start_cell: Tuple[int, int] = (0, 0)

    def __post_init__(self):
        # Load from environment variables if not provided
        if self.levels_path is None:
            self.levels_path = os.getenv("CUBEROLL_LEVELS")
        if not isinstance(self.start_cell, (tuple, list)) or len(self.start_cell) != 2:
            raise ValueError("start_cell must be a pair of integers")
        if not all(isinstance(v, int) for v in self.start_cell):
            raise ValueError("start_cell must be a pair of integers")
        self.start_cell = tuple(self.start_cell)


@dataclass
class SolverConfig:
    """Configuration for the solution search."""
    prune_disconnected: bool = True
    max_solutions_shown: int = 10

    def __post_init__(self):
        if not isinstance(self.prune_disconnected, bool):
            raise ValueError("prune_disconnected must be a boolean")
        if not isinstance(self.max_solutions_shown, int) or self.max_solutions_shown < 0:
            raise ValueError("max_solutions_shown must be a non-negative integer")

        if not self.prune_disconnected:
            import warnings
            warnings.warn(
                "Connectivity pruning is disabled. "
                "The search will expand every partial traversal of the board."
            )


@dataclass
class InputConfig:
    """Configuration for turning captured input into rolls."""
    # Minimum swipe length, in screen pixels
    swipe_threshold: float = 30.0

    def __post_init__(self):
        if not isinstance(self.swipe_threshold, (float, int)) or self.swipe_threshold <= 0:
            raise ValueError("swipe_threshold must be a positive number")


@dataclass
class LoggingConfig:
    """Console verbosity and session log output."""
    verbose: bool = False
    log_dir: str = "logs"
    record_sessions: bool = False
    export_format: str = "csv"

    def __post_init__(self):
        if self.export_format not in EXPORT_FORMATS:
            raise ValueError(f"export_format must be one of {EXPORT_FORMATS}, got '{self.export_format}'")
        if not isinstance(self.log_dir, str) or not self.log_dir:
            raise ValueError("log_dir must be a non-empty string")


@dataclass
class Config:
    """Main configuration object."""
    game: GameConfig = field(default_factory=GameConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    input: InputConfig = field(default_factory=InputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            game=GameConfig(**(data.get("game") or {})),
            solver=SolverConfig(**(data.get("solver") or {})),
            input=InputConfig(**(data.get("input") or {})),
            logging=LoggingConfig(**(data.get("logging") or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        game = dict(self.game.__dict__)
        game["start_cell"] = list(self.game.start_cell)
        return {
            "game": game,
            "solver": {k: v for k, v in self.solver.__dict__.items()},
            "input": {k: v for k, v in self.input.__dict__.items()},
            "logging": {k: v for k, v in self.logging.__dict__.items()},
        }


def load_config(config_path: str) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        ValueError: If fields are unknown or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML config: {e}")

    if not data:
        raise ValueError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a mapping")

    try:
        return Config.from_dict(data)
    except Exception as e:
        raise ValueError(f"Error creating config from data: {e}")


def create_default_config(output_path: str = "cuberoll.yaml") -> Config:
    """
    Create a default configuration file.

    Args:
        output_path: Path where to save the default config

    Returns:
        Default Config object
    """
    config = Config()

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, indent=2)

    return config


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration to validate

    Returns:
        List of validation messages
    """
    issues = []

    if config.game.levels_path and not os.path.exists(config.game.levels_path):
        issues.append(f"ERROR: Levels file does not exist: {config.game.levels_path}")

    if config.game.default_level and not config.game.levels_path:
        issues.append("WARNING: default_level is set but no levels_path is configured")

    if not config.solver.prune_disconnected:
        issues.append("WARNING: Connectivity pruning is disabled; solving larger boards may be very slow")

    if config.logging.record_sessions and os.path.exists(config.logging.log_dir) and not os.path.isdir(config.logging.log_dir):
        issues.append(f"ERROR: log_dir is not a directory: {config.logging.log_dir}")

    return issues
