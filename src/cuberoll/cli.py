"""
Command-line interface for cuberoll.

Play and author cube-rolling levels in the terminal, enumerate every
solution of a level, and validate level banks and configuration files.
"""

import argparse
import sys
import json
import time
from typing import Optional, List
from pathlib import Path

from cuberoll.core.config import Config, EXPORT_FORMATS, load_config, create_default_config, validate_config
from cuberoll.core.codec import DecodeError
from cuberoll.core.solver import SolutionSearch
from cuberoll.core.validation import validate_level
from cuberoll.core.world import World
from cuberoll.game import CubeRollGame
from cuberoll.levels import Level, find_level, load_level_bank, load_world_or_default
from cuberoll.utils.display import StatusDisplay, LiveLogger, format_path, render_board
from cuberoll.utils.logger import export_solutions
from cuberoll.utils.visualizer import save_world_visualization


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="cuberoll: roll the cube over every cell and finish with the red face up",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play a level from a level bank
  cuberoll play --levels examples/levels.json --level "Two by four"

  # Enumerate every solution and export them
  cuberoll solve --levels examples/levels.json --level "Two by four" --export solutions.csv

  # Check a level bank
  cuberoll validate-level --levels examples/levels.json

  # Create default configuration
  cuberoll create-config --output cuberoll.yaml
        """
    )
    parser.add_argument("--config", "-c", help="Path to configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play or edit levels interactively")
    play_parser.add_argument("--levels", help="Level bank JSON file (overrides config)")
    play_parser.add_argument("--level", help="Level to load on start")
    play_parser.add_argument("--record", action="store_true", help="Record the session to the log directory")
    play_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Enumerate every solution of a level")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--level", help="Level name in the level bank")
    source.add_argument("--world", help="JSON file holding a single saved world")
    solve_parser.add_argument("--levels", help="Level bank JSON file (overrides config)")
    solve_parser.add_argument("--no-prune", action="store_true", help="Disable connectivity pruning")
    solve_parser.add_argument("--export", help="Write the solutions to this file")
    solve_parser.add_argument("--format", choices=EXPORT_FORMATS, help="Export format (overrides config)")
    solve_parser.add_argument("--plot", help="Save a picture of the board with the first solution to this file")
    solve_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    # List levels command
    list_parser = subparsers.add_parser("list-levels", help="List the levels of a level bank")
    list_parser.add_argument("--levels", help="Level bank JSON file (overrides config)")
    list_parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")

    # Validate level command
    validate_level_parser = subparsers.add_parser("validate-level", help="Check levels for consistency")
    validate_level_parser.add_argument("--levels", help="Level bank JSON file (overrides config)")
    validate_level_parser.add_argument("--level", help="Only check this level")
    validate_level_parser.add_argument("--strict", action="store_true", help="Treat warnings as errors")

    # Create config command
    config_parser = subparsers.add_parser("create-config", help="Create default configuration file")
    config_parser.add_argument("--output", "-o", default="cuberoll.yaml", help="Output configuration file")

    # Validate config command
    validate_parser = subparsers.add_parser("validate-config", help="Validate configuration file")
    validate_parser.add_argument("config_file", help="Configuration file to validate")
    validate_parser.add_argument("--strict", action="store_true", help="Treat warnings as errors")

    return parser


def _load_config(args, logger: LiveLogger) -> Optional[Config]:
    """Load the configuration given with --config, or defaults."""
    if not getattr(args, "config", None):
        return Config()
    try:
        logger.log_action("Loading configuration", args.config)
        config = load_config(args.config)
        logger.log_done("Loading configuration")
        return config
    except FileNotFoundError:
        logger.log_error(f"Configuration file not found: {args.config}")
        logger.log_info("Use 'cuberoll create-config' to create a default configuration")
        return None
    except Exception as e:
        logger.log_error(f"Configuration error: {e}")
        return None


def _levels_path(args, config: Config) -> Optional[str]:
    if getattr(args, "levels", None):
        config.game.levels_path = args.levels
    return config.game.levels_path


def _load_levels(args, config: Config, logger: LiveLogger) -> Optional[List[Level]]:
    levels_path = _levels_path(args, config)
    if not levels_path:
        logger.log_error("No level bank given. Use --levels or set game.levels_path in the config")
        return None
    try:
        logger.log_action("Loading level bank", levels_path)
        levels = load_level_bank(levels_path)
        logger.log_done("Loading level bank", f"{len(levels)} level(s)")
        return levels
    except (FileNotFoundError, DecodeError) as e:
        logger.log_error(str(e))
        return None


def play_command(args) -> int:
    """Execute play command."""
    logger = LiveLogger(verbose=getattr(args, 'verbose', False))
    config = _load_config(args, logger)
    if config is None:
        return 1
    if args.record:
        config.logging.record_sessions = True
    if args.verbose:
        config.logging.verbose = True

    levels: List[Level] = []
    if _levels_path(args, config):
        if Path(config.game.levels_path).exists():
            levels = _load_levels(args, config, logger)
            if levels is None:
                return 1
        else:
            logger.log_warning(f"Level bank {config.game.levels_path} does not exist yet; it will be created on save")

    game = CubeRollGame(config, levels)
    level_name = args.level or config.game.default_level
    if level_name and not game.load_level(level_name):
        return 1
    game.run_cli()
    return 0


def _world_for_solve(args, config: Config, logger: LiveLogger) -> Optional[World]:
    if args.world:
        try:
            with open(args.world, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.log_error(f"Could not read {args.world}: {e}")
            return None
        return load_world_or_default(data)

    levels = _load_levels(args, config, logger)
    if levels is None:
        return None
    level = find_level(levels, args.level)
    if level is None:
        logger.log_error(f"Level '{args.level}' not found")
        return None
    return level.world


def solve_command(args) -> int:
    """Execute solve command."""
    logger = LiveLogger(verbose=getattr(args, 'verbose', False))

    try:
        StatusDisplay.print_header("cuberoll Solver")
        config = _load_config(args, logger)
        if config is None:
            return 1

        world = _world_for_solve(args, config, logger)
        if world is None:
            return 1

        prune = config.solver.prune_disconnected and not args.no_prune
        for row in render_board(world, show_player=False):
            print(f"  {row}")

        logger.log_action("Searching solutions")
        start = time.time()
        search = SolutionSearch(world, prune_disconnected=prune)
        solutions = search.run()
        elapsed = time.time() - start
        logger.log_done("Searching solutions", f"{len(solutions)} found")

        StatusDisplay.print_results({
            "Board Cells": world.level_editing_path.length,
            "Solutions": len(solutions),
            "States Visited": len(search.visited),
            "States Expanded": search.expanded,
            "States Pruned": search.pruned,
            "Pruning": prune,
            "Search Time (s)": elapsed,
        }, "Search Results")

        limit = config.solver.max_solutions_shown
        if solutions:
            StatusDisplay.print_section("Solutions")
            for i, path in enumerate(solutions[:limit], 1):
                print(f"  {i}. {format_path(path)}")
            if len(solutions) > limit:
                print(f"  ... and {len(solutions) - limit} more")

        if args.export:
            fmt = args.format or config.logging.export_format
            written = export_solutions(solutions, args.export, fmt)
            logger.log_result(f"Solutions saved to {written}")

        if args.plot:
            solution = solutions[0] if solutions else None
            save_world_visualization(world, args.plot, title=f"{len(solutions)} solution(s)", solution=solution)
            logger.log_result(f"Board plot saved to {args.plot}")
        return 0

    except KeyboardInterrupt:
        logger.log_warning("Search interrupted by user")
        return 1
    except Exception as e:
        logger.log_error(f"Failed to solve level: {e}")
        return 1


def list_levels_command(args) -> int:
    """Execute list-levels command."""
    logger = LiveLogger(verbose=False)
    config = _load_config(args, logger)
    if config is None:
        return 1
    levels = _load_levels(args, config, logger)
    if levels is None:
        return 1

    if args.format == "json":
        print(json.dumps([
            {"name": level.name, "cells": level.world.level_editing_path.length}
            for level in levels
        ], indent=2))
    else:
        StatusDisplay.print_section(f"Levels ({len(levels)})")
        for level in levels:
            print(f"  {level.name:<30} : {level.world.level_editing_path.length} cells")
    return 0


def validate_level_command(args) -> int:
    """Execute validate-level command."""
    logger = LiveLogger(verbose=True)
    config = _load_config(args, logger)
    if config is None:
        return 1
    levels = _load_levels(args, config, logger)
    if levels is None:
        return 1

    if args.level:
        level = find_level(levels, args.level)
        if level is None:
            logger.log_error(f"Level '{args.level}' not found")
            return 1
        levels = [level]

    StatusDisplay.print_header("Level Validation")
    failed = 0
    for level in levels:
        issues = validate_level(level.world)
        errors = [issue for issue in issues if issue.startswith("ERROR")]
        warnings = [issue for issue in issues if not issue.startswith("ERROR")]
        if args.strict and warnings:
            errors.extend(warnings)
            warnings = []

        if errors:
            failed += 1
            logger.log_error(f"{level.name}: {len(errors)} error(s)")
            for error in errors:
                print(f"    {error}")
        elif warnings:
            logger.log_warning(f"{level.name}: valid with {len(warnings)} warning(s)")
            for warning in warnings:
                print(f"    {warning}")
        else:
            logger.log_result(f"{level.name}: valid")

    StatusDisplay.print_results({
        "Levels Checked": len(levels),
        "Levels Failed": failed,
    }, "Validation Summary")
    return 1 if failed else 0


def create_config_command(args) -> int:
    """Execute create-config command."""
    logger = LiveLogger(verbose=True)
    try:
        output_path = Path(args.output)
        if output_path.exists():
            logger.log_warning(f"Overwriting existing file: {output_path}")
        config = create_default_config(str(output_path))
        StatusDisplay.print_config(
            {f"{section}.{key}": value for section, values in config.to_dict().items() for key, value in values.items()},
            "Default Configuration"
        )
        logger.log_result(f"Configuration written to {output_path}")
        return 0
    except Exception as e:
        logger.log_error(f"Failed to create config: {e}")
        return 1


def validate_config_command(args) -> int:
    """Execute validate-config command."""
    logger = LiveLogger(verbose=True)

    try:
        StatusDisplay.print_header("Configuration Validation")

        config_path = Path(args.config_file)
        if not config_path.exists():
            logger.log_error(f"Configuration file not found: {args.config_file}")
            return 1

        logger.log_action("Loading configuration", args.config_file)
        config = load_config(args.config_file)
        logger.log_done("Loading configuration")

        issues = validate_config(config)
        errors = [issue for issue in issues if issue.startswith("ERROR")]
        warnings = [issue for issue in issues if not issue.startswith("ERROR")]

        if args.strict and warnings:
            errors.extend(warnings)
            warnings = []

        if errors:
            StatusDisplay.print_section("❌ Configuration Errors")
            for i, error in enumerate(errors, 1):
                logger.log_error(f"{i}. {error.replace('ERROR: ', '')}")
            return 1
        elif warnings:
            StatusDisplay.print_section("⚠️  Configuration Warnings")
            for i, warning in enumerate(warnings, 1):
                logger.log_warning(f"{i}. {warning.replace('WARNING: ', '')}")
        logger.log_result("Configuration is valid")
        return 0

    except Exception as e:
        logger.log_error(f"Failed to validate config: {e}")
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        parser = create_parser()

        if argv is None:
            argv = sys.argv[1:]
        if not argv:
            parser.print_help()
            return 1

        args = parser.parse_args(argv)

        # Route to appropriate command handler
        command_handlers = {
            "play": play_command,
            "solve": solve_command,
            "list-levels": list_levels_command,
            "validate-level": validate_level_command,
            "create-config": create_config_command,
            "validate-config": validate_config_command,
        }

        handler = command_handlers.get(args.command)
        if handler:
            return handler(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
