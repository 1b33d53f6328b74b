#!/usr/bin/env python3
"""A quick demonstration of cuberoll: play a level by hand, then let the solver enumerate it."""
import sys
from pathlib import Path

from cuberoll import RollDirection, SolutionSearch, load_config, step, world_after
from cuberoll.levels import find_level, load_level_bank
from cuberoll.utils import format_path, render_board

EXAMPLES_DIR = Path(__file__).resolve().parent


def main():
    """Load the sample bank, roll a few moves, then solve every level."""
    config = load_config(str(EXAMPLES_DIR / "cuberoll.yaml"))
    levels = load_level_bank(str(EXAMPLES_DIR / "levels.json"))

    print("\n" + " Cube Roll Quick Test ".center(60, "="))

    level = find_level(levels, "Square")
    world = level.world
    for direction in [RollDirection.UP, RollDirection.RIGHT, RollDirection.UP, RollDirection.LEFT]:
        outcome = step(direction, world)
        world = world_after(outcome, world)
        print(f"  roll {direction.value:<5} -> {type(outcome).__name__}"
              + (f" ({outcome.kind.value})" if hasattr(outcome, "kind") else ""))
    for row in render_board(world):
        print(f"  {row}")

    for level in levels:
        search = SolutionSearch(level.world, prune_disconnected=config.solver.prune_disconnected)
        solutions = search.run()
        print(f"\n{level.name}: {len(solutions)} solution(s), "
              f"{search.expanded} states expanded, {search.pruned} pruned")
        for path in solutions[:config.solver.max_solutions_shown]:
            print(f"  {format_path(path)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
