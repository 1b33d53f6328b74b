"""
Text-mode game session: play, edit and solve levels from a terminal.
"""

from typing import List, Optional

from cuberoll.core.config import Config
from cuberoll.core.editor import CannotRoll, level_is_finished
from cuberoll.core.geometry import Cell, RollDirection, roll_direction_between
from cuberoll.core.path import chronological
from cuberoll.core.registry import get_step
from cuberoll.core.rules import RollAndSolve, ViolatesRule, world_after
from cuberoll.core.solver import with_calculated_solutions
from cuberoll.core.validation import validate_level
from cuberoll.core.world import World, default_world, reset
from cuberoll.input import direction_from_key, direction_from_swipe
from cuberoll.levels import Level, find_level, save_level_bank, upsert_level
from cuberoll.utils.display import format_path, render_board
from cuberoll.utils.logger import SessionLogger
from cuberoll.utils.visualizer import save_world_visualization

MODES = ("play", "edit")


class CubeRollGame:
    """Cube-rolling game main class"""

    def __init__(self, config: Config, levels: Optional[List[Level]] = None):
        self.config = config
        self.levels: List[Level] = list(levels or [])
        self.world: World = default_world(Cell(*config.game.start_cell))
        self.level_name = "untitled"
        self.mode = "play"
        self.steps = 0
        self.session_logger: Optional[SessionLogger] = None

    # ------------------------------------------------------------------ state

    def load_level(self, name: str) -> bool:
        level = find_level(self.levels, name)
        if level is None:
            print(f"Level '{name}' not found")
            return False
        self.world = reset(level.world)
        self.level_name = name
        self.mode = "play"
        self.steps = 0
        self._start_session()
        print(f"\n=== Loaded level: {name} ===")
        print(f"Board: {self.world.level_editing_path.length} cells")
        for issue in validate_level(self.world):
            print(f"  {issue}")
        return True

    def new_level(self):
        """Start authoring an empty board."""
        self.world = default_world(Cell(*self.config.game.start_cell))
        self.level_name = "untitled"
        self.mode = "edit"
        self.steps = 0
        print("New empty board. Roll to draw it; the level is finished once the red face is up.")

    def set_mode(self, mode: str):
        if mode not in MODES:
            print(f"Unknown mode '{mode}'. Use one of: {', '.join(MODES)}")
            return
        self.world = reset(self.world)
        self.mode = mode
        print(f"Mode: {mode}")

    def _start_session(self):
        if self.config.logging.record_sessions:
            self.session_logger = SessionLogger(self.config.logging.log_dir, self.level_name)
            self.session_logger.log_step(0, {"step_type": "initial", "world": self.world})

    # ------------------------------------------------------------------ moves

    def roll(self, direction: RollDirection):
        """Apply one roll in the current mode and report the outcome."""
        step = get_step(self.mode)
        outcome = step(direction, self.world)
        self.world = world_after(outcome, self.world)
        self.steps += 1

        violation = None
        if isinstance(outcome, (ViolatesRule, CannotRoll)):
            violation = outcome.kind.value
            print(f"✗ {violation}")
        elif isinstance(outcome, RollAndSolve):
            print("\n🎉 LEVEL SOLVED! 🎉")
        else:
            print(f"✓ {type(outcome).__name__}")

        if self.session_logger is not None:
            self.session_logger.log_step(self.steps, {
                "step_type": "roll",
                "mode": self.mode,
                "direction": direction.value,
                "outcome": type(outcome).__name__,
                "violation": violation,
            }, verbose=self.config.logging.verbose)
            if isinstance(outcome, RollAndSolve):
                self.session_logger.save_logs()
        return outcome

    def swipe(self, dx: float, dy: float):
        """Roll in the direction of a swipe, given in screen pixels."""
        direction = direction_from_swipe(dx, dy, self.config.input.swipe_threshold)
        if direction is None:
            print(f"Swipe too short (threshold {self.config.input.swipe_threshold:g}px)")
            return None
        return self.roll(direction)

    def solve(self):
        """Fill the solution cache and list the first solutions."""
        self.world = with_calculated_solutions(self.world, self.config.solver.prune_disconnected)
        solutions = self.world.calculated_solutions
        print(f"\nFound {len(solutions)} solution(s)")
        limit = self.config.solver.max_solutions_shown
        for i, path in enumerate(solutions[:limit], 1):
            print(f"  {i}. {format_path(path)}")
        if len(solutions) > limit:
            print(f"  ... and {len(solutions) - limit} more")

    def hint(self) -> Optional[RollDirection]:
        """Next roll of a cached solution that extends the player's path."""
        if not self.world.calculated_solutions:
            self.world = with_calculated_solutions(self.world, self.config.solver.prune_disconnected)
        taken = chronological(self.world.player_path)
        for solution in self.world.calculated_solutions:
            cells = chronological(solution)
            if cells[:len(taken)] == taken and len(cells) > len(taken):
                direction = roll_direction_between(taken[-1], cells[len(taken)])
                print(f"Hint: roll {direction.value}")
                return direction
        print("No solution continues from here. Roll back or reset.")
        return None

    def save_level(self, name: str):
        if not level_is_finished(self.world):
            print("Warning: the board does not end with the red face up yet")
        self.levels = upsert_level(self.levels, Level(name, reset(self.world)))
        self.level_name = name
        if self.config.game.levels_path:
            save_level_bank(self.config.game.levels_path, self.levels)
            print(f"Saved '{name}' to {self.config.game.levels_path}")
        else:
            print(f"Saved '{name}' in memory (no levels_path configured)")

    # ------------------------------------------------------------------ views

    def show_state(self):
        print("\n=== Current State ===")
        print(f"Level: {self.level_name} ({self.mode} mode)")
        print(f"Board: {self.world.level_editing_path.length} cells")
        print(f"Visited: {self.world.player_path.length}")
        print(f"Cube: {self.world.player_cube.cell.to_tuple()} red face {self.world.player_cube.orientation}")
        print(f"Editing cube: {self.world.level_editing_cube.cell.to_tuple()} "
              f"red face {self.world.level_editing_cube.orientation}")

    def visualize_2d(self):
        print()
        for row in render_board(self.world, show_player=self.mode == "play"):
            print(f"  {row}")

    def plot(self, filename: str):
        save_world_visualization(self.world, filename, title=f"{self.level_name} ({self.mode} mode)")
        print(f"Saved board plot to {filename}")

    def list_levels(self):
        print(f"\nFound {len(self.levels)} levels:")
        for level in self.levels:
            print(f"  - {level.name} ({level.world.level_editing_path.length} cells)")

    def show_help(self):
        print("""
Available commands:
  help                    - Show this help
  up/down/left/right      - Roll the cube (also w/a/s/d, arrow key names)
  list                    - List available levels
  load <name>             - Load a level
  new                     - Start an empty board in edit mode
  mode <play|edit>        - Switch mode (the cube restarts from the start cell)
  reset                   - Put the cube back on the start cell
  state                   - Show current game state
  view                    - Show the board
  plot <file>             - Save a picture of the board
  swipe <dx> <dy>         - Roll by a swipe in screen pixels (y grows down)
  solve                   - Compute all solutions
  hint                    - Suggest the next roll
  save <name>             - Save the board as a level
  quit/exit               - Exit the game
        """)

    # ------------------------------------------------------------------ loop

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        parts = line.strip().split()
        if not parts:
            return True
        command = parts[0].lower()

        direction = direction_from_key(parts[0])
        if direction is not None:
            self.roll(direction)
            self.visualize_2d()
        elif command == "help":
            self.show_help()
        elif command == "list":
            self.list_levels()
        elif command == "load":
            if len(parts) < 2:
                print("Usage: load <name>")
            else:
                self.load_level(" ".join(parts[1:]))
        elif command == "new":
            self.new_level()
        elif command == "mode":
            if len(parts) < 2:
                print("Usage: mode <play|edit>")
            else:
                self.set_mode(parts[1].lower())
        elif command == "reset":
            self.world = reset(self.world)
            self.visualize_2d()
        elif command == "state":
            self.show_state()
        elif command == "view":
            self.visualize_2d()
        elif command == "plot":
            if len(parts) < 2:
                print("Usage: plot <file>")
            else:
                self.plot(parts[1])
        elif command == "swipe":
            try:
                dx, dy = float(parts[1]), float(parts[2])
            except (IndexError, ValueError):
                print("Usage: swipe <dx> <dy>")
            else:
                self.swipe(dx, dy)
                self.visualize_2d()
        elif command == "solve":
            self.solve()
        elif command == "hint":
            self.hint()
        elif command == "save":
            if len(parts) < 2:
                print("Usage: save <name>")
            else:
                self.save_level(" ".join(parts[1:]))
        elif command in ("quit", "exit"):
            if self.session_logger is not None:
                self.session_logger.save_logs()
            print("Goodbye!")
            return False
        else:
            print(f"Unknown command: {command}")
            print("Type 'help' for commands")
        return True

    def run_cli(self):
        """Run the interactive main loop."""
        print("=== Cube Roll ===")
        print("Type 'help' for commands")
        self.visualize_2d()

        while True:
            try:
                line = input("\n> ")
            except EOFError:
                break
            except KeyboardInterrupt:
                print("\nUse 'quit' to exit")
                continue
            try:
                if not self.execute(line):
                    break
            except ValueError as e:
                print(f"Error: {e}")
