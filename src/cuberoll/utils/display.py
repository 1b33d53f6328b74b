"""
User-friendly display utilities for cuberoll.
"""

import time
from typing import Dict, Any, List
from datetime import datetime

from cuberoll.core.geometry import Cell
from cuberoll.core.path import Path, chronological
from cuberoll.core.rotation import red_face_is_on_top
from cuberoll.core.world import World


class StatusDisplay:
    """Handles status display for different operations."""

    @staticmethod
    def print_header(title: str, width: int = 60):
        """Print a formatted header."""
        print("\n" + "=" * width)
        print(f"{title:^{width}}")
        print("=" * width)

    @staticmethod
    def print_section(title: str, width: int = 60):
        """Print a section header."""
        print(f"\n📋 {title}")
        print("-" * width)

    @staticmethod
    def print_config(config_dict: Dict[str, Any], title: str = "Configuration"):
        """Print configuration in a nice format."""
        StatusDisplay.print_section(title)
        for key, value in config_dict.items():
            print(f"  {key:<20} : {value}")

    @staticmethod
    def print_status(message: str, status: str = "info"):
        """Print a status message with appropriate emoji."""
        icons = {
            "info": "ℹ️",
            "success": "✅",
            "warning": "⚠️",
            "error": "❌",
            "loading": "⏳",
            "processing": "🔄"
        }
        icon = icons.get(status, "ℹ️")
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"{icon} [{timestamp}] {message}")

    @staticmethod
    def print_results(results: Dict[str, Any], title: str = "Results"):
        """Print results in a nice format."""
        StatusDisplay.print_section(title)
        for key, value in results.items():
            if isinstance(value, bool):
                icon = "✅" if value else "❌"
                print(f"  {key:<20} : {icon} {value}")
            elif isinstance(value, float):
                print(f"  {key:<20} : {value:.3f}")
            else:
                print(f"  {key:<20} : {value}")


class LiveLogger:
    """Live logging with real-time updates."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self.action_times = {}

    def log_action(self, action_name: str, details: str = ""):
        """Log an action being performed."""
        self.action_times[action_name] = time.time()
        if self.verbose:
            message = f"Executing: {action_name}"
            if details:
                message += f" - {details}"
            StatusDisplay.print_status(message, "processing")

    def log_done(self, action_name: str, result: str = "done"):
        """Log the end of an action started with log_action."""
        if self.verbose:
            elapsed = time.time() - self.action_times.pop(action_name, time.time())
            StatusDisplay.print_status(f"{action_name}: {result} ({elapsed:.2f}s)", "success")

    def log_result(self, message: str, success: bool = True):
        """Log a result."""
        if self.verbose:
            status = "success" if success else "error"
            StatusDisplay.print_status(message, status)

    def log_info(self, message: str):
        """Log an info message."""
        if self.verbose:
            StatusDisplay.print_status(message, "info")

    def log_warning(self, message: str):
        """Log a warning message."""
        if self.verbose:
            StatusDisplay.print_status(message, "warning")

    def log_error(self, message: str):
        """Log an error message. Errors are always shown."""
        StatusDisplay.print_status(message, "error")


def render_board(world: World, show_player: bool = True) -> List[str]:
    """
    Top view of the board as text rows, highest y first.

    Legend: S start, F finish, # visited, @ player cube (* when the red face
    is up), . free board cell, blank outside the board.
    """
    board = world.board
    if not board:
        return []
    xs = [c.x for c in board]
    ys = [c.y for c in board]

    rows = []
    for y in range(max(ys), min(ys) - 1, -1):
        row = ""
        for x in range(min(xs), max(xs) + 1):
            cell = Cell(x, y)
            if cell not in board:
                row += "   "
            elif show_player and cell == world.player_cube.cell:
                row += " * " if red_face_is_on_top(world.player_cube.orientation) else " @ "
            elif show_player and cell in world.player_path.cell_set:
                row += " # "
            elif cell == world.start_cell:
                row += " S "
            elif cell == world.finish_cell:
                row += " F "
            else:
                row += " . "
        rows.append(row.rstrip())
    return rows


def format_path(path: Path) -> str:
    """Cells oldest first, e.g. (0,0) -> (1,0)."""
    return " -> ".join(f"({c.x},{c.y})" for c in chronological(path))
