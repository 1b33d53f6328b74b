"""Utility modules for cuberoll."""

from cuberoll.utils.display import StatusDisplay, LiveLogger, render_board, format_path
from cuberoll.utils.logger import SessionLogger, solutions_table, export_solutions
from cuberoll.utils.visualizer import visualize_world, save_world_visualization

__all__ = [
    "StatusDisplay",
    "LiveLogger",
    "render_board",
    "format_path",
    "SessionLogger",
    "solutions_table",
    "export_solutions",
    "visualize_world",
    "save_world_visualization",
]
