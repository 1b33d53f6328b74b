"""
Board plots - top view of a board with a traversal drawn over it.
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from typing import Optional, Tuple

from cuberoll.core.path import Path, chronological
from cuberoll.core.rotation import red_face_is_on_top
from cuberoll.core.world import World

CELL_COLORS = {
    "board": "#e8e8e8",
    "visited": "#a6c8ff",
    "start": "#7fd17f",
    "finish": "#f5b971",
}


def visualize_world(world: World,
                    title: str = "Board",
                    solution: Optional[Path] = None,
                    figsize: Tuple[int, int] = None) -> plt.Figure:
    """
    Draw the board, with either a solution or the player's path on top.

    Args:
        world: World whose board is drawn
        title: Figure title
        solution: Path to draw instead of the player's path
        figsize: Figure size; derived from the board extent if omitted

    Returns:
        matplotlib Figure
    """
    board = world.board
    xs = [c.x for c in board]
    ys = [c.y for c in board]
    width = max(xs) - min(xs) + 1
    height = max(ys) - min(ys) + 1

    if figsize is None:
        figsize = (max(3, width + 1), max(3, height + 1))

    fig, ax = plt.subplots(figsize=figsize)

    path = solution if solution is not None else world.player_path
    visited = path.cell_set

    for cell in board:
        if cell == world.start_cell:
            color = CELL_COLORS["start"]
        elif cell == world.finish_cell:
            color = CELL_COLORS["finish"]
        elif cell in visited:
            color = CELL_COLORS["visited"]
        else:
            color = CELL_COLORS["board"]
        ax.add_patch(Rectangle((cell.x - 0.5, cell.y - 0.5), 1, 1,
                               facecolor=color, edgecolor="gray", linewidth=1))

    cells = chronological(path)
    if len(cells) > 1:
        ax.plot([c.x for c in cells], [c.y for c in cells], color="navy", linewidth=2, marker="o", markersize=4)
        last, before = cells[-1], cells[-2]
        ax.annotate("", xy=(last.x, last.y), xytext=(before.x, before.y),
                    arrowprops=dict(arrowstyle="->", color="navy", linewidth=2))

    if solution is None:
        cube = world.player_cube
        face = "red" if red_face_is_on_top(cube.orientation) else "white"
        ax.add_patch(Rectangle((cube.cell.x - 0.3, cube.cell.y - 0.3), 0.6, 0.6,
                               facecolor=face, edgecolor="black", linewidth=1.5))

    ax.set_xlim(min(xs) - 0.75, max(xs) + 0.75)
    ax.set_ylim(min(ys) - 0.75, max(ys) + 0.75)
    ax.set_aspect("equal")
    ax.set_xticks(range(min(xs), max(xs) + 1))
    ax.set_yticks(range(min(ys), max(ys) + 1))
    ax.set_title(title, fontsize=12, fontweight='bold')

    plt.tight_layout()
    return fig


def save_world_visualization(world: World, filename: str,
                             title: str = "Board",
                             solution: Optional[Path] = None,
                             dpi: int = 150):
    """
    Save a board plot to an image file.

    Args:
        world: World whose board is drawn
        filename: Output file name
        title: Figure title
        solution: Path to draw instead of the player's path
        dpi: Resolution
    """
    fig = visualize_world(world, title=title, solution=solution)
    fig.savefig(filename, dpi=dpi, bbox_inches='tight', facecolor='white')
    plt.close(fig)
    return filename
