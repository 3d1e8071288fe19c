# pathsearch/adaptors/maze.py
import random
from typing import Optional, Tuple

import numpy as np

from .grid import FREE, WALL

NORTH, SOUTH, EAST, WEST = (-2, 0), (2, 0), (0, 2), (0, -2)


def generate_maze(width: int = 21, height: int = 21, seed: Optional[int] = None) -> np.ndarray:
    """
    Generate a perfect maze (exactly one path between any two free cells)
    with a randomized depth-first backtracker.

    Args:
        width: Number of columns, odd and at least 3
        height: Number of rows, odd and at least 3
        seed: Seed for the random generator; same seed, same maze

    Returns:
        2D numpy array (1=wall, 0=free) of shape (height, width). Cells with
        odd coordinates are rooms; the outer border is always wall.
    """
    if width < 3 or height < 3:
        raise ValueError("Maze too small")
    if width % 2 == 0 or height % 2 == 0:
        raise ValueError("width and height must be odd")

    rng = random.Random(seed)
    maze = np.full((height, width), WALL, dtype=int)

    start = (rng.randrange(1, height, 2), rng.randrange(1, width, 2))
    maze[start] = FREE
    stack = [start]

    while stack:
        r, c = stack[-1]
        unvisited = []
        for dr, dc in (NORTH, SOUTH, EAST, WEST):
            nr, nc = r + dr, c + dc
            if 0 < nr < height - 1 and 0 < nc < width - 1 and maze[nr, nc] == WALL:
                unvisited.append((dr, dc))

        if not unvisited:
            stack.pop()
            continue

        dr, dc = rng.choice(unvisited)
        maze[r + dr // 2, c + dc // 2] = FREE
        maze[r + dr, c + dc] = FREE
        stack.append((r + dr, c + dc))

    return maze


def maze_endpoints(maze: np.ndarray) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Top-left and bottom-right rooms of a maze built by generate_maze()."""
    h, w = maze.shape
    return (1, 1), (h - 2, w - 2)


def print_maze(grid: np.ndarray, path=None) -> str:
    wall_char = "██"
    path_char = "··"
    empty_char = "  "
    on_path = set(path or [])

    lines = []
    for r in range(grid.shape[0]):
        row_chars = []
        for c in range(grid.shape[1]):
            if grid[r, c] != FREE:
                row_chars.append(wall_char)
            elif (r, c) in on_path:
                row_chars.append(path_char)
            else:
                row_chars.append(empty_char)
        lines.append("".join(row_chars))
    return "\n".join(lines)
