# pathsearch/adaptors/grid.py
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple
import math
import numpy as np

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

_DIAGONALS = {
    "UpLeft": (-1, -1),
    "UpRight": (-1, 1),
    "DownLeft": (1, -1),
    "DownRight": (1, 1),
}

FREE = 0
WALL = 1


class GridAdaptor:
    """
    4- or 8-neighbour pathfinding on a 2D numpy grid.

    - Node: (row, col) tuple; expand() builds new tuples, which the search
      keeps alive only until it is closed
    - Blocked cells: any non-zero value
    - edge_cost(a, b): Manhattan distance, or octile distance with
      diagonals; consistent in both cases, so it doubles as the heuristic
    - key(n): the tuple itself
    """
    def __init__(self, grid, diagonals: bool = False):
        self.grid = np.asarray(grid)
        if self.grid.ndim != 2:
            raise ValueError(f"grid must be 2D, got shape {self.grid.shape}")
        self.rows, self.cols = self.grid.shape
        self.diagonals = diagonals
        self._moves = list(_MOVES.values()) + (list(_DIAGONALS.values()) if diagonals else [])
        self.expand_calls = 0

    def in_bounds(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def passable(self, cell: Coord) -> bool:
        return self.grid[cell[0], cell[1]] == FREE

    def expand(self, node: Coord) -> Iterable[Coord]:
        self.expand_calls += 1
        r, c = node
        out: List[Coord] = []
        for dr, dc in self._moves:
            nxt = (r + dr, c + dc)
            if self.in_bounds(nxt) and self.passable(nxt):
                out.append(nxt)
        return out

    def edge_cost(self, a: Coord, b: Coord) -> float:
        dr = abs(a[0] - b[0])
        dc = abs(a[1] - b[1])
        if not self.diagonals:
            return float(dr + dc)
        return max(dr, dc) + (math.sqrt(2) - 1) * min(dr, dc)

    def key(self, node: Coord) -> Coord:
        return node


def open_grid(rows: int, cols: Optional[int] = None) -> np.ndarray:
    return np.zeros((rows, rows if cols is None else cols), dtype=int)


def grid_from_strings(lines: Sequence[str]) -> Tuple[np.ndarray, Optional[Coord], Optional[Coord]]:
    """
    Parse an ASCII map: '#' is a wall, 'S' the start, 'G' the goal, anything
    else free. Returns (grid, start, goal); start/goal are None if absent.
    """
    if not lines:
        raise ValueError("empty map")
    width = max(len(line) for line in lines)
    grid = np.zeros((len(lines), width), dtype=int)
    start = goal = None
    for r, line in enumerate(lines):
        for c, ch in enumerate(line.ljust(width)):
            if ch == "#":
                grid[r, c] = WALL
            elif ch == "S":
                start = (r, c)
            elif ch == "G":
                goal = (r, c)
    return grid, start, goal
