"""Reference implementations used to check search results."""

from collections import deque

import numpy as np


def bfs_length(grid, start, goal):
    """Number of cells on a shortest 4-neighbour path, 0 if unreachable."""
    grid = np.asarray(grid)
    rows, cols = grid.shape
    dist = {start: 1}
    q = deque([start])
    while q:
        r, c = q.popleft()
        if (r, c) == goal:
            return dist[(r, c)]
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr, nc] == 0 and (nr, nc) not in dist:
                dist[(nr, nc)] = dist[(r, c)] + 1
                q.append((nr, nc))
    return 0


def is_valid_walk(grid, path, diagonals=False):
    """Every cell is free and consecutive cells are neighbours."""
    grid = np.asarray(grid)
    for r, c in path:
        if grid[r, c] != 0:
            return False
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        dr, dc = abs(r1 - r2), abs(c1 - c2)
        if diagonals:
            if max(dr, dc) != 1:
                return False
        elif dr + dc != 1:
            return False
    return True
