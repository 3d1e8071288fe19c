"""
Adaptors package.
Ready-made graphs that satisfy the adaptor contract: linked nodes, numpy grids, weighted maps and mazes.
"""

from .linked import LinkedNode, LinkedAdaptor, chain
from .grid import GridAdaptor, open_grid, grid_from_strings
from .graph import WeightedGraphAdaptor, romania_adaptor, romania_cities
from .maze import generate_maze, maze_endpoints, print_maze

__all__ = [
    'LinkedNode', 'LinkedAdaptor', 'chain',
    'GridAdaptor', 'open_grid', 'grid_from_strings',
    'WeightedGraphAdaptor', 'romania_adaptor', 'romania_cities',
    'generate_maze', 'maze_endpoints', 'print_maze',
]
