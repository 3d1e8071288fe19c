"""
Plotting package.
Matplotlib figures for search results.
"""

from .plotting import plot_grid_path, bar_compare

__all__ = ['plot_grid_path', 'bar_compare']
