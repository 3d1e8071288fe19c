# pathsearch/plots/plotting.py
# Visual helpers: a grid with the found path drawn on top, and bar charts comparing benchmark runs.
from __future__ import annotations
import numpy as np
import matplotlib.pyplot as plt

def plot_grid_path(grid, path, ax=None, title="Search Path", expanded=None):
    grid = np.asarray(grid)
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure
    ax.imshow(grid != 0, cmap="Greys", origin="upper")
    if path:
        rows = [p[0] for p in path]
        cols = [p[1] for p in path]
        ax.plot(cols, rows, color="tab:orange", linewidth=2)
        ax.scatter([cols[0]], [rows[0]], color="tab:green", zorder=3, label="start")
        ax.scatter([cols[-1]], [rows[-1]], color="tab:red", zorder=3, label="goal")
        ax.legend(loc="upper right", fontsize=8)
    label = title if expanded is None else f"{title} ({expanded} expansions)"
    ax.set_title(label)
    ax.set_xticks([]); ax.set_yticks([])
    return fig

def bar_compare(rows, title="Search Comparison"):
    names = [r["scenario"] for r in rows]
    nodes = [r["expansions"] for r in rows]
    costs = [r["cost"] if r["found"] else 0 for r in rows]
    times = [r["time_s"] for r in rows]

    fig, axs = plt.subplots(1, 3, figsize=(12, 4))
    axs[0].bar(names, nodes); axs[0].set_title("Expansions"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig
