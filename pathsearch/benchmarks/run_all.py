# pathsearch/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import math
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .. import config
from ..adaptors.graph import romania_adaptor
from ..adaptors.grid import GridAdaptor, open_grid
from ..adaptors.maze import generate_maze, maze_endpoints
from ..core.search import Search

logger = logging.getLogger(__name__)

SCENARIOS = ("grid", "maze", "romania")

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _row(name: str, search: Search) -> Dict:
    row = {"scenario": name}
    row.update(search.stats.as_dict())
    # no path: report the cost as null so the JSON stays standard
    if not math.isfinite(row["cost"]):
        row["cost"] = None
    return row

# ---- Scenarios --------------------------------------------------------------
def run_grid(args) -> Tuple[Dict, object, List]:
    grid = open_grid(args.size)
    adaptor = GridAdaptor(grid, diagonals=args.diagonals)
    goal = (args.size - 1, args.size - 1)
    with Search((0, 0), goal, adaptor, max_expansions=args.max_expansions,
                trace_memory=args.trace_memory) as search:
        return _row(f"grid{args.size}x{args.size}", search), grid, search.path()

def run_maze(args) -> Tuple[Dict, object, List]:
    maze = generate_maze(args.maze_width, args.maze_height, seed=args.seed)
    start, goal = maze_endpoints(maze)
    adaptor = GridAdaptor(maze, diagonals=False)
    with Search(start, goal, adaptor, max_expansions=args.max_expansions,
                trace_memory=args.trace_memory) as search:
        return _row(f"maze(seed={args.seed})", search), maze, search.path()

def run_romania(args) -> Tuple[Dict, object, List]:
    with Search("Arad", "Bucharest", romania_adaptor(), max_expansions=args.max_expansions,
                trace_memory=args.trace_memory) as search:
        return _row("romania", search), None, search.path()

RUNNERS: Dict[str, Callable] = {
    "grid": run_grid,
    "maze": run_maze,
    "romania": run_romania,
}

# ---- CLI --------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathsearch-bench",
        description="Run the best-first search on sample graphs and report expansions, cost and time.",
    )
    p.add_argument("--scenario", choices=SCENARIOS + ("all",), default="all")
    p.add_argument("--size", type=int, default=config.GRID_SIZE, help="side of the open grid")
    p.add_argument("--maze-width", type=int, default=config.MAZE_WIDTH)
    p.add_argument("--maze-height", type=int, default=config.MAZE_HEIGHT)
    p.add_argument("--seed", type=int, default=config.MAZE_SEED, help="maze seed")
    p.add_argument("--diagonals", action="store_true", help="8-neighbour moves on the open grid")
    p.add_argument("--max-expansions", type=int, default=None)
    p.add_argument("--trace-memory", action="store_true", help="record peak memory (slower)")
    p.add_argument("--json", type=Path, default=None, help="also write results to this file")
    p.add_argument("--plot", type=Path, default=None, help="save a picture of the last grid path")
    p.add_argument("--log-level", default=config.LOG_LEVEL)
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    names = SCENARIOS if args.scenario == "all" else (args.scenario,)
    rows = []
    last_grid = last_path = None
    last_name = ""
    for name in names:
        print(f"→ Running {name} ...")
        row, grid, path = RUNNERS[name](args)
        print(
            f"  {row['scenario']}: "
            f"{'OK' if row['found'] else 'FAIL'} "
            f"length={row['path_length']} "
            f"cost={row['cost']} "
            f"expanded={row['expansions']}, "
            f"time={_fmt_time(row['time_s'])}s"
        )
        rows.append(row)
        if grid is not None:
            last_grid, last_path, last_name = grid, path, row["scenario"]

    out = {"results": rows, "ts": time.time()}
    text = json.dumps(out, indent=2, allow_nan=False)
    print(text)

    if args.json is not None:
        args.json.write_text(text)
        logger.info("wrote %s", args.json)

    if args.plot is not None:
        if last_grid is None:
            logger.warning("no grid scenario ran; nothing to plot")
        else:
            from ..plots.plotting import plot_grid_path
            fig = plot_grid_path(last_grid, last_path, title=last_name)
            fig.savefig(args.plot, dpi=120)
            logger.info("wrote %s", args.plot)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
