# pathsearch/config.py
"""
Tunables for the search engine and the benchmark runner.

Every value can be overridden through an environment variable so that the
benchmarks can be re-run without editing code.
"""
from __future__ import annotations

import os
from typing import Optional


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    if raw.strip().lower() == "none":
        return None
    return int(raw)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Engine
# =============================================================================

# Cap on expand() calls per search; None means unbounded
MAX_EXPANSIONS = _env_int("PATHSEARCH_MAX_EXPANSIONS", None)

# Reject None/NaN/negative edge costs instead of searching with them
CHECK_COSTS = _env_bool("PATHSEARCH_CHECK_COSTS", True)

# =============================================================================
# Benchmarks / CLI
# =============================================================================

LOG_LEVEL = os.getenv("PATHSEARCH_LOG_LEVEL", "WARNING")

# Side length of the open grid scenario
GRID_SIZE = _env_int("PATHSEARCH_GRID_SIZE", 5)

# Seed for generated mazes; "none" draws a fresh maze every run
MAZE_SEED = _env_int("PATHSEARCH_MAZE_SEED", 7)

# Maze dimensions in cells (odd numbers keep the outer wall intact)
MAZE_WIDTH = _env_int("PATHSEARCH_MAZE_WIDTH", 21)
MAZE_HEIGHT = _env_int("PATHSEARCH_MAZE_HEIGHT", 21)
