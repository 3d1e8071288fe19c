"""
pathsearch: a best-first (A*-style) search engine for caller-defined graphs.

Plug a graph in through an adaptor providing expand(node) and
edge_cost(a, b), then run Search(start, goal, adaptor).path() or
find_path(start, goal, adaptor).
"""

from .core import Adaptor, KeyedAdaptor, Search, SearchState, SearchStats, find_path
from .errors import (
    SearchError,
    InvalidAdaptorError,
    InvalidCostError,
    NegativeCostError,
    SearchClosedError,
)

__version__ = "0.1.0"

__all__ = [
    "Adaptor",
    "KeyedAdaptor",
    "Search",
    "SearchState",
    "SearchStats",
    "find_path",
    "SearchError",
    "InvalidAdaptorError",
    "InvalidCostError",
    "NegativeCostError",
    "SearchClosedError",
]
