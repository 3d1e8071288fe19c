# pathsearch/core/search.py
"""
Best-first (A*-style) search over a caller-defined graph.

The engine never looks inside the caller's nodes: it asks the adaptor for
successors and edge costs and compares nodes with ==. Records are scored
once when created (f = g + h), the open record with the lowest f is expanded
next (most recently admitted first among equal f), and expansion stops as
soon as the goal appears among the successors.

Closed records are never reopened; a cheaper rediscovery of the same node
enters the open list as a new record. Because the goal is accepted when it
is generated rather than when it is selected, the returned path can cost
more than the optimum.
"""
from __future__ import annotations

import enum
import logging
import math
from typing import List, Optional

from .. import config
from ..errors import InvalidCostError, NegativeCostError, SearchClosedError
from .adaptor import check_adaptor, key_function
from .frontiers import ClosedList, OpenList, blocks
from .metrics import MeasuredRun, SearchStats
from .record import Record, RecordArena
from .utils import reconstruct_path

logger = logging.getLogger(__name__)


class SearchState(enum.Enum):
    RUNNING = "running"
    DONE = "done"


class Search:
    """
    One search from start to goal; runs to completion in the constructor.

    Args:
        start: Start node (borrowed, never copied)
        goal: Goal node, compared to successors with ==
        adaptor: Object providing expand(node) and edge_cost(a, b)
        max_expansions: Give up after this many expand() calls
            (defaults to config.MAX_EXPANSIONS)
        check_costs: Reject None/NaN/negative edge costs
            (defaults to config.CHECK_COSTS)
        trace_memory: Record peak memory in stats.peak_kb

    path() may be called any number of times until close(); close() drops the
    records (and with them every node reference the engine holds) and calls
    the adaptor's close() hook if it has one.
    """

    def __init__(
        self,
        start,
        goal,
        adaptor,
        *,
        max_expansions: Optional[int] = None,
        check_costs: Optional[bool] = None,
        trace_memory: bool = False,
    ):
        check_adaptor(adaptor)
        self.start = start
        self.goal = goal
        self.adaptor = adaptor
        self.max_expansions = config.MAX_EXPANSIONS if max_expansions is None else max_expansions
        self.check_costs = config.CHECK_COSTS if check_costs is None else check_costs

        key = key_function(adaptor)
        self._arena = RecordArena()
        self._open = OpenList(key)
        self._closed = ClosedList(key)
        self._terminal: Optional[int] = None
        self._released = False

        self.state = SearchState.RUNNING
        self.stats = SearchStats()
        with MeasuredRun(trace_memory=trace_memory) as meter:
            self._run()
        self.state = SearchState.DONE
        self.stats.time_s = meter.elapsed
        self.stats.peak_kb = meter.peak_kb
        self.stats.records_created = len(self._arena)

        if self._terminal is not None:
            terminal = self._arena[self._terminal]
            self.stats.found = True
            self.stats.path_length = terminal.depth
            self.stats.cost = terminal.g
        logger.info(
            "search %s: found=%s length=%d expansions=%d records=%d",
            type(adaptor).__name__, self.stats.found, self.stats.path_length,
            self.stats.expansions, self.stats.records_created,
        )

    # ---- algorithm -------------------------------------------------------

    def _edge_cost(self, a, b) -> float:
        value = self.adaptor.edge_cost(a, b)
        if not self.check_costs:
            return float(value)
        if value is None:
            raise InvalidCostError(
                f"edge_cost returned None for (a={a!r}, b={b!r}). "
                "Check your adaptor's cost mapping."
            )
        value = float(value)
        if math.isnan(value):
            raise InvalidCostError(f"edge_cost returned NaN for (a={a!r}, b={b!r})")
        if value < 0:
            raise NegativeCostError(f"edge_cost returned {value} for (a={a!r}, b={b!r})")
        return value

    def _run(self) -> None:
        start = self._arena.new(self.start)
        if self.start == self.goal:
            self._terminal = start.index
            return
        self._open.push(start)

        while self._open:
            if self.max_expansions is not None and self.stats.expansions >= self.max_expansions:
                logger.warning("expansion budget of %d exhausted before reaching the goal",
                               self.max_expansions)
                self.stats.exhausted_budget = True
                return

            current = self._open.pop()
            successors = list(self.adaptor.expand(current.node))
            self.stats.expansions += 1
            logger.debug("expand #%d: depth=%d f=%.3f successors=%d",
                         self.stats.expansions, current.depth, current.f, len(successors))

            for node in successors:
                if node == self.goal:
                    g = current.g + self._edge_cost(self.goal, current.node)
                    self._terminal = self._arena.new(self.goal, current, g=g).index
                    return
                self._admit(current, node)

            self._closed.add(current)

    def _admit(self, current: Record, node) -> None:
        g = current.g + self._edge_cost(node, current.node)
        h = self._edge_cost(node, self.goal)
        rec = self._arena.new(node, current, g=g, h=h)
        if blocks(self._open.best_f(node), rec.f) or blocks(self._closed.best_f(node), rec.f):
            self.stats.records_discarded += 1
            return
        self._open.push(rec)

    # ---- results ---------------------------------------------------------

    @property
    def done(self) -> bool:
        return self.state is SearchState.DONE

    @property
    def found(self) -> bool:
        return self.stats.found

    @property
    def expansions(self) -> int:
        return self.stats.expansions

    @property
    def closed(self) -> bool:
        return self._released

    def path(self) -> List:
        """Nodes from start to goal inclusive; [] when the goal is unreachable."""
        if self._released:
            raise SearchClosedError("path() called after close(); run a new Search")
        return reconstruct_path(self._arena, self._terminal)

    def cost(self) -> float:
        """Accumulated cost of the path, inf when there is none."""
        return self.stats.cost

    def close(self) -> None:
        if self._released:
            return
        self._released = True
        self._arena.clear()
        self._open.clear()
        self._closed.clear()
        self._terminal = None
        hook = getattr(self.adaptor, "close", None)
        if callable(hook):
            hook()

    def __enter__(self) -> "Search":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def __repr__(self):
        return (f"Search(state={self.state.value}, found={self.stats.found}, "
                f"expansions={self.stats.expansions}, closed={self._released})")


def find_path(start, goal, adaptor, **options) -> List:
    """Run a fresh Search and return its path, releasing it afterwards."""
    with Search(start, goal, adaptor, **options) as search:
        return search.path()
