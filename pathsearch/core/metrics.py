# pathsearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional
import time, tracemalloc

@dataclass
class SearchStats:
    found: bool = False
    path_length: int = 0
    cost: float = float("inf")
    expansions: int = 0
    records_created: int = 0
    records_discarded: int = 0
    time_s: float = 0.0
    peak_kb: Optional[int] = None
    exhausted_budget: bool = False

    def as_dict(self) -> dict:
        return asdict(self)

class MeasuredRun:
    """
    Context manager for timing and (optionally) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, trace_memory: bool = False) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory:
            self._tracing = True
            # Nested runs share an already started tracer.
            self._owns_trace = not tracemalloc.is_tracing()
            if self._owns_trace:
                tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            if self._owns_trace:
                tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> Optional[int]:
        """Approx peak KB, or None when memory was not traced."""
        if not self.trace_memory:
            return None
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
