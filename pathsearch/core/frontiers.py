# pathsearch/core/frontiers.py
# Open and closed sets of a best-first search, each with a membership index
# answering "what is the best f of any record for this node?".
from __future__ import annotations
import heapq
from typing import Callable, Dict, Hashable, List, Optional

from .record import Record


class ScanIndex:
    """Membership by linear scan using the nodes' own ==."""
    def __init__(self):
        self.items: Dict[int, Record] = {}
    def add(self, rec: Record): self.items[rec.index] = rec
    def remove(self, rec: Record): del self.items[rec.index]
    def __len__(self): return len(self.items)
    def clear(self): self.items.clear()

    def best_f(self, node) -> Optional[float]:
        fs = [r.f for r in self.items.values() if r.node == node]
        return min(fs) if fs else None


class KeyedIndex:
    """Membership by a hashable key extracted from each node."""
    def __init__(self, key: Callable[[object], Hashable]):
        self.key = key
        self.buckets: Dict[Hashable, Dict[int, Record]] = {}
        self.size = 0

    def add(self, rec: Record):
        self.buckets.setdefault(self.key(rec.node), {})[rec.index] = rec
        self.size += 1

    def remove(self, rec: Record):
        k = self.key(rec.node)
        bucket = self.buckets[k]
        del bucket[rec.index]
        if not bucket:
            del self.buckets[k]
        self.size -= 1

    def __len__(self): return self.size

    def clear(self):
        self.buckets.clear()
        self.size = 0

    def best_f(self, node) -> Optional[float]:
        bucket = self.buckets.get(self.key(node))
        if not bucket:
            return None
        return min(r.f for r in bucket.values())


def make_index(key: Optional[Callable[[object], Hashable]] = None):
    return ScanIndex() if key is None else KeyedIndex(key)


class OpenList:
    """
    Min-heap of records by f. Among equal f the most recently pushed record
    pops first (LIFO), which keeps the search diving along one of several
    equally good paths instead of widening across all of them.

    best_f() reports the lowest f over every open record of a node, so a new
    record is rejected if any of them beats it, not just the first one found.
    """
    def __init__(self, key=None):
        self.h: List = []
        self.counter = 0
        self.index = make_index(key)

    def push(self, rec: Record):
        self.counter += 1
        heapq.heappush(self.h, (rec.f, -self.counter, rec))
        self.index.add(rec)

    def pop(self) -> Record:
        rec = heapq.heappop(self.h)[2]
        self.index.remove(rec)
        return rec

    def peek(self) -> Record:
        return self.h[0][2]

    def best_f(self, node) -> Optional[float]:
        return self.index.best_f(node)

    def __len__(self): return len(self.h)

    def clear(self):
        self.h.clear()
        self.index.clear()


class ClosedList:
    """Records that were already expanded. They are never reopened."""
    def __init__(self, key=None):
        self.index = make_index(key)
    def add(self, rec: Record): self.index.add(rec)
    def best_f(self, node) -> Optional[float]: return self.index.best_f(node)
    def __len__(self): return len(self.index)
    def clear(self): self.index.clear()


def blocks(existing_f: Optional[float], new_f: float) -> bool:
    """An existing record blocks a new one only with a strictly lower f."""
    return existing_f is not None and existing_f < new_f
