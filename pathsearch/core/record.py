# pathsearch/core/record.py
# Bookkeeping records for nodes reached during a search, and the arena that owns them.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass(frozen=True)
class Record:
    """One visit of an external node. Scores are fixed at creation."""
    index: int
    node: Any
    parent: Optional[int]
    g: float
    h: float
    f: float
    depth: int


class RecordArena:
    """Append-only store of records; parents are referenced by index."""

    def __init__(self):
        self._records: List[Record] = []

    def new(self, node, parent: Optional[Record] = None, g: float = 0.0, h: float = 0.0) -> Record:
        rec = Record(
            index=len(self._records),
            node=node,
            parent=None if parent is None else parent.index,
            g=float(g),
            h=float(h),
            f=float(g) + float(h),
            depth=1 if parent is None else parent.depth + 1,
        )
        self._records.append(rec)
        return rec

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __len__(self):
        return len(self._records)

    def lineage(self, index: int) -> Iterator[Record]:
        """Yield the record at index, then its parent, up to the start record."""
        cur: Optional[int] = index
        while cur is not None:
            rec = self._records[cur]
            yield rec
            cur = rec.parent

    def clear(self) -> None:
        self._records.clear()
