# pathsearch/core/utils.py
# Reconstructs the start-to-goal node sequence from the terminal record of a search.
from __future__ import annotations
from typing import List, Optional
from .record import RecordArena

def reconstruct_path(arena: RecordArena, terminal: Optional[int]) -> List:
    if terminal is None:
        return []
    depth = arena[terminal].depth
    path: List = [None] * depth
    i = depth - 1
    for rec in arena.lineage(terminal):
        path[i] = rec.node
        i -= 1
    return path
