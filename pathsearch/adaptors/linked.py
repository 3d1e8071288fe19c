# pathsearch/adaptors/linked.py
# Hand-built graphs: each node keeps a list of the nodes it connects to.
from __future__ import annotations
from typing import Iterable, List


class LinkedNode:
    """
    A node that stores its own outgoing links.

    Equality is identity (the default for objects), which is fine as long as
    each node is created once and never copied.
    """
    def __init__(self, name: str):
        self.name = name
        self.adjacent: List["LinkedNode"] = []

    def link(self, *others: "LinkedNode") -> "LinkedNode":
        self.adjacent.extend(others)
        return self

    def __repr__(self):
        return f"LinkedNode({self.name!r})"


class LinkedAdaptor:
    """Unit-cost adaptor for LinkedNode graphs; successors are borrowed."""
    def expand(self, node: LinkedNode) -> Iterable[LinkedNode]:
        return node.adjacent

    def edge_cost(self, a: LinkedNode, b: LinkedNode) -> float:
        return 1.0


def chain(names: Iterable[str]) -> List[LinkedNode]:
    """Build a -> b -> c ... and return the nodes in order."""
    nodes = [LinkedNode(n) for n in names]
    for a, b in zip(nodes, nodes[1:]):
        a.link(b)
    return nodes
