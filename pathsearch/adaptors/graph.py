# pathsearch/adaptors/graph.py
# Weighted graphs given as adjacency mappings, with the AIMA Romania road map as a ready-made instance.
from __future__ import annotations
from typing import Callable, Dict, Hashable, Iterable, Mapping, Optional

Estimate = Callable[[Hashable, Hashable], float]


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
_ROMANIA: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
_SLD_BUCHAREST: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}


# --- Adaptor -----------------------------------------------------------------

class WeightedGraphAdaptor:
    """
    Adaptor over {node: {neighbour: weight}}.

    edge_cost(a, b) is the edge weight when a and b are adjacent (in either
    direction). For any other pair, which is how the search asks for the
    distance to the goal, it falls back to estimate(a, b), or 0 without one.
    """
    def __init__(self, edges: Mapping[Hashable, Mapping[Hashable, float]], estimate: Optional[Estimate] = None):
        self.edges = edges
        self.estimate = estimate

    def expand(self, node) -> Iterable:
        return list(self.edges.get(node, {}))

    def edge_cost(self, a, b) -> float:
        w = self.edges.get(a, {}).get(b)
        if w is None:
            w = self.edges.get(b, {}).get(a)
        if w is not None:
            return float(w)
        if self.estimate is None:
            return 0.0
        return float(self.estimate(a, b))

    def key(self, node):
        return node


def sld_to_bucharest(a: str, b: str) -> float:
    """Straight-line estimate; only distances to Bucharest are tabulated."""
    if b == "Bucharest":
        return float(_SLD_BUCHAREST.get(a, 0))
    if a == "Bucharest":
        return float(_SLD_BUCHAREST.get(b, 0))
    return 0.0


def romania_adaptor() -> WeightedGraphAdaptor:
    """
    Factory for the AIMA Romania road map with the straight-line heuristic.
    """
    return WeightedGraphAdaptor(_ROMANIA, estimate=sld_to_bucharest)


def romania_cities():
    return list(_ROMANIA)
