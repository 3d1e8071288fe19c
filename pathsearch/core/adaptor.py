# Defines the capability set a caller's graph must provide to be searched.
# pathsearch/core/adaptor.py
from __future__ import annotations
from typing import Any, Callable, Hashable, Iterable, Optional, Protocol, runtime_checkable

from ..errors import InvalidAdaptorError

Node = Any


@runtime_checkable
class Adaptor(Protocol):
    """Structural contract between the engine and the caller's graph.

    - expand(n): neighbours of n, in the order they should be considered.
      The returned values are borrowed; the engine keeps references to them
      until the search is closed and never copies them.
    - edge_cost(a, b): non-negative cost of moving between two adjacent
      nodes. The engine also calls it with (successor, goal) to estimate the
      remaining cost, so it must accept any pair of nodes.
    - Nodes must support ==.

    Two optional hooks are honoured when present:
    - key(n): hashable key consistent with ==; enables dict-based duplicate
      lookups instead of a linear scan.
    - close(): called once when the search releases its storage.
    """
    def expand(self, node: Node) -> Iterable[Node]: ...
    def edge_cost(self, a: Node, b: Node) -> float: ...


@runtime_checkable
class KeyedAdaptor(Adaptor, Protocol):
    def key(self, node: Node) -> Hashable: ...


def check_adaptor(adaptor) -> None:
    for name in ("expand", "edge_cost"):
        if not callable(getattr(adaptor, name, None)):
            raise InvalidAdaptorError(
                f"{type(adaptor).__name__} has no callable {name}(); "
                "an adaptor needs expand(node) and edge_cost(a, b)."
            )


def key_function(adaptor) -> Optional[Callable[[Node], Hashable]]:
    """Return adaptor.key if it provides one, else None."""
    if isinstance(adaptor, KeyedAdaptor) and callable(adaptor.key):
        return adaptor.key
    return None
