# pathsearch/errors.py
# Exception types raised by the search engine. An unreachable goal is not an
# error: it yields an empty path.
from __future__ import annotations


class SearchError(Exception):
    """Base class for every error raised by pathsearch."""


class InvalidAdaptorError(SearchError, TypeError):
    """The adaptor does not provide expand()/edge_cost()."""


class InvalidCostError(SearchError, ValueError):
    """edge_cost() returned something that is not a usable number."""


class NegativeCostError(InvalidCostError):
    """edge_cost() returned a negative value."""


class SearchClosedError(SearchError, RuntimeError):
    """The search storage was already released by close()."""
