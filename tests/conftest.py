"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from pathsearch.adaptors import LinkedAdaptor, LinkedNode, grid_from_strings


@pytest.fixture
def linked_adaptor() -> LinkedAdaptor:
    """Unit-cost adaptor for hand-built graphs."""
    return LinkedAdaptor()


@pytest.fixture
def two_routes() -> dict:
    """
    s -> u -> e and s -> d1 -> d2 -> e, all unit cost.

          __u__
         /     \\
        s       e
         \\d1_d2/
    """
    nodes = {name: LinkedNode(name) for name in ("s", "u", "d1", "d2", "e")}
    nodes["s"].link(nodes["u"], nodes["d1"])
    nodes["d1"].link(nodes["d2"])
    nodes["d2"].link(nodes["e"])
    nodes["u"].link(nodes["e"])
    return nodes


@pytest.fixture
def walled_map():
    """A small map with a wall the path has to go around."""
    return grid_from_strings([
        "S....#....",
        ".###.#.##.",
        ".#...#..#.",
        ".#.###.##.",
        ".#........",
        ".######.#.",
        "........#G",
    ])
