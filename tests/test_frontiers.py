"""
Unit tests for the open/closed sets and the record arena.
"""

import pytest

from pathsearch.core.frontiers import ClosedList, KeyedIndex, OpenList, ScanIndex, blocks
from pathsearch.core.record import RecordArena
from pathsearch.core.utils import reconstruct_path


@pytest.fixture
def arena():
    return RecordArena()


class TestRecordArena:
    """Records are immutable and linked by index."""

    def test_start_record(self, arena):
        rec = arena.new("s")
        assert rec.index == 0
        assert rec.parent is None
        assert (rec.g, rec.h, rec.f, rec.depth) == (0.0, 0.0, 0.0, 1)

    def test_child_record(self, arena):
        root = arena.new("s")
        child = arena.new("a", root, g=2, h=3)
        assert child.parent == root.index
        assert child.f == 5.0
        assert child.depth == 2

    def test_records_are_frozen(self, arena):
        rec = arena.new("s")
        with pytest.raises(AttributeError):
            rec.g = 4.0

    def test_lineage_walks_to_start(self, arena):
        a = arena.new("a")
        b = arena.new("b", a)
        c = arena.new("c", b)
        assert [r.node for r in arena.lineage(c.index)] == ["c", "b", "a"]

    def test_clear(self, arena):
        arena.new("a")
        arena.clear()
        assert len(arena) == 0


class TestReconstructPath:
    """Walking parents back to the start."""

    def test_no_terminal(self, arena):
        assert reconstruct_path(arena, None) == []

    def test_path_is_start_first(self, arena):
        a = arena.new("a")
        arena.new("x", a)
        b = arena.new("b", a)
        c = arena.new("c", b)
        assert reconstruct_path(arena, c.index) == ["a", "b", "c"]


class TestOpenList:
    """Min-f selection with most-recent-first among ties."""

    def test_pops_lowest_f(self, arena):
        ol = OpenList()
        for name, g in (("a", 5), ("b", 1), ("c", 3)):
            ol.push(arena.new(name, g=g))
        assert [ol.pop().node for _ in range(3)] == ["b", "c", "a"]
        assert len(ol) == 0

    def test_ties_pop_most_recent_first(self, arena):
        ol = OpenList()
        for name in ("a", "b", "c"):
            ol.push(arena.new(name, g=1))
        assert ol.peek().node == "c"
        assert [ol.pop().node for _ in range(3)] == ["c", "b", "a"]

    def test_best_f_tracks_membership(self, arena):
        ol = OpenList(key=lambda n: n)
        ol.push(arena.new("a", g=4))
        ol.push(arena.new("a", g=2))
        assert ol.best_f("a") == 2.0
        ol.pop()
        assert ol.best_f("a") == 4.0
        ol.pop()
        assert ol.best_f("a") is None

    def test_any_lower_duplicate_blocks(self, arena):
        """The lowest f among same-node records decides, not the first pushed."""
        ol = OpenList(key=lambda n: n)
        ol.push(arena.new("a", g=6))
        ol.push(arena.new("a", g=2))
        assert blocks(ol.best_f("a"), 4.0)

    def test_clear(self, arena):
        ol = OpenList()
        ol.push(arena.new("a"))
        ol.clear()
        assert len(ol) == 0
        assert ol.best_f("a") is None


class TestIndexes:
    """Keyed and scanning indexes answer the same questions."""

    @pytest.mark.parametrize("index", [ScanIndex(), KeyedIndex(lambda n: n)])
    def test_best_f(self, arena, index):
        r1 = arena.new((0, 0), g=3)
        r2 = arena.new((0, 0), g=1)
        r3 = arena.new((1, 0), g=7)
        for r in (r1, r2, r3):
            index.add(r)
        assert index.best_f((0, 0)) == 1.0
        assert index.best_f((1, 0)) == 7.0
        assert index.best_f((2, 2)) is None
        index.remove(r2)
        assert index.best_f((0, 0)) == 3.0
        assert len(index) == 2

    def test_closed_list(self, arena):
        cl = ClosedList()
        cl.add(arena.new("a", g=2))
        assert cl.best_f("a") == 2.0
        assert len(cl) == 1


class TestBlocks:
    """Only a strictly lower f blocks a new record."""

    def test_absent(self):
        assert not blocks(None, 3.0)

    def test_lower(self):
        assert blocks(2.0, 3.0)

    def test_equal(self):
        assert not blocks(3.0, 3.0)

    def test_higher(self):
        assert not blocks(4.0, 3.0)
