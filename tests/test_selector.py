"""Tests for range selection and renumbering."""

import pytest

from post.errors import IndexOutOfRange
from post.models import Record
from post.selector import DEFAULT_VIEW, All, Index, Tail, Top, renumber, select, split


@pytest.fixture
def records():
    return [Record(i, f"note-{i}") for i in range(5)]


def contents(rs):
    return [r.content for r in rs]


class TestSelect:
    def test_all_in_stored_order(self, records):
        assert select(records, All()) == records

    def test_all_returns_copy(self, records):
        out = select(records, All())
        out.pop()
        assert len(records) == 5

    def test_index(self, records):
        assert select(records, Index(3)) == [Record(3, "note-3")]

    @pytest.mark.parametrize("i", [5, 6, 100, -1])
    def test_index_out_of_range(self, records, i):
        with pytest.raises(IndexOutOfRange):
            select(records, Index(i))

    def test_index_on_empty(self):
        with pytest.raises(IndexOutOfRange, match="empty"):
            select([], Index(0))

    def test_top_is_most_recent_in_stored_order(self, records):
        assert contents(select(records, Top(2))) == ["note-3", "note-4"]

    def test_tail_is_oldest_in_stored_order(self, records):
        assert contents(select(records, Tail(2))) == ["note-0", "note-1"]

    def test_top_and_tail_do_not_overlap(self, records):
        top = select(records, Top(2))
        tail = select(records, Tail(3))
        assert tail + top == records

    @pytest.mark.parametrize("spec", [Top(50), Tail(50)])
    def test_large_counts_clamp(self, records, spec):
        assert select(records, spec) == records

    @pytest.mark.parametrize("spec", [Top(0), Tail(0)])
    def test_zero_counts(self, records, spec):
        assert select(records, spec) == []

    def test_negative_count_rejected(self, records):
        with pytest.raises(ValueError):
            select(records, Top(-1))

    def test_empty(self):
        assert select([], Top(10)) == []
        assert select([], Tail(10)) == []
        assert select([], All()) == []

    def test_default_view(self):
        assert DEFAULT_VIEW == Top(10)

    def test_unknown_spec(self, records):
        with pytest.raises(TypeError):
            select(records, "everything")


class TestSplit:
    def test_top(self, records):
        removed, remaining = split(records, Top(2))
        assert contents(removed) == ["note-3", "note-4"]
        assert contents(remaining) == ["note-0", "note-1", "note-2"]

    def test_tail(self, records):
        removed, remaining = split(records, Tail(2))
        assert contents(removed) == ["note-0", "note-1"]
        assert contents(remaining) == ["note-2", "note-3", "note-4"]

    def test_clamps(self, records):
        removed, remaining = split(records, Tail(9))
        assert removed == records
        assert remaining == []

    def test_rejects_non_end_ranges(self, records):
        with pytest.raises(TypeError):
            split(records, All())
        with pytest.raises(TypeError):
            split(records, Index(0))


class TestRenumber:
    def test_closes_gaps(self):
        out = renumber([Record(0, "a"), Record(2, "c"), Record(7, "h")])
        assert [r.index for r in out] == [0, 1, 2]
        assert contents(out) == ["a", "c", "h"]

    def test_keeps_comment(self):
        assert renumber([Record(4, "a", "b")]) == [Record(0, "a", "b")]

    def test_does_not_mutate_input(self):
        original = [Record(3, "x")]
        renumber(original)
        assert original[0].index == 3
