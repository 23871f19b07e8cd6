"""Tests for hint-phase oracles."""

import pytest

from podium.sorting.oracle import (
    BuiltinOracle,
    PrecomputedOracle,
    SelectionOracle,
    SortOracle,
    get_oracle,
    select_and_remove_max,
)


class TestSelectAndRemoveMax:

    def test_returns_max_and_tombstones_slot(self):
        slots = [4, 1, 7, 3]
        assert select_and_remove_max(slots) == 7
        assert slots == [4, 1, None, 3]

    def test_skips_removed_slots(self):
        slots = [None, 2, None, 5]
        assert select_and_remove_max(slots) == 5
        assert select_and_remove_max(slots) == 2
        assert slots == [None, None, None, None]

    def test_ties_take_lowest_index(self):
        slots = [("a", 3), ("b", 9), ("c", 9), ("d", 1)]
        chosen = select_and_remove_max(slots, key=lambda item: item[1])
        assert chosen == ("b", 9)
        assert slots[1] is None
        assert slots[2] == ("c", 9)

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            select_and_remove_max([None, None])
        with pytest.raises(ValueError):
            select_and_remove_max([])

    def test_repeated_selection_yields_descending_order(self):
        values = [5, 3, 9, 0, 9, 2, 7]
        slots = list(values)
        drained = [select_and_remove_max(slots) for _ in range(len(values))]
        assert drained == sorted(values, reverse=True)
        assert all(s is None for s in slots)

    def test_zero_is_not_treated_as_removed(self):
        slots = [0, None, 0]
        assert select_and_remove_max(slots) == 0
        assert slots == [None, None, 0]


class TestOracles:

    def test_selection_oracle(self):
        oracle = SelectionOracle()
        assert oracle.propose([4, 1, 2, 3]) == [4, 3, 2, 1]
        assert oracle.propose([3, 2, 1, 4]) == [4, 3, 2, 1]

    def test_selection_oracle_leaves_input_untouched(self):
        items = [2, 8, 5]
        SelectionOracle().propose(items)
        assert items == [2, 8, 5]

    def test_builtin_oracle_matches_selection(self):
        items = [13, 2, 2, 40, 7, 0, 255]
        assert BuiltinOracle().propose(items) == SelectionOracle().propose(items)

    def test_precomputed_oracle_ignores_input(self):
        oracle = PrecomputedOracle([9, 9, 9])
        assert oracle.propose([1, 2, 3]) == [9, 9, 9]

    def test_oracles_satisfy_protocol(self):
        for oracle in (SelectionOracle(), BuiltinOracle(), PrecomputedOracle([])):
            assert isinstance(oracle, SortOracle)

    def test_get_oracle(self):
        assert isinstance(get_oracle("selection"), SelectionOracle)
        assert isinstance(get_oracle("builtin"), BuiltinOracle)
        with pytest.raises(ValueError, match="unknown oracle"):
            get_oracle("quantum")
