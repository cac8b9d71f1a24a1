"""Tests for the run_in_range / swap_in_range primitives."""

from __future__ import annotations

from dependency_sorter import run_in_range, swap_in_range


class TestRunInRange:
    def test_forward_visits_start_inclusive_stop_exclusive(self):
        seen = []
        run_in_range(["a", "b", "c"], 0, 3, lambda item, i, seq: seen.append((i, item)))
        assert seen == [(0, "a"), (1, "b"), (2, "c")]

    def test_backward_excludes_stop(self):
        seen = []
        run_in_range(["a", "b", "c"], 2, 0, lambda item, i, seq: seen.append(i))
        assert seen == [2, 1]

    def test_first_non_none_result_stops_iteration(self):
        seen = []

        def find_b(item, i, seq):
            seen.append(i)
            return i if item == "b" else None

        assert run_in_range(["a", "b", "c"], 0, 3, find_b) == 1
        assert seen == [0, 1]

    def test_zero_is_a_stopping_result(self):
        assert run_in_range(["a", "b"], 0, 2, lambda item, i, seq: 0, "unused") == 0

    def test_exhausted_range_returns_default(self):
        assert run_in_range([1, 2], 0, 2, lambda item, i, seq: None, "default") == "default"

    def test_empty_range_returns_none_without_calling(self):
        calls = []
        result = run_in_range([1, 2], 1, 1, lambda item, i, seq: calls.append(i), "default")
        assert result is None
        assert calls == []

    def test_item_read_after_earlier_mutation(self):
        seq = ["a", "b", "c"]
        seen = []

        def mutate(item, i, items):
            seen.append(item)
            if i == 0:
                seq[1] = "x"

        run_in_range(seq, 0, 3, mutate)
        assert seen == ["a", "x", "c"]


class TestSwapInRange:
    def test_swaps_forward_to_inclusive_stop(self):
        seq = [1, 2, 3, 4]
        assert swap_in_range(seq, 0, 3, lambda a, b: True) == 3
        assert seq == [2, 3, 4, 1]

    def test_swaps_backward_to_inclusive_stop(self):
        seq = [1, 2, 3, 4]
        assert swap_in_range(seq, 3, 0, lambda a, b: True) == 0
        assert seq == [4, 1, 2, 3]

    def test_stops_when_predicate_fails(self):
        seq = [5, 1, 2, 9, 3]
        assert swap_in_range(seq, 0, 4, lambda a, b: a > b) == 2
        assert seq == [1, 2, 5, 9, 3]

    def test_predicate_receives_moving_item_and_neighbour(self):
        pairs = []

        def record(a, b):
            pairs.append((a, b))
            return True

        swap_in_range(["m", "x", "y"], 0, 2, record)
        assert pairs == [("m", "x"), ("m", "y")]

    def test_no_move_returns_start(self):
        seq = [1, 2, 3]
        assert swap_in_range(seq, 1, 0, lambda a, b: False) == 1
        assert seq == [1, 2, 3]

    def test_equal_bounds_return_start(self):
        seq = [1, 2, 3]
        assert swap_in_range(seq, 2, 2, lambda a, b: True) == 2
        assert seq == [1, 2, 3]
