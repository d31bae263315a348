"""Tests for the randomized array helpers and the default random source.

Scripted sources pin down exactly which positions are drawn; seeded
``random.Random`` instances cover the statistical properties (subset,
order preservation, permutation, rough uniformity).
"""

from __future__ import annotations

import random
from collections import Counter
from itertools import permutations

import pytest

from collext.core import random_source
from collext.core.arrays import (
    random_object,
    with_random_elements_chosen,
    with_random_elements_removed,
    with_randomized_order,
)
from collext.exceptions import CollextError, InvalidCountError


def _is_subsequence(candidate: list[object], source: list[object]) -> bool:
    remaining = iter(source)
    return all(any(item == other for other in remaining) for item in candidate)


# ---------------------------------------------------------------------------
# with_random_elements_removed
# ---------------------------------------------------------------------------

class TestRandomElementsRemoved:
    def test_zero_returns_equal_copy(self) -> None:
        items = ["a", "b", "c"]
        result = with_random_elements_removed(items, 0)
        assert result == items
        assert result is not items

    @pytest.mark.parametrize("count", [3, 4, 100])
    def test_count_at_or_above_length_returns_empty(self, count: int) -> None:
        assert with_random_elements_removed(["a", "b", "c"], count) == []

    def test_scripted_draw_removes_that_position(self, scripted) -> None:
        rng = scripted([2])
        result = with_random_elements_removed(["a", "b", "c", "d"], 1, rng)
        assert result == ["a", "b", "d"]
        assert rng.calls == [(4, 2)]

    def test_result_is_ordered_subsequence(self) -> None:
        items = list(range(20))
        rng = random.Random(11)
        for count in range(1, 20):
            result = with_random_elements_removed(items, count, rng)
            assert len(result) == len(items) - count
            assert result == sorted(result)
            assert set(result) <= set(items)

    def test_duplicates_are_removed_by_position(self) -> None:
        result = with_random_elements_removed(["x", "x", "x"], 1, random.Random(0))
        assert result == ["x", "x"]

    def test_input_unchanged(self) -> None:
        items = [1, 2, 3, 4]
        with_random_elements_removed(items, 2, random.Random(5))
        assert items == [1, 2, 3, 4]

    def test_negative_count_raises(self) -> None:
        with pytest.raises(InvalidCountError) as exc_info:
            with_random_elements_removed([1, 2], -1)
        assert exc_info.value.hint is not None
        assert isinstance(exc_info.value, CollextError)


# ---------------------------------------------------------------------------
# with_random_elements_chosen
# ---------------------------------------------------------------------------

class TestRandomElementsChosen:
    def test_scripted_draws_choose_those_positions(self, scripted) -> None:
        rng = scripted([4, 0])
        result = with_random_elements_chosen(["a", "b", "c", "d", "e"], 2, rng)
        assert result == ["b", "e"]
        assert rng.calls == [(5, 4), (4, 0)]

    @pytest.mark.parametrize("count", [0, 1, 3, 5, 9])
    def test_length_is_min_of_count_and_size(self, count: int) -> None:
        items = ["a", "b", "c", "d", "e"]
        result = with_random_elements_chosen(items, count, random.Random(3))
        assert len(result) == min(count, len(items))

    def test_count_at_or_above_length_returns_copy(self) -> None:
        items = [3, 1, 2]
        result = with_random_elements_chosen(items, 10)
        assert result == items
        assert result is not items

    def test_result_keeps_original_order(self) -> None:
        items = list("abcdefghij")
        rng = random.Random(42)
        for _ in range(50):
            result = with_random_elements_chosen(items, 4, rng)
            assert _is_subsequence(result, items)

    def test_empty_input(self) -> None:
        assert with_random_elements_chosen([], 3) == []

    def test_negative_count_raises(self) -> None:
        with pytest.raises(InvalidCountError):
            with_random_elements_chosen([1, 2], -5)


# ---------------------------------------------------------------------------
# with_randomized_order
# ---------------------------------------------------------------------------

class TestRandomizedOrder:
    def test_scripted_fisher_yates(self, scripted) -> None:
        rng = scripted([0, 0])
        assert with_randomized_order(["a", "b", "c"], rng) == ["b", "c", "a"]
        assert rng.calls == [(3, 0), (2, 0)]

    def test_is_permutation(self) -> None:
        items = [1, 1, 2, 3, 5, 8, 13]
        result = with_randomized_order(items, random.Random(9))
        assert Counter(result) == Counter(items)

    def test_input_unchanged(self) -> None:
        items = [1, 2, 3]
        with_randomized_order(items, random.Random(1))
        assert items == [1, 2, 3]

    def test_empty_and_single(self, scripted) -> None:
        rng = scripted([])
        assert with_randomized_order([], rng) == []
        assert with_randomized_order(["only"], rng) == ["only"]
        assert rng.calls == []

    def test_all_permutations_roughly_uniform(self) -> None:
        rng = random.Random(2024)
        counts = Counter(
            tuple(with_randomized_order(["a", "b", "c"], rng)) for _ in range(6000)
        )
        assert set(counts) == set(permutations(["a", "b", "c"]))
        for count in counts.values():
            assert 850 < count < 1150


# ---------------------------------------------------------------------------
# random_object
# ---------------------------------------------------------------------------

class TestRandomObject:
    def test_empty_returns_none(self) -> None:
        assert random_object([]) is None

    def test_scripted_index(self, scripted) -> None:
        assert random_object(["x", "y", "z"], scripted([1])) == "y"

    def test_member_of_sequence(self) -> None:
        items = ["x", "y", "z"]
        rng = random.Random(7)
        assert all(random_object(items, rng) in items for _ in range(30))


# ---------------------------------------------------------------------------
# Default random source
# ---------------------------------------------------------------------------

class TestDefaultRandomSource:
    def test_default_used_when_rng_omitted(self, scripted) -> None:
        random_source.set_default_random(scripted([2]))
        assert random_object(["a", "b", "c"]) == "c"

    def test_set_returns_previous(self, scripted) -> None:
        original = random_source.get_default_random()
        replacement = scripted([])
        assert random_source.set_default_random(replacement) is original
        assert random_source.get_default_random() is replacement

    def test_seeding_is_reproducible(self) -> None:
        items = list(range(10))
        random_source.seed_default_random(99)
        first = with_randomized_order(items)
        random_source.seed_default_random(99)
        second = with_randomized_order(items)
        assert first == second

    def test_explicit_rng_wins_over_default(self, scripted) -> None:
        random_source.set_default_random(scripted([0]))
        assert random_object(["a", "b"], scripted([1])) == "b"

    def test_random_random_satisfies_protocol(self) -> None:
        assert 0 <= random_source.resolve(random.Random(1)).randrange(5) < 5
