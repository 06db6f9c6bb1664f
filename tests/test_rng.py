"""Tests for the seedable random source."""

from collections import Counter

import pytest

from engine.errors import InvalidInputError
from engine.rng import RandomSource


class TestUniform:

    def test_uniform_int_inclusive(self):
        rng = RandomSource(1)
        seen = {rng.uniform_int(1, 3) for _ in range(200)}
        assert seen == {1, 2, 3}

    def test_uniform_int_single_value(self):
        assert RandomSource(1).uniform_int(4, 4) == 4

    def test_uniform_int_empty_range(self):
        with pytest.raises(InvalidInputError):
            RandomSource(1).uniform_int(5, 4)

    def test_uniform_float_range(self):
        rng = RandomSource(2)
        assert all(0 <= rng.uniform_float() < 1 for _ in range(100))

    def test_chance_extremes(self):
        rng = RandomSource(3)
        assert not any(rng.chance(0) for _ in range(50))
        assert all(rng.chance(1) for _ in range(50))

    def test_choice_empty(self):
        with pytest.raises(InvalidInputError):
            RandomSource(1).choice([])

    def test_same_seed_same_sequence(self):
        a, b = RandomSource(77), RandomSource(77)
        assert [a.uniform_int(1, 100) for _ in range(20)] == [
            b.uniform_int(1, 100) for _ in range(20)
        ]


class TestWeightedChoice:

    def test_zero_weight_never_chosen(self):
        rng = RandomSource(4)
        picks = {rng.weighted_choice(["a", "b", "c"], [1, 0, 1]) for _ in range(300)}
        assert "b" not in picks

    def test_single_positive_weight(self):
        rng = RandomSource(5)
        assert all(rng.weighted_choice(["a", "b"], [0, 2]) == "b" for _ in range(50))

    def test_distribution_follows_weights(self):
        rng = RandomSource(6)
        counts = Counter(rng.weighted_choice(["a", "b"], [3, 1]) for _ in range(4000))
        share = counts["a"] / 4000
        assert 0.7 < share < 0.8

    def test_zero_sum_rejected(self):
        with pytest.raises(InvalidInputError):
            RandomSource(1).weighted_choice(["a", "b"], [0, 0])

    def test_negative_weight_rejected(self):
        with pytest.raises(InvalidInputError):
            RandomSource(1).weighted_choice(["a", "b"], [2, -1])

    def test_length_mismatch_rejected(self):
        with pytest.raises(InvalidInputError):
            RandomSource(1).weighted_choice(["a", "b"], [1])

    def test_empty_rejected(self):
        with pytest.raises(InvalidInputError):
            RandomSource(1).weighted_choice([], [])


class TestSample:

    def test_distinct(self):
        picks = RandomSource(8).sample(list(range(10)), 5)
        assert len(picks) == 5
        assert len(set(picks)) == 5

    def test_k_capped_at_population(self):
        assert sorted(RandomSource(8).sample(["x", "y"], 5)) == ["x", "y"]

    def test_negative_k(self):
        assert RandomSource(8).sample(["x", "y"], -1) == []
