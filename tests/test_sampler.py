"""Tests for the alias-table sampler in weighted_names/utils/sampling.py."""

import math
import random
from collections import Counter
from decimal import Decimal
from fractions import Fraction

import pytest

from weighted_names.errors import InvalidWeights, NameListError
from weighted_names.utils.sampling import WeightedSampler, validate_weights

SAMPLE_COUNT = 3000
TOLERANCE = 0.2


class TestValidation:
    """Weight sets the sampler must refuse to build."""

    @pytest.mark.parametrize(
        "weights",
        [
            [1.0, -0.5],
            [1.0, math.nan],
            [1.0, math.inf],
            [0, 0, 0],
            [],
            ["2", 1],
            [None, 1],
            [True, 1],
            [10**400, 1],
            [Fraction(10**400), 1],
        ],
    )
    def test_rejects_bad_weights(self, weights):
        with pytest.raises(InvalidWeights):
            WeightedSampler(weights)

    def test_reports_offending_index(self):
        with pytest.raises(InvalidWeights) as exc_info:
            WeightedSampler([1.0, 2.0, -3.0])
        assert exc_info.value.index == 2

    def test_overflowing_sum_rejected(self):
        with pytest.raises(InvalidWeights):
            WeightedSampler([1e308, 1e308])

    def test_error_is_value_error(self):
        """Callers can catch InvalidWeights as a plain ValueError."""
        with pytest.raises(ValueError):
            WeightedSampler([-1])
        assert issubclass(InvalidWeights, NameListError)

    def test_accepts_other_real_types(self):
        assert validate_weights([1, Fraction(1, 2), Decimal("0.25")]) == [1.0, 0.5, 0.25]


class TestSampling:
    """Distribution and determinism of draws."""

    def test_two_item_ratio(self):
        rng = random.Random(1234)
        sampler = WeightedSampler([2, 1])
        counts = Counter(sampler.sample(rng) for _ in range(SAMPLE_COUNT))
        assert counts[0] / counts[1] == pytest.approx(2.0, rel=TOLERANCE)

    def test_single_item_always_drawn(self):
        rng = random.Random(0)
        sampler = WeightedSampler([0.3])
        assert set(sampler.sample_batch(rng, 100)) == {0}

    def test_zero_weight_never_drawn(self):
        rng = random.Random(99)
        sampler = WeightedSampler([0, 1, 0, 3, 0])
        drawn = set(sampler.sample_batch(rng, 20000))
        assert drawn == {1, 3}

    def test_probability_matches_weights(self):
        sampler = WeightedSampler([1, 3, 0, 4])
        assert sampler.total == 8.0
        assert [sampler.probability(i) for i in range(len(sampler))] == [0.125, 0.375, 0.0, 0.5]

    def test_many_items_distribution(self):
        weights = [5, 1, 3, 1, 10]
        rng = random.Random(7)
        sampler = WeightedSampler(weights)
        counts = Counter(sampler.sample_batch(rng, 50000))
        total = sum(weights)
        for i, w in enumerate(weights):
            assert counts[i] / 50000 == pytest.approx(w / total, rel=TOLERANCE)

    def test_deterministic_for_seed(self):
        sampler = WeightedSampler([0.5, 1.5, 2.5, 0.1])
        first = sampler.sample_batch(random.Random(42), 500)
        second = sampler.sample_batch(random.Random(42), 500)
        assert first == second

    def test_batch_matches_sequential_draws(self):
        """A batch consumes the RNG exactly like repeated single draws."""
        sampler = WeightedSampler([2, 1, 0, 5])
        batch = sampler.sample_batch(random.Random(5), 1000)
        rng = random.Random(5)
        sequential = [sampler.sample(rng) for _ in range(1000)]
        assert batch == sequential

    def test_batch_count_edge_cases(self):
        sampler = WeightedSampler([1, 1])
        assert sampler.sample_batch(random.Random(0), 0) == []
        with pytest.raises(ValueError):
            sampler.sample_batch(random.Random(0), -1)
