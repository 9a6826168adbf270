"""Tests for seeded RNG construction in weighted_names/utils/rng.py."""

import random

import pytest

from weighted_names.utils.rng import MAX_SEED, make_rng


class TestMakeRng:
    @pytest.mark.parametrize("seed", [-1, MAX_SEED])
    def test_out_of_range_seed(self, seed):
        with pytest.raises(ValueError):
            make_rng(seed)

    def test_same_seed_same_stream(self):
        a = make_rng(7)
        b = make_rng(7)
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_matches_plain_random(self):
        assert make_rng(123).random() == random.Random(123).random()

    def test_unseeded_returns_random(self):
        assert isinstance(make_rng(None), random.Random)
