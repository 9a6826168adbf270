"""Seeded RNG construction for the generation driver.

A seed makes a run reproducible: the same seed, source and arguments always
print the same names. Without a seed the generator is seeded from OS entropy.
"""

from __future__ import annotations

import random

MAX_SEED = 2**64


def make_rng(seed: int | None) -> random.Random:
    """Return a Random seeded with ``seed``, or from OS entropy when None."""

    if seed is None:
        return random.Random()
    if not 0 <= seed < MAX_SEED:
        raise ValueError(f"seed must be in 0..{MAX_SEED - 1}")
    return random.Random(int(seed))
