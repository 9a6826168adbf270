"""Weighted sampling helpers.

The core requirement is *non-uniform* selection with realistic skew: every draw
picks an index with probability proportional to its weight.

``WeightedSampler`` implements Walker's alias method (Vose's construction):
O(n) setup partitions the n outcomes into n buckets holding at most two
outcomes each, after which a draw is one uniform bucket pick plus one biased
coin flip. A cumulative-weight bisect would cost O(log n) per draw instead.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable

from ..errors import InvalidWeights

log = logging.getLogger(__name__)


def _as_weight(index: int, value: object) -> float:
    # bool is an int subclass, so it has to be rejected before float().
    if isinstance(value, (bool, str, bytes)) or value is None:
        raise InvalidWeights(f"weight at index {index} is not a number: {value!r}", index=index)
    try:
        w = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidWeights(f"weight at index {index} is not a number: {value!r}", index=index) from e
    if not math.isfinite(w):
        raise InvalidWeights(f"weight at index {index} is not finite: {value!r}", index=index)
    if w < 0.0:
        raise InvalidWeights(f"weight at index {index} is negative: {value!r}", index=index)
    return w


def validate_weights(weights: Iterable[object]) -> list[float]:
    """Convert weights to floats, raising InvalidWeights on any bad value.

    Rejects negative, non-finite and non-numeric values, an empty sequence,
    an all-zero sequence, and sums that overflow.
    """

    out = [_as_weight(i, w) for i, w in enumerate(weights)]
    if not out:
        raise InvalidWeights("at least one weight is required")
    try:
        total = math.fsum(out)
    except OverflowError as e:
        raise InvalidWeights("sum of weights is not finite") from e
    if total <= 0.0:
        raise InvalidWeights("at least one weight must be > 0")
    if not math.isfinite(total):
        raise InvalidWeights("sum of weights is not finite")
    return out


class WeightedSampler:
    """Alias table over a fixed weight sequence.

    Index ``i`` is drawn with probability ``weights[i] / sum(weights)``.
    The table is immutable once built; build a new sampler when weights change.
    """

    def __init__(self, weights: Iterable[object]):
        self._weights = validate_weights(weights)
        self._total = math.fsum(self._weights)
        self._prob, self._alias = self._build(self._weights, self._total)
        log.debug("Built alias table over %d weights (total=%g)", len(self._weights), self._total)

    @staticmethod
    def _build(weights: list[float], total: float) -> tuple[list[float], list[int]]:
        n = len(weights)
        scaled = [(w / total) * n for w in weights]
        prob = [0.0] * n
        alias = list(range(n))

        small = [i for i, p in enumerate(scaled) if p < 1.0]
        large = [i for i, p in enumerate(scaled) if p >= 1.0]

        while small and large:
            s = small.pop()
            g = large.pop()
            prob[s] = scaled[s]
            alias[s] = g
            scaled[g] = (scaled[g] + scaled[s]) - 1.0
            if scaled[g] < 1.0:
                small.append(g)
            else:
                large.append(g)

        # Leftovers are full buckets up to rounding error. Zero weights must
        # stay unreachable, so they keep threshold 0 and alias the heaviest item.
        heaviest = max(range(n), key=weights.__getitem__)
        for i in large + small:
            if weights[i] > 0.0:
                prob[i] = 1.0
            else:
                prob[i] = 0.0
                alias[i] = heaviest

        return prob, alias

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self._weights)}, total={self._total:g})"

    @property
    def total(self) -> float:
        return self._total

    def probability(self, index: int) -> float:
        """Exact selection probability of ``index``."""

        return self._weights[index] / self._total

    def sample(self, rng: random.Random) -> int:
        """Draw one index in O(1).

        Consumes ``rng.randrange`` then ``rng.random``, in that order.
        """

        i = rng.randrange(len(self._prob))
        if rng.random() < self._prob[i]:
            return i
        return self._alias[i]

    def sample_batch(self, rng: random.Random, count: int) -> list[int]:
        """Draw ``count`` independent indices from the same table.

        The RNG stream is consumed exactly as ``count`` calls to ``sample`` would.
        """

        if count < 0:
            raise ValueError("count must be >= 0")
        n = len(self._prob)
        prob = self._prob
        alias = self._alias
        out: list[int] = []
        for _ in range(count):
            i = rng.randrange(n)
            out.append(i if rng.random() < prob[i] else alias[i])
        return out
