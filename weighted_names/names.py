"""Weighted name lists.

``NameList`` stores names and weights in lockstep and samples through a
``WeightedSampler``. The sampler is rebuilt from the current weights whenever
sampling is requested:

- ``sample`` rebuilds per call, so a single draw costs O(n);
- ``sample_batch(count)`` builds once and costs O(n + count).

Hot loops should either batch or hold on to ``NameList.sampler()`` and index
into ``NameList.names`` directly.
"""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Mapping, Sequence

from .errors import EmptyList, LengthMismatch
from .utils.sampling import WeightedSampler


class NameList:
    """Append-only list of names with relative frequency weights."""

    def __init__(self, names: Sequence[str] = (), weights: Sequence[float] = ()):
        names = list(names)
        weights = list(weights)
        if len(names) != len(weights):
            raise LengthMismatch(len(names), len(weights))
        self._names: list[str] = names
        self._weights: list[float] = weights

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, float]]) -> NameList:
        out = cls()
        for name, weight in pairs:
            out.insert(name, weight)
        return out

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> NameList:
        return cls.from_pairs(mapping.items())

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    @property
    def weights(self) -> tuple[float, ...]:
        return tuple(self._weights)

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(zip(self._names, self._weights))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._names)})"

    def insert(self, name: str, weight: float) -> None:
        """Append one entry. Weights are validated when sampling, not here."""

        self._names.append(name)
        self._weights.append(weight)

    def with_entry(self, name: str, weight: float) -> NameList:
        self.insert(name, weight)
        return self

    def copy(self) -> NameList:
        return type(self)(self._names, self._weights)

    def sampler(self) -> WeightedSampler:
        """Build a sampler over the current weights.

        Raises EmptyList for an empty list and InvalidWeights for bad weights.
        """

        if not self._names:
            raise EmptyList("cannot sample from an empty name list")
        return WeightedSampler(self._weights)

    def validate(self) -> None:
        self.sampler()

    def sample(self, rng: random.Random) -> str:
        return self._names[self.sampler().sample(rng)]

    def sample_batch(self, rng: random.Random, count: int) -> list[str]:
        """Draw ``count`` names independently, with replacement."""

        names = self._names
        return [names[i] for i in self.sampler().sample_batch(rng, count)]


class FullNameList:
    """Pairs a given-name list with a family-name list.

    Each full name is one given draw followed by one family draw from the same
    RNG stream. The two lists are independent and may differ in size and scale.
    """

    def __init__(self, given_names: NameList, family_names: NameList):
        self.given_names = given_names
        self.family_names = family_names

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(given={len(self.given_names)}, "
            f"family={len(self.family_names)})"
        )

    def copy(self) -> FullNameList:
        return type(self)(self.given_names.copy(), self.family_names.copy())

    def sample(self, rng: random.Random) -> tuple[str, str]:
        given = self.given_names.sample(rng)
        family = self.family_names.sample(rng)
        return given, family

    def sample_batch(self, rng: random.Random, count: int) -> list[tuple[str, str]]:
        """Draw ``count`` pairs; same output as ``count`` calls to ``sample``."""

        if count < 0:
            raise ValueError("count must be >= 0")
        given_sampler = self.given_names.sampler()
        family_sampler = self.family_names.sampler()
        given = self.given_names.names
        family = self.family_names.names
        out: list[tuple[str, str]] = []
        for _ in range(count):
            g = given[given_sampler.sample(rng)]
            f = family[family_sampler.sample(rng)]
            out.append((g, f))
        return out
