"""Error types.

All errors are precondition violations raised synchronously at the offending
call. They subclass ValueError so callers validating user input can catch them
alongside other bad-value errors.
"""

from __future__ import annotations


class NameListError(ValueError):
    """Base class for weighted_names errors."""


class InvalidWeights(NameListError):
    """A weight set cannot back a sampler (negative, non-finite, or zero-sum)."""

    def __init__(self, message: str, *, index: int | None = None):
        super().__init__(message)
        self.index = index


class LengthMismatch(NameListError):
    def __init__(self, names_len: int, weights_len: int):
        super().__init__(
            f"names and weights must have the same length (got {names_len} names, {weights_len} weights)"
        )
        self.names_len = names_len
        self.weights_len = weights_len


class EmptyList(NameListError):
    """Sampling was requested from a list with no entries."""
