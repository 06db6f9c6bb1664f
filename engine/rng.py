"""Seedable random number source shared by every generator."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from engine.errors import InvalidInputError

T = TypeVar("T")


class RandomSource:
    """Uniform and weighted draws over a private ``random.Random``.

    Generators draw exclusively through this class so a seed makes a whole
    generation call reproducible. Instances are not shared between calls.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_int(self, lo: int, hi: int) -> int:
        """Return an integer in ``[lo, hi]``, both ends inclusive."""
        if lo > hi:
            raise InvalidInputError(f"Empty range: [{lo}, {hi}]")
        return self._rng.randint(lo, hi)

    def uniform_float(self) -> float:
        """Return a float in ``[0, 1)``."""
        return self._rng.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self.uniform_float() < probability

    def choice(self, items: Sequence[T]) -> T:
        """Pick one item uniformly."""
        if not items:
            raise InvalidInputError("Cannot choose from an empty sequence")
        return items[self.uniform_int(0, len(items) - 1)]

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick ``items[i]`` with probability ``weights[i] / sum(weights)``.

        Raises:
            InvalidInputError: On a length mismatch, an empty list, a
                negative weight, or weights summing to zero.
        """
        if len(items) != len(weights):
            raise InvalidInputError(
                f"Got {len(items)} items but {len(weights)} weights"
            )
        if not items:
            raise InvalidInputError("Cannot choose from an empty sequence")
        if any(w < 0 for w in weights):
            raise InvalidInputError("Weights must not be negative")
        total = sum(weights)
        if total <= 0:
            raise InvalidInputError("Weights sum to zero")

        target = self.uniform_float() * total
        cumulative = 0.0
        for item, weight in zip(items, weights):
            cumulative += weight
            if target < cumulative:
                return item
        # Float rounding can leave target == total; fall back to the last
        # item with a non-zero weight.
        for item, weight in zip(reversed(items), reversed(weights)):
            if weight > 0:
                return item
        raise InvalidInputError("Weights sum to zero")

    def sample(self, items: Sequence[T], k: int) -> list[T]:
        """Draw up to ``k`` distinct items without replacement."""
        k = max(0, min(k, len(items)))
        return self._rng.sample(list(items), k)
