"""Weighted selection with and without repetition."""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

import numpy as np

from rnd.sampler.base import SeedLike, make_rng

logger = logging.getLogger(__name__)

T = TypeVar("T")

COIN_SIDES = ("heads", "tails")


class WeightError(ValueError):
    """Raised when a weight vector does not describe a distribution."""


class WeightedSampler:
    """Draw item indices with probability proportional to their weights."""

    def __init__(self, weights: Sequence[float], seed: SeedLike = None) -> None:
        """Validate *weights* and build the cumulative-weight table.

        Args:
            weights: One non-negative, finite weight per item. At least one
                weight must be positive.
            seed: Random seed or generator.

        Raises:
            WeightError: If the vector is empty, holds a negative or
                non-finite weight, or sums to zero.
        """
        w = np.asarray(weights, dtype=np.float64)
        if w.size == 0:
            raise WeightError("no items to choose from")
        if not np.all(np.isfinite(w)) or np.any(w < 0):
            raise WeightError("invalid weight: weights must be finite and non-negative")
        total = float(w.sum())
        if total == 0.0:
            raise WeightError("all weights are zero")
        if not np.isfinite(total):
            raise WeightError("invalid weight: sum of weights overflows")

        self.weights = w
        self._cumulative = np.cumsum(w)
        self._last_positive = int(np.flatnonzero(w)[-1])
        self._rng = make_rng(seed)

    def __len__(self) -> int:
        return int(self.weights.size)

    @property
    def n_positive(self) -> int:
        """Number of items that can actually be drawn."""
        return int(np.count_nonzero(self.weights))

    def sample_with_repetition(self, amount: int) -> list[int]:
        """Return *amount* independent draws."""
        if amount < 0:
            raise ValueError("amount must be non-negative")
        total = self._cumulative[-1]
        draws = self._rng.uniform(0.0, total, size=amount)
        idx = np.searchsorted(self._cumulative, draws, side="right")
        # uniform() may round up to ``total``.
        return np.minimum(idx, self._last_positive).tolist()

    def sample_without_repetition(self, amount: int) -> list[int]:
        """Return *amount* distinct indices drawn one after another.

        Each draw picks among the remaining items proportionally to their
        weights.

        Raises:
            WeightError: If fewer than *amount* items have a positive weight.
        """
        if amount < 0:
            raise ValueError("amount must be non-negative")
        if amount > self.n_positive:
            raise WeightError(
                f"cannot choose {amount} distinct items when only "
                f"{self.n_positive} have a positive weight"
            )
        if amount == 0:
            return []
        p = self.weights / self.weights.sum()
        return self._rng.choice(len(self), size=amount, replace=False, p=p).tolist()


def choose(
    items: Sequence[T],
    amount: int = 1,
    weights: Sequence[float] = (),
    repetition: bool = False,
    seed: SeedLike = None,
) -> list[T]:
    """Choose *amount* elements of *items*.

    Args:
        items: Candidates.
        amount: Number of elements to choose.
        weights: One weight per item; empty means every item weighs 1.0.
        repetition: Allow an item to be chosen more than once. Forced on when
            *amount* exceeds the number of items.
        seed: Random seed or generator.

    Returns:
        The chosen elements in draw order.

    Raises:
        ValueError: On mismatched weights or an invalid weight vector.
    """
    if len(weights) == 0:
        weights = [1.0] * len(items)
    elif len(weights) != len(items):
        raise WeightError(
            f"number of weights ({len(weights)}) does not match number of items ({len(items)})"
        )
    if amount == 0:
        return []

    sampler = WeightedSampler(weights, seed=seed)
    if repetition or amount > len(items):
        logger.debug("Choosing %d of %d items with repetition", amount, len(items))
        indices = sampler.sample_with_repetition(amount)
    else:
        logger.debug("Choosing %d of %d items without repetition", amount, len(items))
        indices = sampler.sample_without_repetition(amount)
    return [items[i] for i in indices]


def flip_coins(amount: int = 1, seed: SeedLike = None) -> list[str]:
    """Flip a fair coin *amount* times."""
    return choose(COIN_SIDES, amount=amount, weights=(1.0, 1.0), repetition=True, seed=seed)
