"""Tests for weighted selection."""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest
from scipy.stats import chisquare

from rnd.sampler.weighted import COIN_SIDES, WeightedSampler, WeightError, choose, flip_coins


def test_with_repetition_matches_weight_proportions() -> None:
    """Long-run frequencies converge to weight / sum(weights)."""
    weights = [1.0, 2.0, 3.0, 4.0]
    n_draws = 20_000
    sampler = WeightedSampler(weights, seed=123)
    counts = np.bincount(sampler.sample_with_repetition(n_draws), minlength=len(weights))
    expected = np.asarray(weights) / sum(weights) * n_draws
    _, p_value = chisquare(counts, expected)
    assert p_value > 0.001


def test_zero_weight_items_are_never_drawn() -> None:
    """Items with zero weight never come up."""
    sampler = WeightedSampler([0.0, 1.0, 0.0, 1.0, 0.0], seed=5)
    drawn = set(sampler.sample_with_repetition(5_000))
    assert drawn <= {1, 3}


def test_without_repetition_returns_distinct_indices() -> None:
    """Draws without repetition never repeat an index."""
    sampler = WeightedSampler([5.0, 1.0, 1.0, 1.0, 1.0, 1.0], seed=11)
    for _ in range(50):
        idx = sampler.sample_without_repetition(4)
        assert len(idx) == 4
        assert len(set(idx)) == 4
        assert all(0 <= i < 6 for i in idx)


def test_without_repetition_full_draw_is_permutation() -> None:
    """Drawing every item gives each index once."""
    sampler = WeightedSampler([1.0, 2.0, 3.0], seed=0)
    assert sorted(sampler.sample_without_repetition(3)) == [0, 1, 2]


def test_without_repetition_favours_heavy_items() -> None:
    """A heavily weighted item is almost always among a single draw."""
    sampler = WeightedSampler([1000.0, 1.0, 1.0], seed=3)
    first = Counter(sampler.sample_without_repetition(1)[0] for _ in range(500))
    assert first[0] > 450


def test_without_repetition_rejects_too_few_positive_weights() -> None:
    """Asking for more items than have weight fails."""
    sampler = WeightedSampler([1.0, 0.0, 1.0], seed=0)
    with pytest.raises(WeightError):
        sampler.sample_without_repetition(3)


@pytest.mark.parametrize(
    "weights",
    [[], [0.0, 0.0], [1.0, -1.0], [1.0, float("nan")], [float("inf"), 1.0]],
)
def test_invalid_weight_vectors_raise(weights: list[float]) -> None:
    """Empty, zero, negative and non-finite weights are rejected."""
    with pytest.raises(WeightError):
        WeightedSampler(weights)


def test_weight_error_is_value_error() -> None:
    """Weight errors are ValueErrors."""
    assert issubclass(WeightError, ValueError)


def test_choose_defaults_to_uniform_weights() -> None:
    """Without weights every item is a candidate."""
    picked = choose(["a", "b", "c"], amount=2, seed=1)
    assert len(picked) == 2
    assert len(set(picked)) == 2
    assert set(picked) <= {"a", "b", "c"}


def test_choose_mismatched_weights_raises() -> None:
    """Weights must match the items one to one."""
    with pytest.raises(ValueError, match="does not match"):
        choose(["a", "b", "c"], amount=1, weights=[1.0, 2.0])


def test_choose_amount_above_item_count_forces_repetition() -> None:
    """Asking for more than available switches to repetition."""
    picked = choose(["a", "b"], amount=7, seed=2)
    assert len(picked) == 7
    assert set(picked) <= {"a", "b"}


def test_choose_with_repetition_flag() -> None:
    """Repetition over a single item returns it."""
    picked = choose(["only"], amount=1, repetition=True, seed=2)
    assert picked == ["only"]


def test_choose_zero_amount_returns_nothing() -> None:
    """Choosing zero items returns an empty list."""
    assert choose(["a", "b"], amount=0) == []


def test_choose_without_items_raises() -> None:
    """Choosing from nothing fails."""
    with pytest.raises(WeightError, match="no items"):
        choose([], amount=1)


def test_choose_is_reproducible_with_seed() -> None:
    """Same seed, same choices."""
    items = [str(i) for i in range(20)]
    assert choose(items, amount=5, seed=99) == choose(items, amount=5, seed=99)


def test_flip_coins() -> None:
    """Coin flips are heads or tails."""
    flips = flip_coins(50, seed=4)
    assert len(flips) == 50
    assert set(flips) <= set(COIN_SIDES)
