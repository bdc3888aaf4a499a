"""Tests for shuffles and assignments."""

from __future__ import annotations

from collections import Counter

import pytest

from rnd.sampler.shuffle import assign, shuffle


def test_shuffle_returns_permutation() -> None:
    """Shuffling keeps the same multiset and length."""
    items = ["a", "b", "b", "c", "d", "e"]
    result = shuffle(items, seed=8)
    assert len(result) == len(items)
    assert Counter(result) == Counter(items)


def test_shuffle_leaves_input_untouched() -> None:
    """The input list is not reordered in place."""
    items = ["x", "y", "z"]
    shuffle(items, seed=1)
    assert items == ["x", "y", "z"]


def test_shuffle_empty() -> None:
    """An empty list shuffles to an empty list."""
    assert shuffle([], seed=0) == []


def test_shuffle_reaches_every_ordering() -> None:
    """All six orderings of three items come up across seeds."""
    seen = {tuple(shuffle([1, 2, 3], seed=s)) for s in range(200)}
    assert len(seen) == 6


def test_assign_is_bijection_preserving_left_order() -> None:
    """Left keeps its order and right is used exactly once."""
    left = ["ann", "bob", "cy"]
    right = ["tea", "cake", "jam"]
    pairs = assign(left, right, seed=3)
    assert [a for a, _ in pairs] == left
    assert sorted(b for _, b in pairs) == sorted(right)


def test_assign_unequal_lengths_raises() -> None:
    """Lists of different length cannot be assigned."""
    with pytest.raises(ValueError, match="unequal length"):
        assign(["a", "b"], ["x"])
