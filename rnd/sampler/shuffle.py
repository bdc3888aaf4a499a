"""Uniform permutations and random one-to-one assignments."""

from __future__ import annotations

from typing import Sequence, TypeVar

from rnd.sampler.base import SeedLike, make_rng

T = TypeVar("T")
U = TypeVar("U")


def shuffle(items: Sequence[T], seed: SeedLike = None) -> list[T]:
    """Return a uniformly random permutation of *items*.

    The input sequence is left untouched.
    """
    order = make_rng(seed).permutation(len(items))
    return [items[i] for i in order]


def assign(left: Sequence[T], right: Sequence[U], seed: SeedLike = None) -> list[tuple[T, U]]:
    """Pair every element of *left*, in order, with a distinct element of *right*.

    Raises:
        ValueError: If the two lists differ in length.
    """
    if len(left) != len(right):
        raise ValueError("`left` and `right` lists of unequal length")
    return list(zip(left, shuffle(right, seed=seed)))
