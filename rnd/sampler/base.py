"""Randomness source shared by every sampler."""

from __future__ import annotations

from typing import Union

import numpy as np

SeedLike = Union[int, np.random.Generator, None]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Return a generator for *seed*.

    Args:
        seed: ``None`` for OS entropy, an ``int`` for a reproducible stream,
            or an existing :class:`numpy.random.Generator`, which is returned
            unchanged so that one generator can be threaded through a run.
    """
    return np.random.default_rng(seed)
