"""Die rolls."""

from __future__ import annotations

import numpy as np

from rnd.sampler.base import SeedLike, make_rng
from rnd.sampler.uniform import uniform_int

_INT64_MAX = np.iinfo(np.int64).max


def roll_die(sides: int = 6, times: int = 1, seed: SeedLike = None) -> list[int]:
    """Roll a *sides*-sided die *times* times.

    Dice with more sides than fit in int64 are rolled one value at a time.

    Returns:
        Integers in ``[1, sides]`` in roll order.

    Raises:
        ValueError: If ``sides < 1`` or ``times < 0``.
    """
    if sides < 1:
        raise ValueError("number of sides must be at least 1")
    if times < 0:
        raise ValueError("times must be non-negative")
    rng = make_rng(seed)
    if sides <= _INT64_MAX:
        return rng.integers(1, sides, endpoint=True, size=times).tolist()
    return [uniform_int(rng, 1, sides + 1) for _ in range(times)]
