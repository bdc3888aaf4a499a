"""Random alphanumeric strings."""

from __future__ import annotations

import string
from enum import Enum

import numpy as np

from rnd.sampler.base import SeedLike, make_rng

ALPHANUMERIC = np.array(list(string.ascii_uppercase + string.ascii_lowercase + string.digits))


class Case(str, Enum):
    """Case transform applied after generation."""

    LOWER = "lower"
    UPPER = "upper"
    MIXED = "mixed"


def random_string(length: int = 10, case: Case | str = Case.LOWER, seed: SeedLike = None) -> str:
    """Generate *length* characters drawn uniformly from ``[A-Za-z0-9]``.

    Args:
        length: Number of characters.
        case: ``lower`` or ``upper`` folds the generated text; ``mixed``
            keeps it as drawn.
        seed: Random seed or generator.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    case = Case(case)
    idx = make_rng(seed).integers(0, len(ALPHANUMERIC), size=length)
    text = "".join(ALPHANUMERIC[idx].tolist())
    if case is Case.LOWER:
        return text.lower()
    if case is Case.UPPER:
        return text.upper()
    return text
