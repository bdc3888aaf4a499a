"""Uniform sampling over integer or float ranges."""

from __future__ import annotations

import logging

import numpy as np

from rnd.num import Num
from rnd.sampler.base import SeedLike, make_rng

logger = logging.getLogger(__name__)

DEFAULT_LOWER = Num(0.0)
DEFAULT_UPPER = Num(1.0)

_INT64_MAX = np.iinfo(np.int64).max
_FLOAT_STEPS = 1 << 53


def resolve_bounds(start: Num | None = None, end: Num | None = None) -> tuple[Num, Num]:
    """Fill in missing bounds.

    With no bounds the range is ``[0.0, 1.0)``. A single bound is paired
    with ``0``: a negative value becomes the lower bound, anything else
    becomes the upper bound.
    """
    if start is not None and end is None:
        lower, upper = (start, Num(0)) if start.is_negative else (Num(0), start)
    else:
        lower = DEFAULT_LOWER if start is None else start
        upper = DEFAULT_UPPER if end is None else end
    logger.debug("Resolved bounds %s..%s from start=%s end=%s", lower, upper, start, end)
    return lower, upper


def sample_range(
    lower: Num,
    upper: Num,
    inclusive: bool = False,
    seed: SeedLike = None,
) -> int | float:
    """Draw one value uniformly between *lower* and *upper*.

    Two integer bounds give an integer; any float bound promotes both to
    float. The upper bound is excluded unless *inclusive* is set.

    Raises:
        ValueError: If a bound is not finite or ``lower >= upper``.
    """
    lower, upper = Num.promote(lower, upper)
    if not (lower.is_finite() and upper.is_finite()):
        raise ValueError("bounds must be finite numbers")
    if lower.value >= upper.value:
        raise ValueError("lower bound should be smaller than upper")

    rng = make_rng(seed)
    logger.debug(
        "Sampling %s range [%s, %s%s",
        "int" if lower.is_int else "float",
        lower,
        upper,
        "]" if inclusive else ")",
    )
    if lower.is_int:
        high = upper.value + 1 if inclusive else upper.value
        return uniform_int(rng, lower.value, high)
    return _uniform_float(rng, lower.value, upper.value, inclusive)


def uniform_int(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform integer in ``[low, high)`` for arbitrarily large bounds."""
    span = high - low
    if span <= _INT64_MAX:
        return low + int(rng.integers(0, span))

    # Rejection sampling over random bytes for spans beyond int64.
    nbits = (span - 1).bit_length()
    nbytes = (nbits + 7) // 8
    mask = (1 << nbits) - 1
    while True:
        candidate = int.from_bytes(rng.bytes(nbytes), "little") & mask
        if candidate < span:
            return low + candidate


def _uniform_float(rng: np.random.Generator, low: float, high: float, inclusive: bool) -> float:
    span = high - low
    if not np.isfinite(span):
        raise ValueError("range between bounds is too large")
    if inclusive:
        u = int(rng.integers(0, _FLOAT_STEPS, endpoint=True)) / _FLOAT_STEPS
        return min(low + span * u, high)
    while True:
        value = low + span * float(rng.random())
        if value < high:
            return value


def format_number(value: int | float, precision: int = 6) -> str:
    """Format *value*; integers ignore *precision*."""
    if isinstance(value, int):
        return str(value)
    return f"{value:.{precision}f}"
