"""rnd — select random data in different ways.

Public API
----------
The sampling routines are importable directly from ``rnd``::

    from rnd import choose, flip_coins, roll_die, sample_range, shuffle
    from rnd.display import display_policy, render
    from rnd.cli import main
"""

from __future__ import annotations

# Presentation
from rnd.display import AMOUNT_THRESHOLD, DisplayPolicy, count_outcomes, display_policy, render

# Numeric bounds
from rnd.num import Num

# Sampling routines
from rnd.sampler import (
    Case,
    WeightedSampler,
    WeightError,
    assign,
    choose,
    flip_coins,
    format_number,
    make_rng,
    random_string,
    resolve_bounds,
    roll_die,
    sample_range,
    shuffle,
)

__version__ = "0.1.0"

__all__ = [
    # Sampling
    "WeightedSampler",
    "WeightError",
    "choose",
    "flip_coins",
    "sample_range",
    "resolve_bounds",
    "format_number",
    "shuffle",
    "assign",
    "roll_die",
    "random_string",
    "Case",
    "make_rng",
    "Num",
    # Presentation
    "AMOUNT_THRESHOLD",
    "DisplayPolicy",
    "display_policy",
    "count_outcomes",
    "render",
    "__version__",
]
