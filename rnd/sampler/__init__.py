"""Sampling routines."""

from rnd.sampler.base import SeedLike, make_rng
from rnd.sampler.die import roll_die
from rnd.sampler.shuffle import assign, shuffle
from rnd.sampler.strings import Case, random_string
from rnd.sampler.uniform import format_number, resolve_bounds, sample_range
from rnd.sampler.weighted import WeightedSampler, WeightError, choose, flip_coins

__all__ = [
    "SeedLike",
    "make_rng",
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
    "Case",
    "random_string",
]
