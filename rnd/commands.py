"""Subcommand objects: parsed options plus the sampling they drive.

Each command is a dataclass built from command-line flags. Calling
:meth:`Command.run` with a generator performs one sampling pass and returns
the text to print.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

from rnd.display import display_policy, render
from rnd.num import Num
from rnd.sampler.die import roll_die
from rnd.sampler.shuffle import assign, shuffle
from rnd.sampler.strings import Case, random_string
from rnd.sampler.uniform import format_number, resolve_bounds, sample_range
from rnd.sampler.weighted import choose, flip_coins


class Command(ABC):
    """Base interface for subcommands."""

    @abstractmethod
    def run(self, rng: np.random.Generator) -> str:
        """Sample with *rng* and return the rendered output."""


@dataclass
class CoinCommand(Command):
    """Flip a coin ``amount`` times."""

    amount: int = 1
    count: bool = False
    show_all: bool = False

    def run(self, rng: np.random.Generator) -> str:
        outcomes = flip_coins(self.amount, seed=rng)
        return render(outcomes, display_policy(self.amount, self.count, self.show_all))


@dataclass
class ChooseCommand(Command):
    """Choose ``amount`` elements from ``items``.

    Attributes:
        items: Candidates.
        amount: Number of elements to choose.
        weights: One weight per item; empty for uniform weights.
        count: Print the count table.
        show_all: Print every choice.
        repetition: Choose with repetition.
    """

    items: list[str] = field(default_factory=list)
    amount: int = 1
    weights: list[float] = field(default_factory=list)
    count: bool = False
    show_all: bool = False
    repetition: bool = False

    def run(self, rng: np.random.Generator) -> str:
        outcomes = choose(
            self.items,
            amount=self.amount,
            weights=self.weights,
            repetition=self.repetition,
            seed=rng,
        )
        return render(outcomes, display_policy(self.amount, self.count, self.show_all))


@dataclass
class ShuffleCommand(Command):
    items: list[str] = field(default_factory=list)

    def run(self, rng: np.random.Generator) -> str:
        return ", ".join(shuffle(self.items, seed=rng))


@dataclass
class RandomCommand(Command):
    """Print a random number between two bounds.

    Attributes:
        start: Lower bound, or the only bound (see
            :func:`rnd.sampler.uniform.resolve_bounds`).
        end: Upper bound.
        inclusive: Include the upper bound.
        precision: Decimals printed for float results.
    """

    start: Num | None = None
    end: Num | None = None
    inclusive: bool = False
    precision: int = 6

    def run(self, rng: np.random.Generator) -> str:
        lower, upper = resolve_bounds(self.start, self.end)
        value = sample_range(lower, upper, inclusive=self.inclusive, seed=rng)
        return format_number(value, self.precision)


@dataclass
class StringCommand(Command):
    length: int = 10
    case: Case = Case.LOWER

    def run(self, rng: np.random.Generator) -> str:
        return random_string(self.length, self.case, seed=rng)


@dataclass
class DieCommand(Command):
    """Roll a ``sides``-sided die ``times`` times."""

    sides: int = 6
    times: int = 1
    count: bool = False
    show_all: bool = False

    def run(self, rng: np.random.Generator) -> str:
        rolls = roll_die(self.sides, self.times, seed=rng)
        return render(rolls, display_policy(self.times, self.count, self.show_all))


@dataclass
class AssignCommand(Command):
    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)

    def run(self, rng: np.random.Generator) -> str:
        return "\n".join(f"{a}: {b}" for a, b in assign(self.left, self.right, seed=rng))


def default_command() -> Command:
    """Command run when no subcommand is given: a float in ``[0, 1)``."""
    return RandomCommand(start=Num(0.0), end=Num(1.0), precision=2)
