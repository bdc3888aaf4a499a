"""Rendering of drawn outcomes as a list and/or a frequency table."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

AMOUNT_THRESHOLD = 10


@dataclass(frozen=True)
class DisplayPolicy:
    """Which views of a batch of outcomes to print.

    Attributes:
        show_all: Print every outcome in draw order.
        show_count: Print one ``label: count`` line per distinct outcome.
    """

    show_all: bool
    show_count: bool


def display_policy(
    amount: int,
    count: bool = False,
    show_all: bool = False,
    threshold: int = AMOUNT_THRESHOLD,
) -> DisplayPolicy:
    """Resolve the ``--count``/``--all`` flags for a batch of *amount* draws.

    Without either flag, batches up to *threshold* are listed in full and
    larger ones are summarised as a count table. Explicit flags always win.
    """
    if not count and not show_all:
        listed = amount <= threshold
        return DisplayPolicy(show_all=listed, show_count=not listed)
    return DisplayPolicy(show_all=show_all, show_count=count)


def count_outcomes(outcomes: Sequence[Hashable]) -> list[tuple[Hashable, int]]:
    """Group equal outcomes, most frequent first, ties in first-seen order."""
    return Counter(outcomes).most_common()


def render(outcomes: Sequence[Hashable], policy: DisplayPolicy) -> str:
    """Render *outcomes* according to *policy*."""
    if not outcomes:
        return ""
    sections = []
    if policy.show_all:
        sections.append(", ".join(str(o) for o in outcomes))
    if policy.show_count:
        sections.append("\n".join(f"{o}: {n}" for o, n in count_outcomes(outcomes)))
    return "\n\n".join(sections)
