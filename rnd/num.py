"""Numeric bounds that are either arbitrary-precision integers or floats."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Num:
    """A number tagged as integer or float.

    Integers keep Python's arbitrary precision. Whenever an integer meets a
    float in a binary operation both sides are promoted to float (see
    :meth:`promote`).

    Attributes:
        value: The wrapped ``int`` or ``float``.
    """

    value: int | float

    @classmethod
    def parse(cls, text: str) -> Num:
        """Parse *text* as an integer, falling back to a float.

        Digit-group underscores and surrounding whitespace are rejected.

        Raises:
            ValueError: If *text* is neither an integer nor a float literal.
        """
        if "_" in text or text != text.strip():
            raise ValueError(f"invalid number: {text!r}")
        try:
            return cls(int(text))
        except ValueError:
            return cls(float(text))

    @property
    def is_int(self) -> bool:
        return isinstance(self.value, int)

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    def as_float(self) -> float:
        """Return the value as a float.

        Raises:
            ValueError: If an integer is too large to be represented.
        """
        try:
            return float(self.value)
        except OverflowError:
            raise ValueError(f"{self.value} is too large to use as a float bound") from None

    @staticmethod
    def promote(left: Num, right: Num) -> tuple[Num, Num]:
        """Return both operands with int+float mixes promoted to float."""
        if left.is_int and right.is_int:
            return left, right
        return Num(left.as_float()), Num(right.as_float())

    def is_finite(self) -> bool:
        return self.is_int or math.isfinite(self.value)

    def __str__(self) -> str:
        return str(self.value)
