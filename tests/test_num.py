"""Tests for integer/float numeric bounds."""

from __future__ import annotations

import pytest

from rnd.num import Num


def test_parse_prefers_integer() -> None:
    """Integer literals parse to integer bounds."""
    assert Num.parse("42") == Num(42)
    assert Num.parse("42").is_int
    assert Num.parse("-7").value == -7


def test_parse_falls_back_to_float() -> None:
    """Non-integer literals parse as floats."""
    n = Num.parse("2.5")
    assert not n.is_int
    assert n.value == pytest.approx(2.5)


def test_parse_keeps_big_integers_exact() -> None:
    """Integers beyond 64 bits are not rounded."""
    text = "1" + "0" * 30
    assert Num.parse(text).value == 10**30


@pytest.mark.parametrize("text", ["seven", "1_000", "1_0.5", " 3", "4 ", ""])
def test_parse_rejects_malformed_literals(text: str) -> None:
    """Words, digit-group underscores and padded literals are rejected."""
    with pytest.raises(ValueError):
        Num.parse(text)


def test_promote_mixed_operands_to_float() -> None:
    """An int meeting a float becomes a float."""
    left, right = Num.promote(Num(1), Num(2.5))
    assert isinstance(left.value, float)
    assert isinstance(right.value, float)
    assert left.value == 1.0


def test_promote_keeps_two_integers() -> None:
    """Two integers stay integers."""
    left, right = Num.promote(Num(1), Num(3))
    assert left.is_int and right.is_int


def test_promote_rejects_integer_too_large_for_float() -> None:
    """An int too large for a float cannot be promoted."""
    with pytest.raises(ValueError):
        Num.promote(Num(10**400), Num(1.0))


def test_is_finite() -> None:
    """Integers are finite; inf and nan are not."""
    assert Num(3).is_finite()
    assert not Num(float("inf")).is_finite()
    assert not Num(float("nan")).is_finite()
