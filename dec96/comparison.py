"""Ordering and equality of decimal values."""

from __future__ import annotations

from .core import Decimal


def _signed_values(a: Decimal, b: Decimal) -> tuple[int, int]:
    """Return both values as signed integers at a common scale."""
    a.validate()
    b.validate()
    scale = max(a.scale, b.scale)
    left = a.mantissa * 10 ** (scale - a.scale)
    right = b.mantissa * 10 ** (scale - b.scale)
    return (-left if a.negative else left), (-right if b.negative else right)


def is_less(a: Decimal, b: Decimal) -> bool:
    """True when ``a < b``; positive and negative zero are equal."""
    left, right = _signed_values(a, b)
    return left < right


def is_equal(a: Decimal, b: Decimal) -> bool:
    """True when both values are numerically equal."""
    left, right = _signed_values(a, b)
    return left == right


def is_less_or_equal(a: Decimal, b: Decimal) -> bool:
    """True when ``a <= b``."""
    return is_less(a, b) or is_equal(a, b)


def is_not_equal(a: Decimal, b: Decimal) -> bool:
    """True when the values differ numerically."""
    return not is_equal(a, b)


def is_greater(a: Decimal, b: Decimal) -> bool:
    """True when ``a > b``."""
    return not is_less_or_equal(a, b)


def is_greater_or_equal(a: Decimal, b: Decimal) -> bool:
    """True when ``a >= b``."""
    return not is_less(a, b)