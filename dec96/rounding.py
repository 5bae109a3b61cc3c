"""Sign flipping and rounding of decimal values to whole numbers."""

from __future__ import annotations

from .core import Decimal


def negate(value: Decimal) -> Decimal:
    """Return the value with its sign flipped; scale and mantissa are kept."""
    value.validate()
    return value.with_sign(not value.negative)


def truncate(value: Decimal) -> Decimal:
    """Drop the fractional digits, keeping the sign."""
    value.validate()
    return Decimal(value.mantissa // 10**value.scale, 0, value.negative)


def round_half_up(value: Decimal) -> Decimal:
    """Round to the nearest whole number, halves away from zero."""
    if value.is_zero():
        return Decimal(negative=value.negative)
    value.validate()
    if value.scale == 0:
        return value
    unit = 10**value.scale
    whole, fraction = divmod(value.mantissa, unit)
    if 2 * fraction >= unit:
        whole += 1
    return Decimal(whole, 0, value.negative)


def banking_round(value: Decimal) -> Decimal:
    """Round to the nearest whole number, halves to the even neighbour."""
    value.validate()
    if value.scale == 0:
        return value
    unit = 10**value.scale
    half = unit // 2
    whole, fraction = divmod(value.mantissa, unit)
    if fraction > half or (fraction == half and whole & 1):
        whole += 1
    return Decimal(whole, 0, value.negative)


def floor(value: Decimal) -> Decimal:
    """Round towards negative infinity."""
    if value.is_zero():
        return Decimal(negative=value.negative)
    value.validate()
    if value.scale == 0:
        return value
    whole, fraction = divmod(value.mantissa, 10**value.scale)
    if fraction and value.negative:
        whole += 1
    return Decimal(whole, 0, value.negative)