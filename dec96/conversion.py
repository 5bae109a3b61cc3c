"""Conversions between decimal values and Python ints and floats."""

from __future__ import annotations

import math
import struct
from fractions import Fraction

from .core import MAX_SCALE, Decimal, DecimalError

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_UINT_MAX = (1 << 32) - 1
_MANTISSA_LIMIT = 2.0**96


class ConversionError(DecimalError):
    """A value cannot be converted to or from a decimal."""


def _to_float32(number: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", number))[0]


_MIN_FLOAT = _to_float32(1e-28)
_MAX_FLOAT = 79228162514264337593543950335.0


def _round_half_away(number: float) -> float:
    """Round a non-negative float to an integer, halves away from zero."""
    whole = math.floor(number)
    return float(whole + 1 if number - whole >= 0.5 else whole)


def from_int(value: int) -> Decimal:
    """Convert a 32-bit signed integer to a decimal."""
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConversionError(f"integer out of 32-bit range: {value}")
    return Decimal(abs(value), 0, value < 0)


def to_int(value: Decimal) -> int:
    """Convert a decimal to a 32-bit signed integer, dropping the fraction.

    The mantissa itself must fit in 32 bits.
    """
    if value.mantissa > _UINT_MAX:
        raise ConversionError("mantissa does not fit in 32 bits")
    magnitude = value.mantissa // 10**value.scale
    limit = -_INT_MIN if value.negative else _INT_MAX
    if magnitude > limit:
        raise ConversionError("value out of 32-bit range")
    return -magnitude if value.negative else magnitude


def from_float(value: float) -> Decimal:
    """Convert a single-precision float to a decimal of 7 significant digits."""
    number = float(value)
    try:
        single = _to_float32(number)
    except OverflowError as exc:
        raise ConversionError("value out of range") from exc
    if single == 0.0:
        return Decimal(negative=math.copysign(1.0, single) < 0)
    if math.isnan(single) or math.isinf(single) or abs(single) > _MAX_FLOAT:
        raise ConversionError(f"cannot convert {number!r}")
    if abs(single) < _MIN_FLOAT:
        raise ConversionError(f"value too small: {number!r}")

    negative = single < 0
    magnitude = abs(single)
    scale = 0
    if magnitude >= 1e6:
        while magnitude >= 1e7:
            scale += 1
            magnitude /= 10
        magnitude = _round_half_away(magnitude) * 10.0**scale
        scale = 0
    else:
        while magnitude <= 1e7:
            scale += 1
            magnitude *= 10
        magnitude = _round_half_away(magnitude)
        while int(magnitude) % 10 == 0 and scale > 0:
            magnitude /= 10
            scale -= 1
    if magnitude >= _MANTISSA_LIMIT:
        raise ConversionError(f"value out of range: {number!r}")
    # A scale beyond 28 cannot be stored and is left at zero.
    return Decimal(int(magnitude), scale if scale <= MAX_SCALE else 0, negative)


def to_float(value: Decimal) -> float:
    """Convert a decimal to a single-precision float rounded to 7 decimals."""
    value.validate()
    exact = Fraction(value.mantissa, 10**value.scale)
    if 0 < exact < Fraction(_MIN_FLOAT):
        raise ConversionError("value too small for a float")
    steps = math.floor(exact * 10**7 + Fraction(1, 2))
    result = _to_float32(steps / 10**7)
    return -result if value.negative else result