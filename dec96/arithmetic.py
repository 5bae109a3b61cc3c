"""Addition, subtraction, multiplication and division of decimal values."""

from __future__ import annotations

from .core import (
    MAX_MANTISSA,
    MAX_SCALE,
    Decimal,
    DecimalError,
    DivisionByZeroError,
    TooLargeError,
    TooSmallError,
    normalize,
    reduce_by_10,
)

_WORD_RANGE = MAX_MANTISSA + 1


def _overflow(negative: bool) -> DecimalError:
    if negative:
        return TooSmallError("result below range")
    return TooLargeError("result above range")


def _is_max(a: Decimal, b: Decimal) -> bool:
    return a.mantissa == MAX_MANTISSA and a.scale == 0 and not b.is_zero()


def _add_magnitudes(a: Decimal, b: Decimal) -> Decimal:
    """Add two values of the same sign, dropping digits when the sum is too wide."""
    a, b, dropped = normalize(a, b)
    total = a.mantissa + b.mantissa
    if total > MAX_MANTISSA:
        if not (a.scale and b.scale):
            raise _overflow(a.negative)
        reduced_a, digit_a = reduce_by_10(a)
        reduced_b, digit_b = reduce_by_10(b)
        if a.scale == 1:
            dropped = digit_a + digit_b
        result = add(
            reduced_a.with_scale(a.scale - 1), reduced_b.with_scale(b.scale - 1)
        )
    else:
        result = Decimal(total, a.scale, a.negative)
    if dropped:
        if result.mantissa & 1:
            step = 1
        else:
            step = 2 if dropped > 10 else 0
        if step:
            result = _add_magnitudes(
                result, Decimal(step, result.scale, result.negative)
            )
    return result


def _sub_magnitudes(a: Decimal, b: Decimal) -> Decimal:
    """Subtract the magnitude of ``b`` from the not smaller magnitude of ``a``."""
    a, b, dropped = normalize(a, b)
    difference = (a.mantissa - b.mantissa) % _WORD_RANGE
    if dropped and difference & 1:
        difference -= 1
    return Decimal(difference, a.scale, a.negative)


def add(a: Decimal, b: Decimal) -> Decimal:
    """Return ``a + b``.

    Raises TooLargeError or TooSmallError when the sum leaves the range,
    and InvalidDecimalError for an operand with a scale above 28.
    """
    a.validate()
    b.validate()
    if a.negative != b.negative:
        result = sub(a, b.with_sign(a.negative))
    elif _is_max(a, b) or _is_max(b, a):
        raise _overflow(a.negative)
    else:
        result = _add_magnitudes(a, b)
    if result.is_zero():
        result = Decimal()
    return result


def sub(a: Decimal, b: Decimal) -> Decimal:
    """Return ``a - b``, raising as add does."""
    a.validate()
    b.validate()
    if a.negative != b.negative:
        return add(a, b.with_sign(a.negative))
    left = a.mantissa * 10 ** (MAX_SCALE - a.scale)
    right = b.mantissa * 10 ** (MAX_SCALE - b.scale)
    if left < right:
        return _sub_magnitudes(b, a).with_sign(not a.negative)
    return _sub_magnitudes(a, b)


def mul(a: Decimal, b: Decimal) -> Decimal:
    """Return ``a * b``.

    The product keeps its low 96 bits. A combined scale above 28 is brought
    down only when the dropped digits are zeros; otherwise TooLargeError or
    TooSmallError is raised.
    """
    a.validate()
    b.validate()
    negative = a.negative != b.negative
    scale = a.scale + b.scale
    mantissa = (a.mantissa * b.mantissa) % _WORD_RANGE
    while scale > MAX_SCALE:
        mantissa, digit = divmod(mantissa, 10)
        scale -= 1
        if digit:
            raise _overflow(negative)
    if mantissa == 0:
        negative = False
    return Decimal(mantissa, scale, negative)


def div(a: Decimal, b: Decimal) -> Decimal:
    """Return ``a / b`` with up to 28 fractional digits.

    Raises DivisionByZeroError for a zero divisor, and TooLargeError or
    TooSmallError when the quotient needs a negative scale.
    """
    if b.is_zero():
        raise DivisionByZeroError("division by zero")
    scale = a.scale - b.scale
    divisor = b.mantissa
    result, remainder = divmod(a.mantissa, divisor)
    while remainder and scale < MAX_SCALE:
        scale += 1
        result *= 10
        if result > MAX_MANTISSA:
            result %= _WORD_RANGE
            break
        remainder *= 10
        if remainder > MAX_MANTISSA:
            break
        digit, remainder = divmod(remainder, divisor)
        if result + digit > MAX_MANTISSA:
            break
        result += digit
    negative = a.negative != b.negative
    if scale < 0:
        raise _overflow(negative)
    return Decimal(result, scale if result else 0, negative)