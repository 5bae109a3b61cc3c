"""The 96-bit decimal value type and the scaling helpers built on it."""

from __future__ import annotations

from dataclasses import dataclass, replace

MAX_MANTISSA = (1 << 96) - 1
MAX_SCALE = 28
_MAX_SCALE_FIELD = 0xFF


class DecimalError(ArithmeticError):
    """Base class for every error raised by the decimal operations."""


class TooLargeError(DecimalError):
    """The result is too large or is positive infinity."""


class TooSmallError(DecimalError):
    """The result is too small or is negative infinity."""


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """A division by zero was attempted."""


class InvalidDecimalError(DecimalError, ValueError):
    """The value carries a scale outside the range 0..28."""


@dataclass(frozen=True)
class Decimal:
    """A 96-bit unsigned mantissa with a decimal scale and a sign.

    The value is ``(-1 if negative else 1) * mantissa / 10 ** scale``.
    A scale up to 255 can be stored so that malformed values can be
    represented; only scales 0..28 are valid for arithmetic.
    """

    mantissa: int = 0
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa out of 96-bit range: {self.mantissa}")
        if not 0 <= self.scale <= _MAX_SCALE_FIELD:
            raise ValueError(f"scale does not fit in a byte: {self.scale}")
        object.__setattr__(self, "negative", bool(self.negative))

    @classmethod
    def from_parts(cls, mantissa: int, scale: int = 0, negative: bool = False) -> Decimal:
        """Build a value from its mantissa, scale and sign."""
        return cls(mantissa=mantissa, scale=scale, negative=negative)

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0

    def with_sign(self, negative: bool) -> Decimal:
        """Return a copy carrying the given sign."""
        return replace(self, negative=bool(negative))

    def with_scale(self, scale: int) -> Decimal:
        """Return a copy with the scale replaced; the mantissa is untouched."""
        if not 0 <= scale <= MAX_SCALE:
            raise InvalidDecimalError(f"scale must be within 0..{MAX_SCALE}, got {scale}")
        return replace(self, scale=scale)

    def validate(self) -> Decimal:
        """Return self, or raise InvalidDecimalError if the scale is invalid."""
        if self.scale > MAX_SCALE:
            raise InvalidDecimalError(f"scale must be within 0..{MAX_SCALE}, got {self.scale}")
        return self

    def __str__(self) -> str:
        digits = str(self.mantissa).rjust(self.scale + 1, "0")
        sign = "-" if self.negative else ""
        if self.scale == 0:
            return sign + digits
        return f"{sign}{digits[:-self.scale]}.{digits[-self.scale:]}"


def _overflow(value: Decimal) -> DecimalError:
    return TooSmallError("result below range") if value.negative else TooLargeError(
        "result above range"
    )


def raise_by_10(value: Decimal) -> Decimal:
    """Multiply the mantissa by ten, keeping scale and sign."""
    mantissa = value.mantissa * 10
    if mantissa > MAX_MANTISSA:
        raise _overflow(value)
    return replace(value, mantissa=mantissa)


def reduce_by_10(value: Decimal) -> tuple[Decimal, int]:
    """Divide the mantissa by ten, keeping scale and sign.

    Returns the quotient and the digit that was dropped.
    """
    quotient, digit = divmod(value.mantissa, 10)
    return replace(value, mantissa=quotient), digit


def _align(low: Decimal, high: Decimal) -> tuple[Decimal, Decimal, int]:
    """Bring ``low`` and ``high`` (high.scale > low.scale) to a common scale."""
    dropped = 0
    overflow = False
    while low.scale < high.scale:
        if not high.is_zero() and low.scale < MAX_SCALE and not overflow:
            try:
                low = raise_by_10(low).with_scale(low.scale + 1)
                continue
            except DecimalError:
                overflow = True
        reduced, digit = reduce_by_10(high)
        if high.scale == 1:
            dropped = digit
        high = reduced.with_scale(high.scale - 1)
    return low, high, dropped


def normalize(a: Decimal, b: Decimal) -> tuple[Decimal, Decimal, int]:
    """Bring two values to the same scale.

    The lower-scale value is multiplied up while it fits; otherwise the
    higher-scale value loses digits. Returns both values in their original
    order and the digit dropped when a scale reached zero (0 if none).
    """
    if a.is_zero() and b.is_zero():
        return replace(a, scale=0), replace(b, scale=0), 0
    if a.scale > b.scale:
        b, a, dropped = _align(b, a)
    elif a.scale < b.scale:
        a, b, dropped = _align(a, b)
    else:
        dropped = 0
    return a, b, dropped


def strip_trailing_zeros(value: Decimal) -> Decimal:
    """Remove trailing zeros of the fractional part, lowering the scale."""
    mantissa, scale = value.mantissa, value.scale
    while scale > 0:
        quotient, digit = divmod(mantissa, 10)
        if digit:
            break
        mantissa, scale = quotient, scale - 1
    return replace(value, mantissa=mantissa, scale=scale)