# dec96

`dec96` is a fixed-point decimal number type. Each value holds a 96-bit
unsigned mantissa, a sign, and a decimal scale. The value is
`(-1 if negative else 1) * mantissa / 10**scale`. Arithmetic accepts scales
from 0 to 28. The package provides addition, subtraction, multiplication,
division, comparison, rounding, and conversion to and from `int` and `float`.

It is a library only. There is no command-line tool. There is also no parser
that builds a value from a string. You build values from their parts.

## Installation

```
pip install dec96
```

## Building values (`dec96.core`)

```python
from dec96.core import Decimal

price = Decimal.from_parts(12345, 2, False)   # 123.45
debt = Decimal.from_parts(678, 1, True)       # -67.8
str(price)                                     # "123.45"
```

`Decimal` is a frozen dataclass with the fields `mantissa`, `scale` and
`negative`. Building one raises `ValueError` in two cases: the mantissa is
outside `0..2**96 - 1`, or the scale does not fit in a byte. A scale from 29
to 255 can be stored, but such a value is invalid for most operations.

- `is_zero()` is true when the mantissa is zero, whatever the sign or scale.
- `with_sign(negative)` returns a copy with the given sign.
- `with_scale(scale)` returns a copy with the scale replaced and the mantissa
  unchanged. It raises `InvalidDecimalError` when the scale is outside
  `0..28`.
- `validate()` returns the value, or raises `InvalidDecimalError` when its
  scale is above 28.

The module also provides these scaling helpers:

- `raise_by_10(value)` multiplies the mantissa by ten. It raises
  `TooLargeError`, or `TooSmallError` for a negative value, when the result
  does not fit.
- `reduce_by_10(value)` divides the mantissa by ten. It returns the quotient
  and the digit that was dropped.
- `normalize(a, b)` brings two values to a common scale. It returns both
  values and the digit that was dropped, if any.
- `strip_trailing_zeros(value)` removes trailing fractional zeros.

The error classes are `DecimalError` and its subclasses `TooLargeError`,
`TooSmallError`, `DivisionByZeroError` and `InvalidDecimalError`.
`DivisionByZeroError` is also a `ZeroDivisionError`. `InvalidDecimalError` is
also a `ValueError`.

## Arithmetic (`dec96.arithmetic`)

```python
from dec96.arithmetic import add, sub, mul, div

add(price, debt)    # 55.65
sub(price, debt)    # 191.25
mul(price, debt)
div(price, Decimal.from_parts(5, 0, False))
```

`add` and `sub` work as follows:

- When the sum does not fit in 96 bits but both operands have a fractional
  part, digits are dropped to make it fit.
- When it still does not fit, they raise `TooLargeError` for a positive result
  and `TooSmallError` for a negative one.
- A zero result is always positive zero with scale 0.

`mul` works as follows:

- It keeps the low 96 bits of the product.
- When the combined scale is above 28, it lowers the scale only if the dropped
  digits are zeros. Otherwise it raises `TooLargeError` or `TooSmallError`.

`div` works as follows:

- It produces up to 28 fractional digits.
- It raises `DivisionByZeroError` for a zero divisor.
- It raises `TooLargeError` or `TooSmallError` when the quotient would need a
  negative scale.

`add`, `sub` and `mul` raise `InvalidDecimalError` for an operand with a scale
above 28.

## Comparison (`dec96.comparison`)

```python
from dec96.comparison import is_equal, is_less, is_greater_or_equal

is_equal(Decimal.from_parts(1000, 2, False), Decimal.from_parts(1000000, 5, False))  # True
is_less(debt, price)                                                              # True
```

The module provides these functions:

- `is_less`
- `is_less_or_equal`
- `is_equal`
- `is_not_equal`
- `is_greater`
- `is_greater_or_equal`

Each one compares numeric values, so `10.00` equals `10.00000` and positive
zero equals negative zero. Each one raises `InvalidDecimalError` when an
operand has a scale above 28.

## Rounding (`dec96.rounding`)

```python
from dec96.rounding import negate, truncate, floor, round_half_up, banking_round

truncate(price)                                  # 123
floor(negate(price))                             # -124
round_half_up(Decimal.from_parts(25, 1, False))  # 3
banking_round(Decimal.from_parts(25, 1, False))  # 2
```

- `negate` flips the sign and keeps the scale.
- `truncate` drops the fraction.
- `floor` rounds towards negative infinity.
- `round_half_up` rounds halves away from zero.
- `banking_round` rounds halves to the even neighbour.

All rounding results have scale 0 and keep the sign of the input, including
the sign of a zero.

## Conversion (`dec96.conversion`)

```python
from dec96.conversion import from_int, to_int, from_float, to_float

from_int(-456)
to_int(Decimal.from_parts(789, 2, True))   # -7, the fraction is dropped
from_float(123.456)                        # 123.456, scale 3
to_float(price)                            # about 123.45
```

- `from_int` accepts 32-bit signed integers.
- `to_int` requires a mantissa that fits in 32 bits and a result in the 32-bit
  signed range.
- `from_float` rounds its argument to single precision and keeps 7
  significant digits.
- `to_float` rounds to 7 decimal places and returns a single-precision value.

A value that cannot be converted raises `ConversionError`, which is a
subclass of `DecimalError`. Examples are integers outside the 32-bit range,
NaN, infinities, and magnitudes that are too large or too small.

## Running the tests

```
pip install -e ".[test]"
pytest
```