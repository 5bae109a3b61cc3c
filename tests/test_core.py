import pytest

from dec96.core import (
    MAX_MANTISSA,
    Decimal,
    InvalidDecimalError,
    TooLargeError,
    TooSmallError,
    normalize,
    raise_by_10,
    reduce_by_10,
    strip_trailing_zeros,
)


def _dec(lo, mid, hi, flags):
    return Decimal(
        mantissa=lo | (mid << 32) | (hi << 64),
        scale=(flags >> 16) & 0xFF,
        negative=bool(flags >> 31),
    )


def _mant(lo, mid=0, hi=0):
    return lo | (mid << 32) | (hi << 64)


MAX = (0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF)

VALUE_1 = [
    (0, 0, 0, 0),
    (0, 0, 0, 0),
    (0, 0, 0, 0x00030000),
    (0, 0, 0, 0x801C0000),
    (1, 0, 0, 0),
    (*MAX, 0),
    (1, 0, 0, 0x80000000),
    (1, 0, 0, 0x00010000),
    (10, 0, 0, 0),
    (123, 0, 0, 0),
    (1231, 0, 0, 0x00010000),
    (123539, 0, 0, 0x00030000),
    (1234320433, 0, 0, 0x00070000),
    (1234320434, 0, 0, 0x00070000),
    (0x5F5E1001, 0x0DE0B6B3, 0x00000006, 0x00190000),
    (0x5F5E1002, 0x0DE0B6B3, 0x00000006, 0x00190000),
    (65535, 0, 0, 0),
    (65556, 0, 0, 0),
    (0xFFFFFFFF, 0x000003FF, 0, 0),
    (0xDD3F41FF, 0x0216F44B, 0, 0x80050000),
    (*MAX, 0),
]

VALUE_2 = [
    (0, 0, 0, 0),
    (0, 0, 0, 0x80000000),
    (0, 0, 0, 0x000A0000),
    (0, 0, 0, 0x001C0000),
    (1, 0, 0, 0),
    (*MAX, 0x80000000),
    (1, 0, 0, 0),
    (10, 0, 0, 0x00010000),
    (10, 0, 0, 0),
    (123, 0, 0, 0),
    (1231, 0, 0, 0x80010000),
    (123539, 0, 0, 0x00030000),
    (1234320432, 0, 0, 0x00070000),
    (1234320433, 0, 0, 0x00070000),
    (0x5F5E1001, 0x0DE0B6B3, 0x00000006, 0x00190000),
    (0x5F5E1003, 0x0DE0B6B3, 0x00000006, 0x00190000),
    (65535, 0, 0, 0),
    (65556, 0, 0, 0x80000000),
    (0xFFFFFFFF, 0x000003FF, 0x80000000, 0x80000000),
    (0xDD3F41FF, 0x0216F44B, 0x80000000, 0x00050000),
    (*MAX, 0),
]

RAISE_EXPECTED = {
    0: _mant(0),
    1: _mant(0),
    2: _mant(0),
    3: _mant(0),
    4: _mant(10),
    6: _mant(10),
    7: _mant(10),
    8: _mant(100),
    9: _mant(1230),
    10: _mant(12310),
    11: _mant(1235390),
    12: _mant(0xDFB659EA, 0x00000002),
    13: _mant(0xDFB659F4, 0x00000002),
    14: _mant(0xB9ACA00A, 0x8AC72301, 0x0000003C),
    15: _mant(0xB9ACA014, 0x8AC72301, 0x0000003C),
    16: _mant(655350),
    17: _mant(655560),
    18: _mant(0xFFFFFFF6, 0x000027FF),
    19: _mant(0xA47893F6, 0x14E58AF6),
}

REDUCE_EXPECTED = [
    _mant(0),
    _mant(0),
    _mant(0),
    _mant(0),
    _mant(0),
    _mant(0x99999999, 0x99999999, 0x19999999),
    _mant(0),
    _mant(0),
    _mant(1),
    _mant(12),
    _mant(123),
    _mant(12353),
    _mant(123432043),
    _mant(123432043),
    _mant(0xEFEFCE66, 0x9AFCDF11),
    _mant(0xEFEFCE66, 0x9AFCDF11),
    _mant(6553),
    _mant(6555),
    _mant(0x66666666, 0x00000066),
    _mant(0x62ECB9CC, 0x00357ED4),
    _mant(0x99999999, 0x99999999, 0x19999999),
]


@pytest.mark.parametrize("index", sorted(RAISE_EXPECTED))
def test_raise_by_10(index):
    value = _dec(*VALUE_1[index])
    result = raise_by_10(value)
    assert result.mantissa == RAISE_EXPECTED[index]
    assert result.scale == value.scale
    assert result.negative == value.negative


@pytest.mark.parametrize("index", [5, 20])
def test_raise_by_10_overflow(index):
    with pytest.raises(TooLargeError):
        raise_by_10(_dec(*VALUE_1[index]))


def test_raise_by_10_negative_overflow():
    with pytest.raises(TooSmallError):
        raise_by_10(Decimal(MAX_MANTISSA, 0, True))


@pytest.mark.parametrize("index", range(len(VALUE_1)))
def test_reduce_by_10(index):
    value = _dec(*VALUE_1[index])
    result, _ = reduce_by_10(value)
    assert result.mantissa == REDUCE_EXPECTED[index]
    assert result.scale == value.scale
    assert result.negative == value.negative


def test_reduce_by_10_returns_dropped_digit():
    assert reduce_by_10(Decimal(123)) == (Decimal(12), 3)
    assert reduce_by_10(Decimal(10, 1, True)) == (Decimal(1, 1, True), 0)


@pytest.mark.parametrize("index", range(len(VALUE_1)))
def test_normalize_equalises_scales(index):
    a, b, _ = normalize(_dec(*VALUE_1[index]), _dec(*VALUE_2[index]))
    assert a.scale == b.scale


def test_normalize_raises_lower_scale():
    a, b, dropped = normalize(Decimal(1), Decimal(1, 2))
    assert a == Decimal(100, 2)
    assert b == Decimal(1, 2)
    assert dropped == 0


def test_normalize_keeps_argument_order():
    a, b, _ = normalize(Decimal(5, 3, True), Decimal(7, 1))
    assert a == Decimal(5, 3, True)
    assert b == Decimal(700, 3)


def test_normalize_zeros_reset_scale():
    a, b, dropped = normalize(Decimal(0, 10), Decimal(0, 28, True))
    assert (a.scale, b.scale, dropped) == (0, 0, 0)
    assert b.negative


def test_normalize_reduces_on_overflow():
    a, b, dropped = normalize(Decimal(MAX_MANTISSA), Decimal(1, 1))
    assert a == Decimal(MAX_MANTISSA)
    assert b == Decimal(0)
    assert dropped == 1


def test_strip_trailing_zeros():
    assert strip_trailing_zeros(Decimal(1000, 2)) == Decimal(10, 0)
    assert strip_trailing_zeros(Decimal(12300, 3, True)) == Decimal(123, 1, True)
    assert strip_trailing_zeros(Decimal(0, 5)) == Decimal(0, 0)
    assert strip_trailing_zeros(Decimal(100, 0)) == Decimal(100, 0)


def test_from_parts_and_is_zero():
    value = Decimal.from_parts(1231, 1, True)
    assert (value.mantissa, value.scale, value.negative) == (1231, 1, True)
    assert Decimal.from_parts(0, 5, True).is_zero()
    assert not value.is_zero()


def test_mantissa_out_of_range():
    with pytest.raises(ValueError):
        Decimal(MAX_MANTISSA + 1)
    with pytest.raises(ValueError):
        Decimal(-1)


def test_with_sign_and_scale():
    value = Decimal(5, 2)
    assert value.with_sign(True) == Decimal(5, 2, True)
    assert value.with_scale(28) == Decimal(5, 28)
    with pytest.raises(InvalidDecimalError):
        value.with_scale(29)


def test_validate():
    assert Decimal(1, 28).validate() == Decimal(1, 28)
    with pytest.raises(InvalidDecimalError):
        Decimal(1, 255).validate()


def test_str():
    assert str(Decimal(1231, 1, True)) == "-123.1"
    assert str(Decimal(0, 3)) == "0.000"
    assert str(Decimal(1, 28)) == "0." + "0" * 27 + "1"
    assert str(Decimal(MAX_MANTISSA)) == "79228162514264337593543950335"