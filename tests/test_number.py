import math

import pytest

from paxlib.number import IntType, clamp, direction, float_magnitude, magnitude


def test_direction_and_magnitude_of_negative_float():
    assert direction(-1.56) == -1
    assert float_magnitude(-1.56) == 1.56


def test_direction_and_magnitude_of_positive_float():
    assert direction(+1.56) == 1
    assert float_magnitude(+1.56) == 1.56


def test_direction_and_magnitude_of_zero():
    assert direction(0) == 0
    assert float_magnitude(0) == 0


def test_float_magnitude_clears_sign_of_negative_zero():
    result = float_magnitude(-0.0)
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


def test_direction_of_nan_is_zero():
    assert direction(float("nan")) == 0


@pytest.mark.parametrize("value,expected", [(5, 1), (-5, -1), (0, 0)])
def test_direction_of_integers(value, expected):
    assert direction(value) == expected


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_magnitude_of_minimum_fits_unsigned(bits):
    signed = IntType.of(bits, True)
    unsigned = IntType.of(bits, False)
    result = magnitude(signed.min, bits)
    assert result == -signed.min
    assert unsigned.fits(result)


def test_magnitude_of_positive_is_identity():
    assert magnitude(127, 8) == 127


def test_magnitude_rejects_out_of_range():
    with pytest.raises(ValueError):
        magnitude(128, 8)


def test_magnitude_rejects_unknown_width():
    with pytest.raises(ValueError):
        magnitude(1, 12)


def test_int_type_limits():
    i8 = IntType.of(8, True)
    u8 = IntType.of(8, False)
    u64 = IntType.of(64, False)
    i64 = IntType.of(64, True)
    assert (i8.min, i8.max) == (-0x80, 0x7F)
    assert u8.max == 0xFF
    assert u64.max == 0xFFFFFFFFFFFFFFFF
    assert i64.size == 8
    assert i8.fits(0x7F)
    assert not i8.fits(0x80)
    assert not u8.fits(-1)


def test_word_types_alias_64_bit():
    assert IntType.of(64, True) is IntType.IWORD
    assert IntType.of(64, False) is IntType.UWORD


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2