import pytest

from paxlib.numformat import (
    FormatError,
    FormatFlag,
    FormatOptions,
    digit_from_value,
    format_signed,
    format_unsigned,
)

HEX_PLUS_UPPER = FormatOptions(16, FormatFlag.LEADING_PLUS | FormatFlag.UPPER_CASE)
DECIMAL = FormatOptions(10, FormatFlag.NONE)


def test_source_case_positive_hex_with_plus_upper():
    assert format_signed(127, HEX_PLUS_UPPER, 8) == "+7F"


def test_source_case_negative_hex_with_plus_upper():
    assert format_signed(-16, HEX_PLUS_UPPER, 8) == "-10"


def test_with_radix_has_no_flags():
    options = FormatOptions.with_radix(10)
    assert options.radix == 10
    assert options.flags == FormatFlag.NONE


def test_negative_flags_rejected():
    with pytest.raises(FormatError):
        FormatOptions(10, -1)


def test_flags_become_format_flag():
    options = FormatOptions(10, 6)
    assert options.flags == FormatFlag.LEADING_PLUS | FormatFlag.UPPER_CASE
    assert options.upper and options.leading_plus and not options.leading_zero


@pytest.mark.parametrize(
    "value, radix, upper, expected",
    [(0, 10, False, "0"), (9, 10, False, "9"), (10, 16, False, "a"),
     (15, 16, True, "F"), (35, 36, False, "z"), (123, 10, False, "3")],
)
def test_digit_from_value(value, radix, upper, expected):
    assert digit_from_value(value, radix, upper) == expected


@pytest.mark.parametrize("radix", [0, 1, 37])
def test_digit_from_value_bad_radix(radix):
    with pytest.raises(FormatError):
        digit_from_value(5, radix, False)


def test_zero_unsigned():
    assert format_unsigned(0, DECIMAL, 32) == "0"


def test_zero_with_plus():
    options = FormatOptions(10, FormatFlag.LEADING_PLUS)
    assert format_unsigned(0, options, 8) == "+0"
    assert format_signed(0, options, 8) == "+0"


def test_unsigned_max_values():
    assert format_unsigned(255, DECIMAL, 8) == "255"
    assert format_unsigned(2**64 - 1, FormatOptions.with_radix(16), 64) == "ffffffffffffffff"


def test_signed_minimum():
    assert format_signed(-128, DECIMAL, 8) == "-128"
    assert format_signed(-(2**63), DECIMAL, 64) == "-9223372036854775808"


def test_binary():
    assert format_unsigned(5, FormatOptions.with_radix(2), 8) == "101"


def test_lowercase_by_default():
    assert format_unsigned(0xABC, FormatOptions.with_radix(16), 16) == "abc"


@pytest.mark.parametrize("value", [-32768, -1, 0, 1, 77, 32767])
@pytest.mark.parametrize("radix", [2, 8, 10, 16, 36])
def test_signed_round_trip_through_int(value, radix):
    text = format_signed(value, FormatOptions.with_radix(radix), 16)
    assert int(text, radix) == value


def test_unsigned_out_of_range():
    with pytest.raises(FormatError):
        format_unsigned(256, DECIMAL, 8)
    with pytest.raises(FormatError):
        format_unsigned(-1, DECIMAL, 8)


def test_signed_out_of_range():
    with pytest.raises(FormatError):
        format_signed(128, DECIMAL, 8)
    with pytest.raises(FormatError):
        format_signed(-129, DECIMAL, 8)


def test_unsupported_width():
    with pytest.raises(FormatError):
        format_unsigned(1, DECIMAL, 12)


def test_bad_radix_in_options():
    with pytest.raises(FormatError):
        format_signed(5, FormatOptions.with_radix(1), 8)