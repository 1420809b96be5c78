"""Formatting of fixed-width integers as text in any radix from 2 to 36."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from .number import IntType, magnitude

MIN_RADIX = 2
MAX_RADIX = 36

_LOWER_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_UPPER_DIGITS = _LOWER_DIGITS.upper()


class FormatError(ValueError):
    """Raised when a number cannot be turned into text with the given options."""


class FormatFlag(IntFlag):
    """Switches that change how numbers are written and read."""

    NONE = 0x0
    LEADING_ZERO = 0x1
    LEADING_PLUS = 0x2
    UPPER_CASE = 0x4


@dataclass(frozen=True)
class FormatOptions:
    """Radix and flags used to write or read a number."""

    radix: int = 10
    flags: FormatFlag = FormatFlag.NONE

    def __post_init__(self) -> None:
        if int(self.flags) < 0:
            raise FormatError(f"invalid format flags: {int(self.flags)}")
        object.__setattr__(self, "flags", FormatFlag(self.flags))

    @classmethod
    def with_radix(cls, radix: int) -> "FormatOptions":
        """Return options with the given radix and no flags."""
        return cls(radix, FormatFlag.NONE)

    @property
    def upper(self) -> bool:
        return bool(self.flags & FormatFlag.UPPER_CASE)

    @property
    def leading_plus(self) -> bool:
        return bool(self.flags & FormatFlag.LEADING_PLUS)

    @property
    def leading_zero(self) -> bool:
        return bool(self.flags & FormatFlag.LEADING_ZERO)


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise FormatError(f"radix must lie between {MIN_RADIX} and {MAX_RADIX}, got {radix}")


def digit_from_value(value: int, radix: int, upper: bool) -> str:
    """Return the character of the lowest digit of ``value`` in ``radix``."""
    _check_radix(radix)
    if value < 0:
        raise FormatError(f"cannot take a digit of negative value {value}")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    return digits[value % radix]


def _digits(value: int, radix: int, upper: bool) -> str:
    chars = []
    while True:
        chars.append(digit_from_value(value, radix, upper))
        value //= radix
        if value == 0:
            break
    return "".join(reversed(chars))


def _kind(bits: int, signed: bool) -> IntType:
    try:
        return IntType.of(bits, signed)
    except ValueError as error:
        raise FormatError(str(error)) from None


def format_unsigned(value: int, options: FormatOptions, bits: int) -> str:
    """Write an unsigned integer of ``bits`` width as text."""
    kind = _kind(bits, False)
    if not kind.fits(value):
        raise FormatError(f"{value} does not fit an unsigned {bits}-bit integer")
    _check_radix(options.radix)
    text = _digits(value, options.radix, options.upper)
    return "+" + text if options.leading_plus else text


def format_signed(value: int, options: FormatOptions, bits: int) -> str:
    """Write a signed integer of ``bits`` width as text."""
    kind = _kind(bits, True)
    if not kind.fits(value):
        raise FormatError(f"{value} does not fit a signed {bits}-bit integer")
    _check_radix(options.radix)
    text = _digits(magnitude(value, bits), options.radix, options.upper)
    if value < 0:
        return "-" + text
    if options.leading_plus:
        return "+" + text
    return text