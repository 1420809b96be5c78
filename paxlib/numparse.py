"""Reading fixed-width integers from text in any radix from 2 to 36."""

from __future__ import annotations

from .number import IntType
from .numformat import MAX_RADIX, MIN_RADIX, FormatOptions

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_VALUES = {char: value for value, char in enumerate(_DIGITS)}


class ParseError(ValueError):
    """Raised when text is not a valid number for the given options and width."""


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ParseError(f"radix must lie between {MIN_RADIX} and {MAX_RADIX}, got {radix}")


def value_from_digit(char: str, radix: int) -> int:
    """Return the value of the digit ``char`` in ``radix``, either letter case."""
    _check_radix(radix)
    value = _VALUES.get(char.lower()) if len(char) == 1 else None
    if value is None or value >= radix:
        raise ParseError(f"{char!r} is not a digit in radix {radix}")
    return value


def _kind(bits: int, signed: bool) -> IntType:
    try:
        return IntType.of(bits, signed)
    except ValueError as error:
        raise ParseError(str(error)) from None


def _parse(text: str, options: FormatOptions, kind: IntType) -> int:
    _check_radix(options.radix)
    if not text:
        raise ParseError("empty text")

    negative = False
    digits = text
    if text[0] == "+":
        if not options.leading_plus:
            raise ParseError(f"leading plus not allowed: {text!r}")
        digits = text[1:]
    elif text[0] == "-" and kind.signed:
        negative = True
        digits = text[1:]

    if not digits:
        raise ParseError(f"no digits in {text!r}")
    if not options.leading_zero and len(digits) > 1 and digits[0] == "0":
        raise ParseError(f"leading zero not allowed: {text!r}")

    result = 0
    for char in digits:
        digit = value_from_digit(char, options.radix)
        result = result * options.radix + (-digit if negative else digit)
        if not kind.fits(result):
            raise ParseError(f"{text!r} overflows {kind.name}")
    return result


def parse_unsigned(text: str, options: FormatOptions, bits: int) -> int:
    """Read an unsigned integer of ``bits`` width from ``text``."""
    return _parse(text, options, _kind(bits, False))


def parse_signed(text: str, options: FormatOptions, bits: int) -> int:
    """Read a signed integer of ``bits`` width from ``text``."""
    return _parse(text, options, _kind(bits, True))