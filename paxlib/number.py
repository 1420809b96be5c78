"""Fixed-width integer descriptions and sign helpers."""

from __future__ import annotations

import math
from enum import Enum

WORD_BITS = 64
"""Width in bits of the machine word assumed by the word-sized types."""


class IntType(Enum):
    """Fixed-width integer types with their sizes and value limits."""

    I8 = (8, True)
    I16 = (16, True)
    I32 = (32, True)
    I64 = (64, True)
    U8 = (8, False)
    U16 = (16, False)
    U32 = (32, False)
    U64 = (64, False)
    IWORD = (WORD_BITS, True)
    UWORD = (WORD_BITS, False)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    @classmethod
    def of(cls, bits: int, signed: bool) -> "IntType":
        """Return the type with the given width and signedness."""
        try:
            return cls((bits, signed))
        except ValueError:
            raise ValueError(f"unsupported integer width: {bits}") from None

    @property
    def size(self) -> int:
        """Width in bytes."""
        return self.bits // 8

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def fits(self, value: int) -> bool:
        """Tell whether ``value`` is representable by this type."""
        return self.min <= value <= self.max


def magnitude(value: int, bits: int) -> int:
    """Return the unsigned magnitude of a signed integer of ``bits`` width.

    The most negative value maps to ``2 ** (bits - 1)``, which still fits
    the unsigned type of the same width.
    """
    kind = IntType.of(bits, True)
    if not kind.fits(value):
        raise ValueError(f"{value} does not fit a signed {bits}-bit integer")
    return -value if value < 0 else value


def float_magnitude(value: float) -> float:
    """Return ``value`` with its sign bit cleared."""
    return math.copysign(value, 1.0)


def direction(value: float) -> int:
    """Return +1 for positive, -1 for negative and 0 otherwise."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp(value, low, high):
    """Limit ``value`` to the range ``[low, high]``."""
    return max(low, min(value, high))