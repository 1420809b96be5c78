"""Conversion between the host byte order and network (big-endian) order."""

from __future__ import annotations

import struct
import sys
from enum import Enum

from .memory import flip

_INT_SIZES = (2, 4, 8)
_FLOAT_FORMATS = {4: ("f", "I"), 8: ("d", "Q")}


class ByteOrder(Enum):
    """Host byte order relative to network order."""

    NONE = 0
    NETWORK = 1
    REVERSE = 2


def native_byte_order() -> ByteOrder:
    """Return the byte order of the running host."""
    if sys.byteorder == "big":
        return ByteOrder.NETWORK
    if sys.byteorder == "little":
        return ByteOrder.REVERSE
    return ByteOrder.NONE


def _swap_in_place(data, amount: int, stride: int):
    if native_byte_order() is ByteOrder.REVERSE:
        flip(data, amount * stride, 1)
    return data


def memory_net_from_local(data, amount: int, stride: int):
    """Reorder ``amount * stride`` bytes of host order into network order, in place."""
    return _swap_in_place(data, amount, stride)


def memory_local_from_net(data, amount: int, stride: int):
    """Reorder ``amount * stride`` bytes of network order into host order, in place."""
    return _swap_in_place(data, amount, stride)


def _check_int_size(size: int) -> None:
    if size not in _INT_SIZES:
        raise ValueError(f"unsupported integer size: {size}")


def net_from_local(value: int, size: int, signed: bool) -> int:
    """Return the unsigned integer whose host representation is ``value`` in network order."""
    _check_int_size(size)
    raw = value.to_bytes(size, "big", signed=signed)
    return int.from_bytes(raw, sys.byteorder, signed=False)


def local_from_net(value: int, size: int, signed: bool) -> int:
    """Return the host value held by the network-ordered unsigned integer ``value``."""
    _check_int_size(size)
    raw = value.to_bytes(size, sys.byteorder, signed=False)
    return int.from_bytes(raw, "big", signed=signed)


def _float_formats(size: int) -> tuple[str, str]:
    try:
        return _FLOAT_FORMATS[size]
    except KeyError:
        raise ValueError(f"unsupported float size: {size}") from None


def float_net_from_local(value: float, size: int) -> int:
    """Return the unsigned bits whose host representation is ``value`` in network order."""
    floating, unsigned = _float_formats(size)
    (bits,) = struct.unpack("=" + unsigned, struct.pack(">" + floating, value))
    return bits


def float_local_from_net(bits: int, size: int) -> float:
    """Return the float held by network-ordered unsigned ``bits``."""
    floating, unsigned = _float_formats(size)
    (value,) = struct.unpack(">" + floating, struct.pack("=" + unsigned, bits))
    return value