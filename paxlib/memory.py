"""Byte-level operations on mutable buffers, grouped in elements of ``stride`` bytes."""

from __future__ import annotations


def _span(amount: int, stride: int) -> int:
    return amount * stride if amount > 0 and stride > 0 else 0


def _require(buffer, end: int) -> None:
    if end > len(buffer):
        raise IndexError(f"range ends at {end}, buffer holds {len(buffer)} bytes")


def _elements(data, length: int, stride: int) -> list[bytes]:
    return [bytes(data[start:start + stride]) for start in range(0, length, stride)]


def zero(buffer, amount: int, stride: int):
    """Set the first ``amount`` elements of ``buffer`` to zero bytes."""
    length = _span(amount, stride)
    if length:
        _require(buffer, length)
        buffer[:length] = bytes(length)
    return buffer


def flip(buffer, amount: int, stride: int):
    """Reverse the order of the first ``amount`` elements in place."""
    length = _span(amount, stride)
    if length:
        _require(buffer, length)
        buffer[:length] = b"".join(reversed(_elements(buffer, length, stride)))
    return buffer


def copy(target, source, amount: int, stride: int):
    """Copy ``amount`` elements from ``source`` into ``target``."""
    length = _span(amount, stride)
    if length:
        _require(target, length)
        _require(source, length)
        target[:length] = bytes(source[:length])
    return target


def copy_flipped(target, source, amount: int, stride: int):
    """Copy ``amount`` elements from ``source`` into ``target`` in reverse order."""
    length = _span(amount, stride)
    if length:
        _require(target, length)
        _require(source, length)
        target[:length] = b"".join(reversed(_elements(source, length, stride)))
    return target


def copy_back(buffer, start: int, amount: int, offset: int, stride: int) -> int:
    """Move elements at ``start`` back by ``offset`` elements; return the new start."""
    if amount <= 0 or stride <= 0 or offset <= 0:
        return start
    length = amount * stride
    dest = start - offset * stride
    if dest < 0:
        raise IndexError("destination lies before the buffer")
    _require(buffer, start + length)
    buffer[dest:dest + length] = bytes(buffer[start:start + length])
    return dest


def copy_forward(buffer, start: int, amount: int, offset: int, stride: int) -> int:
    """Move elements at ``start`` forward by ``offset`` elements; return the new start."""
    if amount <= 0 or stride <= 0 or offset <= 0:
        return start
    length = amount * stride
    dest = start + offset * stride
    _require(buffer, dest + length)
    buffer[dest:dest + length] = bytes(buffer[start:start + length])
    return dest


def is_equal(left, right, amount: int, stride: int) -> bool:
    """Tell whether the first ``amount`` elements of both buffers match."""
    length = _span(amount, stride)
    if not length:
        return False
    _require(left, length)
    _require(right, length)
    return bytes(left[:length]) == bytes(right[:length])