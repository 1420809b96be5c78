"""A bump allocator handing out zeroed views of one fixed block of bytes."""

from __future__ import annotations


class ArenaError(MemoryError):
    """Raised when an arena has no room left for a reservation."""


class Arena:
    """Fixed-size block of bytes handed out front to back."""

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise ValueError("arena length must be positive")
        self._memory = bytearray(length)
        self._offset = 0

    @property
    def length(self) -> int:
        return len(self._memory)

    @property
    def offset(self) -> int:
        """Number of bytes in use, up to the end of the last reservation."""
        return self._offset

    @property
    def memory(self) -> memoryview:
        return memoryview(self._memory)

    def reserve(self, amount: int, stride: int) -> memoryview:
        """Reserve ``amount`` zeroed elements of ``stride`` bytes, aligned to ``stride``."""
        if amount <= 0 or stride <= 0:
            raise ValueError("amount and stride must be positive")
        start = self.align_forward(stride)
        stop = start + amount * stride
        if stop > self.length:
            raise ArenaError(
                f"cannot reserve {amount * stride} bytes: "
                f"{self.length - self._offset} of {self.length} left"
            )
        self._memory[start:stop] = bytes(stop - start)
        self._offset = stop
        return memoryview(self._memory)[start:stop]

    def copy(self, data, stride: int) -> memoryview:
        """Reserve room for ``data`` and copy it in."""
        if stride <= 0:
            raise ValueError("stride must be positive")
        if not data:
            raise ValueError("nothing to copy")
        amount, rest = divmod(len(data), stride)
        if rest:
            raise ValueError("data length is not a multiple of stride")
        view = self.reserve(amount, stride)
        view[:] = bytes(data)
        return view

    def release(self, view) -> bool:
        """Check that ``view`` came from this arena; single reservations are never given back.

        Returns ``False`` for views of this arena and raises ``ValueError``
        for anything else.
        """
        owner = getattr(view, "obj", None)
        if owner is not self._memory:
            raise ValueError("view was not reserved from this arena")
        return False

    def clear(self) -> None:
        """Give back every reservation at once."""
        self._offset = 0

    def rewind(self, offset: int) -> None:
        """Move the offset back to a value saved earlier."""
        if offset < 0 or offset >= self.length:
            raise ValueError(f"offset {offset} outside arena of {self.length} bytes")
        self._offset = offset

    def align_forward(self, align: int) -> int:
        """Return the current offset rounded up to a multiple of ``align``."""
        if align <= 0:
            return self._offset
        rest = self._offset % align
        return self._offset + align - rest if rest else self._offset