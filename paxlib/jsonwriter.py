"""Streaming JSON writer that turns events into compact JSON text."""

from __future__ import annotations

from typing import Iterable, TextIO

from .jsonevent import Event, EventType, LayerType
from .number import IntType
from .numformat import FormatOptions, format_signed, format_unsigned

_VALUE_TYPES = {
    EventType.STRING,
    EventType.UNSIGNED,
    EventType.INTEGER,
    EventType.BOOLEAN,
    EventType.NULL,
}
_DECIMAL = FormatOptions.with_radix(10)


class JsonWriteError(ValueError):
    """Raised when an event cannot be written at the current position."""


class JsonWriter:
    """Writes events to a text stream as compact JSON."""

    def __init__(self, stream: TextIO, depth: int = 16) -> None:
        if depth <= 0:
            raise ValueError("depth must be positive")
        self._stream = stream
        self._depth = depth
        self._stack: list[LayerType] = []
        self._comma = False

    @property
    def parent(self) -> LayerType:
        """The container the next value belongs to."""
        return self._stack[-1] if self._stack else LayerType.NONE

    def _open(self, layer: LayerType, bracket: str) -> str:
        if len(self._stack) >= self._depth:
            raise JsonWriteError(f"nesting deeper than {self._depth} levels")
        self._stack.append(layer)
        self._comma = False
        return bracket

    def _close(self, bracket: str) -> str:
        if self._stack:
            self._stack.pop()
        self._comma = True
        return bracket

    @staticmethod
    def _value_text(event: Event) -> str:
        kind = event.type
        if kind is EventType.STRING:
            return f'"{event.value}"'
        if kind is EventType.UNSIGNED:
            return format_unsigned(event.value, _DECIMAL, IntType.UWORD.bits)
        if kind is EventType.INTEGER:
            return format_signed(event.value, _DECIMAL, IntType.IWORD.bits)
        if kind is EventType.BOOLEAN:
            return "true" if event.value else "false"
        return "null"

    def _render(self, event: Event) -> str:
        kind = event.type
        parent = self.parent

        if kind is EventType.OBJECT_OPEN:
            return self._open(LayerType.OBJECT, "{")
        if kind is EventType.OBJECT_CLOSE:
            return self._close("}")
        if kind is EventType.ARRAY_OPEN:
            return self._open(LayerType.ARRAY, "[")
        if kind is EventType.ARRAY_CLOSE:
            return self._close("]")
        if kind is EventType.NAME:
            if parent is not LayerType.OBJECT:
                raise JsonWriteError("a member name needs an enclosing object")
            prefix = "," if self._comma else ""
            return f'{prefix}"{event.name}":'
        if kind in _VALUE_TYPES:
            member = ""
            if parent is LayerType.OBJECT:
                if not event.name:
                    raise JsonWriteError("a value inside an object needs a name")
                member = f'"{event.name}":'
            text = self._value_text(event)
            prefix = "," if self._comma else ""
            self._comma = True
            return prefix + member + text
        raise JsonWriteError(f"cannot write event of type {kind.name}")

    def write(self, event: Event) -> None:
        """Write one event and flush the stream."""
        self._stream.write(self._render(event))
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def write_all(self, events: Iterable[Event]) -> None:
        """Write every event in order."""
        for event in events:
            self.write(event)