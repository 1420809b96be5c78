"""Streaming JSON reader that turns tokens into member-aware events."""

from __future__ import annotations

from typing import Iterator

from .jsonevent import Event, EventType, LayerType
from .jsontoken import Lexer, TokenType


class JsonDepthError(ValueError):
    """Raised when containers nest deeper than the reader allows."""


class JsonReader:
    """Reads events from JSON text, tracking member names and nesting."""

    def __init__(self, text: str, depth: int = 16) -> None:
        if depth <= 0:
            raise ValueError("depth must be positive")
        self._lexer = Lexer(text)
        self._depth = depth
        self._stack: list[LayerType] = []
        self._name = ""
        self._colon = False

    @property
    def parent(self) -> LayerType:
        """The container the next value belongs to."""
        return self._stack[-1] if self._stack else LayerType.NONE

    def _push(self, layer: LayerType) -> None:
        if len(self._stack) >= self._depth:
            raise JsonDepthError(f"nesting deeper than {self._depth} levels")
        self._stack.append(layer)

    def _pop(self) -> None:
        if self._stack:
            self._stack.pop()

    def _open(self, layer: LayerType) -> None:
        self._push(layer)
        self._name = ""
        self._colon = False

    def _close(self) -> None:
        self._pop()
        self._name = ""
        self._colon = False

    def next(self) -> Event:
        """Return the next event; an event of type ``COUNT`` marks the end."""
        while True:
            parent = self.parent
            token = self._lexer.next()
            kind = token.type

            if kind is TokenType.COUNT:
                return Event(EventType.COUNT)
            if kind is TokenType.ERROR:
                return Event.error(token.subject, token.message)
            if kind is TokenType.OBJECT_OPEN:
                self._open(LayerType.OBJECT)
                return Event.object_open()
            if kind is TokenType.OBJECT_CLOSE:
                self._close()
                return Event.object_close()
            if kind is TokenType.ARRAY_OPEN:
                self._open(LayerType.ARRAY)
                return Event.array_open()
            if kind is TokenType.ARRAY_CLOSE:
                self._close()
                return Event.array_close()
            if kind is TokenType.COLON:
                self._colon = True
                if parent is LayerType.OBJECT and self._lexer.peek().type in (
                    TokenType.OBJECT_OPEN,
                    TokenType.ARRAY_OPEN,
                ):
                    return Event.named(self._name)
                continue
            if kind is TokenType.COMMA:
                self._name = ""
                self._colon = False
                continue

            colon, self._colon = self._colon, False
            if kind is TokenType.STRING:
                if parent is not LayerType.OBJECT or colon:
                    return Event.string(token.value, self._name)
                self._name = token.value
                continue
            if kind is TokenType.UNSIGNED:
                return Event.unsigned(token.value, self._name)
            if kind is TokenType.INTEGER:
                return Event.integer(token.value, self._name)
            if kind is TokenType.FLOATING:
                return Event.floating(token.value, self._name)
            if kind is TokenType.BOOLEAN:
                return Event.boolean(token.value, self._name)
            if kind is TokenType.NULL:
                return Event.null(self._name)

    def __iter__(self) -> Iterator[Event]:
        """Yield events up to the end of the input or up to the first error, inclusive."""
        while True:
            event = self.next()
            if event.type is EventType.COUNT:
                return
            yield event
            if event.type is EventType.ERROR:
                return