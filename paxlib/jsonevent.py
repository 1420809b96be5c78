"""Events produced by the streaming JSON reader and consumed by the writer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from .number import IntType


class LayerType(Enum):
    """Kind of container a JSON value is nested in."""

    NONE = auto()
    OBJECT = auto()
    ARRAY = auto()


class EventType(Enum):
    """Kinds of JSON events."""

    NONE = auto()
    ERROR = auto()
    OBJECT_OPEN = auto()
    OBJECT_CLOSE = auto()
    ARRAY_OPEN = auto()
    ARRAY_CLOSE = auto()
    NAME = auto()
    STRING = auto()
    UNSIGNED = auto()
    INTEGER = auto()
    FLOATING = auto()
    BOOLEAN = auto()
    NULL = auto()
    COUNT = auto()


@dataclass(frozen=True)
class Event:
    """One step of a JSON document: a bracket, a member name or a value.

    ``name`` is the member name a value belongs to, empty inside arrays.
    Error events carry ``subject`` and ``message`` instead of a value.
    """

    type: EventType
    name: str = ""
    value: Any = None
    subject: str = ""
    message: str = ""

    @classmethod
    def error(cls, subject: str, message: str) -> "Event":
        return cls(EventType.ERROR, subject=subject, message=message)

    @classmethod
    def object_open(cls) -> "Event":
        return cls(EventType.OBJECT_OPEN)

    @classmethod
    def object_close(cls) -> "Event":
        return cls(EventType.OBJECT_CLOSE)

    @classmethod
    def array_open(cls) -> "Event":
        return cls(EventType.ARRAY_OPEN)

    @classmethod
    def array_close(cls) -> "Event":
        return cls(EventType.ARRAY_CLOSE)

    @classmethod
    def named(cls, name: str) -> "Event":
        """Name of the member whose value is an object or an array."""
        return cls(EventType.NAME, name=name)

    @classmethod
    def string(cls, value: str, name: str = "") -> "Event":
        return cls(EventType.STRING, name=name, value=value)

    @classmethod
    def unsigned(cls, value: int, name: str = "") -> "Event":
        if not IntType.UWORD.fits(value):
            raise ValueError(f"{value} does not fit an unsigned word")
        return cls(EventType.UNSIGNED, name=name, value=value)

    @classmethod
    def integer(cls, value: int, name: str = "") -> "Event":
        if not IntType.IWORD.fits(value):
            raise ValueError(f"{value} does not fit a signed word")
        return cls(EventType.INTEGER, name=name, value=value)

    @classmethod
    def floating(cls, value: float, name: str = "") -> "Event":
        return cls(EventType.FLOATING, name=name, value=float(value))

    @classmethod
    def boolean(cls, value: bool, name: str = "") -> "Event":
        return cls(EventType.BOOLEAN, name=name, value=bool(value))

    @classmethod
    def null(cls, name: str = "") -> "Event":
        return cls(EventType.NULL, name=name)