"""Splitting JSON text into tokens: brackets, separators, strings, numbers and words."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, Optional

from .numformat import FormatFlag, FormatOptions
from .number import IntType
from .numparse import ParseError, parse_signed, parse_unsigned

_SPACES = " \t\n\r\v\f"
_SYMBOLS = "{}[]:,"
_NUMBER_START = "+-0123456789"
_NUMBER_CHARS = "+-0123456789.eE"
_WORD_START = "tfn"
_NUMBER_OPTIONS = FormatOptions(10, FormatFlag.LEADING_PLUS)

UNKNOWN_SYMBOL = "Unkown symbol"
INVALID_NUMBER = "Invalid number"
NOT_IMPLEMENTED = "Not implemented yet"
INVALID_KEY_WORD = "Invalid key word"
UNTERMINATED_STRING = 'Invalid string, expected closing {"}'


class TokenType(Enum):
    """Kinds of JSON tokens."""

    NONE = auto()
    ERROR = auto()
    OBJECT_OPEN = auto()
    OBJECT_CLOSE = auto()
    ARRAY_OPEN = auto()
    ARRAY_CLOSE = auto()
    COLON = auto()
    COMMA = auto()
    STRING = auto()
    UNSIGNED = auto()
    INTEGER = auto()
    FLOATING = auto()
    BOOLEAN = auto()
    NULL = auto()
    COUNT = auto()


_SYMBOL_TYPES = {
    "{": TokenType.OBJECT_OPEN,
    "}": TokenType.OBJECT_CLOSE,
    "[": TokenType.ARRAY_OPEN,
    "]": TokenType.ARRAY_CLOSE,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}


@dataclass(frozen=True)
class Token:
    """One token of JSON text.

    ``length`` is the number of characters the token covers in the input.
    ``COUNT`` marks the end of the input. Error tokens carry ``subject``
    and ``message`` instead of a value.
    """

    type: TokenType
    length: int = 0
    value: Any = None
    subject: str = ""
    message: str = ""

    @classmethod
    def _error(cls, subject: str, message: str) -> "Token":
        return cls(TokenType.ERROR, len(subject), subject=subject, message=message)


class Lexer:
    """Reads tokens from JSON text one at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    @property
    def position(self) -> int:
        """Index of the first character not yet consumed."""
        return self._position

    def _char(self, offset: int = 0) -> str:
        index = self._position + offset
        return self._text[index] if index < len(self._text) else ""

    def skip_spaces(self) -> str:
        """Consume white space and return the next character, empty at the end."""
        while self._char() and self._char() in _SPACES:
            self._position += 1
        return self._char()

    def _scan(self) -> Optional[Token]:
        char = self.skip_spaces()
        if not char:
            return Token(TokenType.COUNT)
        if char in _SYMBOLS:
            return Token(_SYMBOL_TYPES[char], 1)
        if char == '"':
            return self._scan_string()
        if char in _NUMBER_START:
            return self._scan_number()
        if char in _WORD_START:
            return self._scan_word()
        return None

    def _scan_string(self) -> Token:
        end = self._text.find('"', self._position + 1)
        if end < 0:
            return Token._error("", UNTERMINATED_STRING)
        content = self._text[self._position + 1:end]
        return Token(TokenType.STRING, len(content) + 2, value=content)

    def _scan_number(self) -> Token:
        offset = 0
        kind = TokenType.NONE
        while (char := self._char(offset)) and char in _NUMBER_CHARS:
            if char in ".eE":
                kind = TokenType.FLOATING
            elif kind is TokenType.NONE:
                kind = TokenType.INTEGER if char == "-" else TokenType.UNSIGNED
            offset += 1
        text = self._text[self._position:self._position + offset]

        if kind is TokenType.FLOATING:
            return Token._error(text, NOT_IMPLEMENTED)
        try:
            if kind is TokenType.UNSIGNED:
                value = parse_unsigned(text, _NUMBER_OPTIONS, IntType.UWORD.bits)
            else:
                value = parse_signed(text, _NUMBER_OPTIONS, IntType.IWORD.bits)
        except ParseError:
            return Token._error(text, INVALID_NUMBER)
        return Token(kind, len(text), value=value)

    def _scan_word(self) -> Token:
        offset = 1
        while (char := self._char(offset)) and (char.isascii() and char.isalnum()):
            offset += 1
        word = self._text[self._position:self._position + offset]
        if word == "true":
            return Token(TokenType.BOOLEAN, len(word), value=True)
        if word == "false":
            return Token(TokenType.BOOLEAN, len(word), value=False)
        if word == "null":
            return Token(TokenType.NULL, len(word))
        return Token._error(word, INVALID_KEY_WORD)

    def peek(self) -> Token:
        """Return the next token without consuming it; white space is consumed."""
        token = self._scan()
        if token is None:
            return Token._error(self._char(), UNKNOWN_SYMBOL)
        return token

    def next(self) -> Token:
        """Return the next token and consume it.

        An unknown character yields an error token and stays in the input.
        """
        token = self._scan()
        if token is None:
            return Token._error(self._char(), UNKNOWN_SYMBOL)
        self._position += token.length
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to the end of the input or up to the first error, inclusive."""
        while True:
            token = self.next()
            if token.type is TokenType.COUNT:
                return
            yield token
            if token.type is TokenType.ERROR:
                return