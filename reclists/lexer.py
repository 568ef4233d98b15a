"""Tokenizer for the textual form of recursive lists."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

MAX_ATOM_LEN = 9


class LexError(ValueError):
    """Raised on text that is not a valid lexical item."""


class TokenKind(enum.Enum):
    LPAREN = "("
    RPAREN = ")"
    ATOM = "atom"
    END_OF_TEXT = "end"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


class Lexer:
    """Splits text into parentheses and atoms, with one token of push-back."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._last: Optional[Token] = None
        self._pushed_back = False

    def next_token(self) -> Token:
        """Return the next token, or the pushed-back one if there is one."""
        if self._pushed_back:
            self._pushed_back = False
            return self._last
        token = self._scan()
        self._last = token
        return token

    def unget_token(self) -> None:
        """Push back the last token so the next call returns it again."""
        if self._last is None:
            raise LexError("no token to push back")
        self._pushed_back = True

    def _scan(self) -> Token:
        text = self._text
        while self._pos < len(text) and text[self._pos].isspace():
            self._pos += 1
        if self._pos >= len(text):
            return Token(TokenKind.END_OF_TEXT)
        c = text[self._pos]
        if c == "(":
            self._pos += 1
            return Token(TokenKind.LPAREN, c)
        if c == ")":
            self._pos += 1
            return Token(TokenKind.RPAREN, c)
        start = self._pos
        end = start
        while end < len(text) and end - start < MAX_ATOM_LEN and _is_letter(text[end]):
            end += 1
        if end == start:
            raise LexError(f"Unrecognized lexical item: {c}")
        self._pos = end
        return Token(TokenKind.ATOM, text[start:end])