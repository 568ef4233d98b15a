"""Recursive-descent reader for lists written as text.

Grammar:
    <list>      --> atom | () | ( <more-list> )
    <more-list> --> <list> | <list> <more-list>
"""

from __future__ import annotations

from .lexer import Lexer, TokenKind
from .lists import SExpr, cons, make_atom, null


class ParseError(ValueError):
    """Raised when the text does not form a list."""


class Reader:
    """Reads successive lists from a piece of text."""

    def __init__(self, text: str) -> None:
        self._lexer = Lexer(text)

    def read_list(self) -> SExpr:
        """Read the next list; the empty list is returned at end of text."""
        token = self._lexer.next_token()
        if token.kind is TokenKind.ATOM:
            return make_atom(token.text)
        if token.kind is TokenKind.LPAREN:
            return self._read_rest()
        if token.kind is TokenKind.END_OF_TEXT:
            return null()
        raise ParseError(f"Did not expect: {token.text}")

    def _read_rest(self) -> SExpr:
        items = []
        while True:
            token = self._lexer.next_token()
            if token.kind is TokenKind.RPAREN:
                break
            if token.kind is TokenKind.END_OF_TEXT:
                raise ParseError("unexpected end of text inside a list")
            self._lexer.unget_token()
            items.append(self.read_list())
        result = null()
        for item in reversed(items):
            result = cons(item, result)
        return result


def read_list(text: str) -> SExpr:
    """Read the first list in text."""
    return Reader(text).read_list()