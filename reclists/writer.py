"""Writes lists in their external form, wrapping long output."""

from __future__ import annotations

import io
from typing import Iterator, TextIO

from .lists import SExpr, car, cdr, is_atom, is_null

LINE_LEN = 72
LEADER = "  "
NILSYM = "()"
LEFT_PAREN = "("
RIGHT_PAREN = ")"


def _elements(p: SExpr) -> Iterator[SExpr]:
    while not is_null(p):
        yield car(p)
        p = cdr(p)


class ListWriter:
    """Writes lists to a stream, keeping track of the width used on a line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line_used = 0

    def write_list(self, p: SExpr) -> None:
        """Write the external form of p followed by a newline."""
        self._write_item(p)
        self._stream.write("\n")

    def _emit(self, text: str) -> None:
        if self._line_used + len(text) + 1 > LINE_LEN:
            self._stream.write("\n")
            self._stream.write(LEADER)
            self._line_used = len(LEADER)
        self._line_used += len(text) + 1
        self._stream.write(" ")
        self._stream.write(text)

    def _write_item(self, p: SExpr) -> None:
        if is_null(p):
            self._emit(NILSYM)
        elif is_atom(p):
            self._emit(p.name)
        else:
            self._emit(LEFT_PAREN)
            for element in _elements(p):
                self._write_item(element)
            self._emit(RIGHT_PAREN)


def format_list(p: SExpr) -> str:
    """Return the external form of p as written by a fresh writer."""
    buffer = io.StringIO()
    ListWriter(buffer).write_list(p)
    return buffer.getvalue()