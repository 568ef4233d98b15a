"""Recursive lists built from atoms and cons cells, with the basic primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


class ListError(ValueError):
    """Raised when a list primitive is applied to an argument it cannot take."""


@dataclass(frozen=True)
class Atom:
    """A named atom."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Cons:
    """A list cell holding a first element and the rest of the list."""

    first: "SExpr"
    rest: Optional["Cons"]


SExpr = Union[Atom, Cons, None]

# The empty list, written "()".
EMPTY: SExpr = None


def null() -> SExpr:
    """Return the empty list, ()."""
    return EMPTY


def is_null(p: SExpr) -> bool:
    """Return True if p is the empty list."""
    return p is EMPTY


def is_atom(p: SExpr) -> bool:
    """Return True if p is an atom."""
    return isinstance(p, Atom)


def eq(p: SExpr, q: SExpr) -> bool:
    """Return True if p and q are both atoms with the same name."""
    return is_atom(p) and is_atom(q) and p.name == q.name


def car(p: SExpr) -> SExpr:
    """Return the first element of list p."""
    if is_null(p) or is_atom(p):
        raise ListError(
            "car has been called either with an empty list or an atom"
        )
    return p.first


def cdr(p: SExpr) -> SExpr:
    """Return the remainder of list p."""
    if is_null(p) or is_atom(p):
        raise ListError(
            "cdr has been called either with an empty list or an atom"
        )
    return p.rest


def cons(p: SExpr, q: SExpr) -> Cons:
    """Insert p as the first element of list q."""
    if is_atom(q):
        raise ListError("cons onto an atom")
    return Cons(p, q)


def make_atom(name: str) -> Atom:
    """Return an atom with the given name."""
    return Atom(name)