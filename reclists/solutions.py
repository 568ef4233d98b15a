"""Classic recursive-list operations built on the list primitives."""

from __future__ import annotations

from typing import Iterable, Iterator

from .lists import SExpr, car, cdr, cons, eq, is_atom, is_null, null


def _elements(p: SExpr) -> Iterator[SExpr]:
    """Yield the top-level elements of list p."""
    while not is_null(p):
        yield car(p)
        p = cdr(p)


def _build(items: Iterable[SExpr], tail: SExpr = None) -> SExpr:
    """Return the list of items placed in front of tail."""
    result = tail
    for item in reversed(list(items)):
        result = cons(item, result)
    return result


def _atoms(p: SExpr) -> Iterator[SExpr]:
    """Yield every atom of list p, at any depth, from left to right."""
    for element in _elements(p):
        if is_atom(element):
            yield element
        else:
            yield from _atoms(element)


def num_nodes_at_top_level(p: SExpr) -> int:
    """Return the number of nodes at the top level of p; an atom counts as one."""
    if is_atom(p):
        return 1
    return sum(1 for _ in _elements(p))


def append(p: SExpr, q: SExpr) -> SExpr:
    """Return the top-level elements of p followed by list q."""
    return _build(_elements(p), q)


def reverse_top_level(p: SExpr) -> SExpr:
    """Return p with its top-level elements in reverse order."""
    return _build(reversed(list(_elements(p))))


def is_lat(p: SExpr) -> bool:
    """Return True if every top-level element of p is an atom."""
    return all(is_atom(element) for element in _elements(p))


def member(p: SExpr, q: SExpr) -> bool:
    """Return True if atom p occurs anywhere in q."""
    for element in _elements(q):
        if is_atom(element):
            if eq(p, element):
                return True
        elif member(p, element):
            return True
    return False


def last(p: SExpr) -> SExpr:
    """Return the last top-level element of a non-empty list p."""
    while not is_null(cdr(p)):
        p = cdr(p)
    return car(p)


def list_pair(p: SExpr, q: SExpr) -> SExpr:
    """Pair corresponding elements of p and q, stopping at the shorter list."""
    pairs = []
    while not (is_null(p) or is_null(q)):
        pairs.append(cons(car(p), cons(car(q), null())))
        p, q = cdr(p), cdr(q)
    return _build(pairs)


def firsts(p: SExpr) -> SExpr:
    """Return the first element of each sublist of p.

    Empty sublists are skipped; an atom element ends the result.
    """
    result = []
    for element in _elements(p):
        if is_null(element):
            continue
        if is_atom(element):
            break
        result.append(car(element))
    return _build(result)


def flat(p: SExpr) -> SExpr:
    """Return the atoms of p, at any depth, as one flat list."""
    return _build(_atoms(p))


def two_the_same(p: SExpr, q: SExpr) -> bool:
    """Return True if some atom of p, at any depth, also occurs in q."""
    return any(member(atom, q) for atom in _atoms(p))


def equal(p: SExpr, q: SExpr) -> bool:
    """Return True if p and q have the same shape and the same atoms."""
    while True:
        if is_atom(p) and is_atom(q):
            return eq(p, q)
        if is_atom(p) != is_atom(q):
            return False
        if is_null(p) and is_null(q):
            return True
        if is_null(p) or is_null(q):
            return False
        if not equal(car(p), car(q)):
            return False
        p, q = cdr(p), cdr(q)


def total_reverse(p: SExpr) -> SExpr:
    """Return p with the order reversed at every level."""
    if is_atom(p) or is_null(p):
        return p
    return _build(total_reverse(element) for element in reversed(list(_elements(p))))


def shape(p: SExpr) -> SExpr:
    """Return the parenthesis structure of p, with each atom replaced by ()."""
    return _build(
        null() if is_atom(element) else shape(element) for element in _elements(p)
    )


def intersection(p: SExpr, q: SExpr) -> SExpr:
    """Return the elements of p that also occur in q, in the order of p."""
    return _build(element for element in _elements(p) if member(element, q))


def list_union(p: SExpr, q: SExpr) -> SExpr:
    """Return the elements of p not found in q, followed by q."""
    return _build((element for element in _elements(p) if not member(element, q)), q)


def substitute(old_atom: SExpr, new_atom: SExpr, p: SExpr) -> SExpr:
    """Return a copy of p with every occurrence of old_atom replaced by new_atom."""
    return _build(
        (new_atom if eq(element, old_atom) else element)
        if is_atom(element)
        else substitute(old_atom, new_atom, element)
        for element in _elements(p)
    )


def remove(p: SExpr, q: SExpr) -> SExpr:
    """Return flat list p with every occurrence of atom q removed."""
    return _build(element for element in _elements(p) if not eq(element, q))


def contains_equal(p: SExpr, q: SExpr) -> bool:
    """Return True if some top-level element of q is structurally equal to p."""
    return any(equal(p, element) for element in _elements(q))


def subset(p: SExpr, q: SExpr) -> bool:
    """Return True if every top-level element of p has an equal element in q."""
    return all(contains_equal(element, q) for element in _elements(p))