import pytest

from reclists.lists import (
    Atom,
    Cons,
    ListError,
    car,
    cdr,
    cons,
    eq,
    is_atom,
    is_null,
    make_atom,
    null,
)


def test_null_is_null():
    assert is_null(null()) is True
    assert is_atom(null()) is False


def test_make_atom_is_atom():
    a = make_atom("abc")
    assert is_atom(a) is True
    assert is_null(a) is False
    assert a.name == "abc"


def test_cons_car_cdr_round_trip():
    a = make_atom("a")
    rest = cons(make_atom("b"), null())
    lst = cons(a, rest)
    assert car(lst) == a
    assert cdr(lst) == rest
    assert is_atom(lst) is False
    assert is_null(lst) is False


def test_cons_onto_atom_raises():
    with pytest.raises(ListError):
        cons(make_atom("a"), make_atom("b"))


@pytest.mark.parametrize("bad", [None, Atom("x")])
def test_car_rejects_null_and_atom(bad):
    with pytest.raises(ListError):
        car(bad)


@pytest.mark.parametrize("bad", [None, Atom("x")])
def test_cdr_rejects_null_and_atom(bad):
    with pytest.raises(ListError):
        cdr(bad)


def test_eq_same_atoms():
    assert eq(make_atom("abc"), make_atom("abc")) is True


def test_eq_different_atoms():
    assert eq(make_atom("abc"), make_atom("abd")) is False


def test_eq_non_atoms_false():
    lst = cons(make_atom("a"), null())
    assert eq(lst, lst) is False
    assert eq(null(), null()) is False
    assert eq(make_atom("a"), lst) is False


def test_cons_builds_cell():
    lst = cons(null(), null())
    assert lst == Cons(None, None)
    assert is_null(car(lst))
    assert is_null(cdr(lst))