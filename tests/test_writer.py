import io

from reclists.lists import Atom, cons, make_atom, null
from reclists.reader import read_list
from reclists.writer import LINE_LEN, ListWriter, format_list


def test_format_null():
    assert format_list(null()) == " ()\n"


def test_format_atom():
    assert format_list(make_atom("a")) == " a\n"


def test_format_nested():
    p = read_list("(a (b) ())")
    assert format_list(p) == " ( a ( b ) () )\n"


def test_round_trip_nested():
    text = "(alpha (beta (gamma)) () delta)"
    p = read_list(text)
    assert read_list(format_list(p)) == p


def test_long_list_wraps_within_width():
    p = null()
    for _ in range(60):
        p = cons(Atom("abcd"), p)
    out = format_list(p)
    lines = out.rstrip("\n").split("\n")
    assert len(lines) > 1
    assert all(len(line) <= LINE_LEN for line in lines)
    assert all(line.startswith("  ") for line in lines[1:])
    assert read_list(out) == p


def test_writer_writes_to_stream_in_order():
    buffer = io.StringIO()
    writer = ListWriter(buffer)
    writer.write_list(make_atom("x"))
    writer.write_list(make_atom("y"))
    assert buffer.getvalue() == format_list(make_atom("x")) + format_list(make_atom("y"))