"""Interactive driver that reads lists and shows each list operation at work."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TextIO

from .lexer import LexError
from .lists import ListError
from .reader import ParseError, Reader
from .solutions import (
    equal,
    firsts,
    flat,
    intersection,
    is_lat,
    last,
    list_pair,
    list_union,
    member,
    num_nodes_at_top_level,
    remove,
    shape,
    subset,
    substitute,
    total_reverse,
    two_the_same,
)
from .writer import ListWriter

ECHO = "Echoing the list that you entered below.\n"


@dataclass(frozen=True)
class _Step:
    prompt: str
    arity: int
    label: str
    operation: Callable[..., object]
    writes_list: bool = True


_STEPS = (
    _Step(
        "Enter a list: ",
        1,
        "The number of nodes at the top level of the input list is: ",
        num_nodes_at_top_level,
        writes_list=False,
    ),
    _Step("Enter a list: ", 1, "is_lat is: ", is_lat, writes_list=False),
    _Step("Enter an atom then a list: ", 2, "member is: ", member, writes_list=False),
    _Step("Enter a list: ", 1, "last is: ", last),
    _Step("Enter two lists of atoms of SAME length: ", 2, "list_pair is: ", list_pair),
    _Step("Enter a list whose elements are lists of atoms: ", 1, "firsts is: ", firsts),
    _Step("Enter a list: ", 1, "flat is: ", flat),
    _Step("Enter two lists: ", 2, "two_the_same is: ", two_the_same, writes_list=False),
    _Step("Enter two recursive lists: ", 2, "equal is: ", equal, writes_list=False),
    _Step("Enter a recursive list: ", 1, "total_reverse is: ", total_reverse),
    _Step("Enter a list (not an atom): ", 1, "shape is: ", shape),
    _Step("Enter two lists of DISTINCT atoms: ", 2, "intersection is: ", intersection),
    _Step("Enter two lists of DISTINCT atoms: ", 2, "list_union is: ", list_union),
    _Step("Enter OLD atom, NEW atom, then a LIST: ", 3, "substitute is: ", substitute),
    _Step("Enter a LIST of atoms, then an ATOM: ", 2, "remove is: ", remove),
    _Step("Enter two lists: ", 2, "subset is: ", subset, writes_list=False),
)


def _run_step(step: _Step, reader: Reader, writer: ListWriter, out: TextIO) -> None:
    out.write(step.prompt)
    args = [reader.read_list() for _ in range(step.arity)]
    out.write(ECHO)
    for arg in args:
        writer.write_list(arg)
    result = step.operation(*args)
    out.write(step.label)
    if step.writes_list:
        writer.write_list(result)
        out.write("\n")
    else:
        out.write(f"{int(result)}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lists from standard input and print the result of each operation."""
    parser = argparse.ArgumentParser(
        prog="reclists",
        description="Read recursive lists from standard input and apply list operations.",
    )
    parser.parse_args(argv)
    out = sys.stdout
    writer = ListWriter(out)
    try:
        reader = Reader(sys.stdin.read())
        for step in _STEPS:
            _run_step(step, reader, writer, out)
    except (LexError, ParseError, ListError) as error:
        out.write(f"\nERROR -- {error}\n")
        return 1
    out.write("\nDone.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())