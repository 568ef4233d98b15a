# reclists

This package works with recursive lists of atoms. It reads them from their
parenthesised text form and writes them back out. It also provides a set
of classic recursive operations on them.

An atom is a run of ASCII letters. A run longer than nine letters is split
into atoms of at most nine letters. A list is `()`, an atom, or a
parenthesised sequence of lists, such as `(a (b c) () d)`. Whitespace,
including newlines, separates items.

## Install

    pip install .

## Command line

    reclists

The command reads all of standard input. It then goes through sixteen
steps in a fixed order. For each step it prints a prompt, reads the lists
the step needs, echoes them and prints the result of one operation:

- the number of top-level nodes
- `is_lat`
- `member`
- `last`
- `list_pair`
- `firsts`
- `flat`
- `two_the_same`
- `equal`
- `total_reverse`
- `shape`
- `intersection`
- `list_union`
- `substitute`
- `remove`
- `subset`

True and false results are printed as `1` and `0`. Once the input runs
out, each further list read is the empty list `()`.

A whole session can be piped in from a file:

    reclists < input.txt

If the input holds a character that is neither a letter, a parenthesis
nor whitespace, the command prints a line starting with `ERROR --` and
exits with status 1. It does the same if a list is left unclosed, or if
an operation is given a list it cannot take. The only option is `--help`.

## Library

```python
from reclists.reader import read_list
from reclists.writer import format_list
from reclists.solutions import flat, total_reverse, substitute

p = read_list("(a (b c) (d (e)))")
print(format_list(flat(p)), end="")           #  ( a b c d e )
print(format_list(total_reverse(p)), end="")  #  ( ( ( e ) d ) ( c b ) a )

old = read_list("b")
new = read_list("z")
print(format_list(substitute(old, new, p)), end="")
```

### `reclists.lists`

This module holds the building blocks:

- `Atom` and `Cons`, with `None` standing for the empty list.
- The primitives `null`, `is_null`, `is_atom`, `eq`, `car`, `cdr`, `cons` and `make_atom`.

Calling `car` or `cdr` on an atom or on the empty list raises `ListError`.
Calling `cons` onto an atom raises it too.

### `reclists.lexer`

`Lexer` splits text into `Token`s of kind `TokenKind.LPAREN`, `RPAREN`,
`ATOM` and `END_OF_TEXT`. Its `unget_token` pushes the last token back.
It raises `LexError` on any other character.

### `reclists.reader`

`Reader(text).read_list()` reads one list after another from the same
text. It returns the empty list once the text is used up. `read_list(text)`
reads only the first list. An unclosed list or an unexpected `)` raises
`ParseError`.

### `reclists.writer`

`ListWriter(stream).write_list(p)` writes each item preceded by a space and
ends the list with a newline. It wraps lines at 72 columns and indents the
continuation lines by two spaces. `format_list(p)` returns the same text as
a string.

### `reclists.solutions`

This module holds the list operations:

- `num_nodes_at_top_level`, `append`, `reverse_top_level`
- `is_lat`, `member`, `last`, `list_pair`, `firsts`, `flat`
- `two_the_same`, `equal`, `total_reverse`, `shape`
- `intersection`, `list_union`, `substitute`, `remove`
- `contains_equal`, `subset`

## Tests

    pip install .[test]
    pytest