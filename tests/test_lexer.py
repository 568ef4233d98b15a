import pytest

from reclists.lexer import MAX_ATOM_LEN, LexError, Lexer, Token, TokenKind


def _all_tokens(text):
    lexer = Lexer(text)
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.kind is TokenKind.END_OF_TEXT:
            return tokens


def test_simple_list_tokens():
    kinds = [t.kind for t in _all_tokens("(ab c)")]
    assert kinds == [
        TokenKind.LPAREN,
        TokenKind.ATOM,
        TokenKind.ATOM,
        TokenKind.RPAREN,
        TokenKind.END_OF_TEXT,
    ]


def test_atom_texts():
    atoms = [t.text for t in _all_tokens("  (ab\n c )") if t.kind is TokenKind.ATOM]
    assert atoms == ["ab", "c"]


def test_atom_adjacent_to_paren():
    tokens = _all_tokens("(x)")
    assert tokens[1] == Token(TokenKind.ATOM, "x")
    assert tokens[2].kind is TokenKind.RPAREN


def test_long_atom_split_at_max_length():
    text = "abcdefghijk"
    atoms = [t.text for t in _all_tokens(text) if t.kind is TokenKind.ATOM]
    assert atoms == [text[:MAX_ATOM_LEN], text[MAX_ATOM_LEN:]]
    assert "".join(atoms) == text


def test_empty_text_is_end():
    lexer = Lexer("   ")
    assert lexer.next_token().kind is TokenKind.END_OF_TEXT
    assert lexer.next_token().kind is TokenKind.END_OF_TEXT


def test_unget_returns_same_token():
    lexer = Lexer("foo bar")
    first = lexer.next_token()
    lexer.unget_token()
    assert lexer.next_token() == first
    assert lexer.next_token() == Token(TokenKind.ATOM, "bar")


def test_unrecognized_item_raises():
    lexer = Lexer("( 1 )")
    assert lexer.next_token().kind is TokenKind.LPAREN
    with pytest.raises(LexError):
        lexer.next_token()


def test_unget_before_any_token_raises():
    with pytest.raises(LexError):
        Lexer("a").unget_token()