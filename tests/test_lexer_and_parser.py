import pytest

from toylisp.errors import ToyLispLexError, ToyLispSyntaxError
from toylisp.reader.lexer import Token, TokenKind, tokenize
from toylisp.reader.parser import parse, read
from toylisp.types.sexpression import SList, Symbol, Integer, StringLiteral

S, L, R = TokenKind.SPACE, TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN
SYM, NUM, STR = TokenKind.SYMBOL, TokenKind.NUMBER_LITERAL, TokenKind.STRING_LITERAL


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [(SYM, "a")]),
        ("(a b)", [(L, "("), (SYM, "a"), (S, " "), (SYM, "b"), (R, ")")]),
        ('"hello"', [(STR, '"hello"')]),
        ('"say \\"hi\\""', [(STR, '"say \\"hi\\""')]),
        ("123", [(NUM, "123")]),
        ("0", [(NUM, "0")]),
        ("-45", [(NUM, "-45")]),
        ("a  \tb", [(SYM, "a"), (S, "  \t"), (SYM, "b")]),
        ("foo_bar-baz2", [(SYM, "foo_bar-baz2")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = tokenize(source)
    assert [(t.kind, t.text) for t in tokens] == expected


@pytest.mark.parametrize("source,remainder", [("(add 1 #)", "#)"), ("'a", "'a"), ('"open', '"open')])
def test_lexer_rejects_unknown_input(source, remainder):
    with pytest.raises(ToyLispLexError) as info:
        tokenize(source)
    assert info.value.remainder == remainder


def test_token_str():
    assert str(Token(SYM, "add")) == "[add]"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", Integer(123)),
        ("-45", Integer(-45)),
        ("abc", Symbol("abc")),
        ('"hello"', StringLiteral("hello")),
        ('"a\\"b"', StringLiteral('a\\"b')),
        ("()", SList(())),
        ("( )", SList(())),
        ("(a b c)", SList((Symbol("a"), Symbol("b"), Symbol("c")))),
        ("( a b )", SList((Symbol("a"), Symbol("b")))),
        ("(add 1 (add 2 3))", SList((Symbol("add"), Integer(1), SList((Symbol("add"), Integer(2), Integer(3)))))),
    ]
)
def test_parser(source, expected):
    assert read(source) == [expected]


def test_multiple_top_level_expressions():
    assert read("1 a \"s\"") == [Integer(1), Symbol("a"), StringLiteral("s")]


@pytest.mark.parametrize("source", ["", "   ", "\t"])
def test_empty_input_reads_zero_expressions(source):
    assert read(source) == []


def test_surrounding_whitespace_is_ignored():
    assert read("  (a)  ") == [SList((Symbol("a"),))]


@pytest.mark.parametrize(
    "source",
    [
        "(a b",       # unmatched open paren
        "(",          # nothing but an open paren
        "a)",         # stray close paren
        ")",
        "(a(b))",     # missing separator inside a list
        "(a \"s\"b)",
        "(a)(b)",     # missing separator between top-level expressions
        "12ab",
    ]
)
def test_parser_errors(source):
    with pytest.raises(ToyLispSyntaxError):
        read(source)


def test_parse_error_carries_token_context():
    with pytest.raises(ToyLispSyntaxError) as info:
        read("(a b")
    assert [t.text for t in info.value.tokens] == ["(", "a", " ", "b"]


def test_parse_accepts_token_list():
    tokens = tokenize("(x)")
    assert parse(tokens) == [SList((Symbol("x"),))]


def test_nested_lists():
    source = "((a b) (c d))"
    (expr,) = read(source)
    assert str(expr) == source
    assert expr[0] == SList((Symbol("a"), Symbol("b")))


@pytest.mark.parametrize("body", ['\\"', '\\\\', 'a\\\\\\"b', '\\\\\\\\', '\\"\\"'])
def test_escaped_string_bodies_round_trip(body):
    (expr,) = read(f'"{body}"')
    assert expr == StringLiteral(body)
    assert read(str(expr)) == [expr]
