"""
  Reader: turns a token list into symbolic expressions.

Layout rules:

    - whitespace before the first and after the last top-level expression is ignored
    - consecutive expressions (top level or inside a list) need a whitespace token between them
    - whitespace is allowed right after '(' and right before ')'
    - unmatched '(' or a stray ')' is an error

The reader knows nothing about special forms; `(if a)` reads fine and is
rejected later by the compiler.
"""

from __future__ import annotations

from typing import Iterable, Optional

from toylisp import SExpression
from toylisp.errors import ToyLispSyntaxError
from toylisp.reader.lexer import Token, TokenKind, tokenize
from toylisp.types.sexpression import SList, Symbol, Integer, StringLiteral


def _context(tokens: list[Token]) -> str:
    return " ".join(str(t) for t in tokens)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def rest(self) -> list[Token]:
        return self.tokens[self.pos:]

    def consume_if(self, kind: TokenKind) -> bool:
        tok = self.peek()
        if tok is not None and tok.kind is kind:
            self.pos += 1
            return True
        return False

    def parse_expr(self) -> SExpression:
        tok = self.peek()
        if tok is None:
            raise ToyLispSyntaxError("unexpected end of tokens while expecting an expression")

        if tok.kind is TokenKind.OPEN_PAREN:
            return self.parse_list()

        if tok.kind is TokenKind.SYMBOL:
            self.advance()
            return Symbol(tok.text)

        if tok.kind is TokenKind.NUMBER_LITERAL:
            self.advance()
            try:
                return Integer(int(tok.text))
            except ValueError:
                raise ToyLispSyntaxError(f"failed to parse token {tok} as int", [tok])

        if tok.kind is TokenKind.STRING_LITERAL:
            self.advance()
            # Escapes are kept verbatim
            return StringLiteral(tok.text[1:-1])

        raise ToyLispSyntaxError(f"unexpected token at {_context(self.rest())}", self.rest())

    def parse_list(self) -> SList:
        start = self.pos
        self.advance()  # consume '('
        items: list[SExpression] = []
        while True:
            has_space = self.consume_if(TokenKind.SPACE)
            if self.consume_if(TokenKind.CLOSE_PAREN):
                return SList(tuple(items))
            if self.peek() is None:
                context = self.tokens[start:]
                raise ToyLispSyntaxError(f"unmatched parens: tokens: {_context(context)}", context)
            if items and not has_space:
                raise ToyLispSyntaxError(
                    f"expected whitespace between list elements at {_context(self.rest())}",
                    self.rest(),
                )
            items.append(self.parse_expr())

    def parse_all(self) -> list[SExpression]:
        exprs: list[SExpression] = []
        has_space = False
        self.consume_if(TokenKind.SPACE)
        while self.peek() is not None:
            if exprs and not has_space:
                raise ToyLispSyntaxError(
                    f"expected whitespace between expressions at {_context(self.rest())}",
                    self.rest(),
                )
            exprs.append(self.parse_expr())
            has_space = self.consume_if(TokenKind.SPACE)
        return exprs


def parse(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse every top-level expression in `tokens`; zero expressions is valid."""
    return TokenStream(tokens).parse_all()


def read(source: str) -> list[SExpression]:
    return parse(tokenize(source))
