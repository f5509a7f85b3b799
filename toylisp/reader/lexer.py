"""
  Lexer: splits one line of source text into typed tokens.

Each token kind has its own regex; at every position the sub-tokenizers are
tried in order and the first one matching at that exact position wins.
Whitespace is kept as a token because the parser enforces separators.

    - SPACE           runs of whitespace
    - OPEN_PAREN      (
    - CLOSE_PAREN     )
    - NUMBER_LITERAL  signed decimal integers
    - SYMBOL          identifiers
    - STRING_LITERAL  double-quoted text, \\" and \\\\ allowed inside
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from toylisp.errors import ToyLispLexError


class TokenKind(enum.Enum):
    SPACE = "space"
    OPEN_PAREN = "lparen"
    CLOSE_PAREN = "rparen"
    SYMBOL = "symbol"
    STRING_LITERAL = "string"
    NUMBER_LITERAL = "number"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"[{self.text}]"


SUB_TOKENIZERS: list[tuple[TokenKind, re.Pattern]] = [
    (TokenKind.SPACE, re.compile(r"\s+")),
    (TokenKind.OPEN_PAREN, re.compile(r"\(")),
    (TokenKind.CLOSE_PAREN, re.compile(r"\)")),
    (TokenKind.NUMBER_LITERAL, re.compile(r"-?[0-9]+")),
    (TokenKind.SYMBOL, re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")),
    (TokenKind.STRING_LITERAL, re.compile(r'"(?:[^"\\]|\\"|\\\\)*"')),
]


def _tokenize1(source: str, pos: int) -> Token | None:
    for kind, pattern in SUB_TOKENIZERS:
        match = pattern.match(source, pos)
        if match:
            return Token(kind, match.group())
    return None


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens, raising ToyLispLexError on unknown input."""
    tokens: list[Token] = []
    pos = 0
    n = len(source)
    while pos < n:
        token = _tokenize1(source, pos)
        if token is None:
            raise ToyLispLexError(f"tokenize failed at {source[pos:]!r}", source[pos:])
        if not token.text:
            raise ToyLispLexError(
                f"tokenizers must consume at least 1 character: current head: {source[pos:]!r}",
                source[pos:],
            )
        tokens.append(token)
        pos += len(token.text)
    return tokens
