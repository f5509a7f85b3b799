from toylisp.reader.lexer import Token, TokenKind, tokenize
from toylisp.reader.parser import parse, read

__all__ = ["Token", "TokenKind", "tokenize", "parse", "read"]
