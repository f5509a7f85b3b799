from __future__ import annotations

from typing import Any


class ToyLispError(Exception):
    """ Base class for all toylisp errors"""
    pass


class ToyLispLexError(ToyLispError):
    """ Raised when the input contains a character sequence no token matches"""

    def __init__(self, message: str, remainder: str):
        super().__init__(message)
        self.remainder = remainder


class ToyLispSyntaxError(ToyLispError):
    """ Raised when a token sequence is not a well-formed expression"""

    def __init__(self, message: str, tokens: list | None = None):
        super().__init__(message)
        self.tokens = list(tokens or [])


class ToyLispCompileError(ToyLispError):
    """ Raised when a special form has the wrong shape"""

    def __init__(self, rule: str, expr: Any):
        super().__init__(f"{rule}: {expr}")
        self.rule = rule
        self.expr = expr


class ToyLispUnboundSymbol(ToyLispError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"undefined variable {name}")
        self.name = name


class ToyLispArityError(ToyLispError):
    """ Raised when a closure is called with the wrong number of arguments"""

    def __init__(self, fn: Any, expected: int, actual: int):
        super().__init__(f"{fn} requires {expected} arguments, but got {actual}")
        self.expected = expected
        self.actual = actual


class ToyLispNotApplicable(ToyLispError):
    """ Raised when the head of an application is not a function"""

    def __init__(self, value: Any):
        super().__init__(f"cannot apply non-function {value}")
        self.value = value


class ToyLispTypeError(ToyLispError):
    """ Raised when a primitive receives an argument of the wrong type"""

    def __init__(self, message: str, position: int, value: Any):
        super().__init__(message)
        self.position = position
        self.value = value
