"""Runtime values.

A value is one of:

    - Datum      a wrapped symbolic expression (integer, string, symbol, list)
    - Closure    parameter names, compiled body and the defining environment
    - Primitive  a named host callable taking the evaluated argument list

Quoted forms come back as Datum values holding the unevaluated expression, so
code and data share one representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from toylisp import PrimitiveFn
from toylisp.types.environment import Environment
from toylisp.types.sexpression import SExpression, NIL_EXPR, Integer, is_nil_expr

if TYPE_CHECKING:
    from toylisp.compiler.nodes import Node


@dataclass(frozen=True, slots=True)
class Datum:
    expr: SExpression

    def __str__(self) -> str:
        return str(self.expr)


class Closure:
    """A first-class lambda with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[str, ...], body: tuple[Node, ...], env: Environment):
        self.params: tuple[str, ...] = params
        self.body: tuple[Node, ...] = body
        # Captured by reference: closures from the same scope share it
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return "#<lambda>"

    def __repr__(self) -> str:
        return f"<Closure ({' '.join(self.params)})>"


class Primitive:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list):
        return self.fn(args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"

    __repr__ = __str__


NIL = Datum(NIL_EXPR)


def is_nil(value) -> bool:
    """Only the empty list is false; zero and "" are true."""
    return isinstance(value, Datum) and is_nil_expr(value.expr)


def make_int(n: int) -> Datum:
    return Datum(Integer(n))
