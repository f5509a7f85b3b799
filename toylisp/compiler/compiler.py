"""Compiles symbolic expressions into AST nodes.

Special-form shape is checked here, before anything runs: a malformed `if`
inside a lambda body fails when the lambda is compiled, not when it is first
called. Compilation is pure, so a compile error leaves the session untouched.
"""

from __future__ import annotations

from toylisp import SExpression
from toylisp.types.sexpression import SList, Symbol, Integer, StringLiteral
from toylisp.types.values import Datum, NIL

from .nodes import Node, LiteralNode, LookupNode, ApplicationNode
from .special_forms import SPECIAL_FORMS


def compile_expr(expr: SExpression) -> Node:
    match expr:
        case Integer() | StringLiteral():
            return LiteralNode(Datum(expr))
        case Symbol(name=name):
            return LookupNode(name)
        case SList(items=()):
            return LiteralNode(NIL)
        case SList(items=(Symbol(name=head), *_)) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](expr, compile_expr)
        case SList(items=(head, *args)):
            return ApplicationNode(
                compile_expr(head),
                tuple(compile_expr(arg) for arg in args),
            )
    raise TypeError(f"cannot compile {expr!r} (unknown expression type)")
