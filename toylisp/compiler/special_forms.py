"""Registry of special forms for the toylisp compiler.

Maps head symbol names to functions that validate the form's shape and build
its node. The set is fixed; there is no user-level macro facility.
"""

from __future__ import annotations

from typing import Callable

from toylisp.errors import ToyLispCompileError
from toylisp.types.sexpression import SList, Symbol
from toylisp.types.values import Datum, NIL

from .nodes import Node, LiteralNode, IfNode, SetNode, LambdaNode

CompileFn = Callable[[object], Node]


def if_form(expr: SList, compile_fn: CompileFn) -> Node:
    if len(expr) not in (3, 4):
        raise ToyLispCompileError("if requires 2 or 3 args", expr)
    cond = compile_fn(expr[1])
    then = compile_fn(expr[2])
    orelse = compile_fn(expr[3]) if len(expr) == 4 else LiteralNode(NIL)
    return IfNode(cond, then, orelse)


def set_form(expr: SList, compile_fn: CompileFn) -> Node:
    if len(expr) != 3:
        raise ToyLispCompileError("set requires 2 args", expr)
    target = expr[1]
    if not isinstance(target, Symbol):
        raise ToyLispCompileError("1st argument to set must be a symbol", expr)
    return SetNode(target.name, compile_fn(expr[2]))


def quote_form(expr: SList, compile_fn: CompileFn) -> Node:
    if len(expr) != 2:
        raise ToyLispCompileError("quote requires 1 arg", expr)
    # Returned verbatim, never compiled
    return LiteralNode(Datum(expr[1]))


def lambda_form(expr: SList, compile_fn: CompileFn) -> Node:
    if len(expr) < 3:
        raise ToyLispCompileError("lambda requires at least 2 arguments", expr)
    params = expr[1]
    if not isinstance(params, SList):
        raise ToyLispCompileError("1st argument to lambda must be a list of symbols", expr)
    names: list[str] = []
    for param in params:
        if not isinstance(param, Symbol):
            raise ToyLispCompileError("1st argument to lambda must be a list of symbols", expr)
        names.append(param.name)
    body = tuple(compile_fn(form) for form in expr.items[2:])
    return LambdaNode(tuple(names), body)


SPECIAL_FORMS: dict[str, Callable[[SList, CompileFn], Node]] = {
    "if": if_form,
    "set": set_form,
    "quote": quote_form,
    "lambda": lambda_form,
}
