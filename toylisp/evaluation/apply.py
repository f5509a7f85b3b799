"""Application engine for toylisp.

Function application semantics in one place:
- Closures: exact arity, parameters bound in a fresh frame whose parent is the
  captured environment, body forms run in order, last value returned.
- Primitives: called with the evaluated argument list.
Anything else in head position is a ToyLispNotApplicable error.
"""

from __future__ import annotations

from typing import Callable

from toylisp import LispValue
from toylisp.errors import ToyLispArityError, ToyLispNotApplicable
from toylisp.types.environment import Environment
from toylisp.types.values import Closure, Primitive, NIL

EvaluateFn = Callable[..., LispValue]


def bind_arguments(fn: Closure, args: list[LispValue]) -> Environment:
    """Bind argument values to the closure's parameters in a new call frame.

    A fresh frame per call keeps re-entrant invocations of the same closure
    from overwriting each other's parameters.
    """
    if len(args) != fn.arity:
        raise ToyLispArityError(fn, fn.arity, len(args))
    call_env = fn.env.child()
    for name, value in zip(fn.params, args):
        call_env.define(name, value)
    return call_env


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluateFn) -> LispValue:
    call_env = bind_arguments(fn, args)
    result: LispValue = NIL
    for node in fn.body:
        result = evaluate_fn(node, call_env)
    return result


def apply(fn: LispValue, args: list[LispValue], evaluate_fn: EvaluateFn) -> LispValue:
    if isinstance(fn, Closure):
        return apply_closure(fn, args, evaluate_fn)
    if isinstance(fn, Primitive):
        return fn(args)
    raise ToyLispNotApplicable(fn)
