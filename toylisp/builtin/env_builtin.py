"""Built-in functions for the toylisp root environment.

Primitives receive the list of already-evaluated argument values and return
a value; they validate their own arguments and raise ToyLispTypeError on bad
input.
"""
from __future__ import annotations

from toylisp import LispValue, PrimitiveFn
from toylisp.errors import ToyLispTypeError
from toylisp.types.environment import Environment
from toylisp.types.sexpression import Integer
from toylisp.types.values import Datum, Primitive, NIL, make_int


def as_int(name: str, position: int, value: LispValue) -> int:
    """Unwrap an integer argument or raise naming the argument position."""
    if isinstance(value, Datum) and isinstance(value.expr, Integer):
        return value.expr.value
    raise ToyLispTypeError(f"{name} argument[{position}] is not int: {value}", position, value)


def add(args: list[LispValue]) -> LispValue:
    """Sum any number of integers; (add) is 0."""
    total = 0
    for i, arg in enumerate(args):
        total += as_int("add", i, arg)
    return make_int(total)


PRIMITIVES: dict[str, PrimitiveFn] = {
    "add": add,
}


def define_primitive(env: Environment, name: str, fn: PrimitiveFn) -> Primitive:
    """Expose a host callable to Lisp code under `name`."""
    primitive = Primitive(name, fn)
    env.define(name, primitive)
    return primitive


def register(env: Environment) -> None:
    """Populate `env` with nil and the shipped primitives."""
    env.define("nil", NIL)
    for name, fn in PRIMITIVES.items():
        define_primitive(env, name, fn)


def make_global_env() -> Environment:
    env = Environment()
    register(env)
    return env
