"""Data model: symbolic expressions, environments and runtime values."""

from toylisp.types.sexpression import SList, Symbol, Integer, StringLiteral, NIL_EXPR, is_nil_expr
from toylisp.types.environment import Environment
from toylisp.types.values import Datum, Closure, Primitive, NIL, is_nil

__all__ = [
    "SList",
    "Symbol",
    "Integer",
    "StringLiteral",
    "NIL_EXPR",
    "is_nil_expr",
    "Environment",
    "Datum",
    "Closure",
    "Primitive",
    "NIL",
    "is_nil",
]
