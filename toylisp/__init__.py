# Core type aliases for toylisp's data model.
#
# Naming guidance:
# - SExpression: use in reader/compiler code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# The concrete classes live in toylisp.types; the aliases below keep annotations
# short in modules that only pass values through.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias (Datum | Closure | Primitive)
LispValue = Any
# Parsed form alias (SList | Symbol | Integer | StringLiteral)
SExpression = Any

# Host callable exposed to Lisp code as a primitive
PrimitiveFn = Callable[[list], LispValue]
