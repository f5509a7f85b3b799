from __future__ import annotations

# Public surface for the compiler package
from .nodes import (
    Node,
    LiteralNode,
    LookupNode,
    IfNode,
    SetNode,
    LambdaNode,
    ApplicationNode,
)
from .compiler import compile_expr
from .special_forms import SPECIAL_FORMS

__all__ = [
    "Node",
    "LiteralNode",
    "LookupNode",
    "IfNode",
    "SetNode",
    "LambdaNode",
    "ApplicationNode",
    "compile_expr",
    "SPECIAL_FORMS",
]
