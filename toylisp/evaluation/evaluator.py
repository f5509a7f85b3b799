"""Core evaluator for the toylisp interpreter.

Executes compiled nodes against an environment chain by a plain depth-first
walk. Errors are raised and propagate unchanged to the caller; no node
catches them, and `set` effects that ran before a failure are kept.
"""

from __future__ import annotations

from toylisp import SExpression, LispValue
from toylisp.compiler import (
    Node,
    LiteralNode,
    LookupNode,
    IfNode,
    SetNode,
    LambdaNode,
    ApplicationNode,
    compile_expr,
)
from toylisp.types.environment import Environment
from toylisp.types.values import Closure, is_nil
from toylisp.evaluation.apply import apply


def evaluate(node: Node, env: Environment) -> LispValue:
    match node:
        case LiteralNode(value=value):
            return value
        case LookupNode(name=name):
            return env.lookup(name)
        case IfNode(cond=cond, then=then, orelse=orelse):
            # Lisp truthiness: only nil (the empty list) is false
            if is_nil(evaluate(cond, env)):
                return evaluate(orelse, env)
            return evaluate(then, env)
        case SetNode(name=name, value=value_node):
            value = evaluate(value_node, env)
            env.define(name, value)
            return value
        case LambdaNode(params=params, body=body):
            return Closure(params, body, env)
        case ApplicationNode(func=func_node, args=arg_nodes):
            fn = evaluate(func_node, env)
            # Strictly left to right, in the caller's environment
            args = [evaluate(arg, env) for arg in arg_nodes]
            return apply(fn, args, evaluate)
    raise TypeError(f"unknown node type: {type(node).__name__}")


def eval_expr(expr: SExpression, env: Environment) -> LispValue:
    """Compile one symbolic expression and evaluate it in `env`."""
    return evaluate(compile_expr(expr), env)
