from __future__ import annotations

import logging

from toylisp import SExpression, LispValue
from toylisp.reader.lexer import Token, tokenize
from toylisp.reader.parser import parse
from toylisp.compiler import compile_expr
from toylisp.evaluation.evaluator import evaluate
from toylisp.types.environment import Environment
from toylisp.builtin.env_builtin import make_global_env

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading, compiling and evaluating toylisp code.
    Maintains one root Environment across calls, so bindings made by one
    line are visible to the next.
    """

    def __init__(self, env: Environment | None = None):
        # An explicit root lets independent sessions coexist
        self.env: Environment = env if env is not None else make_global_env()

    def tokenize(self, line: str) -> list[Token]:
        return tokenize(line)

    def parse(self, tokens: list[Token]) -> list[SExpression]:
        return parse(tokens)

    def read(self, line: str) -> list[SExpression]:
        return self.parse(self.tokenize(line))

    def eval_expr(self, expr: SExpression) -> LispValue:
        node = compile_expr(expr)
        logger.debug("compiled %s -> %r", expr, node)
        value = evaluate(node, self.env)
        logger.debug("evaluated %s => %s", expr, value)
        return value

    def eval(self, code: str) -> list[LispValue]:
        """Evaluate every expression in `code` in order; the first error propagates."""
        return [self.eval_expr(expr) for expr in self.read(code)]
