from toylisp.evaluation.evaluator import evaluate, eval_expr
from toylisp.evaluation.apply import apply

__all__ = ["evaluate", "eval_expr", "apply"]
