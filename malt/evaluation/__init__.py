from malt.evaluation.evaluator import evaluate, eval_ast
from malt.evaluation.apply import apply

__all__ = ["evaluate", "eval_ast", "apply"]
