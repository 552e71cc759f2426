from collections.abc import Sequence

from malt import EvaluatorFn, Term
from malt.types.collection import List
from malt.types.environment import Environment
from malt.types.nil import Nil
from malt.types.symbol import Symbol

DO = Symbol("do")


def wrap_do(body: Sequence[Term]) -> List:
    """Turn a run of forms into a single `(do ...)` form."""
    return List((DO, *body))


def do_form(
    tail: Sequence[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """
    (do expr...)
    Evaluates left to right and returns the last value, or nil when empty.
    """
    result: Term = Nil
    for expr in tail:
        result = evaluate_fn(expr, env)
    return result
