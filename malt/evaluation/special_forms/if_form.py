from collections.abc import Sequence

from malt import EvaluatorFn, Term
from malt.errors import MaltArityError, MaltTypeError
from malt.evaluation.special_forms.do_form import wrap_do
from malt.printer import pr_str
from malt.types.environment import Environment


def if_form(
    tail: Sequence[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    if len(tail) < 2:
        raise MaltArityError("'if' requires a condition and a then-branch")

    cond = evaluate_fn(tail[0], env)
    # No truthiness: only true and false are conditions
    if not isinstance(cond, bool):
        raise MaltTypeError(f"'if' condition must evaluate to a boolean, got {pr_str(cond)}")

    if cond:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(wrap_do(tail[2:]), env)
