from collections.abc import Sequence

from malt import EvaluatorFn, Term
from malt.errors import MaltSyntaxError
from malt.evaluation.special_forms.do_form import wrap_do
from malt.printer import pr_str
from malt.types.closure import Closure
from malt.types.collection import Seq
from malt.types.environment import Environment
from malt.types.symbol import Symbol


def fn_form(
    tail: Sequence[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    # (fn* (params) body...) allows zero or more body forms, run as an
    # implicit do. With no body forms, calling the function returns nil.
    if not tail or not isinstance(tail[0], Seq):
        raise MaltSyntaxError("fn* requires a list or vector of parameters")

    params = tail[0]
    for p in params:
        if not isinstance(p, Symbol):
            raise MaltSyntaxError(f"fn* parameter must be a symbol, not {pr_str(p)}")

    return Closure(tuple(params), wrap_do(tail[1:]), env)
