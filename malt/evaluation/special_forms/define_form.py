from collections.abc import Sequence

from malt import EvaluatorFn, Term
from malt.errors import MaltArityError, MaltSyntaxError
from malt.types.environment import Environment
from malt.types.symbol import Symbol


def define_form(
    tail: Sequence[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """
    (def! name value)
    Binds in the current scope only and returns the bound value.
    """
    if len(tail) != 2:
        raise MaltArityError("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MaltSyntaxError("def! name must be a symbol")
    value = evaluate_fn(val_expr, env)  # normal evaluation
    return env.define(name, value)
