from collections.abc import Sequence

from malt import EvaluatorFn, Term
from malt.errors import MaltSyntaxError
from malt.evaluation.special_forms.do_form import do_form
from malt.printer import pr_str
from malt.types.collection import Seq
from malt.types.environment import Environment
from malt.types.symbol import Symbol


def let_form(
    tail: Sequence[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """
    (let* (name1 expr1 name2 expr2 ...) body...)

    Each expr is evaluated in the new scope right before its name is bound
    there, so later bindings see earlier ones. Nothing leaks into `env`.
    """
    if not tail or not isinstance(tail[0], Seq):
        raise MaltSyntaxError("let* requires a list or vector of bindings")

    bindings, body = tail[0], tail[1:]
    if len(bindings) % 2:
        raise MaltSyntaxError("let* bindings require an even number of forms")

    let_env = Environment.with_outer(env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MaltSyntaxError(f"let* binding name must be a symbol, not {pr_str(name)}")
        let_env.define(name, evaluate_fn(val_expr, let_env))

    return do_form(body, let_env, evaluate_fn)
