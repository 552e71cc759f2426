"""Core evaluator for the malt interpreter.

`evaluate` reduces a term to a value. Lists headed by a special-form symbol
are handed to that form unevaluated; any other non-empty list is evaluated
element by element and its head invoked with the rest. `eval_ast` is the
element-wise half of that: it resolves symbols and evaluates the contents of
lists, vectors and map values, leaving every other term as it is.

Both functions recurse on the native stack, so nesting depth is bounded by
the interpreter's recursion limit (see malt.interpreter).
"""

from __future__ import annotations

import logging

from malt import Term
from malt.evaluation.apply import apply
from malt.evaluation.special_forms import SPECIAL_FORMS
from malt.types.collection import List, Map, Vector
from malt.types.environment import Environment
from malt.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(term: Term, env: Environment) -> Term:
    if not isinstance(term, List):
        return eval_ast(term, env)

    # The empty list evaluates to itself
    if not term:
        return term

    head = term[0]
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        logger.debug("special form %s", head)
        return SPECIAL_FORMS[head](term[1:], env, evaluate)

    fn, *args = eval_ast(term, env)
    return apply(fn, args, evaluate)


def eval_ast(term: Term, env: Environment) -> Term:
    match term:
        case Symbol():
            return env.resolve(term)
        case List():
            return List(evaluate(x, env) for x in term)
        case Vector():
            return Vector(evaluate(x, env) for x in term)
        case Map():
            return Map((k, evaluate(v, env)) for k, v in term.items())
    # --- Atoms, closures and builtins return as-is ---
    return term
