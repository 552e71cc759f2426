"""Application engine for malt.

Centralizes invocation semantics for the evaluator:
- Closures get a fresh child scope of their captured environment with each
  parameter bound positionally, then their body is evaluated there.
- Builtins are called with the list of evaluated arguments.
- Anything else in head position is an invocation error.

A closure must be called with exactly as many arguments as it has
parameters; a mismatch raises MaltArityError before any binding happens.
"""

from __future__ import annotations

import logging

from malt import EvaluatorFn, Term
from malt.errors import MaltArityError, MaltInvocationError
from malt.printer import pr_str
from malt.types.closure import Builtin, Closure

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[Term], evaluate_fn: EvaluatorFn) -> Term:
    if len(args) != fn.arity:
        raise MaltArityError(
            f"function expects {fn.arity} argument(s), got {len(args)}"
        )
    scope = fn.bind(args)
    logger.debug("apply %r to %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, scope)


def apply(head: Term, args: list[Term], evaluate_fn: EvaluatorFn) -> Term:
    """Invoke `head` with already-evaluated `args`."""
    match head:
        case Closure():
            return apply_closure(head, args, evaluate_fn)
        case Builtin():
            return head(args)
    raise MaltInvocationError(f"head of a list is not invokable: {pr_str(head)}")
