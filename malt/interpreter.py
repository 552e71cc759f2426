from __future__ import annotations

import logging

from malt import Term
from malt.builtins import default_env
from malt.errors import MaltRecursionError
from malt.evaluation.evaluator import evaluate
from malt.printer import pr_str
from malt.reader.parser import read_str
from malt.types.environment import Environment

logger = logging.getLogger(__name__)


def evaluate_line(text: str, env: Environment) -> str:
    """Read one form from `text`, evaluate it in `env` and print the result.

    Raises MaltError on failure. Bindings made before the failure stay in
    `env`. Input nested too deeply for the native stack raises
    MaltRecursionError instead of escaping as a RecursionError.
    """
    try:
        return pr_str(evaluate(read_str(text), env))
    except RecursionError:
        raise MaltRecursionError("maximum nesting depth exceeded") from None


class Interpreter:
    """
    Orchestrates reading, evaluating and printing malt code.
    Maintains a root Environment across calls.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else default_env()

    def read(self, code: str) -> Term:
        return read_str(code)

    def eval(self, code: str) -> Term:
        try:
            return evaluate(self.read(code), self.env)
        except RecursionError:
            raise MaltRecursionError("maximum nesting depth exceeded") from None

    def print(self, term: Term) -> str:
        return pr_str(term)

    def rep(self, code: str) -> str:
        logger.debug("rep %r", code)
        return evaluate_line(code, self.env)
