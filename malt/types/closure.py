"""Callable terms: user closures made by `fn*` and native builtins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from malt import Term
from malt.types.environment import Environment
from malt.types.symbol import Symbol


class Closure:
    """A first-class function with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[Symbol, ...], body: Term, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: Term = body
        # Shared, not copied: definitions made later in env stay visible
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, args: list[Term]) -> Environment:
        """Return a child scope of the captured env with params bound to args.

        The caller checks arity first.
        """
        scope = Environment.with_outer(self.env)
        for param, arg in zip(self.params, args):
            scope.define(param, arg)
        return scope

    def __repr__(self) -> str:
        return f"<Closure ({' '.join(str(p) for p in self.params)})>"


@dataclass(frozen=True)
class Builtin:
    """A native operation over already-evaluated arguments."""

    name: str
    fn: Callable[[list[Term]], Term]

    def __call__(self, args: list[Term]) -> Term:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"
