"""Runtime environment for malt.

The Environment stores bindings of Symbols to evaluated terms and supports
nested scopes via an `outer` link. A child scope only reads its parent; it
never owns it. Closures and child scopes keep their parent alive simply by
holding a reference to it, so the chain needs no explicit teardown.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from malt import Term
from malt.errors import MaltInvalidSymbol, MaltUnboundSymbol
from malt.types.symbol import Symbol


def _as_symbol(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise MaltInvalidSymbol(f"Cannot define {name!r} as a symbol")


class Environment:
    """Hierarchical mapping from Symbols to terms."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        bindings: Mapping[Symbol | str, Term] | None = None,
    ):
        self.vars: dict[Symbol, Term] = {}
        self.outer: Environment | None = outer
        if bindings:
            self.update(bindings)

    @classmethod
    def with_outer(cls, parent: Environment) -> Environment:
        """Create an empty child scope of `parent`."""
        return cls(outer=parent)

    def define(self, name: Symbol | str, value: Term) -> Term:
        """Bind `name` to `value` in this scope and return `value`.

        Raises MaltInvalidSymbol if `name` is neither a Symbol nor a str.
        """
        self.vars[_as_symbol(name)] = value
        return value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> Optional[Term]:
        """Value bound to `name` in the nearest scope, or None when unbound."""
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            return None
        return env.vars[symbol]

    def resolve(self, name: Symbol | str) -> Term:
        """Like lookup, but raises MaltUnboundSymbol when nothing binds `name`."""
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            raise MaltUnboundSymbol(f"symbol '{symbol}' not found")
        return env.vars[symbol]

    def update(self, mapping: Mapping[Symbol | str, Term]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[_as_symbol(k)] = v

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
