"""Immutable collection terms: List, Vector and Map.

List and Vector are tuple subclasses (through Seq) so that a term, once built, cannot be
changed in place. They never compare equal to each other even when their
elements match; the printer and the evaluator both depend on the variant.

Map keeps insertion order, which is also the order it prints in.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from malt import Term


class Seq(tuple):
    """Common base of List and Vector."""

    __slots__ = ()

    def __new__(cls, items: Iterable[Term] = ()):
        return super().__new__(cls, items)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class List(Seq):
    """A parenthesised sequence: `(a b c)`."""

    __slots__ = ()


class Vector(Seq):
    """A bracketed sequence: `[a b c]`. Evaluates like a List."""

    __slots__ = ()


class Map(Mapping):
    """String-keyed mapping: `{"a" 1, :b 2}`."""

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Term] | Iterable[tuple[str, Term]] = ()):
        self._items: dict[str, Term] = dict(items)

    def __getitem__(self, key: str) -> Term:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Map) and self._items == other._items

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"Map({self._items!r})"
