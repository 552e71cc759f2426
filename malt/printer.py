"""Render terms back to canonical source text."""

from __future__ import annotations

from malt import Term
from malt.types.closure import Builtin, Closure
from malt.types.collection import List, Map, Vector
from malt.types.keyword import is_keyword, keyword_name
from malt.types.nil import NilType
from malt.types.symbol import Symbol


def pr_string(value: str) -> str:
    if is_keyword(value):
        return f":{keyword_name(value)}"
    # Strings hold their source interior verbatim, so no re-escaping
    return f'"{value}"'


def pr_str(term: Term) -> str:
    # bool before int: bool is an int subclass
    match term:
        case bool():
            return "true" if term else "false"
        case int():
            return str(term)
        case NilType():
            return "nil"
        case Symbol():
            return term.id
        case str():
            return pr_string(term)
        case List():
            return "(" + " ".join(pr_str(x) for x in term) + ")"
        case Vector():
            return "[" + " ".join(pr_str(x) for x in term) + "]"
        case Map():
            return "{" + ", ".join(f"{pr_string(k)} {pr_str(v)}" for k, v in term.items()) + "}"
        case Closure():
            return "#<function>"
        case Builtin():
            return f"#<builtin {term.name}>"
    raise TypeError(f"Cannot print {term!r}")
