from malt.types.symbol import Symbol
from malt.types.nil import Nil, NilType
from malt.types.collection import Seq, List, Vector, Map
from malt.types.keyword import KEYWORD_PREFIX, keyword, is_keyword, keyword_name
from malt.types.environment import Environment
from malt.types.closure import Closure, Builtin

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Seq",
    "List",
    "Vector",
    "Map",
    "KEYWORD_PREFIX",
    "keyword",
    "is_keyword",
    "keyword_name",
    "Environment",
    "Closure",
    "Builtin",
]
