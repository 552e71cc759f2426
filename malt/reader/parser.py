"""
  Reader: tokenizer and recursive-descent parser

- Eager tokenizing: a line is small, so the whole token list is built first
- Emits malt terms:

    - nil -> Nil
    - true / false -> bool
    - integers -> int
    - symbols -> Symbol
    - strings -> str (interior kept verbatim, backslashes included)
    - :keywords -> str carrying KEYWORD_PREFIX
    - ( ... ) -> List
    - [ ... ] -> Vector
    - { k v ... } -> Map (string or keyword keys only)

Reader-macro punctuation (' ` ~ ~@ ^ @) is tokenized but never interpreted;
met in term position it is an unknown token.
"""

from __future__ import annotations

import re
from typing import Optional

from malt import Term
from malt.errors import MaltReadError
from malt.printer import pr_str
from malt.types.collection import List, Map, Vector
from malt.types.keyword import keyword
from malt.types.nil import Nil
from malt.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"~@"  # splice-unquote
    r"|[\[\]{}()'`~^@]"  # single punctuation
    r'|"(?:\\.|[^\\"])*"?'  # strings, possibly unterminated
    r"|;.*"  # line comment
    r"|[^\s\[\]{}('\"`,;)]*"  # bare token
    r")"
)

INT_RE = re.compile(r"[+-]?[0-9]+")

SYMBOL_START = "+-*/=<>!?_&%$|"

LITERALS: dict[str, Term] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

CLOSERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}


def tokenize(text: str) -> list[str]:
    """Split `text` into tokens, dropping separators and comments."""
    return [
        tok
        for tok in (m.group(1) for m in TOKEN_RE.finditer(text))
        if tok and not tok.startswith(";")
    ]


class TokenStream:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def read_form(self) -> Term:
        tok = self.peek()
        if tok is None:
            raise MaltReadError("unexpected end of input")
        if tok == "(":
            return List(self._read_seq("("))
        if tok == "[":
            return Vector(self._read_seq("["))
        if tok == "{":
            return self._read_map()
        return self.read_atom()

    def _read_seq(self, opener: str) -> list[Term]:
        closer = CLOSERS[opener]
        self.advance()  # consume the opener
        items: list[Term] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise MaltReadError(f"unbalanced: expected '{closer}'")
            if tok == closer:
                self.advance()
                return items
            items.append(self.read_form())

    def _read_map(self) -> Map:
        items: list[tuple[str, Term]] = []
        pending = self._read_seq("{")
        # Keys were read as ordinary forms; only string-shaped ones are allowed
        if len(pending) % 2:
            raise MaltReadError("map literal requires an even number of forms")
        for key, value in zip(pending[::2], pending[1::2]):
            if not isinstance(key, str):
                raise MaltReadError(f"map key must be a string or keyword, not {pr_str(key)}")
            items.append((key, value))
        return Map(items)

    def read_atom(self) -> Term:
        tok = self.advance()
        if tok is None:
            raise MaltReadError("unexpected end of input")

        if INT_RE.fullmatch(tok):
            return int(tok)
        if tok in LITERALS:
            return LITERALS[tok]

        lead = tok[0]
        if lead.isalpha() or lead in SYMBOL_START:
            return Symbol(tok)
        if lead == ":" and len(tok) > 1:
            return keyword(tok[1:])
        if lead == '"':
            if len(tok) < 2 or not tok.endswith('"'):
                raise MaltReadError(f"unbalanced string: {tok}")
            return tok[1:-1]

        raise MaltReadError(f"unknown token: {tok}")

    def read_all(self) -> list[Term]:
        forms = []
        while not self.at_end():
            forms.append(self.read_form())
        return forms


def read_str(text: str) -> Term:
    """Read the first form in `text`. Anything after it is ignored."""
    return TokenStream(tokenize(text)).read_form()
