from __future__ import annotations

from functools import reduce
from typing import Callable

from malt import Term
from malt.errors import MaltArithmeticError, MaltArityError, MaltTypeError
from malt.printer import pr_str
from malt.types.closure import Builtin
from malt.types.collection import Map, Seq
from malt.types.environment import Environment


def _is_integer(x: Term) -> bool:
    # bool is an int subclass but not an Integer term
    return isinstance(x, int) and not isinstance(x, bool)


def _integers(name: str, args: list[Term]) -> list[int]:
    for x in args:
        if not _is_integer(x):
            raise MaltTypeError(f"{name} expects integer arguments, got {pr_str(x)}")
    return args

# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Term]) -> int:
    return sum(_integers("+", args))

def mul(args: list[Term]) -> int:
    return reduce(lambda a, b: a * b, _integers("*", args), 1)

def sub(args: list[Term]) -> int:
    if not args:
        raise MaltArityError("- requires at least 1 argument")
    return reduce(lambda a, b: a - b, _integers("-", args))

def truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise MaltArithmeticError("division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q

def div(args: list[Term]) -> int:
    if not args:
        raise MaltArityError("/ requires at least 1 argument")
    return reduce(truncating_div, _integers("/", args))

# -------------------------------
# Equality and comparison
# -------------------------------
def is_equal(a: Term, b: Term) -> bool:
    # Recursively check equality; different variants are never equal
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, Seq):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Map):
        return a.keys() == b.keys() and all(is_equal(a[k], b[k]) for k in a)
    return a == b

def _binary(name: str, args: list[Term]) -> tuple[Term, Term]:
    if len(args) != 2:
        raise MaltArityError(f"{name} requires exactly 2 arguments")
    return args[0], args[1]

def _ordering(name: str, test: Callable[[int, int], bool]) -> Callable[[list[Term]], bool]:
    # Non-integer pairs are neither less, equal nor greater
    def compare(args: list[Term]) -> bool:
        a, b = _binary(name, args)
        return _is_integer(a) and _is_integer(b) and test(a, b)
    return compare

def equals(args: list[Term]) -> bool:
    a, b = _binary("=", args)
    return is_equal(a, b)

lt = _ordering("<", lambda a, b: a < b)
lte = _ordering("<=", lambda a, b: a <= b)
gt = _ordering(">", lambda a, b: a > b)
gte = _ordering(">=", lambda a, b: a >= b)

# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[list[Term]], Term]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
}


def register(env: Environment) -> Environment:
    env.update({name: Builtin(name, fn) for name, fn in BUILTINS.items()})
    return env


def default_env() -> Environment:
    """A fresh root scope holding the builtin operators."""
    return register(Environment())
