# Core type aliases for malt's data model.
# Terms are plain Python values where one fits (int, bool, str) and small
# immutable classes where the language needs a distinct variant (Symbol, Nil,
# List, Vector, Map, Closure, Builtin). See malt.types for the classes.
#
# Naming guidance:
# - Term:        any value the language can hold, read or computed.
# - EvaluatorFn: the evaluator callable handed to special forms.

from typing import Any, Callable

# Runtime value alias
Term = Any

# Evaluator function type: Python evaluator used inside special forms
EvaluatorFn = Callable[..., Term]

__version__ = "0.1.0"
