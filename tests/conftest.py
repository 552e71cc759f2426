import pytest

from malt.builtins import default_env
from malt.evaluation.evaluator import evaluate
from malt.interpreter import Interpreter
from malt.reader.parser import read_str


@pytest.fixture
def env():
    """Fresh root environment with the builtin operators loaded."""
    return default_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Read and evaluate each source string in turn; return the last value."""
    def _run(*sources):
        result = None
        for source in sources:
            result = evaluate(read_str(source), env)
        return result
    return _run
