import pytest

from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate each line in order (one prompt line each); return the last result."""

    def _run(*lines):
        result = None
        for line in lines:
            result = interp.eval(line)
        return result

    return _run
