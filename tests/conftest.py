import pytest

from toylisp.builtin.env_builtin import make_global_env
from toylisp.interpreter import Interpreter
from toylisp.reader.parser import read


@pytest.fixture
def env():
    """Fresh root environment with nil and the builtin primitives."""
    return make_global_env()


@pytest.fixture
def interp(env):
    return Interpreter(env)


@pytest.fixture
def run(interp):
    """Evaluate a snippet and return the rendering of its last value."""
    def _run(source: str) -> str:
        return str(interp.eval(source)[-1])
    return _run


def read_one(source: str):
    exprs = read(source)
    assert len(exprs) == 1
    return exprs[0]
