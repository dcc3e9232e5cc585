import pytest

from nlisp.builtin.env_builtin import root_environment
from nlisp.evaluation.evaluator import evaluate
from nlisp.reader.parser import parse_text_to_expressions


@pytest.fixture(autouse=True, scope="session")
def _isolate_config():
    # Session scoped so hypothesis tests can run under it
    with pytest.MonkeyPatch.context() as mp:
        for var in ("NLISP_PRELUDE_PATH", "NLISP_PROMPT", "NLISP_LOG_LEVEL"):
            mp.delenv(var, raising=False)
        yield


@pytest.fixture
def env():
    return root_environment()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against `env`, returning the last value."""

    def _run(source: str):
        last = None
        for form in parse_text_to_expressions(source):
            last = evaluate(form, env)
        return last

    return _run
