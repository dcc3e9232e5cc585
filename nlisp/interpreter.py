from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Optional

from nlisp import LispValue
from nlisp.builtin.env_builtin import root_environment
from nlisp.config import get_prelude_path
from nlisp.evaluation.evaluator import evaluate
from nlisp.printer import print_value
from nlisp.reader.parser import parse_text_to_expressions
from nlisp.types.environment import Environment
from nlisp.types.nil import Nil

logger = logging.getLogger(__name__)


def evaluate_program(text: str, env: Environment) -> str:
    """Parse `text`, evaluate each top-level form in order, and print the results.

    The whole text is parsed before anything runs, so a parse error evaluates
    nothing. A runtime error stops at the failing form; bindings made by the
    forms before it stay in `env`.
    """
    exprs = parse_text_to_expressions(text)
    with StringIO() as output:
        for expr in exprs:
            logger.debug("evaluating top-level form %r", expr)
            output.write(print_value(evaluate(expr, env), readably=True))
            output.write("\n")
        return output.getvalue()


class Interpreter:
    """
    Orchestrates reading and evaluating nlisp code.
    Maintains one root Environment across calls.
    """

    def __init__(self, prelude: Optional[str] = None, env: Optional[Environment] = None):
        self.env: Environment = env if env is not None else root_environment()

        prelude_path = get_prelude_path()
        if prelude_path is not None:
            self.eval_file(prelude_path)
        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value (nil if none)."""
        result: LispValue = Nil
        for expr in parse_text_to_expressions(code):
            result = evaluate(expr, self.env)
        return result

    def eval_file(self, path: Path) -> LispValue:
        logger.info("loading %s", path)
        return self.eval(Path(path).read_text(encoding="utf-8"))

    def rep(self, code: str) -> str:
        """Read, evaluate and print: the text a REPL shows for `code`."""
        return evaluate_program(code, self.env)
