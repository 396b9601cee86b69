from __future__ import annotations

from pathlib import Path
from typing import Iterator

from loguru import logger

from lispy import LispValue
from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import read
from lispy.types.environment import Environment
from lispy.types.values import Exit


class Interpreter:
    """
    Orchestrates reading and evaluating Lispy code.
    Owns a root Environment, populated with the builtins, across calls.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def eval(self, code: str) -> LispValue:
        """Read `code` and evaluate it as one expression list.

        As at the prompt, the outer parentheses are implicit: "+ 1 2" and
        "(+ 1 2)" both evaluate to 3.
        Raises LispySyntaxError if the text does not parse.
        """
        return evaluate(self.env, read(code))

    def eval_each(self, code: str) -> Iterator[LispValue]:
        """Evaluate each top-level expression of `code` in turn.

        Stops after the first expression that evaluates to Exit.
        """
        for expr in read(code):
            result = evaluate(self.env, expr)
            yield result
            if result is Exit:
                logger.debug("exit requested, stopping")
                return

    def load(self, path: str | Path) -> list[LispValue]:
        """Evaluate every top-level expression of a source file."""
        logger.debug("loading {}", path)
        return list(self.eval_each(Path(path).read_text()))
