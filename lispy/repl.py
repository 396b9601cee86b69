"""Interactive read-eval-print loop."""

from __future__ import annotations

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from lispy import __version__
from lispy.config import get_history_file, get_prompt
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.types.values import Exit


class Repl:
    """Prompt, read one line, evaluate it, print the result, until exit."""

    def __init__(self, interpreter: Interpreter | None = None, *, prompt: str | None = None):
        self.interpreter = interpreter or Interpreter()
        self.prompt = prompt if prompt is not None else get_prompt()

    def _completions(self) -> list[str]:
        return list(self.interpreter.env.root().names())

    def _build_session(self) -> PromptSession:
        history_file = get_history_file()
        history_file.parent.mkdir(parents=True, exist_ok=True)
        return PromptSession(
            history=FileHistory(str(history_file)),
            completer=WordCompleter(self._completions, sentence=True),
        )

    def banner(self) -> None:
        print(f"Lispy version {__version__}")
        print("Press Ctrl+c to exit\n")

    def handle_line(self, line: str) -> bool:
        """Evaluate one line of input and print the outcome.

        Returns False once the line evaluated to Exit.
        """
        try:
            result = self.interpreter.eval(line)
        except LispySyntaxError as ex:
            print(ex)
            return True
        except RecursionError:
            logger.warning("recursion limit reached while evaluating {!r}", line)
            print("Error: Maximum recursion depth exceeded.")
            return True

        if result is Exit:
            return False
        print(result)
        return True

    def run(self) -> None:
        session = self._build_session()
        self.banner()
        logger.info("repl.start history={}", str(get_history_file()))
        while True:
            try:
                line = session.prompt(self.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            if not self.handle_line(line):
                break
        logger.info("repl.stop")
