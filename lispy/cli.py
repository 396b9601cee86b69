"""Typer CLI entrypoints."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from lispy.errors import LispyConfigError, LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.logging_utils import configure_logging
from lispy.repl import Repl
from lispy.types.values import LispError

app = typer.Typer(name="lispy", help="Lispy interpreter", add_completion=False)

LogLevel = Annotated[Optional[str], typer.Option("--log-level", envvar="LISPY_LOG_LEVEL")]


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context, log_level: LogLevel = None) -> None:
    try:
        configure_logging(log_level)
    except LispyConfigError as ex:
        raise typer.BadParameter(str(ex), param_hint="--log-level") from ex
    if ctx.invoked_subcommand is None:
        repl()


@app.command()
def repl() -> None:
    """Start the interactive prompt."""
    Repl().run()


@app.command("eval")
def eval_(expression: Annotated[str, typer.Argument(help="Source to evaluate")]) -> None:
    """Evaluate EXPRESSION and print the result."""
    try:
        result = Interpreter().eval(expression)
    except LispySyntaxError as ex:
        typer.echo(str(ex), err=True)
        raise typer.Exit(code=2)
    typer.echo(str(result))
    if isinstance(result, LispError):
        raise typer.Exit(code=1)


@app.command()
def run(path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True)]) -> None:
    """Evaluate every expression in a source file, printing errors."""
    logger.info("run path={}", str(path))
    failed = False
    try:
        results = Interpreter().load(path)
    except LispySyntaxError as ex:
        typer.echo(f"{path}: {ex}", err=True)
        raise typer.Exit(code=2)
    for result in results:
        if isinstance(result, LispError):
            typer.echo(str(result))
            failed = True
    if failed:
        raise typer.Exit(code=1)


def main() -> None:
    app()
