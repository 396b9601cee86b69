import pytest
from typer.testing import CliRunner

from lispy import config
from lispy.cli import app
from lispy.errors import LispyConfigError
from lispy.interpreter import Interpreter
from lispy.repl import Repl

runner = CliRunner()


@pytest.fixture
def repl():
    return Repl(Interpreter(), prompt="> ")


def test_repl_prints_results(repl, capsys):
    assert repl.handle_line("+ 1 2") is True
    assert repl.handle_line("(def {x} {1 2})") is True
    assert repl.handle_line("x") is True
    assert capsys.readouterr().out == "3\n()\n{1 2}\n"


def test_repl_prints_errors_and_continues(repl, capsys):
    assert repl.handle_line("(/ 1 0)") is True
    assert repl.handle_line("(+ 1") is True
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Error: Division by zero."
    assert out[1].startswith("<stdin>:1:")


def test_repl_stops_on_exit(repl, capsys):
    assert repl.handle_line("exit") is False
    assert capsys.readouterr().out == ""


def test_repl_survives_unbounded_recursion(repl, capsys):
    repl.handle_line("(def {loop} (\\ {n} {loop n}))")
    assert repl.handle_line("(loop 1)") is True
    assert "Maximum recursion depth exceeded" in capsys.readouterr().out
    assert repl.handle_line("(+ 1 1)") is True


def test_repl_banner(repl, capsys):
    repl.banner()
    assert capsys.readouterr().out.startswith("Lispy version ")


def test_cli_eval():
    result = runner.invoke(app, ["eval", "(+ 1 2)"])
    assert result.exit_code == 0
    assert result.stdout == "3\n"


def test_cli_eval_error_value():
    result = runner.invoke(app, ["eval", "(head {})"])
    assert result.exit_code == 1
    assert "Error: Function 'head' passed {}." in result.stdout


@pytest.mark.parametrize(
    "args, env",
    [
        (["--log-level", "chatty", "eval", "1"], {}),
        (["eval", "1"], {"LISPY_LOG_LEVEL": "chatty"}),
    ],
)
def test_cli_rejects_unknown_log_level(args, env):
    result = runner.invoke(app, args, env=env)
    assert result.exit_code == 2
    assert not isinstance(result.exception, LispyConfigError)


def test_cli_run_file(tmp_path):
    source = tmp_path / "prog.lspy"
    source.write_text(
        "(def {sq} (\\ {x} {* x x}))\n"
        "(def {y} (sq 4))\n"
        "(if (== y 16) {exit} {undefined})\n"
        "(undefined)\n"
    )
    result = runner.invoke(app, ["run", str(source)])
    assert result.exit_code == 0, result.output


def test_cli_run_reports_errors(tmp_path):
    source = tmp_path / "bad.lspy"
    source.write_text("(def {a} 1)\n(+ a nope)\n")
    result = runner.invoke(app, ["run", str(source)])
    assert result.exit_code == 1
    assert "Error: Unbound symbol 'nope'" in result.stdout


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("LISPY_PROMPT", raising=False)
    monkeypatch.delenv("LISPY_LOG_LEVEL", raising=False)
    assert config.get_prompt() == "lispy> "
    assert config.get_log_level() == "WARNING"


def test_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("LISPY_HISTORY_FILE", str(tmp_path / "hist"))
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    assert config.get_history_file() == tmp_path / "hist"
    assert config.get_log_level() == "DEBUG"


def test_config_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LISPY_LOG_LEVEL", "chatty")
    with pytest.raises(LispyConfigError):
        config.get_log_level()
