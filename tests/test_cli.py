"""
Tests for the command-line interface.
"""

from typer.testing import CliRunner

from calc_engine.cli import app

runner = CliRunner()


def test_eval_success():
    result = runner.invoke(app, ["eval", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert "Result: 14.0" in result.stdout


def test_eval_error_exits_nonzero():
    result = runner.invoke(app, ["eval", "5 / 0"])
    assert result.exit_code == 1
    assert "Error: Division by zero" in result.stdout


def test_op_success():
    result = runner.invoke(app, ["op", "3", "+", "4"])
    assert result.exit_code == 0
    assert "7.0" in result.stdout


def test_op_division_by_zero():
    result = runner.invoke(app, ["op", "1", "/", "0"])
    assert result.exit_code == 1
    assert "division_by_zero" in result.stdout


def test_op_invalid_operator():
    result = runner.invoke(app, ["op", "1", "#", "2"])
    assert result.exit_code == 1
    assert "invalid_operator" in result.stdout


def test_tokens_table():
    result = runner.invoke(app, ["tokens", "sqrt(4)"])
    assert result.exit_code == 0
    assert "function" in result.stdout
    assert "left_paren" in result.stdout


def test_shell_chains_results():
    result = runner.invoke(app, ["shell"], input="3 + 4\n* 2\nquit\n")
    assert result.exit_code == 0
    assert "Result: 7.0" in result.stdout
    assert "Result: 14.0" in result.stdout


def test_shell_ends_on_eof():
    result = runner.invoke(app, ["shell"], input="1 / 0\n")
    assert result.exit_code == 0
    assert "Error: Division by zero" in result.stdout
