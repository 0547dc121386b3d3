"""Test the command-line entrypoint."""
import io

import pytest

from arithmetic_calculator.main import CliArgs, main, parse_args, separate_expression


def test_main_prints_integer_result(capsys) -> None:
    """A valid expression prints its value and exits with status 0."""
    assert main(["1 + 2 * 3 + -(4 - 5)"]) == 0
    assert capsys.readouterr().out == "8\n"


def test_main_prints_real_result(capsys) -> None:
    assert main(["10 * (5 - 1) + 2.0"]) == 0
    assert capsys.readouterr().out == "42.0\n"


@pytest.mark.parametrize("argv,expected", [
    (["-3"], "-3\n"),
    (["-(4-5)"], "1\n"),
    (["-(4 - 5)"], "1\n"),
    (["-3", "*", "2"], "-6\n"),
    (["--", "-(4 - 5)"], "1\n"),
    (["--log-level", "debug", "-3*-2"], "6\n"),
    (["--log-level=error", "-1", "-", "-1"], "0\n"),
])
def test_main_accepts_leading_minus(argv, expected, capsys) -> None:
    """An expression starting with '-' is never mistaken for an option."""
    assert main(argv) == 0
    assert capsys.readouterr().out == expected


def test_main_joins_expression_words(capsys) -> None:
    """An unquoted expression split into several arguments is joined back."""
    assert main(["(1", "+", "2)", "*", "3"]) == 0
    assert capsys.readouterr().out == "9\n"


def test_main_reports_errors_on_stderr(capsys) -> None:
    """An invalid expression prints its error on stderr and exits with status 1."""
    assert main(["5 / 0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "DivisionByZero" in captured.err


@pytest.mark.parametrize("expression,kind", [
    ("(" * 1500 + "1" + ")" * 1500, "NestingTooDeep"),
    ("3 # 4", "UnrecognizedSymbol"),
    ("(3 + 4", "UnmatchedParenthesis"),
])
def test_main_never_crashes_on_malformed_input(expression, kind, capsys) -> None:
    assert main([expression]) == 1
    assert kind in capsys.readouterr().err


def test_main_handles_huge_literal(capsys) -> None:
    """A literal too long for int() is promoted to a real instead of crashing."""
    assert main(["1" * 5000]) == 0
    assert capsys.readouterr().out == "inf\n"


def test_main_reads_standard_input(monkeypatch, capsys) -> None:
    """Without an expression argument one line is read from standard input."""
    monkeypatch.setattr("sys.stdin", io.StringIO("7 / 2\n1 + 1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "3.5\n"


def test_main_empty_standard_input(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "EmptyExpression" in capsys.readouterr().err


@pytest.mark.parametrize("argv,expected", [
    ([], []),
    (["1 + 1"], ["--", "1 + 1"]),
    (["-3"], ["--", "-3"]),
    (["--log-level", "INFO", "-3"], ["--log-level", "INFO", "--", "-3"]),
    (["--log-level=INFO", "2"], ["--log-level=INFO", "--", "2"]),
    (["--", "-3"], ["--", "-3"]),
    (["-h"], ["-h"]),
])
def test_separate_expression(argv, expected) -> None:
    """The expression is moved behind '--', options before it are left alone."""
    assert separate_expression(argv) == expected


def test_parse_args_defaults() -> None:
    assert parse_args(["2 + 2"]) == CliArgs(expression="2 + 2")
    assert parse_args([]) == CliArgs()


def test_parse_args_has_no_file_mode() -> None:
    """Every argument after the options belongs to the expression, there is no file input."""
    assert parse_args(["--file", "ops.txt"]).expression == "--file ops.txt"


@pytest.mark.parametrize("argv", [
    ["--log-level", "verbose", "1 + 1"],
    ["--log-level"],
])
def test_parse_args_rejects_invalid_log_level(argv) -> None:
    """Invalid options make argparse exit with an error."""
    with pytest.raises(SystemExit):
        parse_args(argv)
