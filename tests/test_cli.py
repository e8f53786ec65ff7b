import re

import pytest

from prefn.cli import Shell, diagnose, main
from prefn.errors import PrefnSyntaxError
from prefn.interpreter import Interpreter

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def test_prints_result(capsys):
    assert main(["fn[* . .] fn(fn(2))"]) == 0
    assert capsys.readouterr().out.strip() == "16"


def test_end_of_input_exits_cleanly(capsys):
    assert main(["fn[+ . .]"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "source,message",
    [
        ("/ 1 0", "division by zero"),
        ("fn(1)", "function applied before any definition"),
        ("+ 1 a", "unexpected character 'a'"),
    ]
)
def test_errors_exit_nonzero(capsys, source, message):
    assert main([source]) == 1
    assert message in capsys.readouterr().err


def test_deep_nesting_is_reported(capsys):
    assert main(["--engine", "stream", "+ 1 " * 100_000 + "0"]) == 1
    assert "nested too deeply" in capsys.readouterr().err


def test_tree_engine_handles_deep_nesting(capsys):
    assert main(["--engine", "tree", "+ 1 " * 5_000 + "0"]) == 0
    assert capsys.readouterr().out.strip() == "5000"


def test_int_width_option(capsys):
    assert main(["--int-width", "8", "* 16 16"]) == 0
    assert capsys.readouterr().out.strip() == "0"


def test_tokens_option(capsys):
    assert main(["--tokens", "fn[+ . .] fn(1)"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == [
        "function", "lbracket", "plus", "dot", "dot", "rbracket",
        "function", "lparen", "number", "rparen",
    ]


def test_tree_option(capsys):
    assert main(["--tree", "+ 1   2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("BinOp(symbol='+'")
    assert out[1] == "+ 1 2"


def test_diagnose_marks_position():
    error = PrefnSyntaxError("unexpected character 'a'", "+ 1 a", 4)
    lines = ANSI.sub("", diagnose(error)).splitlines()
    assert "a" in lines[0]
    assert lines[1].index("^") == 2 + 4


def test_diagnose_without_location():
    assert diagnose(PrefnSyntaxError("boom")) == ""


def test_shell_evaluates_each_line_independently(capsys):
    shell = Shell(Interpreter())
    shell.onecmd("fn[+ . 1] fn(1)")
    shell.onecmd("fn(1)")
    captured = capsys.readouterr()
    assert captured.out.strip() == "2"
    assert "function applied before any definition" in captured.err


def test_shell_exit():
    shell = Shell(Interpreter())
    assert shell.onecmd("exit") is True
    assert not shell.emptyline()


def test_shell_keeps_running_after_an_error(capsys):
    shell = Shell(Interpreter())
    assert not shell.onecmd("/ 1 0")
    assert not shell.onecmd("+ 1 2")
    assert capsys.readouterr().out.strip() == "3"
