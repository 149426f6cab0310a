"""
Tests for while and for loops in bwlang
"""
import pytest

from bwlang.exceptions import UndeclaredVariableError

from bwlang.tests.utils import output_lines, run_source


def test_while_loop(capsys):
    """
    Test a counting while loop.
    """
    run_source("var i = 0;\nwhile (i < 3) { print i; i = i + 1; }\n")
    assert output_lines(capsys) == ["0", "1", "2"]


def test_while_false_never_runs(capsys):
    """
    Test that the condition is checked before the first iteration.
    """
    run_source("while (false) print \"never\";\nprint \"done\";\n")
    assert output_lines(capsys) == ["done"]


def test_for_loop_and_its_scope(capsys):
    """
    Test that a for loop runs and its variable is local to the loop.
    """
    source = "for (var i = 0; i < 3; i = i + 1) print i;\n"
    run_source(source)
    assert output_lines(capsys) == ["0", "1", "2"]

    with pytest.raises(UndeclaredVariableError):
        run_source(source + "print i;\n")


def test_for_with_outer_variable(capsys):
    """
    Test a for loop driving a variable declared outside it.
    """
    source = (
        "var total = 0;\n"
        "var i;\n"
        "for (i = 1; i <= 4; i = i + 1) total = total + i;\n"
        "print total;\n"
        "print i;\n"
    )
    run_source(source)
    assert output_lines(capsys) == ["10", "5"]


def test_factorial_loop(capsys):
    """
    Test a loop inside a function.
    """
    source = (
        "fun fact(n) {\n"
        "    var result = 1;\n"
        "    while (n > 1) {\n"
        "        result = result * n;\n"
        "        n = n - 1;\n"
        "    }\n"
        "    return result;\n"
        "}\n"
        "print fact(5);\n"
    )
    run_source(source)
    assert output_lines(capsys) == ["120"]


def test_closures_in_loop_share_scope(capsys):
    """
    Test that closures made in a loop body capture that iteration's block scope.
    """
    source = (
        "var first;\n"
        "var second;\n"
        "for (var i = 0; i < 2; i = i + 1) {\n"
        "    var j = i;\n"
        "    fun get() { return j; }\n"
        "    if (i == 0) first = get; else second = get;\n"
        "}\n"
        "print first();\n"
        "print second();\n"
    )
    run_source(source)
    assert output_lines(capsys) == ["0", "1"]
