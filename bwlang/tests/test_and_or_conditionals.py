"""
Tests for 'and', 'or' and 'if' in bwlang
"""
from bwlang.interpreter import Interpreter

from bwlang.tests.utils import output_lines, run_source


def test_logical_operators_yield_booleans():
    """
    Test that and/or reduce their operands to true or false.
    """
    interpreter = Interpreter("<test>")
    assert interpreter.interpret('nil or "x"') == "true"
    assert interpreter.interpret("1 and 2") == "true"
    assert interpreter.interpret("1 and nil") == "false"
    assert interpreter.interpret("false or false") == "false"


def test_short_circuit_skips_right_operand(capsys):
    """
    Test that the right operand is only evaluated when it decides the result.
    """
    source = (
        "fun side(v) { print \"side\"; return v; }\n"
        "print false and side(true);\n"
        "print true or side(false);\n"
        "print true and side(false);\n"
        "print nil or side(true);\n"
    )
    run_source(source)
    assert output_lines(capsys) == ["false", "true", "side", "false", "side", "true"]


def test_short_circuit_skips_undeclared_names():
    """
    Test that a skipped operand is never looked up.
    """
    interpreter = Interpreter("<test>")
    assert interpreter.interpret("false and missing") == "false"
    assert interpreter.interpret("true or missing") == "true"


def test_if_uses_truthiness(capsys):
    """
    Test that 0 and "" take the then branch and nil takes the else branch.
    """
    source = (
        "if (0) print \"zero is truthy\"; else print \"no\";\n"
        "if (nil) print \"nil\"; else print \"nil is falsey\";\n"
        "if (\"\") print \"empty string\";\n"
        "if (false) print \"skipped\";\n"
    )
    run_source(source)
    assert output_lines(capsys) == ["zero is truthy", "nil is falsey", "empty string"]


def test_else_if_chain(capsys):
    """
    Test chained else-if branches.
    """
    source = (
        "fun classify(n) {\n"
        "    if (n < 0) return \"negative\";\n"
        "    else if (n == 0) return \"zero\";\n"
        "    else return \"positive\";\n"
        "}\n"
        "print classify(-2);\n"
        "print classify(0);\n"
        "print classify(9);\n"
    )
    run_source(source)
    assert output_lines(capsys) == ["negative", "zero", "positive"]
