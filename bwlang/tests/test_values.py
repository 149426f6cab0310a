"""
Tests for value display, truthiness and comparison in bwlang
"""
import math

import pytest

from bwlang.environment import Environment
from bwlang.interpreter import Interpreter
from bwlang.nodes import Block, Number, format_node
from bwlang.values import (
    FunctionValue,
    compare,
    display,
    format_number,
    is_truthy,
    kind_name,
    values_equal,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (5.0, "5"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e21, "1000000000000000000000"),
        (1e23, "100000000000000000000000"),
        (100.0, "100"),
        (1e-7, "0.0000001"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
        (-0.0, "-0"),
    ],
)
def test_format_number(value, expected):
    """
    Test the shortest round-tripping rendering of numbers.
    """
    assert format_number(value) == expected


def test_display():
    """
    Test the print form of every kind of value.
    """
    func = FunctionValue("greet", (), Block(()), Environment())
    assert display(None) == "nil"
    assert display(True) == "true"
    assert display(False) == "false"
    assert display("raw text") == "raw text"
    assert display(func) == "greet"


def test_kind_names():
    """
    Test the kind names used in error messages.
    """
    func = FunctionValue("f", ("x",), Block(()), Environment())
    assert [kind_name(v) for v in (None, True, 1.0, "s", func)] == [
        "Nil", "Bool", "Number", "String", "Callable",
    ]
    assert func.arity == 1


def test_only_nil_and_false_are_falsey():
    """
    Test truthiness; zero and the empty string count as true.
    """
    assert not is_truthy(None)
    assert not is_truthy(False)
    assert is_truthy(0.0)
    assert is_truthy("")
    assert is_truthy(True)


def test_equality_rules():
    """
    Test same-kind structural equality and identity for functions.
    """
    env = Environment()
    f = FunctionValue("f", (), Block(()), env)
    g = FunctionValue("f", (), Block(()), env)
    assert values_equal(None, None)
    assert values_equal("a", "a")
    assert not values_equal(1.0, "1")
    assert not values_equal(0.0, False)
    assert values_equal(f, f)
    assert not values_equal(f, g)
    assert not values_equal(math.nan, math.nan)


def test_compare():
    """
    Test three-way comparison and the unorderable cases.
    """
    assert compare(1.0, 2.0) == -1
    assert compare("b", "a") == 1
    assert compare(False, True) == -1
    assert compare(2.0, 2.0) == 0
    assert compare(1.0, "a") is None
    assert compare(None, None) is None
    assert compare(math.nan, 1.0) is None


def test_large_literal_prints_as_written():
    """
    Test that a big whole number prints the way it was written.
    """
    assert Interpreter().interpret("100000000000000000000000") == "100000000000000000000000"
    assert format_node(Number(1e23)) == display(1e23)
