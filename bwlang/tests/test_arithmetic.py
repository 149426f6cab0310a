"""
Tests for arithmetic, string and comparison operators in bwlang
"""
import pytest

from bwlang.exceptions import RepetitionTooLargeError, TypeMismatchError
from bwlang.interpreter import Interpreter


def evaluate(source: str) -> str:
    """
    Evaluate a single expression and return its display string.
    """
    return Interpreter("<test>").interpret(source)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("5", "5"),
        ('"ab"', "ab"),
        ("true", "true"),
        ("nil", "nil"),
        ("1.0", "1"),
        ("2 + 3 * 4", "14"),
        ("(2 + 3) * 4", "20"),
        ("10 - 4 - 3", "3"),
        ("7 / 2", "3.5"),
        ("-(3 - 5)", "2"),
        ("-3 + 4", "1"),
        ("2 < 3", "true"),
        ('"a" + "b"', "ab"),
        ("false and (1 / 0)", "false"),
        ('"foo" + "bar"', "foobar"),
    ],
)
def test_expression_values(source, expected):
    """
    Test that expressions evaluate to the expected display strings.
    """
    assert evaluate(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1 / 0", "inf"),
        ("-1 / 0", "-inf"),
        ("0 / 0", "NaN"),
    ],
)
def test_division_by_zero_follows_ieee(source, expected):
    """
    Test that dividing by zero gives infinities and NaN rather than an error.
    """
    assert evaluate(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ('"ab" * 3', "ababab"),
        ('2 * "x"', "xx"),
        ('"ab" * 2.7', "abab"),
        ('"ab" * 0', ""),
        ('"ab" * -1', ""),
    ],
)
def test_string_repetition(source, expected):
    """
    Test repeating a string by a number on either side.
    """
    assert evaluate(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("!0", "false"),
        ('!""', "false"),
        ("!nil", "true"),
        ("not true", "false"),
        ("1 < 2", "true"),
        ("2 >= 2", "true"),
        ('"a" < "b"', "true"),
        ("false < true", "true"),
        ("nil == nil", "true"),
        ('1 == "1"', "false"),
        ('1 != "1"', "true"),
        ('1 < "a"', "false"),
        ('1 >= "a"', "false"),
        ("nil < nil", "false"),
        ("0 / 0 == 0 / 0", "false"),
    ],
)
def test_comparisons_and_not(source, expected):
    """
    Test comparisons, including ones across kinds which are simply false.
    """
    assert evaluate(source) == expected


@pytest.mark.parametrize(
    "source, op, left, right",
    [
        ('1 + "a"', "+", "Number", "String"),
        ('"a" - "b"', "-", "String", "String"),
        ("true * 2", "*", "Bool", "Number"),
        ("nil / 1", "/", "Nil", "Number"),
        ('"a" * "b"', "*", "String", "String"),
    ],
)
def test_binary_type_mismatch(source, op, left, right):
    """
    Test that operators reject operands of the wrong kinds.
    """
    with pytest.raises(TypeMismatchError) as exc_info:
        evaluate(source)
    error = exc_info.value
    assert (error.op, error.left_kind, error.right_kind) == (op, left, right)
    assert error.stage == "runtime"


def test_negate_requires_number():
    """
    Test unary minus on a string.
    """
    with pytest.raises(TypeMismatchError) as exc_info:
        evaluate('-"a"')
    assert exc_info.value.op == "-"
    assert exc_info.value.left_kind == "String"
    assert exc_info.value.right_kind is None
    assert str(exc_info.value) == "Cannot apply '-' to String on line 1, column 1 in <test>"


def test_huge_repetition_is_an_evaluation_error():
    """
    Test that repeating a string past the length limit fails cleanly.
    """
    with pytest.raises(RepetitionTooLargeError) as exc_info:
        evaluate('"a" * (100000000000000000000 * 100000000000000000000)')
    error = exc_info.value
    assert error.stage == "runtime"
    assert error.position.column == 5
    assert error.file == "<test>"
    assert evaluate('"" * 100000000000000000000') == ""
