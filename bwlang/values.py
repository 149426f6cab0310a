"""Runtime values.

Values are plain Python objects:

==========  ==========================
bwlang      Python
==========  ==========================
Number      ``float``
String      ``str``
Bool        ``bool``
Nil         ``None``
Callable    :class:`FunctionValue`
==========  ==========================

This module holds the rules that depend only on values: kind names for error
messages, truthiness, equality, ordering and the display form used by
``print`` and the REPL.


File: values.py
Version: 0.1.0
License: MIT
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from bwlang.environment import Environment

if TYPE_CHECKING:
    from bwlang.nodes import Block


@dataclass(eq=False)
class FunctionValue:
    """Runtime representation of a function value."""

    name: str
    params: tuple[str, ...]
    body: "Block"
    # Scope the function was declared in, shared rather than copied.
    closure: Environment = field(repr=False)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Returned:
    """A ``return`` in flight towards the call that will catch it."""

    value: Any = None


def kind_name(value: Any) -> str:
    """
    Name of the value's kind as shown in error messages.
    """
    if value is None:
        return "Nil"
    if isinstance(value, bool):
        return "Bool"
    if isinstance(value, float):
        return "Number"
    if isinstance(value, str):
        return "String"
    if isinstance(value, FunctionValue):
        return "Callable"
    raise TypeError(f"Not a bwlang value: {value!r}")


def is_truthy(value: Any) -> bool:
    """
    Only nil and false are falsey; 0 and "" are truthy.
    """
    return not (value is None or value is False)


def format_number(value: float) -> str:
    """
    Shortest decimal that reads back as ``value``, without exponent and
    without a trailing ``.0``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # repr gives the shortest round-trip digits
    text = format(Decimal(repr(value)), "f")
    return text.removesuffix(".0")


def display(value: Any) -> str:
    """
    Return the string ``print`` writes for ``value``.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, FunctionValue):
        return value.name
    raise TypeError(f"Not a bwlang value: {value!r}")


def values_equal(left: Any, right: Any) -> bool:
    """
    Structural equality for values of the same kind. Functions are equal
    only to themselves and values of different kinds are never equal.
    """
    if kind_name(left) != kind_name(right):
        return False
    if isinstance(left, FunctionValue):
        return left is right
    return left == right


_ORDERED_KINDS = ("Number", "String", "Bool")


def compare(left: Any, right: Any) -> int | None:
    """
    Three-way comparison of two values of the same orderable kind.

    Returns:
        -1, 0 or 1, or None when the values cannot be ordered (different
        kinds, nil, functions, or a NaN operand).
    """
    kind = kind_name(left)
    if kind != kind_name(right) or kind not in _ORDERED_KINDS:
        return None
    if left < right:
        return -1
    if left > right:
        return 1
    if left == right:
        return 0
    return None
