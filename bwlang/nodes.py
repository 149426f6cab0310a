"""AST node definitions.

Expressions and statements are frozen dataclasses. Child nodes are owned by
their parent and sequences are stored as tuples, so a parsed tree is never
mutated after the parser hands it over. Every node records the position of
the token it started at; positions are ignored when comparing nodes so trees
can be checked structurally.

Statement-level ``if`` and ``while`` are expressions wrapped in
:class:`ExprStmt`; they yield the value of the branch or block that ran,
which only matters when a caller evaluates them directly.


File: nodes.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from bwlang.operations import Op
from bwlang.source import FilePosition
from bwlang.values import format_number


def _position():
    return field(default=None, compare=False, repr=False, kw_only=True)


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Number:
    value: float
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class String:
    value: str
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Boolean:
    value: bool
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Nil:
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Binary:
    """Arithmetic and comparison operators; both operands are always evaluated."""
    op: Op
    left: Expr
    right: Expr
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Unary:
    op: Op
    operand: Expr
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Logical:
    """``and`` / ``or``; the right operand is evaluated only when needed."""
    op: Op
    left: Expr
    right: Expr
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Grouping:
    expression: Expr
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Variable:
    name: str
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Assign:
    name: str
    value: Expr
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Call:
    callee: Expr
    arguments: tuple[Expr, ...]
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class BlockExpr:
    """A scope whose value is that of its last expression statement."""
    statements: tuple[Stmt, ...]
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class If:
    condition: Expr
    then_branch: Stmt
    else_branch: Stmt | None = None
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class While:
    condition: Expr
    body: Stmt
    position: FilePosition | None = _position()


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Print:
    expression: Expr
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class VarDecl:
    """``var name;`` leaves the variable uninitialized, which is not the same as nil."""
    name: str
    initializer: Expr | None = None
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class ExprStmt:
    expression: Expr
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class FuncDef:
    name: str
    params: tuple[str, ...]
    body: Block
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Return:
    value: Expr | None = None
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Block:
    statements: tuple[Stmt, ...]
    position: FilePosition | None = _position()


@dataclass(frozen=True)
class Empty:
    position: FilePosition | None = _position()


Expr = Union[
    Number, String, Boolean, Nil, Binary, Unary, Logical, Grouping,
    Variable, Assign, Call, BlockExpr, If, While,
]
Stmt = Union[Print, VarDecl, ExprStmt, FuncDef, Return, Block, Empty]


def format_node(node) -> str:
    """
    Convert an AST node back to a compact, readable string for debugging.

    Args:
        node: An expression or statement node.

    Returns:
        str: e.g. ``(-123 * (45.67))`` for ``-123 * (45.67)``.
    """
    match node:
        case Number(value=value):
            return format_number(value)
        case String(value=value):
            return f'"{value}"'
        case Boolean(value=value):
            return "true" if value else "false"
        case Nil():
            return "nil"
        case Binary(op=op, left=left, right=right) | Logical(op=op, left=left, right=right):
            return f"({format_node(left)} {op.symbol} {format_node(right)})"
        case Unary(op=op, operand=operand):
            return f"{op.symbol}{format_node(operand)}"
        case Grouping(expression=expression):
            return f"({format_node(expression)})"
        case Variable(name=name):
            return name
        case Assign(name=name, value=value):
            return f"({name} = {format_node(value)})"
        case Call(callee=callee, arguments=arguments):
            return f"{format_node(callee)}({', '.join(format_node(a) for a in arguments)})"
        case BlockExpr(statements=statements) | Block(statements=statements):
            return "{ " + " ".join(format_node(s) for s in statements) + " }"
        case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
            text = f"if ({format_node(condition)}) {format_node(then_branch)}"
            if else_branch is not None:
                text += f" else {format_node(else_branch)}"
            return text
        case While(condition=condition, body=body):
            return f"while ({format_node(condition)}) {format_node(body)}"
        case Print(expression=expression):
            return f"print {format_node(expression)};"
        case VarDecl(name=name, initializer=None):
            return f"var {name};"
        case VarDecl(name=name, initializer=initializer):
            return f"var {name} = {format_node(initializer)};"
        case ExprStmt(expression=expression) if isinstance(expression, (If, While)):
            return format_node(expression)
        case ExprStmt(expression=expression):
            return f"{format_node(expression)};"
        case FuncDef(name=name, params=params, body=body):
            return f"fun {name}({', '.join(params)}) {format_node(body)}"
        case Return(value=None):
            return "return;"
        case Return(value=value):
            return f"return {format_node(value)};"
        case Empty():
            return ";"
    raise TypeError(f"Unknown AST node: {node!r}")
