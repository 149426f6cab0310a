"""Shared definitions for operators.

This module centralizes the operators used by the parser and interpreter to
label nodes in the abstract syntax tree. Keeping them in one place prevents
the two components from drifting apart when new operations are added.
Each operator is valued by its source spelling so error messages can show it
directly.


File: operations.py
Version: 0.1.0
License: MIT
"""

from enum import Enum

from bwlang.lexer import TokenType


class OpKind(str, Enum):
    """
    How an operator is applied.
    """
    BINARY = "binary"
    UNARY = "unary"
    LOGICAL = "logical"


class Op(str, Enum):
    """
    Enumeration of supported operators.
    """

    # Arithmetic
    SUB = "-"
    ADD = "+"
    MUL = "*"
    DIV = "/"

    # Comparison
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Boolean
    AND = "and"
    OR = "or"

    # Unary
    NOT = "!"
    NEGATE = "-neg"

    @property
    def kind(self) -> OpKind:
        """
        Whether the operator is binary, unary or short-circuiting.
        """
        if self in (Op.NOT, Op.NEGATE):
            return OpKind.UNARY
        if self in (Op.AND, Op.OR):
            return OpKind.LOGICAL
        return OpKind.BINARY

    @property
    def symbol(self) -> str:
        """
        Spelling of the operator in source code.
        """
        return "-" if self is Op.NEGATE else self.value

    @classmethod
    def from_token(cls, token_type: TokenType, unary: bool = False) -> "Op":
        """
        Map a token type to the operator it spells.

        Raises:
            KeyError: If the token does not spell an operator in that position.
        """
        if unary:
            return _UNARY_TOKENS[token_type]
        return _BINARY_TOKENS[token_type]

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the source spelling for nicer debug output.
        """
        return self.symbol


_BINARY_TOKENS = {
    TokenType.MINUS: Op.SUB,
    TokenType.PLUS: Op.ADD,
    TokenType.STAR: Op.MUL,
    TokenType.SLASH: Op.DIV,
    TokenType.EQUAL_EQUAL: Op.EQUAL,
    TokenType.BANG_EQUAL: Op.NOT_EQUAL,
    TokenType.GREATER: Op.GREATER,
    TokenType.GREATER_EQUAL: Op.GREATER_EQUAL,
    TokenType.LESS: Op.LESS,
    TokenType.LESS_EQUAL: Op.LESS_EQUAL,
    TokenType.AND: Op.AND,
    TokenType.OR: Op.OR,
}

_UNARY_TOKENS = {
    TokenType.BANG: Op.NOT,
    TokenType.NOT: Op.NOT,
    TokenType.MINUS: Op.NEGATE,
}


__all__ = ["Op", "OpKind"]
