"""
Expression parsing utilities for bwlang.

These functions operate on a `bwlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, one function per
precedence level. Binary levels parse their left operand at the next higher
level and then loop while the current token is one of their operators, which
makes them left-associative. Assignment is the only right-associative level.


File: expressions.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Callable

from bwlang.exceptions import InvalidAssignmentTargetError
from bwlang.lexer import TokenType
from bwlang.nodes import (
    Assign,
    Binary,
    Boolean,
    Call,
    Grouping,
    Logical,
    Nil,
    Number,
    String,
    Unary,
    Variable,
)
from bwlang.operations import Op

if TYPE_CHECKING:
    from bwlang.parser import Parser


# ---- Highest precedence ----

def parse_grouping(parser: 'Parser') -> Grouping:
    """Parse '(' expression ')'."""
    lparen = parser.eat(TokenType.LEFT_PAREN)
    node = parser.expr()
    parser.eat(TokenType.RIGHT_PAREN, "')' after expression")
    return Grouping(node, position=lparen.position)


def parse_primary(parser: 'Parser'):
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == TokenType.NUMBER:
        parser.eat(TokenType.NUMBER)
        return Number(tok.literal, position=tok.position)

    if tok.type == TokenType.STRING:
        parser.eat(TokenType.STRING)
        return String(tok.literal, position=tok.position)

    if tok.type in (TokenType.TRUE, TokenType.FALSE):
        parser.eat(tok.type)
        return Boolean(tok.type == TokenType.TRUE, position=tok.position)

    if tok.type == TokenType.NIL:
        parser.eat(TokenType.NIL)
        return Nil(position=tok.position)

    if tok.type == TokenType.IDENTIFIER:
        parser.eat(TokenType.IDENTIFIER)
        return Variable(tok.lexeme, position=tok.position)

    if tok.type == TokenType.LEFT_PAREN:
        return parser.grouping()

    raise parser.error("expression")


def parse_call(parser: 'Parser'):
    """Parse a primary followed by zero or more argument lists."""
    node = parser.primary()
    while parser.check(TokenType.LEFT_PAREN):
        parser.eat(TokenType.LEFT_PAREN)
        args = []
        if not parser.check(TokenType.RIGHT_PAREN):
            args.append(parser.expr())
            while parser.check(TokenType.COMMA):
                parser.eat(TokenType.COMMA)
                args.append(parser.expr())
        parser.eat(TokenType.RIGHT_PAREN, "')' after arguments")
        node = Call(node, tuple(args), position=node.position)
    return node


def parse_unary(parser: 'Parser'):
    """Parse prefix '!', 'not' and '-'."""
    tok = parser.curr_token
    if tok.type in (TokenType.BANG, TokenType.NOT, TokenType.MINUS):
        parser.eat(tok.type)
        operand = parser.unary()
        return Unary(Op.from_token(tok.type, unary=True), operand, position=tok.position)
    return parser.call()


def _left_assoc(
    parser: 'Parser',
    operand: Callable[[], object],
    token_types: tuple[TokenType, ...],
    node_type=Binary,
):
    """Parse ``operand (op operand)*`` for one precedence level."""
    result = operand()
    while parser.curr_token.type in token_types:
        op_tok = parser.eat(parser.curr_token.type)
        result = node_type(
            Op.from_token(op_tok.type), result, operand(), position=op_tok.position
        )
    return result


def parse_factor(parser: 'Parser'):
    """Parse multiplication and division expressions."""
    return _left_assoc(parser, parser.unary, (TokenType.STAR, TokenType.SLASH))


def parse_term(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    return _left_assoc(parser, parser.factor, (TokenType.PLUS, TokenType.MINUS))


def parse_comparison(parser: 'Parser'):
    """Parse comparison expressions (<, >, <=, >=)."""
    return _left_assoc(
        parser,
        parser.term,
        (TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL),
    )


def parse_equality(parser: 'Parser'):
    """Parse equality expressions (==, !=)."""
    return _left_assoc(
        parser, parser.comparison, (TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL)
    )


def parse_logical_and(parser: 'Parser'):
    """Parse logical AND expressions using the 'and' keyword."""
    return _left_assoc(parser, parser.equality, (TokenType.AND,), Logical)


def parse_logical_or(parser: 'Parser'):
    """Parse logical OR expressions using the 'or' keyword."""
    return _left_assoc(parser, parser.logical_and, (TokenType.OR,), Logical)


def parse_assignment(parser: 'Parser'):
    """
    Parse an assignment. The target is parsed as an ordinary expression
    first and must turn out to be a plain variable.
    """
    node = parser.logical_or()
    if parser.check(TokenType.EQUAL):
        equals = parser.eat(TokenType.EQUAL)
        if not isinstance(node, Variable):
            raise InvalidAssignmentTargetError(equals.position, parser.source_file)
        value = parser.assignment()
        return Assign(node.name, value, position=node.position)
    return node


# ---- Entry point ----

def parse_expr(parser: 'Parser'):
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()
