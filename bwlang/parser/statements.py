"""Statement parsing utilities for bwlang.

These functions operate on a `bwlang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, and function definitions.

Every statement ends with ';' except blocks, 'if', 'while', 'for' and 'fun',
which end with the statement or block that forms their body.


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from bwlang.lexer import TokenType
from bwlang.nodes import (
    Block,
    Boolean,
    Empty,
    ExprStmt,
    FuncDef,
    If,
    Print,
    Return,
    VarDecl,
    While,
)

if TYPE_CHECKING:
    from bwlang.parser import Parser


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        Block: the statements in order.
    """
    tok = parser.eat(TokenType.LEFT_BRACE, "'{'")
    statements = []
    while not parser.check(TokenType.RIGHT_BRACE, TokenType.EOF):
        statements.append(parser.statement())
    parser.eat(TokenType.RIGHT_BRACE, "'}' after block")
    return Block(tuple(statements), position=tok.position)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.type == TokenType.VAR:
        return parser.parse_declaration()
    elif tok.type == TokenType.FUN:
        return parser.parse_func_def()
    elif tok.type == TokenType.PRINT:
        return parser.parse_print()
    elif tok.type == TokenType.RETURN:
        return parser.parse_return()
    elif tok.type == TokenType.IF:
        return parser.parse_if()
    elif tok.type == TokenType.WHILE:
        return parser.parse_while()
    elif tok.type == TokenType.FOR:
        return parser.parse_for()
    elif tok.type == TokenType.LEFT_BRACE:
        return parser.block()
    elif tok.type == TokenType.SEMICOLON:
        parser.eat(TokenType.SEMICOLON)
        return Empty(position=tok.position)
    return parser.parse_expression_statement()


def parse_declaration(parser: 'Parser') -> VarDecl:
    """
    Parse a `var` variable declaration.

    Syntax:
        var <identifier> ;
        var <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        VarDecl: with ``initializer`` None when no value was given.
    """
    tok = parser.eat(TokenType.VAR)
    name = parser.eat(TokenType.IDENTIFIER, "variable name")
    initializer = None
    if parser.check(TokenType.EQUAL):
        parser.eat(TokenType.EQUAL)
        initializer = parser.expr()
    parser.eat(TokenType.SEMICOLON, "';' after variable declaration")
    return VarDecl(name.lexeme, initializer, position=tok.position)


def parse_func_def(parser: 'Parser') -> FuncDef:
    """
    Parse a function definition.

    Syntax:
        fun <name>(<params>) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        FuncDef: name, parameter names and body block.
    """
    start_tok = parser.eat(TokenType.FUN)
    name = parser.eat(TokenType.IDENTIFIER, "function name")
    parser.eat(TokenType.LEFT_PAREN, "'(' after function name")
    params = []
    if not parser.check(TokenType.RIGHT_PAREN):
        params.append(parser.eat(TokenType.IDENTIFIER, "parameter name").lexeme)
        while parser.check(TokenType.COMMA):
            parser.eat(TokenType.COMMA)
            params.append(parser.eat(TokenType.IDENTIFIER, "parameter name").lexeme)
    parser.eat(TokenType.RIGHT_PAREN, "')' after parameters")
    if not parser.check(TokenType.LEFT_BRACE):
        raise parser.error("'{' before function body")
    body = parser.block()
    return FuncDef(name.lexeme, tuple(params), body, position=start_tok.position)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression> ;
    """
    tok = parser.eat(TokenType.PRINT)
    expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "';' after value")
    return Print(expr_node, position=tok.position)


def parse_return(parser: 'Parser') -> Return:
    """
    Parse a 'return' statement. The value is optional and defaults to nil.

    Syntax:
        return ;
        return <expression> ;
    """
    tok = parser.eat(TokenType.RETURN)
    expr_node = None
    if not parser.check(TokenType.SEMICOLON):
        expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "';' after return value")
    return Return(expr_node, position=tok.position)


def parse_if(parser: 'Parser') -> ExprStmt:
    """
    Parse a conditional 'if' statement with an optional else branch. An
    'else' belongs to the nearest 'if'.

    Syntax:
        if ( <condition> ) <statement>
        if ( <condition> ) <statement> else <statement>
    """
    tok = parser.eat(TokenType.IF)
    parser.eat(TokenType.LEFT_PAREN, "'(' after 'if'")
    condition = parser.expr()
    parser.eat(TokenType.RIGHT_PAREN, "')' after if condition")
    then_branch = parser.statement()
    else_branch = None
    if parser.check(TokenType.ELSE):
        parser.eat(TokenType.ELSE)
        else_branch = parser.statement()
    node = If(condition, then_branch, else_branch, position=tok.position)
    return ExprStmt(node, position=tok.position)


def parse_while(parser: 'Parser') -> ExprStmt:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <condition> ) <statement>
    """
    tok = parser.eat(TokenType.WHILE)
    parser.eat(TokenType.LEFT_PAREN, "'(' after 'while'")
    condition = parser.expr()
    parser.eat(TokenType.RIGHT_PAREN, "')' after condition")
    body = parser.statement()
    return ExprStmt(While(condition, body, position=tok.position), position=tok.position)


def parse_for(parser: 'Parser') -> Block:
    """
    Parse a 'for' loop and desugar it.

    Syntax:
        for ( <init>? ; <condition>? ; <increment>? ) <statement>

    Returns:
        Block: ``{ init; while (condition) { body; increment; } }``. A missing
        condition becomes ``true``; a missing init or increment is left out.
    """
    tok = parser.eat(TokenType.FOR)
    parser.eat(TokenType.LEFT_PAREN, "'(' after 'for'")

    if parser.check(TokenType.SEMICOLON):
        parser.eat(TokenType.SEMICOLON)
        initializer = None
    elif parser.check(TokenType.VAR):
        initializer = parser.parse_declaration()
    else:
        initializer = parser.parse_expression_statement()

    condition = None
    if not parser.check(TokenType.SEMICOLON):
        condition = parser.expr()
    parser.eat(TokenType.SEMICOLON, "';' after loop condition")

    increment = None
    if not parser.check(TokenType.RIGHT_PAREN):
        increment = parser.expr()
    parser.eat(TokenType.RIGHT_PAREN, "')' after for clauses")

    body = parser.statement()

    if condition is None:
        condition = Boolean(True, position=tok.position)
    loop_body = [body]
    if increment is not None:
        loop_body.append(ExprStmt(increment, position=increment.position))
    loop = While(condition, Block(tuple(loop_body), position=tok.position), position=tok.position)

    outer = []
    if initializer is not None:
        outer.append(initializer)
    outer.append(ExprStmt(loop, position=tok.position))
    return Block(tuple(outer), position=tok.position)


def parse_expression_statement(parser: 'Parser') -> ExprStmt:
    """
    Parse an expression evaluated for its side effects.

    Syntax:
        <expression> ;
    """
    expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "';' after expression")
    return ExprStmt(expr_node, position=expr_node.position)
