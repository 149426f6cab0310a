"""
Main parser entry point for bwlang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`bwlang.parser.expressions` and `bwlang.parser.statements`.

The parser never backtracks and does not recover from errors: the first
unexpected token aborts the whole unit with a `ParseError` carrying that
token's position.


File: parser.py
Version: 0.1.0
License: MIT
"""

from bwlang.exceptions import ExpectedTokenError, ParseError, UnexpectedEndOfInputError
from bwlang.lexer import KEYWORDS, Token, TokenType
from bwlang.source import FilePosition

from . import expressions as _expr
from . import statements as _stmt


_SPELLINGS = {token_type: lexeme for lexeme, token_type in KEYWORDS.items()}
_SPELLINGS.update({
    TokenType.LEFT_PAREN: '(',
    TokenType.RIGHT_PAREN: ')',
    TokenType.LEFT_BRACE: '{',
    TokenType.RIGHT_BRACE: '}',
    TokenType.COMMA: ',',
    TokenType.DOT: '.',
    TokenType.MINUS: '-',
    TokenType.PLUS: '+',
    TokenType.SEMICOLON: ';',
    TokenType.STAR: '*',
    TokenType.SLASH: '/',
    TokenType.BANG: '!',
    TokenType.BANG_EQUAL: '!=',
    TokenType.EQUAL: '=',
    TokenType.EQUAL_EQUAL: '==',
    TokenType.GREATER: '>',
    TokenType.GREATER_EQUAL: '>=',
    TokenType.LESS: '<',
    TokenType.LESS_EQUAL: '<=',
})


def describe(token_type: TokenType) -> str:
    """
    Human readable name of a token type for error messages.
    """
    if token_type in _SPELLINGS:
        return f"'{_SPELLINGS[token_type]}'"
    return token_type.value.lower().replace('_', ' ')


class Parser:
    """bwlang parser."""

    def __init__(self, tokens: list[Token], file: str | None = None):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances. An ``EOF`` token is
                appended when the list does not already end with one.
            file (str): Optional name of the script, used in error messages.
        """
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            last = self.tokens[-1].position if self.tokens else FilePosition(1, 1, 0)
            end = FilePosition(last.line, last.column + last.length, 0)
            self.tokens.append(Token(TokenType.EOF, '', end))
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def error(self, expected: str, token: Token | None = None) -> ParseError:
        """
        Build the error for finding ``token`` where ``expected`` was required.
        """
        tok = token if token is not None else self.curr_token
        if tok.type == TokenType.EOF:
            return UnexpectedEndOfInputError(expected, tok.position, self.source_file)
        return ExpectedTokenError(expected, tok.lexeme, tok.position, self.source_file)

    def check(self, *token_types: TokenType) -> bool:
        """
        Return True if the current token is one of ``token_types``.
        """
        return self.curr_token.type in token_types

    def eat(self, token_type: TokenType, expected: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            expected (str): Description used in the error message.

        Returns:
            Token: The consumed token.

        Raises:
            ExpectedTokenError: If the token does not match the expected type.
            UnexpectedEndOfInputError: If the input ended instead.
        """
        if self.curr_token.type != token_type:
            raise self.error(expected or describe(token_type))
        tok = self.curr_token
        if self.position + 1 < len(self.tokens):
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok


    # Expression wrappers
    def primary(self):
        """
        Parse a literal, variable or parenthesized group.
        """
        return _expr.parse_primary(self)

    def grouping(self):
        """
        Parse a parenthesized expression.
        """
        return _expr.parse_grouping(self)

    def call(self):
        """
        Parse a primary followed by any number of argument lists.
        """
        return _expr.parse_call(self)

    def unary(self):
        """
        Parse a prefix '!', 'not' or '-' expression.
        """
        return _expr.parse_unary(self)

    def factor(self):
        """
        Parse multiplication and division.
        """
        return _expr.parse_factor(self)

    def term(self):
        """
        Parse addition and subtraction.
        """
        return _expr.parse_term(self)

    def comparison(self):
        """
        Parse relational operators.
        """
        return _expr.parse_comparison(self)

    def equality(self):
        """
        Parse '==' and '!='.
        """
        return _expr.parse_equality(self)

    def logical_and(self):
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def logical_or(self):
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def assignment(self):
        """
        Parse a right-associative assignment.
        """
        return _expr.parse_assignment(self)

    def expr(self):
        """
        Parse a full expression starting from the lowest precedence.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def block(self):
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_declaration(self):
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_declaration(self)

    def parse_func_def(self):
        """
        Parse a function definition statement.
        """
        return _stmt.parse_func_def(self)

    def parse_print(self):
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_return(self):
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self):
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def parse_for(self):
        """
        Parse a 'for' loop into its 'while' form.
        """
        return _stmt.parse_for(self)

    def parse_expression_statement(self):
        """
        Parse an expression followed by ';'.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> list:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        try:
            while self.curr_token.type != TokenType.EOF:
                statements.append(self.statement())
        except RecursionError:
            raise ParseError(
                "Program nested too deeply", self.curr_token.position, self.source_file
            ) from None
        return statements

    def parse_expression(self):
        """
        Parse the full input as a single expression.

        Raises:
            ExpectedTokenError: If anything follows the expression.
        """
        try:
            node = self.expr()
        except RecursionError:
            raise ParseError(
                "Expression nested too deeply", self.curr_token.position, self.source_file
            ) from None
        if self.curr_token.type != TokenType.EOF:
            raise self.error("end of input")
        return node


def parse(tokens: list[Token], file: str | None = None) -> list:
    """
    Parse ``tokens`` into a list of statements.
    """
    return Parser(tokens, file).parse()


def parse_expression(tokens: list[Token], file: str | None = None):
    """
    Parse ``tokens`` as exactly one expression.
    """
    return Parser(tokens, file).parse_expression()
