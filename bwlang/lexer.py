"""Lexer for bwlang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, lexeme, literal value and source position.

1. Token Definitions
Token types are listed in :class:`TokenType`. Their patterns live in
``TOKEN_SPECIFICATION``; two-character operators (``!=``, ``==``, ``<=``,
``>=``) are tried before their one-character prefixes so the longest match
always wins.

2. Keyword Differentiation
Identifiers are scanned as a maximal run of letters, digits and underscores and
then looked up in ``KEYWORDS``. An exact match turns the token into that
keyword; anything else stays an identifier, so ``orchid`` is never ``or``.

3. Positions
Lines and columns are 1-based. A newline advances the line and resets the
column; string literals may span lines and are accounted for the same way.
Comments (``//`` to end of line) and whitespace produce no tokens.


File: lexer.py
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from bwlang.exceptions import BadCharacterError, InvalidNumberError, UnterminatedStringError
from bwlang.source import FilePosition


class TokenType(str, Enum):
    """
    Enumeration of token kinds.
    """

    # Single-character tokens
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    SEMICOLON = "SEMICOLON"
    STAR = "STAR"
    SLASH = "SLASH"

    # One or two character tokens
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    GREATER = "GREATER"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS = "LESS"
    LESS_EQUAL = "LESS_EQUAL"

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "AND"
    CLASS = "CLASS"
    ELSE = "ELSE"
    FALSE = "FALSE"
    FOR = "FOR"
    FUN = "FUN"
    IF = "IF"
    NIL = "NIL"
    NOT = "NOT"
    OR = "OR"
    PRINT = "PRINT"
    RETURN = "RETURN"
    SUPER = "SUPER"
    THIS = "THIS"
    TRUE = "TRUE"
    VAR = "VAR"
    WHILE = "WHILE"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "not": TokenType.NOT,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, lexeme and position.

    Attributes:
        type (TokenType): The token type.
        lexeme (str): The exact source text of the token.
        position (FilePosition): Where the token starts.
        literal (float | str | None): Value of number and string literals.
    """
    type: TokenType
    lexeme: str
    position: FilePosition = field(compare=False)
    literal: float | str | None = None

    @property
    def line(self) -> int:
        """
        Line the token starts on.
        """
        return self.position.line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        if self.literal is not None:
            return f"Token({self.type}, {self.lexeme!r}, {self.literal!r}, at={self.position})"
        return f"Token({self.type}, {self.lexeme!r}, at={self.position})"


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',        r'[0-9]+(?:\.[0-9]*)?'),
    ('STRING',        r'"(?:[^"\\]|\\[\s\S])*"'),
    ('UNTERMINATED',  r'"'),
    ('IDENTIFIER',    r'[^\W\d]\w*'),

    # Comments
    ('COMMENT',       r'//[^\n]*'),

    # One or two character operators, longest first
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('GREATER_EQUAL', r'>='),
    ('LESS_EQUAL',    r'<='),
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),

    # Delimiters and arithmetic
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('SEMICOLON',     r';'),
    ('STAR',          r'\*'),
    ('SLASH',         r'/'),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[^\S\n]+'),
    ('MISMATCH',      r'.'),
]

_TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)

_ESCAPES = {'n': '\n', 't': '\t', '"': '"', '\\': '\\'}


def _unescape(body: str) -> str:
    """
    Decode the escapes allowed inside string literals. Unknown escapes are
    kept as written.
    """
    return re.sub(
        r'\\([\s\S])',
        lambda m: _ESCAPES.get(m.group(1), m.group(0)),
        body,
    )


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Optional label attached to errors.

    Returns:
        list[Token]: The tokens, ending with a single ``EOF`` token.

    Raises:
        UnterminatedStringError: If a string literal never closes.
        InvalidNumberError: If a numeric literal cannot be read.
        BadCharacterError: If an unexpected character is encountered.
    """
    tokens: list[Token] = []
    line_num = 1
    line_start = 0

    for match_obj in _TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        start = match_obj.start()
        position = FilePosition(line_num, start - line_start + 1, len(value))

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'UNTERMINATED':
            raise UnterminatedStringError(position, file)
        if kind == 'MISMATCH':
            raise BadCharacterError(value, FilePosition(position.line, position.column, 1), file)

        if kind == 'NUMBER':
            try:
                literal = float(value)
            except ValueError as e:
                raise InvalidNumberError(value, position, file) from e
            tokens.append(Token(TokenType.NUMBER, value, position, literal))
        elif kind == 'STRING':
            tokens.append(Token(TokenType.STRING, value, position, _unescape(value[1:-1])))
            newlines = value.count('\n')
            if newlines:
                line_num += newlines
                line_start = start + value.rindex('\n') + 1
        elif kind == 'IDENTIFIER':
            tokens.append(Token(KEYWORDS.get(value, TokenType.IDENTIFIER), value, position))
        else:
            tokens.append(Token(TokenType[kind], value, position))

    tokens.append(Token(TokenType.EOF, '', FilePosition(line_num, len(code) - line_start + 1, 0)))
    return tokens
