"""bwlang: a small dynamically typed scripting language.

The pipeline is ``tokenize`` -> ``Parser`` -> ``Interpreter``::

    from bwlang import Interpreter

    Interpreter().interpret('print "hello";')


File: __init__.py
Version: 0.1.0
License: MIT
"""

from bwlang.exceptions import BwlError, EvaluationError, LexError, ParseError
from bwlang.interpreter import Interpreter
from bwlang.lexer import Token, TokenType, tokenize
from bwlang.parser import Parser, parse, parse_expression
from bwlang.source import FilePosition, Source

__version__ = "0.1.0"

__all__ = [
    "BwlError",
    "EvaluationError",
    "FilePosition",
    "Interpreter",
    "LexError",
    "ParseError",
    "Parser",
    "Source",
    "Token",
    "TokenType",
    "parse",
    "parse_expression",
    "tokenize",
]
