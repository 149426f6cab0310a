"""Errors.

Three families of errors, one per pipeline stage, that never overlap:

- ``LexError`` raised by :func:`bwlang.lexer.tokenize`
- ``ParseError`` raised by :class:`bwlang.parser.Parser`
- ``EvaluationError`` raised by :class:`bwlang.interpreter.Interpreter`

Every error keeps its message and optional :class:`FilePosition` apart so a
front end can render them however it likes; ``str(error)`` gives the plain
one-line form.


File: exceptions.py
Version: 0.1.0
License: MIT
"""

from bwlang.source import FilePosition


class BwlError(Exception):
    """
    Base class for every error the interpreter core reports.
    """
    stage = "internal"

    def __init__(self, message: str, position: FilePosition | None = None, file: str | None = None):
        self.message = message
        self.position = position
        self.file = file
        super().__init__(message)

    def __str__(self) -> str:
        text = self.message
        if self.position is not None:
            text += f" on line {self.position.line}, column {self.position.column}"
        if self.file is not None:
            text += f" in {self.file}"
        return text

    @property
    def kind(self) -> str:
        """
        Name of the error kind, e.g. ``UnterminatedString``.
        """
        return type(self).__name__.removesuffix("Error")

    def to_dict(self) -> dict:
        """
        Structured form of the error for front ends.
        """
        position = None
        if self.position is not None:
            position = {
                "line": self.position.line,
                "column": self.position.column,
                "length": self.position.length,
            }
        return {
            "stage": self.stage,
            "kind": self.kind,
            "message": self.message,
            "position": position,
        }


# ----------------------------------------------------------------------
# Lexing
# ----------------------------------------------------------------------

class LexError(BwlError):
    """
    Error raised while turning source text into tokens.
    """
    stage = "lex"


class UnterminatedStringError(LexError):
    """
    A string literal with no closing quote.
    """
    def __init__(self, position=None, file=None):
        super().__init__("Unterminated string literal", position, file)


class InvalidNumberError(LexError):
    """
    A numeric literal that cannot be read as a float.
    """
    def __init__(self, lexeme, position=None, file=None):
        self.lexeme = lexeme
        super().__init__(f"Invalid numeric literal '{lexeme}'", position, file)


class BadCharacterError(LexError):
    """
    A character that starts no token.
    """
    def __init__(self, char, position=None, file=None):
        self.char = char
        super().__init__(f"Unexpected character '{char}'", position, file)


# ----------------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------------

class ParseError(BwlError):
    """
    Error raised while building the AST.
    """
    stage = "parse"


class ExpectedTokenError(ParseError):
    """
    The parser needed one thing and found another.
    """
    def __init__(self, expected, found, position=None, file=None):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected} but got '{found}'", position, file)


class UnexpectedEndOfInputError(ParseError):
    """
    The token stream ended in the middle of a construct.
    """
    def __init__(self, expected, position=None, file=None):
        self.expected = expected
        super().__init__(f"Expected {expected} but reached end of input", position, file)


class InvalidAssignmentTargetError(ParseError):
    """
    Something other than a variable on the left of ``=``.
    """
    def __init__(self, position=None, file=None):
        super().__init__("Invalid assignment target", position, file)


# ----------------------------------------------------------------------
# Evaluation
# ----------------------------------------------------------------------

class EvaluationError(BwlError):
    """
    Error raised while executing a program.
    """
    stage = "runtime"


class TypeMismatchError(EvaluationError):
    """
    An operator applied to operands of the wrong kinds.
    """
    def __init__(self, op, left_kind, right_kind=None, position=None, file=None):
        self.op = op
        self.left_kind = left_kind
        self.right_kind = right_kind
        if right_kind is None:
            message = f"Cannot apply '{op}' to {left_kind}"
        else:
            message = f"Cannot apply '{op}' to {left_kind} and {right_kind}"
        super().__init__(message, position, file)


class UndeclaredVariableError(EvaluationError):
    """
    Lookup or assignment of a name no enclosing scope declares.
    """
    def __init__(self, varname, position=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", position, file)


class UninitializedVariableError(EvaluationError):
    """
    Read of a variable declared without a value and never assigned.
    """
    def __init__(self, varname, position=None, file=None):
        self.varname = varname
        super().__init__(f"Variable '{varname}' used before initialization", position, file)


class ArityMismatchError(EvaluationError):
    """
    A call with the wrong number of arguments.
    """
    def __init__(self, name, expected, got, position=None, file=None):
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(
            f"Function '{name}' expects {expected} arguments but got {got}", position, file
        )


class NotCallableError(EvaluationError):
    """
    A call whose callee is not a function.
    """
    def __init__(self, value_kind, position=None, file=None):
        self.value_kind = value_kind
        super().__init__(f"Attempted to call non-function value of kind {value_kind}", position, file)


class StackOverflowError(EvaluationError):
    """
    Interpreted recursion deeper than the host stack allows.
    """
    def __init__(self, position=None, file=None):
        super().__init__("Maximum call depth exceeded", position, file)


class RepetitionTooLargeError(EvaluationError):
    """
    A string repetition whose result would be too long to build.
    """
    def __init__(self, length, count, position=None, file=None):
        self.length = length
        self.count = count
        super().__init__(
            f"Cannot repeat a string of length {length} {count} times", position, file
        )
