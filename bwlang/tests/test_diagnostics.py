"""
Tests for error rendering in bwlang
"""
import re

import pytest

from bwlang.diagnostics import diagnose, format_error
from bwlang.exceptions import ParseError, StackOverflowError
from bwlang.lexer import tokenize
from bwlang.parser import Parser
from bwlang.source import Source

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text: str) -> str:
    """
    Strip terminal colour codes.
    """
    return ANSI.sub("", text)


def parse_error(source: Source) -> ParseError:
    """
    Parse ``source`` and return the error it raises.
    """
    with pytest.raises(ParseError) as exc_info:
        Parser(tokenize(source.content, source.label), source.label).parse()
    return exc_info.value


def test_format_parse_error():
    """
    Test the header, source line and caret of a parse error.
    """
    source = Source.from_string("var a = 1;\nprint 1 print 2;", "script.bwl")
    rendered = plain(format_error(source, parse_error(source)))
    assert rendered.splitlines() == [
        "script.bwl:2:9: parse error: Expected ';' after value but got 'print'",
        "  print 1 print 2;",
        "          ^~~~~",
    ]


def test_caret_at_end_of_line():
    """
    Test that an error at end of input points just past the last character.
    """
    source = Source.from_string("print 1")
    assert plain(diagnose(source, parse_error(source))).splitlines() == [
        "  print 1",
        "         ^",
    ]


def test_error_without_position():
    """
    Test that an error without a position renders the header only.
    """
    source = Source.from_string("", "script.bwl")
    rendered = plain(format_error(source, StackOverflowError()))
    assert rendered == "script.bwl: runtime error: Maximum call depth exceeded"
