"""
Utility functions shared across bwlang tests.
"""
from bwlang.interpreter import Interpreter
from bwlang.lexer import tokenize
from bwlang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the list of statements.
    """
    return Parser(tokenize(source), "<test>").parse()


def parse_expr_source(source: str):
    """
    Parse source code that holds exactly one expression.
    """
    return Parser(tokenize(source), "<test>").parse_expression()


def run_source(source: str) -> Interpreter:
    """
    Run a program and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.run(parse_source(source))
    return interpreter


def output_lines(capsys) -> list[str]:
    """
    Lines printed since the last capture.
    """
    return capsys.readouterr().out.strip().splitlines()
