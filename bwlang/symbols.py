"""Source analysis for editor tooling.

Lexes and parses a document without running it, and reports either the
top-level symbols it declares or the first lex/parse error as an LSP
diagnostic. Used by :mod:`bwlang.server`.


File: symbols.py
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from lsprotocol.types import (
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    SymbolKind,
)

from bwlang.exceptions import BwlError, LexError, ParseError
from bwlang.lexer import tokenize
from bwlang.nodes import FuncDef, VarDecl
from bwlang.parser import Parser


@dataclass
class BwlSymbol:
    """Represents a top-level symbol in a bwlang file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    detail: str

    @property
    def range(self) -> Range:
        return Range(Position(self.line, 0), Position(self.line, len(self.name)))


def collect_symbols(uri: str, statements: list) -> List[BwlSymbol]:
    """Extract top-level functions and variables. Lines are 0-based."""
    symbols: List[BwlSymbol] = []
    for node in statements:
        if isinstance(node, FuncDef):
            detail = f"fun {node.name}({', '.join(node.params)})"
            symbols.append(
                BwlSymbol(node.name, SymbolKind.Function, uri, node.position.line - 1, detail)
            )
        elif isinstance(node, VarDecl):
            detail = f"var {node.name}"
            symbols.append(
                BwlSymbol(node.name, SymbolKind.Variable, uri, node.position.line - 1, detail)
            )
    return symbols


def error_to_diagnostic(error: BwlError) -> Diagnostic:
    """Convert an interpreter error into an LSP diagnostic."""
    if error.position is None:
        rng = Range(Position(0, 0), Position(0, 0))
    else:
        line = error.position.line - 1
        start = error.position.column - 1
        rng = Range(Position(line, start), Position(line, start + max(error.position.length, 1)))
    return Diagnostic(
        range=rng,
        message=error.message,
        severity=DiagnosticSeverity.Error,
        source="bwl",
        code=error.kind,
    )


def analyze(uri: str, text: str) -> Tuple[List[BwlSymbol], List[Diagnostic]]:
    """Parse ``text`` and return its symbols and diagnostics."""
    try:
        tokens = tokenize(text, uri)
        statements = Parser(tokens, uri).parse()
    except (LexError, ParseError) as e:
        return [], [error_to_diagnostic(e)]
    return collect_symbols(uri, statements), []
