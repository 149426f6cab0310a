"""
Tests for the editor symbol index and diagnostics in bwlang
"""
from lsprotocol.types import DiagnosticSeverity, Position, Range, SymbolKind

from bwlang.server import BwlLanguageServer
from bwlang.symbols import analyze

URI = "file:///workspace/main.bwl"


def test_collects_top_level_symbols():
    """
    Test that functions and variables declared at the top level are indexed.
    """
    symbols, diagnostics = analyze(
        URI, "var a = 1;\nfun add(x, y) { var inner = x; return inner + y; }\n{ var hidden; }\n"
    )
    assert diagnostics == []
    assert [(s.name, s.kind, s.line, s.detail) for s in symbols] == [
        ("a", SymbolKind.Variable, 0, "var a"),
        ("add", SymbolKind.Function, 1, "fun add(x, y)"),
    ]
    assert symbols[1].range == Range(Position(1, 0), Position(1, 3))


def test_parse_error_becomes_diagnostic():
    """
    Test that the first parse error is reported with its range and kind.
    """
    symbols, diagnostics = analyze(URI, "var = 1;")
    assert symbols == []
    (diagnostic,) = diagnostics
    assert diagnostic.range == Range(Position(0, 4), Position(0, 5))
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.code == "ExpectedToken"
    assert diagnostic.source == "bwl"


def test_lex_error_becomes_diagnostic():
    """
    Test that lexing errors are reported too.
    """
    _, diagnostics = analyze(URI, "print 1 & 2;")
    assert diagnostics[0].code == "BadCharacter"
    assert diagnostics[0].message == "Unexpected character '&'"


def test_server_keeps_last_good_symbols():
    """
    Test that a broken edit does not wipe the index for a document.
    """
    server = BwlLanguageServer()
    assert server.update_index(URI, "fun main() {}\n") == []
    assert [s.name for s in server.global_symbols["main"]] == ["main"]

    diagnostics = server.update_index(URI, "fun main( {}\n")
    assert len(diagnostics) == 1
    assert [s.name for s in server.symbols_by_uri[URI]] == ["main"]

    server.update_index(URI, "var renamed;\n")
    assert "main" not in server.global_symbols
    assert "renamed" in server.global_symbols
