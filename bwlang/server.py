"""
bwlang Language Server entry point.

This server provides basic language features for bwlang source files using
`pygls`. It reuses the bwlang lexer and parser to build a simple symbol index
supporting definition lookup, hover information, and document symbols, and
publishes lex and parse errors as diagnostics.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    DefinitionParams,
    Diagnostic,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
)
from pygls.server import LanguageServer

from bwlang import __version__
from bwlang.symbols import BwlSymbol, analyze


class BwlLanguageServer(LanguageServer):
    """Language server for bwlang source files."""

    def __init__(self) -> None:
        super().__init__("bwl-ls", f"v{__version__}")
        self.symbols_by_uri: Dict[str, List[BwlSymbol]] = {}
        self.global_symbols: Dict[str, List[BwlSymbol]] = {}
        self.indexed_workspace = False

    def _index_workspace(self) -> None:
        """Parse all `.bwl` files under the current workspace."""
        root = self.workspace.root_path
        if not root:
            self.indexed_workspace = True
            return
        for path in Path(root).rglob("*.bwl"):
            uri = path.as_uri()
            if uri in self.symbols_by_uri:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except OSError:
                continue
            self.update_index(uri, text)
        self.indexed_workspace = True

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text``, update the symbol index for ``uri`` and return its diagnostics.

        A document that fails to parse keeps the symbols of its last good version.
        """
        symbols, diagnostics = analyze(uri, text)
        if not diagnostics:
            self.symbols_by_uri[uri] = symbols
            self._rebuild_global_index()
        return diagnostics

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup_word(self, uri: str, params) -> Optional[BwlSymbol]:
        """Return the symbol named by the word under the cursor, preferring ``uri``."""
        doc = self.workspace.get_text_document(uri)
        word = doc.word_at_position(params.position)
        if not word:
            return None
        if not self.indexed_workspace:
            self._index_workspace()
        matches = self.global_symbols.get(word)
        if not matches:
            return None
        for sym in matches:
            if sym.uri == uri:
                return sym
        return matches[0]


lang_server = BwlLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: BwlLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    uri = params.text_document.uri
    ls.publish_diagnostics(uri, ls.update_index(uri, params.text_document.text))


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: BwlLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    uri = params.text_document.uri
    doc = ls.workspace.get_text_document(uri)
    ls.publish_diagnostics(uri, ls.update_index(uri, doc.source))


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: BwlLanguageServer, params: DefinitionParams):
    """Return the definition location for the symbol under the cursor."""
    sym = ls.lookup_word(params.text_document.uri, params)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=sym.range)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: BwlLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the symbol under the cursor."""
    sym = ls.lookup_word(params.text_document.uri, params)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: BwlLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=sym.range,
                selection_range=sym.range,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
