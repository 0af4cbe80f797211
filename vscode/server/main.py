"""
Moonlet Language Server entry point.

This server provides basic language features for Moonlet source files using
`pygls`. It reuses the Moonlet lexer and parser to publish lex and parse
errors as diagnostics, list calls and ``do`` blocks as document symbols, and
show hover text for the standard builtins.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from moonletlang import parse_source
from moonletlang.exceptions import LexException, ParseException
from moonletlang.nodes import DoBlock, FunctionCall, Node
from moonletlang.stdlib import Builtin

BUILTIN_DOCS = {
    Builtin.PRINT.value: "print(...): write the arguments with no separator, then a newline.",
    Builtin.WARN.value: "warn(...): like print, highlighted in yellow.",
}


def _line_range(line: int, start: int = 0, length: int = 1) -> Range:
    """Build a single-line range from 1-based ``line`` and 0-based ``start``."""
    line = max(line - 1, 0)
    return Range(Position(line, start), Position(line, start + max(length, 1)))


def diagnostics_for(text: str, uri: str = "<string>") -> List[Diagnostic]:
    """Return a diagnostic for the first lex or parse error in ``text``."""
    try:
        parse_source(text, uri)
    except (LexException, ParseException) as e:
        column = (e.column or 1) - 1
        return [
            Diagnostic(
                range=_line_range(e.line or 1, column),
                message=e.reason,
                severity=DiagnosticSeverity.Error,
                source="moonlet",
            )
        ]
    return []


def _node_symbol(node: Node) -> DocumentSymbol:
    """Convert a node to a document symbol, nesting ``do`` block bodies."""
    rng = _line_range(node.line)
    if isinstance(node, FunctionCall):
        return DocumentSymbol(
            name=node.name,
            kind=SymbolKind.Function,
            range=rng,
            selection_range=rng,
            detail=f"{len(node.arguments)} argument(s)",
        )
    if isinstance(node, DoBlock):
        return DocumentSymbol(
            name="do",
            kind=SymbolKind.Namespace,
            range=rng,
            selection_range=rng,
            children=[_node_symbol(child) for child in node.body],
        )
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def symbols_for(text: str, uri: str = "<string>") -> List[DocumentSymbol]:
    """Return document symbols for ``text``, or none if it does not parse."""
    try:
        nodes = parse_source(text, uri)
    except (LexException, ParseException):
        return []
    return [_node_symbol(node) for node in nodes]


class MoonletLanguageServer(LanguageServer):
    """Language server for Moonlet source files."""

    def __init__(self) -> None:
        super().__init__("moonlet-ls", "v0.1")
        self.documents: Dict[str, str] = {}

    def update_document(self, uri: str, text: str) -> None:
        """Store ``text`` for ``uri`` and publish its diagnostics."""
        self.documents[uri] = text
        self.publish_diagnostics(uri, diagnostics_for(text, uri))


lang_server = MoonletLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MoonletLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Check a document when it is opened."""
    ls.update_document(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MoonletLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-check a document when it changes."""
    if params.content_changes:
        ls.update_document(params.text_document.uri, params.content_changes[0].text)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: MoonletLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the builtin under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if word not in BUILTIN_DOCS:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=BUILTIN_DOCS[word])
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: MoonletLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    text = ls.documents.get(params.text_document.uri)
    if text is None:
        text = ls.workspace.get_text_document(params.text_document.uri).source
    return symbols_for(text, params.text_document.uri)


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
