"""
Tests for the Moonlet language server helpers.
"""
import pytest

pytest.importorskip("pygls")

from lsprotocol.types import DiagnosticSeverity, SymbolKind  # noqa: E402

from vscode.server.main import BUILTIN_DOCS, diagnostics_for, symbols_for  # noqa: E402


def test_valid_document_has_no_diagnostics():
    assert diagnostics_for("print('a')\ndo warn('b') end") == []


def test_parse_error_diagnostic():
    diagnostics = diagnostics_for("print('a'")
    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.source == "moonlet"
    assert diagnostic.message == "Expected ',' or ')' after argument to 'print', but got end of input"
    assert (diagnostic.range.start.line, diagnostic.range.start.character) == (0, 9)


def test_lex_error_diagnostic():
    diagnostics = diagnostics_for("print('ok')\nprint('abc")
    assert diagnostics[0].message == "unfinished string"
    assert (diagnostics[0].range.start.line, diagnostics[0].range.start.character) == (1, 6)


def test_document_symbols():
    symbols = symbols_for("print('a')\ndo\n  warn('b', 'c')\nend")
    assert [(s.name, s.kind) for s in symbols] == [
        ("print", SymbolKind.Function),
        ("do", SymbolKind.Namespace),
    ]
    child = symbols[1].children[0]
    assert (child.name, child.detail, child.range.start.line) == ("warn", "2 argument(s)", 2)


def test_invalid_document_has_no_symbols():
    assert symbols_for("while") == []


def test_builtin_docs_cover_standard_builtins():
    assert set(BUILTIN_DOCS) == {"print", "warn"}
