"""
Tests for the moonlet command line entry point.
"""
from pathlib import Path

import moonlet


def test_help(capsys):
    assert moonlet.main(["moonlet", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_bad_arguments(capsys):
    assert moonlet.main(["moonlet", "-x", "y", "z"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_inline_source(capsys):
    assert moonlet.main(["moonlet", "-e", "warn('Hello!', 'World!')"]) == 0
    assert capsys.readouterr().out == "\033[33mHello!World!\n\033[0m"


def test_run_script(tmp_path: Path, capsys):
    script = tmp_path / "hello.moon"
    script.write_text("-- greet\nprint('hello')\nnope('x')\nprint('bye')\n", encoding="utf-8")
    assert moonlet.main(["moonlet", str(script)]) == 0
    assert capsys.readouterr().out == "hello\nError: Function 'nope' not found.\nbye\n"


def test_missing_script(tmp_path: Path, capsys):
    assert moonlet.main(["moonlet", str(tmp_path / "missing.moon")]) == 1
    assert capsys.readouterr().out.startswith("FileNotFoundError:")


def test_syntax_error_aborts_before_execution(capsys):
    """
    A malformed program produces no output from earlier calls.
    """
    assert moonlet.main(["moonlet", "-e", "print('a') print('b'"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("ParseException: Expected ',' or ')'")
    assert "a\n" not in out


def test_lex_error(capsys):
    assert moonlet.main(["moonlet", "-e", "print('a)"]) == 1
    assert capsys.readouterr().out == "LexException: unfinished string on line 1, column 7 in <string>\n"


def test_do_block_aborts(capsys):
    assert moonlet.main(["moonlet", "-e", "do print('a') end"]) == 1
    assert capsys.readouterr().out.startswith("UnsupportedNodeException:")


def test_debug_output(monkeypatch, capsys):
    monkeypatch.setenv("MOONLET_DEBUG", "1")
    assert moonlet.main(["moonlet", "-e", "print('hi')"]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "Token: 'print', Type: IDENTIFIER, Line: 1:1" in out
    assert "AST:" in out
    assert out.endswith("print('hi')\n \nhi\n")


def _feed(monkeypatch, lines):
    pending = iter(lines)

    def fake_input(_prompt=""):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_repl_continues_incomplete_input(monkeypatch, capsys):
    _feed(monkeypatch, ["print('a'", ", 'b')", "nope()", "print(", "x)", "exit"])
    assert moonlet.main(["moonlet"]) == 0
    out = capsys.readouterr().out
    assert "ab\n" in out
    assert "Error: Function 'nope' not found.\n" in out
    assert "ParseException: Expected STRING, but got IDENTIFIER 'x'" in out


def test_repl_reports_do_block(monkeypatch, capsys):
    _feed(monkeypatch, ["do", "print('a')", "end", "print('b')"])
    assert moonlet.main(["moonlet"]) == 0
    out = capsys.readouterr().out
    assert "UnsupportedNodeException: Unsupported node type: DoBlock" in out
    assert out.rstrip().endswith("b")


def test_sample_program(capsys):
    sample = Path(__file__).resolve().parents[2] / "samples" / "hello.moon"
    assert moonlet.main(["moonlet", str(sample)]) == 0
    assert capsys.readouterr().out == (
        "\033[33mHello!World!\n\033[0m"
        "Long strings keep \"quotes\" and 'apostrophes' as written.\n"
        "Error: Function 'shout' not found.\n"
        "done\n"
    )
