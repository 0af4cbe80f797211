"""
Tests for executing Moonlet programs.
"""
import io

import pytest

from moonletlang.exceptions import UnsupportedNodeException
from moonletlang.interpreter import Interpreter
from moonletlang.nodes import DoBlock, FunctionCall
from moonletlang.stdlib import BuiltinRegistry

from moonletlang.tests.utils import parse_source, run_source


def test_warn_output(capsys):
    """
    warn concatenates its arguments inside yellow colour codes.
    """
    run_source("warn('Hello!', 'World!')")
    assert capsys.readouterr().out == "\033[33mHello!World!\n\033[0m"


def test_print_output(capsys):
    run_source("print('a', 'b', 'c')\nprint()\nprint([[x\ny]])")
    assert capsys.readouterr().out == "abc\n\nx\ny\n"


def test_missing_function_is_not_fatal(capsys):
    """
    An unknown name is reported and later nodes still run.
    """
    interpreter = run_source("unknownfn('x')\nprint('after')")
    out = capsys.readouterr().out
    assert out == "Error: Function 'unknownfn' not found.\nafter\n"
    assert interpreter.missing_functions == ["unknownfn"]


def test_top_level_do_block_is_fatal(capsys):
    """
    Top-level do blocks are not executed; the run aborts.
    """
    with pytest.raises(UnsupportedNodeException) as exc_info:
        run_source("print('before')\ndo print('a') end\nprint('after')")
    assert capsys.readouterr().out == "before\n"
    assert isinstance(exc_info.value.node, DoBlock)
    assert "Unsupported node type: DoBlock on line 2 in <test>" == str(exc_info.value)


def test_unknown_node_is_fatal():
    with pytest.raises(UnsupportedNodeException, match="Unsupported node type: str"):
        Interpreter("<test>").execute(["print('a')"])


def test_custom_registry():
    """
    Hosts can add builtins alongside the standard ones.
    """
    calls = []
    out = io.StringIO()
    registry = BuiltinRegistry(out)
    registry.register("collect", calls.append)
    interpreter = Interpreter("<test>", registry, out)

    interpreter.execute([
        FunctionCall("collect", ("a", "b")),
        FunctionCall("print", ("c",)),
        FunctionCall("nope", ()),
        FunctionCall("collect", ()),
    ])

    assert calls == [["a", "b"], []]
    assert out.getvalue() == "c\nError: Function 'nope' not found.\n"


def test_output_stream(capsys):
    out = io.StringIO()
    interpreter = Interpreter("<test>", out=out)
    interpreter.execute(parse_source("warn('w') missing() print('p')"))
    assert out.getvalue() == "\033[33mw\n\033[0mError: Function 'missing' not found.\np\n"
    assert capsys.readouterr().out == ""
