"""Interpreter.

This is a tree-walk interpreter for the syntax tree produced by the parser.

1. Execution Model
Top-level nodes are executed in order by `execute()`. A `FunctionCall` looks its
name up in the builtin registry and calls it synchronously with its string
arguments, so any output happens immediately and in source order.

2. Builtins
The interpreter holds a `BuiltinRegistry` (see `moonletlang.stdlib`). The
standard registry provides `print` and `warn`; hosts can pass their own.

3. Error Handling
Calling a name missing from the registry is reported as
``Error: Function '<name>' not found.`` and execution carries on with the next
node. Any node the interpreter has no rule for, including a top-level
`DoBlock`, raises `UnsupportedNodeException` and aborts the run.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
from typing import TextIO

from moonletlang.exceptions import (
    FunctionNotFoundException,
    UnsupportedNodeException,
)
from moonletlang.nodes import FunctionCall, Node
from moonletlang.stdlib import BuiltinRegistry


class Interpreter:
    """Tree-walk interpreter for Moonlet."""

    def __init__(
        self,
        file: str = "<string>",
        builtins: BuiltinRegistry | None = None,
        out: TextIO | None = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in error messages.
            builtins (BuiltinRegistry | None): The operations programs may call.
                Defaults to the standard registry writing to ``out``.
            out (TextIO | None): Stream for "not found" reports.
                ``None`` means whatever ``sys.stdout`` is at call time.
        """
        self.file = file
        self.out = out
        self.builtins = builtins if builtins is not None else BuiltinRegistry(out)
        self.missing_functions: list[str] = []

    def report(self, message: str) -> None:
        """
        Print a non-fatal diagnostic.
        """
        print(message, file=self.out if self.out is not None else sys.stdout)

    def call(self, node: FunctionCall) -> None:
        """
        Invoke the builtin named by ``node``.

        A missing builtin is reported and recorded, never raised.
        """
        try:
            func = self.builtins.lookup(node.name, node.line, self.file)
        except FunctionNotFoundException as e:
            self.missing_functions.append(e.name)
            self.report(f"Error: Function '{e.name}' not found.")
            return
        func(list(node.arguments))

    def execute(self, nodes: list[Node]) -> None:
        """
        Executes a list of top-level nodes.

        Parameters:
            nodes (list): Nodes produced by the parser.

        Raises:
            UnsupportedNodeException: For any node other than a function call.
        """
        for node in nodes:
            match node:
                case FunctionCall():
                    self.call(node)
                case _:
                    raise UnsupportedNodeException(
                        node, getattr(node, "line", None), self.file
                    )
