"""Errors.

Fatal conditions (lexing, parsing and executing an unsupported node) abort the
run. A missing builtin is reported by the interpreter and execution continues.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _location(line=None, column=None, file=None) -> str:
    """
    Build the ``on line X, column Y in Z`` suffix used by error messages.
    """
    suffix = ""
    if line is not None:
        suffix += f" on line {line}"
        if column is not None:
            suffix += f", column {column}"
    if file is not None:
        suffix += f" in {file}"
    return suffix


class LexException(Exception):
    """
    Error for malformed source text.
    """
    def __init__(self, reason, line=None, column=None, file=None):
        self.reason = reason
        self.line = line
        self.column = column
        self.file = file
        super().__init__(f"{reason}{_location(line, column, file)}")


class ParseException(SyntaxError):
    """
    Error for token sequences that do not match the grammar.
    """
    def __init__(self, reason, token, expected=None, file=None, at_eof=False):
        self.reason = reason
        self.expected = expected
        self.actual = token
        self.line = token.line
        self.column = token.column
        self.file = file
        self.at_eof = at_eof
        super().__init__(f"{reason}{_location(token.line, token.column, file)}")


class UnsupportedNodeException(Exception):
    """
    Error for syntax tree nodes the interpreter has no rule for.
    """
    def __init__(self, node, line=None, file=None):
        self.node = node
        self.line = line
        message = f"Unsupported node type: {type(node).__name__}"
        message += _location(line, None, file)
        super().__init__(message)


class FunctionNotFoundException(Exception):
    """
    Error for calls to names missing from the builtin registry.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        self.line = line
        message = f"Function '{name}' not found"
        message += _location(line, None, file)
        super().__init__(message)
