"""Moonlet language package.

Source text flows one way through the pipeline: the lexer turns it into
tokens, the parser builds a list of top-level nodes and the interpreter
executes them against a builtin registry.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from moonletlang.interpreter import Interpreter
from moonletlang.lexer import Lexer
from moonletlang.nodes import Node
from moonletlang.parser import Parser

__version__ = "0.1.0"


def parse_source(code: str, file: str = "<string>") -> list[Node]:
    """
    Tokenize and parse ``code`` into a list of top-level nodes.

    Raises:
        LexException: If the source is malformed.
        ParseException: If the tokens do not form a valid program.
    """
    lexer = Lexer(code, file)
    tokens = lexer.tokens()
    return Parser(tokens, file, lexer.eof_token()).parse()


__all__ = ["Interpreter", "Lexer", "Parser", "parse_source"]
