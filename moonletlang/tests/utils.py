"""
Utility functions shared across Moonlet tests.
"""
from pathlib import Path
import sys

from moonletlang.interpreter import Interpreter
from moonletlang.lexer import Lexer, Token
from moonletlang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def lex(source: str) -> list[Token]:
    """
    Tokenize source code.
    """
    return Lexer(source, "<test>").tokens()


def kinds_and_texts(source: str) -> list[tuple[str, str]]:
    """
    Tokenize source code and return ``(kind, text)`` pairs.
    """
    return [(token.kind.value, token.text) for token in lex(source)]


def parse_source(source: str):
    """
    Parse source code and return the top-level nodes.
    """
    lexer = Lexer(source, "<test>")
    tokens = lexer.tokens()
    parser = Parser(tokens, "<test>", lexer.eof_token())
    return parser.parse()


def run_source(source: str, interpreter: Interpreter | None = None) -> Interpreter:
    """
    Parse and execute source code, returning the interpreter used.
    """
    ast = parse_source(source)
    if interpreter is None:
        interpreter = Interpreter("<test>")
    interpreter.execute(ast)
    return interpreter
