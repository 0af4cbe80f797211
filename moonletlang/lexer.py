"""Lexer for Moonlet.

The lexer performs a single left-to-right pass over the source code. At each
cursor position a combined regular expression of named groups is matched and
the cursor advances past the match; each significant match yields a
:class:`Token` carrying its kind, payload text, raw lexeme and source position.

Tokens cover identifiers, the reserved words ``do``, ``end`` and ``while``,
runs of digits, quoted and long-bracket strings, and single-character
punctuation. Whitespace and ``--`` comments (line comments and ``--[[ … ]]``
long comments) are skipped and emit no token.

Malformed input (unterminated strings, long brackets missing their second
``[``, unterminated long comments) raises :class:`LexException` with the
offending line and column.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from dataclasses import dataclass
from enum import Enum

from moonletlang.exceptions import LexException


class TokenKind(str, Enum):
    """
    Enumeration of token kinds produced by the lexer.
    """

    EOS = "EOS"
    IDENTIFIER = "IDENTIFIER"
    KEYWORD = "KEYWORD"
    NUMBER = "NUMBER"
    STRING = "STRING"
    PUNCTUATION = "PUNCTUATION"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS = frozenset({"do", "end", "while"})


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``text`` is the payload (string contents without their delimiters) and
    ``lexeme`` is the exact slice of source the token was scanned from.
    """

    kind: TokenKind
    text: str = ""
    line: int = 1
    column: int = 1
    lexeme: str = ""

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind}, {self.text!r}, line={self.line}, column={self.column})"


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Skipped
    ('WHITESPACE',              r'\s+'),
    ('LONG_COMMENT',            r'--\[(?P<comment_level>=*)\[.*?\](?P=comment_level)\]'),
    ('UNFINISHED_LONG_COMMENT', r'--\[=*\['),
    ('COMMENT',                 r'--[^\n]*'),

    # Names
    ('NAME',                    r'[A-Za-z_][A-Za-z0-9_]*'),

    # Literals
    ('NUMBER',                  r'[0-9]+'),
    ('STRING',                  r'(?P<quote>[\'"])(?P<body>.*?)(?P=quote)'),
    ('UNFINISHED_STRING',       r'[\'"]'),
    ('LONG_STRING',             r'\[(?P<level>=*)\[(?P<long_body>.*?)\](?P=level)\]'),
    ('UNFINISHED_LONG_STRING',  r'\[=*\['),
    ('MALFORMED_LONG_STRING',   r'\[=+'),

    # Anything else is a single character of punctuation
    ('PUNCTUATION',             r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION),
    re.DOTALL,
)


class Lexer:
    """
    Single-cursor scanner over one source text.
    """

    def __init__(self, code: str, file: str | None = None):
        """
        Initialize the lexer.

        Parameters:
            code (str): The source code to scan.
            file (str | None): The script name used in error messages.
        """
        self.code = code
        self.file = file
        self.position = 0
        self.line = 1
        self.line_start = 0

    @property
    def column(self) -> int:
        """
        1-based column of the cursor on the current line.
        """
        return self.position - self.line_start + 1

    def _error(self, reason: str, offset: int):
        """
        Build a :class:`LexException` positioned at ``offset``.
        """
        line = self.code.count("\n", 0, offset) + 1
        column = offset - (self.code.rfind("\n", 0, offset) + 1) + 1
        return LexException(reason, line, column, self.file)

    def _advance(self, lexeme: str) -> None:
        """
        Move the cursor past ``lexeme`` keeping line bookkeeping current.
        """
        newlines = lexeme.count("\n")
        if newlines:
            self.line += newlines
            self.line_start = self.position + lexeme.rindex("\n") + 1
        self.position += len(lexeme)

    def next_token(self) -> Token | None:
        """
        Scan from the cursor until one token is produced.

        Returns:
            Token | None: The next token, or ``None`` at end of input.

        Raises:
            LexException: If the input at the cursor is malformed.
        """
        while self.position < len(self.code):
            match_obj = TOKEN_REGEX.match(self.code, self.position)
            kind = match_obj.lastgroup
            lexeme = match_obj.group()
            start = self.position

            if kind == 'UNFINISHED_STRING':
                raise self._error("unfinished string", start)
            if kind == 'UNFINISHED_LONG_STRING':
                raise self._error("unexpected end of string", start)
            if kind == 'UNFINISHED_LONG_COMMENT':
                raise self._error("unfinished long comment", start)
            if kind == 'MALFORMED_LONG_STRING':
                end = match_obj.end()
                found = repr(self.code[end]) if end < len(self.code) else "end of input"
                raise self._error(f"expected '[' but found {found}", end)

            token = None
            line, column = self.line, self.column
            if kind == 'NAME':
                token_kind = TokenKind.KEYWORD if lexeme in KEYWORDS else TokenKind.IDENTIFIER
                token = Token(token_kind, lexeme, line, column, lexeme)
            elif kind == 'NUMBER':
                token = Token(TokenKind.NUMBER, lexeme, line, column, lexeme)
            elif kind == 'STRING':
                token = Token(TokenKind.STRING, match_obj.group('body'), line, column, lexeme)
            elif kind == 'LONG_STRING':
                token = Token(TokenKind.STRING, match_obj.group('long_body'), line, column, lexeme)
            elif kind == 'PUNCTUATION':
                token = Token(TokenKind.PUNCTUATION, lexeme, line, column, lexeme)

            self._advance(lexeme)
            if token is not None:
                return token
        return None

    def tokens(self) -> list[Token]:
        """
        Scan the remaining input into a list of tokens.

        The list holds real tokens only; use :meth:`eof_token` for the
        end-of-stream sentinel.
        """
        tokens = []
        token = self.next_token()
        while token is not None:
            tokens.append(token)
            token = self.next_token()
        return tokens

    def eof_token(self) -> Token:
        """
        Return the EndOfStream sentinel positioned at the end of the input.
        """
        line = self.code.count("\n") + 1
        column = len(self.code) - (self.code.rfind("\n") + 1) + 1
        return Token(TokenKind.EOS, "", line, column, "")


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str | None): The script name used in error messages.

    Returns:
        list[Token]: The tokens in source order. Whitespace-only input
        produces an empty list.

    Raises:
        LexException: If the source is malformed.
    """
    return Lexer(code, file).tokens()


def describe_token(token: Token) -> str:
    """
    Describe a token for error messages, e.g. ``PUNCTUATION ')'``.
    """
    if token.kind == TokenKind.EOS:
        return "end of input"
    return f"{token.kind} '{token.text}'"


def format_tokens(tokens: list[Token]) -> str:
    """
    Render tokens one per line for debug output.
    """
    return "\n".join(
        f"Token: '{token.text}', Type: {token.kind}, Line: {token.line}:{token.column}"
        for token in tokens
    )
