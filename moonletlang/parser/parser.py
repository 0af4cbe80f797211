"""
Main parser entry point for Moonlet.

This module defines the `Parser` class, which owns the token cursor and
coordinates the recursive descent parsing process. The grammar productions
themselves live in `moonletlang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from moonletlang.exceptions import ParseException
from moonletlang.lexer import Token, TokenKind, describe_token
from moonletlang.nodes import Node

from . import statements as _stmt


class Parser:
    """Moonlet parser."""

    def __init__(self, tokens: list[Token], file: str = "<string>", eof_token: Token | None = None):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances, without an EOS sentinel.
            file (str): The name of the script.
            eof_token (Token | None): The sentinel returned past the last token.
                Defaults to one positioned just after the last token.
        """
        self.tokens = tokens
        self.source_file = file
        if eof_token is None:
            eof_token = self._default_eof()
        self.eof_token = eof_token
        self.position = 0
        self.curr_token = self.token_at(self.position)

    def _default_eof(self) -> Token:
        if not self.tokens:
            return Token(TokenKind.EOS)
        last = self.tokens[-1]
        return Token(TokenKind.EOS, "", last.line, last.column + len(last.lexeme))

    def token_at(self, index: int) -> Token:
        """
        Return the token at ``index``, or the EOS sentinel past the end.
        """
        if index < len(self.tokens):
            return self.tokens[index]
        return self.eof_token

    def peek(self, n: int = 1) -> Token:
        """
        Look ``n`` tokens ahead of the current one without consuming anything.
        """
        return self.token_at(self.position + n)

    def advance(self) -> Token:
        """
        Consume the current token and return the new current token.
        """
        self.position += 1
        self.curr_token = self.token_at(self.position)
        return self.curr_token

    def error(self, reason: str, expected: str | None = None) -> ParseException:
        """
        Build a :class:`ParseException` for the current token.
        """
        return ParseException(
            reason,
            self.curr_token,
            expected=expected,
            file=self.source_file,
            at_eof=self.curr_token.kind == TokenKind.EOS,
        )

    def check(self, kind: TokenKind, text: str | None = None) -> bool:
        """
        Return ``True`` if the current token has ``kind`` (and ``text``, if given).
        """
        return self.curr_token.kind == kind and (text is None or self.curr_token.text == text)

    def eat(self, kind: TokenKind, text: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected kind and text.

        Parameters:
            kind (TokenKind): The expected token kind.
            text (str | None): The expected token text, if it matters.

        Returns:
            Token: The consumed token.

        Raises:
            ParseException: If the token does not match.
        """
        if not self.check(kind, text):
            expected = f"{kind} '{text}'" if text is not None else str(kind)
            raise self.error(
                f"Expected {expected}, but got {describe_token(self.curr_token)}",
                expected=expected,
            )
        token = self.curr_token
        self.advance()
        return token

    # Statement wrappers
    def node(self, stop_keywords: frozenset[str] = frozenset()) -> Node | None:
        """
        Parse a single node, or return ``None`` when the block is complete.
        """
        return _stmt.parse_node(self, stop_keywords)

    def block(self, stop_keywords: frozenset[str] = frozenset()) -> list[Node]:
        """
        Parse nodes until end of input or a stop keyword.
        """
        return _stmt.parse_block(self, stop_keywords)

    def parse_call(self) -> Node:
        """
        Parse a function call.
        """
        return _stmt.parse_call(self)

    def parse_do_block(self) -> Node:
        """
        Parse a ``do … end`` block.
        """
        return _stmt.parse_do_block(self)

    def parse(self) -> list[Node]:
        """
        Parse the full input into a list of top-level nodes.

        Raises:
            ParseException: If the tokens do not form a valid program.
        """
        return self.block()
