"""Statement parsing utilities for Moonlet.

These functions operate on a `moonletlang.parser.parser.Parser` instance and
implement the grammar productions: blocks, nodes, function calls and
``do … end`` blocks. Every production consumes the tokens it matches, so the
cursor only ever moves forward.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from moonletlang.lexer import TokenKind, describe_token
from moonletlang.nodes import DoBlock, FunctionCall, Node

if TYPE_CHECKING:
    from moonletlang.parser import Parser


BLOCK_END = frozenset({"end"})


def parse_block(parser: 'Parser', stop_keywords: frozenset[str] = frozenset()) -> list[Node]:
    """
    Parse a sequence of nodes.

    The stop keyword that ends the block is left for the caller to consume.

    Syntax:
        <node>*

    Args:
        parser: The parser instance.
        stop_keywords: Reserved words that terminate the block.

    Returns:
        list: The parsed nodes in source order.
    """
    nodes = []
    node = parser.node(stop_keywords)
    while node is not None:
        nodes.append(node)
        node = parser.node(stop_keywords)
    return nodes


def parse_node(parser: 'Parser', stop_keywords: frozenset[str] = frozenset()) -> Node | None:
    """
    Parse a single node.

    Args:
        parser: The parser instance.
        stop_keywords: Reserved words that terminate the enclosing block.

    Returns:
        Node | None: The parsed node, or ``None`` when the block is complete.

    Raises:
        ParseException: On any token that cannot start a node.
    """
    tok = parser.curr_token
    if tok.kind == TokenKind.IDENTIFIER:
        return parser.parse_call()
    if tok.kind == TokenKind.KEYWORD:
        if tok.text in stop_keywords:
            return None
        if tok.text == "do":
            return parser.parse_do_block()
        raise parser.error(f"Unsupported keyword '{tok.text}'")
    if tok.kind == TokenKind.EOS:
        return None
    raise parser.error(f"Unexpected token {describe_token(tok)}")


def parse_call(parser: 'Parser') -> FunctionCall:
    """
    Parse a function call with string-literal arguments.

    Syntax:
        <identifier> ( [ <string> { , <string> } ] )

    Args:
        parser: The parser instance.

    Returns:
        FunctionCall: The call node.
    """
    name_tok = parser.eat(TokenKind.IDENTIFIER)
    parser.eat(TokenKind.PUNCTUATION, "(")

    arguments = []
    if parser.check(TokenKind.PUNCTUATION, ")"):
        parser.advance()
        return FunctionCall(name_tok.text, (), name_tok.line)

    while True:
        arguments.append(parser.eat(TokenKind.STRING).text)
        if parser.check(TokenKind.PUNCTUATION, ","):
            parser.advance()
        elif parser.check(TokenKind.PUNCTUATION, ")"):
            parser.advance()
            break
        else:
            raise parser.error(
                f"Expected ',' or ')' after argument to '{name_tok.text}', "
                f"but got {describe_token(parser.curr_token)}",
                expected="',' or ')'",
            )
    return FunctionCall(name_tok.text, tuple(arguments), name_tok.line)


def parse_do_block(parser: 'Parser') -> DoBlock:
    """
    Parse a ``do`` block.

    Syntax:
        do <node>* end

    Args:
        parser: The parser instance.

    Returns:
        DoBlock: The block node.
    """
    tok = parser.eat(TokenKind.KEYWORD, "do")
    body = parser.block(BLOCK_END)
    parser.eat(TokenKind.KEYWORD, "end")
    return DoBlock(tuple(body), tok.line)
