"""Syntax tree nodes for Moonlet.

The tree is a closed set of two node variants. Nodes carry no behaviour; the
interpreter dispatches on their type. Each node records the line it began on,
which is excluded from equality so trees can be compared structurally.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class FunctionCall:
    """A call to a named operation with string-literal arguments."""

    name: str
    arguments: tuple[str, ...] = ()
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class DoBlock:
    """A ``do … end`` block holding an ordered body of nodes."""

    body: tuple['Node', ...] = ()
    line: int = field(default=0, compare=False)


Node = Union[FunctionCall, DoBlock]


def _quote(text: str) -> str:
    """
    Quote a string argument so it re-lexes to the same payload.
    """
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    level = 0
    while f"]{'=' * level}]" in f"{text}]{'=' * level}":
        level += 1
    return f"[{'=' * level}[{text}]{'=' * level}]"


def format_node(node: Node, indent: int = 0) -> str:
    """
    Convert a node back to readable source for debugging.

    Args:
        node (Node): The node to render.
        indent (int): Nesting depth, two spaces per level.

    Returns:
        str: A source-like representation of the node.
    """
    pad = "  " * indent
    match node:
        case FunctionCall(name=name, arguments=arguments):
            return f"{pad}{name}({', '.join(_quote(arg) for arg in arguments)})"
        case DoBlock(body=body):
            lines = [f"{pad}do"]
            lines.extend(format_node(child, indent + 1) for child in body)
            lines.append(f"{pad}end")
            return "\n".join(lines)
        case _:
            return f"{pad}<node {type(node).__name__}>"


def format_tree(nodes: list[Node]) -> str:
    """
    Render a forest of nodes, one top-level node per line.
    """
    return "\n".join(format_node(node) for node in nodes)
