"""Builtin operations for Moonlet.

Builtins are the only side-effecting operations a Moonlet program can reach.
Each takes the call's string arguments in order and returns nothing. The
standard set is enumerated by :class:`Builtin` and resolved to its
implementation once, when a :class:`BuiltinRegistry` is constructed; hosts may
register further operations by name.


File: stdlib.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
from enum import Enum
from typing import Callable, Sequence, TextIO

from moonletlang.exceptions import FunctionNotFoundException

BuiltinFunction = Callable[[Sequence[str]], None]

WARN_COLOUR = "\033[33m"
RESET_COLOUR = "\033[0m"


class Builtin(str, Enum):
    """
    Enumeration of the standard builtin names.
    """

    PRINT = "print"
    WARN = "warn"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


def builtin_print(arguments: Sequence[str], out: TextIO | None = None) -> None:
    """
    Write the arguments with no separator, followed by a newline.
    """
    out = out if out is not None else sys.stdout
    out.write("".join(arguments))
    out.write("\n")


def builtin_warn(arguments: Sequence[str], out: TextIO | None = None) -> None:
    """
    Like ``print``, wrapped in yellow terminal colour codes.
    """
    out = out if out is not None else sys.stdout
    out.write(WARN_COLOUR)
    builtin_print(arguments, out)
    out.write(RESET_COLOUR)


_STANDARD = {
    Builtin.PRINT: builtin_print,
    Builtin.WARN: builtin_warn,
}


class BuiltinRegistry:
    """Name-to-callable mapping of the operations a program may call."""

    def __init__(self, out: TextIO | None = None, include_standard: bool = True):
        """
        Initialize the registry.

        Parameters:
            out (TextIO | None): Stream the standard builtins write to.
                ``None`` means whatever ``sys.stdout`` is at call time.
            include_standard (bool): Register every :class:`Builtin`.
        """
        self.out = out
        self.functions: dict[str, BuiltinFunction] = {}
        if include_standard:
            for builtin in Builtin:
                self.register(builtin.value, self._bind(_STANDARD[builtin]))

    def _bind(self, func) -> BuiltinFunction:
        def call(arguments: Sequence[str]) -> None:
            func(arguments, self.out)
        call.__name__ = func.__name__
        call.__doc__ = func.__doc__
        return call

    def register(self, name: str, func: BuiltinFunction) -> None:
        """
        Register ``func`` under ``name``, replacing any existing entry.
        """
        self.functions[name] = func

    def lookup(self, name: str, line: int | None = None, file: str | None = None) -> BuiltinFunction:
        """
        Return the callable registered under ``name``.

        Raises:
            FunctionNotFoundException: If nothing is registered under ``name``.
        """
        try:
            return self.functions[name]
        except KeyError:
            raise FunctionNotFoundException(name, line, file) from None

    def __contains__(self, name: str) -> bool:
        return name in self.functions

    def __iter__(self):
        return iter(self.functions)

    def __len__(self) -> int:
        return len(self.functions)
