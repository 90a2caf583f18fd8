"""Checked fixed-width arithmetic behind the ``add`` and ``sub`` subcommands.

Python ints never overflow, so every result is computed exactly and then
checked against the operation's width. A result that does not fit raises
``WidthOverflowError`` instead of wrapping around.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .widths import I16, U16, IntWidth


class WidthOverflowError(OverflowError):
    def __init__(self, op: str, a: int, b: int, width: IntWidth):
        self.op = op
        self.a = a
        self.b = b
        self.width = width
        super().__init__(
            f"{a} {op} {b} overflows {width} (valid range {width.min}..{width.max})"
        )


def _checked(symbol: str, a: int, b: int, width: IntWidth, result: int) -> int:
    if not width.contains(result):
        raise WidthOverflowError(symbol, a, b, width)
    return result


def checked_add(a: int, b: int, width: IntWidth = U16) -> int:
    return _checked("+", a, b, width, a + b)


def checked_sub(a: int, b: int, width: IntWidth = I16) -> int:
    return _checked("-", a, b, width, a - b)


@dataclass(frozen=True)
class Operation:
    name: str
    symbol: str
    width: IntWidth
    func: Callable[[int, int, IntWidth], int]

    def apply(self, a: int, b: int) -> int:
        return self.func(a, b, self.width)


ADD = Operation("add", "+", U16, checked_add)
SUB = Operation("sub", "-", I16, checked_sub)

OPERATIONS: Dict[str, Operation] = {op.name: op for op in (ADD, SUB)}


def format_result(op: Operation, a: int, b: int, result: int) -> str:
    return f"{a} {op.symbol} {b} = {result}"
