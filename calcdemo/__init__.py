"""Core helpers for the calcdemo CLI"""

from .widths import IntWidth, U16, I16
from .arith import Operation, OPERATIONS, ADD, SUB, WidthOverflowError, format_result

__version__ = "0.1.0"
PROG_NAME = "calcdemo"

__all__ = [
    "IntWidth",
    "U16",
    "I16",
    "Operation",
    "OPERATIONS",
    "ADD",
    "SUB",
    "WidthOverflowError",
    "format_result",
    "__version__",
    "PROG_NAME",
]
