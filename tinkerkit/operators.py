"""Operator and function tables for the expression calculator."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable

from tinkerkit import mathfuncs
from tinkerkit.mathfuncs import _ieee_log, _ieee_log10, _ieee_pow

__all__ = [
    "Symbol",
    "BinaryOperator",
    "UnaryFunction",
    "default_operators",
    "default_functions",
]


class Symbol(enum.Enum):
    """Kind of the most recently parsed element of an expression."""

    PARENTHESIS_START = enum.auto()
    PARENTHESIS_END = enum.auto()
    FACTORIAL = enum.auto()
    OPERATOR = enum.auto()
    SIGN = enum.auto()
    NUMBER = enum.auto()
    FUNCTION = enum.auto()


@dataclass(frozen=True)
class BinaryOperator:
    """An infix operator with a binding priority.

    ``right_bias`` is added to the priority when deciding whether to keep
    parsing to the right; a bias of 1 makes the operator right-associative.
    """

    priority: int
    function: Callable[[float, float], float]
    right_bias: int = 0

    @property
    def next_priority(self) -> int:
        return self.priority + self.right_bias

    def apply(self, left: float, right: float) -> float:
        """Apply the operator to its two operands."""
        return self.function(left, right)


@dataclass(frozen=True)
class UnaryFunction:
    """A named one-argument function such as ``sin`` or ``sqrt``."""

    function: Callable[[float], float]

    def apply(self, value: float) -> float:
        """Apply the function to ``value``."""
        return self.function(value)


def _nan_outside_domain(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapper(value: float) -> float:
        try:
            return func(value)
        except ValueError:
            return math.nan

    wrapper.__name__ = func.__name__
    return wrapper


def default_operators() -> dict[str, BinaryOperator]:
    """Return the calculator's operators keyed by their symbol."""
    return {
        "+": BinaryOperator(0, mathfuncs.add),
        "-": BinaryOperator(0, mathfuncs.sub),
        "*": BinaryOperator(1, mathfuncs.mul),
        "/": BinaryOperator(1, mathfuncs.div),
        "%": BinaryOperator(1, mathfuncs.mod),
        "^": BinaryOperator(2, _ieee_pow, 1),
        "v": BinaryOperator(2, mathfuncs.root),
        "p": BinaryOperator(4, mathfuncs.npr),
        "c": BinaryOperator(4, mathfuncs.ncr),
        "l": BinaryOperator(4, mathfuncs.log_base),
    }


def default_functions() -> dict[str, UnaryFunction]:
    """Return the calculator's functions keyed by their name."""
    return {
        "tan": UnaryFunction(_nan_outside_domain(math.tan)),
        "sin": UnaryFunction(_nan_outside_domain(math.sin)),
        "cos": UnaryFunction(_nan_outside_domain(math.cos)),
        "atan": UnaryFunction(math.atan),
        "asin": UnaryFunction(_nan_outside_domain(math.asin)),
        "acos": UnaryFunction(_nan_outside_domain(math.acos)),
        "sqrt": UnaryFunction(_nan_outside_domain(math.sqrt)),
        "ln": UnaryFunction(_ieee_log),
        "log": UnaryFunction(_ieee_log10),
        "abs": UnaryFunction(math.fabs),
    }