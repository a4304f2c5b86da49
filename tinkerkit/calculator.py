"""Expression calculator with operators, functions, constants and variables.

Expressions are evaluated while they are parsed by a precedence-climbing
recursive descent. Supported syntax:

* numbers with ``.`` or ``,`` as decimal point
* the constants ``pi``, ``e`` and ``ans`` (the last successful result)
* variables ``A`` to ``Z``; adjacent variables multiply (``AB`` is ``A*B``)
* the binary operators from :func:`tinkerkit.operators.default_operators`
* the functions from :func:`tinkerkit.operators.default_functions`
* postfix ``!`` for factorial
* implicit multiplication such as ``2(3+4)`` or ``3pi``
* runs of signs such as ``2+--3``
* ``expression>X`` to store the result in variable ``X``
"""

from __future__ import annotations

import argparse
import math
import string
import sys
from typing import Mapping, Sequence, TypeVar

from tinkerkit.mathfuncs import MathError, factorial
from tinkerkit.operators import (
    BinaryOperator,
    Symbol,
    UnaryFunction,
    default_functions,
    default_operators,
)

__all__ = ["ExpressionSyntaxError", "Calculator", "strip_whitespace", "main"]

_T = TypeVar("_T")

_OPERAND_END = frozenset({Symbol.NUMBER, Symbol.FACTORIAL, Symbol.PARENTHESIS_END})
_NO_OPERATOR_AFTER = frozenset(
    {Symbol.OPERATOR, Symbol.PARENTHESIS_START, Symbol.FUNCTION}
)
# Priority of multiplication, used for implicit products like "2(3)".
_IMPLICIT_PRIORITY = 1
# Priority that makes a nested parse stop before any binary operator.
_TIGHTEST_PRIORITY = 6


class ExpressionSyntaxError(ValueError):
    """Raised when an expression is not well formed."""


def strip_whitespace(text: str) -> str:
    """Remove every space and tab from ``text``."""
    return text.replace(" ", "").replace("\t", "")


def _is_upper(ch: str) -> bool:
    return len(ch) == 1 and ch in string.ascii_uppercase


def _is_lower(ch: str) -> bool:
    return len(ch) == 1 and ch in string.ascii_lowercase


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in string.digits


class _Parser:
    """Parses and evaluates a single whitespace-free expression."""

    def __init__(self, calculator: Calculator, text: str) -> None:
        self._calc = calculator
        self._text = text
        self._pos = 0
        self._depth = 0
        self.last = Symbol.PARENTHESIS_START
        self.store_target: str | None = None

    def _char(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _implicit_product(self, start_priority: int, ans: float) -> tuple[float, bool]:
        """Return the multiplier for an implicit product and whether to stop here."""
        if self.last in _OPERAND_END:
            return ans, _IMPLICIT_PRIORITY <= start_priority
        return 1.0, False

    def _match_name(self, table: Mapping[str, _T]) -> str | None:
        """Consume the shortest run of lower-case letters that names a table key."""
        start = self._pos
        name = ""
        while _is_lower(self._char()):
            name += self._char()
            self._pos += 1
            if name in table:
                return name
        self._pos = start
        return None

    def _read_literal(self) -> float | None:
        chars: list[str] = []
        seen_point = False
        while (ch := self._char()) and (ch in ".," or _is_digit(ch)):
            if ch in ".,":
                if seen_point:
                    raise ExpressionSyntaxError(
                        "Syntax Error. (Two or more decimal points in one number)"
                    )
                seen_point = True
                chars.append(".")
            else:
                chars.append(ch)
            self._pos += 1
        if not chars:
            return None
        try:
            return float("".join(chars))
        except ValueError:
            raise ExpressionSyntaxError("Syntax Error.") from None

    def _read_variables(self) -> float | None:
        product = 1.0
        found = False
        while _is_upper(self._char()):
            product *= self._calc._variables[self._char()]
            self._pos += 1
            found = True
        return product if found else None

    def _read_constant(self) -> float | None:
        name = self._match_name(self._calc._constants)
        return None if name is None else self._calc._constants[name]

    def _read_operand(self) -> float | None:
        for reader in (self._read_literal, self._read_variables, self._read_constant):
            value = reader()
            if value is not None:
                return value
        return None

    def _consume_signs(self) -> bool:
        """Consume a run of ``+`` and ``-``; return True if the net sign is negative."""
        negative = False
        while self._char() in ("+", "-") and self._char():
            if self._char() == "-":
                negative = not negative
            self._pos += 1
        return negative

    def parse(self, start_priority: int) -> float:
        """Evaluate until an operator binding no tighter than ``start_priority``."""
        ans = 0.0
        calc = self._calc
        while self._pos < len(self._text):
            ch = self._text[self._pos]

            if ch == "(":
                multiplier, stop = self._implicit_product(start_priority, ans)
                if stop:
                    return ans
                self._depth += 1
                self.last = Symbol.PARENTHESIS_START
                self._pos += 1
                ans = multiplier * self.parse(-1)
                self._depth -= 1
                self._pos += 1
                continue

            if ch == ")" and self.last in _OPERAND_END:
                self.last = Symbol.PARENTHESIS_END
                if self._depth < 1:
                    raise ExpressionSyntaxError(
                        "Syntax Error. (Too many end parantheses.)"
                    )
                return ans

            if ch == "!" and self.last in (Symbol.NUMBER, Symbol.PARENTHESIS_END):
                self.last = Symbol.FACTORIAL
                ans = factorial(ans)
                self._pos += 1
                continue

            if ch == ">" and self.last in _OPERAND_END:
                self._pos += 1
                target = self._char()
                if self._pos == len(self._text) - 1 and _is_upper(target):
                    self.store_target = target
                    self._pos += 1
                    return ans
                raise ExpressionSyntaxError(
                    "Syntax Error. (Attempting to assign to non-variable)"
                )

            name_start = self._pos
            func_name = self._match_name(calc._functions)
            if func_name is not None:
                multiplier, stop = self._implicit_product(start_priority, ans)
                if stop:
                    self._pos = name_start
                    return ans
                self.last = Symbol.FUNCTION
                argument = self.parse(_TIGHTEST_PRIORITY)
                ans = multiplier * calc._functions[func_name].apply(argument)
                continue

            value = self._read_operand()
            if value is not None:
                # An operand never ends the current level; it only multiplies.
                multiplier, _ = self._implicit_product(start_priority, ans)
                ans = multiplier * value
                self.last = Symbol.NUMBER
                continue

            operator = calc._operators.get(ch)
            if operator is not None and self.last not in _NO_OPERATOR_AFTER:
                if operator.next_priority <= start_priority:
                    return ans
                self.last = Symbol.OPERATOR
                self._pos += 1
                ans = operator.apply(ans, self.parse(operator.priority))
                continue

            if ch in ("+", "-"):
                if self._consume_signs():
                    self.last = Symbol.SIGN
                    ans = -self.parse(_TIGHTEST_PRIORITY)
                continue

            raise ExpressionSyntaxError("Syntax Error.")
        return ans


class Calculator:
    """Evaluates expressions and remembers ``ans`` and variables between calls."""

    def __init__(self) -> None:
        self._operators: dict[str, BinaryOperator] = default_operators()
        self._functions: dict[str, UnaryFunction] = default_functions()
        self._constants: dict[str, float] = {"ans": 0.0, "pi": math.pi, "e": math.e}
        self._variables: dict[str, float] = dict.fromkeys(string.ascii_uppercase, 0.0)

    def evaluate(self, expression: str) -> float | None:
        """Evaluate ``expression``.

        Returns None for an expression that is empty or only whitespace.
        Raises :class:`ExpressionSyntaxError` or
        :class:`~tinkerkit.mathfuncs.MathError` on failure, in which case
        neither ``ans`` nor any variable changes.
        """
        text = strip_whitespace(expression)
        if not text:
            return None
        parser = _Parser(self, text)
        ans = parser.parse(-1)
        if parser.last not in _OPERAND_END:
            raise ExpressionSyntaxError("Syntax error.")
        self._constants["ans"] = ans
        if parser.store_target is not None:
            self._variables[parser.store_target] = ans
        return ans

    def variable(self, name: str) -> float:
        """Return the value stored in variable ``name`` (``A`` to ``Z``)."""
        if name not in self._variables:
            raise ValueError(f"not a variable: {name!r}")
        return self._variables[name]


def _format_number(value: float) -> str:
    return f"{value:g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate expressions from the command line, or line by line from stdin."""
    parser = argparse.ArgumentParser(
        prog="tinkerkit-calc", description="Evaluate arithmetic expressions."
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to evaluate in order; read from stdin if none are given",
    )
    args = parser.parse_args(argv)

    calculator = Calculator()
    lines = args.expressions if args.expressions else (
        line.rstrip("\r\n") for line in sys.stdin
    )
    for line in lines:
        try:
            result = calculator.evaluate(line)
        except (ExpressionSyntaxError, MathError) as error:
            print(error)
            continue
        if result is not None:
            print(f"= {_format_number(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())