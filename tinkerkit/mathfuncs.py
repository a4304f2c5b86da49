"""Arithmetic primitives used by the expression calculator.

All functions take and return floats. Where a C-style floating point result
(``nan`` or an infinity) is the natural answer, it is returned rather than
raised. Genuine calculator errors are raised as :class:`MathError`.
"""

from __future__ import annotations

import math

__all__ = [
    "MathError",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "root",
    "log_base",
    "factorial",
    "npr",
    "ncr",
]


class MathError(ArithmeticError):
    """Raised when an operation has no meaningful result."""


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and int(value) % 2 == 1


def _ieee_pow(base: float, exponent: float) -> float:
    """Power with IEEE results instead of Python exceptions or complex numbers."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _ieee_div(numerator: float, denominator: float) -> float:
    """Division that yields infinities or nan for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _ieee_log(value: float, log=math.log) -> float:
    """Logarithm returning -inf at zero and nan for negative input."""
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return log(value)


def _ieee_log10(value: float) -> float:
    return _ieee_log(value, math.log10)


def add(a: float, b: float) -> float:
    """Return ``a + b``."""
    return a + b


def sub(a: float, b: float) -> float:
    """Return ``a - b``."""
    return a - b


def mul(a: float, b: float) -> float:
    """Return ``a * b``."""
    return a * b


def div(a: float, b: float) -> float:
    """Return ``a / b``; dividing by zero is a :class:`MathError`."""
    if b == 0:
        raise MathError("Math Error. (Divide by zero exception)")
    return a / b


def mod(a: float, b: float) -> float:
    """Integer remainder of the truncated operands, with the sign of ``a``."""
    if b == 0:
        raise MathError("Math Error. (Modulo by zero exception)")
    if not (math.isfinite(a) and math.isfinite(b)):
        raise MathError("Math Error. (Modulo of non-finite number exception)")
    dividend, divisor = int(a), int(b)
    if divisor == 0:
        raise MathError("Math Error. (Modulo by zero exception)")
    return math.fmod(dividend, divisor)


def root(degree: float, value: float) -> float:
    """Return the ``degree``-th root of ``value``."""
    if degree == 0:
        exponent = math.copysign(math.inf, degree)
    else:
        exponent = 1 / degree
    return _ieee_pow(value, exponent)


def log_base(base: float, value: float) -> float:
    """Return the logarithm of ``value`` in the given ``base``."""
    return _ieee_div(_ieee_log10(value), _ieee_log10(base))


def _falling_product(n: float, stop: float) -> float:
    """Product ``n * (n-1) * ... * (stop+1)``; 1 when ``n == stop``."""
    result = 1.0
    for k in range(int(stop) + 1, int(n) + 1):
        result = k * result
    return result


def _check_counting_args(n: float, r: float, kind: str) -> None:
    if n < 0 or r < 0:
        raise MathError(f"Math Error. ({kind} of negative number exception)")
    if kind != "Factorial" and r > n:
        raise MathError(f"Math Error. ({kind}: r greater than n exception)")
    if not (
        math.isfinite(n)
        and math.isfinite(r)
        and float(n).is_integer()
        and float(r).is_integer()
    ):
        raise MathError(f"Math Error. ({kind} of non-integer exception)")


def factorial(n: float) -> float:
    """Return ``n!`` for a non-negative integer-valued ``n``."""
    _check_counting_args(n, 0, "Factorial")
    return _falling_product(n, 0)


def npr(n: float, r: float) -> float:
    """Number of ordered selections of ``r`` items out of ``n``."""
    _check_counting_args(n, r, "nPr")
    return _falling_product(n, n - r)


def ncr(n: float, r: float) -> float:
    """Number of unordered selections of ``r`` items out of ``n``."""
    _check_counting_args(n, r, "nCr")
    # Expand the larger of r and n-r in the numerator to keep values small.
    if r > n - r:
        return _falling_product(n, r) / _falling_product(n - r, 0)
    return _falling_product(n, n - r) / _falling_product(r, 0)