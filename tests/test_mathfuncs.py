import math

import pytest

from tinkerkit.mathfuncs import (
    MathError,
    add,
    div,
    factorial,
    log_base,
    mod,
    mul,
    ncr,
    npr,
    root,
    sub,
)


@pytest.mark.parametrize("a, b", [(1.5, 2.25), (-4.0, 7.0), (0.0, 3.0), (1e10, -2e9)])
def test_add_sub_round_trip(a, b):
    assert sub(add(a, b), b) == pytest.approx(a)
    assert add(a, b) == add(b, a)


@pytest.mark.parametrize("a", [0.0, 3.5, -12.0, 1e20])
def test_mul_identity_and_zero(a):
    assert mul(a, 1) == a
    assert mul(a, 0) == 0


@pytest.mark.parametrize("a, b", [(10.0, 4.0), (-3.0, 7.0), (1.0, -0.5)])
def test_div_inverts_mul(a, b):
    assert mul(div(a, b), b) == pytest.approx(a)


def test_div_by_zero_raises():
    with pytest.raises(MathError) as info:
        div(5, 0)
    assert str(info.value) == "Math Error. (Divide by zero exception)"


def test_mod_by_zero_raises():
    with pytest.raises(MathError) as info:
        mod(5, 0)
    assert str(info.value) == "Math Error. (Modulo by zero exception)"


def test_mod_smaller_dividend_is_unchanged():
    assert mod(2, 5) == 2


def test_mod_truncates_operands():
    assert mod(7.9, 3.2) == mod(7, 3)


def test_mod_sign_follows_dividend():
    assert mod(-7, 3) == -mod(7, 3)
    assert mod(7, -3) == mod(7, 3)


@pytest.mark.parametrize("x", [2.0, 5.0, 0.5, 12.0])
def test_square_root_round_trip(x):
    assert root(2, x * x) == pytest.approx(x)


def test_root_of_negative_with_even_degree_is_nan():
    assert root(2, 9) == pytest.approx(3.0)
    result = root(2, -4)
    assert isinstance(result, float)
    assert math.isnan(result)


@pytest.mark.parametrize("base, k", [(10.0, 3.0), (2.0, 5.0), (3.0, -2.0)])
def test_log_base_inverts_power(base, k):
    assert log_base(base, base**k) == pytest.approx(k)


def test_log_base_edge_values():
    assert log_base(10, 0) == -math.inf
    assert math.isnan(log_base(10, -1))


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


def test_factorial_known_value():
    assert factorial(5) == 120


@pytest.mark.parametrize("n", [2, 6, 10, 15])
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_overflows_to_infinity():
    assert factorial(200) == math.inf


def test_factorial_errors():
    with pytest.raises(MathError, match=r"Factorial of negative number exception"):
        factorial(-1)
    with pytest.raises(MathError, match=r"Factorial of non-integer exception"):
        factorial(2.5)
    with pytest.raises(MathError, match=r"Factorial of non-integer exception"):
        factorial(math.inf)


@pytest.mark.parametrize("n", [0, 1, 4, 9])
def test_npr_special_cases(n):
    assert npr(n, n) == factorial(n)
    assert npr(n, 0) == 1


@pytest.mark.parametrize("n", [1, 4, 9])
def test_npr_one(n):
    assert npr(n, 1) == n


def test_npr_errors():
    with pytest.raises(MathError) as info:
        npr(3, 5)
    assert str(info.value) == "Math Error. (nPr: r greater than n exception)"
    with pytest.raises(MathError, match=r"nPr of negative number exception"):
        npr(-3, 1)
    with pytest.raises(MathError, match=r"nPr of non-integer exception"):
        npr(5, 1.5)


@pytest.mark.parametrize("n, r", [(5, 2), (10, 7), (20, 10), (6, 0)])
def test_ncr_symmetry_and_relation_to_npr(n, r):
    assert ncr(n, r) == ncr(n, n - r)
    assert ncr(n, r) * factorial(r) == pytest.approx(npr(n, r))


@pytest.mark.parametrize("n", [0, 3, 12])
def test_ncr_zero_and_all(n):
    assert ncr(n, 0) == 1
    assert ncr(n, n) == 1


def test_ncr_known_value():
    assert ncr(52, 5) == 2598960


def test_ncr_errors():
    with pytest.raises(MathError, match=r"nCr: r greater than n exception"):
        ncr(2, 3)
    with pytest.raises(MathError, match=r"nCr of negative number exception"):
        ncr(4, -1)
    with pytest.raises(MathError, match=r"nCr of non-integer exception"):
        ncr(4.5, 1)