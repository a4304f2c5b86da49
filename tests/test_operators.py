import math

import pytest

from tinkerkit.mathfuncs import MathError, div, ncr
from tinkerkit.operators import (
    BinaryOperator,
    Symbol,
    UnaryFunction,
    default_functions,
    default_operators,
)


@pytest.fixture
def ops():
    return default_operators()


@pytest.fixture
def funcs():
    return default_functions()


def test_operator_symbols(ops):
    assert set(ops) == set("+-*/%^vpcl")


def test_operator_priorities(ops):
    assert ops["+"].priority == ops["-"].priority == 0
    assert ops["*"].priority == ops["/"].priority == ops["%"].priority == 1
    assert ops["^"].priority == ops["v"].priority == 2
    assert ops["p"].priority == ops["c"].priority == ops["l"].priority == 4


def test_only_power_is_right_biased(ops):
    assert ops["^"].next_priority == ops["^"].priority + 1
    for symbol, op in ops.items():
        if symbol != "^":
            assert op.next_priority == op.priority


@pytest.mark.parametrize("a, b", [(9.0, 3.0), (-1.5, 4.0)])
def test_operators_delegate_to_math_functions(ops, a, b):
    assert ops["/"].apply(a, b) == div(a, b)
    assert ops["+"].apply(a, b) - b == pytest.approx(a)


def test_combination_operator(ops):
    assert ops["c"].apply(10, 3) == ncr(10, 3)


def test_division_operator_raises_on_zero(ops):
    with pytest.raises(MathError, match=r"Divide by zero"):
        ops["/"].apply(1, 0)


@pytest.mark.parametrize("x", [2.0, -3.0, 0.5])
def test_power_identities(ops, x):
    assert ops["^"].apply(x, 0) == 1
    assert ops["^"].apply(x, 1) == x


def test_power_edge_values(ops):
    assert math.isnan(ops["^"].apply(-8, 1 / 3))
    assert ops["^"].apply(0, -1) == math.inf
    assert ops["^"].apply(10, 1000) == math.inf


def test_root_operator_inverts_power(ops):
    assert ops["v"].apply(3, ops["^"].apply(4.0, 3)) == pytest.approx(4.0)


def test_function_names(funcs):
    assert set(funcs) == {
        "tan", "sin", "cos", "atan", "asin", "acos", "sqrt", "ln", "log", "abs",
    }


def test_trig_at_zero(funcs):
    assert funcs["sin"].apply(0) == 0
    assert funcs["tan"].apply(0) == 0
    assert funcs["cos"].apply(0) == 1


@pytest.mark.parametrize("x", [0.1, 0.7, -1.2])
def test_inverse_trig_round_trip(funcs, x):
    assert funcs["atan"].apply(funcs["tan"].apply(x)) == pytest.approx(x)
    assert funcs["asin"].apply(funcs["sin"].apply(x)) == pytest.approx(x)


@pytest.mark.parametrize("x", [2.0, 7.5, 0.25])
def test_sqrt_and_abs(funcs, x):
    assert funcs["sqrt"].apply(x * x) == pytest.approx(x)
    assert funcs["abs"].apply(-x) == x


@pytest.mark.parametrize("k", [0, 2, 5])
def test_logarithms(funcs, k):
    assert funcs["log"].apply(10.0**k) == pytest.approx(k)
    assert funcs["ln"].apply(math.e**k) == pytest.approx(k)


def test_functions_outside_domain(funcs):
    assert math.isnan(funcs["asin"].apply(2))
    assert math.isnan(funcs["acos"].apply(-2))
    assert math.isnan(funcs["sqrt"].apply(-1))
    assert math.isnan(funcs["tan"].apply(math.inf))
    assert funcs["ln"].apply(0) == -math.inf
    assert funcs["log"].apply(0) == -math.inf
    assert math.isnan(funcs["ln"].apply(-1))


def test_custom_operator_and_function():
    op = BinaryOperator(3, max, 1)
    assert op.apply(1, 2) == 2
    assert op.next_priority == 4
    assert UnaryFunction(math.fabs).apply(-2.5) == 2.5


@pytest.mark.parametrize("member", list(Symbol))
def test_symbol_lookup_by_value_round_trips(member):
    assert Symbol(member.value) is member
    assert Symbol[member.name] is member


def test_symbol_members_are_distinct():
    values = [Symbol(member.value) for member in Symbol]
    assert len(set(values)) == len(Symbol)
    assert Symbol(Symbol.NUMBER.value) is Symbol.NUMBER