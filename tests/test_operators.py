import math

import numpy as np
import pytest

from expression_parser.expression_tree.core.operators import (
    OpType, evaluate_unary_op, evaluate_binary_op, evaluate_horner
)


def value_of(parser, text):
    return parser.parse(text).evaluate()


@pytest.mark.parametrize("text, expected", [
    ("3^2", 9), ("2^2^3", 256), ("3*2", 6), ("3/2", 1.5),
    ("3+2", 5), ("3-2", 1), ("-3", -3),
])
def test_operators(parser, text, expected):
    assert value_of(parser, text) == pytest.approx(expected, abs=1e-5)


@pytest.mark.parametrize("text, expected", [
    ("2<3", 1), ("2<2", 0), ("3<2", 0),
    ("2<=3", 1), ("2<=2", 1), ("3<=2", 0),
    ("2=3", 0), ("2=2", 1),
    ("2<>3", 1), ("2<>2", 0),
    ("2>=3", 0), ("2>=2", 1), ("3>=2", 1),
    ("2>3", 0), ("2>2", 0), ("3>2", 1),
])
def test_comparisons(parser, text, expected):
    assert value_of(parser, text) == expected


@pytest.mark.parametrize("text, expected", [
    ("(1 and 1)", 1), ("(1 and 0)", 0), ("(0 and 1)", 0), ("(0 and 0)", 0),
    ("(1 or 1)", 1), ("(1 or 0)", 1), ("(0 or 1)", 1), ("(0 or 0)", 0),
    ("(2 and -3)", 1), ("(0.5 or 0)", 1),
])
def test_logic_tests_nonzero(parser, text, expected):
    assert value_of(parser, text) == expected


@pytest.mark.parametrize("text, expected", [
    ("abs(-2)", 2), ("abs(2)", 2), ("acos(1)", 0),
    ("asin(1)", math.pi / 2), ("atan(1)", math.pi / 4),
    ("atan2(-1, -1)", -3 * math.pi / 4),
    ("ceil(3.5)", 4), ("ceil(-3.5)", -3), ("cos(0)", 1), ("exp(1)", math.e),
    ("floor(3.5)", 3), ("floor(-3.5)", -4), ("log(2.7182818284590451)", 1),
    ("round(3.5)", 4), ("round(-3.5)", -4), ("round(2.5)", 2),
    ("sin(pi/2)", 1), ("sqrt(9)", 3), ("tan(pi/4)", 0.99999999999999989),
    ("max(2, 3)", 3), ("min(2, 3)", 2),
    ("if(0, 42, 137)", 137), ("if(1, 42, 137)", 42),
])
def test_functions(parser, text, expected):
    assert value_of(parser, text) == pytest.approx(expected, abs=1e-5)


def test_power_with_fractional_exponent(parser):
    assert value_of(parser, "  -3 * 1.01^100.1  ") == pytest.approx(-3.0 * 1.01 ** 100.1, abs=1e-5)


@pytest.mark.parametrize("text, check", [
    ("1/0", lambda v: v == math.inf),
    ("-1/0", lambda v: v == -math.inf),
    ("0/0", math.isnan),
    ("log(0)", lambda v: v == -math.inf),
    ("log(-1)", math.isnan),
    ("sqrt(-1)", math.isnan),
    ("acos(2)", math.isnan),
    ("(-8)^(1/3)", math.isnan),
    ("0^-1", lambda v: v == math.inf),
    ("exp(1000)", lambda v: v == math.inf),
])
def test_numeric_domain_issues_never_raise(parser, text, check):
    assert check(value_of(parser, text))


def test_domain_issues_through_variables(parser, x):
    expr = parser.parse("log(x) + 1/x")
    x.set_value(0.0)
    assert math.isnan(expr.evaluate())  # -inf + inf
    x.set_value(-1.0)
    assert math.isnan(expr.evaluate())


def test_max_min_with_nan_operands():
    nan = float('nan')
    assert math.isnan(evaluate_binary_op(nan, 1.0, 'max'))
    assert evaluate_binary_op(1.0, nan, 'max') == 1.0
    assert evaluate_binary_op(nan, 1.0, 'min') == 1.0
    assert math.isnan(evaluate_binary_op(1.0, nan, 'min'))


def test_unknown_operators_are_rejected():
    with pytest.raises(ValueError):
        evaluate_unary_op(1.0, 'cbrt')
    with pytest.raises(ValueError):
        evaluate_binary_op(1.0, 2.0, '%')


def test_horner_matches_direct_evaluation():
    coefficients = np.array([-6.0, 1.0, 1.0])
    for value in (-3.0, 0.0, 2.0, 10.5):
        assert evaluate_horner(coefficients, value) == pytest.approx(value ** 2 + value - 6)


def test_nodes_evaluate_through_operator_codes(parser, x):
    x.set_value(2.0)
    expr = parser.parse("max(x, 3) + sin(x)")
    assert expr.root.op_type == OpType.ADD
    assert expr.root.left.op_type == OpType.MAX
    assert expr.root.right.op_type == OpType.SIN
    assert expr.evaluate() == pytest.approx(3.0 + math.sin(2.0))
