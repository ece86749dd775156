import math

import numpy as np
import pytest

from expression_parser.expression_tree import (
    LiteralNode, VariableNode, UnaryOpNode, BinaryOpNode, ConditionalNode,
    PolynomialNode, ExpressionValidator, MAX_POLYNOMIAL_DEGREE,
    make_literal, make_unary, make_binary, make_if_then_else
)


class ExplodingNode(LiteralNode):
    """Stands in for a branch that must never be evaluated"""

    def evaluate(self):
        raise AssertionError("untaken branch was evaluated")


def test_make_literal():
    node = make_literal(2.5)
    assert isinstance(node, LiteralNode)
    assert node.evaluate() == 2.5


def test_unary_on_literal_folds():
    node = make_unary('sqrt', make_literal(16))
    assert isinstance(node, LiteralNode)
    assert node.value == 4.0


def test_unary_on_variable_builds_node(x):
    node = make_unary('neg', x)
    assert isinstance(node, UnaryOpNode)
    x.set_value(3)
    assert node.evaluate() == -3


def test_binary_on_literals_folds():
    node = make_binary('*', make_literal(3), make_literal(4))
    assert isinstance(node, LiteralNode)
    assert node.value == 12


def test_integer_power_of_variable_is_monomial(x):
    node = make_binary('^', x, make_literal(3))
    assert isinstance(node, PolynomialNode)
    assert list(node.coefficients) == [0, 0, 0, 1]
    assert node.variable is x
    assert node.degree == 3


@pytest.mark.parametrize("exponent", [-1, 2.5, MAX_POLYNOMIAL_DEGREE + 1])
def test_other_powers_stay_generic(x, exponent):
    node = make_binary('^', x, make_literal(exponent))
    assert isinstance(node, BinaryOpNode)
    x.set_value(2)
    assert node.evaluate() == pytest.approx(2.0 ** exponent)


def test_integer_scaling_of_variable(x):
    node = make_binary('*', make_literal(10), x)
    assert isinstance(node, PolynomialNode)
    assert list(node.coefficients) == [0, 10]


def test_fractional_scaling_stays_generic(x):
    node = make_binary('*', make_literal(0.5), x)
    assert isinstance(node, BinaryOpNode)


def test_scaling_copies_coefficients(x):
    square = make_binary('^', x, make_literal(2))
    scaled = make_binary('*', make_literal(3), square)
    assert list(scaled.coefficients) == [0, 0, 3]
    assert list(square.coefficients) == [0, 0, 1]
    assert not np.shares_memory(square.coefficients, scaled.coefficients)


def test_merging_never_touches_operands(x):
    a = make_binary('^', x, make_literal(2))
    b = make_binary('*', make_literal(2), x)
    total = make_binary('+', a, b)
    shifted = make_binary('+', total, make_literal(5))
    assert list(total.coefficients) == [0, 2, 1]
    assert list(shifted.coefficients) == [5, 2, 1]
    assert list(a.coefficients) == [0, 0, 1]
    assert list(b.coefficients) == [0, 2]


def test_coefficients_are_read_only(x):
    node = make_binary('^', x, make_literal(2))
    with pytest.raises(ValueError):
        node.coefficients[0] = 7.0


def test_polynomial_subtraction_aligns_shorter_operand(x):
    cube = make_binary('^', x, make_literal(3))
    line = make_binary('*', make_literal(4), x)
    node = make_binary('-', line, cube)
    assert list(node.coefficients) == [0, 4, 0, -1]


def test_literal_minus_polynomial(x):
    node = make_binary('-', make_literal(1), make_binary('^', x, make_literal(2)))
    assert list(node.coefficients) == [1, 0, -1]


def test_bare_variable_adjusts_linear_coefficient(x):
    square = make_binary('^', x, make_literal(2))
    assert list(make_binary('+', square, x).coefficients) == [0, 1, 1]
    assert list(make_binary('-', square, x).coefficients) == [0, -1, 1]
    assert list(make_binary('-', x, square).coefficients) == [0, 1, -1]


def test_degree_zero_polynomial_plus_variable_extends(x):
    constant = make_binary('^', x, make_literal(0))
    node = make_binary('+', constant, x)
    assert list(node.coefficients) == [1, 1]


def test_different_variables_do_not_merge(registry):
    x = registry.lookup_or_create('x')
    y = registry.lookup_or_create('y')
    px = make_binary('^', x, make_literal(2))
    py = make_binary('^', y, make_literal(2))
    assert isinstance(make_binary('+', px, py), BinaryOpNode)
    assert isinstance(make_binary('+', px, y), BinaryOpNode)


def test_variable_plus_literal_stays_generic(x):
    assert isinstance(make_binary('+', x, make_literal(1)), BinaryOpNode)


def test_degree_zero_polynomial_does_not_read_variable(x):
    node = make_binary('^', x, make_literal(0))
    assert isinstance(node, PolynomialNode)
    x.set_value(math.nan)
    assert node.evaluate() == 1.0


def test_static_conditional_selects_branch(x):
    assert make_if_then_else(make_literal(1), x, ExplodingNode(0)) is x
    assert make_if_then_else(make_literal(0), ExplodingNode(0), x) is x
    assert make_if_then_else(make_literal(-2), x, ExplodingNode(0)) is x


def test_dynamic_conditional_evaluates_one_branch(x):
    node = make_if_then_else(x, make_literal(10), ExplodingNode(0))
    assert isinstance(node, ConditionalNode)
    x.set_value(1)
    assert node.evaluate() == 10

    other = make_if_then_else(x, ExplodingNode(0), make_literal(20))
    x.set_value(0)
    assert other.evaluate() == 20


def test_unknown_operator_names_raise(x):
    with pytest.raises(ValueError):
        make_binary('%', x, x)
    with pytest.raises(ValueError):
        make_unary('cbrt', x)


def test_factory_output_satisfies_invariants(x):
    square = make_binary('^', x, make_literal(2))
    node = make_binary('+', make_unary('sin', square), make_binary('-', square, x))
    assert ExpressionValidator.is_valid_expression(node)


def test_validator_flags_hand_built_violations(x):
    unfolded = BinaryOpNode('+', LiteralNode(1), LiteralNode(2))
    shared = UnaryOpNode('neg', x)
    aliased = BinaryOpNode('*', shared, shared)
    assert ExpressionValidator.find_violations(unfolded) == ["unfolded binary: (1 + 2)"]
    assert ExpressionValidator.find_violations(aliased) == ["shared subtree: (-x)"]
    assert ExpressionValidator.is_valid_expression(VariableNode('y'))
