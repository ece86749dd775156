"""Smart constructors for expression nodes.

Every node the parser builds goes through these functions. They fold
operations whose operands are all literals and collapse single-variable
chains of ``^``, integer scaling, ``+`` and ``-`` into PolynomialNode.
Coefficient arrays are always freshly allocated, never shared between nodes.
"""

import numpy as np

from .core.node import (
  Node, LiteralNode, VariableNode, UnaryOpNode, BinaryOpNode,
  ConditionalNode, PolynomialNode
)
from .core.operators import evaluate_unary_op, evaluate_binary_op

# Larger integer exponents stay generic BinaryOpNode('^')
MAX_POLYNOMIAL_DEGREE = 64


def _is_integer_literal(node: Node) -> bool:
  return isinstance(node, LiteralNode) and node.value.is_integer()


def make_literal(value: float) -> LiteralNode:
  return LiteralNode(value)


def make_unary(operator: str, operand: Node) -> Node:
  if isinstance(operand, LiteralNode):
    return LiteralNode(evaluate_unary_op(operand.value, operator))
  return UnaryOpNode(operator, operand)


def make_binary(operator: str, left: Node, right: Node) -> Node:
  if isinstance(left, LiteralNode) and isinstance(right, LiteralNode):
    return LiteralNode(evaluate_binary_op(left.value, right.value, operator))

  if operator == '^':
    if (isinstance(left, VariableNode) and _is_integer_literal(right)
        and 0 <= right.value <= MAX_POLYNOMIAL_DEGREE):
      return _monomial(left, int(right.value))

  elif operator == '*':
    if _is_integer_literal(left):
      if isinstance(right, PolynomialNode):
        with np.errstate(all='ignore'):
          scaled = right.coefficients * left.value
        return PolynomialNode(scaled, right.variable)
      if isinstance(right, VariableNode):
        return PolynomialNode([0.0, left.value], right)

  elif operator in ('+', '-'):
    merged = _merge_sum(operator, left, right)
    if merged is not None:
      return merged

  return BinaryOpNode(operator, left, right)


def make_if_then_else(test: Node, consequent: Node, alternative: Node) -> Node:
  if isinstance(test, LiteralNode):
    return consequent if test.value != 0 else alternative
  return ConditionalNode(test, consequent, alternative)


def _monomial(variable: VariableNode, power: int) -> PolynomialNode:
  coefficients = np.zeros(power + 1, dtype=np.float64)
  coefficients[power] = 1.0
  return PolynomialNode(coefficients, variable)


def _as_coefficients(node: Node):
  """Coefficient view of a literal or polynomial operand, else None"""
  if isinstance(node, LiteralNode):
    return np.array([node.value], dtype=np.float64)
  if isinstance(node, PolynomialNode):
    return node.coefficients
  return None


def _merge_sum(operator: str, left: Node, right: Node):
  sign = 1.0 if operator == '+' else -1.0

  if isinstance(left, PolynomialNode) and isinstance(right, PolynomialNode):
    if left.variable is not right.variable:
      return None
    return PolynomialNode(_add_aligned(left.coefficients, right.coefficients, sign),
                          left.variable)

  if isinstance(left, PolynomialNode) or isinstance(right, PolynomialNode):
    poly = left if isinstance(left, PolynomialNode) else right
    other = right if poly is left else left

    other_coeffs = _as_coefficients(other)
    if other_coeffs is None:
      # a bare variable counts as the monomial 1*x
      if other is not poly.variable:
        return None
      other_coeffs = np.array([0.0, 1.0], dtype=np.float64)

    if poly is left:
      coefficients = _add_aligned(poly.coefficients, other_coeffs, sign)
    else:
      coefficients = _add_aligned(other_coeffs, poly.coefficients, sign)
    return PolynomialNode(coefficients, poly.variable)

  return None


def _add_aligned(a: np.ndarray, b: np.ndarray, sign: float) -> np.ndarray:
  """Return a + sign * b in a new array as long as the longer input"""
  result = np.zeros(max(a.shape[0], b.shape[0]), dtype=np.float64)
  with np.errstate(all='ignore'):
    result[:a.shape[0]] += a
    result[:b.shape[0]] += sign * b
  return result
