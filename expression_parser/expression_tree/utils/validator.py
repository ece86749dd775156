from typing import List
from ..core.node import (
  Node, LiteralNode, VariableNode, UnaryOpNode, BinaryOpNode,
  ConditionalNode, PolynomialNode
)


class ExpressionValidator:
  """Checks the structural invariants of trees built by the factory"""

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    return not ExpressionValidator.find_violations(node)

  @staticmethod
  def find_violations(node: Node) -> List[str]:
    violations: List[str] = []
    ExpressionValidator._check_recursive(node, violations, owned=set())
    return violations

  @staticmethod
  def _check_recursive(node: Node, violations: List[str], owned: set):
    if isinstance(node, VariableNode):
      # Variables are referenced, not owned, so sharing is expected
      return

    if id(node) in owned:
      violations.append(f"shared subtree: {node.to_string()}")
      return
    owned.add(id(node))

    if isinstance(node, LiteralNode):
      return

    elif isinstance(node, UnaryOpNode):
      if isinstance(node.operand, LiteralNode):
        violations.append(f"unfolded unary: {node.to_string()}")
      ExpressionValidator._check_recursive(node.operand, violations, owned)

    elif isinstance(node, BinaryOpNode):
      if isinstance(node.left, LiteralNode) and isinstance(node.right, LiteralNode):
        violations.append(f"unfolded binary: {node.to_string()}")
      ExpressionValidator._check_recursive(node.left, violations, owned)
      ExpressionValidator._check_recursive(node.right, violations, owned)

    elif isinstance(node, ConditionalNode):
      if isinstance(node.test, LiteralNode):
        violations.append(f"static conditional: {node.to_string()}")
      ExpressionValidator._check_recursive(node.test, violations, owned)
      ExpressionValidator._check_recursive(node.consequent, violations, owned)
      ExpressionValidator._check_recursive(node.alternative, violations, owned)

    elif isinstance(node, PolynomialNode):
      if node.coefficients.ndim != 1 or node.coefficients.shape[0] != node.degree + 1:
        violations.append(f"malformed coefficients: {node.to_string()}")
      if node.coefficients.flags.writeable:
        violations.append(f"mutable coefficients: {node.to_string()}")
      if not isinstance(node.variable, VariableNode):
        violations.append(f"polynomial over non-variable: {node.to_string()}")

    else:
      violations.append(f"unknown node type: {type(node).__name__}")
