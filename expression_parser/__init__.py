"""Expression Parser Package

Parses arithmetic/logical expressions into evaluable trees with eager constant
folding and single-variable polynomial normalization, recovering from
single-token input errors.
"""

from .expression_tree import (
  Expression, Node, LiteralNode, VariableNode, UnaryOpNode, BinaryOpNode,
  ConditionalNode, PolynomialNode,
  VariableRegistry, get_global_registry, reset_global_registry,
  SymPySimplifier, ExpressionValidator, latex_representation
)
from .parser import (
  Parser, parse, ErrorReason, ExpressionSyntaxError, Correction
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "LiteralNode", "VariableNode", "UnaryOpNode",
  "BinaryOpNode", "ConditionalNode", "PolynomialNode",
  "VariableRegistry", "get_global_registry", "reset_global_registry",
  "SymPySimplifier", "ExpressionValidator", "latex_representation",
  "Parser", "parse", "ErrorReason", "ExpressionSyntaxError", "Correction",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
