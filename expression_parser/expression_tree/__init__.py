"""Expression Tree Module

Node model, smart constructors and variable interning for parsed expressions.
"""

from .expression import Expression
from .core.node import (
    Node,
    LiteralNode,
    VariableNode,
    UnaryOpNode,
    BinaryOpNode,
    ConditionalNode,
    PolynomialNode
)
from .core.operators import (
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    UNARY_FUNCTIONS,
    BINARY_FUNCTIONS,
    evaluate_unary_op,
    evaluate_binary_op
)
from .factory import (
    make_literal, make_unary, make_binary, make_if_then_else, MAX_POLYNOMIAL_DEGREE
)
from .registry import VariableRegistry, get_global_registry, reset_global_registry
from .utils import SymPySimplifier, ExpressionValidator, latex_representation

__all__ = [
    "Expression",
    "Node", "LiteralNode", "VariableNode", "UnaryOpNode", "BinaryOpNode",
    "ConditionalNode", "PolynomialNode",
    "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "UNARY_FUNCTIONS", "BINARY_FUNCTIONS",
    "evaluate_unary_op", "evaluate_binary_op",
    "make_literal", "make_unary", "make_binary", "make_if_then_else",
    "MAX_POLYNOMIAL_DEGREE",
    "VariableRegistry", "get_global_registry", "reset_global_registry",
    "SymPySimplifier", "ExpressionValidator", "latex_representation"
]
