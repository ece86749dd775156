"""Core expression tree components."""

from .node import (
    Node, LiteralNode, VariableNode, UnaryOpNode, BinaryOpNode,
    ConditionalNode, PolynomialNode
)
from .operators import (
    OpType, BINARY_OP_MAP, UNARY_OP_MAP, unary_op_type, binary_op_type,
    UNARY_FUNCTIONS, BINARY_FUNCTIONS, RELATIONAL_OPS, LOGICAL_OPS,
    evaluate_unary_op, evaluate_binary_op, evaluate_unary_op_fast,
    evaluate_binary_op_fast, evaluate_horner
)

__all__ = [
    'Node', 'LiteralNode', 'VariableNode', 'UnaryOpNode', 'BinaryOpNode',
    'ConditionalNode', 'PolynomialNode',
    'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'unary_op_type', 'binary_op_type',
    'UNARY_FUNCTIONS', 'BINARY_FUNCTIONS', 'RELATIONAL_OPS', 'LOGICAL_OPS',
    'evaluate_unary_op', 'evaluate_binary_op', 'evaluate_unary_op_fast',
    'evaluate_binary_op_fast', 'evaluate_horner'
]
