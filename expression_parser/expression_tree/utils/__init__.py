"""Utilities for expression trees."""

from .sympy_utils import SymPySimplifier, latex_representation
from .validator import ExpressionValidator
from .tree_utils import (
    get_children, get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_variables, get_literals, is_constant_tree
)

__all__ = [
    'SymPySimplifier', 'latex_representation', 'ExpressionValidator',
    'get_children', 'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_variables', 'get_literals', 'is_constant_tree'
]
