"""
Tree Utility Functions

Traversal and analysis helpers shared by Expression, the validator and the
tests. Variables are shared between trees, so traversals visit each
VariableNode once per reference rather than once per object.
"""

from typing import List, Type, TypeVar

from ..core.node import (
    Node, LiteralNode, VariableNode, UnaryOpNode, BinaryOpNode,
    ConditionalNode, PolynomialNode
)

T = TypeVar('T', bound=Node)


def get_children(node: Node) -> List[Node]:
    """Direct children of a node, in evaluation order."""
    if isinstance(node, BinaryOpNode):
        return [node.left, node.right]
    elif isinstance(node, UnaryOpNode):
        return [node.operand]
    elif isinstance(node, ConditionalNode):
        return [node.test, node.consequent, node.alternative]
    elif isinstance(node, PolynomialNode):
        return [node.variable]
    return []


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(get_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in get_children(node):
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = get_children(node)
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Node, node_class: Type[T]) -> List[T]:
    """Find all nodes of a specific class."""
    return [n for n in get_all_nodes(node) if isinstance(n, node_class)]


def get_variables(node: Node) -> List[VariableNode]:
    """Distinct variables referenced by the tree, in first-seen order."""
    seen = []
    for n in get_all_nodes(node, 'depth_first'):
        if isinstance(n, VariableNode) and not any(n is v for v in seen):
            seen.append(n)
    return seen


def get_literals(node: Node) -> List[LiteralNode]:
    return find_nodes_by_type(node, LiteralNode)


def is_constant_tree(node: Node) -> bool:
    """True when the tree's value cannot depend on any variable."""
    if isinstance(node, PolynomialNode):
        return node.degree == 0
    return not get_variables(node)
