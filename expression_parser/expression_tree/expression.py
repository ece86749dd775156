import numpy as np
from typing import Optional, List
from .core.node import Node, VariableNode
from .utils.tree_utils import calculate_tree_depth, get_variables, is_constant_tree
import sympy as sp


class Expression:
  """Parsed expression: a root node plus cached renderings"""

  __slots__ = ('root', 'source', '_string_cache')

  def __init__(self, root: Node, source: Optional[str] = None):
    self.root = root
    self.source = source
    self._string_cache: Optional[str] = None

  def evaluate(self) -> float:
    return self.root.evaluate()

  def sample(self, variable: VariableNode, values) -> np.ndarray:
    """Evaluate once per entry of `values` bound to `variable`.

    The variable's previous value is restored afterwards. Not safe against
    concurrent writers of the same variable.
    """
    values = np.asarray(values, dtype=np.float64)
    out = np.empty(values.shape, dtype=np.float64)
    saved = variable.value
    try:
      for i, v in np.ndenumerate(values):
        variable.set_value(v)
        out[i] = self.root.evaluate()
    finally:
      variable.set_value(saved)
    return out

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[VariableNode]:
    return get_variables(self.root)

  def is_constant(self) -> bool:
    return is_constant_tree(self.root)

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

  def __str__(self) -> str:
    return self.to_string()
