import sympy as sp
from sympy.polys.polyerrors import PolynomialError
from typing import Dict, Any

from ...logging_system import log_debug


class SymPySimplifier:
  """SymPy-based simplifier for parsed expressions"""

  def __init__(self):
    self.simplification_strategies = [
      'simplify',
      'expand',
      'factor',
      'trigsimp',
      'logcombine'
    ]

  def simplify_expression(self, expression) -> Dict[str, Any]:
    """
    Simplify an Expression (or node) using multiple SymPy strategies

    Returns:
        Dict with the simplified sympy expression and metadata
    """
    sympy_expr = expression.to_sympy()
    original_complexity = self._calculate_complexity(sympy_expr)

    best_simplified = sympy_expr
    best_complexity = original_complexity
    best_strategy = 'none'

    for strategy in self.simplification_strategies:
      try:
        if strategy == 'simplify':
          simplified = sp.simplify(sympy_expr)
        elif strategy == 'expand':
          simplified = sp.expand(sympy_expr)
        elif strategy == 'factor':
          simplified = sp.factor(sympy_expr)
        elif strategy == 'trigsimp':
          simplified = sp.trigsimp(sympy_expr)
        elif strategy == 'logcombine':
          simplified = sp.logcombine(sympy_expr)
        else:
          continue
      except (TypeError, ValueError, NotImplementedError, PolynomialError) as e:
        log_debug(f"sympy strategy {strategy} failed: {e}")
        continue

      complexity = self._calculate_complexity(simplified)
      if complexity < best_complexity:
        best_simplified = simplified
        best_complexity = complexity
        best_strategy = strategy

    return {
      'simplified': best_simplified,
      'strategy_used': best_strategy,
      'complexity_reduction': original_complexity - best_complexity,
      'original_complexity': original_complexity,
      'simplified_complexity': best_complexity
    }

  def _calculate_complexity(self, expr: sp.Expr) -> int:
    """Calculate expression complexity for SymPy expressions"""
    return len(expr.free_symbols) + len(expr.atoms(sp.Function)) + expr.count_ops()


def latex_representation(expression) -> str:
  """Get LaTeX representation of an Expression (or node)"""
  return sp.latex(expression.to_sympy())
