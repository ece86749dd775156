import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from .operators import (
  RELATIONAL_OPS, unary_op_type, binary_op_type,
  evaluate_unary_op_fast, evaluate_binary_op_fast, evaluate_horner
)

# Infix spelling used by to_string(); function-style operators are absent
INFIX_SYMBOLS = {
  '+': '+', '-': '-', '*': '*', '/': '/', '^': '^',
  '<': '<', '<=': '<=', '=': '=', '<>': '<>', '>=': '>=', '>': '>',
  'and': 'and', 'or': 'or'
}

_SYMPY_UNARY = {
  'abs': sp.Abs, 'acos': sp.acos, 'asin': sp.asin, 'atan': sp.atan,
  'ceil': sp.ceiling, 'cos': sp.cos, 'exp': sp.exp, 'floor': sp.floor,
  'log': sp.log, 'sin': sp.sin, 'sqrt': sp.sqrt, 'tan': sp.tan
}

_SYMPY_RELATIONAL = {
  '<': sp.Lt, '<=': sp.Le, '=': sp.Eq, '<>': sp.Ne, '>=': sp.Ge, '>': sp.Gt
}


def _sympy_number(value: float) -> sp.Expr:
  if float(value).is_integer():
    return sp.Integer(int(value))
  return sp.Float(value)


def _sympy_truth(condition) -> sp.Expr:
  return sp.Piecewise((sp.Integer(1), condition), (sp.Integer(0), True))


class Node(ABC):
  """Base node class with size caching"""

  __slots__ = ('_size_cache',)

  def __init__(self):
    self._size_cache: Optional[int] = None

  @abstractmethod
  def evaluate(self) -> float:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class LiteralNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def evaluate(self) -> float:
    return self.value

  def to_string(self) -> str:
    if self.value.is_integer():
      return str(int(self.value))
    return repr(self.value)

  def to_sympy(self) -> sp.Expr:
    if np.isnan(self.value):
      return sp.nan
    if np.isinf(self.value):
      return sp.oo if self.value > 0 else -sp.oo
    return _sympy_number(self.value)

  def _compute_size(self) -> int:
    return 1


class VariableNode(Node):
  """Named variable; the only node whose state changes after construction.

  Instances are interned by a VariableRegistry, so every tree that mentions
  a name shares the same object and sees value updates immediately.
  """
  __slots__ = ('name', '_value')

  def __init__(self, name: str, value: float = 0.0):
    super().__init__()
    self.name = name
    self._value = float(value)

  @property
  def value(self) -> float:
    return self._value

  @value.setter
  def value(self, value: float):
    self._value = float(value)

  def set_value(self, value: float):
    self._value = float(value)

  def evaluate(self) -> float:
    return self._value

  def to_string(self) -> str:
    return self.name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _compute_size(self) -> int:
    return 1

  def __repr__(self) -> str:
    return f"VariableNode({self.name}={self._value!r})"


class UnaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'operand')

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    self.op_type = unary_op_type(operator)
    self.operator = operator
    self.operand = operand

  def evaluate(self) -> float:
    return evaluate_unary_op_fast(self.operand.evaluate(), self.op_type)

  def to_string(self) -> str:
    if self.operator == 'neg':
      return f"(-{self.operand.to_string()})"
    return f"{self.operator}({self.operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    operand_sympy = self.operand.to_sympy()
    if self.operator == 'neg':
      return -operand_sympy
    if self.operator == 'round':
      # sympy has no round-half-even primitive
      return sp.Function('rint')(operand_sympy)
    return _SYMPY_UNARY[self.operator](operand_sympy)

  def _compute_size(self) -> int:
    return 1 + self.operand.size()


class BinaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    self.op_type = binary_op_type(operator)
    self.operator = operator
    self.left = left
    self.right = right

  def evaluate(self) -> float:
    return evaluate_binary_op_fast(self.left.evaluate(), self.right.evaluate(), self.op_type)

  def to_string(self) -> str:
    if self.operator in INFIX_SYMBOLS:
      return f"({self.left.to_string()} {INFIX_SYMBOLS[self.operator]} {self.right.to_string()})"
    return f"{self.operator}({self.left.to_string()}, {self.right.to_string()})"

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    elif self.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    elif self.operator == '^':
      return sp.Pow(left, right)
    elif self.operator == 'atan2':
      return sp.atan2(left, right)
    elif self.operator == 'max':
      return sp.Max(left, right)
    elif self.operator == 'min':
      return sp.Min(left, right)
    elif self.operator in RELATIONAL_OPS:
      return _sympy_truth(_SYMPY_RELATIONAL[self.operator](left, right))
    elif self.operator == 'and':
      return _sympy_truth(sp.And(sp.Ne(left, 0), sp.Ne(right, 0)))
    else:
      return _sympy_truth(sp.Or(sp.Ne(left, 0), sp.Ne(right, 0)))

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()


class ConditionalNode(Node):
  __slots__ = ('test', 'consequent', 'alternative')

  def __init__(self, test: Node, consequent: Node, alternative: Node):
    super().__init__()
    self.test = test
    self.consequent = consequent
    self.alternative = alternative

  def evaluate(self) -> float:
    if self.test.evaluate() != 0:
      return self.consequent.evaluate()
    return self.alternative.evaluate()

  def to_string(self) -> str:
    return (f"if({self.test.to_string()}, {self.consequent.to_string()}, "
            f"{self.alternative.to_string()})")

  def to_sympy(self) -> sp.Expr:
    return sp.Piecewise(
      (self.consequent.to_sympy(), sp.Ne(self.test.to_sympy(), 0)),
      (self.alternative.to_sympy(), True)
    )

  def _compute_size(self) -> int:
    return 1 + self.test.size() + self.consequent.size() + self.alternative.size()


class PolynomialNode(Node):
  """Single-variable polynomial, coefficients in ascending powers.

  The coefficient array is copied on construction and frozen, so nodes
  built from one another never share storage.
  """
  __slots__ = ('coefficients', 'variable')

  def __init__(self, coefficients: Sequence[float], variable: VariableNode):
    super().__init__()
    if len(coefficients) == 0:
      raise ValueError("A polynomial needs at least one coefficient")
    coeffs = np.array(coefficients, dtype=np.float64)
    coeffs.flags.writeable = False
    self.coefficients = coeffs
    self.variable = variable

  @property
  def degree(self) -> int:
    return self.coefficients.shape[0] - 1

  def terms(self) -> int:
    """Number of nonzero coefficients"""
    return int(np.count_nonzero(self.coefficients))

  def evaluate(self) -> float:
    if self.coefficients.shape[0] == 1:
      return float(self.coefficients[0])
    return float(evaluate_horner(self.coefficients, self.variable.value))

  def to_string(self) -> str:
    parts = []
    name = self.variable.to_string()
    for power in range(self.degree, -1, -1):
      c = float(self.coefficients[power])
      if c == 0 and (parts or power > 0):
        continue
      coeff = str(int(c)) if c.is_integer() else repr(c)
      if power == 0:
        parts.append(coeff)
      elif power == 1:
        parts.append(f"{coeff}*{name}")
      else:
        parts.append(f"{coeff}*{name}^{power}")
    return "(" + " + ".join(parts) + ")"

  def to_sympy(self) -> sp.Expr:
    symbol = self.variable.to_sympy()
    terms = [_sympy_number(float(c)) * symbol**power
             for power, c in enumerate(self.coefficients) if c != 0]
    return sp.Add(*terms) if terms else sp.Integer(0)

  def _compute_size(self) -> int:
    return 1 + self.terms()
