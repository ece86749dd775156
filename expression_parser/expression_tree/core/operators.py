import numpy as np
import numba
from enum import IntEnum

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  ATAN2 = 5
  MAX = 6
  MIN = 7
  LT = 8
  LE = 9
  EQ = 10
  NE = 11
  GE = 12
  GT = 13
  AND = 14
  OR = 15
  # Unary ops
  ABS = 100
  ACOS = 101
  ASIN = 102
  ATAN = 103
  CEIL = 104
  COS = 105
  EXP = 106
  FLOOR = 107
  LOG = 108
  NEG = 109
  ROUND = 110
  SIN = 111
  SQRT = 112
  TAN = 113

# Mapping dictionaries
BINARY_OP_MAP = {
    '+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW,
    'atan2': OpType.ATAN2, 'max': OpType.MAX, 'min': OpType.MIN,
    '<': OpType.LT, '<=': OpType.LE, '=': OpType.EQ,
    '<>': OpType.NE, '>=': OpType.GE, '>': OpType.GT,
    'and': OpType.AND, 'or': OpType.OR
}
UNARY_OP_MAP = {
    'abs': OpType.ABS, 'acos': OpType.ACOS, 'asin': OpType.ASIN,
    'atan': OpType.ATAN, 'ceil': OpType.CEIL, 'cos': OpType.COS,
    'exp': OpType.EXP, 'floor': OpType.FLOOR, 'log': OpType.LOG,
    'neg': OpType.NEG, 'round': OpType.ROUND, 'sin': OpType.SIN,
    'sqrt': OpType.SQRT, 'tan': OpType.TAN
}

# Names callable as name(arg) / name(arg, arg) in source text, in lookup order
UNARY_FUNCTIONS = ('abs', 'acos', 'asin', 'atan', 'ceil', 'cos', 'exp',
                   'floor', 'log', 'round', 'sin', 'sqrt', 'tan')
BINARY_FUNCTIONS = ('atan2', 'max', 'min')

RELATIONAL_OPS = frozenset(('<', '<=', '=', '<>', '>=', '>'))
LOGICAL_OPS = frozenset(('and', 'or'))

_UNARY_UFUNCS = {
    OpType.ABS: np.abs, OpType.ACOS: np.arccos, OpType.ASIN: np.arcsin,
    OpType.ATAN: np.arctan, OpType.CEIL: np.ceil, OpType.COS: np.cos,
    OpType.EXP: np.exp, OpType.FLOOR: np.floor, OpType.LOG: np.log,
    OpType.NEG: np.negative, OpType.ROUND: np.rint, OpType.SIN: np.sin,
    OpType.SQRT: np.sqrt, OpType.TAN: np.tan
}


def unary_op_type(operator: str) -> OpType:
  op_type = UNARY_OP_MAP.get(operator)
  if op_type is None:
    raise ValueError(f"Unknown unary operator: {operator}")
  return op_type


def binary_op_type(operator: str) -> OpType:
  op_type = BINARY_OP_MAP.get(operator)
  if op_type is None:
    raise ValueError(f"Unknown binary operator: {operator}")
  return op_type


def evaluate_unary_op(operand_val: float, operator: str) -> float:
  """Apply a unary operator by name; unknown names raise ValueError"""
  return evaluate_unary_op_fast(operand_val, unary_op_type(operator))


def evaluate_binary_op(left_val: float, right_val: float, operator: str) -> float:
  """Apply a binary operator by name; unknown names raise ValueError"""
  return evaluate_binary_op_fast(left_val, right_val, binary_op_type(operator))


def evaluate_unary_op_fast(operand_val: float, op_type: OpType) -> float:
  """Apply a unary operator with IEEE-754 semantics (NaN/inf, never raises)"""
  with np.errstate(all='ignore'):
    return float(_UNARY_UFUNCS[op_type](np.float64(operand_val)))


def evaluate_binary_op_fast(left_val: float, right_val: float, op_type: OpType) -> float:
  """Apply a binary operator; comparisons and logic yield exactly 1.0 or 0.0"""
  if op_type == OpType.LT:
    return 1.0 if left_val < right_val else 0.0
  elif op_type == OpType.LE:
    return 1.0 if left_val <= right_val else 0.0
  elif op_type == OpType.EQ:
    return 1.0 if left_val == right_val else 0.0
  elif op_type == OpType.NE:
    return 1.0 if left_val != right_val else 0.0
  elif op_type == OpType.GE:
    return 1.0 if left_val >= right_val else 0.0
  elif op_type == OpType.GT:
    return 1.0 if left_val > right_val else 0.0
  elif op_type == OpType.AND:
    return 1.0 if left_val != 0 and right_val != 0 else 0.0
  elif op_type == OpType.OR:
    return 1.0 if left_val != 0 or right_val != 0 else 0.0
  # NaN comparisons are false: max falls back to the left operand, min to the right
  elif op_type == OpType.MAX:
    return float(right_val if left_val < right_val else left_val)
  elif op_type == OpType.MIN:
    return float(left_val if left_val < right_val else right_val)

  a = np.float64(left_val)
  b = np.float64(right_val)
  with np.errstate(all='ignore'):
    if op_type == OpType.ADD:
      return float(a + b)
    elif op_type == OpType.SUB:
      return float(a - b)
    elif op_type == OpType.MUL:
      return float(a * b)
    elif op_type == OpType.DIV:
      return float(np.divide(a, b))
    elif op_type == OpType.POW:
      return float(np.power(a, b))
    elif op_type == OpType.ATAN2:
      return float(np.arctan2(a, b))
  raise ValueError(f"Unknown binary operator code: {op_type}")


@numba.njit(cache=True)
def evaluate_horner(coefficients, x):
  """Evaluate sum(c[i] * x**i) from the highest power down"""
  p = coefficients[coefficients.shape[0] - 1]
  for j in range(coefficients.shape[0] - 2, -1, -1):
    p = p * x + coefficients[j]
  return p
