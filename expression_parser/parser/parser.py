"""
Operator-precedence parser for arithmetic/logical expressions.

Operators in descending order of precedence: ``^`` (right associative),
``* /``, unary minus, ``+ -``, the comparisons ``< <= = <> >= >``, ``or``,
``and``. Unary functions abs, acos, asin, atan, ceil, cos, exp, floor, log,
round, sin, sqrt, tan take one parenthesised argument; atan2, max and min take
two; ``if(test, then, else)`` takes three. ``pi`` is built in.

Nodes are built through the factory, so constant subexpressions are folded
and single-variable polynomials are collapsed while parsing.
"""

from typing import Optional, Set

from ..expression_tree.core.node import Node, VariableNode
from ..expression_tree.core.operators import UNARY_FUNCTIONS, BINARY_FUNCTIONS, LOGICAL_OPS
from ..expression_tree.expression import Expression
from ..expression_tree.factory import make_literal, make_unary, make_binary, make_if_then_else
from ..expression_tree.registry import VariableRegistry, get_global_registry, PI_NAME
from ..logging_system import LogLevel, log_info, log_warning
from .correction import CorrectionSearch
from .errors import ErrorReason, ExpressionSyntaxError
from .tokens import Scanner, Token, TokenBuffer, TokenType

# Operator -> (left precedence, right precedence). Higher binds tighter.
# Left-associative operators use r = l + 1, right-associative use r = l.
BINARY_PRECEDENCE = {
  'and': (5, 6),
  'or': (10, 11),
  '<': (20, 21), '<=': (20, 21), '=': (20, 21),
  '<>': (20, 21), '>=': (20, 21), '>': (20, 21),
  '+': (30, 31), '-': (30, 31),
  '/': (40, 41), '*': (40, 41),
  '^': (50, 50),
}

UNARY_MINUS_PRECEDENCE = 35

RESERVED_WORDS = frozenset(LOGICAL_OPS | {'if'})

_OPERATOR_TOKEN_TYPES = (TokenType.OPERATOR, TokenType.LE, TokenType.NE, TokenType.GE)


class Parser:
  """Parses strings into Expression trees, recovering from single-token slips"""

  def __init__(self, registry: Optional[VariableRegistry] = None, correct_errors: bool = True):
    self.registry = registry if registry is not None else get_global_registry()
    self.correct_errors = correct_errors
    self.last_correction = None
    # None means any variable is allowed
    self._allowed: Optional[Set[VariableNode]] = None
    self._tokens: Optional[TokenBuffer] = None
    self._token: Optional[Token] = None
    # Identifiers of the uncorrected input while a correction search runs
    self._source_names: Optional[Set[str]] = None

  def allow(self, variable: Optional[VariableNode] = None):
    """Restrict accepted variables.

    The first call activates the allow-set (seeded with pi) even when
    `variable` is None; from then on only allowed names may appear.
    """
    if self._allowed is None:
      self._allowed = {self.registry.pi}
    if variable is not None:
      self._allowed.add(variable)

  @property
  def restricted(self) -> bool:
    return self._allowed is not None

  def parse(self, text: str) -> Expression:
    """Return the expression denoted by `text`.

    On failure a single-token correction is searched for; if none works the
    error from the uncorrected attempt is raised. A correction may only refer
    to variables that appear in `text` or already exist in the registry.
    """
    buffer = Scanner(text).scan()
    self.last_correction = None
    try:
      root = self.reparse(buffer)
    except ExpressionSyntaxError as error:
      if not self.correct_errors or error.reason == ErrorReason.UNKNOWN_VARIABLE:
        raise
      log_info(f"Parse of {text!r} failed ({error}); searching for a correction",
               LogLevel.MODERATE)
      self._source_names = {t.text for t in buffer.tokens if t.type == TokenType.WORD}
      try:
        result = CorrectionSearch(self).search(buffer, error.token_index)
      finally:
        self._source_names = None
      if result is None:
        raise error
      root, self.last_correction = result
      log_warning(f"Input {text!r} was read as {self.last_correction.corrected_text!r} "
                  f"({self.last_correction.describe()})")
    return Expression(root, source=text)

  parse_string = parse

  def reparse(self, buffer: TokenBuffer) -> Node:
    """Parse `buffer` from its first token; all tokens must be consumed"""
    self._tokens = buffer
    buffer.reset()
    self._next_token()
    expr = self._parse_expr(0)
    if self._token.type != TokenType.EOF:
      raise self._error("Incomplete expression", ErrorReason.INCOMPLETE_EXPRESSION)
    return expr

  def _next_token(self):
    self._token = self._tokens.next_token()

  def _binary_operator(self, token: Token) -> Optional[str]:
    if token.type in _OPERATOR_TOKEN_TYPES or (
        token.type == TokenType.WORD and token.text in LOGICAL_OPS):
      if token.text in BINARY_PRECEDENCE:
        return token.text
    return None

  def _parse_expr(self, precedence: int) -> Node:
    expr = self._parse_factor()
    while True:
      operator = self._binary_operator(self._token)
      if operator is None:
        break
      left, right = BINARY_PRECEDENCE[operator]
      if left < precedence:
        break
      self._next_token()
      expr = make_binary(operator, expr, self._parse_expr(right))
    return expr

  def _parse_factor(self) -> Node:
    token = self._token

    if token.type == TokenType.NUMBER:
      self._next_token()
      return make_literal(token.value)

    if token.type == TokenType.WORD:
      name = token.text
      if name in UNARY_FUNCTIONS:
        self._next_token()
        self._expect('(')
        operand = self._parse_expr(0)
        self._expect(')')
        return make_unary(name, operand)

      if name in BINARY_FUNCTIONS:
        self._next_token()
        self._expect('(')
        left = self._parse_expr(0)
        self._expect(',')
        right = self._parse_expr(0)
        self._expect(')')
        return make_binary(name, left, right)

      if name == 'if':
        self._next_token()
        self._expect('(')
        test = self._parse_expr(0)
        self._expect(',')
        consequent = self._parse_expr(0)
        self._expect(',')
        alternative = self._parse_expr(0)
        self._expect(')')
        return make_if_then_else(test, consequent, alternative)

      if name == PI_NAME:
        self._next_token()
        return self.registry.pi

      if name not in RESERVED_WORDS:
        variable = self._resolve_variable(name)
        self._next_token()
        return variable

    elif token.is_operator('('):
      self._next_token()
      enclosed = self._parse_expr(0)
      self._expect(')')
      return enclosed

    elif token.is_operator('-'):
      self._next_token()
      return make_unary('neg', self._parse_expr(UNARY_MINUS_PRECEDENCE))

    elif token.type == TokenType.EOF:
      raise self._error("Expected a factor", ErrorReason.PREMATURE_EOF)

    raise self._error("Expected a factor", ErrorReason.BAD_FACTOR)

  def _resolve_variable(self, name: str) -> VariableNode:
    if self._allowed is None:
      if self._source_names is None or name in self._source_names:
        return self.registry.lookup_or_create(name)
      # Names introduced by a correction trial must already exist
      variable = self.registry.get(name)
      if variable is None:
        raise self._error(f"Unknown variable {name!r}", ErrorReason.UNKNOWN_VARIABLE)
      return variable
    # Rejected names are not interned
    variable = self.registry.get(name)
    if variable is None or variable not in self._allowed:
      raise self._error(f"Unknown variable {name!r}", ErrorReason.UNKNOWN_VARIABLE)
    return variable

  def _expect(self, char: str):
    if not self._token.is_operator(char):
      raise self._error(f"'{char}' expected", ErrorReason.UNEXPECTED_TOKEN, expected=char)
    self._next_token()

  def _error(self, complaint: str, reason: ErrorReason,
             expected: Optional[str] = None) -> ExpressionSyntaxError:
    return ExpressionSyntaxError(
      f"{complaint} (found {self._token.describe()})", reason,
      self._tokens.text, self._token.start, self._tokens.index, expected
    )


def parse(text: str, registry: Optional[VariableRegistry] = None) -> Expression:
  """Parse `text` with a fresh, unrestricted parser"""
  return Parser(registry=registry).parse(text)
