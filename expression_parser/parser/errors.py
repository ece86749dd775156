from enum import IntEnum
from typing import Optional


class ErrorReason(IntEnum):
  UNEXPECTED_TOKEN = 0       # an expected token did not appear
  PREMATURE_EOF = 1
  UNKNOWN_VARIABLE = 2       # identifier outside an active allow-set
  INCOMPLETE_EXPRESSION = 3  # valid prefix followed by unconsumed tokens
  BAD_FACTOR = 4             # token cannot begin an expression


class ExpressionSyntaxError(ValueError):
  """Raised when source text cannot be parsed (even after correction)"""

  def __init__(self, message: str, reason: ErrorReason, text: str,
               position: int, token_index: int, expected: Optional[str] = None):
    super().__init__(message)
    self.message = message
    self.reason = reason
    self.text = text
    self.position = position
    self.token_index = token_index
    self.expected = expected

  def explain(self) -> str:
    """Message plus the input with a caret under the failing position"""
    return f"{self.message}\n  {self.text}\n  {' ' * self.position}^"

  def __str__(self) -> str:
    return f"{self.message} at position {self.position}"

  def __repr__(self) -> str:
    return (f"ExpressionSyntaxError({self.message!r}, reason={self.reason.name}, "
            f"position={self.position})")
