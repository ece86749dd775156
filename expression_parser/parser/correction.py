"""
Single-edit error correction.

When a parse fails, the token buffer is edited one token at a time and
reparsed from the start. Insertions are tried at every index from the
failure point back to the first token, then deletions, then substitutions.
The first edit that yields a complete parse is kept. This is a heuristic:
it finds *a* single edit, not necessarily the most plausible one.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from ..expression_tree.core.node import Node
from ..expression_tree.core.operators import UNARY_FUNCTIONS, BINARY_FUNCTIONS
from ..logging_system import LogLevel, log_debug, log_info
from .errors import ExpressionSyntaxError
from .tokens import COMPOUND_OPERATORS, OPERATOR_CHARS, Token, TokenBuffer, TokenType

if TYPE_CHECKING:
  from .parser import Parser


@dataclass
class Correction:
  """The edit that made the input parseable"""
  kind: str              # 'insert', 'delete' or 'substitute'
  index: int             # token index the edit applied to
  token: Token           # inserted, deleted or substituted-in token
  corrected_text: str    # tokens of the repaired buffer joined by spaces

  def describe(self) -> str:
    if self.kind == 'insert':
      return f"inserted {self.token.text!r} at token {self.index}"
    if self.kind == 'delete':
      return f"deleted {self.token.text!r} at token {self.index}"
    return f"substituted {self.token.text!r} at token {self.index}"


def candidate_tokens(anchor: Token) -> List[Token]:
  """Tokens tried for insertion/substitution, positioned at `anchor`"""
  pos = anchor.start
  candidates = [Token(TokenType.NUMBER, '1', pos, pos, 1.0)]
  candidates.extend(Token(TokenType.OPERATOR, c, pos, pos) for c in OPERATOR_CHARS)
  candidates.append(Token(TokenType.WORD, 'x', pos, pos))
  candidates.extend(Token(TokenType.WORD, name, pos, pos) for name in UNARY_FUNCTIONS)
  candidates.extend(Token(TokenType.WORD, name, pos, pos) for name in BINARY_FUNCTIONS)
  candidates.extend(Token(ttype, text, pos, pos) for text, ttype in COMPOUND_OPERATORS.items())
  candidates.append(Token(TokenType.WORD, 'if', pos, pos))
  return candidates


class CorrectionSearch:
  """Searches for one token edit that makes the parser's input parseable"""

  def __init__(self, parser: 'Parser'):
    self.parser = parser
    self.trials = 0

  def search(self, buffer: TokenBuffer, failure_index: int) -> Optional[Tuple[Node, Correction]]:
    start = min(failure_index, len(buffer))
    for strategy in (self._try_insertions, self._try_deletions, self._try_substitutions):
      result = strategy(buffer, start)
      if result is not None:
        log_info(f"Corrected input after {self.trials} trials: {result[1].describe()} "
                 f"-> {result[1].corrected_text!r}", LogLevel.DETAILED)
        return result
    log_info(f"No single-token correction found after {self.trials} trials",
             LogLevel.DETAILED)
    return None

  def _attempt(self, buffer: TokenBuffer, edit: Callable[[], object]) -> Optional[Node]:
    """Apply `edit`, reparse, and roll the buffer back if parsing fails"""
    snapshot = buffer.snapshot()
    edit()
    self.trials += 1
    try:
      return self.parser.reparse(buffer)
    except ExpressionSyntaxError as trial_error:
      log_debug(f"trial {buffer.render()!r} failed: {trial_error}")
      buffer.restore(snapshot)
      return None

  def _try_insertions(self, buffer: TokenBuffer, start: int):
    # index len(buffer) is a valid insertion point (before end of input)
    for i in range(start, -1, -1):
      for candidate in candidate_tokens(buffer.token_at(i)):
        root = self._attempt(buffer, lambda: buffer.insert(i, candidate))
        if root is not None:
          return root, Correction('insert', i, candidate, buffer.render())
    return None

  def _try_deletions(self, buffer: TokenBuffer, start: int):
    for i in range(start, -1, -1):
      if i >= len(buffer):
        continue
      removed = buffer.token_at(i)
      root = self._attempt(buffer, lambda: buffer.remove(i))
      if root is not None:
        return root, Correction('delete', i, removed, buffer.render())
    return None

  def _try_substitutions(self, buffer: TokenBuffer, start: int):
    for i in range(start, -1, -1):
      if i >= len(buffer):
        continue
      for candidate in candidate_tokens(buffer.token_at(i)):
        root = self._attempt(buffer, lambda: buffer.replace(i, candidate))
        if root is not None:
          return root, Correction('substitute', i, candidate, buffer.render())
    return None
