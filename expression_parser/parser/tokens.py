"""Scanner and mutable token buffer.

The buffer is randomly indexable and editable in place so the correction
search can insert, delete and replace tokens and then reparse from the start.
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import List


class TokenType(IntEnum):
  NUMBER = 0
  WORD = 1
  OPERATOR = 2  # single character from OPERATOR_CHARS
  LE = 3
  NE = 4
  GE = 5
  EOF = 6
  ERROR = 7  # character the scanner does not recognise


# Special characters which may separate tokens
OPERATOR_CHARS = "*/+-^<>=,()"

COMPOUND_OPERATORS = {'<=': TokenType.LE, '<>': TokenType.NE, '>=': TokenType.GE}

_TOKEN_PATTERN = re.compile(r"""
    (?P<space>\s+)
  | (?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
  | (?P<word>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<compound><=|<>|>=)
  | (?P<operator>[*/+\-^<>=,()])
  | (?P<error>.)
""", re.VERBOSE | re.DOTALL)


@dataclass(frozen=True)
class Token:
  type: TokenType
  text: str
  start: int
  end: int
  value: float = 0.0

  def is_operator(self, char: str) -> bool:
    return self.type == TokenType.OPERATOR and self.text == char

  def is_word(self, word: str) -> bool:
    return self.type == TokenType.WORD and self.text == word

  def describe(self) -> str:
    if self.type == TokenType.EOF:
      return "end of input"
    return repr(self.text)


class TokenBuffer:
  """Token sequence with a read cursor; reading past the end yields EOF"""

  def __init__(self, text: str, tokens: List[Token]):
    self.text = text
    self.tokens = tokens
    self.index = -1

  def reset(self):
    self.index = -1

  def next_token(self) -> Token:
    self.index += 1
    return self.token_at(self.index)

  def token_at(self, index: int) -> Token:
    if index < len(self.tokens):
      return self.tokens[index]
    return self.eof_token()

  def eof_token(self) -> Token:
    return Token(TokenType.EOF, '', len(self.text), len(self.text))

  def insert(self, index: int, token: Token):
    self.tokens.insert(index, token)

  def remove(self, index: int) -> Token:
    return self.tokens.pop(index)

  def replace(self, index: int, token: Token) -> Token:
    previous = self.tokens[index]
    self.tokens[index] = token
    return previous

  def snapshot(self) -> List[Token]:
    return list(self.tokens)

  def restore(self, snapshot: List[Token]):
    self.tokens = list(snapshot)
    self.index = -1

  def render(self) -> str:
    """Source text rebuilt from the tokens, separated by single spaces"""
    return ' '.join(t.text for t in self.tokens)

  def __len__(self) -> int:
    return len(self.tokens)


class Scanner:
  """Splits source text into tokens; whitespace outside identifiers is ignored"""

  def __init__(self, text: str):
    self.text = text

  def tokenize(self) -> List[Token]:
    tokens = []
    for match in _TOKEN_PATTERN.finditer(self.text):
      kind = match.lastgroup
      lexeme = match.group()
      start, end = match.span()
      if kind == 'space':
        continue
      if kind == 'number':
        tokens.append(Token(TokenType.NUMBER, lexeme, start, end, float(lexeme)))
      elif kind == 'word':
        tokens.append(Token(TokenType.WORD, lexeme, start, end))
      elif kind == 'compound':
        tokens.append(Token(COMPOUND_OPERATORS[lexeme], lexeme, start, end))
      elif kind == 'operator':
        tokens.append(Token(TokenType.OPERATOR, lexeme, start, end))
      else:
        tokens.append(Token(TokenType.ERROR, lexeme, start, end))
    return tokens

  def scan(self) -> TokenBuffer:
    return TokenBuffer(self.text, self.tokenize())
