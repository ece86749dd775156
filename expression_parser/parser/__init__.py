"""Parsing: scanner, precedence-climbing parser and error correction."""

from .errors import ErrorReason, ExpressionSyntaxError
from .tokens import Token, TokenType, TokenBuffer, Scanner, OPERATOR_CHARS
from .correction import Correction, CorrectionSearch, candidate_tokens
from .parser import Parser, parse, BINARY_PRECEDENCE, UNARY_MINUS_PRECEDENCE

__all__ = [
    'ErrorReason', 'ExpressionSyntaxError',
    'Token', 'TokenType', 'TokenBuffer', 'Scanner', 'OPERATOR_CHARS',
    'Correction', 'CorrectionSearch', 'candidate_tokens',
    'Parser', 'parse', 'BINARY_PRECEDENCE', 'UNARY_MINUS_PRECEDENCE'
]
