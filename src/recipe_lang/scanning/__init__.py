"""Lexical analysis of recipe source text."""

from .number_utils import is_number_character, parse_number
from .scanner import Scanner, scan
from .tokens import Token, TokenKind

__all__ = [
    "Scanner",
    "scan",
    "Token",
    "TokenKind",
    "is_number_character",
    "parse_number",
]
