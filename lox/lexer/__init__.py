"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Single pass, one character of lookahead, maximal munch
- Distinct token kind per reserved word
- Non-fatal error recovery: errors are collected, scanning continues
- Line tracking through strings and comments

Author: xwest
"""

import logging

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, ScanResult, scan, tokenize_string
from .literals import decode_number, decode_string
from .errors import (
    Diagnostic,
    LexerError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Lexer",
    "ScanResult",
    "scan",
    "tokenize_string",
    "Token",
    "TokenType",
    "KEYWORDS",
    "decode_number",
    "decode_string",
    "Diagnostic",
    "LexerError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
]
