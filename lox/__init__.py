"""
Lox Scanner Package

The lexical front end for the Lox scripting language: converts source text
into the token stream a Lox parser consumes.

Architecture:
    lox/
    └── lexer/           # Tokenization and lexical analysis

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, scan

__all__ = [
    # Core API
    "Lexer",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
