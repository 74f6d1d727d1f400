"""
Token definitions for the Lox scanner.

This module defines the closed set of token kinds the scanner produces:
- Single-character punctuation
- One-or-two character operators
- Literals (identifiers, strings, numbers)
- Reserved words, one kind per word
- The end-of-input marker

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class TokenType(Enum):
    """
    Enumeration of all token kinds in Lox.

    Organized by category, in the order the grammar reference lists them.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # fooVar, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Reserved words
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token kind, lexeme (raw text), decoded literal value
    and the line of the token's first character.
    """
    kind: TokenType
    lexeme: str                     # Raw text from source, "" for EOF
    literal: Any                    # str for STRING, float for NUMBER, else None
    line: int                       # 1-based

    def __str__(self) -> str:
        literal = "nil" if self.literal is None else self.literal
        return f"{self.kind.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.kind in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.kind in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.kind in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.kind == TokenType.IDENTIFIER

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenType.EOF


# Lookup tables used by the lexer for keyword/operator recognition

# Reserved words. Matching is exact and case-sensitive on the whole lexeme.
KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

# '/' is absent: it may open a line comment and is handled by the lexer
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# First character -> (kind alone, kind when followed by '=')
TWO_CHAR_TOKENS: Dict[str, Tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

LITERAL_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER})

OPERATOR_TYPES = frozenset(
    set(SINGLE_CHAR_TOKENS.values())
    | {kind for pair in TWO_CHAR_TOKENS.values() for kind in pair}
    | {TokenType.SLASH}
)
