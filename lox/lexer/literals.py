"""
Literal decoding and character classes for the Lox scanner.

Decoders are pure functions of a matched lexeme so they can be used
(and tested) without running a scan.
"""

import re

_NUMBER_RE = re.compile(r'[0-9]+(?:\.[0-9]+)?')


def is_digit(char: str) -> bool:
    """ASCII digits only; str.isdigit() also accepts superscripts."""
    return '0' <= char <= '9'


def is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


def decode_number(lexeme: str) -> float:
    """
    Decode a number lexeme into its value.

    Args:
        lexeme: Digit run with an optional fractional part, e.g. "42" or "3.14"

    Returns:
        The value as a float (Lox has a single number type)

    Raises:
        ValueError: If lexeme is not a Lox number literal
    """
    if not _NUMBER_RE.fullmatch(lexeme):
        raise ValueError(f"Invalid number literal: {lexeme!r}")
    return float(lexeme)


def decode_string(lexeme: str) -> str:
    """
    Decode a complete string lexeme into its content.

    The body is raw: no escape sequences are processed and embedded
    newlines are kept as-is.

    Raises:
        ValueError: If lexeme is not delimited by double quotes
    """
    if len(lexeme) < 2 or lexeme[0] != '"' or lexeme[-1] != '"':
        raise ValueError(f"Invalid string literal: {lexeme!r}")
    return lexeme[1:-1]
