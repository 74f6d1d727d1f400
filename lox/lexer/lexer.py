"""
Lox Lexer - turns source text into tokens

Single left-to-right pass with one character of lookahead. Lexical errors
don't stop the scan: they get recorded on the lexer and scanning picks up
at the next character.

xwest
"""

import logging
from typing import List, NamedTuple, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS
)
from .literals import (
    decode_number, decode_string, is_alpha, is_alphanumeric, is_digit
)
from .errors import (
    Diagnostic, LexerError, create_unexpected_character_error,
    create_unterminated_string_error, DEFAULT_FILENAME
)

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r\n")


class ScanResult(NamedTuple):
    """Output of a full scan: tokens (always EOF-terminated) and errors."""
    tokens: List[Token]
    errors: List[LexerError]


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens. All scan state
    (cursor, line, output) lives on the instance, so separate lexers can
    run concurrently without sharing anything.
    """

    def __init__(self, source: str, filename: str = DEFAULT_FILENAME):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string, already decoded
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens ending with exactly one EOF token. Errors are
            collected in ``self.errors``.
        """
        self.pos = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while self.pos < len(self.source):
            try:
                token = self._next_token()
                if token:
                    self.tokens.append(token)

            except LexerError as e:
                # The offending input is already consumed; just record it
                logger.debug("lexical error in %s: %s", self.filename, e.diagnostic)
                self.errors.append(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "scanned %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Scan one lexeme. Returns None for whitespace and comments."""
        start_pos = self.pos
        start_line = self.line

        current_char = self._advance()

        if current_char in WHITESPACE:
            return None

        # Line comment or division
        if current_char == '/':
            if self._match('/'):
                self._skip_line_comment()
                return None
            return self._make_token(TokenType.SLASH, start_pos, start_line)

        if current_char in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[current_char], start_pos, start_line)

        # !, =, <, > and their '=' forms
        if current_char in TWO_CHAR_TOKENS:
            single, double = TWO_CHAR_TOKENS[current_char]
            token_type = double if self._match('=') else single
            return self._make_token(token_type, start_pos, start_line)

        if current_char == '"':
            return self._tokenize_string(start_pos, start_line)

        if is_digit(current_char):
            return self._tokenize_number(start_pos, start_line)

        if is_alpha(current_char):
            return self._tokenize_identifier_or_keyword(start_pos, start_line)

        raise create_unexpected_character_error(current_char, start_line, self.filename)

    def _tokenize_string(self, start_pos: int, line: int) -> Token:
        """Tokenize a string literal. The opening quote is already consumed."""
        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        if self.pos >= len(self.source):
            raise create_unterminated_string_error(line, self.filename)

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, decode_string(lexeme), line)

    def _tokenize_number(self, start_pos: int, line: int) -> Token:
        """Tokenize a number literal. The first digit is already consumed."""
        while is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == '.' and is_digit(self._peek(1)):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.NUMBER, lexeme, decode_number(lexeme), line)

    def _tokenize_identifier_or_keyword(self, start_pos: int, line: int) -> Token:
        """Tokenize an identifier or reserved word."""
        while is_alphanumeric(self._peek()):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        return Token(token_type, lexeme, None, line)

    def _skip_line_comment(self):
        # Stops before the newline so the main loop counts it
        while self.pos < len(self.source) and self.source[self.pos] != '\n':
            self._advance()

    def _make_token(self, token_type: TokenType, start_pos: int, line: int) -> Token:
        return Token(token_type, self.source[start_pos:self.pos], None, line)

    def _advance(self) -> str:
        """Consume one character, updating the line count, and return it."""
        char = self.source[self.pos]
        self.pos += 1
        if char == '\n':
            self.line += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals expected."""
        if self.pos < len(self.source) and self.source[self.pos] == expected:
            self.pos += 1
            return True
        return False

    def _peek(self, offset: int = 0) -> str:
        """Peek at an unconsumed character without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get the diagnostics of all recorded errors, in source order."""
        return [error.diagnostic for error in self.errors]


def scan(source: str, filename: str = DEFAULT_FILENAME) -> ScanResult:
    """
    Scan a source string into tokens and lexical errors.

    Never raises for malformed input; check ``result.errors``.
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()
    return ScanResult(tokens, lexer.errors)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing recorded any error (the first one is raised)
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens
