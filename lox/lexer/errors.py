"""
Error handling for the Lox scanner.

Lexical errors are non-fatal: the lexer raises them internally, records
them and keeps scanning. Each error carries a Diagnostic with the source
line and message the reporting side needs.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

DEFAULT_FILENAME = "<unknown>"


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical diagnostic."""
    line: int
    message: str
    code: Optional[str] = None
    help_text: Optional[str] = None
    filename: str = DEFAULT_FILENAME

    def __str__(self) -> str:
        prefix = "" if self.filename == DEFAULT_FILENAME else f"{self.filename}:"
        result = f"{prefix}[line {self.line}] Error: {self.message}"

        if self.help_text:
            result += f"\n  help: {self.help_text}"

        return result


class LexerError(Exception):
    """
    Base class for lexical errors.

    Raised inside the lexer and caught by its main loop, so it never
    escapes a scan. Callers see instances in ``Lexer.errors`` or from
    ``tokenize_string``.
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        line: int,
        help_text: Optional[str] = None,
        filename: str = DEFAULT_FILENAME
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            line=line,
            message=message,
            code=self.code,
            help_text=help_text,
            filename=filename
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(line={self.line}, message={self.message!r})"


class UnexpectedCharacterError(LexerError):
    """A character that matches no lexical rule."""

    code = "L001"

    def __init__(self, char: str, line: int, help_text: Optional[str] = None,
                 filename: str = DEFAULT_FILENAME):
        super().__init__("Unexpected character.", line, help_text, filename)
        self.char = char


class UnterminatedStringError(LexerError):
    """A string literal opened but not closed before end of source."""

    code = "L002"

    def __init__(self, line: int, help_text: Optional[str] = None,
                 filename: str = DEFAULT_FILENAME):
        super().__init__("Unterminated string.", line, help_text, filename)


ERROR_CODES = {
    UnexpectedCharacterError.code: "Unexpected character",
    UnterminatedStringError.code: "Unterminated string literal",
}


# Helper functions for creating errors with help text
def create_unexpected_character_error(char: str, line: int,
                                      filename: str = DEFAULT_FILENAME) -> UnexpectedCharacterError:
    """Create an error for a character no rule accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedCharacterError(char, line, help_text=help_text, filename=filename)


def create_unterminated_string_error(line: int,
                                     filename: str = DEFAULT_FILENAME) -> UnterminatedStringError:
    """Create an error for a string literal left open at end of source."""
    return UnterminatedStringError(
        line,
        help_text='String literals must be closed with a matching " quote.',
        filename=filename
    )
