"""
rdflex Error Hierarchy
======================

This module defines the exception hierarchy for the rdflex package.
All exceptions inherit from RdfError, allowing callers to catch every
tokenizer-related error with a single except clause if desired.

Exception Hierarchy
-------------------
RdfError (base)
├── ReaderError (character source)
│   └── EndOfInputError - stream ended during a multi-character scan
└── LexerError (tokenizer)
    └── InvalidSyntaxError - input does not conform to the grammar
        ├── UnexpectedCharacterError - character cannot start/continue a token
        └── UnterminatedTokenError - stream ended before a closing delimiter

End of Input
------------
EndOfInputError is a *signal* rather than a user-facing failure. The
character source raises it from ``get_until`` with the characters read
so far, and each lexer rule decides whether that is a valid terminator
(comments, blank node identifiers) or a syntax error (URIs, literals).

Error messages follow this format:
    source:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class RdfError(Exception):
    """
    Base exception for all rdflex errors.

        try:
            tokens = list(NTriplesLexer(text))
        except RdfError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in the input stream.

    Attributes:
        source: Name of the input (file path, or "<input>" for strings)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    source: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'source:line:column' for error messages."""
        return f"{self.source}:{self.line}:{self.column}"


# =============================================================================
# Character Source Exceptions
# =============================================================================

class ReaderError(RdfError):
    """Base exception for errors raised by the character source."""
    pass


class EndOfInputError(ReaderError):
    """
    The stream was exhausted before a scan predicate held.

    Attributes:
        chars: Characters accumulated before the stream ended
        location: Position of the end of the stream (optional)
    """

    def __init__(self, chars: str = "", location: Optional[SourceLocation] = None):
        self.chars = chars
        self.location = location
        where = f"{location}: " if location else ""
        super().__init__(f"{where}unexpected end of input after {chars!r}")


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(RdfError):
    """
    Base exception for all tokenizer errors.

    Attributes:
        message: The error description
        location: Where in the input the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            data.nt:3:14: error: unterminated URI
            hint: add a closing '>'
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidSyntaxError(LexerError):
    """
    The current character or construct does not conform to the grammar.

    Examples:
        - Unexpected character at the start of a token
        - Datatype annotation not introduced by '<'
        - Blank node label missing ':'
    """
    pass


class UnexpectedCharacterError(InvalidSyntaxError):
    """A character that cannot appear at this position."""

    def __init__(
        self,
        character: str,
        location: Optional[SourceLocation] = None,
        context: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.character = character
        self.context = context

        message = f"unexpected character {character!r}"
        if context:
            message = f"{message} while reading {context}"

        super().__init__(message, location=location, hint=hint)


class UnterminatedTokenError(InvalidSyntaxError):
    """
    The stream ended before a construct's mandatory closing delimiter.

    Attributes:
        construct: Name of the construct being read ("URI", "literal", ...)
        chars: Characters read before the stream ended
    """

    def __init__(
        self,
        construct: str,
        chars: str = "",
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.construct = construct
        self.chars = chars
        super().__init__(f"unterminated {construct}", location=location, hint=hint)
