"""
Shared RDF Lexing Primitives
============================

Format-agnostic pieces used by every RDF-family lexer:

- ``consume_next_char`` and friends: single-step helpers over a
  CharacterSource, used by the format-specific rule modules.
- ``RdfLexer``: the interface a concrete lexer implements. Subclasses
  supply ``get_next_token`` and ``peek_next_token``; iteration is
  provided here on top of them.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from rdflex.errors import UnexpectedCharacterError, UnterminatedTokenError
from rdflex.lexer.token import Token, TokenType
from rdflex.reader.input_reader import CharacterSource


# =============================================================================
# Primitives
# =============================================================================

def consume_next_char(reader: CharacterSource) -> None:
    """Consume exactly one character, discarding it (no-op at end of input)."""
    reader.get_next_char()


def expect_char(reader: CharacterSource, expected: str, context: str) -> None:
    """
    Consume one character and require it to be ``expected``.

    Raises:
        UnexpectedCharacterError: If a different character was read
        UnterminatedTokenError: If the input ended instead
    """
    location = reader.location
    char = reader.get_next_char()

    if char is None:
        raise UnterminatedTokenError(
            context,
            location=location,
            hint=f"expected {expected!r} before end of input",
        )
    if char != expected:
        raise UnexpectedCharacterError(
            char,
            location,
            context=context,
            hint=f"expected {expected!r}",
        )


# =============================================================================
# Lexer Interface
# =============================================================================

class RdfLexer(ABC):
    """
    Interface of an RDF token producer.

    Usage:
        for token in lexer:
            ...                       # stops after END_OF_INPUT
    """

    @abstractmethod
    def get_next_token(self) -> Token:
        """Consume and return the next token."""

    @abstractmethod
    def peek_next_token(self) -> Token:
        """Return the next token without consuming it."""

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first END_OF_INPUT.

        Raises:
            InvalidSyntaxError: If malformed input is encountered
        """
        while True:
            token = self.get_next_token()
            yield token
            if token.type is TokenType.END_OF_INPUT:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

