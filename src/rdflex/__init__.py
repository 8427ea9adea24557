"""
rdflex - RDF Tokenizer
======================

Converts N-Triples text into a stream of lexical tokens for an RDF
parser. The token vocabulary also covers the Turtle-only kinds (QNames,
prefixes, directives, list delimiters) so that lexers for richer
serializations can share it.

Pipeline
--------
    text / stream → InputReader → NTriplesLexer → Token stream → (parser)

Usage
-----
>>> from rdflex import NTriplesLexer
>>> for token in NTriplesLexer('<a> <b> "c"@en .'):
...     print(token)
Token(URI, 'a')
Token(URI, 'b')
Token(LITERAL_WITH_LANGUAGE_SPECIFICATION, 'c', 'en')
Token(TRIPLE_DELIMITER)
Token(END_OF_INPUT)

Command line:
    $ ntlex data.nt
"""

# =============================================================================
# Version Information
# =============================================================================

__version__ = "0.1.0"

# =============================================================================
# Public API Imports
# =============================================================================

from rdflex.config import LexerOptions
from rdflex.errors import (
    RdfError,
    SourceLocation,
    ReaderError,
    EndOfInputError,
    LexerError,
    InvalidSyntaxError,
    UnexpectedCharacterError,
    UnterminatedTokenError,
)
from rdflex.reader import CharacterSource, InputReader, node_delimiter
from rdflex.lexer import NTriplesLexer, RdfLexer, Token, TokenType

__all__ = [
    "__version__",
    "LexerOptions",
    "RdfError",
    "SourceLocation",
    "ReaderError",
    "EndOfInputError",
    "LexerError",
    "InvalidSyntaxError",
    "UnexpectedCharacterError",
    "UnterminatedTokenError",
    "CharacterSource",
    "InputReader",
    "node_delimiter",
    "NTriplesLexer",
    "RdfLexer",
    "Token",
    "TokenType",
]
