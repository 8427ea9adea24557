"""
N-Triples Lexer
===============

Turns N-Triples input into a stream of tokens for a parser. The lexer
dispatches on the next non-space character and delegates to the rules
in ``rdflex.lexer.ntriples_rules``.

Dispatch
--------
| Next char   | Result                                |
|-------------|---------------------------------------|
| #           | COMMENT                               |
| "           | LITERAL (and annotated variants)      |
| <           | URI                                   |
| _           | BLANK_NODE                            |
| .           | TRIPLE_DELIMITER                      |
| end         | END_OF_INPUT (repeated on every call) |
| other       | UnexpectedCharacterError              |

Lookahead
---------
``peek_next_token`` reads one token and caches it; the next
``get_next_token`` returns the cached token. At most one token is ever
cached, and a call that raises leaves the cache untouched.

Example Usage
-------------
>>> lexer = NTriplesLexer('_:auto <example.org/b> "test" .')
>>> lexer.get_next_token()
Token(BLANK_NODE, 'auto')
>>> lexer.peek_next_token()
Token(URI, 'example.org/b')
>>> lexer.get_next_token()
Token(URI, 'example.org/b')
>>> [token.type.name for token in lexer]
['LITERAL', 'TRIPLE_DELIMITER', 'END_OF_INPUT']
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, TextIO, Union
import logging

from rdflex.config import LexerOptions
from rdflex.errors import InvalidSyntaxError, UnexpectedCharacterError
from rdflex.lexer.rdf_lexer import RdfLexer, consume_next_char
from rdflex.lexer.ntriples_rules import get_blank_node, get_comment, get_literal, get_uri
from rdflex.lexer.token import Token, TokenType
from rdflex.reader.input_reader import CharacterSource, InputReader


logger = logging.getLogger(__name__)


# Rule for each character that can start a multi-character token
RULES = {
    "#": get_comment,
    '"': get_literal,
    "<": get_uri,
    "_": get_blank_node,
}


class NTriplesLexer(RdfLexer):
    """
    Tokenizes N-Triples input.

    Usage:
        lexer = NTriplesLexer(text)
        while (token := lexer.get_next_token()).type is not TokenType.END_OF_INPUT:
            ...

        with NTriplesLexer.from_file("data.nt") as lexer:
            tokens = list(lexer)

    Attributes:
        options: Lexer configuration
        reader: The character source being tokenized
    """

    def __init__(
        self,
        source: Union[str, TextIO, CharacterSource],
        options: Optional[LexerOptions] = None,
    ):
        """
        Initialize the lexer.

        Args:
            source: Input text, a text stream, or a ready CharacterSource
            options: Lexer configuration (uses defaults if None)
        """
        self.options = options or LexerOptions()

        if isinstance(source, str) or hasattr(source, "read"):
            self.reader = InputReader(
                source,
                self.options.source_name,
                self.options.chunk_size,
            )
        else:
            self.reader = source

        self._peeked_token: Optional[Token] = None
        self._owned_stream: Optional[TextIO] = None

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        options: Optional[LexerOptions] = None,
    ) -> "NTriplesLexer":
        """
        Open a UTF-8 file and lex it. A leading byte order mark is skipped.

        The file is closed by ``close()`` or when used as a context manager.
        When options are given without a source name, the path is used.
        """
        if options is None:
            options = LexerOptions(source_name=str(path))
        elif options.source_name == LexerOptions.source_name:
            options = replace(options, source_name=str(path))

        stream = open(path, encoding="utf-8-sig")
        lexer = cls(stream, options)
        lexer._owned_stream = stream
        return lexer

    def close(self) -> None:
        """Close the file opened by ``from_file`` (if any)."""
        if self._owned_stream is not None:
            self._owned_stream.close()
            self._owned_stream = None

    def __enter__(self) -> "NTriplesLexer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Token Stream
    # =========================================================================

    def get_next_token(self) -> Token:
        """
        Consume and return the next token.

        Raises:
            InvalidSyntaxError: On input that does not conform to N-Triples
        """
        if self._peeked_token is not None:
            token = self._peeked_token
            self._peeked_token = None
            logger.debug(f"Returning peeked {token!r}")
            return token

        while True:
            token = self._scan_token()
            if self.options.skip_comments and token.type is TokenType.COMMENT:
                continue
            return token

    def peek_next_token(self) -> Token:
        """
        Return the next token without consuming it.

        Repeated calls return the same token until ``get_next_token``
        is called.

        Raises:
            InvalidSyntaxError: On input that does not conform to N-Triples
        """
        if self._peeked_token is None:
            self._peeked_token = self.get_next_token()
        return self._peeked_token

    def _scan_token(self) -> Token:
        """Read one token straight from the character source."""
        char = self.reader.peek_next_char_discard_leading_spaces()
        location = self.reader.location

        if char is None:
            return Token.end_of_input().at(location)

        try:
            if char in RULES:
                token = RULES[char](self.reader)
            elif char == ".":
                consume_next_char(self.reader)  # consume '.'
                token = Token.triple_delimiter()
            else:
                raise UnexpectedCharacterError(
                    char,
                    location,
                    hint="N-Triples terms start with '<', '\"' or '_:'",
                )
        except InvalidSyntaxError as e:
            logger.debug(f"Syntax error at {location}: {e.message}")
            raise

        token = token.at(location)
        logger.debug(f"Scanned {token!r} at {location}")
        return token
