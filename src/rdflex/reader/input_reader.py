"""
Input Reader (Character Source)
===============================

This module implements the character source consumed by the RDF lexers.
It is a forward-only cursor over a string or a text stream: characters
can be peeked and consumed, but never pushed back.

Operations
----------
| Operation                              | Consumes | End of input          |
|----------------------------------------|----------|-----------------------|
| peek_next_char                         | no       | returns None          |
| peek_next_char_discard_leading_spaces  | spaces   | returns None          |
| get_next_char                          | yes      | returns None          |
| get_until(predicate)                   | yes      | raises EndOfInputError|
| get_until_discard_leading_spaces       | yes      | raises EndOfInputError|

``get_until`` never consumes the character that satisfied the predicate,
so the caller decides what to do with the delimiter. When the stream
ends first, the raised EndOfInputError carries the partial text.

Streams are read in chunks; at most one chunk is buffered at a time.

Example Usage
-------------
>>> reader = InputReader("<example.org/a> .")
>>> reader.get_next_char()
'<'
>>> reader.get_until(lambda c: c == ">")
'example.org/a'
>>> reader.peek_next_char()
'>'
"""

from typing import Callable, Optional, Protocol, TextIO, Union

from rdflex.errors import EndOfInputError, SourceLocation


# Characters (besides whitespace) that may begin the next N-Triples token
NODE_DELIMITERS = '.<"_'


def node_delimiter(char: str) -> bool:
    """Return True if char ends a free-form scan (whitespace or . < " _)."""
    return char.isspace() or char in NODE_DELIMITERS


# =============================================================================
# Character Source Interface
# =============================================================================

class CharacterSource(Protocol):
    """
    Operations the lexer rules require from a character source.

    InputReader is the implementation shipped with rdflex; any object
    providing these methods can be lexed.
    """

    @property
    def location(self) -> SourceLocation: ...

    def peek_next_char(self) -> Optional[str]: ...

    def peek_next_char_discard_leading_spaces(self) -> Optional[str]: ...

    def get_next_char(self) -> Optional[str]: ...

    def get_until(self, predicate: Callable[[str], bool]) -> str: ...

    def get_until_discard_leading_spaces(self, predicate: Callable[[str], bool]) -> str: ...


# =============================================================================
# Reader Implementation
# =============================================================================

class InputReader:
    """
    Forward-only character cursor with line and column tracking.

    Usage:
        reader = InputReader(open("data.nt", encoding="utf-8"), "data.nt")
        while (char := reader.get_next_char()) is not None:
            ...

    Attributes:
        source_name: Name of the input (for error locations)
        chunk_size: Characters requested from the stream per read
    """

    def __init__(
        self,
        source: Union[str, TextIO],
        source_name: str = "<input>",
        chunk_size: int = 4096,
    ):
        """
        Initialize the reader.

        Args:
            source: The text to read, or a text stream opened for reading
            source_name: Name of the input (for error messages)
            chunk_size: Stream read size in characters
        """
        self.source_name = source_name
        self.chunk_size = chunk_size

        if isinstance(source, str):
            self._stream = None
            self._buffer = source
            self._exhausted = True
        else:
            self._stream = source
            self._buffer = ""
            self._exhausted = False

        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def location(self) -> SourceLocation:
        """Position of the next unread character."""
        return SourceLocation(self.source_name, self._line, self._column)

    # =========================================================================
    # Buffer Management
    # =========================================================================

    def _fill(self) -> bool:
        """
        Make sure at least one unread character is buffered.

        Returns:
            False if the stream is exhausted
        """
        while self._pos >= len(self._buffer):
            if self._exhausted:
                return False

            chunk = self._stream.read(self.chunk_size)
            if not chunk:
                self._exhausted = True
                self._buffer = ""
                self._pos = 0
                return False

            self._buffer = chunk
            self._pos = 0

        return True

    # =========================================================================
    # Character Access
    # =========================================================================

    def peek_next_char(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end."""
        if not self._fill():
            return None
        return self._buffer[self._pos]

    def peek_next_char_discard_leading_spaces(self) -> Optional[str]:
        """Consume whitespace, then peek the first non-space character."""
        char = self.peek_next_char()
        while char is not None and char.isspace():
            self.get_next_char()
            char = self.peek_next_char()
        return char

    def get_next_char(self) -> Optional[str]:
        """Consume and return the next character, or None at end."""
        if not self._fill():
            return None

        char = self._buffer[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def get_until(self, predicate: Callable[[str], bool]) -> str:
        """
        Consume characters until predicate holds for the next one.

        The character satisfying the predicate is left unread.

        Raises:
            EndOfInputError: If the stream ends first; ``chars`` holds
                everything consumed by this call
        """
        chars = []
        while True:
            char = self.peek_next_char()
            if char is None:
                raise EndOfInputError("".join(chars), self.location)
            if predicate(char):
                return "".join(chars)
            chars.append(self.get_next_char())

    def get_until_discard_leading_spaces(self, predicate: Callable[[str], bool]) -> str:
        """
        Like get_until, but skip leading whitespace first.

        Whitespace that satisfies the predicate (e.g. a line ending the
        caller is scanning for) is not skipped.
        """
        char = self.peek_next_char()
        while char is not None and char.isspace() and not predicate(char):
            self.get_next_char()
            char = self.peek_next_char()
        return self.get_until(predicate)
