"""
RDF Lexer Tokens
================

The token vocabulary shared by all RDF-family lexers. N-Triples only
produces a subset of it; the QName, prefix, directive and list-delimiter
kinds are reserved for richer serializations such as Turtle, which reuse
this enumeration rather than defining their own.

Payloads
--------
| TokenType                            | Payload                  |
|--------------------------------------|--------------------------|
| COMMENT                              | text                     |
| LITERAL                              | text                     |
| LITERAL_WITH_URL_DATATYPE            | text, datatype URI       |
| LITERAL_WITH_QNAME_DATATYPE          | text, datatype QName     |
| LITERAL_WITH_LANGUAGE_SPECIFICATION  | text, language tag       |
| URI                                  | URI                      |
| BLANK_NODE                           | identifier               |
| PREFIX_DIRECTIVE                     | prefix, URI              |
| BASE_DIRECTIVE                       | URI                      |
| QNAME                                | prefix, local name       |
| PREFIX                               | name                     |
| TRIPLE_DELIMITER, PREDICATE_LIST_DELIMITER, OBJECT_LIST_DELIMITER, END_OF_INPUT | (none) |

Two tokens are equal iff their types and payloads are equal; the
optional source location does not take part in comparison.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from rdflex.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Lexical element kinds of the RDF serializations."""

    COMMENT = auto()                                # # ...
    LITERAL = auto()                                # "..."
    LITERAL_WITH_URL_DATATYPE = auto()              # "..."^^<...>
    LITERAL_WITH_QNAME_DATATYPE = auto()            # "..."^^prefix:name
    LITERAL_WITH_LANGUAGE_SPECIFICATION = auto()    # "..."@lang
    URI = auto()                                    # <...>
    BLANK_NODE = auto()                             # _:id
    TRIPLE_DELIMITER = auto()                       # .
    PREFIX_DIRECTIVE = auto()                       # @prefix p: <...>
    BASE_DIRECTIVE = auto()                         # @base <...>
    QNAME = auto()                                  # prefix:name
    PREFIX = auto()                                 # prefix:
    PREDICATE_LIST_DELIMITER = auto()               # ;
    OBJECT_LIST_DELIMITER = auto()                  # ,
    END_OF_INPUT = auto()


# Number of payload strings carried by each token type
PAYLOAD_ARITY: dict[TokenType, int] = {
    TokenType.COMMENT: 1,
    TokenType.LITERAL: 1,
    TokenType.LITERAL_WITH_URL_DATATYPE: 2,
    TokenType.LITERAL_WITH_QNAME_DATATYPE: 2,
    TokenType.LITERAL_WITH_LANGUAGE_SPECIFICATION: 2,
    TokenType.URI: 1,
    TokenType.BLANK_NODE: 1,
    TokenType.TRIPLE_DELIMITER: 0,
    TokenType.PREFIX_DIRECTIVE: 2,
    TokenType.BASE_DIRECTIVE: 1,
    TokenType.QNAME: 2,
    TokenType.PREFIX: 1,
    TokenType.PREDICATE_LIST_DELIMITER: 0,
    TokenType.OBJECT_LIST_DELIMITER: 0,
    TokenType.END_OF_INPUT: 0,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical element.

    Prefer the named constructors (``Token.uri(...)``, ``Token.literal(...)``)
    over building the payload tuple by hand.

    Attributes:
        type: The TokenType classification
        payload: The strings carried by this kind of token
        location: Where the token started (not part of equality)
    """
    type: TokenType
    payload: tuple[str, ...] = ()
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self):
        expected = PAYLOAD_ARITY[self.type]
        if len(self.payload) != expected:
            raise ValueError(
                f"{self.type.name} token takes {expected} payload value(s), "
                f"got {len(self.payload)}"
            )

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.payload:
            values = ", ".join(repr(value) for value in self.payload)
            return f"Token({self.type.name}, {values})"
        return f"Token({self.type.name})"

    @property
    def value(self) -> Optional[str]:
        """The primary payload (text, URI, identifier, prefix), if any."""
        return self.payload[0] if self.payload else None

    @property
    def annotation(self) -> Optional[str]:
        """The secondary payload (datatype, language, URI, local name), if any."""
        return self.payload[1] if len(self.payload) > 1 else None

    def at(self, location: Optional[SourceLocation]) -> "Token":
        """Return a copy of this token carrying the given location."""
        return Token(self.type, self.payload, location)

    # =========================================================================
    # Named Constructors
    # =========================================================================

    @classmethod
    def comment(cls, text: str) -> "Token":
        return cls(TokenType.COMMENT, (text,))

    @classmethod
    def literal(cls, text: str) -> "Token":
        return cls(TokenType.LITERAL, (text,))

    @classmethod
    def literal_with_url_datatype(cls, text: str, datatype: str) -> "Token":
        return cls(TokenType.LITERAL_WITH_URL_DATATYPE, (text, datatype))

    @classmethod
    def literal_with_qname_datatype(cls, text: str, qname: str) -> "Token":
        return cls(TokenType.LITERAL_WITH_QNAME_DATATYPE, (text, qname))

    @classmethod
    def literal_with_language_specification(cls, text: str, language: str) -> "Token":
        return cls(TokenType.LITERAL_WITH_LANGUAGE_SPECIFICATION, (text, language))

    @classmethod
    def uri(cls, uri: str) -> "Token":
        return cls(TokenType.URI, (uri,))

    @classmethod
    def blank_node(cls, identifier: str) -> "Token":
        return cls(TokenType.BLANK_NODE, (identifier,))

    @classmethod
    def triple_delimiter(cls) -> "Token":
        return cls(TokenType.TRIPLE_DELIMITER)

    @classmethod
    def prefix_directive(cls, prefix: str, uri: str) -> "Token":
        return cls(TokenType.PREFIX_DIRECTIVE, (prefix, uri))

    @classmethod
    def base_directive(cls, uri: str) -> "Token":
        return cls(TokenType.BASE_DIRECTIVE, (uri,))

    @classmethod
    def qname(cls, prefix: str, local_name: str) -> "Token":
        return cls(TokenType.QNAME, (prefix, local_name))

    @classmethod
    def prefix(cls, name: str) -> "Token":
        return cls(TokenType.PREFIX, (name,))

    @classmethod
    def predicate_list_delimiter(cls) -> "Token":
        return cls(TokenType.PREDICATE_LIST_DELIMITER)

    @classmethod
    def object_list_delimiter(cls) -> "Token":
        return cls(TokenType.OBJECT_LIST_DELIMITER)

    @classmethod
    def end_of_input(cls) -> "Token":
        return cls(TokenType.END_OF_INPUT)
