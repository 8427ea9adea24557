"""
N-Triples Token Rules
=====================

One function per N-Triples construct. Each rule receives only the
character source, expects the cursor to sit on the construct's first
character (the lexer has already peeked it) and leaves the cursor just
past the construct.

Constructs
----------
| Start | Rule           | Produces                                        |
|-------|----------------|-------------------------------------------------|
| #     | get_comment    | COMMENT                                         |
| "     | get_literal    | LITERAL, LITERAL_WITH_LANGUAGE_SPECIFICATION,   |
|       |                | LITERAL_WITH_URL_DATATYPE                       |
| <     | get_uri        | URI                                             |
| _     | get_blank_node | BLANK_NODE                                      |

End of Input
------------
Comments, blank node identifiers and language tags have no closing
delimiter, so running out of input while reading them simply ends the
token. URIs and literal bodies must be closed; running out of input
there raises UnterminatedTokenError.
"""

from rdflex.errors import (
    EndOfInputError,
    InvalidSyntaxError,
    UnexpectedCharacterError,
    UnterminatedTokenError,
)
from rdflex.lexer.rdf_lexer import consume_next_char, expect_char
from rdflex.lexer.token import Token, TokenType
from rdflex.reader.input_reader import CharacterSource, node_delimiter


def is_line_ending(char: str) -> bool:
    """Return True for the characters that end a comment."""
    return char == "\n" or char == "\r"


def get_comment(reader: CharacterSource) -> Token:
    """Read a '#' comment up to the end of the line."""
    consume_next_char(reader)  # consume '#'

    try:
        text = reader.get_until_discard_leading_spaces(is_line_ending)
    except EndOfInputError as e:
        # A comment on the last line needs no line ending
        return Token.comment(e.chars)

    consume_next_char(reader)  # consume line ending
    return Token.comment(text)


def get_language_specification(reader: CharacterSource) -> str:
    """Read a language tag following '@'."""
    try:
        return reader.get_until(node_delimiter)
    except EndOfInputError as e:
        return e.chars


def get_literal(reader: CharacterSource) -> Token:
    """
    Read a quoted literal and its optional annotation.

    Handles:
    - Plain: "text"
    - Language tagged: "text"@en
    - Datatyped: "text"^^<http://www.w3.org/2001/XMLSchema#string>

    Raises:
        UnterminatedTokenError: If the closing quote or the datatype is missing
        UnexpectedCharacterError: If '^^' is not followed by '<'
    """
    start = reader.location
    consume_next_char(reader)  # consume opening "

    try:
        text = reader.get_until(lambda c: c == '"')
    except EndOfInputError as e:
        raise UnterminatedTokenError(
            "literal", e.chars, start, hint="add a closing '\"'"
        ) from e

    consume_next_char(reader)  # consume closing "

    char = reader.peek_next_char()

    if char == "@":
        consume_next_char(reader)  # consume '@'
        language = get_language_specification(reader)
        return Token.literal_with_language_specification(text, language)

    if char == "^":
        consume_next_char(reader)  # consume first '^'
        expect_char(reader, "^", "literal datatype")

        location = reader.location
        char = reader.peek_next_char()

        if char is None:
            raise UnterminatedTokenError(
                "literal datatype",
                location=location,
                hint="expected a datatype URI after '^^'",
            )
        if char != "<":
            raise UnexpectedCharacterError(
                char,
                location,
                context="literal datatype",
                hint="N-Triples datatypes are URIs enclosed in '<' and '>'",
            )

        datatype = get_uri(reader)
        if datatype.type is not TokenType.URI:
            raise InvalidSyntaxError("invalid datatype URI for literal", location)

        return Token.literal_with_url_datatype(text, datatype.value)

    # No annotation: step over the character following the literal
    consume_next_char(reader)
    return Token.literal(text)


def get_uri(reader: CharacterSource) -> Token:
    """
    Read a '<...>' URI reference.

    Raises:
        UnterminatedTokenError: If the input ends before '>'
    """
    start = reader.location
    consume_next_char(reader)  # consume '<'

    try:
        uri = reader.get_until(lambda c: c == ">")
    except EndOfInputError as e:
        raise UnterminatedTokenError("URI", e.chars, start, hint="add a closing '>'") from e

    consume_next_char(reader)  # consume '>'
    return Token.uri(uri)


def get_blank_node(reader: CharacterSource) -> Token:
    """
    Read a '_:label' blank node.

    Raises:
        UnexpectedCharacterError: If '_' is not followed by ':'
        UnterminatedTokenError: If the input ends right after '_'
    """
    consume_next_char(reader)  # consume '_'
    expect_char(reader, ":", "blank node")

    try:
        identifier = reader.get_until(node_delimiter)
    except EndOfInputError as e:
        return Token.blank_node(e.chars)

    return Token.blank_node(identifier)
