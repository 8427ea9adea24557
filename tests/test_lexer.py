# =============================================================================
# test_lexer.py - N-Triples Lexer Unit Tests
# =============================================================================
# Tests for the N-Triples tokenizer and its one-token lookahead.
#
# Test coverage includes:
#   - Comments, literals (plain, language tagged, datatyped), URIs,
#     blank nodes and triple delimiters
#   - Whitespace handling between tokens
#   - END_OF_INPUT behaviour after the stream is exhausted
#   - peek_next_token idempotence
#   - End-of-input tolerance (comments, blank nodes) vs. errors (URIs, literals)
#   - Streams, files, options and token locations
# =============================================================================

import io

import pytest
from rdflex.config import LexerOptions
from rdflex.errors import (
    InvalidSyntaxError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedTokenError,
)
from rdflex.lexer import NTriplesLexer, Token, TokenType
from rdflex.reader import InputReader


# =============================================================================
# Helper Function
# =============================================================================

def tokenize(source: str, **options) -> list:
    """
    Helper to tokenize and drop the trailing END_OF_INPUT token.
    Tests are focused on meaningful tokens, not the terminator.
    """
    lexer = NTriplesLexer(source, LexerOptions(**options))
    tokens = list(lexer.tokenize())
    assert tokens[-1] == Token.end_of_input()
    return tokens[:-1]


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Test '#' comment recognition."""

    def test_comment_lines(self):
        """Each comment line becomes one COMMENT token."""
        tokens = tokenize("# Hello World!\n# Foo")
        assert tokens == [Token.comment("Hello World!"), Token.comment("Foo")]

    def test_comment_at_end_of_input(self):
        """A comment without a trailing line ending is still a comment."""
        assert tokenize("#last") == [Token.comment("last")]

    def test_comment_leading_spaces_discarded(self):
        """Spaces between '#' and the text are not part of the comment."""
        assert tokenize("#    indented") == [Token.comment("indented")]

    def test_trailing_spaces_kept(self):
        """Spaces before the line ending are kept."""
        assert tokenize("# a  \n") == [Token.comment("a  ")]

    def test_empty_comment(self):
        """An empty comment does not swallow the next line."""
        tokens = tokenize("#\n# next")
        assert tokens == [Token.comment(""), Token.comment("next")]

    def test_carriage_return_line_endings(self):
        """CRLF and bare CR both end a comment."""
        tokens = tokenize("# a\r\n# b\r# c")
        assert tokens == [Token.comment("a"), Token.comment("b"), Token.comment("c")]

    def test_comment_after_triple(self):
        """Comments may follow a statement on the same line."""
        tokens = tokenize("<a> <b> <c> . # trailing\n")
        assert tokens == [
            Token.uri("a"),
            Token.uri("b"),
            Token.uri("c"),
            Token.triple_delimiter(),
            Token.comment("trailing"),
        ]

    def test_skip_comments_option(self):
        """Comments are dropped when skip_comments is set."""
        tokens = tokenize("# header\n<a> # note\n.", skip_comments=True)
        assert tokens == [Token.uri("a"), Token.triple_delimiter()]


# =============================================================================
# Literal Tests
# =============================================================================

class TestLiterals:
    """Test quoted literal recognition and annotations."""

    def test_plain_literal(self):
        """Quotes are not part of the literal text."""
        assert tokenize('"a"') == [Token.literal("a")]

    def test_empty_literal(self):
        """Empty literal."""
        assert tokenize('""') == [Token.literal("")]

    def test_literal_with_spaces(self):
        """Literal containing spaces and punctuation."""
        assert tokenize('"Hello, World. <x> _:y"') == [Token.literal("Hello, World. <x> _:y")]

    def test_literal_with_language(self):
        """'@' introduces a language tag."""
        tokens = tokenize('"a"@abc')
        assert tokens == [Token.literal_with_language_specification("a", "abc")]

    def test_language_tag_ends_at_delimiter(self):
        """A language tag stops at whitespace or '.'."""
        tokens = tokenize('"chat"@fr-CA .')
        assert tokens == [
            Token.literal_with_language_specification("chat", "fr-CA"),
            Token.triple_delimiter(),
        ]
        tokens = tokenize('"chat"@fr.')
        assert tokens == [
            Token.literal_with_language_specification("chat", "fr"),
            Token.triple_delimiter(),
        ]

    def test_literal_with_datatype(self):
        """'^^<...>' introduces a datatype URI."""
        tokens = tokenize('"a"^^<example.org/abc>')
        assert tokens == [Token.literal_with_url_datatype("a", "example.org/abc")]

    def test_datatype_followed_by_delimiter(self):
        """Tokens after a datatype URI are read normally."""
        tokens = tokenize('"1"^^<http://www.w3.org/2001/XMLSchema#integer>.')
        assert tokens == [
            Token.literal_with_url_datatype("1", "http://www.w3.org/2001/XMLSchema#integer"),
            Token.triple_delimiter(),
        ]

    def test_literal_followed_by_term(self):
        """A plain literal followed by whitespace and another term."""
        tokens = tokenize('"a" <b>')
        assert tokens == [Token.literal("a"), Token.uri("b")]

    def test_character_after_plain_literal_is_consumed(self):
        """The character right after a plain literal is stepped over."""
        tokens = tokenize('"a".')
        assert tokens == [Token.literal("a")]


# =============================================================================
# URI and Blank Node Tests
# =============================================================================

class TestTerms:
    """Test URI and blank node recognition."""

    def test_uri(self):
        """Angle brackets are not part of the URI."""
        assert tokenize("<example.org/a>") == [Token.uri("example.org/a")]

    def test_adjacent_uris(self):
        """URIs need no whitespace between them."""
        assert tokenize("<a><b>") == [Token.uri("a"), Token.uri("b")]

    def test_uri_is_not_validated(self):
        """Anything up to '>' is accepted."""
        assert tokenize("<not a uri>") == [Token.uri("not a uri")]

    def test_blank_node(self):
        """'_:' introduces a blank node label."""
        assert tokenize("_:auto") == [Token.blank_node("auto")]

    def test_blank_node_ends_at_delimiter(self):
        """A blank node label stops at '.', '<', '\"' or whitespace."""
        assert tokenize("_:b1.") == [Token.blank_node("b1"), Token.triple_delimiter()]
        assert tokenize("_:b1<x>") == [Token.blank_node("b1"), Token.uri("x")]


# =============================================================================
# Statement Tests
# =============================================================================

class TestStatements:
    """Test token sequences of whole statements."""

    def test_triple(self):
        """Subject, predicate, object and delimiter in order."""
        tokens = tokenize('_:auto <example.org/b> "test" .')
        assert tokens == [
            Token.blank_node("auto"),
            Token.uri("example.org/b"),
            Token.literal("test"),
            Token.triple_delimiter(),
        ]

    def test_triple_delimiter_with_whitespace(self):
        """Leading whitespace is discarded before each token."""
        tokens = tokenize('.   "a"   .')
        assert tokens == [
            Token.triple_delimiter(),
            Token.literal("a"),
            Token.triple_delimiter(),
        ]

    def test_multiple_lines(self):
        """Statements over several lines."""
        source = (
            "<http://example.org/s> <http://example.org/p> <http://example.org/o> .\n"
            '_:x <http://example.org/name> "Alice"@en .\n'
        )
        types = [token.type for token in tokenize(source)]
        assert types == [
            TokenType.URI,
            TokenType.URI,
            TokenType.URI,
            TokenType.TRIPLE_DELIMITER,
            TokenType.BLANK_NODE,
            TokenType.URI,
            TokenType.LITERAL_WITH_LANGUAGE_SPECIFICATION,
            TokenType.TRIPLE_DELIMITER,
        ]

    def test_empty_input(self):
        """Empty input produces no meaningful tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace-only input produces no meaningful tokens."""
        assert tokenize("  \n\t \r\n ") == []


# =============================================================================
# End of Input Tests
# =============================================================================

class TestEndOfInput:
    """Test behaviour once the input is exhausted."""

    def test_end_of_input_repeats(self):
        """END_OF_INPUT is returned again on every further call."""
        lexer = NTriplesLexer("<a>")
        assert lexer.get_next_token() == Token.uri("a")
        assert lexer.get_next_token() == Token.end_of_input()
        assert lexer.get_next_token() == Token.end_of_input()
        assert lexer.get_next_token() == Token.end_of_input()

    def test_iteration_stops_after_end_of_input(self):
        """Iterating a lexer ends with exactly one END_OF_INPUT."""
        tokens = list(NTriplesLexer("<a> ."))
        assert tokens == [Token.uri("a"), Token.triple_delimiter(), Token.end_of_input()]


# =============================================================================
# Lookahead Tests
# =============================================================================

class TestPeek:
    """Test peek_next_token."""

    def test_peek_is_idempotent(self):
        """Repeated peeks return the same token without advancing."""
        lexer = NTriplesLexer('_:auto <example.org/b> "test" .')
        assert lexer.peek_next_token() == Token.blank_node("auto")
        assert lexer.peek_next_token() == Token.blank_node("auto")
        assert lexer.get_next_token() == Token.blank_node("auto")
        assert lexer.peek_next_token() == Token.uri("example.org/b")
        assert lexer.get_next_token() == Token.uri("example.org/b")
        assert lexer.get_next_token() == Token.literal("test")

    def test_peek_at_end_of_input(self):
        """Peeking at the end returns END_OF_INPUT."""
        lexer = NTriplesLexer("")
        assert lexer.peek_next_token() == Token.end_of_input()
        assert lexer.get_next_token() == Token.end_of_input()
        assert lexer.peek_next_token() == Token.end_of_input()

    def test_peeked_token_included_in_iteration(self):
        """Iteration starts with a token that was only peeked."""
        lexer = NTriplesLexer("<a> <b>")
        lexer.peek_next_token()
        assert list(lexer) == [Token.uri("a"), Token.uri("b"), Token.end_of_input()]

    def test_failed_peek_caches_nothing(self):
        """A peek that raises leaves no token behind."""
        lexer = NTriplesLexer("<a> x")
        assert lexer.get_next_token() == Token.uri("a")
        with pytest.raises(UnexpectedCharacterError):
            lexer.peek_next_token()
        with pytest.raises(UnexpectedCharacterError):
            lexer.peek_next_token()
        with pytest.raises(UnexpectedCharacterError):
            lexer.get_next_token()

    def test_peek_skips_comments_when_configured(self):
        """Peeking honours skip_comments."""
        lexer = NTriplesLexer("# c\n<a>", LexerOptions(skip_comments=True))
        assert lexer.peek_next_token() == Token.uri("a")


# =============================================================================
# Error Condition Tests
# =============================================================================

class TestLexerErrors:
    """Test error handling in the lexer."""

    def test_unexpected_character(self):
        """A character that cannot start a token is a syntax error."""
        lexer = NTriplesLexer("  x")
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            lexer.get_next_token()
        assert exc_info.value.character == "x"
        assert exc_info.value.location == SourceLocation("<input>", 1, 3)
        assert "<input>:1:3: error: unexpected character 'x'" in str(exc_info.value)

    def test_error_is_invalid_syntax(self):
        """All lexer failures share the InvalidSyntaxError base."""
        with pytest.raises(InvalidSyntaxError):
            tokenize("@prefix")

    def test_unterminated_uri(self):
        """A URI without '>' is an error, not a token."""
        with pytest.raises(UnterminatedTokenError) as exc_info:
            tokenize("<example.org/a")
        assert exc_info.value.construct == "URI"
        assert exc_info.value.chars == "example.org/a"
        assert exc_info.value.location == SourceLocation("<input>", 1, 1)

    def test_unterminated_literal(self):
        """A literal without a closing quote is an error."""
        with pytest.raises(UnterminatedTokenError) as exc_info:
            tokenize('"abc')
        assert exc_info.value.construct == "literal"
        assert exc_info.value.chars == "abc"

    def test_datatype_not_a_uri(self):
        """'^^' must be followed by '<'."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize('"a"^^xsd:string')
        assert exc_info.value.character == "x"

    def test_single_caret(self):
        """A single '^' is not a datatype annotation."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize('"a"^<b>')
        assert exc_info.value.character == "<"

    def test_datatype_missing_at_end(self):
        """Input ending after '^^' is an error."""
        with pytest.raises(UnterminatedTokenError):
            tokenize('"a"^^')

    def test_datatype_uri_unterminated(self):
        """An unterminated datatype URI is an error."""
        with pytest.raises(UnterminatedTokenError) as exc_info:
            tokenize('"a"^^<example.org/abc')
        assert exc_info.value.construct == "URI"

    def test_blank_node_missing_colon(self):
        """'_' must be followed by ':'."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize("_x")
        assert exc_info.value.character == "x"

    def test_blank_node_at_end_of_input(self):
        """'_' on its own at the end of input is an error."""
        with pytest.raises(UnterminatedTokenError):
            tokenize("_")


# =============================================================================
# Input Source Tests
# =============================================================================

class TestInputSources:
    """Test lexing from streams, readers and files."""

    SOURCE = '_:auto <example.org/b> "test"@en .\n# done'
    EXPECTED = [
        Token.blank_node("auto"),
        Token.uri("example.org/b"),
        Token.literal_with_language_specification("test", "en"),
        Token.triple_delimiter(),
        Token.comment("done"),
        Token.end_of_input(),
    ]

    def test_text_stream(self):
        """Text streams are read in chunks."""
        stream = io.StringIO(self.SOURCE)
        assert list(NTriplesLexer(stream, LexerOptions(chunk_size=3))) == self.EXPECTED

    def test_single_character_chunks(self):
        """Tokens spanning chunk boundaries are read correctly."""
        stream = io.StringIO(self.SOURCE)
        assert list(NTriplesLexer(stream, LexerOptions(chunk_size=1))) == self.EXPECTED

    def test_character_source(self):
        """An existing reader is used as-is."""
        reader = InputReader(self.SOURCE, "custom")
        lexer = NTriplesLexer(reader)
        assert lexer.reader is reader
        assert list(lexer) == self.EXPECTED

    def test_from_file(self, tmp_path):
        """Files are opened as UTF-8 and named in locations."""
        path = tmp_path / "data.nt"
        path.write_text('<s> <p> "café" .\n', encoding="utf-8")

        with NTriplesLexer.from_file(path) as lexer:
            tokens = list(lexer)

        assert tokens[2] == Token.literal("café")
        assert tokens[0].location == SourceLocation(str(path), 1, 1)

    def test_from_file_skips_byte_order_mark(self, tmp_path):
        """A leading UTF-8 byte order mark is not read as a character."""
        path = tmp_path / "bom.nt"
        path.write_bytes("\ufeff_:b <p> \"x\" .\n".encode("utf-8"))

        with NTriplesLexer.from_file(path) as lexer:
            token = lexer.get_next_token()

        assert token == Token.blank_node("b")
        assert token.location == SourceLocation(str(path), 1, 1)

    def test_from_file_keeps_other_options(self, tmp_path):
        """Options without a source name get the file path."""
        path = tmp_path / "data.nt"
        path.write_text("# c\n<a>\n", encoding="utf-8")

        with NTriplesLexer.from_file(path, LexerOptions(skip_comments=True)) as lexer:
            token = lexer.get_next_token()

        assert token == Token.uri("a")
        assert token.location.source == str(path)


# =============================================================================
# Location Tests
# =============================================================================

class TestLocations:
    """Test token start positions."""

    def test_locations(self):
        """Tokens record the line and column where they start."""
        lexer = NTriplesLexer("<a> .\n  _:b")
        uri = lexer.get_next_token()
        dot = lexer.get_next_token()
        bnode = lexer.get_next_token()
        end = lexer.get_next_token()

        assert (uri.location.line, uri.location.column) == (1, 1)
        assert (dot.location.line, dot.location.column) == (1, 5)
        assert (bnode.location.line, bnode.location.column) == (2, 3)
        assert (end.location.line, end.location.column) == (2, 6)

    def test_source_name_in_location(self):
        """The configured source name appears in locations."""
        lexer = NTriplesLexer("<a>", LexerOptions(source_name="data.nt"))
        assert lexer.get_next_token().location.source == "data.nt"
