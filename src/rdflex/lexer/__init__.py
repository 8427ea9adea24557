"""
RDF Lexers
==========

- ``token``: the token vocabulary shared by all RDF serializations
- ``rdf_lexer``: format-agnostic primitives and the RdfLexer interface
- ``ntriples_rules``: one rule per N-Triples construct
- ``ntriples_lexer``: the N-Triples tokenizer with one-token lookahead
"""

from rdflex.lexer.token import Token, TokenType
from rdflex.lexer.rdf_lexer import RdfLexer, consume_next_char
from rdflex.lexer.ntriples_lexer import NTriplesLexer

__all__ = [
    "Token",
    "TokenType",
    "RdfLexer",
    "consume_next_char",
    "NTriplesLexer",
]
