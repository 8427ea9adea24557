"""
Character sources for the RDF lexers.
"""

from rdflex.reader.input_reader import (
    CharacterSource,
    InputReader,
    NODE_DELIMITERS,
    node_delimiter,
)

__all__ = [
    "CharacterSource",
    "InputReader",
    "NODE_DELIMITERS",
    "node_delimiter",
]
