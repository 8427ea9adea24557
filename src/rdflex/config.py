"""
rdflex - Lexer Configuration
============================

Options controlling how input is read and which tokens are emitted.
Configuration can come from:
- Default values (defined here)
- Explicit keyword arguments
- Environment variables (``LexerOptions.from_env``)
"""

from dataclasses import dataclass
import os


TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        source_name: Name used in error locations (file path or "<input>")
        skip_comments: Drop COMMENT tokens instead of returning them
        chunk_size: Number of characters read from a stream at a time
    """
    source_name: str = "<input>"
    skip_comments: bool = False
    chunk_size: int = 4096

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @classmethod
    def from_env(cls, **overrides) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            RDFLEX_SKIP_COMMENTS: "1", "true", "yes" or "on" to drop comments
            RDFLEX_CHUNK_SIZE: Stream read size (positive integer)

        Keyword arguments take precedence over the environment.
        """
        values = {}

        if skip := os.environ.get("RDFLEX_SKIP_COMMENTS"):
            values["skip_comments"] = skip.strip().lower() in TRUE_VALUES

        if chunk_size := os.environ.get("RDFLEX_CHUNK_SIZE"):
            try:
                size = int(chunk_size)
            except ValueError:
                size = 0
            if size > 0:
                values["chunk_size"] = size  # Invalid values are ignored

        values.update(overrides)
        return cls(**values)
