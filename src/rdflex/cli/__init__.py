"""
rdflex Command-Line Interface
=============================

- **ntlex**: dump the token stream of an N-Triples file

Implemented as a Click-based CLI application.
"""

__all__ = ["ntlex"]
