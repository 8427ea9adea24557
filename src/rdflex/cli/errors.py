"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    LEX_ERROR = 1        # Input is not valid N-Triples
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    source: str | None = None,
) -> NoReturn:
    """
    Report an exception raised by a CLI tool and exit.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        source: Name of the input being read (for decoding errors)

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from rdflex.errors import LexerError, RdfError

    if isinstance(error, LexerError):
        # Already formatted as "source:line:col: error: ..."
        click.echo(str(error), err=True)
        sys.exit(ExitCode.LEX_ERROR)

    elif isinstance(error, RdfError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.LEX_ERROR)

    elif isinstance(error, UnicodeDecodeError):
        # Malformed input bytes, not a tool failure
        where = f"{source}: " if source else ""
        click.echo(f"Error: {where}not valid UTF-8 ({error.reason})", err=True)
        sys.exit(ExitCode.LEX_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
