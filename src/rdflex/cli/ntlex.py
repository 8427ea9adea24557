"""
ntlex - N-Triples Token Dump
============================

Prints the token stream produced by the N-Triples lexer, one token per
line, ending with END_OF_INPUT. Useful for checking how a file will be
seen by a parser.

Usage Examples
--------------
Tokenize a file:
    $ ntlex data.nt

Read from standard input:
    $ cat data.nt | ntlex -

Show token positions, drop comments:
    $ ntlex --locations --skip-comments data.nt
"""

import logging
from pathlib import Path

import click

from rdflex import __version__
from rdflex.cli.errors import handle_cli_exception
from rdflex.config import LexerOptions
from rdflex.lexer import NTriplesLexer, Token


logger = logging.getLogger(__name__)


def format_token(token: Token, locations: bool) -> str:
    """Render one output line."""
    if locations and token.location is not None:
        return f"{token.location.line}:{token.location.column}\t{token!r}"
    return repr(token)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--skip-comments",
    is_flag=True,
    help="Do not print COMMENT tokens",
)
@click.option(
    "--locations",
    is_flag=True,
    help="Prefix each token with line:column",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Debug logging on stderr",
)
@click.version_option(version=__version__, prog_name="ntlex")
def main(
    input_file: Path,
    skip_comments: bool,
    locations: bool,
    verbose: bool,
) -> None:
    """
    Tokenize an N-Triples file.

    INPUT_FILE is the N-Triples file to read, or - for standard input.

    \b
    Examples:
        ntlex data.nt                   # One token per line
        ntlex --locations data.nt       # With line:column
        cat data.nt | ntlex -           # From stdin
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # RDFLEX_* environment variables provide defaults; flags override them
    overrides = {"skip_comments": True} if skip_comments else {}

    source_name = "<stdin>" if str(input_file) == "-" else str(input_file)

    try:
        options = LexerOptions.from_env(source_name=source_name, **overrides)

        if str(input_file) == "-":
            lexer = NTriplesLexer(click.get_text_stream("stdin"), options)
        else:
            lexer = NTriplesLexer.from_file(input_file, options)

        logger.debug(f"Tokenizing {options.source_name}")

        count = 0
        with lexer:
            for token in lexer:
                click.echo(format_token(token, locations))
                count += 1

        logger.debug(f"Produced {count} tokens")

    except Exception as e:
        handle_cli_exception(e, verbose, source_name)


if __name__ == "__main__":
    main()
