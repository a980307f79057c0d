"""
rcc - Compiler Command-Line Interface
=====================================

This module implements the command-line driver for the compiler. Only the
lexical-analysis stage exists so far: the driver validates the source
files it is given, tokenizes the first one and prints the tokens.

Usage Examples
--------------
Tokenize a file:
    $ rcc hello.c

Verbose mode (debug logging):
    $ rcc -v hello.c
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

import click

from rcc import __version__
from rcc.cli.errors import Fatal, handle_cli_exception
from rcc.lexer import lex
from rcc.options import LexerOptions

logger = logging.getLogger(__name__)


# =============================================================================
# Source File Validation
# =============================================================================

def validate_files(
    files: Iterable[str],
    options: Optional[LexerOptions] = None,
) -> list[Path]:
    """
    Check that every file can be compiled and return them as paths.

    Exits through Fatal when a file does not exist or does not end with a
    recognized source extension.
    """
    options = options or LexerOptions()
    paths = []
    for file in files:
        path = Path(file)
        if not path.exists():
            Fatal(f'No file found with the name "{file}"!').exit()
        if not options.accepts(file):
            expected = '", "'.join(options.source_extensions)
            Fatal(f'File with the name "{file}" does not end with "{expected}"!').exit()
        paths.append(path)
    return paths


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("files", nargs=-1, required=True)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of the source files",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="rcc")
def main(files: tuple[str, ...], encoding: str, verbose: bool) -> None:
    """
    A C compiler written in Python.

    FILES are the C source files (.c) to compile. Only lexical analysis is
    implemented: the first file is tokenized and its tokens are printed.

    \b
    Examples:
        rcc hello.c          # Print the tokens of hello.c
        rcc -v hello.c       # With debug logging
    """
    setup_logging(verbose)
    options = LexerOptions(encoding=encoding)

    paths = validate_files(files, options)

    # Multi-file compilation is not supported yet: lex the first file
    path = paths[0]
    if len(paths) > 1:
        logger.warning(f"Only the first file is compiled, ignoring {len(paths) - 1} more")

    try:
        tokens = lex(path, options)
    except Exception as e:
        # Lexer errors exit as "error(lexer): ...", anything else as internal
        handle_cli_exception(e, verbose)

    logger.debug(f"Lexed {path}: {len(tokens)} tokens")
    click.echo(f"TOKENS: {tokens!r}")


if __name__ == "__main__":
    main()
