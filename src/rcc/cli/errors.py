"""
CLI Error Reporting
===================

Provides exit codes and the report-and-terminate helper used by the
command-line driver. Library code never prints or exits; only the CLI
boundary turns an error into a message and a nonzero exit status.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn, Optional

import click


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    BUILD_ERROR = 1      # Lexing error or invalid source file
    INTERNAL_ERROR = 3   # Unexpected internal error


class Fatal:
    """
    Prints an error message to stderr and exits the program.

    The message is formatted as ``prefix(specifier): message`` with the
    prefix shown in bold bright red:

        Fatal(str(error)).with_prefix_specifier("lexer").exit()
        # error(lexer): invalid token encountered at line 1, column 0: @@@
    """

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.BUILD_ERROR):
        self.prefix = "error"
        self.prefix_specifier: Optional[str] = None
        self.message = message
        self.exit_code = exit_code

    def with_prefix(self, prefix: str) -> "Fatal":
        """Replace the prefix (``PREFIX: message``)."""
        self.prefix = prefix
        return self

    def with_prefix_specifier(self, prefix_specifier: Optional[str]) -> "Fatal":
        """Add a specifier to the prefix (``error(SPECIFIER): message``)."""
        self.prefix_specifier = prefix_specifier
        return self

    def format(self, color: Optional[bool] = None) -> str:
        """Return the message line, styled unless ``color`` is False."""
        prefix = self.prefix
        if self.prefix_specifier:
            prefix = f"{prefix}({self.prefix_specifier})"
        prefix = f"{prefix}:"
        if color is not False:
            prefix = click.style(prefix, fg="bright_red", bold=True)
        return f"{prefix} {self.message}"

    def exit(self) -> NoReturn:
        """Print the message and exit the program."""
        # click.echo strips the styling when stderr is not a terminal
        click.echo(self.format(), err=True)
        sys.exit(self.exit_code)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception that escaped the driver and exit.

    Lexer errors are reported with the ``lexer`` specifier and exit with
    BUILD_ERROR; anything else is an internal error, with the traceback
    printed in verbose mode.
    """
    from rcc.errors import LexError

    if isinstance(error, LexError):
        Fatal(str(error)).with_prefix_specifier("lexer").exit()

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
