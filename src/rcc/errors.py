"""
rcc Error Hierarchy
===================

This module defines the exception hierarchy for the rcc compiler front end.
All exceptions inherit from RccError, allowing callers to catch every
compiler error with a single except clause if desired.

Exception Hierarchy
-------------------
RccError (base)
└── LexError (lexical analysis)
    ├── InvalidTokenError - lexeme matches no token pattern
    │   └── UnterminatedLiteralError - string/char literal never closed
    └── LexIOError - source file could not be read

Error Message Format
--------------------
Errors that know where they happened carry a SourceLocation and, when
available, the text of the offending line:

    invalid token encountered at line 3, column 4: @@@
        int @@@;
            ^^^
    hint: identifiers start with a letter
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class RccError(Exception):
    """
    Base exception for all rcc errors.

    This class provides common functionality for error messages including
    source location tracking, source line context, and optional hints.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional["SourceLocation"] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _caret_width(self) -> int:
        """Number of carets drawn under the error location."""
        return 1

    def _format_message(self) -> str:
        """
        Format the error message with source context and hint.

        The location itself is part of the message text, so only the
        source line with a caret pointer and the hint are appended.
        """
        parts = [self.message]

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            # Columns are 0-based
            padding = " " * (4 + self.location.column)
            parts.append(f"{padding}{'^' * max(1, self._caret_width())}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (0-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column'."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexError(RccError):
    """
    Base exception for errors produced during lexical analysis.

    Both kinds are terminal for the current scan; the lexer performs no
    recovery and never returns partial results alongside an error.
    """
    pass


class InvalidTokenError(LexError):
    """
    A buffered lexeme did not match any keyword, symbol, literal or
    identifier pattern.

    The location points at the first character of the lexeme.

    Example:
        int @@@ = 1;    // '@@@' is not a valid token
    """

    def __init__(
        self,
        token: str,
        location: SourceLocation,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.token = token
        # Keep the message on one line when the lexeme spans lines
        shown = token if token.isprintable() else repr(token)
        super().__init__(
            f"invalid token encountered at line {location.line}, "
            f"column {location.column}: {shown}",
            location=location,
            hint=hint,
            source_line=source_line,
        )

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def _caret_width(self) -> int:
        return len(self.token)


class UnterminatedLiteralError(InvalidTokenError):
    """
    A string or character literal was still open at the end of input.

    The location points at the opening quote, and ``token`` holds the
    quote followed by the unterminated body.

    Example:
        char *s = "hello
    """

    def __init__(
        self,
        quote: str,
        body: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.quote = quote
        self.body = body
        super().__init__(
            f"{quote}{body}",
            location,
            hint=f"add closing {quote} to complete the literal",
            source_line=source_line,
        )

    def _caret_width(self) -> int:
        return 1


class LexIOError(LexError):
    """
    The source could not be read (missing file, permissions, encoding).

    The underlying exception is available as ``cause`` and is also chained
    as ``__cause__``; its details are written to the lexer log.
    """

    def __init__(self, cause: Exception, path: Optional[str] = None):
        self.cause = cause
        self.path = path
        super().__init__("could not read or write a file, see logs for more details")
