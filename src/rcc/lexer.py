"""
rcc Lexer (Tokenizer)
=====================

This module implements the lexical-analysis front end of the compiler.
It converts source text into a list of tokens for the parser.

Scanning Model
--------------
The tokenizer is a character-driven state machine. Characters accumulate
in a buffer until a delimiter is seen, at which point the buffer is
*flushed*: its contents are classified into exactly one token.

In NORMAL mode:

| Character               | Action                                        |
|-------------------------|-----------------------------------------------|
| space, tab, CR, newline | flush, drop the character                     |
| & * { } , : = # ( ) ; [ ] | flush, emit the symbol                      |
| " or '                  | flush, enter IN_STRING_OR_CHAR mode           |
| anything else           | append to the buffer                          |

In IN_STRING_OR_CHAR mode every character is taken verbatim until the
quote that opened the literal is seen again. Escape sequences are not
interpreted.

Classification
--------------
A flushed lexeme is matched, in order, against:

1. the keyword table (exact match)
2. the symbol table (exact match)
3. the integer pattern: one or more decimal digits
4. the identifier pattern: a letter followed by letters or digits

The first match wins. A lexeme matching nothing raises InvalidTokenError
located at its first character (line 1-indexed, column 0-indexed).

Example Usage
-------------
>>> from rcc.lexer import lex_contents
>>> lex_contents("int foo = 5;")
[Token(KEYWORD, int), Token(IDENTIFIER, 'foo'), Token(SYMBOL, =), Token(LITERAL, Integer(5)), Token(SYMBOL, ;)]
"""

from enum import Enum, auto
from pathlib import Path
from typing import Callable, Iterable, Optional, Union
import logging
import re

from rcc.errors import (
    InvalidTokenError,
    LexError,
    LexIOError,
    SourceLocation,
    UnterminatedLiteralError,
)
from rcc.options import LexerOptions
from rcc.tokens import (
    KEYWORDS,
    SYMBOLS,
    Literal,
    LiteralKind,
    Token,
    lookup_keyword,
)

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

# Characters that end the current lexeme and are then discarded
WHITESPACE = frozenset(" \t\r\n")

# Quote characters and the literal kind each one opens
QUOTES: dict[str, LiteralKind] = {
    '"': LiteralKind.STRING,
    "'": LiteralKind.CHAR,
}

INTEGER_PATTERN = re.compile(r"[0-9]+")
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")


class ScanMode(Enum):
    """Interpretation context of the tokenizer."""

    NORMAL = auto()                 # Code: delimiters end lexemes
    IN_STRING_OR_CHAR = auto()      # Inside a quoted literal body


# =============================================================================
# Classification Chain
# =============================================================================

def _is_keyword(lexeme: str) -> bool:
    return lexeme in KEYWORDS


def _make_keyword(lexeme: str) -> Token:
    return Token.keyword(lookup_keyword(lexeme))


def _is_symbol(lexeme: str) -> bool:
    return lexeme in SYMBOLS


def _make_symbol(lexeme: str) -> Token:
    return Token.symbol(SYMBOLS[lexeme])


def _is_integer(lexeme: str) -> bool:
    return INTEGER_PATTERN.fullmatch(lexeme) is not None


def _make_integer(lexeme: str) -> Token:
    # Raises ValueError when the value does not fit in 64 bits
    return Token.literal(Literal.integer(int(lexeme)))


def _is_identifier(lexeme: str) -> bool:
    return IDENTIFIER_PATTERN.fullmatch(lexeme) is not None


# Ordered (predicate, constructor) pairs; the first matching predicate wins
CLASSIFIERS: tuple[tuple[Callable[[str], bool], Callable[[str], Token]], ...] = (
    (_is_keyword, _make_keyword),
    (_is_symbol, _make_symbol),
    (_is_integer, _make_integer),
    (_is_identifier, Token.identifier),
)


def _hint_for(lexeme: str) -> Optional[str]:
    """Suggest why ``lexeme`` could not be classified."""
    for char in lexeme:
        if not char.isascii() or not char.isalnum():
            return f"unexpected character {char!r}"
    if lexeme[0].isdigit():
        if lexeme.isdigit():
            return "integer literal does not fit in a signed 64-bit value"
        return "identifiers must start with a letter"
    return None


# =============================================================================
# Tokenizer Implementation
# =============================================================================

class Tokenizer:
    """
    Tokenizes source text one character at a time.

    A tokenizer performs a single scan: create it, feed it characters with
    process() or feed(), then call finalize() exactly once to classify the
    trailing lexeme and obtain the tokens. It is not reusable.

    Usage:
        tokenizer = Tokenizer("test.c")
        tokenizer.feed(source_text)
        tokens = tokenizer.finalize()

    Attributes:
        filename: Name of the source (for error reporting)
    """

    def __init__(self, filename: str = "<input>"):
        self.filename = filename

        # Pending lexeme
        self._buffer: list[str] = []

        # Current position: line is 1-indexed, column 0-indexed
        self._line = 1
        self._column = 0

        # Characters of the current line consumed so far, for diagnostics
        self._line_text: list[str] = []

        self._tokens: list[Token] = []
        self._mode = ScanMode.NORMAL

        # Quote that opened the current literal and where it was
        self._quote: Optional[str] = None
        self._quote_location: Optional[SourceLocation] = None

        self._finished = False
        self._failed = False

    @property
    def mode(self) -> ScanMode:
        return self._mode

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def tokens(self) -> list[Token]:
        """Tokens produced so far."""
        return list(self._tokens)

    # =========================================================================
    # Character Processing
    # =========================================================================

    def process(self, char: str) -> None:
        """
        Consume one character.

        Appends at most one token to the output. Raises InvalidTokenError
        if a flushed lexeme (or a closed character literal) cannot be
        classified; the tokenizer cannot be used after that.
        """
        self._check_usable()
        if len(char) != 1:
            raise ValueError(f"process() takes a single character, got {char!r}")

        try:
            if self._mode is ScanMode.NORMAL:
                self._process_normal(char)
            elif self._mode is ScanMode.IN_STRING_OR_CHAR:
                self._process_literal(char)
            else:
                raise AssertionError(f"unhandled scan mode {self._mode}")
        except LexError:
            self._failed = True
            raise

        self._advance(char)

    def _check_usable(self) -> None:
        if self._finished:
            raise RuntimeError("tokenizer has already been finalized")
        if self._failed:
            raise RuntimeError("tokenizer stopped at a lexical error")

    def feed(self, text: Iterable[str]) -> None:
        """Consume every character of ``text`` in order."""
        for char in text:
            self.process(char)

    def _process_normal(self, char: str) -> None:
        if char in WHITESPACE:
            self.flush()
        elif char in SYMBOLS:
            self.flush()
            self._tokens.append(Token.symbol(SYMBOLS[char]))
        elif char in QUOTES:
            self.flush()
            self._quote = char
            self._quote_location = self._location(self._column)
            self._mode = ScanMode.IN_STRING_OR_CHAR
            logger.debug(f"Entering {QUOTES[char].name.lower()} literal at {self._quote_location}")
        else:
            self._buffer.append(char)

    def _process_literal(self, char: str) -> None:
        if char != self._quote:
            self._buffer.append(char)
            return

        body = "".join(self._buffer)
        if QUOTES[self._quote] is LiteralKind.STRING:
            literal = Literal.string(body)
        elif len(body) == 1:
            literal = Literal.char(body)
        else:
            # The body starts right after the opening quote
            location = self._location(self._quote_location.column + 1, self._quote_location.line)
            raise self._error(
                body,
                location,
                hint="character literals must hold exactly one character",
            )

        self._tokens.append(Token.literal(literal))
        self._buffer.clear()
        self._mode = ScanMode.NORMAL
        self._quote = None
        self._quote_location = None

    def _advance(self, char: str) -> None:
        """Update line and column tracking after consuming ``char``."""
        if char == "\n":
            self._line += 1
            self._column = 0
            self._line_text.clear()
        else:
            self._column += 1
            self._line_text.append(char)

    # =========================================================================
    # Flushing and Classification
    # =========================================================================

    def flush(self) -> None:
        """
        Classify the pending lexeme and append its token.

        Does nothing when the buffer is empty, so consecutive delimiters
        are harmless.
        """
        if not self._buffer:
            return
        self._tokens.append(self._classify("".join(self._buffer)))
        self._buffer.clear()

    def _classify(self, lexeme: str) -> Token:
        """Run ``lexeme`` through the classification chain."""
        for matches, make_token in CLASSIFIERS:
            if not matches(lexeme):
                continue
            try:
                return make_token(lexeme)
            except ValueError:
                break

        location = self._location(self._column - len(lexeme))
        raise self._error(lexeme, location, hint=_hint_for(lexeme))

    def finalize(self) -> list[Token]:
        """
        Finish the scan and return the token list.

        Classifies any trailing lexeme (input not ending in whitespace).

        Raises:
            UnterminatedLiteralError: If a string or character literal was
                never closed
            InvalidTokenError: If the trailing lexeme cannot be classified
        """
        self._check_usable()

        try:
            if self._mode is ScanMode.IN_STRING_OR_CHAR:
                location = self._quote_location
                raise UnterminatedLiteralError(
                    self._quote,
                    "".join(self._buffer),
                    location,
                    source_line=self._source_line_for(location),
                )
            self.flush()
        except LexError:
            self._failed = True
            raise

        self._finished = True
        logger.debug(f"Tokenized {self.filename}: {len(self._tokens)} tokens, {self._line} lines")
        return list(self._tokens)

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def _location(self, column: int, line: Optional[int] = None) -> SourceLocation:
        return SourceLocation(self.filename, self._line if line is None else line, column)

    def _source_line_for(self, location: SourceLocation) -> Optional[str]:
        """Current line text, if ``location`` lies on the current line."""
        if location.line != self._line:
            return None
        return "".join(self._line_text)

    def _error(
        self,
        lexeme: str,
        location: SourceLocation,
        hint: Optional[str] = None,
    ) -> InvalidTokenError:
        """Create a classification error for ``lexeme`` at ``location``."""
        logger.debug(f"Invalid token {lexeme!r} at {location}")
        return InvalidTokenError(
            lexeme,
            location,
            hint=hint,
            source_line=self._source_line_for(location),
        )


# =============================================================================
# Entry Points
# =============================================================================

def lex_contents(
    source: str,
    filename: Optional[str] = None,
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """
    Perform lexical analysis on the given source text.

    Args:
        source: The complete source text
        filename: Name used in error messages (defaults to options.filename,
                  then "<input>")
        options: Lexer configuration (uses defaults if None)

    Returns:
        The tokens in source order

    Raises:
        InvalidTokenError: On the first lexeme that cannot be classified
    """
    options = options or LexerOptions()
    tokenizer = Tokenizer(filename or options.filename or "<input>")
    tokenizer.feed(source)
    return tokenizer.finalize()


def lex(
    path: Union[str, Path],
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """
    Perform lexical analysis on the given file.

    The file is read completely into memory before scanning. No existence
    or extension checks are made here.

    Raises:
        LexIOError: If the file cannot be read or decoded
        InvalidTokenError: On the first lexeme that cannot be classified
    """
    options = options or LexerOptions()
    path = Path(path)

    logger.debug(f"Reading {path} ({options.encoding})")
    try:
        source = path.read_text(encoding=options.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise LexIOError(e, str(path)) from e

    return lex_contents(source, options.filename or str(path), options)
