"""
rcc - A C Compiler Front End
============================

This package provides the lexical-analysis stage of a compiler for a
C-family language. Source text is converted into an ordered list of typed
tokens (keywords, identifiers, literals and symbols) for the parser.

Main Components
---------------
- **tokens**: The token model (Token, Keyword, Literal, Symbol)
- **lexer**: The character-driven tokenizer state machine
- **errors**: Exception hierarchy with positioned diagnostics
- **cli**: The ``rcc`` command-line driver

Quick Start
-----------
Tokenize a string:
    >>> from rcc import lex_contents
    >>> tokens = lex_contents("int main() { return 0; }")

Tokenize a file:
    >>> from rcc import lex
    >>> tokens = lex("hello.c")

Or use the command-line tool:
    $ rcc hello.c
"""

__version__ = "1.0.0"
__author__ = "Mathew H."

# =============================================================================
# Public API Exports
# =============================================================================

from rcc.errors import (
    RccError,
    SourceLocation,
    LexError,
    InvalidTokenError,
    UnterminatedLiteralError,
    LexIOError,
)
from rcc.options import LexerOptions
from rcc.tokens import (
    Token,
    TokenKind,
    Keyword,
    Symbol,
    Literal,
    LiteralKind,
)
from rcc.lexer import Tokenizer, ScanMode, lex, lex_contents

__all__ = [
    # Version
    "__version__",
    # Errors
    "RccError",
    "SourceLocation",
    "LexError",
    "InvalidTokenError",
    "UnterminatedLiteralError",
    "LexIOError",
    # Configuration
    "LexerOptions",
    # Tokens
    "Token",
    "TokenKind",
    "Keyword",
    "Symbol",
    "Literal",
    "LiteralKind",
    # Lexer
    "Tokenizer",
    "ScanMode",
    "lex",
    "lex_contents",
]
