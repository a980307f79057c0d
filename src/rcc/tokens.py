"""
Token Model
===========

This module declares the closed set of token shapes produced by the lexer.

Token Categories
----------------
- Keywords: int, char, void, return, while, etc.
- Identifiers: variable and function names
- Literals: integers (123), strings ("text"), characters ('c')
- Symbols: & * { } , : = # ( ) ; [ ]

Every token carries exactly one of these categories, recorded in its
``kind``. The ``value`` holds the category payload: a ``Keyword`` member,
the identifier name, a ``Literal`` or a ``Symbol`` member.

Example Usage
-------------
>>> from rcc.tokens import Token, Keyword, Literal
>>> Token.keyword(Keyword.INT)
Token(KEYWORD, int)
>>> Token.literal(Literal.integer(5)).text
'5'
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """The four mutually exclusive token variants."""

    KEYWORD = auto()        # Reserved word
    IDENTIFIER = auto()     # Variable/function names
    LITERAL = auto()        # Integer, string or character literal
    SYMBOL = auto()         # Single-character punctuation


# =============================================================================
# Keywords
# =============================================================================

class Keyword(Enum):
    """
    Reserved words of the language.

    The member value is the exact source spelling, so ``Keyword("int")``
    performs the keyword lookup.
    """

    AUTO = "auto"
    BREAK = "break"
    CASE = "case"
    CHAR = "char"
    CONST = "const"
    CONTINUE = "continue"
    DEFAULT = "default"
    DO = "do"
    DOUBLE = "double"
    ELSE = "else"
    ENUM = "enum"
    EXTERN = "extern"
    FLOAT = "float"
    FOR = "for"
    GOTO = "goto"
    IF = "if"
    INLINE = "inline"
    INT = "int"
    LONG = "long"
    NULLPTR = "nullptr"
    REGISTER = "register"
    RESTRICT = "restrict"
    RETURN = "return"
    SHORT = "short"
    SIGNED = "signed"
    SIZEOF = "sizeof"
    STATIC = "static"
    STRUCT = "struct"
    SWITCH = "switch"
    TYPEDEF = "typedef"
    UNION = "union"
    UNSIGNED = "unsigned"
    VOID = "void"
    VOLATILE = "volatile"
    WHILE = "while"


# Map keyword strings to their enum members
KEYWORDS: dict[str, Keyword] = {keyword.value: keyword for keyword in Keyword}


# =============================================================================
# Symbols
# =============================================================================

class Symbol(Enum):
    """
    Single-character punctuation.

    Each member maps one-to-one to the source character stored as its value.
    """

    AMPERSAND = "&"
    ASTERISK = "*"
    BRACKET_OPEN = "{"
    BRACKET_CLOSE = "}"
    COMMA = ","
    COLON = ":"
    EQUALS = "="
    HASH = "#"
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    SEMICOLON = ";"
    SQUARE_BRACKET_OPEN = "["
    SQUARE_BRACKET_CLOSE = "]"


# Map symbol characters to their enum members
SYMBOLS: dict[str, Symbol] = {symbol.value: symbol for symbol in Symbol}


# =============================================================================
# Literals
# =============================================================================

class LiteralKind(Enum):
    """Literal sub-variants."""

    INTEGER = auto()        # 64-bit signed decimal integer
    STRING = auto()         # Raw body between double quotes
    CHAR = auto()           # Single character between single quotes


# Range of an integer literal value (signed 64-bit)
INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class Literal:
    """
    A literal value (420, "hello world", 'c').

    String bodies are kept raw: escape sequences are not interpreted, so
    ``"a\\n"`` holds a backslash followed by ``n``.

    Attributes:
        kind: Which literal sub-variant this is
        value: ``int`` for integers, ``str`` for strings and characters
    """
    kind: LiteralKind
    value: int | str

    def __post_init__(self) -> None:
        if self.kind is LiteralKind.INTEGER:
            if not isinstance(self.value, int):
                raise TypeError("integer literal value must be an int")
            if not INTEGER_MIN <= self.value <= INTEGER_MAX:
                raise ValueError(f"integer literal out of range: {self.value}")
        elif self.kind is LiteralKind.CHAR:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(
                    f"character literal must hold exactly one character, got {self.value!r}"
                )
        elif not isinstance(self.value, str):
            raise TypeError("string literal value must be a str")

    @classmethod
    def integer(cls, value: int) -> "Literal":
        return cls(LiteralKind.INTEGER, value)

    @classmethod
    def string(cls, value: str) -> "Literal":
        return cls(LiteralKind.STRING, value)

    @classmethod
    def char(cls, value: str) -> "Literal":
        return cls(LiteralKind.CHAR, value)

    @property
    def text(self) -> str:
        """Source spelling of the literal, with its delimiting quotes."""
        if self.kind is LiteralKind.STRING:
            return f'"{self.value}"'
        if self.kind is LiteralKind.CHAR:
            return f"'{self.value}'"
        return str(self.value)

    def __repr__(self) -> str:
        kind = self.kind.name.capitalize()
        if isinstance(self.value, int):
            return f"{kind}({self.value})"
        return f"{kind}({self.value!r})"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single lexical token.

    Tokens are immutable and compare by value, which keeps assertions on a
    token sequence simple. Source positions are not stored on the token;
    they are reported by errors only.

    Attributes:
        kind: The TokenKind classification
        value: The variant payload (Keyword, identifier name, Literal or Symbol)
    """
    kind: TokenKind
    value: Keyword | str | Literal | Symbol

    @classmethod
    def keyword(cls, keyword: Keyword) -> "Token":
        return cls(TokenKind.KEYWORD, keyword)

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(TokenKind.IDENTIFIER, name)

    @classmethod
    def literal(cls, literal: Literal) -> "Token":
        return cls(TokenKind.LITERAL, literal)

    @classmethod
    def symbol(cls, symbol: Symbol) -> "Token":
        return cls(TokenKind.SYMBOL, symbol)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if isinstance(self.value, (Keyword, Symbol)):
            return f"Token({self.kind.name}, {self.value.value})"
        return f"Token({self.kind.name}, {self.value!r})"

    @property
    def text(self) -> str:
        """
        Render the token back to source text.

        Keywords and symbols render as their spelling, identifiers as
        their name and literals with their delimiting quotes restored.
        """
        if isinstance(self.value, Literal):
            return self.value.text
        if isinstance(self.value, (Keyword, Symbol)):
            return self.value.value
        return self.value


def render(tokens: list[Token], separator: str = " ") -> str:
    """Join the source text of ``tokens`` with ``separator``."""
    return separator.join(token.text for token in tokens)


def lookup_keyword(text: str) -> Optional[Keyword]:
    """Return the keyword spelled exactly ``text``, or None."""
    return KEYWORDS.get(text)
