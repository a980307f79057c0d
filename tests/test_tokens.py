# =============================================================================
# test_tokens.py - Token Model Tests
# =============================================================================

import pytest
from rcc.tokens import (
    KEYWORDS,
    SYMBOLS,
    Keyword,
    Literal,
    LiteralKind,
    Symbol,
    Token,
    TokenKind,
    lookup_keyword,
    render,
)


class TestKeywords:
    """Tests for the keyword table."""

    def test_keyword_count(self):
        assert len(Keyword) == 35
        assert len(KEYWORDS) == len(Keyword)

    def test_lookup(self):
        assert lookup_keyword("while") is Keyword.WHILE
        assert lookup_keyword("nullptr") is Keyword.NULLPTR

    def test_lookup_is_exact(self):
        assert lookup_keyword("While") is None
        assert lookup_keyword("whilst") is None
        assert lookup_keyword("") is None


class TestSymbols:
    """Tests for the symbol table."""

    def test_symbols_are_single_characters(self):
        assert all(len(symbol.value) == 1 for symbol in Symbol)

    def test_symbol_characters(self):
        assert set(SYMBOLS) == set("&*{},:=#();[]")


class TestLiteral:
    """Tests for literal construction and validation."""

    def test_integer(self):
        literal = Literal.integer(5)
        assert literal.kind is LiteralKind.INTEGER
        assert literal.value == 5
        assert literal.text == "5"

    def test_integer_range(self):
        Literal.integer(2 ** 63 - 1)
        Literal.integer(-(2 ** 63))
        with pytest.raises(ValueError):
            Literal.integer(2 ** 63)

    def test_integer_requires_int(self):
        with pytest.raises(TypeError):
            Literal(LiteralKind.INTEGER, "5")

    def test_string_text_is_quoted(self):
        assert Literal.string("a b").text == '"a b"'

    def test_char(self):
        assert Literal.char("x").text == "'x'"

    @pytest.mark.parametrize("body", ["", "ab", "\\n"])
    def test_char_requires_one_character(self, body):
        with pytest.raises(ValueError):
            Literal.char(body)

    def test_repr(self):
        assert repr(Literal.integer(5)) == "Integer(5)"
        assert repr(Literal.string("hi")) == "String('hi')"
        assert repr(Literal.char("c")) == "Char('c')"


class TestToken:
    """Tests for the Token data class."""

    def test_variants(self):
        assert Token.keyword(Keyword.INT).kind is TokenKind.KEYWORD
        assert Token.identifier("foo").kind is TokenKind.IDENTIFIER
        assert Token.literal(Literal.integer(1)).kind is TokenKind.LITERAL
        assert Token.symbol(Symbol.COMMA).kind is TokenKind.SYMBOL

    def test_equality(self):
        assert Token.identifier("foo") == Token.identifier("foo")
        assert Token.identifier("foo") != Token.identifier("bar")
        assert Token.literal(Literal.string("1")) != Token.literal(Literal.integer(1))

    def test_immutable(self):
        token = Token.identifier("foo")
        with pytest.raises(AttributeError):
            token.value = "bar"

    def test_repr(self):
        assert repr(Token.keyword(Keyword.INT)) == "Token(KEYWORD, int)"
        assert repr(Token.identifier("foo")) == "Token(IDENTIFIER, 'foo')"
        assert repr(Token.symbol(Symbol.SEMICOLON)) == "Token(SYMBOL, ;)"
        assert repr(Token.literal(Literal.integer(5))) == "Token(LITERAL, Integer(5))"

    def test_text(self):
        assert Token.keyword(Keyword.RETURN).text == "return"
        assert Token.identifier("main").text == "main"
        assert Token.symbol(Symbol.BRACKET_OPEN).text == "{"
        assert Token.literal(Literal.string("hi")).text == '"hi"'

    def test_render(self):
        tokens = [
            Token.keyword(Keyword.RETURN),
            Token.literal(Literal.integer(0)),
            Token.symbol(Symbol.SEMICOLON),
        ]
        assert render(tokens) == "return 0 ;"
        assert render(tokens, "") == "return0;"
