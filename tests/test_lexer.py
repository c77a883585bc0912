"""Tests for the value tokenizer."""

import pytest

from stylecast.css.lexer import Lexer
from stylecast.css.tokens import (
    Comma,
    Delim,
    Dimension,
    Function,
    Hash,
    Ident,
    LSquareBracket,
    Number,
    Percentage,
    RParantheses,
    RSquareBracket,
    String,
    Whitespace,
)


def tokens(source: str) -> list:
    return Lexer(source).process()


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestNumbers:
    def test_integer(self):
        [token] = tokens("42")
        assert type(token) is Number
        assert token.value == 42
        assert token.type == "integer"
        assert token.is_integer

    def test_decimal(self):
        [token] = tokens("1.25")
        assert token.value == 1.25
        assert token.type == "number"

    def test_leading_dot(self):
        [token] = tokens(".5")
        assert type(token) is Number
        assert token.value == 0.5

    def test_signed(self):
        assert tokens("-3")[0].value == -3
        assert tokens("+3")[0].value == 3

    def test_exponent(self):
        [token] = tokens("1e3")
        assert type(token) is Number
        assert token.value == 1000.0
        assert token.type == "number"

    def test_integer_past_the_digit_limit(self):
        [token] = tokens("9" * 5000)
        assert type(token) is Number
        assert token.type == "number"
        assert token.value == float("inf")

    def test_percentage(self):
        [token] = tokens("50%")
        assert isinstance(token, Percentage)
        assert not isinstance(token, Number)
        assert token.value == 50
        assert str(token) == "50%"


class TestDimensions:
    def test_pixels(self):
        [token] = tokens("10px")
        assert isinstance(token, Dimension)
        assert token.value == 10
        assert token.unit == "px"
        assert str(token) == "10px"

    def test_em_is_not_an_exponent(self):
        [token] = tokens("1em")
        assert isinstance(token, Dimension)
        assert token.value == 1
        assert token.unit == "em"

    def test_negative_decimal(self):
        [token] = tokens("-1.5rem")
        assert isinstance(token, Dimension)
        assert token.value == -1.5
        assert token.unit == "rem"

    def test_fraction_unit(self):
        [token] = tokens("2fr")
        assert token.unit == "fr"


# ---------------------------------------------------------------------------
# Identifiers, functions, and punctuation
# ---------------------------------------------------------------------------


class TestIdentifiers:
    def test_ident(self):
        [token] = tokens("auto")
        assert isinstance(token, Ident)
        assert token.raw == "auto"

    def test_vendor_ident(self):
        [token] = tokens("-webkit-box")
        assert isinstance(token, Ident)
        assert token.raw == "-webkit-box"

    def test_lower(self):
        assert tokens("AUTO")[0].lower == "auto"

    def test_function(self):
        result = tokens("rgb(1)")
        assert isinstance(result[0], Function)
        assert result[0].raw == "rgb"
        assert isinstance(result[1], Number)
        assert isinstance(result[2], RParantheses)

    def test_hash(self):
        [token] = tokens("#1e3")
        assert isinstance(token, Hash)
        assert token.raw == "1e3"
        assert str(token) == "#1e3"

    def test_lone_hash_is_delim(self):
        assert isinstance(tokens("# ")[0], Delim)


class TestPunctuation:
    def test_brackets_and_commas(self):
        result = tokens("[a], b")
        assert [type(token) for token in result] == [
            LSquareBracket, Ident, RSquareBracket, Comma, Whitespace, Ident,
        ]

    def test_whitespace_collapses(self):
        result = tokens("a  \n\t b")
        assert len(result) == 3
        assert isinstance(result[1], Whitespace)

    def test_comments_are_skipped(self):
        result = tokens("1px/* gap */2px")
        assert [token.raw for token in result] == ["1px", "2px"]


# ---------------------------------------------------------------------------
# Strings and errors
# ---------------------------------------------------------------------------


class TestStrings:
    def test_quoted(self):
        [token] = tokens("'Inter'")
        assert isinstance(token, String)
        assert token.raw == "Inter"
        assert str(token) == "'Inter'"

    def test_escape(self):
        [token] = tokens('"a\\"b"')
        assert token.raw == 'a"b'

    def test_hex_escape(self):
        [token] = tokens('"\\41 b"')
        assert token.raw == "Ab"

    def test_unclosed_string_is_recorded(self):
        lexer = Lexer('"open')
        lexer.process()
        assert len(lexer.errors) == 1

    def test_unclosed_comment_is_recorded(self):
        lexer = Lexer("1px /* open")
        assert [token.raw for token in lexer.process() if not isinstance(token, Whitespace)] == ["1px"]
        assert len(lexer.errors) == 1


class TestLongInput:
    def test_many_tokens(self):
        result = tokens("1px " * 5000)
        assert len(result) == 10000


class TestBrackets:
    def test_matching_pairs(self):
        assert LSquareBracket.alt is RSquareBracket
        assert RSquareBracket.alt is LSquareBracket
        assert RParantheses.value() == ")"

    def test_delim_is_one_character(self):
        with pytest.raises(ValueError):
            Delim("ab")
