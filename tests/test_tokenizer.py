"""
Tests for the tokenizer.
"""

import pytest

from core.errors import EmptyInput, InvalidCharacter
from core.token_system import Token, TokenType
from core.tokenizer import tokenize


def texts(tokens):
    return [t.text for t in tokens]


class TestScanning:
    """Tests for splitting input into atoms and symbols."""

    def test_simple_expression(self):
        """Numbers and operators become separate tokens."""
        tokens = tokenize("2+3*4")
        assert tokens == [
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.SYMBOL, "+"),
            Token(TokenType.NUMBER, "3"),
            Token(TokenType.SYMBOL, "*"),
            Token(TokenType.NUMBER, "4"),
        ]

    def test_whitespace_and_newlines_removed(self):
        """All whitespace is stripped before scanning, even inside numbers."""
        assert texts(tokenize(" 1 2 +\n3\t")) == ["12", "+", "3"]

    def test_identifiers_are_not_split(self):
        """Function names and variables stay whole."""
        tokens = tokenize("atan2(y,x)")
        assert texts(tokens) == ["atan2", "(", "y", ",", "x", ")"]
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[2].type == TokenType.IDENTIFIER

    def test_decimal_literals(self):
        """Decimal float syntax is recognised as numbers."""
        for literal in ["3.14", "1.", ".5", "42"]:
            tokens = tokenize(literal)
            assert tokens == [Token(TokenType.NUMBER, literal)]

    def test_scientific_notation(self):
        """A sign after a mantissa ending in e belongs to the literal."""
        assert tokenize("1e-5") == [Token(TokenType.NUMBER, "1e-5")]
        assert texts(tokenize("2.5E+3*2")) == ["2.5E+3", "*", "2"]

    def test_constant_e_after_number_is_identifier(self):
        """'2e' without exponent digits is not a number."""
        tokens = tokenize("2e")
        assert tokens == [Token(TokenType.IDENTIFIER, "2e")]

    def test_non_ascii_identifier(self):
        """The pi symbol is an identifier."""
        assert tokenize("2*π")[-1] == Token(TokenType.IDENTIFIER, "π")


class TestSigns:
    """Tests for unary/binary sign classification."""

    def test_leading_minus_is_unary(self):
        assert texts(tokenize("-3")) == ["u-", "3"]

    def test_leading_plus_is_unary(self):
        assert texts(tokenize("+3")) == ["u+", "3"]

    def test_binary_minus(self):
        assert texts(tokenize("5-3")) == ["5", "-", "3"]

    def test_minus_after_operator_is_unary(self):
        assert texts(tokenize("2*-3")) == ["2", "*", "u-", "3"]
        assert texts(tokenize("2^-1")) == ["2", "^", "u-", "1"]

    def test_minus_after_open_parenthesis_is_unary(self):
        assert texts(tokenize("(-3)")) == ["(", "u-", "3", ")"]

    def test_minus_after_comma_is_unary(self):
        assert texts(tokenize("atan2(1,-1)")) == ["atan2", "(", "1", ",", "u-", "1", ")"]

    def test_minus_after_closing_parenthesis_is_binary(self):
        assert texts(tokenize("(1)-2")) == ["(", "1", ")", "-", "2"]

    def test_minus_after_factorial_is_binary(self):
        assert texts(tokenize("3!-2")) == ["3", "!", "-", "2"]

    def test_consecutive_unary_signs(self):
        assert texts(tokenize("--5")) == ["u-", "u-", "5"]
        assert texts(tokenize("3*-+4")) == ["3", "*", "u-", "u+", "4"]

    def test_plus_minus_collapses(self):
        """'+' followed by '-' reads as a single '-'."""
        assert texts(tokenize("3+-4")) == ["3", "-", "4"]


class TestErrors:
    """Tests for tokenizer failures."""

    def test_empty_input(self):
        with pytest.raises(EmptyInput):
            tokenize("")

    def test_whitespace_only_input(self):
        with pytest.raises(EmptyInput):
            tokenize("  \n\t ")

    def test_reserved_character(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            tokenize("2$3")
        assert "$" in str(exc_info.value)
        assert exc_info.value.character == "$"
