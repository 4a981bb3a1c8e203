"""
Tests for expression tokenization.
"""

import pytest

from calc_engine.errors import ExpressionSyntaxError
from calc_engine.models import Function, TokenType
from calc_engine.tokenizer import tokenize


def _types(text):
    return [t.type for t in tokenize(text)]


class TestNumbers:
    """Test number literals."""

    def test_integer(self):
        tokens = tokenize("42")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == 42.0

    def test_decimal(self):
        assert tokenize("3.14")[0].value == 3.14

    def test_leading_dot(self):
        assert tokenize(".5")[0].value == 0.5

    def test_trailing_dot(self):
        assert tokenize("5.")[0].value == 5.0

    def test_two_decimal_points_raises_error(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("1.2.3")

    def test_lone_dot_raises_error(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("2 + .")


class TestOperators:
    """Test operators, parentheses and whitespace."""

    def test_simple_expression(self):
        tokens = tokenize("3 + 4")
        assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER]
        assert tokens[1].value == "+"

    def test_whitespace_is_insignificant(self):
        assert [str(t) for t in tokenize("  2  *  3  ")] == ["2", "*", "3"]

    def test_parentheses(self):
        assert _types("(1)") == [TokenType.LEFT_PAREN, TokenType.NUMBER, TokenType.RIGHT_PAREN]

    def test_double_star_is_power(self):
        tokens = tokenize("2**3")
        assert len(tokens) == 3
        assert tokens[1].type == TokenType.OPERATOR
        assert tokens[1].value == "^"
        assert str(tokens[1]) == "**"

    def test_scientific_notation_macro_decomposes(self):
        tokens = tokenize("5*10^3")
        assert [str(t) for t in tokens] == ["5", "*", "10", "^", "3"]

    def test_square_shorthand_decomposes(self):
        assert [str(t) for t in tokenize("7^2")] == ["7", "^", "2"]

    def test_positions(self):
        assert [t.position for t in tokenize("12 + 3")] == [0, 3, 5]

    def test_unknown_character_raises_error(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            tokenize("2 & 3")
        assert exc_info.value.position == 2

    def test_too_long_raises_error(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("1+1", max_length=2)


class TestUnaryMinus:
    """Test unary/binary minus classification."""

    def test_leading_minus_is_unary(self):
        assert _types("-3") == [TokenType.UNARY_MINUS, TokenType.NUMBER]

    def test_minus_after_number_is_binary(self):
        assert _types("5-3")[1] == TokenType.OPERATOR

    def test_minus_after_operator_is_unary(self):
        assert _types("2*-3") == [
            TokenType.NUMBER, TokenType.OPERATOR, TokenType.UNARY_MINUS, TokenType.NUMBER,
        ]

    def test_minus_after_left_paren_is_unary(self):
        assert _types("(-2)")[1] == TokenType.UNARY_MINUS

    def test_minus_after_unary_minus_is_unary(self):
        assert _types("--2") == [TokenType.UNARY_MINUS, TokenType.UNARY_MINUS, TokenType.NUMBER]

    def test_minus_after_right_paren_is_binary(self):
        assert _types("(1)-3")[3] == TokenType.OPERATOR


class TestFunctions:
    """Test function-name recognition."""

    @pytest.mark.parametrize("name", ["sqrt", "log", "ln", "sin", "cos", "abs", "inv"])
    def test_known_functions(self, name):
        tokens = tokenize(f"{name}(1)")
        assert tokens[0].type == TokenType.FUNCTION
        assert tokens[0].value == Function(name)
        assert tokens[1].type == TokenType.LEFT_PAREN

    def test_unknown_function_raises_error(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            tokenize("tan(1)")
        assert "Unknown function" in exc_info.value.message

    def test_function_without_paren_raises_error(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("sqrt 4")

    def test_bare_function_name_raises_error(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("sqrt")

    def test_exponent_letter_is_rejected(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("1e5")
