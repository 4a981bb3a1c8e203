"""
Tokenizer for calculator expressions.

Turns the raw text built by a calculator keypad into typed tokens. Button
macros such as the scientific-notation key (``*10^``) or the square and cube
keys (``^2``, ``^3``) reach this module as ordinary characters and come out
as ordinary operator and number tokens.
"""

import structlog

from calc_engine.config import settings
from calc_engine.errors import ExpressionSyntaxError
from calc_engine.models import Function, Token, TokenType

logger = structlog.get_logger()

DIGITS = frozenset("0123456789")
NUMBER_CHARS = DIGITS | {"."}
OPERATOR_CHARS = frozenset("+-*/^")
FUNCTION_NAMES = {f.value: f for f in Function}

# A '-' in any of these positions negates the following operand
_UNARY_CONTEXT = (TokenType.OPERATOR, TokenType.LEFT_PAREN, TokenType.UNARY_MINUS)


def tokenize(text: str, max_length: int | None = None) -> list[Token]:
    """
    Split an expression into tokens.

    Raises ExpressionSyntaxError on an unrecognized character, a malformed
    number, an unknown function name, or a function name that is not
    immediately followed by '('.
    """
    limit = max_length if max_length is not None else settings.max_expression_length
    if len(text) > limit:
        raise ExpressionSyntaxError(f"Expression is too long (limit is {limit} characters)")

    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        c = text[i]

        if c.isspace():
            i += 1
            continue

        if c in NUMBER_CHARS:
            start = i
            while i < n and text[i] in NUMBER_CHARS:
                i += 1
            literal = text[start:i]
            if literal.count(".") > 1:
                raise ExpressionSyntaxError(f"Malformed number: {literal}", position=start)
            if literal == ".":
                raise ExpressionSyntaxError("Malformed number: '.'", position=start)
            tokens.append(Token(TokenType.NUMBER, float(literal), start, literal))
            continue

        if c.isascii() and c.isalpha():
            start = i
            while i < n and text[i].isascii() and text[i].isalpha():
                i += 1
            name = text[start:i]
            function = FUNCTION_NAMES.get(name)
            if function is None:
                raise ExpressionSyntaxError(f"Unknown function: {name}", position=start)
            if i >= n or text[i] != "(":
                raise ExpressionSyntaxError(
                    f"Function '{name}' must be followed by '('", position=start
                )
            tokens.append(Token(TokenType.FUNCTION, function, start))
            continue

        if c in OPERATOR_CHARS:
            if c == "-" and (not tokens or tokens[-1].type in _UNARY_CONTEXT):
                tokens.append(Token(TokenType.UNARY_MINUS, "-", i))
                i += 1
                continue
            if c == "*" and i + 1 < n and text[i + 1] == "*":
                tokens.append(Token(TokenType.OPERATOR, "^", i, "**"))
                i += 2
                continue
            tokens.append(Token(TokenType.OPERATOR, c, i))
            i += 1
            continue

        if c == "(":
            tokens.append(Token(TokenType.LEFT_PAREN, "(", i))
            i += 1
            continue

        if c == ")":
            tokens.append(Token(TokenType.RIGHT_PAREN, ")", i))
            i += 1
            continue

        raise ExpressionSyntaxError(f"Unexpected character '{c}' at position {i}", position=i)

    logger.debug("Tokenized expression", length=n, tokens=len(tokens))
    return tokens
