"""
Recursive-descent parser for calculator expressions.

Grammar, loosest tier first::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := UNARY_MINUS unary | power
    power      := primary ("^" unary)?
    primary    := NUMBER | "(" expression ")" | FUNCTION "(" expression ")"

``^`` is right-associative because its right operand recurses back into
``unary``. Unary minus binds looser than ``^``, so ``-2^2`` is ``-(2^2)``.
"""

from typing import Sequence

import structlog

from calc_engine.config import settings
from calc_engine.errors import ExpressionSyntaxError
from calc_engine.models import (
    BinaryOp,
    Call,
    Literal,
    Node,
    Token,
    TokenType,
    UnaryOp,
)

logger = structlog.get_logger()


class Parser:
    """Builds an expression tree from a token sequence."""

    def __init__(self, tokens: Sequence[Token], max_depth: int | None = None):
        self.tokens = list(tokens)
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth if max_depth is not None else settings.max_nesting_depth

    def parse(self) -> Node:
        """Parse the whole token sequence into a single tree."""
        if not self.tokens:
            raise ExpressionSyntaxError("Empty expression")

        node = self._parse_expression()

        token = self._peek()
        if token is not None:
            if token.type == TokenType.RIGHT_PAREN:
                raise ExpressionSyntaxError(
                    f"Unmatched ')' at position {token.position}", position=token.position
                )
            raise ExpressionSyntaxError(
                f"Unexpected '{token}' at position {token.position}", position=token.position
            )
        return node

    # -------------------------------------------------------------------------
    # Token cursor
    # -------------------------------------------------------------------------

    def _peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _at_operator(self, symbols: str) -> bool:
        token = self._peek()
        return token is not None and token.type == TokenType.OPERATOR and token.value in symbols

    def _expect_right_paren(self, opened: Token) -> None:
        token = self._peek()
        if token is None or token.type != TokenType.RIGHT_PAREN:
            raise ExpressionSyntaxError(
                f"Missing ')' for '(' at position {opened.position}", position=opened.position
            )
        self._advance()

    # -------------------------------------------------------------------------
    # Grammar tiers
    # -------------------------------------------------------------------------

    def _parse_expression(self) -> Node:
        node = self._parse_term()
        while self._at_operator("+-"):
            op = self._advance().value
            right = self._parse_term()
            node = BinaryOp(op, node, right)
        return node

    def _parse_term(self) -> Node:
        node = self._parse_unary()
        while self._at_operator("*/"):
            op = self._advance().value
            right = self._parse_unary()
            node = BinaryOp(op, node, right)
        return node

    def _parse_unary(self) -> Node:
        self.depth += 1
        if self.depth > self.max_depth:
            raise ExpressionSyntaxError(
                f"Expression is nested too deeply (limit is {self.max_depth})"
            )
        try:
            token = self._peek()
            if token is not None and token.type == TokenType.UNARY_MINUS:
                self._advance()
                return UnaryOp("-", self._parse_unary())
            return self._parse_power()
        finally:
            self.depth -= 1

    def _parse_power(self) -> Node:
        base = self._parse_primary()
        if self._at_operator("^"):
            self._advance()
            exponent = self._parse_unary()
            return BinaryOp("^", base, exponent)
        return base

    def _parse_primary(self) -> Node:
        token = self._peek()
        if token is None:
            raise ExpressionSyntaxError("Unexpected end of expression")

        if token.type == TokenType.NUMBER:
            self._advance()
            return Literal(token.value)

        if token.type == TokenType.LEFT_PAREN:
            self._advance()
            inner = self._parse_expression()
            self._expect_right_paren(token)
            return inner

        if token.type == TokenType.FUNCTION:
            self._advance()
            opened = self._peek()
            if opened is None or opened.type != TokenType.LEFT_PAREN:
                raise ExpressionSyntaxError(
                    f"Function '{token}' must be followed by '('", position=token.position
                )
            self._advance()
            argument = self._parse_expression()
            self._expect_right_paren(opened)
            return Call(token.value, argument)

        if token.type == TokenType.RIGHT_PAREN:
            raise ExpressionSyntaxError(
                f"Unexpected ')' at position {token.position}", position=token.position
            )
        raise ExpressionSyntaxError(
            f"Unexpected operator '{token}' at position {token.position}", position=token.position
        )


def parse(tokens: Sequence[Token], max_depth: int | None = None) -> Node:
    """Parse tokens into an expression tree."""
    node = Parser(tokens, max_depth=max_depth).parse()
    logger.debug("Parsed expression", tokens=len(tokens))
    return node
