"""
Exception hierarchy for the calculator engine.

Every failure the engine can detect is raised as a subclass of
CalculatorError carrying its ErrorKind, so the expression boundary can turn
it into a structured result without inspecting message text.
"""

from calc_engine.models import ErrorKind


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    kind: ErrorKind = ErrorKind.SYNTAX_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExpressionSyntaxError(CalculatorError):
    """Raised when an expression cannot be tokenized or parsed."""
    kind = ErrorKind.SYNTAX_ERROR

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class DomainError(CalculatorError):
    """Raised when a function or operator has no real result for its operands."""
    kind = ErrorKind.DOMAIN_ERROR


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when attempting to divide by zero."""
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidOperatorError(CalculatorError, ValueError):
    """Raised when calc() is given an operator it does not support."""
    kind = ErrorKind.INVALID_OPERATOR
