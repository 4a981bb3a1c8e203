"""
Two-operand calculator.

A direct arithmetic dispatch for call sites that already hold two numbers
and an operator key, with no expression parsing involved.
"""

import operator
from typing import Callable

import structlog

from calc_engine.errors import DivisionByZeroError, InvalidOperatorError

logger = structlog.get_logger()


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError("Division by zero")
    return a / b


OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def calc(a: float, op: str, b: float) -> float:
    """
    Apply one binary operator to two numbers.

    Raises DivisionByZeroError for a zero divisor and InvalidOperatorError
    for anything other than '+', '-', '*' or '/'.
    """
    operation = OPERATIONS.get(op)
    if operation is None:
        logger.info("Rejected operator", op=op)
        raise InvalidOperatorError(f"Unknown operator: {op}")
    return float(operation(float(a), float(b)))
