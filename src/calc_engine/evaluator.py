"""
Expression-tree evaluator.

Walks the tree produced by the parser and computes a float, raising a typed
CalculatorError at the first operation that has no finite real result.
``evaluate`` wraps parsing and evaluation and reports the outcome as an
EvalResult instead of raising.
"""

import math
from typing import Callable, Sequence

import structlog

from calc_engine.errors import CalculatorError, DivisionByZeroError, DomainError
from calc_engine.models import (
    BinaryOp,
    Call,
    EvalResult,
    Function,
    Literal,
    Node,
    Token,
    UnaryOp,
)
from calc_engine.parser import parse

logger = structlog.get_logger()


# =============================================================================
# Operations
# =============================================================================

def _divide(left: float, right: float) -> float:
    if right == 0:
        raise DivisionByZeroError("Division by zero")
    return left / right


def _power(base: float, exponent: float) -> float:
    if base == 0:
        if exponent == 0:
            return 1.0
        if exponent < 0:
            raise DivisionByZeroError("Zero cannot be raised to a negative power")
    if base < 0 and not exponent.is_integer():
        raise DomainError("Negative base with a non-integer exponent has no real result")
    try:
        return math.pow(base, exponent)
    except OverflowError:
        raise DomainError("Result is out of range")


def _sqrt(x: float) -> float:
    if x < 0:
        raise DomainError("Cannot take square root of a negative number")
    return math.sqrt(x)


def _log10(x: float) -> float:
    if x <= 0:
        raise DomainError("Logarithm is only defined for positive numbers")
    return math.log10(x)


def _ln(x: float) -> float:
    if x <= 0:
        raise DomainError("Natural logarithm is only defined for positive numbers")
    return math.log(x)


def _inverse(x: float) -> float:
    if x == 0:
        raise DivisionByZeroError("Cannot take inverse of zero")
    return 1.0 / x


_BIN_OPS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "^": _power,
}

_FUNCTIONS: dict[Function, Callable[[float], float]] = {
    Function.SQRT: _sqrt,
    Function.LOG: _log10,
    Function.LN: _ln,
    Function.SIN: math.sin,
    Function.COS: math.cos,
    Function.ABS: math.fabs,
    Function.INV: _inverse,
}


def _finite(value: float) -> float:
    if math.isinf(value) or math.isnan(value):
        raise DomainError("Result is out of range")
    return value


# =============================================================================
# Tree Walk
# =============================================================================

def evaluate_node(node: Node) -> float:
    """Compute the value of an expression tree, left operand first."""
    if isinstance(node, Literal):
        return _finite(float(node.value))

    if isinstance(node, UnaryOp):
        return -evaluate_node(node.operand)

    if isinstance(node, BinaryOp):
        left = evaluate_node(node.left)
        right = evaluate_node(node.right)
        return _finite(_BIN_OPS[node.op](left, right))

    if isinstance(node, Call):
        argument = evaluate_node(node.argument)
        return _finite(_FUNCTIONS[node.function](argument))

    raise TypeError(f"Unsupported node: {type(node).__name__}")


def evaluate(tokens: Sequence[Token]) -> EvalResult:
    """
    Parse and evaluate a token sequence.

    Returns an EvalResult holding either the finite value or the kind and
    message of the first failure. The whole sequence is parsed before any
    arithmetic happens, so malformed input never yields a partial result.
    """
    try:
        tree = parse(tokens)
        value = evaluate_node(tree)
    except CalculatorError as e:
        logger.debug("Evaluation failed", kind=e.kind.value, error=e.message)
        return EvalResult.failure(e.kind, e.message)

    # Normalize negative zero so it formats as 0.0
    return EvalResult.success(value + 0.0)
