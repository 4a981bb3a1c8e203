"""
Calc Engine - arithmetic expression engine for keypad calculators

Tokenizes, parses and evaluates calculator expressions with operator
precedence, right-associative powers, unary minus and single-argument
functions, and exposes a direct two-operand calculator alongside.
"""

__version__ = "1.0.0"
__author__ = "Calc Engine Team"

import structlog

from calc_engine.calculator import calc
from calc_engine.engine import evaluate_expression, extract_result_value, parse_expression
from calc_engine.errors import (
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    ExpressionSyntaxError,
    InvalidOperatorError,
)
from calc_engine.evaluator import evaluate
from calc_engine.formatting import format_number
from calc_engine.log import configure_logging
from calc_engine.models import ErrorKind, EvalResult, Function, Token, TokenType
from calc_engine.tokenizer import tokenize

__all__ = [
    "calc",
    "parse_expression",
    "evaluate_expression",
    "extract_result_value",
    "evaluate",
    "tokenize",
    "format_number",
    "configure_logging",
    "CalculatorError",
    "DivisionByZeroError",
    "DomainError",
    "ExpressionSyntaxError",
    "InvalidOperatorError",
    "ErrorKind",
    "EvalResult",
    "Function",
    "Token",
    "TokenType",
]

# A host application's own structlog setup takes precedence
if not structlog.is_configured():
    configure_logging()
