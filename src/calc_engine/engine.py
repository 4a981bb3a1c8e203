"""
String boundary of the expression engine.

``parse_expression`` is the contract consumed by keypad front ends: it
always returns text, either ``"Result: <value>"`` or ``"Error: <message>"``.
Failures stay typed inside the engine and are only rendered here.
"""

import structlog

from calc_engine.errors import CalculatorError
from calc_engine.evaluator import evaluate
from calc_engine.formatting import format_number
from calc_engine.models import EvalResult
from calc_engine.tokenizer import tokenize

logger = structlog.get_logger()

RESULT_PREFIX = "Result: "
ERROR_PREFIX = "Error: "


def evaluate_expression(expression: str) -> EvalResult:
    """Tokenize and evaluate expression text into a structured result."""
    try:
        tokens = tokenize(expression)
    except CalculatorError as e:
        return EvalResult.failure(e.kind, e.message)
    return evaluate(tokens)


def render_result(result: EvalResult) -> str:
    """Render a structured result in the boundary's string form."""
    if result.ok:
        return RESULT_PREFIX + format_number(result.value)
    return ERROR_PREFIX + result.message


def parse_expression(expression: str) -> str:
    """
    Evaluate a calculator expression and render the outcome as text.

    Never raises for malformed or undefined input.
    """
    logger.debug("Received expression", expression=expression)
    result = evaluate_expression(expression)
    output = render_result(result)
    if result.ok:
        logger.debug("Expression evaluated", output=output)
    else:
        logger.info("Expression rejected", kind=result.error.value, error=result.message)
    return output


def extract_result_value(output: str) -> str | None:
    """
    Return the value text of a successful boundary string, else None.

    Callers that chain calculations splice this text into the next
    expression.
    """
    if output.startswith(RESULT_PREFIX):
        return output[len(RESULT_PREFIX):].strip()
    return None
