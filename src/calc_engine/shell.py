"""
Interactive calculator session.

Holds the caller-side state the engine deliberately does not: the last
successful result. Chaining is purely textual; the session splices the
previous value into the next line before handing the line to
``parse_expression``.
"""

import re
from dataclasses import dataclass

from calc_engine.engine import extract_result_value, parse_expression

_LEADING_OPERATOR = re.compile(r"^\s*(\*\*|[+\-*/^])")
_ANS = re.compile(r"\bans\b")
_EXPONENT_FORM = re.compile(r"^(-?[0-9.]+)e([+-]?)([0-9]+)$")

CLEAR_COMMANDS = frozenset({"clear", "ac"})
EXIT_COMMANDS = frozenset({"quit", "exit"})


def as_operand(value_text: str) -> str:
    """
    Rewrite a rendered result so the tokenizer accepts it as an operand.

    Exponent forms such as ``1e+20`` become the same ``*10^`` macro the
    scientific-notation key produces, wrapped in parentheses.
    """
    match = _EXPONENT_FORM.match(value_text)
    if match is None:
        if value_text.startswith("-"):
            return f"({value_text})"
        return value_text
    mantissa, sign, exponent = match.groups()
    exponent = exponent.lstrip("0") or "0"
    if sign == "-":
        exponent = f"(-{exponent})"
    return f"({mantissa}*10^{exponent})"


@dataclass
class CalculatorSession:
    """A keypad-style session that remembers the last successful result."""
    chain_results: bool = True
    last_result: str | None = None

    def prepare(self, line: str) -> str:
        """Expand ``ans`` and leading-operator chaining into a full expression."""
        expression = line.strip()
        if self.last_result is None:
            return expression
        operand = as_operand(self.last_result)
        expression = _ANS.sub(lambda _: operand, expression)
        if self.chain_results and _LEADING_OPERATOR.match(expression):
            expression = operand + " " + expression
        return expression

    def submit(self, line: str) -> str | None:
        """
        Evaluate one line and return the boundary string.

        Returns None for an empty line or a bare ``0``, which are not sent to
        the engine. Only successful results replace the remembered value.
        """
        expression = self.prepare(line)
        if not expression or expression == "0":
            return None
        output = parse_expression(expression)
        value = extract_result_value(output)
        if value is not None:
            self.last_result = value
        return output

    def clear(self) -> None:
        self.last_result = None
