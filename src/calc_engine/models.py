"""
Core data models for the calculator engine.

Defines the token and expression-tree types shared by the tokenizer,
parser and evaluator, the structured evaluation result, and the request and
response schemas of the HTTP service.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Enums
# =============================================================================

class TokenType(str, Enum):
    """Lexical token categories."""
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    UNARY_MINUS = "unary_minus"


class Function(str, Enum):
    """Single-argument functions recognized in expression text."""
    SQRT = "sqrt"
    LOG = "log"
    LN = "ln"
    SIN = "sin"
    COS = "cos"
    ABS = "abs"
    INV = "inv"


class ErrorKind(str, Enum):
    """Failure categories reported by the engine."""
    SYNTAX_ERROR = "syntax_error"
    DOMAIN_ERROR = "domain_error"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATOR = "invalid_operator"


class FormatPolicy(str, Enum):
    """How successful results are rendered as text."""
    SHORTEST = "shortest"  # Shortest round-trip repr, at least one fraction digit
    FIXED = "fixed"  # Fixed number of fraction digits


# =============================================================================
# Tokens
# =============================================================================

@dataclass(frozen=True)
class Token:
    """A single lexical unit of an expression."""
    type: TokenType
    value: float | str | Function | None = None
    position: int = 0
    text: str | None = None  # Source lexeme where it differs from the value

    def __str__(self) -> str:
        if self.text is not None:
            return self.text
        if self.type == TokenType.NUMBER:
            return repr(self.value)
        if self.type == TokenType.FUNCTION:
            return self.value.value
        if self.type == TokenType.LEFT_PAREN:
            return "("
        if self.type == TokenType.RIGHT_PAREN:
            return ")"
        if self.type == TokenType.UNARY_MINUS:
            return "-"
        return str(self.value)


# =============================================================================
# Expression Tree
# =============================================================================

@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: "Node"


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Call:
    function: Function
    argument: "Node"


Node = Literal | UnaryOp | BinaryOp | Call


# =============================================================================
# Evaluation Result
# =============================================================================

class EvalResult(BaseModel):
    """
    Outcome of evaluating one expression.

    Exactly one of ``value`` or ``error`` is set. A successful value is
    always a finite float.
    """
    value: float | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> "EvalResult":
        if (self.value is None) == (self.error is None):
            raise ValueError("EvalResult needs exactly one of value or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: float) -> "EvalResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "EvalResult":
        return cls(error=kind, message=message)


# =============================================================================
# API Models
# =============================================================================

class EvaluateRequest(BaseModel):
    """Request model for evaluating a free-form expression."""
    expression: str = Field(..., description="Calculator expression, e.g. '2 + 3 * 4'")


class EvaluateResponse(BaseModel):
    """Boundary string plus the structured result it was rendered from."""
    output: str
    value: float | None = None
    error: ErrorKind | None = None
    message: str | None = None


class CalcRequest(BaseModel):
    """Request model for a single two-operand operation."""
    a: float
    op: str = Field(..., min_length=1)
    b: float


class CalcResponse(BaseModel):
    result: float
