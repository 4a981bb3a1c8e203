"""
FastAPI application and API routes for Calc Engine.
"""

import math
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, HTTPException

from calc_engine import __version__
from calc_engine.calculator import OPERATIONS, calc
from calc_engine.config import settings
from calc_engine.engine import evaluate_expression, render_result
from calc_engine.errors import CalculatorError, DomainError
from calc_engine.log import configure_logging
from calc_engine.models import (
    CalcRequest,
    CalcResponse,
    EvaluateRequest,
    EvaluateResponse,
    Function,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Worker processes started by uvicorn never pass through the CLI callback
    configure_logging()
    yield


app = FastAPI(
    title=settings.app_name,
    description="Keypad calculator expression engine",
    version=__version__,
    lifespan=lifespan,
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/api/v1/config")
async def get_config():
    """Get public configuration."""
    return {
        "app_name": settings.app_name,
        "format_policy": settings.format_policy.value,
        "max_nesting_depth": settings.max_nesting_depth,
        "max_expression_length": settings.max_expression_length,
        "functions": [f.value for f in Function],
        "operators": sorted(OPERATIONS),
    }


# =============================================================================
# Evaluation API
# =============================================================================

@app.post("/api/v1/evaluate", response_model=EvaluateResponse)
async def evaluate_request(request: EvaluateRequest):
    """
    Evaluate a free-form expression.

    Always answers 200: failures are part of the result, exactly as the
    string boundary reports them.
    """
    result = evaluate_expression(request.expression)
    return EvaluateResponse(
        output=render_result(result),
        value=result.value,
        error=result.error,
        message=result.message,
    )


@app.post("/api/v1/calc", response_model=CalcResponse)
async def calc_request(request: CalcRequest):
    """Apply a single two-operand operation."""
    try:
        result = calc(request.a, request.op, request.b)
        if not math.isfinite(result):
            raise DomainError("Result is out of range")
    except CalculatorError as e:
        logger.info("Calc request rejected", kind=e.kind.value, error=e.message)
        raise HTTPException(
            status_code=400,
            detail={"error": e.kind.value, "message": e.message},
        )
    return CalcResponse(result=result)
