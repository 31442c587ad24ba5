"""Error Handlers — every failure leaves the API as a CalculatorError envelope.

Invariants:
    - All error bodies share one shape: {"error": {code, message, category,
      severity, timestamp, context[, details]}}
    - Pydantic validation failures become RequestDataError (400 VALIDATION_ERROR)
    - Unexpected exceptions become InternalError (500); the cause is logged, never returned

Design Decisions:
    - Validation and catch-all paths convert to domain errors and reuse
      CalculatorError.to_response() instead of hand-built dicts
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import CalculatorError, InternalError, RequestDataError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(CalculatorError, calculator_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


def error_response(exc: CalculatorError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def calculator_error_handler(request: Request, exc: CalculatorError):
    logger.info(
        f"Request rejected: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = RequestDataError(field_details(exc))
    logger.warning(
        f"Invalid request data on {request.url.path}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return error_response(error)


async def unexpected_error_handler(request: Request, exc: Exception):
    error = InternalError()
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}",
        extra={"error_code": error.code, "path": request.url.path},
        exc_info=exc,
    )
    return error_response(error)


def field_details(exc: RequestValidationError) -> list[dict]:
    """Flatten Pydantic errors to {field, message, type}; loc joined with dots."""
    return [
        {
            "field": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
