"""Error Hierarchy — typed, categorized exceptions for calculator failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors are 400-level; arithmetic itself never raises
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CalculatorError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operator: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details: list[dict[str, Any]] | None = None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "operator": self.context.operator,
                "field": self.context.field,
            },
        }
        if self.details is not None:
            body["details"] = self.details
        return {"error": body}


# ─── Input Errors (400-level) ───────────────────────────────────

class UnknownOperatorError(CalculatorError):
    """Operator token outside {+, &, |, *}."""
    def __init__(self, token: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operator = token
        ctx.field = ctx.field or "operator"
        super().__init__(
            f"Unknown operator {token!r}. Expected one of: +, &, |, *",
            "UNKNOWN_OPERATOR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.token = token


class InvalidBinaryError(CalculatorError):
    """Strict parsing rejected a non-binary operand."""
    def __init__(
        self,
        text: str,
        reason: str,
        field: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = field or ctx.field
        super().__init__(
            f"Invalid binary number: {reason}",
            "INVALID_BINARY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.text = text
        self.reason = reason


class OperandTooLongError(CalculatorError):
    """Operand exceeds the configured digit limit."""
    def __init__(
        self, field: str, length: int, limit: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f"Operand '{field}' has {length} digits (limit {limit})",
            "OPERAND_TOO_LONG", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.length = length
        self.limit = limit


class RequestDataError(CalculatorError):
    """Request body failed schema validation; one detail per bad field."""
    def __init__(
        self, details: list[dict[str, Any]], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if len(details) == 1:
            ctx.field = details[0]["field"]
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.details = details


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(CalculatorError):
    """Unexpected failure. The message never carries internal details."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
