"""Calculate Service — imperative shell around the pure calculator core.

Invariants:
    - Operand length is checked BEFORE any parsing or arithmetic
    - Every rejection is logged at WARNING with its error_code, then re-raised
    - Returns response models; routes never touch the core directly

Design Decisions:
    - Length guard lives here, not in core: it is a deployment limit
      (settings.max_operand_length), not an arithmetic rule
"""

import logging

from app.config import Settings
from app.core.compute import calculate
from app.core.errors import CalculatorError, OperandTooLongError
from app.schemas.calculator import (
    CalculationRequest,
    CalculationResponse,
    CalculatorFormResponse,
)

logger = logging.getLogger(__name__)


def build_form(operand1: str | None) -> CalculatorFormResponse:
    """Entry form state. A pre-filled operand1 takes the input focus."""
    value = operand1 or ""
    return CalculatorFormResponse(operand1=value, operand1_focused=bool(value))


def check_operand_lengths(body: CalculationRequest, limit: int) -> None:
    for field in ("operand1", "operand2"):
        length = len(getattr(body, field))
        if length > limit:
            raise OperandTooLongError(field, length, limit)


def run_calculation(
    body: CalculationRequest, settings: Settings,
) -> CalculationResponse:
    """Validate, compute and wrap the result. Raises CalculatorError."""
    try:
        check_operand_lengths(body, settings.max_operand_length)
        result = calculate(
            body.operand1, body.operator, body.operand2, strict=body.strict,
        )
    except CalculatorError as e:
        logger.warning(
            f"Calculation rejected: {e.message}",
            extra={"error_code": e.code, "operator": body.operator},
        )
        raise
    logger.debug(
        "Calculation completed",
        extra={
            "operator": body.operator,
            "strict": body.strict,
            "operand_lengths": [len(body.operand1), len(body.operand2)],
        },
    )
    return CalculationResponse(
        operand1=body.operand1,
        operator=body.operator,
        operand2=body.operand2,
        result=result,
    )
