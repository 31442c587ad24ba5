"""Calculator Schemas — Pydantic models for the calculator API boundary.

Invariants:
    - Operands travel as raw strings; sanitizing is the core's job, not Pydantic's
    - operator is any non-empty token here; every non-empty unknown token
      surfaces as UNKNOWN_OPERATOR, only a missing or empty one as VALIDATION_ERROR
    - Response models carry a `view` discriminator (calculator | result)

Design Decisions:
    - Field names mirror the HTML form (operand1, operator, operand2)
"""

from pydantic import BaseModel, Field

from app.core.domain_types import CalculatorView


class CalculationRequest(BaseModel):
    """Submitted form: two operands and an operator token."""
    operand1: str = ""
    operator: str = Field(min_length=1)
    operand2: str = ""
    strict: bool = False


class CalculatorFormResponse(BaseModel):
    """Entry form state: which operand was pre-filled and focused."""
    view: CalculatorView = CalculatorView.CALCULATOR
    operand1: str = ""
    operand1_focused: bool = False


class CalculationResponse(BaseModel):
    """Result screen. Echoes the inputs alongside the computed digits."""
    view: CalculatorView = CalculatorView.RESULT
    operand1: str
    operator: str
    operand2: str
    result: str
