"""Calculator Routes — entry form state and binary calculation.

Invariants:
    - GET returns the form state; operand1_focused is true iff operand1 was supplied
    - POST accepts a JSON body or a submitted HTML form with the same field names
    - POST returns the result view or a structured 400 (unknown operator,
      strict-mode invalid digits, operand too long, malformed body)
    - Routes contain no arithmetic (delegate to services.calculate)

Design Decisions:
    - Settings injected via Depends(get_settings) so tests can override limits
    - Body decoded in read_calculation_request so both encodings share one
      CalculationRequest validation and the same VALIDATION_ERROR envelope
"""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.schemas.calculator import (
    CalculationRequest,
    CalculationResponse,
    CalculatorFormResponse,
)
from app.services.calculate import build_form, run_calculation

router = APIRouter(prefix="/api/v1/calculator", tags=["calculator"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_calculation_request(request: Request) -> CalculationRequest:
    """Decode a JSON or form-encoded body into CalculationRequest."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        data = dict(await request.form())
    else:
        try:
            data = await request.json()
        except ValueError:
            raise RequestValidationError([{
                "loc": ("body",), "msg": "Body is not valid JSON",
                "type": "json_invalid",
            }]) from None
    try:
        return CalculationRequest.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors()],
        ) from None


@router.get("", response_model=CalculatorFormResponse)
async def show_form(operand1: str | None = Query(None)):
    """Entry form, optionally pre-filled with operand1."""
    return build_form(operand1)


@router.post("", response_model=CalculationResponse)
async def submit_calculation(
    body: CalculationRequest = Depends(read_calculation_request),
    settings: Settings = Depends(get_settings),
):
    """Compute operand1 <operator> operand2."""
    return run_calculation(body, settings)
