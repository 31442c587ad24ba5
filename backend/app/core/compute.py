"""Operator Dispatch — maps operator tokens onto BinaryValue arithmetic.

Invariants:
    - parse_operator is the only place a raw token becomes an Operator
    - compute() is total over Operator; unknown tokens never reach it
    - calculate() is PURE: no logging, no IO

Design Decisions:
    - Dispatch table over if/elif chain: one entry per Operator member
"""

from typing import Callable

from app.core.binary_value import (
    BinaryValue,
    add,
    bitwise_and,
    bitwise_or,
    format_value,
    multiply,
    parse,
    parse_strict,
)
from app.core.domain_types import Operator
from app.core.errors import UnknownOperatorError

BinaryOp = Callable[[BinaryValue, BinaryValue], BinaryValue]

OPERATIONS: dict[Operator, BinaryOp] = {
    Operator.ADD: add,
    Operator.OR: bitwise_or,
    Operator.AND: bitwise_and,
    Operator.MULTIPLY: multiply,
}


def parse_operator(token: str) -> Operator:
    """Validate a raw token. Raises UnknownOperatorError."""
    try:
        return Operator(token)
    except ValueError:
        raise UnknownOperatorError(token) from None


def compute(op: Operator | str, a: BinaryValue, b: BinaryValue) -> BinaryValue:
    return OPERATIONS[parse_operator(op)](a, b)


def calculate(
    operand1: str, operator: str, operand2: str, strict: bool = False,
) -> str:
    """Parse both operands, apply operator, return canonical digits."""
    op = parse_operator(operator)
    if strict:
        a = parse_strict(operand1, field="operand1")
        b = parse_strict(operand2, field="operand2")
    else:
        a, b = parse(operand1), parse(operand2)
    return format_value(compute(op, a, b))
