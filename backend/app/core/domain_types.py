"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BinaryDigits is always canonical when held by a BinaryValue
    - Operator tokens are exactly "+", "&", "|", "*"
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

BinaryDigits = NewType("BinaryDigits", str)     # '0'/'1' only, MSB first


# ─── Enums ───────────────────────────────────────────────────────

class Operator(str, Enum):
    """Calculator operators, keyed by the token the form submits."""
    ADD = "+"
    OR = "|"
    AND = "&"
    MULTIPLY = "*"


class CalculatorView(str, Enum):
    """Which screen the client should render."""
    CALCULATOR = "calculator"
    RESULT = "result"
