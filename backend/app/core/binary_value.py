"""Binary Value — canonical unsigned binary numbers and digit-wise arithmetic.

Invariants:
    - BinaryValue.digits contains only '0'/'1', MSB first
    - No leading zeros unless the value is exactly zero ("0")
    - Instances are immutable; every operation returns a new canonical value
    - parse() never raises: any non-binary character yields canonical zero

Design Decisions:
    - Digits kept as str, not int: arbitrary length with no width limit, and the
      digit-by-digit algorithms read directly off the string
    - Operations build a raw digit list; construction (any path) canonicalizes once
      (factory over mutable buffer)
    - parse_strict() offered alongside the lenient parse() for callers that
      need to reject malformed input
"""

from dataclasses import dataclass

from app.core.domain_types import BinaryDigits
from app.core.errors import InvalidBinaryError

BINARY_DIGITS = frozenset("01")
ZERO_DIGITS = BinaryDigits("0")


def _canonicalize(raw: str) -> BinaryDigits:
    """Lenient sanitize: non-binary → "0", else strip leading zeros."""
    if any(ch not in BINARY_DIGITS for ch in raw):
        return ZERO_DIGITS
    return BinaryDigits(raw.lstrip("0") or "0")


@dataclass(frozen=True)
class BinaryValue:
    """Unsigned binary integer in canonical form."""

    digits: BinaryDigits = ZERO_DIGITS

    def __post_init__(self):
        # frozen: bypass __setattr__ to store the canonical digits
        object.__setattr__(self, "digits", _canonicalize(self.digits))

    @classmethod
    def from_string(cls, raw: str) -> "BinaryValue":
        return cls(BinaryDigits(raw))

    @property
    def is_zero(self) -> bool:
        return self.digits == ZERO_DIGITS

    def bit(self, position: int) -> str:
        """Bit at `position` counted from the LSB; '0' past the MSB."""
        if position >= len(self.digits):
            return "0"
        return self.digits[-1 - position]

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return self.digits


ZERO = BinaryValue()
ONE = BinaryValue(BinaryDigits("1"))


# ─── Boundary ────────────────────────────────────────────────────

def parse(text: str) -> BinaryValue:
    """Lenient parse. Invalid text becomes zero, never an error."""
    return BinaryValue.from_string(text)


def parse_strict(text: str, field: str | None = None) -> BinaryValue:
    """Strict parse. Rejects empty input and any non-binary character."""
    if not text:
        raise InvalidBinaryError(text, "value is empty", field=field)
    for index, ch in enumerate(text):
        if ch not in BINARY_DIGITS:
            raise InvalidBinaryError(
                text, f"invalid digit {ch!r} at position {index}", field=field,
            )
    return BinaryValue.from_string(text)


def format_value(value: BinaryValue) -> str:
    return value.digits


# ─── Arithmetic ──────────────────────────────────────────────────

def add(a: BinaryValue, b: BinaryValue) -> BinaryValue:
    """Schoolbook addition, LSB to MSB with carry propagation."""
    result: list[str] = []
    carry = 0
    position = 0
    while position < len(a) or position < len(b) or carry:
        total = int(a.bit(position)) + int(b.bit(position)) + carry
        result.append("1" if total % 2 else "0")
        carry = total // 2
        position += 1
    return BinaryValue.from_string("".join(reversed(result)))


def _combine(a: BinaryValue, b: BinaryValue, both: bool) -> BinaryValue:
    """Right-aligned bitwise AND (both=True) or OR (both=False)."""
    result: list[str] = []
    for position in range(max(len(a), len(b))):
        x = a.bit(position) == "1"
        y = b.bit(position) == "1"
        hit = (x and y) if both else (x or y)
        result.append("1" if hit else "0")
    return BinaryValue.from_string("".join(reversed(result)))


def bitwise_or(a: BinaryValue, b: BinaryValue) -> BinaryValue:
    return _combine(a, b, both=False)


def bitwise_and(a: BinaryValue, b: BinaryValue) -> BinaryValue:
    return _combine(a, b, both=True)


def multiply(a: BinaryValue, b: BinaryValue) -> BinaryValue:
    """Shift-and-add over the bits of b, LSB first."""
    result = ZERO
    for shift in range(len(b)):
        if b.bit(shift) == "1":
            result = add(result, BinaryValue.from_string(a.digits + "0" * shift))
    return result
