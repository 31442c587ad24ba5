"""Binary Value — construction, canonical form, and the four operations.

Tests cover:
    - parse strips leading zeros, keeps a single "0", falls back to zero on bad input
    - parse_strict rejects empty and non-binary text with field context
    - add / bitwise_or / bitwise_and / multiply on the calculator's known scenarios
    - commutativity and identity elements over a sample of values
    - values are immutable and compare by digits
"""

import dataclasses

import pytest

from app.core.binary_value import (
    ONE,
    ZERO,
    BinaryValue,
    add,
    bitwise_and,
    bitwise_or,
    format_value,
    multiply,
    parse,
    parse_strict,
)
from app.core.errors import InvalidBinaryError

SAMPLES = ["0", "1", "10", "11", "111", "1010", "1101", "100000001", "1" * 40]


def digits(value: BinaryValue) -> str:
    return format_value(value)


# ─── parse ───────────────────────────────────────────────────────

def test_parse_keeps_canonical_input():
    assert digits(parse("1011")) == "1011"


def test_parse_strips_leading_zeros():
    assert digits(parse("0010")) == "10"


def test_parse_empty_is_zero():
    assert digits(parse("")) == "0"


def test_parse_all_zeros_collapses_to_single_zero():
    assert digits(parse("000")) == "0"


def test_parse_invalid_character_falls_back_to_zero():
    assert parse("102") == parse("0")
    assert parse("abc") == ZERO
    assert parse(" 101") == ZERO
    assert parse("-1") == ZERO


def test_parse_is_idempotent_on_formatted_value():
    for raw in SAMPLES + ["0001", "", "xyz"]:
        value = parse(raw)
        assert parse(format_value(value)) == value


def test_str_matches_format_value():
    assert str(parse("00110")) == "110"


def test_default_value_is_zero():
    assert BinaryValue() == ZERO
    assert ZERO.is_zero
    assert not ONE.is_zero


def test_value_is_immutable():
    value = parse("101")
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.digits = "111"


def test_constructor_strips_leading_zeros():
    value = BinaryValue("0010")
    assert value == parse("10")
    assert digits(value) == "10"
    assert hash(value) == hash(parse("10"))


def test_constructor_falls_back_to_zero_on_invalid_digit():
    assert BinaryValue("2") == ZERO
    assert BinaryValue("1a1") == ZERO


def test_constructor_input_obeys_zero_fallback_in_arithmetic():
    assert digits(add(BinaryValue("2"), parse("1"))) == "1"
    assert digits(multiply(BinaryValue("0011"), parse("11"))) == "1001"


def test_equal_values_hash_equal():
    assert hash(parse("0101")) == hash(parse("101"))
    assert len({parse("1"), parse("01"), parse("001")}) == 1


def test_bit_counts_from_lsb_and_pads_with_zero():
    value = parse("110")
    assert value.bit(0) == "0"
    assert value.bit(1) == "1"
    assert value.bit(2) == "1"
    assert value.bit(3) == "0"
    assert value.bit(100) == "0"


# ─── parse_strict ────────────────────────────────────────────────

def test_parse_strict_accepts_binary_and_canonicalizes():
    assert digits(parse_strict("00101")) == "101"


def test_parse_strict_rejects_empty():
    with pytest.raises(InvalidBinaryError) as exc_info:
        parse_strict("")
    assert exc_info.value.code == "INVALID_BINARY"
    assert exc_info.value.http_status == 400


def test_parse_strict_reports_offending_digit_and_field():
    with pytest.raises(InvalidBinaryError) as exc_info:
        parse_strict("1021", field="operand2")
    assert "'2'" in exc_info.value.message
    assert "position 2" in exc_info.value.message
    assert exc_info.value.context.field == "operand2"


# ─── add ─────────────────────────────────────────────────────────

def test_add_with_carry_out():
    assert digits(add(parse("111"), parse("111"))) == "1110"


def test_add_different_lengths():
    assert digits(add(parse("1"), parse("1000"))) == "1001"


def test_add_carry_ripples_through_all_bits():
    assert digits(add(parse("1111"), ONE)) == "10000"


def test_add_zeros():
    assert digits(add(ZERO, ZERO)) == "0"


def test_add_is_commutative():
    for a in SAMPLES:
        for b in SAMPLES:
            assert add(parse(a), parse(b)) == add(parse(b), parse(a))


def test_add_zero_is_identity():
    for a in SAMPLES:
        assert add(parse(a), ZERO) == parse(a)


def test_add_handles_values_beyond_64_bits():
    big = parse("1" * 100)
    assert digits(add(big, ONE)) == "1" + "0" * 100


# ─── bitwise_or / bitwise_and ────────────────────────────────────

def test_or_equal_operands():
    assert digits(bitwise_or(parse("111"), parse("111"))) == "111"


def test_or_aligns_at_lsb():
    assert digits(bitwise_or(parse("11"), parse("1010"))) == "1011"


def test_and_equal_operands():
    assert digits(bitwise_and(parse("111"), parse("111"))) == "111"


def test_and_aligns_at_lsb():
    assert digits(bitwise_and(parse("11"), parse("1010"))) == "10"


def test_and_strips_leading_zeros_from_result():
    assert digits(bitwise_and(parse("1000"), parse("0111"))) == "0"
    assert digits(bitwise_and(parse("1100"), parse("0110"))) == "100"


def test_bitwise_ops_are_commutative():
    for a in SAMPLES:
        for b in SAMPLES:
            x, y = parse(a), parse(b)
            assert bitwise_or(x, y) == bitwise_or(y, x)
            assert bitwise_and(x, y) == bitwise_and(y, x)


def test_bitwise_identities_with_zero():
    for a in SAMPLES:
        assert bitwise_or(parse(a), ZERO) == parse(a)
        assert bitwise_and(parse(a), ZERO) == ZERO


# ─── multiply ────────────────────────────────────────────────────

def test_multiply_ten_by_five():
    assert digits(multiply(parse("1010"), parse("101"))) == "110010"


def test_multiply_thirteen_by_eleven():
    assert digits(multiply(parse("1101"), parse("1011"))) == "10001111"


def test_multiply_is_commutative():
    for a in SAMPLES:
        for b in SAMPLES:
            assert multiply(parse(a), parse(b)) == multiply(parse(b), parse(a))


def test_multiply_identities():
    for a in SAMPLES:
        assert multiply(parse(a), ZERO) == ZERO
        assert multiply(parse(a), ONE) == parse(a)


def test_multiply_by_power_of_two_shifts_left():
    assert digits(multiply(parse("101"), parse("1000"))) == "101000"


def test_operations_return_new_values():
    a, b = parse("11"), parse("1")
    add(a, b)
    multiply(a, b)
    assert digits(a) == "11"
    assert digits(b) == "1"
