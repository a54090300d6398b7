import re

import pytest

from rustlings.solutions.errors import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_pos_nonzero,
    spend_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError, match=re.escape("cannot parse integer from empty string")):
        total_cost("")


@pytest.mark.parametrize("text, expected", [("+3", 16), ("-2", -9), ("0", 1)])
def test_item_quantity_signs(text, expected):
    assert total_cost(text) == expected


def test_item_quantity_too_large():
    with pytest.raises(ValueError, match="number too large to fit in target type"):
        total_cost("2147483648")


def test_spend_tokens():
    assert spend_tokens(100, "8") == 59


def test_spend_tokens_cannot_afford():
    with pytest.raises(ValueError, match="afford"):
        spend_tokens(5, "8")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.reason is CreationError.Reason.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.reason is CreationError.Reason.ZERO


def test_creation_error_display():
    assert str(CreationError(CreationError.Reason.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationError.Reason.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not info.value.is_creation
    assert str(info.value) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.cause == CreationError(CreationError.Reason.NEGATIVE)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.cause == CreationError(CreationError.Reason.ZERO)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)