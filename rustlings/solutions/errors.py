"""Solutions to the exercises on error handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed decimal integer of the given width, strictly."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def _check_i32(value: int) -> int:
    if not -(2**31) <= value <= 2**31 - 1:
        raise OverflowError("attempt to compute a value outside the 32-bit range")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of buying the typed quantity of items, fee included."""
    qty = _parse_int(item_quantity, 32)
    return _check_i32(_check_i32(qty * _COST_PER_ITEM) + _PROCESSING_FEE)


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Return the tokens left after buying; raise ValueError if unaffordable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""

    class Reason(Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, reason: CreationError.Reason):
        super().__init__(reason.value)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason is other.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Reason.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Reason.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive non-zero integer."""

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause

    @property
    def is_creation(self) -> bool:
        """True when the text was a number but not a positive one."""
        return isinstance(self.cause, CreationError)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc