"""Solutions to the exercises on conversions between types."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from enum import Enum


def _parse_unsigned(text: str) -> int:
    """Parse a non-negative decimal integer strictly, like an unsigned parse."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("invalid digit found in string")
    return int(digits)


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Build a person from "name,age", falling back to the default on any problem."""
        if not text:
            return cls.default()
        fields = text.split(",")
        if len(fields) != 2:
            return cls.default()
        name, age_text = fields
        if not name:
            return cls.default()
        try:
            age = _parse_unsigned(age_text)
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Build a person from "name,age"; raise ParsePersonError on any problem."""
        if not text:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        fields = text.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_unsigned(age_text)
        except ValueError as exc:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, exc) from exc
        return cls(name=name, age=age)


class ParsePersonErrorKind(Enum):
    """Why a person could not be parsed."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """A person could not be parsed from text."""

    def __init__(self, kind: ParsePersonErrorKind, cause: ValueError | None = None):
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause


class IntoColorErrorKind(Enum):
    """Why a value could not be turned into a colour."""

    BAD_LEN = "incorrect number of components"
    INT_CONVERSION = "component out of range 0..=255"


class IntoColorError(ValueError):
    """A value could not be turned into a colour."""

    def __init__(self, kind: IntoColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, value: Sequence[int]) -> Color:
        """Build a colour from three integers; raise IntoColorError otherwise."""
        components = tuple(value)
        if len(components) != 3:
            raise IntoColorError(IntoColorErrorKind.BAD_LEN)
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in components):
            raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)


def average(values: Sequence[float]) -> float:
    """Return the arithmetic mean of the values."""
    return sum(values) / len(values)


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of ``arg``."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in ``arg``."""
    return len(arg)


def num_sq(arg: MutableSequence[int]) -> None:
    """Square, in place, the number held in a one-item mutable sequence."""
    if len(arg) != 1:
        raise ValueError("expected exactly one value to square")
    arg[0] = arg[0] * arg[0]