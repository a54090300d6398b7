"""Solutions to the exercises on options, generics and smart pointers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour, or None for an invalid hour."""
    if time_of_day > 23:
        return None
    if time_of_day >= 22:
        return 0
    return 5


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class Cons:
    """A cons list cell; the empty list is None."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons | None:
    return Cons(1, Cons(2))


class Cow:
    """Clone-on-write access to a sequence of integers."""

    def __init__(self, data: Sequence[int], owned: bool = False):
        self.data = data
        self.owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def from_owned(cls, data: list[int]) -> Cow:
        return cls(data, owned=True)

    def to_mut(self) -> list[int]:
        """Return mutable data, copying borrowed data first."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data  # type: ignore[return-value]

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"Cow.{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only when needed."""
    for i, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[i] = -value
    return cow