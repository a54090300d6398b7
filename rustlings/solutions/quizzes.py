"""Solutions to the quizzes: apple prices, a string machine and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


def calculate_price_of_apples(apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if apples <= 40:
        return 2 * apples
    return apples


class Command(Enum):
    """A transformation without arguments."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string ``times`` times."""

    times: int


def _apply(text: str, command: Command | Append) -> str:
    match command:
        case Command.UPPERCASE:
            return text.upper()
        case Command.TRIM:
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(inputs: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in inputs]


@dataclass
class ReportCard:
    """A report card whose grade is numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )