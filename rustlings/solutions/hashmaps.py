"""Solutions to the exercises on hash maps: fruit baskets and score tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    basket: dict[str, int] = {}
    basket["banana"] = 2
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


class Fruit(Enum):
    """Kinds of fruit for the cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit that is missing, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text or not all("0" <= ch <= "9" for ch in text.lstrip("+")) or text == "+":
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return goals


def _add(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError(f"goal tally of {team.name} overflowed")


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from "t1,t2,g1,g2" lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        _add(team_1, team_1_score, team_2_score)
        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        _add(team_2, team_2_score, team_1_score)
    return scores