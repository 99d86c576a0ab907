"""Exercises on lists, dictionaries and counting."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass

_U8_MAX = 255


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every number, building the result in place."""
    doubled = list(values)
    for position, element in enumerate(doubled):
        doubled[position] = element * 2
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every number with a mapping expression."""
    return [element * 2 for element in values]


class Fruit(enum.Enum):
    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every kind of fruit that is not in the basket yet."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded over a set of matches."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        goals_scored = self.goals_scored + scored
        goals_conceded = self.goals_conceded + conceded
        if goals_scored > _U8_MAX or goals_conceded > _U8_MAX:
            raise OverflowError(f"goal count for {self.name} exceeds {_U8_MAX}")
        self.goals_scored = goals_scored
        self.goals_conceded = goals_conceded


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2, goals_1_text, goals_2_text = fields[:4]
        goals_1 = _parse_goals(goals_1_text)
        goals_2 = _parse_goals(goals_2_text)
        scores.setdefault(team_1, Team(team_1)).record(goals_1, goals_2)
        scores.setdefault(team_2, Team(team_2)).record(goals_2, goals_1)
    return scores


class Progress(enum.Enum):
    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a generator."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several maps using generators."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)