"""Score aggregation and leaderboard ranking."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

from ..models import Judge, Score, Team


@dataclass(frozen=True)
class LeaderboardEntry:
    """Derived leaderboard row; never persisted."""

    team_id: int
    team_name: str
    total_score: int
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class JudgeTotal:
    judge_id: int
    judge_name: str
    total: int = 0
    categories: Dict[int, int] = field(default_factory=dict)


def team_totals(scores: Iterable[Score]) -> Dict[int, int]:
    """Sum score values per team id."""

    totals: Dict[int, int] = defaultdict(int)
    for row in scores:
        totals[row.team_id] += int(row.score)
    return dict(totals)


def _ranking_key(entry: LeaderboardEntry) -> tuple:
    # Ties on total fall back to name so the order never depends on fetch order.
    return (-entry.total_score, entry.team_name.casefold(), entry.team_name, entry.team_id)


def compute_leaderboard(
    scores: Iterable[Score], teams: Iterable[Team]
) -> List[LeaderboardEntry]:
    """Rank every team by its total score.

    Teams without scores get a total of 0. Scores pointing at teams outside
    ``teams`` are ignored. Ranks are positional: equal totals still receive
    distinct consecutive ranks, ordered by team name.
    """

    totals = team_totals(scores)
    unranked = [
        LeaderboardEntry(
            team_id=team.id,
            team_name=team.name,
            total_score=totals.get(team.id, 0),
            rank=0,
        )
        for team in teams
    ]
    ordered = sorted(unranked, key=_ranking_key)
    return [
        LeaderboardEntry(
            team_id=entry.team_id,
            team_name=entry.team_name,
            total_score=entry.total_score,
            rank=position,
        )
        for position, entry in enumerate(ordered, start=1)
    ]


def judge_totals(scores: Iterable[Score], judges: Sequence[Judge]) -> List[JudgeTotal]:
    """Group one team's scores per judge, keeping only judges that scored."""

    names = {judge.id: judge.name for judge in judges}
    grouped: Dict[int, JudgeTotal] = {}
    for row in scores:
        bucket = grouped.get(row.judge_id)
        if bucket is None:
            bucket = JudgeTotal(
                judge_id=row.judge_id,
                judge_name=names.get(row.judge_id, "Unknown judge"),
            )
            grouped[row.judge_id] = bucket
        bucket.total += int(row.score)
        bucket.categories[row.category_id] = int(row.score)
    return sorted(grouped.values(), key=lambda item: (item.judge_name.casefold(), item.judge_id))


__all__ = [
    "JudgeTotal",
    "LeaderboardEntry",
    "compute_leaderboard",
    "judge_totals",
    "team_totals",
]
