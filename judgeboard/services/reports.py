"""Read models for the leaderboard and the judge and team dashboards."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from ..core.errors import NotFoundError
from ..core.time import isoformat_utc
from ..models import Comment, Judge, Score, Team
from .ranking import LeaderboardEntry, compute_leaderboard, judge_totals
from .roster import category_to_dict, list_categories, member_to_dict


def load_leaderboard(session: Session) -> List[LeaderboardEntry]:
    """Fetch every score and team, then rank. Fetch errors propagate."""

    scores = session.exec(select(Score)).all()
    teams = session.exec(select(Team)).all()
    return compute_leaderboard(scores, teams)


def _comment_to_dict(comment: Comment, judge_name: Optional[str] = None) -> Dict[str, Any]:
    out = {
        "id": comment.id,
        "team_id": comment.team_id,
        "judge_id": comment.judge_id,
        "comment": comment.comment,
        "created_at": isoformat_utc(comment.created_at),
        "updated_at": isoformat_utc(comment.updated_at),
    }
    if judge_name is not None:
        out["judge_name"] = judge_name
    return out


def judge_sheet(session: Session) -> Dict[str, Any]:
    """Teams and categories a judge scores against, both ordered by name."""

    teams = session.exec(select(Team).order_by(Team.name)).all()
    return {
        "teams": [member_to_dict(team) for team in teams],
        "categories": [category_to_dict(category) for category in list_categories(session)],
    }


def judge_team_scores(session: Session, team_id: int, judge_id: int) -> Dict[str, Any]:
    """The persisted scores and comment one judge gave one team."""

    team = session.get(Team, team_id)
    if not team:
        raise NotFoundError("Team not found")

    scores = session.exec(
        select(Score).where(Score.team_id == team_id, Score.judge_id == judge_id)
    ).all()
    comment = session.exec(
        select(Comment).where(Comment.team_id == team_id, Comment.judge_id == judge_id)
    ).first()

    return {
        "team": member_to_dict(team),
        "scores": {str(row.category_id): row.score for row in scores},
        "comment": _comment_to_dict(comment) if comment else None,
    }


def team_breakdown(session: Session, team_id: int) -> Dict[str, Any]:
    """Everything a team may see about itself: per-judge scores and comments."""

    team = session.get(Team, team_id)
    if not team:
        raise NotFoundError("Team not found")

    judges = session.exec(select(Judge)).all()
    judge_names = {judge.id: judge.name for judge in judges}
    scores = session.exec(select(Score).where(Score.team_id == team_id)).all()
    comments = session.exec(
        select(Comment)
        .where(Comment.team_id == team_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
    ).all()

    per_judge = judge_totals(scores, judges)
    return {
        "team": member_to_dict(team),
        "categories": [category_to_dict(category) for category in list_categories(session)],
        "judges": [
            {
                "judge_id": item.judge_id,
                "judge_name": item.judge_name,
                "total": item.total,
                "categories": {str(key): value for key, value in item.categories.items()},
            }
            for item in per_judge
        ],
        "total_score": sum(item.total for item in per_judge),
        "judge_count": len(judges),
        "comments": [
            _comment_to_dict(comment, judge_names.get(comment.judge_id, "Unknown judge"))
            for comment in comments
        ],
    }


def all_comments(session: Session) -> List[Dict[str, Any]]:
    """Every comment with team and judge names, newest first."""

    team_names = {team.id: team.name for team in session.exec(select(Team)).all()}
    judge_names = {judge.id: judge.name for judge in session.exec(select(Judge)).all()}
    comments = session.exec(
        select(Comment).order_by(Comment.created_at.desc(), Comment.id.desc())
    ).all()

    out = []
    for comment in comments:
        row = _comment_to_dict(comment, judge_names.get(comment.judge_id, "Unknown judge"))
        row["team_name"] = team_names.get(comment.team_id, "Unknown team")
        out.append(row)
    return out


__all__ = [
    "all_comments",
    "judge_sheet",
    "judge_team_scores",
    "load_leaderboard",
    "team_breakdown",
]
