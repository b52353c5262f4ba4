"""Database model for per-category scores."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Score(SQLModel, table=True):
    """One judge's score for one team in one category."""

    __tablename__ = "score"
    __table_args__ = (
        UniqueConstraint("team_id", "judge_id", "category_id", name="uq_score_team_judge_category"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    team_id: int = ORMField(foreign_key="team.id", index=True)
    judge_id: int = ORMField(foreign_key="judge.id", index=True)
    category_id: int = ORMField(foreign_key="score_category.id", index=True)
    score: int
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Score"]
