"""Database model for judge comments."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Comment(SQLModel, table=True):
    """Free-text feedback; one per (team, judge)."""

    __tablename__ = "comment"
    __table_args__ = (
        UniqueConstraint("team_id", "judge_id", name="uq_comment_team_judge"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    team_id: int = ORMField(foreign_key="team.id", index=True)
    judge_id: int = ORMField(foreign_key="judge.id", index=True)
    comment: str
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Comment"]
