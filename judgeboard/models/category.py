"""Database model for scoring categories."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ScoreCategory(SQLModel, table=True):
    """Named scoring dimension; scores range from 0 to ``max_score``."""

    __tablename__ = "score_category"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    max_score: int = 10
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["ScoreCategory"]
