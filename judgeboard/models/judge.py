"""Database model for judges."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Judge(SQLModel, table=True):
    """Judge identified by display name."""

    __tablename__ = "judge"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True, max_length=80)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Judge"]
