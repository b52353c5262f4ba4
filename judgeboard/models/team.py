"""Database model for competing teams."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Team(SQLModel, table=True):
    """Team identified by display name."""

    __tablename__ = "team"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True, max_length=80)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Team"]
