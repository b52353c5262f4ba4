"""Database model for administrator accounts."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class AdminAccount(SQLModel, table=True):
    """Account whose email was verified by the identity provider.

    ``role`` records what the last sign-in was granted; current authority is
    always re-derived from ``ADMIN_EMAILS``.
    """

    __tablename__ = "admin_account"

    id: uuid.UUID = ORMField(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    email: str = ORMField(index=True, unique=True)
    name: Optional[str] = None
    subject: str
    role: str = ORMField(default="user")
    last_login_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["AdminAccount"]
