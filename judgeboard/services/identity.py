"""Identity resolution and per-request session state.

Admins are verified by the external OAuth provider. Judges and teams sign in
by exact name with no secret; anyone who knows a judge or team name can act
as it. That trust boundary is intentional for this event format.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, MutableMapping, Optional, Type, Union

from sqlmodel import Session, SQLModel, func, select

from ..core.config import ADMIN_EMAILS
from ..core.errors import AccessDeniedError, NotFoundError, ValidationError
from ..core.time import utcnow
from ..models import AdminAccount, Judge, Team

logger = logging.getLogger(__name__)

ROLE_ADMIN = "admin"
ROLE_JUDGE = "judge"
ROLE_TEAM = "team"
ROLES = (ROLE_ADMIN, ROLE_JUDGE, ROLE_TEAM)

SESSION_KEY = "identity"


@dataclass(frozen=True)
class Identity:
    """Who is acting: role plus the id and name of the backing record."""

    role: str
    id: Union[int, str]
    name: str
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "id": self.id, "name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["Identity"]:
        if not isinstance(raw, dict):
            return None
        role = raw.get("role")
        ident = raw.get("id")
        name = raw.get("name")
        if role not in ROLES or ident is None or not isinstance(name, str):
            return None
        return cls(role=role, id=ident, name=name, email=raw.get("email"))


def _resolve_by_name(session: Session, model: Type[SQLModel], name: str, label: str):
    normalized = (name or "").strip() if isinstance(name, str) else ""
    if not normalized:
        raise ValidationError(f"Name required for {label.lower()} login")

    rows = session.exec(select(model).where(model.name == normalized).limit(2)).all()
    if len(rows) != 1:
        raise NotFoundError(f"{label} not found")
    return rows[0]


def resolve_judge(session: Session, name: str) -> Identity:
    judge = _resolve_by_name(session, Judge, name, "Judge")
    return Identity(role=ROLE_JUDGE, id=judge.id, name=judge.name)


def resolve_team(session: Session, name: str) -> Identity:
    team = _resolve_by_name(session, Team, name, "Team")
    return Identity(role=ROLE_TEAM, id=team.id, name=team.name)


def is_admin_email(email: Optional[str]) -> bool:
    return bool(email) and email.strip().lower() in ADMIN_EMAILS


def upsert_admin_account(
    session: Session,
    *,
    email: str,
    sub: str,
    name: Optional[str],
) -> AdminAccount:
    """Create or refresh the account for a verified provider profile."""

    email = (email or "").strip().lower()
    role = ROLE_ADMIN if is_admin_email(email) else "user"

    account = session.exec(
        select(AdminAccount).where(func.lower(AdminAccount.email) == email)
    ).first()
    if account is None:
        account = AdminAccount(email=email, subject=sub)
    elif account.subject != sub:
        logger.warning("Provider subject changed for %s", email)
        account.subject = sub

    account.email = email
    account.role = role
    if name:
        account.name = name
    account.last_login_at = utcnow()
    session.add(account)
    session.commit()
    session.refresh(account)
    return account


def resolve_admin(
    session: Session,
    *,
    email: Optional[str],
    sub: Optional[str],
    name: Optional[str] = None,
) -> Identity:
    """Turn a verified provider profile into an admin identity."""

    if not email or not sub:
        raise ValidationError("Email and subject required for admin login")

    account = upsert_admin_account(session, email=email, sub=sub, name=name)
    if account.role != ROLE_ADMIN:
        raise AccessDeniedError("Account is not an administrator")
    return Identity(
        role=ROLE_ADMIN,
        id=str(account.id),
        name=account.name or "Admin",
        email=account.email,
    )


def identity_still_valid(session: Session, identity: Identity) -> bool:
    """Check that the record behind ``identity`` still exists and qualifies.

    Judge and team ids can be handed out again after a delete, so the stored
    name must match too. Admins must still be listed in ``ADMIN_EMAILS``.
    """

    if identity.role == ROLE_ADMIN:
        try:
            account = session.get(AdminAccount, uuid.UUID(str(identity.id)))
        except ValueError:
            return False
        return account is not None and is_admin_email(account.email)

    model = Judge if identity.role == ROLE_JUDGE else Team
    try:
        record = session.get(model, int(identity.id))
    except (TypeError, ValueError):
        return False
    return record is not None and record.name == identity.name


class IdentitySession:
    """Current identity for one request.

    Rehydrated from durable client storage (the signed session cookie) on first
    access, replaced on sign-in, cleared on sign-out, and invalidated when the
    stored identity no longer resolves in the data store.
    """

    def __init__(self, storage: MutableMapping[str, Any], session: Session) -> None:
        self._storage = storage
        self._session = session
        self._identity: Optional[Identity] = None
        self._loaded = False

    @property
    def identity(self) -> Optional[Identity]:
        if not self._loaded:
            self._loaded = True
            self._identity = self._rehydrate()
        return self._identity

    def _rehydrate(self) -> Optional[Identity]:
        raw = self._storage.get(SESSION_KEY)
        if raw is None:
            return None
        identity = Identity.from_dict(raw)
        if identity is None:
            self._storage.pop(SESSION_KEY, None)
            return None
        if not identity_still_valid(self._session, identity):
            logger.info("Invalidating stale %s session for %s", identity.role, identity.name)
            self._storage.pop(SESSION_KEY, None)
            return None
        return identity

    def sign_in(self, identity: Identity) -> Identity:
        self._storage[SESSION_KEY] = identity.to_dict()
        self._identity = identity
        self._loaded = True
        logger.info("Signed in %s %s", identity.role, identity.name)
        return identity

    def sign_out(self) -> None:
        current = self._identity
        if not self._loaded:
            current = Identity.from_dict(self._storage.get(SESSION_KEY))
        self._storage.pop(SESSION_KEY, None)
        self._identity = None
        self._loaded = True
        if current is not None:
            logger.info("Signed out %s %s", current.role, current.name)


__all__ = [
    "Identity",
    "IdentitySession",
    "ROLES",
    "ROLE_ADMIN",
    "ROLE_JUDGE",
    "ROLE_TEAM",
    "SESSION_KEY",
    "identity_still_valid",
    "is_admin_email",
    "resolve_admin",
    "resolve_judge",
    "resolve_team",
    "upsert_admin_account",
]
