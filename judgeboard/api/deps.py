"""Request-scoped dependencies shared by the routers."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from ..core import get_session
from ..services.identity import (
    ROLE_ADMIN,
    ROLE_JUDGE,
    ROLE_TEAM,
    Identity,
    IdentitySession,
)


def get_identity_session(
    request: Request, session: Session = Depends(get_session)
) -> IdentitySession:
    """Session state for the current request, backed by the session cookie."""

    return IdentitySession(request.session, session)


def current_identity(
    identity_session: IdentitySession = Depends(get_identity_session),
) -> Optional[Identity]:
    return identity_session.identity


def _require_role(identity: Optional[Identity], role: str) -> Identity:
    if identity is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    if identity.role != role:
        raise HTTPException(status_code=403, detail=f"{role.capitalize()} access required")
    return identity


def require_admin(identity: Optional[Identity] = Depends(current_identity)) -> Identity:
    return _require_role(identity, ROLE_ADMIN)


def require_judge(identity: Optional[Identity] = Depends(current_identity)) -> Identity:
    return _require_role(identity, ROLE_JUDGE)


def require_team(identity: Optional[Identity] = Depends(current_identity)) -> Identity:
    return _require_role(identity, ROLE_TEAM)


__all__ = [
    "current_identity",
    "get_identity_session",
    "require_admin",
    "require_judge",
    "require_team",
]
