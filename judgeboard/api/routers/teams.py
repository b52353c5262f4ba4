"""Team dashboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services.identity import Identity
from ...services.reports import team_breakdown
from ..deps import require_team

router = APIRouter(prefix="/team", tags=["teams"])


@router.get("/breakdown")
def get_breakdown(
    team: Identity = Depends(require_team), session: Session = Depends(get_session)
):
    """Per-judge scores and comments for the signed-in team."""

    return team_breakdown(session, int(team.id))


__all__ = ["router"]
