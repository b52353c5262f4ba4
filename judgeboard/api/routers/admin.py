"""Admin roster and moderation endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import roster
from ...services.reports import all_comments
from ..deps import require_admin

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/judges")
def list_judges(session: Session = Depends(get_session)):
    """List judges, newest first."""

    return [roster.member_to_dict(judge) for judge in roster.list_judges(session)]


@router.post("/judges", status_code=201)
def create_judge(body: Dict[str, Any] = Body(...), session: Session = Depends(get_session)):
    """Add a judge by name."""

    return roster.member_to_dict(roster.create_judge(session, body.get("name")))


@router.delete("/judges/{judge_id}")
def delete_judge(judge_id: int, session: Session = Depends(get_session)):
    """Delete a judge along with the scores and comments it gave."""

    counts = roster.delete_judge(session, judge_id)
    return {"ok": True, "deleted_judge": judge_id, **counts}


@router.get("/teams")
def list_teams(session: Session = Depends(get_session)):
    """List teams, newest first."""

    return [roster.member_to_dict(team) for team in roster.list_teams(session)]


@router.post("/teams", status_code=201)
def create_team(body: Dict[str, Any] = Body(...), session: Session = Depends(get_session)):
    """Add a team by name."""

    return roster.member_to_dict(roster.create_team(session, body.get("name")))


@router.delete("/teams/{team_id}")
def delete_team(team_id: int, session: Session = Depends(get_session)):
    """Delete a team along with the scores and comments it received."""

    counts = roster.delete_team(session, team_id)
    return {"ok": True, "deleted_team": team_id, **counts}


@router.get("/comments")
def list_comments(session: Session = Depends(get_session)):
    return all_comments(session)


@router.delete("/scores/{score_id}")
def delete_score(score_id: int, session: Session = Depends(get_session)):
    roster.delete_score(session, score_id)
    return {"ok": True, "deleted_score": score_id}


@router.delete("/comments/{comment_id}")
def delete_comment(comment_id: int, session: Session = Depends(get_session)):
    roster.delete_comment(session, comment_id)
    return {"ok": True, "deleted_comment": comment_id}


__all__ = ["router"]
