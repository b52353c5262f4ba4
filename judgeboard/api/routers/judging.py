"""Judge dashboard endpoints: score sheets and submissions."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session

from ...core import get_session
from ...services.identity import Identity
from ...services.reports import judge_sheet, judge_team_scores
from ...services.scoring import submit_scores
from ..deps import require_judge

router = APIRouter(prefix="/judge", tags=["judging"])


@router.get("/teams")
def list_teams_to_score(
    judge: Identity = Depends(require_judge), session: Session = Depends(get_session)
):
    """Teams and categories available to the signed-in judge."""

    return {"judge": judge.to_dict(), **judge_sheet(session)}


@router.get("/teams/{team_id}")
def get_team_scores(
    team_id: int,
    judge: Identity = Depends(require_judge),
    session: Session = Depends(get_session),
):
    """The signed-in judge's current scores and comment for one team."""

    return judge_team_scores(session, team_id, int(judge.id))


@router.post("/teams/{team_id}/scores")
def submit_team_scores(
    team_id: int,
    body: Dict[str, Any] = Body(...),
    judge: Identity = Depends(require_judge),
    session: Session = Depends(get_session),
):
    """Upsert scores and the comment, then return what is actually stored."""

    result = submit_scores(
        session,
        team_id=team_id,
        judge_id=int(judge.id),
        scores=body.get("scores") or {},
        comment=body.get("comment"),
    )
    payload = {
        "result": result.to_dict(),
        **judge_team_scores(session, team_id, int(judge.id)),
    }
    return JSONResponse(payload, status_code=200 if result.ok else 502)


__all__ = ["router"]
