"""Public leaderboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services.reports import load_leaderboard
from ...services.roster import category_to_dict, list_categories

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(session: Session = Depends(get_session)):
    """Every team with its total score and positional rank."""

    entries = load_leaderboard(session)
    return {"entries": [entry.to_dict() for entry in entries]}


@router.get("/categories")
def get_categories(session: Session = Depends(get_session)):
    """List score categories."""

    return [category_to_dict(category) for category in list_categories(session)]


__all__ = ["router"]
