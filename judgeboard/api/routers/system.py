"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session

from ...core import get_session
from ...services.roster import category_to_dict, list_categories
from .auth import OAUTH_ENABLED

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz() -> JSONResponse:
    """Kubernetes-style readiness endpoint."""

    return JSONResponse({"ok": True})


@router.get("/config")
def get_config(session: Session = Depends(get_session)) -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "oauth_enabled": OAUTH_ENABLED,
        "categories": [category_to_dict(category) for category in list_categories(session)],
    }


__all__ = ["router"]
