"""Aggregate API routers."""

from fastapi import APIRouter

from .admin import router as admin_router
from .auth import router as auth_router
from .judging import router as judging_router
from .leaderboard import router as leaderboard_router
from .system import router as system_router
from .teams import router as teams_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    leaderboard_router,
    auth_router,
    admin_router,
    judging_router,
    teams_router,
)

__all__ = ["ALL_ROUTERS"]
