"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_EMAILS,
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    FRONTEND_ORIGIN,
    FRONTEND_ORIGINS,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    LOG_LEVEL,
    OAUTH_REDIRECT_URL,
    SCORE_CATEGORIES,
    SECRET_KEY,
)
from .database import engine, get_session
from .errors import (
    AccessDeniedError,
    ConflictError,
    JudgingError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from .log import configure_logging
from .time import isoformat_utc, utcnow

__all__ = [
    "ADMIN_EMAILS",
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "FRONTEND_ORIGIN",
    "FRONTEND_ORIGINS",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "LOG_LEVEL",
    "OAUTH_REDIRECT_URL",
    "SCORE_CATEGORIES",
    "SECRET_KEY",
    "AccessDeniedError",
    "ConflictError",
    "JudgingError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
    "configure_logging",
    "engine",
    "get_session",
    "isoformat_utc",
    "utcnow",
]
