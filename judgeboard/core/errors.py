"""Error taxonomy surfaced to API callers."""

from __future__ import annotations


class JudgingError(Exception):
    """Base class for errors reported directly to the user."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(JudgingError):
    """A name or id lookup found no matching row."""

    status_code = 404


class ValidationError(JudgingError):
    """Missing credential fields or a malformed score payload."""

    status_code = 400


class ConflictError(JudgingError):
    """A write would violate a uniqueness rule, e.g. a duplicate name."""

    status_code = 409


class AccessDeniedError(JudgingError):
    """The identity is valid but not allowed to act in this role."""

    status_code = 403


class UpstreamError(JudgingError):
    """The identity provider answered the OAuth exchange with an error.

    Data store failures are not wrapped in this class; they surface as
    ``SQLAlchemyError`` and are rendered as 503.
    """

    status_code = 502


__all__ = [
    "AccessDeniedError",
    "ConflictError",
    "JudgingError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
]
