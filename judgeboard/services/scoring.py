"""Score submission: validation gate and idempotent upserts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from ..core.errors import NotFoundError, ValidationError
from ..core.time import utcnow
from ..models import Comment, Judge, Score, ScoreCategory, Team

logger = logging.getLogger(__name__)

COMMENT_KEY = "comment"


@dataclass
class SubmissionResult:
    """Outcome of each write attempted for one (team, judge) submission."""

    team_id: int
    judge_id: int
    applied: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "applied": list(self.applied),
            "unchanged": list(self.unchanged),
            "failed": dict(self.failed),
        }


def category_key(category_id: int) -> str:
    return f"category:{category_id}"


def coerce_score(value: Any, category_name: str) -> Optional[int]:
    """Return ``value`` as an int, ``None`` when not provided."""

    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Score for {category_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"Score for {category_name} must be an integer")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValidationError(f"Score for {category_name} must be an integer") from exc
    raise ValidationError(f"Score for {category_name} must be an integer")


def validate_scores(
    raw: Mapping[Any, Any], categories: Iterable[ScoreCategory]
) -> Dict[int, int]:
    """Check a ``{category_id: score}`` payload against the known categories.

    Every key must name an existing category and every provided value must be an
    integer within ``[0, max_score]``. Any violation rejects the whole payload.
    """

    if not isinstance(raw, Mapping):
        raise ValidationError("Scores must be an object keyed by category id")

    by_id = {category.id: category for category in categories}
    cleaned: Dict[int, int] = {}
    for key, value in raw.items():
        try:
            category_id = int(key)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Unknown category: {key!r}") from exc
        category = by_id.get(category_id)
        if category is None:
            raise ValidationError(f"Unknown category: {key!r}")

        score = coerce_score(value, category.name)
        if score is None:
            continue
        if not 0 <= score <= category.max_score:
            raise ValidationError(
                f"Score for {category.name} must be between 0 and {category.max_score}"
            )
        cleaned[category_id] = score
    return cleaned


def _upsert(
    session: Session,
    model: Type[SQLModel],
    key: Dict[str, Any],
    values: Dict[str, Any],
) -> bool:
    """Insert or overwrite the row identified by ``key``.

    Returns ``False`` when the stored row already holds ``values``. A unique
    violation from a concurrent insert is resolved by overwriting that row.
    """

    statement = select(model).filter_by(**key)
    row = session.exec(statement).first()
    if row is None:
        session.add(model(**key, **values))
        try:
            session.commit()
            return True
        except IntegrityError:
            session.rollback()
            row = session.exec(statement).first()
            if row is None:
                raise

    if all(getattr(row, name) == value for name, value in values.items()):
        return False

    for name, value in values.items():
        setattr(row, name, value)
    row.updated_at = utcnow()
    session.add(row)
    session.commit()
    return True


def upsert_score(
    session: Session, *, team_id: int, judge_id: int, category_id: int, value: int
) -> bool:
    return _upsert(
        session,
        Score,
        {"team_id": team_id, "judge_id": judge_id, "category_id": category_id},
        {"score": value},
    )


def upsert_comment(session: Session, *, team_id: int, judge_id: int, text: str) -> bool:
    return _upsert(
        session,
        Comment,
        {"team_id": team_id, "judge_id": judge_id},
        {"comment": text},
    )


def _describe(exc: SQLAlchemyError) -> str:
    return str(getattr(exc, "orig", None) or exc)


def submit_scores(
    session: Session,
    *,
    team_id: int,
    judge_id: int,
    scores: Mapping[Any, Any],
    comment: Optional[str] = None,
) -> SubmissionResult:
    """Persist one judge's scores and comment for one team.

    The payload is validated before anything is written. Each write then
    commits on its own; a failed write is recorded and the remaining writes
    are still attempted, so callers should re-read to reconcile.
    """

    if session.get(Team, team_id) is None:
        raise NotFoundError("Team not found")
    if session.get(Judge, judge_id) is None:
        raise NotFoundError("Judge not found")
    if comment is not None and not isinstance(comment, str):
        raise ValidationError("Comment must be a string")

    categories = session.exec(select(ScoreCategory)).all()
    cleaned = validate_scores(scores if scores is not None else {}, categories)
    text = (comment or "").strip()

    result = SubmissionResult(team_id=team_id, judge_id=judge_id)

    for category_id in sorted(cleaned):
        label = category_key(category_id)
        try:
            changed = upsert_score(
                session,
                team_id=team_id,
                judge_id=judge_id,
                category_id=category_id,
                value=cleaned[category_id],
            )
        except SQLAlchemyError as exc:
            session.rollback()
            logger.warning(
                "Score write failed team=%s judge=%s category=%s: %s",
                team_id,
                judge_id,
                category_id,
                exc,
            )
            result.failed[label] = _describe(exc)
            continue
        (result.applied if changed else result.unchanged).append(label)

    if text:
        try:
            changed = upsert_comment(session, team_id=team_id, judge_id=judge_id, text=text)
        except SQLAlchemyError as exc:
            session.rollback()
            logger.warning(
                "Comment write failed team=%s judge=%s: %s", team_id, judge_id, exc
            )
            result.failed[COMMENT_KEY] = _describe(exc)
        else:
            (result.applied if changed else result.unchanged).append(COMMENT_KEY)

    logger.info(
        "Submission team=%s judge=%s applied=%d unchanged=%d failed=%d",
        team_id,
        judge_id,
        len(result.applied),
        len(result.unchanged),
        len(result.failed),
    )
    return result


__all__ = [
    "COMMENT_KEY",
    "SubmissionResult",
    "category_key",
    "coerce_score",
    "submit_scores",
    "upsert_comment",
    "upsert_score",
    "validate_scores",
]
