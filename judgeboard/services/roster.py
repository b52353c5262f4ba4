"""Judge, team and category maintenance."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Tuple, Type, Union

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..core.time import isoformat_utc
from ..models import Comment, Judge, Score, ScoreCategory, Team

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 80

Member = Union[Judge, Team]


def seed_categories(session: Session, categories: Sequence[Tuple[str, int]]) -> int:
    """Insert the configured categories when none exist yet."""

    if session.exec(select(ScoreCategory)).first() is not None:
        return 0
    for name, max_score in categories:
        session.add(ScoreCategory(name=name, max_score=max_score))
    session.commit()
    logger.info("Seeded %d score categories", len(categories))
    return len(categories)


def member_to_dict(member: Member) -> Dict[str, Any]:
    return {
        "id": member.id,
        "name": member.name,
        "created_at": isoformat_utc(member.created_at),
    }


def category_to_dict(category: ScoreCategory) -> Dict[str, Any]:
    return {"id": category.id, "name": category.name, "max_score": category.max_score}


def list_categories(session: Session) -> List[ScoreCategory]:
    return list(session.exec(select(ScoreCategory).order_by(ScoreCategory.name)).all())


def _normalize_name(name: Any, label: str) -> str:
    normalized = name.strip() if isinstance(name, str) else ""
    if not normalized:
        raise ValidationError(f"{label} name is required")
    if len(normalized) > NAME_MAX_LENGTH:
        raise ValidationError(f"{label} name must be {NAME_MAX_LENGTH} characters or less")
    return normalized


def _list(session: Session, model: Type[SQLModel]) -> List[Member]:
    return list(
        session.exec(
            select(model).order_by(model.created_at.desc(), model.id.desc())
        ).all()
    )


def _create(session: Session, model: Type[SQLModel], name: Any, label: str) -> Member:
    normalized = _normalize_name(name, label)
    if session.exec(select(model).where(model.name == normalized)).first():
        raise ConflictError(f"{label} {normalized!r} already exists")

    member = model(name=normalized)
    session.add(member)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(f"{label} {normalized!r} already exists") from exc
    session.refresh(member)
    logger.info("Created %s %r (id=%s)", label.lower(), member.name, member.id)
    return member


def _delete(
    session: Session, model: Type[SQLModel], member_id: int, column: str, label: str
) -> Dict[str, int]:
    member = session.get(model, member_id)
    if not member:
        raise NotFoundError(f"{label} not found")

    scores = session.exec(select(Score).where(getattr(Score, column) == member_id)).all()
    comments = session.exec(select(Comment).where(getattr(Comment, column) == member_id)).all()
    for row in [*scores, *comments]:
        session.delete(row)
    session.delete(member)
    session.commit()

    logger.info(
        "Deleted %s id=%s with %d scores and %d comments",
        label.lower(),
        member_id,
        len(scores),
        len(comments),
    )
    return {"deleted_scores": len(scores), "deleted_comments": len(comments)}


def list_judges(session: Session) -> List[Judge]:
    return _list(session, Judge)


def list_teams(session: Session) -> List[Team]:
    return _list(session, Team)


def create_judge(session: Session, name: Any) -> Judge:
    return _create(session, Judge, name, "Judge")


def create_team(session: Session, name: Any) -> Team:
    return _create(session, Team, name, "Team")


def delete_judge(session: Session, judge_id: int) -> Dict[str, int]:
    """Delete a judge together with the scores and comments it gave."""

    return _delete(session, Judge, judge_id, "judge_id", "Judge")


def delete_team(session: Session, team_id: int) -> Dict[str, int]:
    """Delete a team together with the scores and comments it received."""

    return _delete(session, Team, team_id, "team_id", "Team")


def delete_score(session: Session, score_id: int) -> None:
    score = session.get(Score, score_id)
    if not score:
        raise NotFoundError("Score not found")
    session.delete(score)
    session.commit()


def delete_comment(session: Session, comment_id: int) -> None:
    comment = session.get(Comment, comment_id)
    if not comment:
        raise NotFoundError("Comment not found")
    session.delete(comment)
    session.commit()


__all__ = [
    "NAME_MAX_LENGTH",
    "category_to_dict",
    "create_judge",
    "create_team",
    "delete_comment",
    "delete_judge",
    "delete_score",
    "delete_team",
    "list_categories",
    "list_judges",
    "list_teams",
    "member_to_dict",
    "seed_categories",
]
