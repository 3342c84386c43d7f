from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from shared.enums import MatchOutcome
from shared.schemas import QueryLogCreate, QueryLogRead, UnansweredQuestion

from . import models


def record_query(db: Session, payload: QueryLogCreate) -> QueryLogRead:
    row = models.QueryLog(
        question=payload.question,
        outcome=payload.outcome,
        category=payload.category,
        score=payload.score,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return _to_read(row)


def list_recent_queries(db: Session, limit: int) -> List[QueryLogRead]:
    stmt = select(models.QueryLog).order_by(models.QueryLog.id.desc()).limit(limit)
    rows = db.scalars(stmt).all()
    return [_to_read(row) for row in rows]


def list_unanswered(db: Session, limit: int) -> List[UnansweredQuestion]:
    """
    Unmatched questions grouped case-insensitively, most frequent first.
    """
    normalized = func.lower(func.trim(models.QueryLog.question))
    asked = func.count(models.QueryLog.id)
    last_asked = func.max(models.QueryLog.created_at)
    stmt = (
        select(normalized.label("question"), asked.label("count"), last_asked.label("last_asked_at"))
        .where(models.QueryLog.outcome == MatchOutcome.UNMATCHED)
        .where(func.trim(models.QueryLog.question) != "")
        .group_by(normalized)
        .order_by(asked.desc(), last_asked.desc())
        .limit(limit)
    )
    return [
        UnansweredQuestion(question=row["question"], count=row["count"], last_asked_at=row["last_asked_at"])
        for row in db.execute(stmt).mappings()
    ]


def _to_read(row: models.QueryLog) -> QueryLogRead:
    return QueryLogRead(
        id=row.id,
        question=row.question,
        outcome=row.outcome,
        category=row.category,
        score=row.score,
        created_at=row.created_at,
    )
