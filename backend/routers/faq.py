import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from faq.matcher import FAQMatcher, MatchResult
from shared.enums import MatchOutcome
from shared.schemas import FAQAnswer, FAQEntryRead, FAQQuestion, QueryLogCreate

from .. import crud
from ..config import Settings
from ..database import get_db
from ..dependencies import get_app_settings, get_faq_matcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/faq", tags=["faq"])


def log_query(db: Session, question: str, result: MatchResult) -> None:
    payload = QueryLogCreate(
        question=question,
        outcome=MatchOutcome.MATCHED if result.matched else MatchOutcome.UNMATCHED,
        category=result.matched_entry.category if result.matched else None,
        score=result.score,
    )
    try:
        crud.record_query(db, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to log FAQ query: %s", exc)


@router.post("", response_model=FAQAnswer)
def ask(
    payload: FAQQuestion,
    matcher: FAQMatcher = Depends(get_faq_matcher),
    settings: Settings = Depends(get_app_settings),
    db: Session = Depends(get_db),
):
    """
    Answer an intern's question from the FAQ. No match is still a 200 with the fallback text.
    """
    result = matcher.match(payload.question)
    if settings.query_log_enabled:
        log_query(db, payload.question, result)
    return FAQAnswer(answer=matcher.render(result))


@router.get("", response_model=List[FAQEntryRead])
def list_entries(
    category: Optional[str] = Query(None, max_length=255),
    matcher: FAQMatcher = Depends(get_faq_matcher),
):
    entries = matcher.entries
    if category:
        wanted = category.strip().casefold()
        entries = [entry for entry in entries if entry.category.casefold() == wanted]
    return [FAQEntryRead.model_validate(entry) for entry in entries]
