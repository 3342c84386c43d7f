from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.schemas import QueryLogRead, UnansweredQuestion

from .. import crud
from ..database import get_db
from ..dependencies import verify_operator_token

router = APIRouter(
    prefix="/operators",
    tags=["operators"],
    dependencies=[Depends(verify_operator_token)],
)


@router.get("/queries", response_model=List[QueryLogRead])
def list_recent_queries(limit: int = Query(50, ge=1, le=500), db: Session = Depends(get_db)):
    return crud.list_recent_queries(db, limit)


@router.get("/unanswered", response_model=List[UnansweredQuestion])
def list_unanswered(limit: int = Query(50, ge=1, le=500), db: Session = Depends(get_db)):
    """
    Questions the FAQ could not answer, for deciding which entries to add next.
    """
    return crud.list_unanswered(db, limit)
