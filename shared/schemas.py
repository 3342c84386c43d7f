from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import MatchOutcome


class FAQQuestion(BaseModel):
    question: str


class FAQAnswer(BaseModel):
    answer: str


class FAQEntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    question: str
    category: str
    answer: str


class QueryLogCreate(BaseModel):
    question: str
    outcome: MatchOutcome
    category: Optional[str] = None
    score: float = Field(..., ge=0.0, le=1.0)


class QueryLogRead(QueryLogCreate):
    id: int
    created_at: datetime


class UnansweredQuestion(BaseModel):
    question: str
    count: int = Field(..., ge=1)
    last_asked_at: datetime
