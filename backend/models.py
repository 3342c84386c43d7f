from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

from shared.enums import MatchOutcome

Base = declarative_base()


class QueryLog(Base):
    __tablename__ = "faq_queries"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    outcome = Column(Enum(MatchOutcome), nullable=False, index=True)
    category = Column(String(255), nullable=True)
    score = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
