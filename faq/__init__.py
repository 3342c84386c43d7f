"""
FAQ matching for the internship portal chatbot.
"""

from .knowledge_base import DEFAULT_FAQS, KnowledgeBaseError, get_knowledge_base, load_knowledge_base
from .matcher import DEFAULT_CATEGORY_WEIGHT, DEFAULT_THRESHOLD, FAQEntry, FAQMatcher, MatchResult

__all__ = [
    "DEFAULT_CATEGORY_WEIGHT",
    "DEFAULT_FAQS",
    "DEFAULT_THRESHOLD",
    "FAQEntry",
    "FAQMatcher",
    "KnowledgeBaseError",
    "MatchResult",
    "get_knowledge_base",
    "load_knowledge_base",
]
