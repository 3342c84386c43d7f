import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process, utils

from . import templates

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.4
DEFAULT_CATEGORY_WEIGHT = 0.7
DEFAULT_KEYWORD_WEIGHT = 0.8
# per-token similarity a query word needs to count as a keyword word; tolerates one typo in long words
KEYWORD_TOKEN_CUTOFF = 85

Scorer = Callable[[str, str], float]


@dataclass(frozen=True)
class FAQEntry:
    question: str
    category: str
    answer: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MatchResult:
    matched_entry: Optional[FAQEntry]
    score: float

    @property
    def matched(self) -> bool:
        return self.matched_entry is not None


def keyword_similarity(query_tokens: Sequence[str], keyword_tokens: Sequence[str]) -> float:
    """Share of the keyword's words found in the query, 0-100."""
    if not query_tokens or not keyword_tokens:
        return 0.0
    hits = sum(
        1
        for token in keyword_tokens
        if process.extractOne(token, query_tokens, scorer=fuzz.ratio, score_cutoff=KEYWORD_TOKEN_CUTOFF)
    )
    return 100 * hits / len(keyword_tokens)


class FAQMatcher:
    """
    Fuzzy lookup of canned answers over a fixed knowledge base.

    The index is built once in the constructor and never changes, so one
    instance can be shared by any number of concurrent requests.

    Scores are distances on a 0.0 (exact) to 1.0 (no similarity) scale. Each
    entry is scored on its question (``scorer``, token-sort ratio by default),
    its category and its keywords, and keeps the lowest distance. Category and
    keyword similarities are scaled down by their weights so only a close
    question can reach 0.0; a keyword found word for word in the query scores
    ``1 - keyword_weight``. Equal scores keep knowledge-base order.
    """

    def __init__(
        self,
        entries: Sequence[FAQEntry],
        threshold: float = DEFAULT_THRESHOLD,
        category_weight: float = DEFAULT_CATEGORY_WEIGHT,
        keyword_weight: float = DEFAULT_KEYWORD_WEIGHT,
        fallback: Optional[str] = None,
        scorer: Scorer = fuzz.token_sort_ratio,
    ):
        for name, value in (
            ("threshold", threshold),
            ("category_weight", category_weight),
            ("keyword_weight", keyword_weight),
        ):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
        self.threshold = threshold
        self.category_weight = category_weight
        self.keyword_weight = keyword_weight
        self.fallback = fallback or templates.fallback_message()
        self._scorer = scorer
        self._entries: Tuple[FAQEntry, ...] = tuple(entries)
        self._index = tuple(
            (
                utils.default_process(entry.question),
                utils.default_process(entry.category),
                tuple(
                    tokens
                    for tokens in (tuple(utils.default_process(keyword).split()) for keyword in entry.keywords)
                    if tokens
                ),
            )
            for entry in self._entries
        )
        logger.info("FAQ index built with %s entries", len(self._entries))

    @property
    def entries(self) -> Tuple[FAQEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _distance(self, query: str, field: str, weight: float) -> float:
        if not field:
            return 1.0
        similarity = self._scorer(query, field)
        return (100 - weight * similarity) / 100

    def _keyword_distance(self, query_tokens: Sequence[str], keywords) -> float:
        if not keywords:
            return 1.0
        similarity = max(keyword_similarity(query_tokens, tokens) for tokens in keywords)
        return (100 - self.keyword_weight * similarity) / 100

    def rank(self, query: str) -> List[MatchResult]:
        """Score every entry against ``query``, best first."""
        processed = utils.default_process(query)
        if not processed:
            return []
        query_tokens = processed.split()

        scored = []
        for position, (question, category, keywords) in enumerate(self._index):
            score = min(
                self._distance(processed, question, 1.0),
                self._distance(processed, category, self.category_weight),
                self._keyword_distance(query_tokens, keywords),
            )
            scored.append((score, position))
        scored.sort()
        return [MatchResult(matched_entry=self._entries[position], score=score) for score, position in scored]

    def match(self, query: str) -> MatchResult:
        candidates = self.rank(query)
        if not candidates:
            return MatchResult(matched_entry=None, score=1.0)

        best = candidates[0]
        if best.score > self.threshold:
            logger.debug("No confident FAQ match for %r (best %.3f)", query, best.score)
            return MatchResult(matched_entry=None, score=best.score)

        logger.debug("FAQ match for %r: %r (%.3f)", query, best.matched_entry.question, best.score)
        return best

    def render(self, result: MatchResult) -> str:
        if not result.matched:
            return self.fallback
        return templates.matched_answer(result.matched_entry.category, result.matched_entry.answer)

    def answer(self, query: str) -> str:
        return self.render(self.match(query))
