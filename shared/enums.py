from enum import Enum


class MatchOutcome(str, Enum):
    MATCHED = "matched"
    UNMATCHED = "unmatched"
