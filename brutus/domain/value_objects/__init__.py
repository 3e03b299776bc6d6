"""Domain value objects."""

from .brute_force_estimate import MAX_REPORTED_DAYS, BruteForceEstimate
from .character_set import CHARSET_LADDER, CharacterSet
from .score_report import ScoreReport

__all__ = [
    "CHARSET_LADDER",
    "MAX_REPORTED_DAYS",
    "BruteForceEstimate",
    "CharacterSet",
    "ScoreReport",
]
