"""Domain services."""

from .brute_force_simulator import BruteForceSimulator
from .entropy_estimator import EntropyEstimator
from .leet_expander import LEET_TABLE, LeetExpander
from .scoring_engine import ScoringEngine

__all__ = [
    "LEET_TABLE",
    "BruteForceSimulator",
    "EntropyEstimator",
    "LeetExpander",
    "ScoringEngine",
]
