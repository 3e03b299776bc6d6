"""
Brute Force Estimate Value Object

Result of simulating a sequential keyspace enumeration attack.
"""

from dataclasses import dataclass
from typing import Any

from .character_set import CharacterSet

# Anything beyond this is reported as effectively uncrackable.
MAX_REPORTED_DAYS = 1_000_000_000

SECONDS_PER_DAY = 60 * 60 * 24


@dataclass(frozen=True)
class BruteForceEstimate:
    """
    Attempts an attacker needs to reach a password, and the time it takes.

    ``attempts`` and ``raw_days`` are exact integers of arbitrary size;
    ``days`` is ``raw_days`` capped at ``MAX_REPORTED_DAYS``.
    """

    charset: CharacterSet
    attempts: int
    hashes_per_second: int

    def __post_init__(self) -> None:
        if self.attempts < 0:
            raise ValueError("Attempts cannot be negative")
        if self.hashes_per_second <= 0:
            raise ValueError("Hash rate must be positive")

    @property
    def raw_days(self) -> int:
        return self.attempts // (self.hashes_per_second * SECONDS_PER_DAY)

    @property
    def days(self) -> int:
        return min(self.raw_days, MAX_REPORTED_DAYS)

    @property
    def is_capped(self) -> bool:
        return self.raw_days > MAX_REPORTED_DAYS

    def to_dict(self) -> dict[str, Any]:
        return {
            "charset": self.charset.name,
            "charset_size": self.charset.size,
            # Serialized as text; the value routinely exceeds 64 bits.
            "attempts": str(self.attempts),
            "days": self.days,
            "capped": self.is_capped,
        }
