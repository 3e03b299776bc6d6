"""
Score Report Value Object

Outcome of grading one password.
"""

from dataclasses import dataclass
from typing import Any

from ..enums import Dataset, MessageKey
from ..rules.base import PolicyViolation


@dataclass(frozen=True)
class ScoreReport:
    """
    Ordered violations found while grading a password.

    Violations appear in check order: length, composition, dictionary
    lookup, identity, entropy, brute force. A report with no violations is a
    passing grade.
    """

    violations: tuple[PolicyViolation, ...] = ()
    entropy_bits: float | None = None
    survival_days: int | None = None
    matched_dataset: Dataset | None = None

    @property
    def is_bad(self) -> bool:
        return len(self.violations) > 0

    @property
    def messages(self) -> list[str]:
        """Human-readable violation messages."""
        return [violation.message for violation in self.violations]

    @property
    def rules(self) -> list[MessageKey]:
        return [violation.rule for violation in self.violations]

    def has_violation(self, rule: MessageKey) -> bool:
        return any(violation.rule == rule for violation in self.violations)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_bad": self.is_bad,
            "messages": self.messages,
            "violations": [violation.to_dict() for violation in self.violations],
            "entropy_bits": self.entropy_bits,
            "survival_days": self.survival_days,
            "matched_dataset": self.matched_dataset.value if self.matched_dataset else None,
        }
