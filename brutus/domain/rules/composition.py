"""
Composition Rules

Length bounds and per-class character minima.
"""

import re
from typing import TYPE_CHECKING

from ..enums import CharacterClass, MessageKey
from .base import BusinessRule, PolicyViolation

if TYPE_CHECKING:
    from brutus.core.config import Policy

# ASCII mode keeps non-ASCII letters out of \w, so they count as special.
_CLASS_PATTERNS = {
    character_class: re.compile(character_class.pattern, re.ASCII)
    for character_class in CharacterClass
}


def count_classes(password: str) -> dict[CharacterClass, int]:
    """Count the characters of ``password`` falling in each class."""
    return {
        character_class: len(pattern.findall(password))
        for character_class, pattern in _CLASS_PATTERNS.items()
    }


class CompositionChecker(BusinessRule):
    """Password length and character class requirements."""

    def __init__(self, messages=None):
        super().__init__(messages, "CompositionChecker")

    def validate(self, password: str, policy: "Policy") -> list[PolicyViolation]:
        return self.check(password, policy)

    def check(self, password: str, policy: "Policy") -> list[PolicyViolation]:
        """Length violation (at most one) followed by class violations."""
        violations = self.check_length(password, policy)
        violations.extend(self.check_classes(password, policy))
        return violations

    def check_length(self, password: str, policy: "Policy") -> list[PolicyViolation]:
        length = len(password)
        if length < policy.minlen:
            return [self.create_violation(MessageKey.MINLEN, policy.minlen, length)]
        if length > policy.maxlen:
            return [self.create_violation(MessageKey.MAXLEN, policy.maxlen, length)]
        return []

    def check_classes(self, password: str, policy: "Policy") -> list[PolicyViolation]:
        violations = []
        counts = count_classes(password)
        for character_class in CharacterClass:
            required = policy.minimum_for(character_class)
            if counts[character_class] < required:
                violations.append(
                    self.create_violation(
                        MessageKey.for_class(character_class),
                        required,
                        counts[character_class],
                    )
                )
        return violations
