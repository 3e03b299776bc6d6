"""
Entropy Estimation Service

NIST style bit-strength estimate built on position-weighted contributions.

Positions are counted from 1. The first character contributes 4 bits,
characters 2 to 8 contribute 2 bits each, characters 9 to 20 contribute 1.5
bits each and every later character 1 bit. The diminishing model scales each
contribution by a per-character weight that starts at 1.0 and is multiplied
by 0.75 every time that character is consumed, so repeats are worth
geometrically less. Up to 6 bonus bits are granted for character classes that
meet their policy minimum.
"""

from collections import defaultdict
from typing import TYPE_CHECKING

from brutus.core.logging import get_logger

from ..enums import CharacterClass, EntropyModel, MessageKey
from ..rules.base import BusinessRule, PolicyViolation
from ..rules.composition import count_classes

if TYPE_CHECKING:
    from brutus.core.config import Policy

logger = get_logger(__name__)

FIRST_CHARACTER_BITS = 4.0
SHORT_RANGE_BITS = 2.0
MEDIUM_RANGE_BITS = 1.5
LONG_RANGE_BITS = 1.0
CLASS_BONUS_BITS = 1.5
REPEAT_DECAY = 0.75


def position_bits(position: int) -> float:
    """Base contribution of the character at 1-based ``position``."""
    if position < 1:
        raise ValueError("Positions are 1-based")
    if position == 1:
        return FIRST_CHARACTER_BITS
    if position <= 8:
        return SHORT_RANGE_BITS
    if position <= 20:
        return MEDIUM_RANGE_BITS
    return LONG_RANGE_BITS


class EntropyEstimator(BusinessRule):
    """Estimates password entropy and checks it against the policy minimum."""

    def __init__(self, messages=None):
        super().__init__(messages, "EntropyEstimator")

    def estimate(self, password: str, policy: "Policy") -> float:
        """Total estimated bits: base model plus class bonus."""
        return self.base_bits(password, policy.entropy_model) + self.class_bonus(password, policy)

    def base_bits(self, password: str, model: EntropyModel) -> float:
        if model == EntropyModel.FLAT:
            return sum(position_bits(position) for position in range(1, len(password) + 1))

        weights: defaultdict[str, float] = defaultdict(lambda: 1.0)
        bits = 0.0
        for position, char in enumerate(password, start=1):
            bits += position_bits(position) * weights[char]
            weights[char] *= REPEAT_DECAY
        return bits

    def class_bonus(self, password: str, policy: "Policy") -> float:
        """1.5 bits for each character class meeting its configured minimum."""
        counts = count_classes(password)
        return sum(
            CLASS_BONUS_BITS
            for character_class in CharacterClass
            if counts[character_class] >= policy.minimum_for(character_class)
        )

    def validate(self, password: str, policy: "Policy") -> list[PolicyViolation]:
        return self.check(self.estimate(password, policy), policy)

    def check(self, bits: float, policy: "Policy") -> list[PolicyViolation]:
        """Compare an estimate against the policy minimum."""
        logger.debug(
            "Entropy estimated",
            model=policy.entropy_model.value,
            bits=bits,
            required=policy.entropy,
        )
        if bits < policy.entropy:
            return [self.create_violation(MessageKey.ENTROPY, policy.entropy, bits)]
        return []
