"""
Leet Expansion Service

Produces every "de-leeted" reading of a password so that disguised common
passwords (``p4$$w0rd``) can be matched against word lists.
"""

from collections.abc import Mapping
from types import MappingProxyType

from brutus.core.config import DEFAULT_MAX_VARIANTS
from brutus.core.logging import get_logger

logger = get_logger(__name__)

LEET_TABLE: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "@": ("a", "o"),
    "4": ("a",),
    "8": ("b",),
    "3": ("e",),
    "1": ("i", "l"),
    "!": ("i", "l", "1"),
    "0": ("o",),
    "$": ("s", "5"),
    "5": ("s",),
    "6": ("b", "d"),
    "7": ("t",),
})


def alternatives_for(char: str) -> tuple[str, ...]:
    """The lowercase form of ``char`` followed by its leet readings."""
    lowered = char.lower()
    return (lowered, *LEET_TABLE.get(lowered, ()))


class LeetExpander:
    """
    Expands a password into the Cartesian product of its per-position
    alternatives.

    Expansion is a fold over positions. When taking every alternative at a
    position would push the variant count past ``max_variants``, only the
    literal lowercase character is used there, so the plain lowercase reading
    is always present and the result never exceeds the cap.
    """

    def __init__(self, max_variants: int = DEFAULT_MAX_VARIANTS) -> None:
        if max_variants < 1:
            raise ValueError("max_variants must be positive")
        self.max_variants = max_variants

    def expand(self, password: str, max_variants: int | None = None) -> frozenset[str]:
        cap = max_variants or self.max_variants
        variants = [""]
        capped_positions = 0

        for char in password:
            options = alternatives_for(char)
            if len(options) > 1 and len(variants) * len(options) > cap:
                options = options[:1]
                capped_positions += 1
            variants = [prefix + option for prefix in variants for option in options]

        if capped_positions:
            logger.warning(
                "Leet expansion capped",
                length=len(password),
                capped_positions=capped_positions,
                variant_count=len(variants),
                max_variants=cap,
            )

        return frozenset(variants)

    @staticmethod
    def expected_size(password: str) -> int:
        """Uncapped variant count: product of per-position alternative counts."""
        size = 1
        for char in password:
            size *= len(alternatives_for(char))
        return size
