"""Collaborator Interfaces

Contracts for the lookups the scoring engine consults with the leet variant
set. Implementations live in the infrastructure layer.
"""

from collections.abc import Iterable, Set
from typing import Protocol

from ..enums import Dataset


class IDictionaryLookup(Protocol):
    """Exact, case-folded word list membership."""

    def matches(self, variants: Set[str], dataset: Dataset) -> Dataset | None:
        """Find the first dataset containing any variant.

        Args:
            variants: Lowercase readings of the password
            dataset: Selector; ``Dataset.BOTH`` scans commons then dictionary

        Returns:
            The concrete dataset that matched, None if no variant matched

        Raises:
            LookupUnavailableError: If the backing store cannot be read
        """
        ...


class IIdentityMatcher(Protocol):
    """Personally identifiable token detection."""

    def matches(self, variants: Set[str], identity_tokens: Iterable[str]) -> bool:
        """Check whether any token occurs within any variant, ignoring case.

        Args:
            variants: Lowercase readings of the password
            identity_tokens: Username, email and name fragments

        Returns:
            True on the first token found
        """
        ...


__all__ = ["IDictionaryLookup", "IIdentityMatcher"]
