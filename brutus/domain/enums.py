"""
Domain Enumerations

Enumerations shared by the grading rules, services and collaborators.
"""

from enum import Enum


class CharacterClass(Enum):
    """Character classes counted by the composition rules."""

    LOWER = "lower"
    UPPER = "upper"
    NUMERIC = "numeric"
    SPECIAL = "special"

    @property
    def pattern(self) -> str:
        """Regular expression matching a single character of this class."""
        return {
            CharacterClass.LOWER: r"[a-z]",
            CharacterClass.UPPER: r"[A-Z]",
            CharacterClass.NUMERIC: r"[0-9]",
            CharacterClass.SPECIAL: r"[\W_]",
        }[self]


class EntropyModel(Enum):
    """Position-weighted entropy models."""

    FLAT = "flat"
    DIMINISHING = "diminishing"


class Dataset(Enum):
    """Word lists a password can be looked up in."""

    COMMONS = "commons"
    DICTIONARY = "dictionary"
    BOTH = "both"

    @property
    def members(self) -> tuple["Dataset", ...]:
        """Concrete datasets selected, in scan order."""
        if self == Dataset.BOTH:
            return (Dataset.COMMONS, Dataset.DICTIONARY)
        return (self,)


class MessageKey(Enum):
    """Keys of the violation message catalog."""

    MINLEN = "minlen"
    MAXLEN = "maxlen"
    LOWER = "lower"
    UPPER = "upper"
    NUMERIC = "numeric"
    SPECIAL = "special"
    IDENTITY = "identity"
    COMMONS = "commons"
    DICTIONARY = "dictionary"
    ENTROPY = "entropy"
    BRUTE = "brute"

    @classmethod
    def for_class(cls, character_class: CharacterClass) -> "MessageKey":
        return cls(character_class.value)

    @classmethod
    def for_dataset(cls, dataset: Dataset) -> "MessageKey":
        if dataset == Dataset.BOTH:
            raise ValueError("A match is always attributed to a single dataset")
        return cls(dataset.value)
