"""
Character Set Value Object

Ordered alphabets an attacker may enumerate, and the ladder of them used by
the brute force simulator.
"""

import string
from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterSet:
    """
    An ordered sequence of distinct characters.

    A character's index is its digit when a password is read as a numeral
    in base ``len(charset)``.
    """

    name: str
    characters: str

    def __post_init__(self) -> None:
        if not self.characters:
            raise ValueError("Character set cannot be empty")
        if len(set(self.characters)) != len(self.characters):
            raise ValueError(f"Character set {self.name!r} contains duplicates")

    def __len__(self) -> int:
        return len(self.characters)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.characters

    def index_of(self, char: str) -> int:
        """Zero-based position of ``char``; raises ValueError if absent."""
        return self.characters.index(char)

    @property
    def size(self) -> int:
        return len(self.characters)


_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_DIGITS = string.digits
_PRIMARY_SYMBOLS = "!@#$%^&*()-=_+"
_SECONDARY_SYMBOLS = "[]\"{}|;':,./<>?`~\\"

# Smallest to largest, so the simulator errs in the attacker's favour by
# picking the cheapest alphabet consistent with the password. The final set
# holds every printable ASCII character and acts as the catch-all.
CHARSET_LADDER: tuple[CharacterSet, ...] = (
    CharacterSet("numeric", _DIGITS),
    CharacterSet("numeric+space", _DIGITS + " "),
    CharacterSet("lower", _LOWER),
    CharacterSet("lower+space", _LOWER + " "),
    CharacterSet("lower-alphanumeric", _LOWER + _DIGITS),
    CharacterSet("lower-alphanumeric+space", _LOWER + _DIGITS + " "),
    CharacterSet("mixed-alpha", _LOWER + _UPPER),
    CharacterSet("mixed-alpha+space", _LOWER + _UPPER + " "),
    CharacterSet("mixed-alphanumeric", _LOWER + _UPPER + _DIGITS),
    CharacterSet("mixed-alphanumeric+space", _LOWER + _UPPER + _DIGITS + " "),
    CharacterSet(
        "mixed-alphanumeric+primary-symbols",
        _LOWER + _UPPER + _DIGITS + _PRIMARY_SYMBOLS + " ",
    ),
    CharacterSet(
        "printable",
        _LOWER + _UPPER + _DIGITS + _PRIMARY_SYMBOLS + _SECONDARY_SYMBOLS + " ",
    ),
)
