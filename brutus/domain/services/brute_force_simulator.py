"""
Brute Force Simulation Service

Estimates how long an attacker enumerating the keyspace in charset order
would need to reach a password.

For example a four digit PIN is enumerated as 0000, 0001, ... 9999; the PIN
6529 is reached after 6*10^3 + 5*10^2 + 2*10 + 9 = 6529 attempts and the
attacker can ignore everything after it. The same holds for any charset: the
password is read as a numeral in base N, N being the size of the smallest
plausible charset, and its value is the attempt count. Python integers are
unbounded, so the count is exact for any length.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from brutus.core.config import DEFAULT_HASHES_PER_SECOND
from brutus.core.logging import get_logger

from ..enums import MessageKey
from ..rules.base import BusinessRule, PolicyViolation
from ..value_objects.brute_force_estimate import BruteForceEstimate
from ..value_objects.character_set import CHARSET_LADDER, CharacterSet

if TYPE_CHECKING:
    from brutus.core.config import Policy

logger = get_logger(__name__)


class BruteForceSimulator(BusinessRule):
    """Sequential keyspace enumeration estimate."""

    def __init__(
        self,
        messages=None,
        ladder: Sequence[CharacterSet] = CHARSET_LADDER,
    ):
        super().__init__(messages, "BruteForceSimulator")
        if not ladder:
            raise ValueError("Charset ladder cannot be empty")
        self.ladder = tuple(ladder)

    def select_charset(self, password: str) -> CharacterSet:
        """
        Smallest ladder charset consistent with every character, in order.

        The selected index only moves up: each character picks the first
        charset at or above the current one that contains it. A character no
        remaining charset contains selects the last (catch-all) charset for
        the rest of the password. Ladder entries are not strictly nested, so
        the result may lack an earlier character (``"1A"`` selects
        mixed-alpha), and two passwords with the same characters in a
        different order can select different charsets.
        """
        selected = 0
        for char in password:
            for index in range(selected, len(self.ladder)):
                if char in self.ladder[index]:
                    selected = index
                    break
            else:
                return self.ladder[-1]
        return self.ladder[selected]

    def attempts(self, password: str, charset: CharacterSet | None = None) -> int:
        """Keyspace position of ``password``: its value as a base-N numeral."""
        charset = charset or self.select_charset(password)
        base = charset.size
        total = 0
        for char in password:
            # A character the selected charset lacks ranks as its first digit.
            digit = charset.index_of(char) if char in charset else 0
            total = total * base + digit
        return total

    def estimate(
        self, password: str, hashes_per_second: int = DEFAULT_HASHES_PER_SECOND
    ) -> BruteForceEstimate:
        charset = self.select_charset(password)
        return BruteForceEstimate(
            charset=charset,
            attempts=self.attempts(password, charset),
            hashes_per_second=int(hashes_per_second),
        )

    def simulate(
        self,
        password: str,
        policy: "Policy | None" = None,
        hashes_per_second: int | None = None,
    ) -> int:
        """Days to reach ``password``, capped at one billion."""
        if hashes_per_second is None:
            hashes_per_second = (
                policy.hashes_per_second if policy is not None else DEFAULT_HASHES_PER_SECOND
            )
        return self.estimate(password, hashes_per_second).days

    def validate(self, password: str, policy: "Policy") -> list[PolicyViolation]:
        return self.check(self.estimate(password, policy.hashes_per_second), policy)

    def check(self, estimate: BruteForceEstimate, policy: "Policy") -> list[PolicyViolation]:
        """Compare the capped day count against the survival threshold."""
        logger.debug(
            "Brute force simulated",
            charset=estimate.charset.name,
            days=estimate.days,
            capped=estimate.is_capped,
            required=policy.brute,
        )
        if estimate.days < policy.brute:
            return [self.create_violation(MessageKey.BRUTE, policy.brute, estimate.days)]
        return []
