"""Identity token matching against leet variants."""

import re
from collections.abc import Iterable, Set

from brutus.core.logging import get_logger

logger = get_logger(__name__)


class RegexIdentityMatcher:
    """
    Case-insensitive search for identity tokens inside password variants.

    Tokens are regular expression fragments unless ``literal`` is set, in
    which case they are escaped first. A token that does not compile is
    matched literally. Empty tokens are ignored since they match everything.
    """

    def __init__(self, literal: bool = False) -> None:
        self.literal = literal

    def compile(self, token: str) -> re.Pattern[str]:
        if self.literal:
            return re.compile(re.escape(token), re.IGNORECASE)
        try:
            return re.compile(token, re.IGNORECASE)
        except re.error as e:
            logger.warning(
                "Identity token is not a valid pattern; matching literally",
                reason=str(e),
            )
            return re.compile(re.escape(token), re.IGNORECASE)

    def matches(self, variants: Set[str], identity_tokens: Iterable[str]) -> bool:
        for token in identity_tokens:
            if not token or not token.strip():
                continue
            pattern = self.compile(token)
            if any(pattern.search(variant) for variant in variants):
                return True
        return False
