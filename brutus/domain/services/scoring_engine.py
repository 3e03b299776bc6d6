"""
Scoring Engine

Runs every check against a password and collects the violations into a
report. No check is skipped because an earlier one failed; only the two
lookups stop at their first match. The engine keeps no per-call state, so one
instance can serve concurrent evaluations.
"""

from collections.abc import Iterable, Mapping

from brutus.core.config import DatabaseConfig, Policy
from brutus.core.logging import get_logger
from brutus.infrastructure.identity_matcher import RegexIdentityMatcher
from brutus.infrastructure.lookup.factory import build_dictionary_lookup

from ..enums import MessageKey
from ..interfaces import IDictionaryLookup, IIdentityMatcher
from ..messages import MessageCatalog
from ..rules.base import PolicyViolation
from ..rules.composition import CompositionChecker
from ..value_objects.score_report import ScoreReport
from .brute_force_simulator import BruteForceSimulator
from .entropy_estimator import EntropyEstimator
from .leet_expander import LeetExpander

logger = get_logger(__name__)


class ScoringEngine:
    """Grades passwords against a policy."""

    def __init__(
        self,
        policy: Policy | None = None,
        messages: MessageCatalog | Mapping[str, str] | None = None,
        dictionary_lookup: IDictionaryLookup | None = None,
        identity_matcher: IIdentityMatcher | None = None,
        database_config: DatabaseConfig | None = None,
    ) -> None:
        self.policy = policy or Policy()
        if isinstance(messages, MessageCatalog):
            self.messages = messages
        else:
            self.messages = MessageCatalog(messages)

        self.composition = CompositionChecker(self.messages)
        self.entropy = EntropyEstimator(self.messages)
        self.brute_force = BruteForceSimulator(self.messages)
        self.expander = LeetExpander(self.policy.max_variants)

        self._dictionary_lookup = dictionary_lookup
        self._identity_matcher = identity_matcher
        self._database_config = database_config

    def evaluate(
        self,
        password: str,
        identity_tokens: Iterable[str] | None = None,
        policy: Policy | None = None,
    ) -> ScoreReport:
        """
        Grade ``password``.

        Args:
            password: Candidate password
            identity_tokens: Personally identifiable strings; defaults to the
                policy's ``identity`` tokens
            policy: Overrides the engine's policy for this call

        Returns:
            ScoreReport with violations in check order

        Raises:
            LookupUnavailableError: If dictionary lookup is enabled and its
                backend cannot be read
        """
        policy = policy or self.policy
        tokens = policy.identity if identity_tokens is None else tuple(identity_tokens)

        violations = self.composition.check(password, policy)

        variants = self.expander.expand(password, policy.max_variants)

        matched_dataset = None
        if policy.lookup:
            lookup = self._dictionary_lookup or build_dictionary_lookup(
                policy, self._database_config
            )
            matched_dataset = lookup.matches(variants, policy.dataset)
            if matched_dataset is not None:
                violations.append(self._violation(MessageKey.for_dataset(matched_dataset)))

        if tokens and self._identity_matcher_for(policy).matches(variants, tokens):
            violations.append(self._violation(MessageKey.IDENTITY))

        bits = self.entropy.estimate(password, policy)
        violations.extend(self.entropy.check(bits, policy))

        estimate = self.brute_force.estimate(password, policy.hashes_per_second)
        violations.extend(self.brute_force.check(estimate, policy))

        report = ScoreReport(
            violations=tuple(violations),
            entropy_bits=bits,
            survival_days=estimate.days,
            matched_dataset=matched_dataset,
        )
        logger.info(
            "Password evaluated",
            is_bad=report.is_bad,
            violations=[rule.value for rule in report.rules],
            variant_count=len(variants),
        )
        return report

    def is_bad_password(
        self,
        password: str,
        identity_tokens: Iterable[str] | None = None,
        policy: Policy | None = None,
    ) -> bool:
        return self.evaluate(password, identity_tokens, policy).is_bad

    def _identity_matcher_for(self, policy: Policy) -> IIdentityMatcher:
        if self._identity_matcher is not None:
            return self._identity_matcher
        return RegexIdentityMatcher(literal=policy.identity_literal)

    def _violation(self, rule: MessageKey) -> PolicyViolation:
        return PolicyViolation(rule=rule, message=self.messages.render(rule))
