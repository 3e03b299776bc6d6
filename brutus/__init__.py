"""Brutus: password grading and policy validation.

Example::

    from brutus import Policy, evaluate

    report = evaluate("p4$$w0rd", ["jdoe"], Policy(usefile=True))
    if report.is_bad:
        for message in report.messages:
            print(message)
"""

from collections.abc import Iterable, Mapping

from brutus.core.config import DatabaseConfig, Policy
from brutus.core.errors import BrutusError, ConfigurationError, LookupUnavailableError
from brutus.domain.enums import CharacterClass, Dataset, EntropyModel, MessageKey
from brutus.domain.messages import MessageCatalog
from brutus.domain.rules import PolicyViolation
from brutus.domain.services import (
    BruteForceSimulator,
    EntropyEstimator,
    LeetExpander,
    ScoringEngine,
)
from brutus.domain.value_objects import BruteForceEstimate, CharacterSet, ScoreReport

__version__ = "1.0.0"


def evaluate(
    password: str,
    identity_tokens: Iterable[str] | None = None,
    policy: Policy | Mapping | None = None,
    messages: MessageCatalog | Mapping[str, str] | None = None,
) -> ScoreReport:
    """Grade ``password`` with a one-off engine."""
    if isinstance(policy, Mapping):
        policy = Policy.from_mapping(policy)
    return ScoringEngine(policy=policy, messages=messages).evaluate(password, identity_tokens)


def is_bad_password(
    password: str,
    identity_tokens: Iterable[str] | None = None,
    policy: Policy | Mapping | None = None,
) -> bool:
    return evaluate(password, identity_tokens, policy).is_bad


__all__ = [
    "BruteForceEstimate",
    "BruteForceSimulator",
    "BrutusError",
    "CharacterClass",
    "CharacterSet",
    "ConfigurationError",
    "DatabaseConfig",
    "Dataset",
    "EntropyEstimator",
    "EntropyModel",
    "LeetExpander",
    "LookupUnavailableError",
    "MessageCatalog",
    "MessageKey",
    "Policy",
    "PolicyViolation",
    "ScoreReport",
    "ScoringEngine",
    "evaluate",
    "is_bad_password",
]
