"""
Shared pytest fixtures.

Provides:
- Policies with every check relaxed, to isolate one rule at a time
- Fake lookup collaborators
- An in-memory SQLite lookup database
"""

from collections.abc import Iterable, Set

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.pool import StaticPool

from brutus.core.config import Policy
from brutus.domain.enums import Dataset
from brutus.infrastructure.lookup.sql_lookup import commons_table, lookup_metadata, words_table


class FakeDictionaryLookup:
    """Records every call and answers with a fixed dataset."""

    def __init__(self, result: Dataset | None = None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[frozenset[str], Dataset]] = []

    def matches(self, variants: Set[str], dataset: Dataset) -> Dataset | None:
        self.calls.append((frozenset(variants), dataset))
        if self.error is not None:
            raise self.error
        return self.result


class FakeIdentityMatcher:
    """Records every call and answers with a fixed verdict."""

    def __init__(self, result: bool = False):
        self.result = result
        self.calls: list[tuple[frozenset[str], tuple[str, ...]]] = []

    def matches(self, variants: Set[str], identity_tokens: Iterable[str]) -> bool:
        self.calls.append((frozenset(variants), tuple(identity_tokens)))
        return self.result


@pytest.fixture
def relaxed_policy() -> Policy:
    """Policy that every password passes."""
    return Policy(
        minlen=0,
        maxlen=1000,
        lower=0,
        upper=0,
        numeric=0,
        special=0,
        lookup=False,
        diminishing=False,
        entropy=0,
        brute=0,
    )


@pytest.fixture
def no_bonus_policy(relaxed_policy) -> Policy:
    """Policy whose class minima are only met by uppercase and numeric characters."""
    return relaxed_policy.replace(lower=100, upper=1, numeric=1, special=100)


@pytest.fixture
def fake_lookup() -> FakeDictionaryLookup:
    return FakeDictionaryLookup()


@pytest.fixture
def fake_identity() -> FakeIdentityMatcher:
    return FakeIdentityMatcher()


@pytest.fixture
def lookup_engine():
    """In-memory SQLite database holding the commons and words tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    lookup_metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            insert(commons_table),
            [{"text": "Password"}, {"text": "letmein"}, {"text": "123456"}],
        )
        conn.execute(
            insert(words_table),
            [{"text": "dragon"}, {"text": "correct"}, {"text": "password"}],
        )
    yield engine
    engine.dispose()


@pytest.fixture
def empty_engine():
    """In-memory SQLite database without the lookup tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()
