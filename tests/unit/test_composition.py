"""
Test cases for the composition rules.

Covers length bounds, per-class minima and message pluralization.
"""

import pytest

from brutus.core.config import Policy
from brutus.domain.enums import CharacterClass, MessageKey
from brutus.domain.rules import CompositionChecker, count_classes


@pytest.fixture
def checker():
    return CompositionChecker()


class TestCountClasses:
    """Test character class counting."""

    def test_counts_each_class(self):
        """Test a password with every class present."""
        counts = count_classes("abC1!?")

        assert counts[CharacterClass.LOWER] == 2
        assert counts[CharacterClass.UPPER] == 1
        assert counts[CharacterClass.NUMERIC] == 1
        assert counts[CharacterClass.SPECIAL] == 2

    def test_underscore_and_space_are_special(self):
        """Test that underscore and space count as special characters."""
        counts = count_classes("a_ b")

        assert counts[CharacterClass.SPECIAL] == 2
        assert counts[CharacterClass.LOWER] == 2

    def test_non_ascii_letters_are_special(self):
        """Test that accented letters fall outside the lowercase class."""
        counts = count_classes("café")

        assert counts[CharacterClass.LOWER] == 3
        assert counts[CharacterClass.SPECIAL] == 1

    def test_empty_password(self):
        """Test counting an empty password."""
        assert all(count == 0 for count in count_classes("").values())


class TestLengthRules:
    """Test minimum and maximum length checks."""

    def test_too_short(self, checker, relaxed_policy):
        """Test a password below the minimum length."""
        policy = relaxed_policy.replace(minlen=10, maxlen=50)

        violations = checker.check_length("abc", policy)

        assert [v.rule for v in violations] == [MessageKey.MINLEN]
        assert violations[0].expected_value == 10
        assert violations[0].current_value == 3
        assert violations[0].message == "Password cannot be less than 10 characters"

    def test_too_long(self, checker, relaxed_policy):
        """Test a password above the maximum length."""
        policy = relaxed_policy.replace(minlen=10, maxlen=50)

        violations = checker.check_length("a" * 60, policy)

        assert [v.rule for v in violations] == [MessageKey.MAXLEN]
        assert violations[0].message == "Password cannot be greater than 50 characters"

    @pytest.mark.parametrize("length", [10, 25, 50])
    def test_within_bounds(self, checker, relaxed_policy, length):
        """Test that bounds are inclusive."""
        policy = relaxed_policy.replace(minlen=10, maxlen=50)

        assert checker.check_length("a" * length, policy) == []

    def test_at_most_one_length_violation(self, checker):
        """Test that a short password never also reports the maximum."""
        policy = Policy(minlen=5, maxlen=5)

        rules = [v.rule for v in checker.check("", policy)]

        assert rules.count(MessageKey.MINLEN) + rules.count(MessageKey.MAXLEN) == 1


class TestClassRules:
    """Test per-class minimum checks."""

    def test_missing_classes_in_order(self, checker):
        """Test one violation per class below its minimum, in class order."""
        policy = Policy(minlen=0, lower=2, upper=2, numeric=1, special=1)

        violations = checker.check_classes("abc", policy)

        assert [v.rule for v in violations] == [
            MessageKey.UPPER,
            MessageKey.NUMERIC,
            MessageKey.SPECIAL,
        ]
        assert violations[0].current_value == 0

    def test_plural_message(self, checker):
        """Test pluralization when more than one character is required."""
        policy = Policy(minlen=0, lower=0, upper=2, numeric=0, special=0)

        violations = checker.check_classes("abc", policy)

        assert violations[0].message == "Password must contain at least 2 uppercase letters"

    def test_singular_message(self, checker):
        """Test the singular form when one character is required."""
        policy = Policy(minlen=0, lower=0, upper=0, numeric=1, special=0)

        violations = checker.check_classes("abc", policy)

        assert violations[0].message == "Password must contain at least 1 number"

    def test_zero_minimum_never_violated(self, checker, relaxed_policy):
        """Test that a class with minimum 0 is always satisfied."""
        assert checker.check_classes("", relaxed_policy) == []

    def test_compliant_password(self, checker):
        """Test a password satisfying the default policy composition."""
        assert checker.is_compliant("abCD12!?xyz", Policy())
