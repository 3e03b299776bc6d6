"""Test cases for leet expansion."""

import pytest

from brutus.domain.services import LEET_TABLE, LeetExpander
from brutus.domain.services.leet_expander import alternatives_for


@pytest.fixture
def expander():
    return LeetExpander()


class TestAlternatives:
    """Test per-character alternatives."""

    def test_plain_letter_has_only_itself(self):
        assert alternatives_for("a") == ("a",)

    def test_uppercase_is_folded(self):
        assert alternatives_for("A") == ("a",)

    def test_literal_comes_first(self):
        """Test that the literal character precedes its leet readings."""
        assert alternatives_for("!") == ("!", "i", "l", "1")
        assert alternatives_for("@") == ("@", "a", "o")

    def test_table_keys_are_single_characters(self):
        assert all(len(key) == 1 for key in LEET_TABLE)


class TestExpansion:
    """Test variant set generation."""

    def test_empty_password(self, expander):
        """Test that an empty password yields the empty variant."""
        assert expander.expand("") == frozenset({""})

    def test_single_substitution(self, expander):
        assert expander.expand("4") == frozenset({"4", "a"})

    def test_no_substitutable_characters(self, expander):
        """Test that a plain password yields only its lowercase form."""
        assert expander.expand("Dragon") == frozenset({"dragon"})

    def test_disguised_common_password(self, expander):
        """Test that a leet spelling expands to its plain reading."""
        variants = expander.expand("p4$$w0rd")

        assert "password" in variants
        assert "p4$$w0rd" in variants
        assert "pa55word" in variants

    def test_size_is_product_of_alternatives(self, expander):
        """Test the uncapped variant count."""
        variants = expander.expand("p4$$w0rd")

        # 4 -> 2, $ -> 3, $ -> 3, 0 -> 2
        assert len(variants) == 36
        assert LeetExpander.expected_size("p4$$w0rd") == 36

    def test_variants_are_lowercase(self, expander):
        assert all(v == v.lower() for v in expander.expand("P@$$W0RD"))

    def test_result_is_immutable(self, expander):
        assert isinstance(expander.expand("b4d"), frozenset)


class TestExpansionCap:
    """Test the variant cap."""

    def test_cap_is_respected(self):
        """Test that expansion stops multiplying once the cap would be exceeded."""
        expander = LeetExpander(max_variants=100)

        variants = expander.expand("$" * 10)

        # 3 -> 9 -> 27 -> 81, then every later position keeps only "$"
        assert len(variants) == 81
        assert len(variants) <= 100

    def test_literal_reading_survives_cap(self):
        """Test that the plain lowercase reading is always present."""
        expander = LeetExpander(max_variants=2)

        variants = expander.expand("P@$$W0RD")

        assert "p@$$w0rd" in variants
        assert len(variants) <= 2

    def test_per_call_cap_overrides_default(self, expander):
        assert len(expander.expand("!!!!", max_variants=4)) == 4

    def test_invalid_cap(self):
        with pytest.raises(ValueError, match="max_variants must be positive"):
            LeetExpander(max_variants=0)
