"""
Integration tests for the flat file dictionary lookup.

Uses temporary word lists and the lists bundled with the package.
"""

import pytest

from brutus import evaluate
from brutus.core.config import Policy
from brutus.core.errors import LookupUnavailableError
from brutus.domain.enums import Dataset, MessageKey
from brutus.infrastructure.lookup import (
    FileDictionaryLookup,
    WordListSource,
    build_dictionary_lookup,
    bundled_wordlist,
)
from brutus.infrastructure.lookup.file_lookup import infer_dataset


@pytest.fixture
def commons_file(tmp_path):
    path = tmp_path / "commons.txt"
    path.write_text("123456\nPassword\n\n  letmein  \n", encoding="utf-8")
    return path


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "my-dictionary.txt"
    path.write_text("dragon\ncorrect\nhorse\n", encoding="utf-8")
    return path


class TestFileLookup:
    """Test scanning explicit word lists."""

    def test_case_folded_match(self, commons_file):
        lookup = FileDictionaryLookup.from_paths(commons_file, Dataset.COMMONS)

        assert lookup.matches({"password"}, Dataset.COMMONS) == Dataset.COMMONS

    def test_lines_are_trimmed(self, commons_file):
        lookup = FileDictionaryLookup.from_paths(commons_file, Dataset.COMMONS)

        assert lookup.matches({"letmein"}, Dataset.COMMONS) == Dataset.COMMONS

    def test_no_match(self, commons_file):
        lookup = FileDictionaryLookup.from_paths(commons_file, Dataset.COMMONS)

        assert lookup.matches({"correcthorse"}, Dataset.COMMONS) is None

    def test_blank_lines_never_match(self, commons_file):
        lookup = FileDictionaryLookup.from_paths(commons_file, Dataset.COMMONS)

        assert lookup.matches({""}, Dataset.COMMONS) is None

    def test_both_attributes_by_file_name(self, commons_file, dictionary_file):
        lookup = FileDictionaryLookup.from_paths([commons_file, dictionary_file], Dataset.BOTH)

        assert lookup.matches({"dragon"}, Dataset.BOTH) == Dataset.DICTIONARY
        assert lookup.matches({"123456"}, Dataset.BOTH) == Dataset.COMMONS

    def test_commons_scanned_first(self, tmp_path):
        """Test that a word in both lists is attributed to commons."""
        words = tmp_path / "dictionary.txt"
        words.write_text("dragon\n", encoding="utf-8")
        commons = tmp_path / "commons.txt"
        commons.write_text("dragon\n", encoding="utf-8")
        lookup = FileDictionaryLookup.from_paths([words, commons], Dataset.BOTH)

        assert lookup.matches({"dragon"}, Dataset.BOTH) == Dataset.COMMONS

    def test_selector_limits_scan(self, commons_file, dictionary_file):
        lookup = FileDictionaryLookup(
            [
                WordListSource(Dataset.COMMONS, commons_file),
                WordListSource(Dataset.DICTIONARY, dictionary_file),
            ]
        )

        assert lookup.matches({"dragon"}, Dataset.COMMONS) is None

    def test_missing_file(self, tmp_path):
        lookup = FileDictionaryLookup.from_paths(tmp_path / "absent.txt", Dataset.COMMONS)

        with pytest.raises(LookupUnavailableError, match="Lookup file not found") as exc_info:
            lookup.matches({"password"}, Dataset.COMMONS)

        assert exc_info.value.backend == "file"

    def test_unreadable_source(self, tmp_path):
        """Test that a path that exists but cannot be read as a file is reported."""
        directory = tmp_path / "commons.txt"
        directory.mkdir()
        lookup = FileDictionaryLookup.from_paths(directory, Dataset.COMMONS)

        with pytest.raises(LookupUnavailableError, match="not readable") as exc_info:
            lookup.matches({"password"}, Dataset.COMMONS)

        assert exc_info.value.source == str(directory)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_no_sources(self):
        with pytest.raises(ValueError):
            FileDictionaryLookup([])

    def test_infer_dataset(self):
        assert infer_dataset("/lists/Dictionary-en.txt") == Dataset.DICTIONARY
        assert infer_dataset("/lists/rockyou.txt") == Dataset.COMMONS


class TestBundledWordLists:
    """Test the lists shipped with the package."""

    def test_bundled_files_exist(self):
        assert bundled_wordlist(Dataset.COMMONS).is_file()
        assert bundled_wordlist(Dataset.DICTIONARY).is_file()

    def test_bundled_commons(self):
        lookup = FileDictionaryLookup.bundled()

        assert lookup.matches({"letmein"}, Dataset.COMMONS) == Dataset.COMMONS

    def test_bundled_dictionary(self):
        lookup = FileDictionaryLookup.bundled()

        assert lookup.matches({"staple"}, Dataset.DICTIONARY) == Dataset.DICTIONARY


class TestLookupFactory:
    """Test backend selection."""

    def test_usefile_true_selects_bundled(self):
        lookup = build_dictionary_lookup(Policy(usefile=True))

        assert isinstance(lookup, FileDictionaryLookup)
        assert len(lookup.sources) == 2

    def test_usefile_path(self, commons_file):
        lookup = build_dictionary_lookup(Policy(usefile=str(commons_file)))

        assert lookup.sources == (WordListSource(Dataset.COMMONS, commons_file),)


class TestEndToEnd:
    """Test grading against file-backed lists."""

    def test_disguised_common_password(self):
        report = evaluate("p4$$w0rd", policy=Policy(usefile=True))

        assert report.has_violation(MessageKey.COMMONS)
        assert report.matched_dataset == Dataset.COMMONS

    def test_dictionary_word(self, dictionary_file):
        policy = Policy(usefile=[dictionary_file], dataset="dictionary")

        report = evaluate("Dr@g0n", policy=policy)

        assert report.has_violation(MessageKey.DICTIONARY)

    def test_unlisted_password(self, commons_file):
        report = evaluate("Xq7#vL9!mTz2Rw", policy=Policy(usefile=commons_file))

        assert report.is_bad is False
