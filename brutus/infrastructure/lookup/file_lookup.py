"""Flat file dictionary lookup.

Each file holds one candidate per line. Lines are trimmed and case-folded
before comparison, and the scan stops at the first line equal to any
variant.
"""

from collections.abc import Iterable, Set
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from brutus.core.errors import LookupUnavailableError
from brutus.core.logging import get_logger
from brutus.domain.enums import Dataset

logger = get_logger(__name__)

COMMONS_FILENAME = "commons-freq.txt"
DICTIONARY_FILENAME = "dictionary.txt"


def bundled_wordlist(dataset: Dataset) -> Path:
    """Path of the word list shipped with the package for ``dataset``."""
    filename = {
        Dataset.COMMONS: COMMONS_FILENAME,
        Dataset.DICTIONARY: DICTIONARY_FILENAME,
    }[dataset]
    return Path(str(resources.files("brutus.data").joinpath(filename)))


def infer_dataset(path: str | Path) -> Dataset:
    """Attribute a file to a dataset by its name."""
    return Dataset.DICTIONARY if "dictionary" in Path(path).name.lower() else Dataset.COMMONS


@dataclass(frozen=True)
class WordListSource:
    """A word list file and the dataset it belongs to."""

    dataset: Dataset
    path: Path


class FileDictionaryLookup:
    """Scans word list files for any of the password variants."""

    def __init__(self, sources: Iterable[WordListSource]) -> None:
        self.sources = tuple(sources)
        if not self.sources:
            raise ValueError("At least one word list is required")

    @classmethod
    def bundled(cls) -> "FileDictionaryLookup":
        return cls(
            WordListSource(dataset, bundled_wordlist(dataset))
            for dataset in Dataset.BOTH.members
        )

    @classmethod
    def from_paths(
        cls, paths: str | Path | Iterable[str | Path], dataset: Dataset
    ) -> "FileDictionaryLookup":
        """
        Attribute explicit paths to datasets.

        With a single-dataset selector every path belongs to that dataset;
        with ``Dataset.BOTH`` each path is attributed by its file name.
        """
        if isinstance(paths, str | Path):
            paths = [paths]
        sources = []
        for path in paths:
            owner = infer_dataset(path) if dataset == Dataset.BOTH else dataset
            sources.append(WordListSource(owner, Path(path)))
        return cls(sources)

    def matches(self, variants: Set[str], dataset: Dataset) -> Dataset | None:
        wanted = {variant.lower() for variant in variants}
        for member in dataset.members:
            for source in self.sources:
                if source.dataset == member and self._scan(source, wanted):
                    logger.debug("Dictionary match", dataset=member.value, source=source.path.name)
                    return member
        return None

    def _scan(self, source: WordListSource, wanted: Set[str]) -> bool:
        path = source.path
        if not path.exists():
            raise LookupUnavailableError(
                "Lookup file not found", backend="file", source=str(path)
            )
        try:
            with path.open("r", encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    candidate = line.strip().lower()
                    if candidate and candidate in wanted:
                        return True
        except OSError as e:
            logger.error("Lookup file not readable", source=str(path), reason=str(e))
            raise LookupUnavailableError(
                "Lookup file not readable (check permissions)",
                backend="file",
                source=str(path),
                cause=e,
            ) from e
        return False
