"""Dictionary lookup backends."""

from .factory import build_dictionary_lookup
from .file_lookup import FileDictionaryLookup, WordListSource, bundled_wordlist
from .sql_lookup import SqlDictionaryLookup, create_lookup_engine, lookup_metadata

__all__ = [
    "FileDictionaryLookup",
    "SqlDictionaryLookup",
    "WordListSource",
    "build_dictionary_lookup",
    "bundled_wordlist",
    "create_lookup_engine",
    "lookup_metadata",
]
