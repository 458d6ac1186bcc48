"""Vocabulary corpus: entry models and word list loading."""

from polyglot.corpus.loader import is_remote, load_corpus, parse_entries, parse_payload
from polyglot.corpus.models import SEARCH_FIELDS, Corpus, Entry, EntryKind

__all__ = [
    # Models
    "Corpus",
    "Entry",
    "EntryKind",
    "SEARCH_FIELDS",
    # Loading
    "is_remote",
    "load_corpus",
    "parse_entries",
    "parse_payload",
]
