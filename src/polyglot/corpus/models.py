"""Vocabulary entries and the corpus that holds them."""

from collections import Counter
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from polyglot.search.normalize import build_search_text

# Fields folded into the canonical search text, in this order.
SEARCH_FIELDS: tuple[str, ...] = (
    "en",
    "fr",
    "es",
    "it",
    "lat",
    "fr_art",
    "es_art",
    "it_art",
    "fr_m",
    "fr_f",
    "es_m",
    "es_f",
    "it_m",
    "it_f",
)


class EntryKind(str, Enum):
    """Kinds of vocabulary entry. Each kind has its own card layout."""

    NOUN = "noun"
    ADJECTIVE = "adj"
    VERB = "verb"
    PHRASE = "phrase"


class Entry(BaseModel):
    """One vocabulary item as stored in words.json.

    All text fields are optional. Unknown keys are kept so a newer word
    list does not fail to load.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str | None = None

    en: str | None = None
    fr: str | None = None
    es: str | None = None
    it: str | None = None
    lat: str | None = None

    # Noun articles
    fr_art: str | None = None
    es_art: str | None = None
    it_art: str | None = None

    # Adjective gender forms
    fr_m: str | None = None
    fr_f: str | None = None
    es_m: str | None = None
    es_f: str | None = None
    it_m: str | None = None
    it_f: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        # Numbers and other scalars in the word list become text.
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @property
    def kind(self) -> EntryKind:
        """Entry kind; unrecognized types are treated as phrases."""
        try:
            return EntryKind(self.type)
        except ValueError:
            return EntryKind.PHRASE

    def search_fields(self) -> list[str | None]:
        """Values of the searchable fields in canonical order."""
        return [getattr(self, name) for name in SEARCH_FIELDS]


class Corpus:
    """Ordered, read-only collection of entries.

    Canonical search texts are computed once here and never change. A
    reloaded word list means a new Corpus.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._search_texts: tuple[str, ...] = tuple(
            build_search_text(entry.search_fields()) for entry in self._entries
        )

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "Corpus":
        """Build a corpus from plain dictionaries."""
        return cls(Entry.model_validate(record) for record in records)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def search_texts(self) -> tuple[str, ...]:
        """Canonical search text per entry, parallel to ``entries``."""
        return self._search_texts

    def indices(self) -> list[int]:
        """All indices in corpus order."""
        return list(range(len(self._entries)))

    def type_counts(self) -> Counter[str]:
        """Number of entries per raw type."""
        return Counter(entry.type or "" for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Corpus(entries={len(self._entries)})"
