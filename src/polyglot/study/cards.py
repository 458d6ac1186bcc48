"""Card layouts for each kind of entry.

A card has an English front and a back with one row per language. The
layout depends on the entry kind: nouns show articles, adjectives show
masculine and feminine forms, and everything else shows plain translations.
Rows carry the text and locale a speech backend would need to read them.
"""

import re
from dataclasses import dataclass, field

from polyglot.corpus.models import Entry, EntryKind

_LEADING_ARTICLE = re.compile(r"^the\s+", re.IGNORECASE)

# (label, code, speech locale) for the spoken back-face languages
_SPOKEN_LANGUAGES: tuple[tuple[str, str, str], ...] = (
    ("French", "fr", "fr-FR"),
    ("Spanish", "es", "es-ES"),
    ("Italian", "it", "it-IT"),
)


@dataclass(frozen=True)
class Form:
    """One spoken form inside a row (e.g. the feminine adjective)."""

    text: str
    speak_text: str
    speak_lang: str | None = None
    label: str | None = None


@dataclass(frozen=True)
class TranslationRow:
    """One language on the back of a card."""

    label: str
    code: str
    forms: tuple[Form, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """Display text of the row, forms separated by slashes."""
        return " / ".join(form.text for form in self.forms if form.text)


@dataclass(frozen=True)
class Card:
    """A rendered flashcard."""

    kind: EntryKind
    front: str
    echo: str
    rows: tuple[TranslationRow, ...]


def _clean(value: str | None) -> str:
    return (value or "").strip()


def front_text(entry: Entry) -> str:
    """English front face; nouns drop a leading "the"."""
    english = entry.en or ""
    if entry.kind is EntryKind.NOUN:
        return _LEADING_ARTICLE.sub("", english)
    return english


def _noun_rows(entry: Entry) -> list[TranslationRow]:
    rows = []
    for label, code, locale in _SPOKEN_LANGUAGES:
        article = _clean(getattr(entry, f"{code}_art"))
        word = _clean(getattr(entry, code))
        spoken = f"{article} {word}".strip()
        rows.append(TranslationRow(label, code, (Form(spoken, spoken, locale),)))
    rows.append(TranslationRow("Latin", "lat", (Form(_clean(entry.lat), ""),)))
    return rows


def _adjective_rows(entry: Entry) -> list[TranslationRow]:
    rows = []
    for label, code, locale in _SPOKEN_LANGUAGES:
        masculine = _clean(getattr(entry, f"{code}_m"))
        feminine = _clean(getattr(entry, f"{code}_f"))
        forms = (
            Form(masculine, masculine, locale, label="M"),
            Form(feminine, feminine, locale, label="F"),
        )
        rows.append(TranslationRow(label, code, forms))
    rows.append(TranslationRow("Root", "lat", (Form(_clean(entry.lat), ""),)))
    return rows


def _phrase_rows(entry: Entry) -> list[TranslationRow]:
    rows = []
    for label, code, locale in _SPOKEN_LANGUAGES:
        text = _clean(getattr(entry, code))
        rows.append(TranslationRow(label, code, (Form(text, text, locale),)))
    rows.append(TranslationRow("Latin", "lat", (Form(_clean(entry.lat), ""),)))
    return rows


def render_card(entry: Entry) -> Card:
    """Lay out a card for an entry according to its kind."""
    match entry.kind:
        case EntryKind.NOUN:
            rows = _noun_rows(entry)
        case EntryKind.ADJECTIVE:
            rows = _adjective_rows(entry)
        case EntryKind.VERB | EntryKind.PHRASE:
            rows = _phrase_rows(entry)

    return Card(
        kind=entry.kind,
        front=front_text(entry),
        echo=entry.en or "",
        rows=tuple(rows),
    )
