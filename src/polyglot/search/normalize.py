"""Text canonicalization for search comparison.

Every string that takes part in matching (the query and the indexed card
text) goes through ``normalize`` so that accents, case and surrounding
whitespace never affect whether two strings match.
"""

import re
import unicodedata
from collections.abc import Iterable
from typing import Any

# Combining Diacritical Marks block
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")

SEARCH_TEXT_SEPARATOR = " | "


def normalize(value: Any) -> str:
    """Canonicalize a value for comparison.

    Decomposes accented characters (NFD), drops combining diacritical marks
    (U+0300 to U+036F), lowercases and trims. ``None`` becomes the empty
    string and other non-string values are stringified, so this never fails.

    >>> normalize("  Café ")
    'cafe'
    """
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    decomposed = unicodedata.normalize("NFD", text)
    return _COMBINING_MARKS.sub("", decomposed).lower().strip()


def build_search_text(fields: Iterable[Any]) -> str:
    """Build the canonical search text for one entry.

    Empty and missing fields are skipped; the rest are joined with a pipe
    separator and normalized as a whole.
    """
    parts = [str(f) for f in fields if f]
    return normalize(SEARCH_TEXT_SEPARATOR.join(parts))
