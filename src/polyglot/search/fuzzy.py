"""Fuzzy search backed by rapidfuzz.

This is the primary matcher. It scores each entry's canonical search text
with ``partial_ratio`` so a query can match anywhere in the text, and keeps
entries whose similarity clears a cutoff derived from a 0-1 distance
threshold (0.35 by default).
"""

from typing import TYPE_CHECKING

from polyglot.search.base import Matcher

try:
    from rapidfuzz import fuzz, process

    RAPIDFUZZ_AVAILABLE = True
except ImportError:
    RAPIDFUZZ_AVAILABLE = False

if TYPE_CHECKING:
    from polyglot.corpus.models import Corpus


class RapidFuzzMatcher(Matcher):
    """Approximate matcher over canonical search texts using rapidfuzz."""

    name = "rapidfuzz"

    def __init__(
        self,
        corpus: "Corpus",
        threshold: float = 0.35,
    ) -> None:
        """Initialize the matcher.

        Args:
            corpus: Corpus to search.
            threshold: Distance threshold between 0 (exact) and 1 (anything).
                Entries scoring below ``(1 - threshold) * 100`` are dropped.
        """
        if not RAPIDFUZZ_AVAILABLE:
            raise ImportError(
                "rapidfuzz is required for fuzzy search. "
                "Install with: pip install rapidfuzz"
            )
        super().__init__(corpus)
        self.threshold = threshold
        self.min_score = (1.0 - threshold) * 100.0
        self._choices = list(corpus.search_texts)

    def search(self, query: str) -> list[int]:
        """Return indices of entries similar to the query, best first."""
        if not query or not self._choices:
            return []

        matches = process.extract(
            query,
            self._choices,
            scorer=fuzz.partial_ratio,
            score_cutoff=self.min_score,
            limit=None,
        )

        # (choice, score, index); equal scores keep corpus order
        ranked = sorted(matches, key=lambda m: (-m[1], m[2]))
        return [index for _, _, index in ranked]
