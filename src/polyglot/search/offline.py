"""Offline fuzzy search.

This is the matcher used when rapidfuzz is not installed. It ranks entries
with three tiers tried in order, each one only when the previous one did not
match:

1. exact substring of the canonical search text (score ``pos / 10000``),
2. overlap of 3+ character query tokens (score ``1 - hits / tokens``),
3. a token within edit distance 2 (score ``2 + distance / 10``).

Lower scores rank first; ties keep corpus order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from polyglot.search.base import Matcher
from polyglot.search.distance import (
    DEFAULT_MAX_DISTANCE,
    DEFAULT_TOKEN_LIMIT,
    MIN_TOKEN_LENGTH,
    best_token_distance,
)

if TYPE_CHECKING:
    from polyglot.corpus.models import Corpus


class MatchTier(str, Enum):
    """Which rule matched an entry."""

    SUBSTRING = "substring"
    TOKEN_OVERLAP = "token_overlap"
    EDIT_DISTANCE = "edit_distance"


@dataclass(frozen=True)
class ScoredMatch:
    """One matching entry. Lower score is more relevant."""

    index: int
    score: float
    tier: MatchTier


def score_text(
    query: str,
    query_tokens: list[str],
    text: str,
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    token_limit: int = DEFAULT_TOKEN_LIMIT,
) -> tuple[float, MatchTier] | None:
    """Score one canonical search text against a normalized query.

    ``query_tokens`` is the whitespace split of the query; it is passed in
    so callers scoring a whole corpus split the query only once.

    Returns:
        ``(score, tier)``, or None when no tier matches.
    """
    if not text:
        return None

    pos = text.find(query)
    if pos != -1:
        return pos / 10000, MatchTier.SUBSTRING

    hits = sum(1 for t in query_tokens if len(t) >= MIN_TOKEN_LENGTH and t in text)
    if hits > 0:
        return 1 - hits / max(1, len(query_tokens)), MatchTier.TOKEN_OVERLAP

    best = best_token_distance(query, text, max_distance, token_limit)
    if best <= max_distance:
        return 2 + best / 10, MatchTier.EDIT_DISTANCE

    return None


def score_entries(
    query: str,
    corpus: "Corpus",
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    token_limit: int = DEFAULT_TOKEN_LIMIT,
) -> list[ScoredMatch]:
    """Score every entry of the corpus and return the matches, best first.

    Args:
        query: Normalized query string.
        corpus: Corpus whose precomputed search texts are scanned.
        max_distance: Edit distance accepted by the third tier.
        token_limit: Tokens per entry examined by the third tier.

    Returns:
        Matches sorted by ascending score. The sort is stable, so entries
        with equal scores stay in corpus order.
    """
    query_tokens = query.split()
    matches: list[ScoredMatch] = []

    for index, text in enumerate(corpus.search_texts):
        scored = score_text(
            query,
            query_tokens,
            text,
            max_distance=max_distance,
            token_limit=token_limit,
        )
        if scored is not None:
            matches.append(ScoredMatch(index=index, score=scored[0], tier=scored[1]))

    matches.sort(key=lambda m: m.score)
    return matches


def offline_search(
    query: str,
    corpus: "Corpus",
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    token_limit: int = DEFAULT_TOKEN_LIMIT,
) -> list[int]:
    """Rank corpus indices for a normalized query, best match first.

    Entries that match no tier are left out.
    """
    return [
        m.index
        for m in score_entries(
            query, corpus, max_distance=max_distance, token_limit=token_limit
        )
    ]


class OfflineMatcher(Matcher):
    """Matcher that needs no third-party fuzzy library."""

    name = "offline"

    def __init__(
        self,
        corpus: "Corpus",
        max_distance: int = DEFAULT_MAX_DISTANCE,
        token_limit: int = DEFAULT_TOKEN_LIMIT,
    ) -> None:
        super().__init__(corpus)
        self.max_distance = max_distance
        self.token_limit = token_limit

    def search(self, query: str) -> list[int]:
        return offline_search(
            query,
            self._corpus,
            max_distance=self.max_distance,
            token_limit=self.token_limit,
        )
