"""Search engine.

This module owns the corpus and the selected matcher, applies the
activation threshold and the category filter, and picks the matcher
backend once, when the engine is built.
"""

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from polyglot.config.schema import MatcherType
from polyglot.exceptions import MatcherUnavailableError
from polyglot.search import fuzzy
from polyglot.search.base import Matcher
from polyglot.search.distance import DEFAULT_MAX_DISTANCE, DEFAULT_TOKEN_LIMIT
from polyglot.search.normalize import normalize
from polyglot.search.offline import OfflineMatcher
from polyglot.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from polyglot.corpus.models import Corpus

logger = get_logger(__name__)

DEFAULT_MIN_QUERY_LENGTH = 3

# Category value meaning "no category filter"
ALL_CATEGORIES = "all"


@dataclass
class SearchResponse:
    """Response from a search operation."""

    query: str
    normalized_query: str
    indices: list[int]
    active: bool  # False when the query was too short to narrow anything
    matcher: str
    total_entries: int
    search_time_ms: float
    category: str | None = None

    @property
    def count(self) -> int:
        return len(self.indices)


def create_matcher(
    corpus: "Corpus",
    matcher_type: MatcherType | str = MatcherType.AUTO,
    *,
    fuzzy_threshold: float = 0.35,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    token_limit: int = DEFAULT_TOKEN_LIMIT,
) -> Matcher:
    """Build the matcher for a corpus.

    ``auto`` prefers rapidfuzz and quietly drops to the offline matcher
    when it is not installed.

    Raises:
        MatcherUnavailableError: If ``rapidfuzz`` is requested explicitly
            but cannot be imported.
    """
    matcher_type = MatcherType(matcher_type)

    if matcher_type == MatcherType.RAPIDFUZZ and not fuzzy.RAPIDFUZZ_AVAILABLE:
        raise MatcherUnavailableError(
            "rapidfuzz matcher requested but rapidfuzz is not installed",
            hint="Install rapidfuzz or use --matcher offline.",
        )

    if matcher_type != MatcherType.OFFLINE and fuzzy.RAPIDFUZZ_AVAILABLE:
        return fuzzy.RapidFuzzMatcher(corpus, threshold=fuzzy_threshold)

    if matcher_type == MatcherType.AUTO:
        logger.info("rapidfuzz unavailable, using offline matcher")

    return OfflineMatcher(corpus, max_distance=max_distance, token_limit=token_limit)


class SearchEngine:
    """Search over one loaded corpus.

    The engine is the single piece of search state: the corpus, its
    canonical search texts (held by the corpus) and the matcher built for
    it. Replacing the corpus rebuilds the matcher.
    """

    def __init__(
        self,
        corpus: "Corpus",
        matcher_type: MatcherType | str = MatcherType.AUTO,
        *,
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        fuzzy_threshold: float = 0.35,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        token_limit: int = DEFAULT_TOKEN_LIMIT,
    ) -> None:
        """Initialize the search engine.

        Args:
            corpus: The loaded corpus.
            matcher_type: Which matcher backend to use.
            min_query_length: Shortest normalized query that narrows results.
            fuzzy_threshold: Distance threshold for the rapidfuzz matcher.
            max_distance: Edit distance accepted by the offline matcher.
            token_limit: Tokens per entry examined by the offline matcher.

        Raises:
            ValueError: If min_query_length is below 3.
        """
        if min_query_length < DEFAULT_MIN_QUERY_LENGTH:
            raise ValueError(
                f"min_query_length must be at least {DEFAULT_MIN_QUERY_LENGTH},"
                f" got {min_query_length}"
            )
        self.matcher_type = MatcherType(matcher_type)
        self.min_query_length = min_query_length
        self.fuzzy_threshold = fuzzy_threshold
        self.max_distance = max_distance
        self.token_limit = token_limit

        self._corpus = corpus
        self._matcher = self._build_matcher(corpus)

    @property
    def corpus(self) -> "Corpus":
        return self._corpus

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    def _build_matcher(self, corpus: "Corpus") -> Matcher:
        matcher = create_matcher(
            corpus,
            self.matcher_type,
            fuzzy_threshold=self.fuzzy_threshold,
            max_distance=self.max_distance,
            token_limit=self.token_limit,
        )
        log_with_context(
            logger,
            logging.DEBUG,
            "search matcher ready",
            matcher=matcher.name,
            entries=len(corpus),
        )
        return matcher

    def set_corpus(self, corpus: "Corpus") -> None:
        """Swap in a reloaded corpus and rebuild the matcher for it."""
        self._corpus = corpus
        self._matcher = self._build_matcher(corpus)

    def is_active(self, normalized_query: str) -> bool:
        """Whether a normalized query is long enough to narrow results."""
        return len(normalized_query) >= self.min_query_length

    def search_indices(self, normalized_query: str) -> list[int]:
        """Ranked indices for a normalized query.

        Inactive queries return every index in corpus order without
        touching the matcher.
        """
        if not self.is_active(normalized_query):
            return self._corpus.indices()
        return self._matcher.search(normalized_query)

    def filter_category(self, indices: list[int], category: str | None) -> list[int]:
        """Keep only indices whose entry type equals ``category``.

        ``None`` and ``"all"`` keep everything. Order is preserved.
        """
        if not category or category == ALL_CATEGORIES:
            return list(indices)
        return [i for i in indices if self._corpus[i].type == category]

    def search(self, query: str | None, category: str | None = None) -> SearchResponse:
        """Search the corpus.

        Args:
            query: Raw query as typed.
            category: Optional entry type to restrict results to.

        Returns:
            SearchResponse with ordered corpus indices.
        """
        start_time = time.perf_counter()

        normalized = normalize(query)
        active = self.is_active(normalized)
        indices = self.filter_category(self.search_indices(normalized), category)

        search_time = (time.perf_counter() - start_time) * 1000

        return SearchResponse(
            query=query or "",
            normalized_query=normalized,
            indices=indices,
            active=active,
            matcher=self._matcher.name,
            total_entries=len(self._corpus),
            search_time_ms=search_time,
            category=category,
        )
