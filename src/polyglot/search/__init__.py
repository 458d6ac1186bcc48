"""Search system for polyglot.

This module provides text normalization, a bounded edit-distance matcher,
the three-tier offline scorer and the engine that picks between the
rapidfuzz matcher and the offline one.
"""

from polyglot.search.base import Matcher
from polyglot.search.distance import (
    NO_MATCH_DISTANCE,
    best_token_distance,
    bounded_distance,
    tokenize,
)
from polyglot.search.engine import SearchEngine, SearchResponse, create_matcher
from polyglot.search.fuzzy import RAPIDFUZZ_AVAILABLE, RapidFuzzMatcher
from polyglot.search.normalize import build_search_text, normalize
from polyglot.search.offline import (
    MatchTier,
    OfflineMatcher,
    ScoredMatch,
    offline_search,
    score_entries,
)

__all__ = [
    # Engine
    "SearchEngine",
    "SearchResponse",
    "create_matcher",
    # Matchers
    "Matcher",
    "OfflineMatcher",
    "RapidFuzzMatcher",
    "RAPIDFUZZ_AVAILABLE",
    # Offline scoring
    "MatchTier",
    "ScoredMatch",
    "offline_search",
    "score_entries",
    # Distance
    "NO_MATCH_DISTANCE",
    "best_token_distance",
    "bounded_distance",
    "tokenize",
    # Normalization
    "build_search_text",
    "normalize",
]
