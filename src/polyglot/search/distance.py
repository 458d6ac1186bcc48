"""Bounded Levenshtein distance and token-level near-match lookup."""

import re

DEFAULT_MAX_DISTANCE = 2
DEFAULT_TOKEN_LIMIT = 80
MIN_TOKEN_LENGTH = 3

# Returned by best_token_distance when no token is within the bound.
NO_MATCH_DISTANCE = 99

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+", re.IGNORECASE | re.ASCII)


def bounded_distance(a: str, b: str, max_distance: int) -> int:
    """Levenshtein distance between ``a`` and ``b``, capped at a bound.

    Insertions, deletions and substitutions all cost 1. When the distance
    is provably greater than ``max_distance`` the function stops early and
    returns ``max_distance + 1``, so the result always equals
    ``min(distance(a, b), max_distance + 1)``.

    Two rows of the DP matrix are kept, sized by the shorter string.

    Args:
        a: First string.
        b: Second string.
        max_distance: Largest distance worth computing exactly.

    Returns:
        The edit distance, or ``max_distance + 1`` if it exceeds the bound.

    Raises:
        ValueError: If ``max_distance`` is negative.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    over = max_distance + 1

    # Length difference is a lower bound on the distance.
    if abs(len(a) - len(b)) > max_distance:
        return over

    # Row length follows the shorter string; distance is symmetric.
    if len(a) < len(b):
        a, b = b, a

    if not b:
        return len(a) if len(a) <= max_distance else over

    prev = list(range(len(b) + 1))
    cur = [0] * (len(b) + 1)

    for i, ca in enumerate(a, start=1):
        cur[0] = i
        row_min = i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            value = min(
                prev[j] + 1,  # deletion
                cur[j - 1] + 1,  # insertion
                prev[j - 1] + cost,  # substitution
            )
            cur[j] = value
            if value < row_min:
                row_min = value

        # Row minima never decrease, so nothing below can get back under.
        if row_min > max_distance:
            return over

        prev, cur = cur, prev

    result = prev[len(b)]
    return result if result <= max_distance else over


def tokenize(text: str, min_length: int = MIN_TOKEN_LENGTH) -> list[str]:
    """Split text on runs of non-alphanumeric characters.

    Tokens shorter than ``min_length`` are dropped. Order of appearance is
    preserved.
    """
    return [t for t in _TOKEN_SPLIT.split(text) if len(t) >= min_length]


def best_token_distance(
    query: str,
    haystack: str,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    token_limit: int = DEFAULT_TOKEN_LIMIT,
) -> int:
    """Smallest bounded distance between ``query`` and any haystack token.

    Only the first ``token_limit`` tokens are examined, which keeps the cost
    per entry flat no matter how long its text is. Tokens whose length
    differs from the query by more than ``max_distance`` are skipped without
    running the DP.

    Returns:
        The best distance found (0 stops the scan), or ``NO_MATCH_DISTANCE``
        if no examined token is within ``max_distance``.
    """
    best = NO_MATCH_DISTANCE
    query_len = len(query)

    for token in tokenize(haystack)[:token_limit]:
        if abs(len(token) - query_len) > max_distance:
            continue
        d = bounded_distance(query, token, max_distance)
        if d < best:
            best = d
        if best == 0:
            return 0

    return best if best <= max_distance else NO_MATCH_DISTANCE
