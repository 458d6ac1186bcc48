"""Offline cache for downloaded word lists, stored in DuckDB.

Usage:
    from polyglot.cache import DuckDBCache, generate_source_key

    cache = DuckDBCache()
    key = generate_source_key("https://example.com/words.json")

    entry = cache.get(key, allow_stale=True)
    if entry:
        print(f"Cached copy from {entry.fetched_at}")
"""

from polyglot.cache.base import Cache, CacheEntry, NullCache
from polyglot.cache.duckdb_cache import DuckDBCache
from polyglot.cache.keys import digest, generate_source_key, parse_cache_key

__all__ = [
    # Base classes
    "Cache",
    "CacheEntry",
    "NullCache",
    # DuckDB implementation
    "DuckDBCache",
    # Keys
    "digest",
    "generate_source_key",
    "parse_cache_key",
]
