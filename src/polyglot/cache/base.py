"""Cache interface for downloaded word lists."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any


@dataclass
class CacheEntry:
    """Last good copy of a remote word list.

    ``payload`` is the response body exactly as downloaded; ``metadata``
    holds what the loader learned about it (entry count, sha256).
    A ``ttl_seconds`` of None never expires.
    """

    key: str
    source: str
    payload: str
    fetched_at: datetime = field(default_factory=datetime.now)
    ttl_seconds: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def expires_at(self) -> datetime | None:
        if self.ttl_seconds is None:
            return None
        return self.fetched_at + timedelta(seconds=self.ttl_seconds)

    @property
    def is_expired(self) -> bool:
        expires_at = self.expires_at
        return expires_at is not None and datetime.now() > expires_at


class Cache(ABC):
    """Keyed store of word-list copies.

    Expired entries stay readable with ``allow_stale=True``: when the
    network is down an old word list beats none.
    """

    @abstractmethod
    def get(self, key: str, *, allow_stale: bool = False) -> CacheEntry | None:
        """Entry for ``key``; None if missing, or expired and not ``allow_stale``."""

    @abstractmethod
    def set(
        self,
        key: str,
        source: str,
        payload: str,
        ttl_seconds: int | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> CacheEntry:
        """Store (or replace) the copy under ``key`` and return it."""

    @abstractmethod
    def delete(self, key: str) -> bool: ...

    @abstractmethod
    def clear(self) -> int:
        """Drop every entry. Returns the number removed."""

    @abstractmethod
    def cleanup_expired(self) -> int:
        """Drop expired entries. Returns the number removed."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored entries, stale ones included."""

    @abstractmethod
    def stats(self) -> dict[str, Any]: ...

    def exists(self, key: str) -> bool:
        return self.get(key) is not None


class NullCache(Cache):
    """Stores nothing. Used with --no-cache and for local word lists."""

    def get(self, key: str, *, allow_stale: bool = False) -> CacheEntry | None:
        return None

    def set(
        self,
        key: str,
        source: str,
        payload: str,
        ttl_seconds: int | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> CacheEntry:
        return CacheEntry(
            key, source, payload, ttl_seconds=ttl_seconds, metadata=metadata or {}
        )

    def delete(self, key: str) -> bool:
        return False

    def clear(self) -> int:
        return 0

    def cleanup_expired(self) -> int:
        return 0

    def count(self) -> int:
        return 0

    def stats(self) -> dict[str, Any]:
        return {"enabled": False, "total_entries": 0, "hits": 0, "misses": 0}
