"""Word-list cache stored in a DuckDB database file."""

import contextlib
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import duckdb

from polyglot.cache.base import Cache, CacheEntry
from polyglot.exceptions import CacheConnectionError, CacheError

_TABLE = "word_lists"
_COLUMNS = "cache_key, source, payload, fetched_at, ttl_seconds, metadata"

_SCHEMA = f"""
    CREATE TABLE IF NOT EXISTS {_TABLE} (
        cache_key VARCHAR PRIMARY KEY,
        source VARCHAR NOT NULL,
        payload VARCHAR NOT NULL,
        fetched_at TIMESTAMP NOT NULL,
        ttl_seconds INTEGER,
        metadata JSON
    )
"""


def _load_metadata(raw: Any) -> dict[str, Any]:
    if not raw:
        return {}
    with contextlib.suppress(json.JSONDecodeError, TypeError):
        value = json.loads(raw)
        if isinstance(value, dict):
            return value
    return {}


class DuckDBCache(Cache):
    """Keeps the last good download of each remote word list.

    Entries are replaced on every successful download. Expired entries stay
    in the table (``get(..., allow_stale=True)`` still returns them) until
    ``cleanup_expired`` runs. Hit and miss counters live for the lifetime
    of the instance only.

    Args:
        db_path: Database file; None keeps everything in memory.
        default_ttl: Lifetime applied when ``set`` gets no ``ttl_seconds``.
        read_only: Open without write access; mutating calls raise CacheError.
    """

    def __init__(
        self,
        db_path: Path | str | None = None,
        default_ttl: int | None = 86400,
        *,
        read_only: bool = False,
    ) -> None:
        self._db_path = Path(db_path) if db_path else None
        self._default_ttl = default_ttl
        self._read_only = read_only
        self._hits = 0
        self._misses = 0
        self._conn: duckdb.DuckDBPyConnection | None = self._connect()

    @property
    def location(self) -> str:
        return str(self._db_path) if self._db_path else ":memory:"

    def _connect(self) -> duckdb.DuckDBPyConnection:
        try:
            if self._db_path is not None:
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = duckdb.connect(self.location, read_only=self._read_only)
            if not self._read_only:
                conn.execute(_SCHEMA)
        except (duckdb.Error, OSError) as e:
            raise CacheConnectionError(
                f"Cannot open cache database {self.location}: {e}"
            ) from e
        return conn

    def _run(
        self, sql: str, params: Sequence[Any] = (), *, action: str
    ) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            self._conn = self._connect()
        try:
            return self._conn.execute(sql, list(params) if params else None)
        except duckdb.Error as e:
            raise CacheError(f"Failed to {action}: {e}") from e

    def _require_writable(self, action: str) -> None:
        if self._read_only:
            raise CacheError(f"Cannot {action}: the cache is open read-only")

    def _rows(self, where: str = "", params: Sequence[Any] = ()) -> list[CacheEntry]:
        sql = f"SELECT {_COLUMNS} FROM {_TABLE} {where}"
        rows = self._run(sql, params, action="read cache").fetchall()
        return [
            CacheEntry(
                key=key,
                source=source,
                payload=payload,
                fetched_at=fetched_at,
                ttl_seconds=ttl_seconds,
                metadata=_load_metadata(metadata),
            )
            for key, source, payload, fetched_at, ttl_seconds, metadata in rows
        ]

    def get(self, key: str, *, allow_stale: bool = False) -> CacheEntry | None:
        found = self._rows("WHERE cache_key = ?", [key])
        entry = found[0] if found else None
        if entry is None or (entry.is_expired and not allow_stale):
            self._misses += 1
            return None
        self._hits += 1
        return entry

    def set(
        self,
        key: str,
        source: str,
        payload: str,
        ttl_seconds: int | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> CacheEntry:
        self._require_writable("store word list")
        entry = CacheEntry(
            key=key,
            source=source,
            payload=payload,
            ttl_seconds=self._default_ttl if ttl_seconds is None else ttl_seconds,
            metadata=metadata or {},
        )
        self._run(
            f"INSERT OR REPLACE INTO {_TABLE} ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
            [
                entry.key,
                entry.source,
                entry.payload,
                entry.fetched_at,
                entry.ttl_seconds,
                json.dumps(entry.metadata) if entry.metadata else None,
            ],
            action="store word list",
        )
        return entry

    def delete(self, key: str) -> bool:
        self._require_writable("delete entry")
        deleted = self._run(
            f"DELETE FROM {_TABLE} WHERE cache_key = ? RETURNING cache_key",
            [key],
            action="delete entry",
        ).fetchall()
        return bool(deleted)

    def clear(self) -> int:
        self._require_writable("clear cache")
        removed = self.count()
        self._run(f"DELETE FROM {_TABLE}", action="clear cache")
        return removed

    def cleanup_expired(self) -> int:
        # Expiry is decided in Python so it matches CacheEntry.is_expired
        self._require_writable("prune cache")
        expired = [entry.key for entry in self._rows() if entry.is_expired]
        for key in expired:
            self._run(
                f"DELETE FROM {_TABLE} WHERE cache_key = ?", [key], action="prune cache"
            )
        return len(expired)

    def count(self) -> int:
        row = self._run(f"SELECT COUNT(*) FROM {_TABLE}", action="count").fetchone()
        return row[0] if row else 0

    def stats(self) -> dict[str, Any]:
        row = self._run(
            f"SELECT COUNT(*), SUM(strlen(payload)), MIN(fetched_at), MAX(fetched_at)"
            f" FROM {_TABLE}",
            action="read cache stats",
        ).fetchone()
        total, size, oldest, newest = row if row else (0, None, None, None)
        lookups = self._hits + self._misses
        return {
            "enabled": True,
            "total_entries": total,
            "total_bytes": int(size or 0),
            "oldest_entry": oldest,
            "newest_entry": newest,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": self._hits / lookups if lookups else 0.0,
            "db_path": self.location,
            "default_ttl": self._default_ttl,
        }

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "DuckDBCache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"DuckDBCache(path={self.location!r}, entries={self.count()})"
