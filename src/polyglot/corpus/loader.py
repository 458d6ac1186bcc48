"""Loading the word list from disk or over HTTP.

Remote word lists are fetched network-first: a fresh download wins and is
written to the offline cache, and when the download fails the last cached
copy is served instead, however old it is.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from polyglot.cache.base import Cache
from polyglot.cache.keys import digest, generate_source_key
from polyglot.corpus.models import Corpus, Entry
from polyglot.exceptions import CorpusFetchError, CorpusFormatError, CorpusNotFoundError
from polyglot.utils.logging import get_logger, log_with_context
from polyglot.utils.retry import download_retry

logger = get_logger(__name__)


def is_remote(source: str | Path) -> bool:
    """Whether a corpus source is an http(s) URL."""
    return isinstance(source, str) and source.lower().startswith(
        ("http://", "https://")
    )


def parse_entries(raw: Any) -> list[Entry]:
    """Validate decoded JSON into entries.

    Raises:
        CorpusFormatError: If the payload is not a list of objects.
    """
    if not isinstance(raw, list):
        raise CorpusFormatError(
            f"Word list must be a JSON array, got {type(raw).__name__}"
        )

    entries: list[Entry] = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise CorpusFormatError(f"Entry {position} is not an object")
        try:
            entries.append(Entry.model_validate(item))
        except ValidationError as e:
            raise CorpusFormatError(f"Entry {position} is invalid: {e}") from e
    return entries


def parse_payload(text: str) -> Corpus:
    """Decode a JSON word list into a corpus.

    Raises:
        CorpusFormatError: If the text is not valid JSON or not a word list.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorpusFormatError(f"Word list is not valid JSON: {e}") from e
    return Corpus(parse_entries(raw))


def load_corpus(
    source: str | Path,
    *,
    cache: Cache | None = None,
    timeout: float = 10.0,
    attempts: int = 3,
    ttl_seconds: int | None = None,
    client: httpx.Client | None = None,
) -> Corpus:
    """Load a corpus from a file path or an http(s) URL.

    Args:
        source: File path or URL of a words.json document.
        cache: Offline cache for remote sources (ignored for files).
        timeout: HTTP timeout in seconds.
        attempts: Download attempts before falling back to the cache.
        ttl_seconds: TTL for the cached copy (cache default if None).
        client: HTTP client to use; a temporary one is created if None.

    Returns:
        The loaded corpus with canonical search texts computed.

    Raises:
        CorpusNotFoundError: If a file source does not exist.
        CorpusFormatError: If the word list is malformed.
        CorpusFetchError: If a remote source fails and nothing is cached.
    """
    if is_remote(source):
        return _load_remote(
            str(source),
            cache=cache,
            timeout=timeout,
            attempts=attempts,
            ttl_seconds=ttl_seconds,
            client=client,
        )
    return _load_file(Path(source))


def _load_file(path: Path) -> Corpus:
    if not path.is_file():
        raise CorpusNotFoundError(f"Word list not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CorpusNotFoundError(f"Cannot read word list {path}: {e}") from e

    corpus = parse_payload(text)
    log_with_context(
        logger, logging.INFO, "loaded word list", source=str(path), entries=len(corpus)
    )
    return corpus


def _fetch(client: httpx.Client, url: str, attempts: int) -> str:
    @download_retry(attempts=attempts)
    def fetch_once() -> str:
        response = client.get(url)
        response.raise_for_status()
        return response.text

    return fetch_once()


def _load_remote(
    url: str,
    *,
    cache: Cache | None,
    timeout: float,
    attempts: int,
    ttl_seconds: int | None,
    client: httpx.Client | None,
) -> Corpus:
    key = generate_source_key(url)

    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
                text = _fetch(own_client, url, attempts)
        else:
            text = _fetch(client, url, attempts)
    except httpx.HTTPError as e:
        cached = cache.get(key, allow_stale=True) if cache is not None else None
        if cached is None:
            raise CorpusFetchError(f"Failed to fetch {url}: {e}") from e

        log_with_context(
            logger,
            logging.WARNING,
            "download failed, using cached word list",
            source=url,
            fetched_at=cached.fetched_at.isoformat(),
            error=str(e),
        )
        return parse_payload(cached.payload)

    # Parse before caching so a broken download never replaces a good copy.
    corpus = parse_payload(text)

    if cache is not None:
        cache.set(
            key,
            url,
            text,
            ttl_seconds=ttl_seconds,
            metadata={"entries": len(corpus), "sha256": digest(text)},
        )

    log_with_context(
        logger, logging.INFO, "downloaded word list", source=url, entries=len(corpus)
    )
    return corpus
