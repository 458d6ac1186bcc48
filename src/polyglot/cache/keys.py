"""Cache keys and payload digests."""

import hashlib

CORPUS_KEY_PREFIX = "corpus"
KEY_DIGEST_LENGTH = 24


def digest(text: str, length: int = 64) -> str:
    """Hex SHA-256 of UTF-8 text, cut to ``length`` characters."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:length]


def generate_source_key(source: str) -> str:
    """Cache key for a remote word list: ``corpus:<digest of the URL>``.

    Surrounding whitespace in the URL does not change the key.
    """
    return f"{CORPUS_KEY_PREFIX}:{digest(source.strip(), KEY_DIGEST_LENGTH)}"


def parse_cache_key(key: str) -> dict[str, str]:
    """Split a cache key into ``kind`` and ``hash``."""
    kind, _, key_hash = key.partition(":")
    parsed = {"kind": kind}
    if key_hash:
        parsed["hash"] = key_hash
    return parsed
