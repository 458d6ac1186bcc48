"""Default file locations, environment variable names and config template."""

import os
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "polyglot"

ENV_CONFIG_PATH: Final[str] = "POLYGLOT_CONFIG"
ENV_CORPUS_SOURCE: Final[str] = "POLYGLOT_CORPUS"
ENV_MATCHER: Final[str] = "POLYGLOT_MATCHER"
ENV_LOG_LEVEL: Final[str] = "POLYGLOT_LOG_LEVEL"
ENV_NO_CACHE: Final[str] = "POLYGLOT_NO_CACHE"

# Written on first run; keep in step with config.schema.
DEFAULT_CONFIG_TOML: Final[str] = """\
# polyglot configuration

[corpus]
# words.json to study: a file path or an http(s) URL
source = "words.json"
timeout = 10.0

[search]
# auto picks rapidfuzz when installed, otherwise the offline matcher
matcher = "auto"
# queries shorter than this list every entry (3 or more)
min_query_length = 3
max_distance = 2
token_limit = 80
fuzzy_threshold = 0.35
default_limit = 20

[cache]
# offline copies of downloaded word lists
enabled = true
default_ttl_seconds = 86400

[study]
shuffle = true

[output]
default_format = "rich"
color = true

[logging]
level = "WARNING"
json_format = false
"""


def _xdg_dir(variable: str, fallback: str) -> Path:
    base = os.environ.get(variable)
    return Path(base) if base else Path.home() / fallback


def get_config_path() -> Path:
    """Config file: $POLYGLOT_CONFIG, else ~/.config/polyglot/config.toml.

    ``XDG_CONFIG_HOME`` replaces ``~/.config`` when set.
    """
    override = os.environ.get(ENV_CONFIG_PATH)
    if override:
        return Path(override)
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / APP_NAME / "config.toml"


def get_cache_path() -> Path:
    """Cache database: ~/.cache/polyglot/cache.duckdb.

    ``XDG_CACHE_HOME`` replaces ``~/.cache`` when set.
    """
    return _xdg_dir("XDG_CACHE_HOME", ".cache") / APP_NAME / "cache.duckdb"
