"""Load configuration: the TOML file first, then POLYGLOT_* variables."""

import contextlib
import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from polyglot.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_CORPUS_SOURCE,
    ENV_LOG_LEVEL,
    ENV_MATCHER,
    ENV_NO_CACHE,
    get_config_path,
)
from polyglot.config.schema import MatcherType, PolyglotConfig
from polyglot.exceptions import ConfigError, ConfigValidationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_config: PolyglotConfig | None = None


def _override_corpus(config: PolyglotConfig, value: str) -> None:
    config.corpus.source = value


def _override_matcher(config: PolyglotConfig, value: str) -> None:
    # Unknown names keep the configured matcher.
    with contextlib.suppress(ValueError):
        config.search.matcher = MatcherType(value.lower())


def _override_log_level(config: PolyglotConfig, value: str) -> None:
    config.logging.level = value.upper()


def _override_no_cache(config: PolyglotConfig, value: str) -> None:
    if value.lower() in _TRUTHY:
        config.cache.enabled = False


_ENV_OVERRIDES: dict[str, Callable[[PolyglotConfig, str], None]] = {
    ENV_CORPUS_SOURCE: _override_corpus,
    ENV_MATCHER: _override_matcher,
    ENV_LOG_LEVEL: _override_log_level,
    ENV_NO_CACHE: _override_no_cache,
}


def apply_env_overrides(
    config: PolyglotConfig,
    environ: Mapping[str, str] | None = None,
) -> PolyglotConfig:
    """Apply POLYGLOT_* variables on top of ``config`` (in place)."""
    env = os.environ if environ is None else environ
    for name, apply in _ENV_OVERRIDES.items():
        value = env.get(name)
        if value:
            apply(config, value)
    return config


def write_default_config(path: Path) -> None:
    """Write the commented default config file, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot create config file {path}: {e}") from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def load_config(
    config_path: Path | None = None,
    *,
    create_if_missing: bool = True,
) -> PolyglotConfig:
    """Load and validate the configuration.

    A missing file is written out with the defaults unless
    ``create_if_missing`` is False, in which case the defaults are used
    without touching the disk.

    Raises:
        ConfigError: If the file cannot be written, read or parsed.
        ConfigValidationError: If a value fails validation.
    """
    path = config_path or get_config_path()

    if not path.exists() and create_if_missing:
        write_default_config(path)

    data = _read_toml(path) if path.exists() else {}

    try:
        config = PolyglotConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {path}: {e}") from e

    return apply_env_overrides(config)


def get_config() -> PolyglotConfig:
    """The process-wide configuration, loaded on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration so the next get_config() reloads it."""
    global _config
    _config = None
