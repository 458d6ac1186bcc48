"""Configuration management."""

from polyglot.config.loader import get_config, load_config, reset_config
from polyglot.config.schema import MatcherType, PolyglotConfig

__all__ = ["MatcherType", "PolyglotConfig", "get_config", "load_config", "reset_config"]
