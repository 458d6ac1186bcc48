"""Pydantic models for polyglot configuration."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class MatcherType(str, Enum):
    """Search matcher backends."""

    AUTO = "auto"
    RAPIDFUZZ = "rapidfuzz"
    OFFLINE = "offline"


class OutputFormat(str, Enum):
    """How command results are printed."""

    RICH = "rich"
    PLAIN = "plain"
    JSON = "json"


class CorpusConfig(BaseModel):
    """Where the word list comes from."""

    source: str = Field(default="words.json", description="File path or http(s) URL")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout, seconds")


class SearchConfig(BaseModel):
    """Matcher choice and offline scoring limits."""

    matcher: MatcherType = MatcherType.AUTO
    # Shorter queries list the whole word list; 3 is the floor
    min_query_length: int = Field(default=3, ge=3)
    max_distance: int = Field(default=2, ge=0)
    token_limit: int = Field(default=80, ge=0)
    fuzzy_threshold: float = Field(default=0.35, ge=0.0, le=1.0)
    default_limit: int = Field(default=20, ge=0, description="0 shows every match")


class CacheConfig(BaseModel):
    """Offline copies of downloaded word lists."""

    enabled: bool = True
    path: Path | None = None  # None: see config.defaults.get_cache_path
    default_ttl_seconds: int | None = Field(default=86400, ge=0)


class StudyConfig(BaseModel):
    shuffle: bool = True
    seed: int | None = None


class OutputConfig(BaseModel):
    default_format: OutputFormat = OutputFormat.RICH
    color: bool = True


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    file: Path | None = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class PolyglotConfig(BaseModel):
    """Root configuration, one section per TOML table."""

    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    study: StudyConfig = Field(default_factory=StudyConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
