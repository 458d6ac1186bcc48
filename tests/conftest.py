"""Pytest fixtures for polyglot tests."""

import json
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from polyglot.config import reset_config
from polyglot.config.schema import PolyglotConfig
from polyglot.corpus.models import Corpus

SAMPLE_WORDS: list[dict[str, Any]] = [
    {
        "type": "noun",
        "en": "the apple",
        "fr": "pomme",
        "fr_art": "la",
        "es": "manzana",
        "es_art": "la",
        "it": "mela",
        "it_art": "la",
        "lat": "malum",
    },
    {
        "type": "noun",
        "en": "the house",
        "fr": "maison",
        "fr_art": "la",
        "es": "casa",
        "es_art": "la",
        "it": "casa",
        "it_art": "la",
        "lat": "domus",
    },
    {
        "type": "adj",
        "en": "big",
        "fr_m": "grand",
        "fr_f": "grande",
        "es_m": "grande",
        "es_f": "grande",
        "it_m": "grande",
        "it_f": "grande",
        "lat": "magnus",
    },
    {
        "type": "verb",
        "en": "to eat",
        "fr": "manger",
        "es": "comer",
        "it": "mangiare",
        "lat": "edere",
    },
    {
        "type": "phrase",
        "en": "good morning",
        "fr": "bonjour",
        "es": "buenos días",
        "it": "buongiorno",
        "lat": "salve",
    },
    {
        "type": "noun",
        "en": "the coffee",
        "fr": "café",
        "fr_art": "le",
        "es": "café",
        "es_art": "el",
        "it": "caffè",
        "it_art": "il",
        "lat": "coffea",
    },
]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_words() -> list[dict[str, Any]]:
    """Raw word list records."""
    return [dict(word) for word in SAMPLE_WORDS]


@pytest.fixture
def sample_corpus(sample_words: list[dict[str, Any]]) -> Corpus:
    """Corpus built from the sample word list."""
    return Corpus.from_records(sample_words)


@pytest.fixture
def words_file(temp_dir: Path, sample_words: list[dict[str, Any]]) -> Path:
    """Sample word list written to words.json."""
    path = temp_dir / "words.json"
    path.write_text(json.dumps(sample_words, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def default_config() -> PolyglotConfig:
    """Get default configuration."""
    return PolyglotConfig()


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Generator[None, None, None]:
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
[corpus]
source = "words.json"
timeout = 5.0

[search]
matcher = "offline"
min_query_length = 3

[cache]
enabled = true
default_ttl_seconds = 3600

[output]
default_format = "plain"
color = false
""")
    return config_path
