"""Builds the CommandContext a subcommand runs in from its CLI options."""

import logging

from polyglot.cache import DuckDBCache, NullCache
from polyglot.cache.base import Cache
from polyglot.cli.options import resolve_format
from polyglot.commands.base import CommandContext
from polyglot.config import get_config
from polyglot.config.defaults import get_cache_path
from polyglot.config.schema import MatcherType, OutputFormat, PolyglotConfig
from polyglot.corpus import is_remote, load_corpus
from polyglot.corpus.models import Corpus
from polyglot.output import get_formatter
from polyglot.output.base import OutputFormatter
from polyglot.search.engine import SearchEngine
from polyglot.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)


def create_cache(config: PolyglotConfig | None = None, enabled: bool = True) -> Cache:
    """The configured DuckDB cache, or a NullCache when caching is off."""
    config = config or get_config()
    if not (enabled and config.cache.enabled):
        return NullCache()
    return DuckDBCache(
        config.cache.path or get_cache_path(),
        default_ttl=config.cache.default_ttl_seconds,
    )


def create_engine(
    corpus: Corpus,
    matcher: MatcherType | None = None,
    config: PolyglotConfig | None = None,
) -> SearchEngine:
    settings = (config or get_config()).search
    return SearchEngine(
        corpus,
        matcher or settings.matcher,
        min_query_length=settings.min_query_length,
        fuzzy_threshold=settings.fuzzy_threshold,
        max_distance=settings.max_distance,
        token_limit=settings.token_limit,
    )


def create_formatter(
    output_format: OutputFormat | None = None,
    verbose: bool = False,
    config: PolyglotConfig | None = None,
) -> OutputFormatter:
    config = config or get_config()
    chosen = resolve_format(output_format, config.output.default_format)
    if chosen is OutputFormat.RICH:
        return get_formatter(chosen, verbose=verbose, color=config.output.color)
    return get_formatter(chosen, verbose=verbose)


def create_context(
    *,
    source: str | None = None,
    matcher: MatcherType | None = None,
    output_format: OutputFormat | None = None,
    no_cache: bool = False,
    verbose: bool = False,
    config: PolyglotConfig | None = None,
) -> CommandContext:
    """Load the word list and wire up engine, cache and formatter.

    ``source`` defaults to the configured word list. Only remote sources
    go through the cache; local files are read fresh every time.

    Raises:
        CorpusError: If the word list cannot be loaded.
        MatcherUnavailableError: If the requested matcher is not installed.
    """
    config = config or get_config()
    source = source or config.corpus.source
    cache = create_cache(config, enabled=not no_cache and is_remote(source))

    corpus = load_corpus(
        source,
        cache=cache,
        timeout=config.corpus.timeout,
        ttl_seconds=config.cache.default_ttl_seconds,
    )
    engine = create_engine(corpus, matcher, config)
    log_with_context(
        logger,
        logging.DEBUG,
        "context ready",
        source=source,
        entries=len(corpus),
        matcher=engine.matcher.name,
    )

    return CommandContext(
        engine=engine,
        cache=cache,
        formatter=create_formatter(output_format, verbose, config),
        config=config,
        verbose=verbose,
    )
