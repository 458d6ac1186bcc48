"""Errors raised by polyglot.

Each family owns a decade of process exit codes (cache 10s, config 20s,
corpus 30s, search 40s, commands 50s). ``user_message`` is what the CLI
prints; ``hint`` is an optional next step shown beneath it. The exception
text itself carries the technical detail.

Search never raises for user input: an odd query just matches nothing.
"""


class PolyglotError(Exception):
    """Base class for every polyglot error."""

    exit_code: int = 1
    user_message: str = "Something went wrong"
    hint: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message
        if hint:
            self.hint = hint


class CacheError(PolyglotError):
    exit_code = 10
    user_message = "The word-list cache failed"
    hint = "Run with --no-cache, or reset it with `polyglot cache clear`."


class CacheConnectionError(CacheError):
    """The DuckDB file could not be opened (locked, corrupt, unwritable)."""

    exit_code = 11
    user_message = "Cannot open the cache database"


class ConfigError(PolyglotError):
    exit_code = 20
    user_message = "Could not read the configuration"
    hint = "Check the file shown by `polyglot config --path`."


class ConfigValidationError(ConfigError):
    """The TOML parsed but a value is out of range or of the wrong type."""

    exit_code = 22
    user_message = "The configuration has invalid values"


class CorpusError(PolyglotError):
    exit_code = 30
    user_message = "Failed to load words"


class CorpusNotFoundError(CorpusError):
    exit_code = 31
    user_message = "Word list not found"
    hint = "Pass --corpus with a path or URL, or set corpus.source in the config."


class CorpusFormatError(CorpusError):
    """The payload is not a JSON array of objects."""

    exit_code = 32
    user_message = "Word list is malformed"


class CorpusFetchError(CorpusError):
    """Download failed and there is no cached copy to fall back to."""

    exit_code = 33
    user_message = "Could not download the word list and no offline copy is cached"
    hint = "Connect once so a copy can be cached, or pass a local --corpus file."


class SearchError(PolyglotError):
    exit_code = 40
    user_message = "Search failed"


class MatcherUnavailableError(SearchError):
    """A matcher backend was forced but its library is not installed."""

    exit_code = 41
    user_message = "Requested search matcher is not available"


class CommandError(PolyglotError):
    exit_code = 50
    user_message = "The command could not run"


class InvalidArgumentError(CommandError):
    exit_code = 51
    user_message = "Bad command-line argument"
