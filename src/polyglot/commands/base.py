"""Command pattern: the context commands run in, their result, their base class.

Commands hold no state of their own. Everything they touch (the search
engine over the loaded word list, the cache, the formatter, the config)
arrives through a CommandContext, and they report back with a
CommandResult instead of printing or raising for expected failures.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from polyglot.cache.base import Cache
from polyglot.config.schema import PolyglotConfig
from polyglot.corpus.models import Corpus
from polyglot.output.base import OutputData, OutputFormatter
from polyglot.search.engine import SearchEngine


@dataclass
class CommandContext:
    """Dependencies handed to a command.

    Attributes:
        engine: Search engine over the loaded word list.
        cache: Offline word-list cache (a NullCache when disabled).
        formatter: Where results are printed.
        config: Application configuration.
        verbose: Show metadata alongside results.
    """

    engine: SearchEngine
    cache: Cache
    formatter: OutputFormatter
    config: PolyglotConfig
    verbose: bool = False

    @property
    def corpus(self) -> Corpus:
        return self.engine.corpus


@dataclass
class CommandResult:
    """Outcome of a command: data on success, a message on failure."""

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, data: Any, **metadata: Any) -> "CommandResult":
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(cls, error: str, **metadata: Any) -> "CommandResult":
        return cls(success=False, error=error, metadata=metadata)

    def to_output_data(self, title: str | None = None) -> OutputData:
        """Wrap the result for an OutputFormatter."""
        if not self.success:
            return OutputData.from_error(self.error or "Unknown error", title=title)
        return OutputData.from_content(self.data, title=title, **self.metadata)


class BaseCommand(ABC):
    """A named operation over the word list.

    Subclasses provide ``name``, ``description`` and ``execute``; aliases
    are optional. Register them with ``CommandRegistry.register``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name used on the command line."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line summary for help and `polyglot config`."""

    @property
    def aliases(self) -> list[str]:
        return []

    @abstractmethod
    def execute(self, ctx: CommandContext, **kwargs: Any) -> CommandResult:
        """Run the command.

        Expected failures (bad index, empty deck) come back as
        ``CommandResult.fail``; loading problems propagate as PolyglotError.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
