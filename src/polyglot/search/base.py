"""Matcher interface shared by the search backends."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polyglot.corpus.models import Corpus


class Matcher(ABC):
    """Ranks corpus entries against a query.

    Every backend takes an already-normalized query that passed the
    activation threshold and returns corpus indices, most relevant first.
    Backends are interchangeable: callers never need to know which one
    they hold.
    """

    name: str = "matcher"

    def __init__(self, corpus: "Corpus") -> None:
        self._corpus = corpus

    @property
    def corpus(self) -> "Corpus":
        """The corpus this matcher searches."""
        return self._corpus

    @abstractmethod
    def search(self, query: str) -> list[int]:
        """Return matching corpus indices, best first.

        Args:
            query: Normalized query string.

        Returns:
            Ordered list of corpus indices. Empty when nothing matches.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entries={len(self._corpus)})"
