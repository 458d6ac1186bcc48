"""Formatter interface shared by the rich, plain and JSON outputs."""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, TextIO

from polyglot.config.schema import OutputFormat
from polyglot.study.cards import Card

Content = str | list[str] | dict[str, Any]


@dataclass
class OutputData:
    """A titled block of content, or an error, ready to be formatted.

    ``metadata`` (matcher name, timings, ...) is only shown in verbose mode
    by the text formatters; JSON always includes it.
    """

    content: Content
    title: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    success: bool = True

    @classmethod
    def from_error(cls, error: str, title: str | None = None) -> "OutputData":
        return cls(content="", title=title, error=error, success=False)

    @classmethod
    def from_content(
        cls, content: Content, title: str | None = None, **metadata: Any
    ) -> "OutputData":
        return cls(content=content, title=title, metadata=metadata)


def card_to_dict(card: Card) -> dict[str, Any]:
    """Plain-data view of a card: kind, front and one entry per back row."""
    back = []
    for row in card.rows:
        forms = [
            {"label": form.label, "text": form.text, "speak_lang": form.speak_lang}
            for form in row.forms
        ]
        back.append(
            {"language": row.label, "code": row.code, "text": row.text, "forms": forms}
        )
    return {"kind": card.kind.value, "front": card.front, "back": back}


class OutputFormatter(ABC):
    """Renders OutputData, tables and cards to text for one output format.

    The ``format*`` methods only build strings; ``write`` and ``print``
    send them to the output stream, errors going to the error stream.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr
        self._verbose = verbose

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    @abstractmethod
    def format_type(self) -> OutputFormat: ...

    @abstractmethod
    def format(self, data: OutputData) -> str:
        """Render a block of content or an error."""

    @abstractmethod
    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        """Render rows as a table; columns default to the first row's keys.

        Text formatters render an empty ``rows`` as an empty string.
        """

    @abstractmethod
    def format_card(self, card: Card, *, flipped: bool = True) -> str:
        """Render a flashcard. Unflipped cards show only the front."""

    def write(self, text: str) -> None:
        """Send already formatted text to the output stream."""
        print(text, file=self._stream)

    def print(self, data: OutputData) -> None:
        stream = self._stream if data.success else self._error_stream
        print(self.format(data), file=stream)

    def print_error(self, message: str, title: str | None = None) -> None:
        self.print(OutputData.from_error(message, title))

    def print_content(
        self, content: Content, title: str | None = None, **metadata: Any
    ) -> None:
        self.print(OutputData.from_content(content, title, **metadata))
