"""Styled terminal output built on Rich panels and tables."""

from io import StringIO
from typing import Any, TextIO

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from polyglot.config.schema import OutputFormat
from polyglot.corpus.models import EntryKind
from polyglot.output.base import OutputData, OutputFormatter
from polyglot.study.cards import Card, TranslationRow

_KIND_STYLES: dict[EntryKind, str] = {
    EntryKind.NOUN: "cyan",
    EntryKind.ADJECTIVE: "magenta",
    EntryKind.VERB: "green",
    EntryKind.PHRASE: "yellow",
}


def _pairs_table(pairs: dict[str, Any], style: str = "bold cyan") -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style=style)
    table.add_column()
    for key, value in pairs.items():
        table.add_row(str(key), str(value))
    return table


def _row_renderable(row: TranslationRow) -> Text:
    if len(row.forms) < 2:
        return Text(row.text)
    text = Text()
    for position, form in enumerate(row.forms):
        if position:
            text.append("   ")
        if form.label:
            text.append(f"{form.label} ", style="dim")
        text.append(form.text)
    return text


class RichFormatter(OutputFormatter):
    """Renders panels, tables and cards with Rich.

    The ``format*`` methods return uncolored text so their output can be
    captured; ``print`` sends renderables straight to the console, which
    keeps styling when the stream is a terminal.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        width: int | None = None,
        color: bool = True,
    ) -> None:
        super().__init__(stream, error_stream, verbose)
        self._width = width
        self._console = Console(file=self._stream, width=width, no_color=not color)
        self._error_console = Console(
            file=self._error_stream, width=width, no_color=not color
        )

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.RICH

    def _to_text(self, renderable: RenderableType) -> str:
        buffer = StringIO()
        Console(file=buffer, width=self._width, color_system=None).print(renderable)
        return buffer.getvalue().rstrip()

    def _build(self, data: OutputData) -> list[RenderableType]:
        if not data.success:
            message = Text(f"Error: {data.error or 'Unknown error'}", style="bold red")
            if data.title:
                return [Panel(message, title=data.title, border_style="red")]
            return [message]

        content = data.content
        body: RenderableType
        if isinstance(content, dict):
            body = _pairs_table(content)
        elif isinstance(content, list):
            body = Text("\n".join(str(item) for item in content))
        else:
            body = Text(str(content))

        parts: list[RenderableType] = [
            Panel(body, title=data.title) if data.title else body
        ]
        if self.verbose and data.metadata:
            parts.append(_pairs_table(data.metadata, style="dim"))
        return parts

    def format(self, data: OutputData) -> str:
        return "\n\n".join(self._to_text(part) for part in self._build(data))

    def _table(
        self, rows: list[dict[str, Any]], columns: list[str] | None, title: str | None
    ) -> Table:
        columns = columns or list(rows[0])
        table = Table(title=title)
        for column in columns:
            table.add_column(column, style="cyan" if column == "english" else None)
        for row in rows:
            table.add_row(*(str(row.get(column, "")) for column in columns))
        return table

    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        if not rows:
            return ""
        return self._to_text(self._table(rows, columns, title))

    def _card(self, card: Card, flipped: bool) -> Panel:
        style = _KIND_STYLES.get(card.kind, "white")
        front = Text(card.front, style=f"bold {style}", justify="center")
        if not flipped:
            return Panel(front, title=card.kind.value, border_style=style)

        back = Table(show_header=False, box=None, padding=(0, 1))
        back.add_column(style="bold")
        back.add_column()
        for row in card.rows:
            back.add_row(row.label, _row_renderable(row))

        body = Table.grid(padding=(1, 0))
        body.add_column()
        body.add_row(front)
        body.add_row(back)
        return Panel(body, title=card.kind.value, border_style=style)

    def format_card(self, card: Card, *, flipped: bool = True) -> str:
        return self._to_text(self._card(card, flipped))

    def write(self, text: str) -> None:
        # Pre-rendered text may contain brackets from the word list
        self._console.print(text, highlight=False, markup=False)

    def print(self, data: OutputData) -> None:
        console = self._console if data.success else self._error_console
        for part in self._build(data):
            console.print(part)
