"""Plain text output, for pipes and dumb terminals."""

from typing import Any

from polyglot.config.schema import OutputFormat
from polyglot.output.base import OutputData, OutputFormatter
from polyglot.study.cards import Card, TranslationRow

COLUMN_GAP = "  "


def _row_text(row: TranslationRow) -> str:
    # Gendered rows read "M: grand  F: grande"
    if len(row.forms) < 2:
        return row.text
    return COLUMN_GAP.join(
        f"{form.label}: {form.text}" if form.label else form.text for form in row.forms
    )


class PlainFormatter(OutputFormatter):
    """Unstyled text: underlined titles, aligned columns, one card row per line."""

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.PLAIN

    def format(self, data: OutputData) -> str:
        lines = [data.title, "-" * len(data.title), ""] if data.title else []

        if not data.success:
            lines.append(f"Error: {data.error or 'Unknown error'}")
            return "\n".join(lines)

        content = data.content
        if isinstance(content, dict):
            lines.extend(f"{key}: {value}" for key, value in content.items())
        elif isinstance(content, list):
            lines.extend(str(item) for item in content)
        else:
            lines.append(str(content))

        if self.verbose and data.metadata:
            lines.extend(["", "---"])
            lines.extend(f"{key}: {value}" for key, value in data.metadata.items())

        return "\n".join(lines)

    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        if not rows:
            return ""

        columns = columns or list(rows[0])
        cells = [[str(row.get(col, "")) for col in columns] for row in rows]
        widths = [
            max(len(col), *(len(line[i]) for line in cells))
            for i, col in enumerate(columns)
        ]

        def render(values: list[str]) -> str:
            return COLUMN_GAP.join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

        lines = [title, ""] if title else []
        lines.append(render(columns))
        lines.append(COLUMN_GAP.join("-" * w for w in widths))
        lines.extend(render(line) for line in cells)
        return "\n".join(lines)

    def format_card(self, card: Card, *, flipped: bool = True) -> str:
        header = f"[{card.kind.value}] {card.front}"
        if not flipped:
            return header

        width = max((len(row.label) for row in card.rows), default=0)
        lines = [header, ""]
        lines.extend(
            f"{row.label.ljust(width)}{COLUMN_GAP}{_row_text(row)}".rstrip()
            for row in card.rows
        )
        return "\n".join(lines)
