"""JSON output for scripts.

Blocks and tables are wrapped in an envelope with a ``success`` flag;
cards are emitted as bare objects (see ``card_to_dict``).
"""

import json
from typing import Any, TextIO

from polyglot.config.schema import OutputFormat
from polyglot.output.base import OutputData, OutputFormatter, card_to_dict
from polyglot.study.cards import Card


class JSONFormatter(OutputFormatter):
    """Serializes output as JSON, keeping non-ASCII text readable by default."""

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        indent: int | None = 2,
        ensure_ascii: bool = False,
    ) -> None:
        super().__init__(stream, error_stream, verbose)
        self.indent = indent  # None for one line per document
        self.ensure_ascii = ensure_ascii

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.JSON

    def dumps(self, value: Any) -> str:
        # default=str covers paths, datetimes and enums in metadata
        return json.dumps(
            value, indent=self.indent, ensure_ascii=self.ensure_ascii, default=str
        )

    def format(self, data: OutputData) -> str:
        envelope: dict[str, Any] = {"success": data.success}
        if data.title:
            envelope["title"] = data.title
        if data.success:
            envelope["content"] = data.content
        else:
            envelope["error"] = data.error
        if data.metadata:
            envelope["metadata"] = data.metadata
        return self.dumps(envelope)

    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        envelope: dict[str, Any] = {"success": True, "rows": rows, "count": len(rows)}
        if title:
            envelope["title"] = title
        if columns:
            envelope["columns"] = columns
        return self.dumps(envelope)

    def format_card(self, card: Card, *, flipped: bool = True) -> str:
        card_data = card_to_dict(card)
        if not flipped:
            del card_data["back"]
        return self.dumps(card_data)
