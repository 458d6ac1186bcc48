"""Result rendering: rich panels for people, plain text for pipes, JSON for scripts.

Usage:
    from polyglot.output import get_formatter

    formatter = get_formatter("plain")
    formatter.write(formatter.format_table([{"index": 0, "english": "apple"}]))
"""

from typing import Any

from polyglot.config.schema import OutputFormat
from polyglot.output.base import OutputData, OutputFormatter, card_to_dict
from polyglot.output.json_fmt import JSONFormatter
from polyglot.output.plain import PlainFormatter
from polyglot.output.rich_fmt import RichFormatter

FORMATTERS: dict[OutputFormat, type[OutputFormatter]] = {
    OutputFormat.RICH: RichFormatter,
    OutputFormat.PLAIN: PlainFormatter,
    OutputFormat.JSON: JSONFormatter,
}

__all__ = [
    "FORMATTERS",
    "JSONFormatter",
    "OutputData",
    "OutputFormat",
    "OutputFormatter",
    "PlainFormatter",
    "RichFormatter",
    "card_to_dict",
    "get_formatter",
]


def get_formatter(
    format_type: OutputFormat | str, verbose: bool = False, **options: Any
) -> OutputFormatter:
    """Instantiate the formatter for ``format_type`` (case-insensitive).

    ``options`` go to the formatter's constructor, e.g. ``indent`` for JSON
    or ``width`` for rich.

    Raises:
        ValueError: If ``format_type`` names no known format.
    """
    if isinstance(format_type, OutputFormat):
        return FORMATTERS[format_type](verbose=verbose, **options)
    try:
        kind = OutputFormat(format_type.lower())
    except ValueError:
        raise ValueError(f"Unknown format type: {format_type}") from None
    return FORMATTERS[kind](verbose=verbose, **options)
