"""Typer option declarations reused by several subcommands."""

from typing import Annotated

import typer

from polyglot.config.schema import MatcherType, OutputFormat

CorpusOption = Annotated[
    str | None,
    typer.Option(
        "--corpus",
        "-c",
        help="Word list file or http(s) URL. Overrides the configured source.",
    ),
]

MatcherOption = Annotated[
    MatcherType | None,
    typer.Option(
        "--matcher",
        "-m",
        help="auto tries rapidfuzz first; offline forces the built-in fallback.",
        case_sensitive=False,
    ),
]

FormatOption = Annotated[
    OutputFormat | None,
    typer.Option("--format", help="rich, plain or json.", case_sensitive=False),
]

TypeOption = Annotated[
    str | None,
    typer.Option("--type", "-t", help="noun, adj, verb, phrase or all."),
]

NoCacheOption = Annotated[
    bool,
    typer.Option("--no-cache", help="Skip the offline copy of remote word lists."),
]

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Include matcher and timing details."),
]


def resolve_format(
    requested: OutputFormat | None, configured: OutputFormat | str
) -> OutputFormat:
    """The --format value if given, else the configured default."""
    return requested if requested is not None else OutputFormat(configured)
