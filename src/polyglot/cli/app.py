"""Main CLI application for polyglot."""

from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from polyglot import __version__
from polyglot.cli.context import create_cache, create_context
from polyglot.cli.options import (
    CorpusOption,
    FormatOption,
    MatcherOption,
    NoCacheOption,
    TypeOption,
    VerboseOption,
)
from polyglot.commands import (
    CommandContext,
    CommandRegistry,
    SearchCommand,
    ShowCommand,
    StatsCommand,
    StudyCommand,
)
from polyglot.config import get_config
from polyglot.config.schema import OutputFormat
from polyglot.exceptions import PolyglotError
from polyglot.study.cards import render_card
from polyglot.study.deck import Deck
from polyglot.utils.logging import setup_logging

# Create Typer app
app = typer.Typer(
    name="polyglot",
    help="Multilingual flashcards with offline fuzzy search",
    add_completion=True,
    no_args_is_help=True,
)

# Rich console for output
console = Console()
err_console = Console(stderr=True)

STUDY_PROMPT = "[n]ext [p]rev [f]lip [s]huffle [q]uit"


def _exit_with_error(error: PolyglotError) -> NoReturn:
    """Print a polyglot error and exit with its code."""
    err_console.print(f"[red]Error:[/red] {escape(error.user_message)}")
    detail = str(error)
    if detail != error.user_message:
        err_console.print(f"[dim]{escape(detail)}[/dim]")
    if error.hint:
        err_console.print(escape(error.hint))
    raise typer.Exit(error.exit_code)


def _exit_with_failure(message: str | None) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message or 'Unknown error')}")
    raise typer.Exit(1)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"polyglot version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Multilingual flashcards with offline fuzzy search."""
    try:
        config = get_config()
        setup_logging(
            level=config.logging.level,
            log_file=config.logging.file,
            json_format=config.logging.json_format,
            use_color=config.output.color,
        )
    except PolyglotError as e:
        _exit_with_error(e)


@app.command()
def search(
    query: str = typer.Argument("", help="Text to look for, in any language."),
    entry_type: TypeOption = None,
    limit: int | None = typer.Option(
        None, "--limit", "-n", help="Maximum results (0 for all)."
    ),
    matcher: MatcherOption = None,
    corpus: CorpusOption = None,
    format: FormatOption = None,
    no_cache: NoCacheOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Search the word list and list matching cards."""
    try:
        ctx = create_context(
            source=corpus,
            matcher=matcher,
            output_format=format,
            no_cache=no_cache,
            verbose=verbose,
        )
        result = SearchCommand().execute(
            ctx, query=query, category=entry_type, limit=limit
        )
    except PolyglotError as e:
        _exit_with_error(e)

    if not result.success:
        _exit_with_failure(result.error)

    if ctx.formatter.format_type == OutputFormat.JSON:
        ctx.formatter.print(result.to_output_data(title="search"))
        return

    _print_search_output(ctx, result.data)


def _print_search_output(ctx: CommandContext, data: dict[str, Any]) -> None:
    """Print search results as a table with a summary line."""
    if data["count"] == 0:
        console.print("[dim]No matches[/dim]")
        return

    columns = ["index", "type", "english", "fr", "es", "it", "lat"]
    ctx.formatter.write(ctx.formatter.format_table(data["results"], columns=columns))

    if not data["active"]:
        summary = f"{data['count']} of {data['total_entries']} entries"
    else:
        summary = (
            f"{data['count']} of {data['total_matches']} matches"
            f" ({data['matcher']}, {data['search_time_ms']} ms)"
        )
    console.print(f"\n[dim]{escape(summary)}[/dim]")


@app.command()
def show(
    index: int = typer.Argument(..., help="Entry index, as listed by search."),
    corpus: CorpusOption = None,
    format: FormatOption = None,
    no_cache: NoCacheOption = False,
) -> None:
    """Show the card for one entry."""
    try:
        ctx = create_context(
            source=corpus,
            matcher=None,
            output_format=format,
            no_cache=no_cache,
        )
        result = ShowCommand().execute(ctx, index=index)
    except PolyglotError as e:
        _exit_with_error(e)

    if not result.success:
        _exit_with_failure(result.error)

    ctx.formatter.write(ctx.formatter.format_card(result.data["card"]))


@app.command()
def study(
    query: str | None = typer.Option(
        None, "--query", "-q", help="Only study entries matching this query."
    ),
    entry_type: TypeOption = None,
    seed: int | None = typer.Option(
        None, "--seed", help="Shuffle seed for a repeatable order."
    ),
    no_shuffle: bool = typer.Option(
        False, "--no-shuffle", help="Keep word list order."
    ),
    matcher: MatcherOption = None,
    corpus: CorpusOption = None,
    no_cache: NoCacheOption = False,
) -> None:
    """Study a deck of flashcards interactively."""
    try:
        ctx = create_context(
            source=corpus,
            matcher=matcher,
            output_format=None,
            no_cache=no_cache,
        )
        result = StudyCommand().execute(
            ctx,
            query=query,
            category=entry_type,
            seed=seed,
            shuffle=False if no_shuffle else None,
        )
    except PolyglotError as e:
        _exit_with_error(e)

    if not result.success:
        _exit_with_failure(result.error)

    _study_loop(ctx, result.data)


def _study_loop(ctx: CommandContext, deck: Deck) -> None:
    """Show one card at a time until the user quits."""
    flipped = False

    while True:
        card = render_card(ctx.corpus[deck.current])
        ctx.formatter.write(ctx.formatter.format_card(card, flipped=flipped))
        console.print(
            f"[dim]card {deck.position + 1}/{len(deck)}"
            f"  seen {deck.progress:.0%} of word list[/dim]"
        )

        key = typer.prompt(STUDY_PROMPT, default="n", show_default=False)
        match key.strip().lower():
            case "n" | "":
                deck.next()
                flipped = False
            case "p":
                deck.prev()
                flipped = False
            case "f":
                flipped = not flipped
            case "s":
                deck.reshuffle()
                flipped = False
            case "q":
                break
            case other:
                err_console.print(f"[yellow]Unknown key:[/yellow] {escape(other)}")

    console.print(f"Seen {len(deck.seen)} cards ({deck.progress:.0%} of word list)")


@app.command()
def stats(
    corpus: CorpusOption = None,
    matcher: MatcherOption = None,
    format: FormatOption = None,
    no_cache: NoCacheOption = False,
) -> None:
    """Show word list size and counts per type."""
    try:
        ctx = create_context(
            source=corpus,
            matcher=matcher,
            output_format=format,
            no_cache=no_cache,
        )
        result = StatsCommand().execute(ctx)
    except PolyglotError as e:
        _exit_with_error(e)

    if ctx.formatter.format_type == OutputFormat.JSON:
        ctx.formatter.print(result.to_output_data(title="stats"))
        return

    data = result.data
    ctx.formatter.print_content(
        {"Entries": data["entries"], "Matcher": data["matcher"]},
        title="Word list",
    )
    rows = [{"type": name, "entries": count} for name, count in data["types"].items()]
    if rows:
        ctx.formatter.write(ctx.formatter.format_table(rows, columns=["type", "entries"]))


@app.command("config")
def config_cmd(
    show_path: bool = typer.Option(
        False,
        "--path",
        "-p",
        help="Show config file path.",
    ),
) -> None:
    """Show current configuration."""
    from polyglot.config.defaults import get_config_path

    if show_path:
        console.print(str(get_config_path()))
        return

    config = get_config()
    console.print("[bold]polyglot configuration[/bold]\n")
    console.print(f"Config file: {get_config_path()}")
    console.print(f"Word list: {config.corpus.source}")
    console.print(f"Matcher: {config.search.matcher.value}")
    console.print(f"Cache enabled: {config.cache.enabled}")
    console.print(f"Output format: {config.output.default_format.value}")

    console.print("\n[bold]Search:[/bold]")
    for key, value in config.search.model_dump(mode="json").items():
        console.print(f"  {key}: {value}")

    console.print("\n[bold]Commands:[/bold]")
    for info in CommandRegistry.get_command_info():
        aliases = f" ({info['aliases']})" if info["aliases"] else ""
        console.print(f"  {info['name']}{aliases}: {info['description']}")


# Cache management subcommand group
cache_app = typer.Typer(help="Manage the offline word-list cache.")
app.add_typer(cache_app, name="cache")


@cache_app.command("stats")
def cache_stats() -> None:
    """Show cache statistics."""
    config = get_config()
    try:
        cache = create_cache(config)
        stats = cache.stats()
    except PolyglotError as e:
        _exit_with_error(e)

    console.print("[bold]Cache Statistics[/bold]\n")
    console.print(f"Enabled: {stats.get('enabled', config.cache.enabled)}")
    console.print(f"Cached word lists: {stats.get('total_entries', 0)}")
    console.print(f"Total bytes: {stats.get('total_bytes', 0)}")
    if stats.get("newest_entry"):
        console.print(f"Newest copy: {stats['newest_entry']}")
    if stats.get("db_path"):
        console.print(f"Database: {stats['db_path']}")


@cache_app.command("clear")
def cache_clear(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Remove every cached word list."""
    config = get_config()

    if not force:
        confirm = typer.confirm("Clear all cached word lists?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            return

    try:
        cleared = create_cache(config).clear()
    except PolyglotError as e:
        _exit_with_error(e)
    console.print(f"Cleared {cleared} cache entries")


@cache_app.command("prune")
def cache_prune() -> None:
    """Remove cached word lists older than their TTL."""
    config = get_config()
    try:
        removed = create_cache(config).cleanup_expired()
    except PolyglotError as e:
        _exit_with_error(e)
    console.print(f"Removed {removed} expired cache entries")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
