"""Search the word list.

Results are corpus indices ranked by the active matcher. Each row carries
the card's front and one column per language so a table reads like the
back of the card.
"""

from typing import Any

from polyglot.commands.base import BaseCommand, CommandContext, CommandResult
from polyglot.commands.registry import CommandRegistry
from polyglot.corpus.models import Corpus
from polyglot.study.cards import render_card


def summarize_entry(corpus: Corpus, index: int) -> dict[str, Any]:
    """Table row for an entry: index, type, front, one column per language."""
    entry = corpus[index]
    card = render_card(entry)
    row: dict[str, Any] = {
        "index": index,
        "type": entry.type or "",
        "english": card.front,
    }
    for translation in card.rows:
        row[translation.code] = translation.text
    return row


@CommandRegistry.register
class SearchCommand(BaseCommand):
    """Rank entries against a query."""

    @property
    def name(self) -> str:
        return "search"

    @property
    def description(self) -> str:
        return "Search the word list in any language"

    @property
    def aliases(self) -> list[str]:
        return ["find"]

    def execute(self, ctx: CommandContext, **kwargs: Any) -> CommandResult:
        """Execute the search command.

        Args:
            ctx: Command context with the search engine.
            **kwargs: Command arguments:
                - query: Raw query string (may be empty)
                - category: Entry type to keep, or None/"all"
                - limit: Maximum rows to return (default: config)

        Returns:
            CommandResult with ranked rows.
        """
        query = kwargs.get("query") or ""
        category = kwargs.get("category")
        limit = kwargs.get("limit")
        if limit is None:
            limit = ctx.config.search.default_limit
        if limit < 0:
            return CommandResult.fail(f"Limit must not be negative: {limit}")

        response = ctx.engine.search(query, category=category)
        shown = response.indices[:limit] if limit else response.indices

        results = [summarize_entry(ctx.corpus, index) for index in shown]

        return CommandResult.ok(
            data={
                "query": response.query,
                "normalized_query": response.normalized_query,
                "active": response.active,
                "matcher": response.matcher,
                "category": category,
                "results": results,
                "count": len(results),
                "total_matches": response.count,
                "total_entries": response.total_entries,
                "search_time_ms": round(response.search_time_ms, 2),
            }
        )
