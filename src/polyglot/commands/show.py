"""Show a single card."""

from typing import Any

from polyglot.commands.base import BaseCommand, CommandContext, CommandResult
from polyglot.commands.registry import CommandRegistry
from polyglot.study.cards import render_card


@CommandRegistry.register
class ShowCommand(BaseCommand):
    """Render the card for one corpus index."""

    @property
    def name(self) -> str:
        return "show"

    @property
    def description(self) -> str:
        return "Show the card for an entry"

    def execute(self, ctx: CommandContext, **kwargs: Any) -> CommandResult:
        index = kwargs.get("index")
        if index is None:
            return CommandResult.fail("No entry index provided")

        size = len(ctx.corpus)
        if not 0 <= index < size:
            return CommandResult.fail(
                f"Index {index} is out of range (word list has {size} entries)"
            )

        entry = ctx.corpus[index]
        return CommandResult.ok(
            data={"index": index, "card": render_card(entry)},
            type=entry.type or "",
        )
