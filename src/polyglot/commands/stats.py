"""Word list statistics."""

from typing import Any

from polyglot.commands.base import BaseCommand, CommandContext, CommandResult
from polyglot.commands.registry import CommandRegistry


@CommandRegistry.register
class StatsCommand(BaseCommand):
    """Count entries overall and per type."""

    @property
    def name(self) -> str:
        return "stats"

    @property
    def description(self) -> str:
        return "Show word list size and counts per type"

    def execute(self, ctx: CommandContext, **kwargs: Any) -> CommandResult:
        counts = ctx.corpus.type_counts()
        types = {
            (name or "(none)"): count for name, count in sorted(counts.items())
        }
        return CommandResult.ok(
            data={
                "entries": len(ctx.corpus),
                "matcher": ctx.engine.matcher.name,
                "types": types,
            }
        )
