"""Build a study deck from a search."""

from typing import Any

from polyglot.commands.base import BaseCommand, CommandContext, CommandResult
from polyglot.commands.registry import CommandRegistry
from polyglot.study.deck import Deck


@CommandRegistry.register
class StudyCommand(BaseCommand):
    """Prepare a deck of the entries matching a query and category.

    The interactive loop lives in the CLI; this command only decides which
    cards are in the deck and in what order.
    """

    @property
    def name(self) -> str:
        return "study"

    @property
    def description(self) -> str:
        return "Study a shuffled deck of cards"

    @property
    def aliases(self) -> list[str]:
        return ["deck"]

    def execute(self, ctx: CommandContext, **kwargs: Any) -> CommandResult:
        """Execute the study command.

        Args:
            ctx: Command context with the search engine.
            **kwargs: Command arguments:
                - query: Optional query narrowing the deck
                - category: Entry type to keep, or None/"all"
                - seed: Shuffle seed (default: config)
                - shuffle: Shuffle the deck (default: config)

        Returns:
            CommandResult whose data is the Deck.
        """
        study_config = ctx.config.study
        seed = kwargs.get("seed")
        if seed is None:
            seed = study_config.seed
        shuffle = kwargs.get("shuffle")
        if shuffle is None:
            shuffle = study_config.shuffle

        response = ctx.engine.search(kwargs.get("query"), category=kwargs.get("category"))
        if not response.indices:
            return CommandResult.fail("No cards match; nothing to study")

        deck = Deck(
            response.indices,
            len(ctx.corpus),
            shuffle=shuffle,
            seed=seed,
        )
        return CommandResult.ok(deck, matcher=response.matcher, cards=len(deck))
