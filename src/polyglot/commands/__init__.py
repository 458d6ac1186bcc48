"""Command implementations for polyglot.

Usage:
    from polyglot.commands import CommandRegistry

    cmd = CommandRegistry.get_instance("search")
    result = cmd.execute(context, query="apple")
"""

from polyglot.commands.base import BaseCommand, CommandContext, CommandResult
from polyglot.commands.registry import CommandRegistry

# Import commands to trigger registration
from polyglot.commands.search import SearchCommand, summarize_entry
from polyglot.commands.show import ShowCommand
from polyglot.commands.stats import StatsCommand
from polyglot.commands.study import StudyCommand

__all__ = [
    # Base classes
    "BaseCommand",
    "CommandContext",
    "CommandResult",
    # Registry
    "CommandRegistry",
    # Commands
    "SearchCommand",
    "ShowCommand",
    "StatsCommand",
    "StudyCommand",
    "summarize_entry",
]
