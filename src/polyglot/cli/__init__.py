"""Command-line interface.

Usage:
    polyglot search apple
    polyglot study --type noun --seed 7
"""

from polyglot.cli.app import app, main
from polyglot.cli.context import create_context

__all__ = ["app", "main", "create_context"]
