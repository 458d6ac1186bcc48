"""polyglot: multilingual vocabulary flashcards with fuzzy search."""

__version__ = "0.3.0"
