"""Study session pieces: deck navigation and card layouts."""

from polyglot.study.cards import Card, Form, TranslationRow, front_text, render_card
from polyglot.study.deck import Deck

__all__ = [
    "Card",
    "Deck",
    "Form",
    "TranslationRow",
    "front_text",
    "render_card",
]
