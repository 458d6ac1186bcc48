"""Shuffled deck navigation for a study session."""

import random
from collections.abc import Iterable


class Deck:
    """An ordered run through a set of corpus indices.

    Navigation wraps around at both ends. Every card shown is recorded in
    ``seen``, which survives reshuffles so progress reflects the session,
    not the current order.
    """

    def __init__(
        self,
        indices: Iterable[int],
        corpus_size: int,
        *,
        shuffle: bool = True,
        seed: int | None = None,
    ) -> None:
        """Initialize the deck.

        Args:
            indices: Corpus indices to study (typically a search result).
            corpus_size: Size of the full corpus, the progress denominator.
            shuffle: Shuffle the indices before the first card.
            seed: Seed for reproducible shuffles.
        """
        self._rng = random.Random(seed)
        self._cards = list(indices)
        self._corpus_size = corpus_size
        self._position = 0
        self.seen: set[int] = set()

        if shuffle:
            self._rng.shuffle(self._cards)
        self._mark_seen()

    @property
    def cards(self) -> list[int]:
        """Corpus indices in current deck order."""
        return list(self._cards)

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> int | None:
        """Corpus index of the current card, or None for an empty deck."""
        if not self._cards:
            return None
        return self._cards[self._position]

    @property
    def progress(self) -> float:
        """Fraction of the corpus seen so far."""
        if self._corpus_size <= 0:
            return 0.0
        return len(self.seen) / self._corpus_size

    def next(self) -> int | None:
        """Advance one card, wrapping to the start."""
        if not self._cards:
            return None
        self._position = (self._position + 1) % len(self._cards)
        self._mark_seen()
        return self.current

    def prev(self) -> int | None:
        """Go back one card, wrapping to the end."""
        if not self._cards:
            return None
        self._position = (self._position - 1) % len(self._cards)
        self._mark_seen()
        return self.current

    def reshuffle(self) -> int | None:
        """Shuffle the deck again and return to the first card."""
        self._rng.shuffle(self._cards)
        self._position = 0
        self._mark_seen()
        return self.current

    def _mark_seen(self) -> None:
        if self._cards:
            self.seen.add(self._cards[self._position])

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)}, position={self._position})"
