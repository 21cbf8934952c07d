"""Deck of cards for poker solitaire."""

import random
from dataclasses import dataclass, field

from .card import Card, Rank, Suit


class DeckEmpty(ValueError):
    """Raised when dealing from an exhausted deck."""


@dataclass
class Deck:
    """A standard 52-card deck dealt from the top, one card at a time."""

    rng: random.Random = field(default_factory=random.Random, repr=False)
    cards: list[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cards:
            self.reset()

    def reset(self) -> None:
        """Reset to a full, unshuffled 52-card deck."""
        self.cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Gather all 52 cards back and shuffle them."""
        self.reset()
        self.rng.shuffle(self.cards)

    def deal_one(self) -> Card:
        """Deal a single card."""
        if not self.cards:
            raise DeckEmpty("No cards left in the deck")
        return self.cards.pop()

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: Card) -> bool:
        return card in self.cards
