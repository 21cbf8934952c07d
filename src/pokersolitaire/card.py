"""Card representations for poker solitaire."""

from enum import IntEnum
from dataclasses import dataclass
from typing import Self


class InvalidCard(ValueError):
    """Raised when a card is built from an out-of-range rank or suit."""


class Suit(IntEnum):
    """Card suits. Values don't affect hand classification."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        """Unicode symbol for the suit."""
        return ["♣", "♦", "♥", "♠"][self.value]

    @property
    def name_str(self) -> str:
        """Display name, e.g. 'Hearts'."""
        return self.name.title()

    @property
    def is_red(self) -> bool:
        return self in (Suit.DIAMONDS, Suit.HEARTS)

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. Higher value = higher rank, ace high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Short symbol for the rank."""
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @property
    def name_str(self) -> str:
        """Display name: '2'..'10', then 'Jack', 'Queen', 'King', 'Ace'."""
        if self.value <= 10:
            return str(self.value)
        return self.name.title()

    def __str__(self) -> str:
        return self.symbol


_SUIT_MAP = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES}

_RANK_MAP = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}


@dataclass(frozen=True, slots=True)
class Card:
    """A playing card with rank and suit.

    Plain ints are accepted and coerced, so ``Card(14, 3)`` is the ace of
    spades. Anything outside 2-14 / 0-3 raises InvalidCard.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        try:
            rank = Rank(self.rank)
        except ValueError:
            raise InvalidCard(f"Invalid rank: {self.rank!r} (expected 2-14)") from None
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise InvalidCard(f"Invalid suit: {self.suit!r} (expected 0-3)") from None
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", suit)

    @property
    def rank_str(self) -> str:
        return self.rank.name_str

    @property
    def suit_str(self) -> str:
        return self.suit.name_str

    @property
    def name(self) -> str:
        """Long form, e.g. 'Queen of Spades'."""
        return f"{self.rank_str} of {self.suit_str}"

    @property
    def code(self) -> str:
        """Image code for a presentation layer: suit initial + rank initial.

        Number cards keep the full number ('d10'), court cards and aces use
        their first letter ('hQ', 'sA').
        """
        return f"{self.suit_str[0].lower()}{self.rank.symbol}"

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank.symbol}{self.suit.symbol})"

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a card from string like 'As', 'Kh', '10d', '2c'.

        Rank: 2-10 (or T), J, Q, K, A
        Suit: c(lubs), d(iamonds), h(earts), s(pades)
        """
        s = s.strip().upper()
        if len(s) < 2:
            raise InvalidCard(f"Invalid card string: {s!r}")

        suit_char = s[-1]
        if suit_char not in _SUIT_MAP:
            raise InvalidCard(f"Invalid suit: {suit_char}")

        rank_str = s[:-1]
        if rank_str not in _RANK_MAP:
            raise InvalidCard(f"Invalid rank: {rank_str}")

        return cls(rank=_RANK_MAP[rank_str], suit=_SUIT_MAP[suit_char])


# Convenience function
def card(s: str) -> Card:
    """Shorthand for Card.from_str()."""
    return Card.from_str(s)


def cards(s: str) -> list[Card]:
    """Parse space or comma separated cards, e.g. 'As Kh, 10d'."""
    return [card(p) for p in s.replace(",", " ").split()]
