"""Poker hand classification for grid lines of zero to five cards."""

from collections import Counter
from enum import Enum, IntEnum
from typing import Iterable

from .card import Card, Rank

MAX_HAND_SIZE = 5

_WHEEL = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE)
_ROYAL = (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE)


class InvalidHand(ValueError):
    """Raised for a hand with a duplicate card or more than five cards."""


class HandFull(ValueError):
    """Raised when adding a card to a hand that already holds five."""


class HandCategory(IntEnum):
    """Hand categories from weakest to strongest."""

    NOTHING = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def classify(cards: Iterable[Card]) -> HandCategory:
    """Classify 0-5 distinct cards into a single HandCategory.

    Straights and flushes need all five cards, so shorter hands can only
    score on repeated ranks. The result depends only on which cards are
    present, never on their order.

    Raises:
        InvalidHand: more than five cards, or the same card twice.
    """
    cards = list(cards)
    if len(cards) > MAX_HAND_SIZE:
        raise InvalidHand(f"Hand can hold at most {MAX_HAND_SIZE} cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        dupes = sorted({str(c) for c in cards if cards.count(c) > 1})
        raise InvalidHand(f"Duplicate card(s) in hand: {', '.join(dupes)}")

    by_count = _classify_counts(cards)
    if len(cards) < MAX_HAND_SIZE or by_count is not HandCategory.NOTHING:
        return by_count

    ranks = tuple(sorted(c.rank for c in cards))
    is_flush = len({c.suit for c in cards}) == 1
    is_straight = _is_straight(ranks)

    if is_flush and is_straight:
        if ranks == _ROYAL:
            return HandCategory.ROYAL_FLUSH
        return HandCategory.STRAIGHT_FLUSH
    if is_flush:
        return HandCategory.FLUSH
    if is_straight:
        return HandCategory.STRAIGHT
    return HandCategory.NOTHING


def _classify_counts(cards: list[Card]) -> HandCategory:
    """Classify by rank multiplicity alone, e.g. [3, 2] is a full house."""
    counts = sorted(Counter(c.rank for c in cards).values(), reverse=True)
    if not counts:
        return HandCategory.NOTHING

    if counts[0] == 4:
        return HandCategory.FOUR_OF_A_KIND
    if counts[0] == 3:
        if len(counts) > 1 and counts[1] == 2:
            return HandCategory.FULL_HOUSE
        return HandCategory.THREE_OF_A_KIND
    if counts[0] == 2:
        if len(counts) > 1 and counts[1] == 2:
            return HandCategory.TWO_PAIR
        return HandCategory.ONE_PAIR
    return HandCategory.NOTHING


def _is_straight(ranks: tuple[Rank, ...]) -> bool:
    """Check five distinct ascending ranks for a straight.

    A-2-3-4-5 (the wheel) is the one place the ace plays low.
    """
    if ranks == _WHEEL:
        return True
    return ranks[-1] - ranks[0] == 4 and len(set(ranks)) == 5


class HandState(Enum):
    """Lifecycle of a Hand: empty until the first card is added."""

    EMPTY = "empty"
    ACCUMULATING = "accumulating"


class Hand:
    """Collects the cards of one grid line and classifies them on demand.

    A single Hand is reused across lines: ``reset()`` between lines,
    ``add()`` each occupied cell, then ``evaluate()``.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = []
        for c in cards:
            self.add(c)

    @property
    def state(self) -> HandState:
        return HandState.ACCUMULATING if self._cards else HandState.EMPTY

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def is_full(self) -> bool:
        return len(self._cards) >= MAX_HAND_SIZE

    def add(self, card: Card) -> None:
        """Add a card. Raises HandFull when five are already held."""
        if self.is_full:
            raise HandFull(f"Hand already holds {MAX_HAND_SIZE} cards, cannot add {card}")
        self._cards.append(card)

    def reset(self) -> None:
        """Drop all cards and return to the empty state."""
        self._cards.clear()

    def evaluate(self) -> HandCategory:
        """Classify the held cards. Does not change the hand."""
        return classify(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(c) for c in self._cards)})"
