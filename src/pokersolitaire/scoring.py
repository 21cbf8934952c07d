"""Points and display labels for each hand category."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .hand import HandCategory


@dataclass(frozen=True, slots=True)
class ScoreEntry:
    """Points awarded for a hand category and how it is shown."""

    points: int
    label: str

    @property
    def points_text(self) -> str:
        """e.g. '1 point', '9 points'."""
        return f"{self.points} point" if self.points == 1 else f"{self.points} points"


# Changing these values changes game scoring, so persisted high scores
# are only comparable across releases with the same table.
SCORE_TABLE: Mapping[HandCategory, ScoreEntry] = MappingProxyType({
    HandCategory.NOTHING: ScoreEntry(0, "Nothing"),
    HandCategory.ONE_PAIR: ScoreEntry(1, "One Pair"),
    HandCategory.TWO_PAIR: ScoreEntry(2, "Two Pairs"),
    HandCategory.THREE_OF_A_KIND: ScoreEntry(3, "Three of a Kind"),
    HandCategory.STRAIGHT: ScoreEntry(4, "Straight"),
    HandCategory.FLUSH: ScoreEntry(6, "Flush"),
    HandCategory.FULL_HOUSE: ScoreEntry(9, "Full House"),
    HandCategory.FOUR_OF_A_KIND: ScoreEntry(25, "Four of a Kind"),
    HandCategory.STRAIGHT_FLUSH: ScoreEntry(50, "Straight Flush"),
    HandCategory.ROYAL_FLUSH: ScoreEntry(250, "Royal Flush"),
})

_missing = set(HandCategory) - set(SCORE_TABLE)
if _missing:
    raise RuntimeError(f"Score table has no entry for {sorted(_missing)}")


def score_for(category: HandCategory) -> ScoreEntry:
    """Look up the score table entry for a category."""
    return SCORE_TABLE[category]


def points_for(category: HandCategory) -> int:
    return SCORE_TABLE[category].points


def label_for(category: HandCategory) -> str:
    return SCORE_TABLE[category].label
