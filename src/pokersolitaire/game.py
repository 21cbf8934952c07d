"""Game session: deal one card at a time onto the board until it fills."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from .board import BOARD_SIZE, Board, SweepResult, sweep
from .card import Card
from .deck import Deck

logger = logging.getLogger(__name__)

CELLS = BOARD_SIZE * BOARD_SIZE


class GameOver(ValueError):
    """Raised when placing a card while no game is in progress."""


@dataclass
class Game:
    """A single-player poker solitaire session.

    Call ``new_game()`` to shuffle and deal the first card, then
    ``place(row, col)`` until ``is_over``. The board is rescored after
    every placement, so ``score()`` is always a live running total.
    """

    rng: random.Random = field(default_factory=random.Random)
    high_score: int = 0

    # Callbacks
    on_place: Callable[[int, int, Card, SweepResult], None] | None = None
    on_game_over: Callable[[SweepResult, bool], None] | None = None

    board: Board = field(default_factory=Board, init=False)
    next_card: Card | None = field(default=None, init=False)
    new_high_score: bool = field(default=False, init=False)
    games_played: int = field(default=0, init=False)
    _deck: Deck = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._deck = Deck(rng=self.rng)

    def new_game(self) -> None:
        """Clear the board, reshuffle and deal the first card."""
        self.board.clear()
        self._deck.shuffle()
        self.next_card = self._deck.deal_one()
        self.new_high_score = False
        self.games_played += 1
        logger.debug("Game %d started, first card %s", self.games_played, self.next_card)

    @property
    def in_progress(self) -> bool:
        return self.next_card is not None

    @property
    def is_over(self) -> bool:
        return self.board.is_full

    @property
    def cards_placed(self) -> int:
        return self.board.placed_count

    def score(self) -> SweepResult:
        """Score the board as it stands."""
        return sweep(self.board)

    def place(self, row: int, col: int) -> SweepResult:
        """Place the next card at (row, col), zero-based, and rescore.

        Board errors propagate and leave the game untouched.
        """
        card = self.next_card
        if card is None:
            raise GameOver("No game in progress; start a new game first")

        self.board.place(row, col, card)
        logger.debug("Placed %s at (%d, %d)", card, row, col)
        self.next_card = None if self.board.is_full else self._deck.deal_one()

        result = self.score()
        if self.on_place:
            self.on_place(row, col, card, result)

        if self.is_over:
            self._finish(result)
        return result

    def _finish(self, result: SweepResult) -> None:
        if result.total > self.high_score:
            self.high_score = result.total
            self.new_high_score = True
        logger.info(
            "Game %d over: %d points%s",
            self.games_played,
            result.total,
            " (new high score)" if self.new_high_score else "",
        )
        if self.on_game_over:
            self.on_game_over(result, self.new_high_score)
