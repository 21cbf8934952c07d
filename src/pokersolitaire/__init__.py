"""Pokersolitaire - Poker hand scoring for a 5x5 solitaire grid."""

__version__ = "0.1.0"

from .board import (
    LINES,
    Board,
    BoardError,
    CellOccupied,
    DuplicateCard,
    Line,
    LineKind,
    LineScore,
    OutOfBounds,
    SweepResult,
    sweep,
)
from .card import Card, InvalidCard, Rank, Suit, card, cards
from .config import Config, ConfigError, get_config
from .deck import Deck, DeckEmpty
from .game import Game, GameOver
from .hand import Hand, HandCategory, HandFull, HandState, InvalidHand, classify
from .highscore import HighScoreError, HighScoreStore
from .scoring import SCORE_TABLE, ScoreEntry, label_for, points_for, score_for

__all__ = [
    "Board",
    "BoardError",
    "Card",
    "CellOccupied",
    "Config",
    "ConfigError",
    "Deck",
    "DeckEmpty",
    "DuplicateCard",
    "Game",
    "GameOver",
    "Hand",
    "HandCategory",
    "HandFull",
    "HandState",
    "HighScoreError",
    "HighScoreStore",
    "InvalidCard",
    "InvalidHand",
    "LINES",
    "Line",
    "LineKind",
    "LineScore",
    "OutOfBounds",
    "Rank",
    "SCORE_TABLE",
    "ScoreEntry",
    "Suit",
    "SweepResult",
    "card",
    "cards",
    "classify",
    "get_config",
    "label_for",
    "points_for",
    "score_for",
    "sweep",
]
