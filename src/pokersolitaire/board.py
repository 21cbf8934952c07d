"""The 5x5 board and the sweep that scores its twelve lines."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .card import Card
from .hand import Hand, HandCategory
from .scoring import score_for

BOARD_SIZE = 5


class BoardError(ValueError):
    """Base class for illegal board placements."""


class OutOfBounds(BoardError):
    pass


class CellOccupied(BoardError):
    pass


class DuplicateCard(BoardError):
    pass


class LineKind(Enum):
    """The three kinds of scored line."""

    ROW = "Row"
    COLUMN = "Column"
    DIAGONAL = "Diagonal"


@dataclass(frozen=True, slots=True)
class Line:
    """One scored line of the board. ``index`` is zero-based."""

    kind: LineKind
    index: int

    @property
    def name(self) -> str:
        """Display name, e.g. 'Row 1' or 'Diagonal 2'."""
        return f"{self.kind.value} {self.index + 1}"

    def cells(self) -> list[tuple[int, int]]:
        """The five (row, col) positions along this line.

        Diagonal 0 runs top-left to bottom-right, diagonal 1 top-right to
        bottom-left.
        """
        n = BOARD_SIZE
        match self.kind:
            case LineKind.ROW:
                return [(self.index, col) for col in range(n)]
            case LineKind.COLUMN:
                return [(row, self.index) for row in range(n)]
            case LineKind.DIAGONAL if self.index == 0:
                return [(i, i) for i in range(n)]
            case LineKind.DIAGONAL:
                return [(i, n - 1 - i) for i in range(n)]

    def __str__(self) -> str:
        return self.name


# Rows, then columns, then both diagonals. Displays rely on this order.
LINES: tuple[Line, ...] = (
    *(Line(LineKind.ROW, i) for i in range(BOARD_SIZE)),
    *(Line(LineKind.COLUMN, i) for i in range(BOARD_SIZE)),
    Line(LineKind.DIAGONAL, 0),
    Line(LineKind.DIAGONAL, 1),
)


class Board:
    """A 5x5 grid of cards; empty cells hold None."""

    def __init__(self) -> None:
        self._grid: list[list[Card | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Card | None]]) -> Board:
        """Build a board from five rows of five cells."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise BoardError(f"Board needs {BOARD_SIZE} rows of {BOARD_SIZE} cells")
        board = cls()
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                if cell is not None:
                    board.place(r, c, cell)
        return board

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise OutOfBounds(f"Position ({row}, {col}) is off the board")

    def get(self, row: int, col: int) -> Card | None:
        self._check_bounds(row, col)
        return self._grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    def place(self, row: int, col: int, card: Card) -> None:
        """Put a card on an empty cell."""
        self._check_bounds(row, col)
        if self._grid[row][col] is not None:
            raise CellOccupied(f"{_cell_name(row, col)} already holds {self._grid[row][col]}")
        if card in self:
            raise DuplicateCard(f"{card} is already on the board")
        self._grid[row][col] = card

    def clear(self) -> None:
        for row in self._grid:
            row[:] = [None] * BOARD_SIZE

    def empty_cells(self) -> list[tuple[int, int]]:
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self._grid[r][c] is None
        ]

    @property
    def placed_count(self) -> int:
        return sum(cell is not None for row in self._grid for cell in row)

    @property
    def is_full(self) -> bool:
        return self.placed_count == BOARD_SIZE * BOARD_SIZE

    def line_cards(self, line: Line) -> list[Card]:
        """Occupied cards along a line, empty cells skipped."""
        return [self._grid[r][c] for r, c in line.cells() if self._grid[r][c] is not None]

    def rows(self) -> list[list[Card | None]]:
        return [list(row) for row in self._grid]

    def __contains__(self, card: Card) -> bool:
        return any(card in row for row in self._grid)


def _cell_name(row: int, col: int) -> str:
    return f"Row {row + 1}, column {col + 1}"


@dataclass(frozen=True, slots=True)
class LineScore:
    """How one line scored."""

    line: Line
    category: HandCategory
    points: int

    @property
    def hand_label(self) -> str:
        return score_for(self.category).label

    @property
    def label(self) -> str:
        """e.g. 'Row 1: Full House (9 points)'."""
        return f"{self.line.name}: {self.hand_label} ({score_for(self.category).points_text})"


@dataclass(frozen=True)
class SweepResult:
    """Scores for all twelve lines, in LINES order, plus the total."""

    lines: list[LineScore]
    total: int

    def by_category(self) -> Counter[HandCategory]:
        """How many lines landed in each category."""
        return Counter(ls.category for ls in self.lines)

    @property
    def best(self) -> LineScore:
        """Highest-scoring line; the earliest one wins ties."""
        return max(self.lines, key=lambda ls: ls.points)

    def __getitem__(self, line: Line) -> LineScore:
        for ls in self.lines:
            if ls.line == line:
                return ls
        raise KeyError(line)


def sweep(board: Board) -> SweepResult:
    """Score every row, column and diagonal of the board.

    Each line is classified from its occupied cells only, so partially
    filled lines can still score pairs and trips. Classification errors
    propagate.
    """
    hand = Hand()
    scores: list[LineScore] = []
    total = 0
    for line in LINES:
        hand.reset()
        for c in board.line_cards(line):
            hand.add(c)
        category = hand.evaluate()
        points = score_for(category).points
        scores.append(LineScore(line, category, points))
        total += points
    return SweepResult(lines=scores, total=total)
