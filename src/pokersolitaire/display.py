"""Rich display layer for the board and its line scores."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .board import BOARD_SIZE, Board, SweepResult
from .card import Card
from .hand import HandCategory
from .scoring import SCORE_TABLE

EMPTY_CELL = "[dim]··[/dim]"

console = Console()


def format_card(c: Card, color: bool = True) -> str:
    """Format a card with color based on suit."""
    symbol = f"{c.rank.symbol}{c.suit.symbol}"
    if not color:
        return symbol
    if c.suit.is_red:
        return f"[bold red]{symbol}[/bold red]"
    return f"[bold white]{symbol}[/bold white]"


def format_cards(cards: list[Card], color: bool = True) -> str:
    return " ".join(format_card(c, color) for c in cards)


def render_board(board: Board, color: bool = True) -> Table:
    """The grid with 1-based row/column headers."""
    table = Table(title="Board", show_lines=True)
    table.add_column("", style="dim", justify="right")
    for col in range(BOARD_SIZE):
        table.add_column(str(col + 1), justify="center", min_width=4)

    for r, row in enumerate(board.rows()):
        cells = [format_card(c, color) if c is not None else EMPTY_CELL for c in row]
        table.add_row(str(r + 1), *cells)
    return table


def _points_style(category: HandCategory) -> str:
    if category >= HandCategory.STRAIGHT_FLUSH:
        return "bold magenta"
    if category >= HandCategory.FLUSH:
        return "bold green"
    if category > HandCategory.NOTHING:
        return "green"
    return "dim"


def render_scores(result: SweepResult, show_empty: bool = True) -> Table:
    """One row per scored line plus the total."""
    table = Table(title="Scores")
    table.add_column("Line", style="cyan")
    table.add_column("Hand")
    table.add_column("Points", justify="right")

    for ls in result.lines:
        if not show_empty and ls.category is HandCategory.NOTHING:
            continue
        style = _points_style(ls.category)
        table.add_row(ls.line.name, f"[{style}]{ls.hand_label}[/{style}]", str(ls.points))

    table.add_row("", "", "")
    table.add_row("[bold]Total[/bold]", "", f"[bold]{result.total}[/bold]")
    return table


def render_score_table() -> Table:
    table = Table(title="Points per Hand")
    table.add_column("Hand", style="cyan")
    table.add_column("Points", justify="right")
    for category in reversed(HandCategory):
        entry = SCORE_TABLE[category]
        table.add_row(entry.label, str(entry.points))
    return table


def render_next_card(c: Card | None, high_score: int, color: bool = True) -> Panel:
    body = format_card(c, color) if c is not None else "[dim]Game over[/dim]"
    return Panel(
        f"Next card: {body}    High score: [bold yellow]{high_score}[/bold yellow]",
        expand=False,
    )
