"""Terminal front end for poker solitaire."""

import logging
import random
from pathlib import Path

import typer
from rich.prompt import Prompt

from .board import BOARD_SIZE, Board, sweep
from .card import Card, card
from .config import Config, get_config
from .display import (
    console,
    format_cards,
    render_board,
    render_next_card,
    render_score_table,
    render_scores,
)
from .game import Game
from .hand import classify
from .highscore import HighScoreStore
from .scoring import score_for

app = typer.Typer(help="Poker solitaire: score poker hands on a 5x5 grid")

EMPTY_MARKERS = {".", "_"}

_config: Config | None = None


def _get_config() -> Config:
    return _config if _config is not None else get_config()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Path to a TOML config file"),
):
    """Set up logging and configuration."""
    global _config
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _config = None
    if config_file is not None:
        try:
            _config = Config.from_file(config_file)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)


def parse_cards(s: str) -> list[Card]:
    """Parse space or comma separated cards."""
    s = s.replace(",", " ")
    return [card(p) for p in s.split() if p]


def parse_row(s: str) -> list[Card | None]:
    """Parse one board row; '.' or '_' marks an empty cell."""
    tokens = s.replace(",", " ").split()
    if len(tokens) != BOARD_SIZE:
        raise ValueError(f"Row needs {BOARD_SIZE} cells, got {len(tokens)}: {s!r}")
    return [None if t in EMPTY_MARKERS else card(t) for t in tokens]


@app.command(name="classify")
def classify_command(
    hand: list[str] | None = typer.Argument(None, help="0 to 5 cards (e.g., 'As Kh 10d')"),
):
    """Classify a hand of up to five cards."""
    try:
        hand_cards = parse_cards(" ".join(hand or []))
        category = classify(hand_cards)
        entry = score_for(category)

        color = _get_config().display.use_color
        shown = format_cards(hand_cards, color) if hand_cards else "[dim](empty)[/dim]"
        console.print(f"\n[bold]Hand:[/bold]   {shown}")
        console.print(f"[bold]Result:[/bold] {entry.label} ({entry.points_text})")

    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def score(
    rows: list[str] = typer.Option(
        ..., "--row", "-r", help="A board row of 5 cells, '.' for empty (give 5 times)"
    ),
):
    """Score a board given row by row."""
    try:
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        board = Board.from_rows([parse_row(r) for r in rows])

        config = _get_config()
        result = sweep(board)
        console.print(render_board(board, config.display.use_color))
        console.print(render_scores(result, config.display.show_empty_lines))

    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def table():
    """Show how many points each hand is worth."""
    console.print(render_score_table())


def _prompt_cell() -> tuple[int, int] | str:
    """Ask for a 1-based 'row col'. Returns 'quit' or 'new' for commands."""
    while True:
        response = Prompt.ask("[bold]Place at[/bold] (row col, 'new', 'quit')").strip().lower()
        if response in ("quit", "new"):
            return response

        parts = response.replace(",", " ").split()
        try:
            row, col = (int(p) for p in parts)
        except ValueError:
            console.print("[red]Enter a row and a column, e.g. '2 3'[/red]")
            continue
        if not (1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE):
            console.print(f"[red]Row and column must be 1-{BOARD_SIZE}[/red]")
            continue
        return row - 1, col - 1


@app.command()
def play(
    seed: int | None = typer.Option(None, "--seed", "-s", help="Seed for a reproducible deal"),
):
    """Play poker solitaire in the terminal."""
    config = _get_config()
    color = config.display.use_color
    if seed is None:
        seed = config.game.seed

    store = HighScoreStore(config.storage.high_score_file)
    # An unreadable file counts as 0 and is replaced by the next best score
    overwrite = False
    try:
        high_score = store.load()
    except ValueError as e:
        console.print(f"[yellow]Ignoring high score: {e}[/yellow]")
        high_score = 0
        overwrite = True

    game = Game(rng=random.Random(seed), high_score=high_score)
    game.new_game()

    try:
        while True:
            console.print(render_board(game.board, color))
            console.print(render_scores(game.score(), config.display.show_empty_lines))
            console.print(render_next_card(game.next_card, game.high_score, color))

            if game.is_over:
                if game.new_high_score:
                    console.print("[bold green]New high score![/bold green]")
                    try:
                        store.save(game.high_score, force=overwrite)
                        overwrite = False
                    except ValueError as e:
                        console.print(f"[yellow]High score not saved: {e}[/yellow]")
                again = Prompt.ask("Play again?", choices=["y", "n"], default="y")
                if again != "y":
                    return
                game.new_game()
                continue

            choice = _prompt_cell()
            if choice == "quit":
                return
            if choice == "new":
                game.new_game()
                continue

            row, col = choice
            try:
                game.place(row, col)
            except ValueError as e:
                console.print(f"[red]{e}[/red]")

    except KeyboardInterrupt:
        console.print("\n[dim]Exiting...[/dim]")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
