"""Typer entry-point wiring for the Spread CLI."""

from __future__ import annotations

import logging
import random

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import autoplay, state
from ..hands import Hand
from .render import render_game
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
) -> None:
    """Play Spread interactively in the terminal."""

    run_textual_app(seed=seed)


@app.command()
def deal(
    seed: int | None = typer.Option(None, help="Random seed for the deal."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine activity."),
) -> None:
    """Deal a board and print it."""

    _configure_logging(logging.DEBUG if verbose else logging.WARNING)
    game = state.new_game(rng=random.Random(seed))
    console.print(render_game(game))


@app.command("hands")
def hands_cli() -> None:
    """List the scoring hands and their point values."""

    table = Table(title="Hands", box=box.SIMPLE_HEAVY)
    table.add_column("Hand", justify="left")
    table.add_column("Points", justify="right")
    for hand in Hand:
        table.add_row(hand.label, str(hand.points))
    console.print(table)


@app.command("simulate")
def simulate_cli(
    games: int = typer.Option(20, min=1, help="Number of games to autoplay."),
    seed: int = typer.Option(123, help="Random seed for the batch."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each finished game."),
) -> None:
    """Autoplay a batch of games with the greedy player."""

    _configure_logging(logging.INFO if verbose else logging.WARNING)
    report = autoplay.run_autoplay(games, seed=seed)

    table = Table(title="Greedy Autoplay", box=box.SIMPLE_HEAVY)
    table.add_column("Game", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Bonus", justify="right")
    table.add_column("Left", justify="right")
    table.add_column("Total", justify="right")
    for summary in report.history.games:
        total = str(summary.total)
        if summary.total == report.best_total:
            total = f"[bold blue]{total}[/bold blue]"
        table.add_row(
            str(summary.game_number),
            str(summary.points),
            str(summary.clear_bonus),
            str(summary.cards_left),
            total,
        )

    console.print(table)
    console.print(
        f"[cyan]mean {report.mean_total:.1f} ± {report.std_total:.1f}, "
        f"best {report.best_total}, {report.clears} cleared[/cyan]"
    )


def main() -> None:
    """Entry-point for ``python -m spread.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
