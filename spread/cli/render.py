"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel

from .. import rules
from ..cards import Card, Suit
from ..state import Game
from .views import BoardView

_SUIT_SYMBOLS = {
    "C": ("♣", "green"),
    "D": ("♦", "yellow"),
    "H": ("♥", "red"),
    "S": ("♠", "blue"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    symbol, color = _SUIT_SYMBOLS[card.suit.value]
    return f"[{color}]{card.rank.value:>2}{symbol}[/{color}]"


def format_suit(suit: Suit) -> str:
    symbol, color = _SUIT_SYMBOLS[suit.value]
    return f"[{color}]{symbol}[/{color}]"


def format_trashes(balance: int) -> str:
    return "•" * balance if balance else "—"


def format_move(move: rules.Move | None) -> str:
    """Describe the move the current selection would make."""

    if move is None:
        return "[dim]No move[/dim]"
    if isinstance(move, rules.TrashMove):
        return f"Trash {move.position.code.upper()}"
    return f"{move.hand.label} ({move.hand.points} pts)"


def render_game(game: Game, *, title: str = "Spread") -> RenderableType:
    """Return a Rich panel describing the current game."""

    view = BoardView(
        game=game,
        card_formatter=format_card,
        suit_formatter=format_suit,
        trash_formatter=format_trashes,
        move_formatter=format_move,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
