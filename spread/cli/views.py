"""Composable view primitives for the Spread CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .. import rules
from ..board import ColumnId, Position, RowId
from ..cards import Card, Rank, Suit
from ..state import Game


@dataclass(slots=True)
class BoardView:
    """Renderable summarising the board and the side column of game data."""

    game: Game
    card_formatter: Callable[[Card], str]
    suit_formatter: Callable[[Suit], str]
    trash_formatter: Callable[[int], str]
    move_formatter: Callable[[rules.Move | None], str]

    def _cell_markup(self, position: Position) -> str:
        stack = self.game.spread.stack(position)
        if not stack:
            bonus = self.game.row_bonus(position.row)
            return f"[dim]0|{bonus:+d}[/dim]"
        markup = f"{len(stack)}|{self.card_formatter(stack[-1])}"
        if position in self.game.selected:
            return f"[reverse]{markup}[/reverse]"
        return markup

    def _board_table(self) -> Table:
        table = Table(box=box.ROUNDED, show_header=False, padding=(0, 2))
        for _ in ColumnId:
            table.add_column(justify="center")
        for row in RowId:
            table.add_row(*(self._cell_markup(Position(row, column)) for column in ColumnId))
        return table

    def _metadata_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Score[/cyan]: {self.game.points}")
        grid.add_row(f"[cyan]Clear bonus[/cyan]: {self.game.clear_bonus()}")
        grid.add_row(f"[cyan]Trashes[/cyan]: {self.trash_formatter(self.game.trashes.balance)}")
        grid.add_row(f"[cyan]Bonus suit[/cyan]: {self.card_formatter(self.game.bonus_card)}")
        grid.add_row(f"[cyan]Move[/cyan]: {self.move_formatter(self.game.selected_move())}")
        return Panel(grid, title="Game", box=box.SQUARE, border_style="blue")

    def _remaining_table(self) -> Table:
        remaining = self.game.remaining_cards()
        table = Table(box=box.MINIMAL, title="Remaining Cards")
        table.add_column("", justify="right")
        for suit in Suit.ordered():
            table.add_column(self.suit_formatter(suit), justify="center")
        for rank in Rank.ordered():
            marks = ["•" if Card(rank, suit) in remaining else " " for suit in Suit.ordered()]
            table.add_row(rank.value, *marks)
        return table

    def render(self) -> RenderableType:
        return Group(
            Columns([self._board_table(), self._metadata_panel()]),
            self._remaining_table(),
        )
