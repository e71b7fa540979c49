"""Textual-powered interactive Spread interface."""

from __future__ import annotations

import random

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from ... import rules, scoreboard, state
from ...update import MakeMove, Msg, NewGame, update
from ..keys import message_for_key
from ..render import format_card, format_move, render_game

MAX_EVENT_LINES = 18

HELP_TEXT = (
    "Keys [bold]7 8 9 / 4 5 6 / 1 2 3[/bold] toggle stacks, "
    "[bold]space[/bold] plays the move, [bold]n[/bold] deals a new game"
)


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class ScorePanel(Static):
    """Displays the games finished during this session."""

    def update_scores(self, history: scoreboard.SessionHistory) -> None:
        table = Table(box=box.SIMPLE_HEAVY, expand=True)
        table.add_column("Game", justify="right")
        table.add_column("Points", justify="right")
        table.add_column("Bonus", justify="right")
        table.add_column("Total", justify="right")
        best = history.best_total()
        for entry in history.games:
            total = str(entry.total)
            if entry.total == best:
                total = f"[bold blue]{total}[/bold blue]"
            table.add_row(str(entry.game_number), str(entry.points), str(entry.clear_bonus), total)
        if not history.games:
            table.add_row(Text.from_markup("[dim]No results yet[/dim]"), "-", "-", "-")
        self.update(Panel(table, title="Session", border_style="bright_blue"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class SpreadTextualApp(App):
    """Textual Spread game UI."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
        width: 1fr;
    }

    #left {
        width: 2fr;
        height: 1fr;
        padding: 0 1;
    }

    #right {
        layout: vertical;
        width: 1fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }

    EventLog, ScorePanel {
        width: 100%;
        min-height: 6;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, *, seed: int | None, config: state.SpreadConfig | None = None) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.game = state.new_game(config, random.Random(seed))
        self.history = scoreboard.SessionHistory()
        self.game_over = False

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.board_panel: Static | None = None
        self.event_log: EventLog | None = None
        self.score_panel: ScorePanel | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.board_panel = Static(id="board")
        self.event_log = EventLog(id="events")
        self.score_panel = ScorePanel(id="scores")
        self.score_panel.update_scores(self.history)

        yield Horizontal(
            Vertical(self.board_panel, id="left"),
            Vertical(self.event_log, self.score_panel, id="right"),
            id="main",
        )
        yield Footer()

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh_ui()
        self._set_status(HELP_TEXT)

    def on_key(self, event: events.Key) -> None:  # pragma: no cover - driven by UI interaction
        msg = message_for_key(event.key)
        if msg is None:
            return
        event.stop()
        self.deliver(msg)

    def deliver(self, msg: Msg) -> None:
        """Deliver ``msg`` to the game and refresh the display."""

        if isinstance(msg, NewGame):
            self._record_game()
            update(msg, self.game)
            self.game_over = False
            self._log(f"[bold cyan]Game {self.history.next_game_number}[/bold cyan] dealt")
            self._set_status(HELP_TEXT)
        elif isinstance(msg, MakeMove):
            before = [format_card(card) for card in self.game.selected_cards()]
            move = update(msg, self.game)
            if move is not None:
                self._log_move(move, before)
                self._check_game_over()
        elif not self.game_over:
            update(msg, self.game)
        self._refresh_ui()

    def _record_game(self) -> None:
        summary = scoreboard.summarize(self.game, self.history.next_game_number)
        self.history.record(summary)
        if self.score_panel:
            self.score_panel.update_scores(self.history)

    def _log_move(self, move: rules.Move, cards: list[str]) -> None:
        played = " ".join(cards)
        if isinstance(move, rules.TrashMove):
            self._log(f"Trashed {played}")
        else:
            self._log(f"{format_move(move)}: {played}")

    def _check_game_over(self) -> None:
        if self.game.is_cleared():
            self.game_over = True
            self._set_status(
                f"[bold green]Board cleared![/bold green] Total {self.game.total_score()}. "
                "Press [bold]N[/bold] for a new game or [bold]Q[/bold] to quit."
            )
        elif self.game.is_stuck():
            self.game_over = True
            self._set_status(
                f"[yellow]No moves left.[/yellow] Total {self.game.total_score()}. "
                "Press [bold]N[/bold] for a new game or [bold]Q[/bold] to quit."
            )

    def _refresh_ui(self) -> None:
        if self.board_panel:
            self.board_panel.update(render_game(self.game, title=f"Spread (seed {self.seed})"))

    def _log(self, message: str) -> None:
        if self.event_log:
            self.event_log.add(message)

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.message = message


def run_textual_app(*, seed: int | None, config: state.SpreadConfig | None = None) -> None:
    """Launch the Textual UI."""

    app = SpreadTextualApp(seed=seed, config=config)
    app.run()
