"""Helpers for tracking finished games within one session."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import Game

__all__ = ["GameSummary", "SessionHistory", "summarize"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary captured when a game ends or is abandoned."""

    game_number: int
    points: int
    clear_bonus: int
    cards_left: int

    @property
    def total(self) -> int:
        return self.points + self.clear_bonus

    @property
    def cleared(self) -> bool:
        return self.cards_left == 0


def summarize(game: Game, game_number: int) -> GameSummary:
    """Return a :class:`GameSummary` for ``game`` in its current state."""

    return GameSummary(
        game_number=game_number,
        points=game.points,
        clear_bonus=game.clear_bonus(),
        cards_left=game.spread.card_count(),
    )


@dataclass(slots=True)
class SessionHistory:
    """Mutable tracker that accumulates game summaries for a session."""

    games: list[GameSummary] = field(default_factory=list)

    def record(self, summary: GameSummary) -> None:
        if summary.game_number <= 0:
            raise ValueError("game_number must be positive")
        if summary.points < 0 or summary.cards_left < 0:
            raise ValueError("summary values must be non-negative")
        self.games.append(summary)

    @property
    def games_played(self) -> int:
        return len(self.games)

    @property
    def next_game_number(self) -> int:
        return len(self.games) + 1

    def best_total(self) -> int:
        return max((game.total for game in self.games), default=0)

    def average_total(self) -> float:
        if not self.games:
            return 0.0
        return sum(game.total for game in self.games) / len(self.games)

    def clears(self) -> int:
        return sum(1 for game in self.games if game.cleared)
