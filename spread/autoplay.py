"""Greedy autoplayer used to benchmark deals and smoke-test the engine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from . import rules, scoreboard, state
from .update import MakeMove, ToggleStack, update

__all__ = ["AutoplayReport", "choose_move", "play_greedy_game", "run_autoplay"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AutoplayReport:
    """Score statistics collected across a batch of autoplayed games."""

    history: scoreboard.SessionHistory
    mean_total: float
    std_total: float
    best_total: int
    clears: int


def _move_key(game: state.Game, candidate: rules.LegalMove) -> tuple[int, int, int, str]:
    if isinstance(candidate.move, rules.TrashMove):
        height = len(game.spread.stack(candidate.move.position))
        return (0, 0, height, candidate.move.position.code)
    codes = "".join(sorted(position.code for position in candidate.positions))
    return (1, candidate.points, len(candidate.positions), codes)


def choose_move(game: state.Game, candidates: Sequence[rules.LegalMove]) -> rules.LegalMove | None:
    """Pick the highest scoring hand, else trash from the tallest stack."""

    if not candidates:
        return None
    return max(candidates, key=lambda candidate: _move_key(game, candidate))


def play_greedy_game(game: state.Game) -> state.Game:
    """Play ``game`` greedily until it is cleared or stuck."""

    # Every move removes at least one card, so this bounds the loop.
    for _ in range(game.spread.card_count() + 1):
        chosen = choose_move(game, rules.legal_moves(game))
        if chosen is None:
            break
        game.selected.clear()
        for position in chosen.positions:
            update(ToggleStack(position), game)
        applied = update(MakeMove(), game)
        if applied != chosen.move:
            raise RuntimeError(f"autoplayer expected {chosen.move} but applied {applied}")
    return game


def run_autoplay(
    games: int,
    *,
    seed: int | None = None,
    config: state.SpreadConfig | None = None,
) -> AutoplayReport:
    """Autoplay ``games`` fresh deals and summarise their scores."""

    if games <= 0:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    history = scoreboard.SessionHistory()
    for _ in range(games):
        game = play_greedy_game(state.new_game(config, rng))
        summary = scoreboard.summarize(game, history.next_game_number)
        history.record(summary)
        logger.info(
            "game %d: %d points, %d bonus, %d cards left",
            summary.game_number,
            summary.points,
            summary.clear_bonus,
            summary.cards_left,
        )

    totals = np.array([summary.total for summary in history.games], dtype=np.int64)
    return AutoplayReport(
        history=history,
        mean_total=float(totals.mean()),
        std_total=float(totals.std()),
        best_total=int(totals.max()),
        clears=history.clears(),
    )
