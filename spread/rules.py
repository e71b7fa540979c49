"""Move resolution and the trash economy."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import TYPE_CHECKING, Final, Iterable, Union

from .board import Position, Spread
from .errors import EmptyStack, TrashExhausted
from .hands import Hand, classify_hand

if TYPE_CHECKING:
    from .state import Game

__all__ = [
    "MAX_TRASHES",
    "TrashCounter",
    "TrashMove",
    "PlayHandMove",
    "Move",
    "LegalMove",
    "rows_spanned",
    "resolve_selection",
    "resolve_move",
    "legal_moves",
]

logger = logging.getLogger(__name__)

MAX_TRASHES: Final[int] = 2
_MAX_HAND_SIZE: Final[int] = 5


@dataclass(slots=True)
class TrashCounter:
    """Bounded counter of discard charges."""

    balance: int = MAX_TRASHES

    def __post_init__(self) -> None:
        if not 0 <= self.balance <= MAX_TRASHES:
            raise ValueError(f"trash balance must lie within [0, {MAX_TRASHES}]")

    def spend_one(self) -> None:
        if self.balance <= 0:
            raise TrashExhausted("no trash charges left to spend")
        self.balance -= 1

    def restore_one(self) -> None:
        """Add one charge, saturating at the cap."""

        if self.balance < MAX_TRASHES:
            self.balance += 1


@dataclass(frozen=True, slots=True)
class TrashMove:
    """Discard the top card of a single stack."""

    position: Position


@dataclass(frozen=True, slots=True)
class PlayHandMove:
    """Score the selected top cards as ``hand``."""

    hand: Hand


Move = Union[TrashMove, PlayHandMove]


@dataclass(frozen=True, slots=True)
class LegalMove:
    """A selection paired with the move it resolves to."""

    positions: frozenset[Position]
    move: Move

    @property
    def points(self) -> int:
        if isinstance(self.move, PlayHandMove):
            return self.move.hand.points
        return 0


def rows_spanned(positions: Iterable[Position]) -> int:
    return len({position.row for position in positions})


def resolve_selection(
    spread: Spread,
    positions: Iterable[Position],
    trash_balance: int,
) -> Move | None:
    """Return the move implied by selecting ``positions`` on ``spread``.

    Every position must hold a non-empty stack.
    """

    selected = list(positions)
    if not selected:
        return None
    if len(selected) == 1:
        if trash_balance > 0:
            return TrashMove(selected[0])
        return None

    cards = []
    for position in selected:
        card = spread.top(position)
        if card is None:
            raise EmptyStack(f"selected stack {position.code} is empty")
        cards.append(card)
    hand = classify_hand(cards, rows_spanned(selected))
    if hand is None:
        return None
    return PlayHandMove(hand)


def resolve_move(game: "Game") -> Move | None:
    """Return the single legal move for the game's current selection."""

    return resolve_selection(game.spread, game.selected, game.trashes.balance)


def legal_moves(game: "Game", *, max_size: int = _MAX_HAND_SIZE) -> list[LegalMove]:
    """Return every selection of non-empty stacks that resolves to a move."""

    candidates = game.spread.non_empty_positions()
    moves: list[LegalMove] = []
    for size in range(1, min(max_size, len(candidates)) + 1):
        for combo in combinations(candidates, size):
            move = resolve_selection(game.spread, combo, game.trashes.balance)
            if move is not None:
                moves.append(LegalMove(frozenset(combo), move))
    logger.debug("found %d legal moves", len(moves))
    return moves
