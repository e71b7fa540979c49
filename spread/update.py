"""Message-driven update function for the game aggregate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from . import rules
from .board import Position
from .errors import EmptyStack, HandMismatch
from .state import Game

__all__ = ["ToggleStack", "MakeMove", "NewGame", "Msg", "update"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToggleStack:
    """Select or deselect the stack at ``position``."""

    position: Position


@dataclass(frozen=True, slots=True)
class MakeMove:
    """Commit whatever move the current selection resolves to."""


@dataclass(frozen=True, slots=True)
class NewGame:
    """Throw the current game away and deal a fresh one."""


Msg = Union[ToggleStack, MakeMove, NewGame]


def _toggle(game: Game, position: Position) -> None:
    if position in game.selected:
        game.selected.discard(position)
    elif not game.spread.is_empty(position):
        game.selected.add(position)


def _make_move(game: Game) -> rules.Move | None:
    move = game.selected_move()
    if move is None:
        return None

    if isinstance(move, rules.TrashMove):
        if game.spread.is_empty(move.position):
            raise EmptyStack(f"cannot trash from empty stack {move.position.code}")
        game.trashes.spend_one()
        game.spread.pop(move.position)
    else:
        current = game.selected_hand()
        if current != move.hand:
            raise HandMismatch(f"resolved {move.hand.value} but selection holds {current}")
        for position in sorted(game.selected, key=lambda p: p.code):
            game.spread.pop(position)
        game.trashes.restore_one()
        game.points += move.hand.points
    game.selected.clear()
    logger.debug("applied %s, trashes=%d points=%d", move, game.trashes.balance, game.points)
    return move


def update(msg: Msg, game: Game) -> rules.Move | None:
    """Apply ``msg`` to ``game`` in place.

    Returns the move that was made for :class:`MakeMove`, otherwise ``None``.
    Messages that are not currently legal are ignored.
    """

    if isinstance(msg, ToggleStack):
        _toggle(game, msg.position)
        return None
    if isinstance(msg, MakeMove):
        return _make_move(game)
    if isinstance(msg, NewGame):
        game.reset()
        logger.debug("started a new game")
        return None
    raise TypeError(f"unknown message {msg!r}")  # pragma: no cover
