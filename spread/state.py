"""Core game state for a single game of Spread."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Mapping, Sequence, Set

from . import rules
from .board import DEFAULT_DEAL_PATTERN, DEFAULT_ROW_BONUSES, DealPattern, Position, RowId, Spread
from .cards import Card
from .deck import DECK_CARD_COUNT, draw, new_shuffled_deck
from .errors import EmptyStack
from .hands import Hand, classify_hand

__all__ = ["SpreadConfig", "Game", "deal_new_game", "new_game"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SpreadConfig:
    """Runtime configuration for a game of Spread."""

    deal_pattern: DealPattern = DEFAULT_DEAL_PATTERN
    row_bonuses: Mapping[RowId, int] = field(default_factory=lambda: dict(DEFAULT_ROW_BONUSES))

    def __post_init__(self) -> None:
        if self.deal_pattern.total != DECK_CARD_COUNT - 1:
            raise ValueError(
                f"deal pattern must place {DECK_CARD_COUNT - 1} cards, got {self.deal_pattern.total}"
            )


@dataclass(slots=True)
class Game:
    """The board, the player's selection, trash charges and the bonus card."""

    spread: Spread
    bonus_card: Card
    selected: Set[Position] = field(default_factory=set)
    trashes: rules.TrashCounter = field(default_factory=rules.TrashCounter)
    points: int = 0
    config: SpreadConfig = field(default_factory=SpreadConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    # Selection queries -------------------------------------------------

    def selected_cards(self) -> List[Card]:
        """Return the exposed cards at every selected position."""

        cards: List[Card] = []
        for position in self.selected:
            card = self.spread.top(position)
            if card is None:
                raise EmptyStack(f"empty stack {position.code} is selected")
            cards.append(card)
        return cards

    def selected_rows(self) -> int:
        return rules.rows_spanned(self.selected)

    def selected_hand(self) -> Hand | None:
        return classify_hand(self.selected_cards(), self.selected_rows())

    def selected_move(self) -> rules.Move | None:
        return rules.resolve_move(self)

    # Board queries -----------------------------------------------------

    def remaining_cards(self) -> Set[Card]:
        """Return the cards not yet removed from the board."""

        return set(self.spread.cards())

    def is_cleared(self) -> bool:
        return self.spread.card_count() == 0

    def is_stuck(self) -> bool:
        """Return ``True`` when no selection resolves to a legal move."""

        return not rules.legal_moves(self)

    def row_bonus(self, row: RowId) -> int:
        return self.config.row_bonuses.get(row, 0)

    def clear_bonus(self) -> int:
        """Sum the row bonuses of every emptied stack."""

        return sum(self.row_bonus(position.row) for position in self.spread.empty_positions())

    def total_score(self) -> int:
        return self.points + self.clear_bonus()

    # Lifecycle ---------------------------------------------------------

    def reset(self) -> None:
        """Replace this game's contents with a freshly shuffled deal."""

        fresh = new_game(self.config, self.rng)
        self.spread = fresh.spread
        self.bonus_card = fresh.bonus_card
        self.selected = fresh.selected
        self.trashes = fresh.trashes
        self.points = fresh.points


def deal_new_game(
    config: SpreadConfig,
    deck_cards: Sequence[Card],
    *,
    rng: random.Random | None = None,
) -> Game:
    """Deal ``deck_cards`` onto the board, keeping the last card as the bonus."""

    deck = list(deck_cards)
    if len(set(deck)) != len(deck):
        raise ValueError("deck contains duplicate cards")

    spread = Spread()
    for position, size in config.deal_pattern.items():
        spread.stacks[position] = draw(deck, size)

    if len(deck) != 1:
        raise ValueError(f"deal must leave exactly one bonus card, {len(deck)} remain")
    bonus_card = deck.pop()

    logger.debug("dealt %d cards, bonus card %s", spread.card_count(), bonus_card.label())
    return Game(
        spread=spread,
        bonus_card=bonus_card,
        trashes=rules.TrashCounter(),
        config=config,
        rng=rng if rng is not None else random.Random(),
    )


def new_game(config: SpreadConfig | None = None, rng: random.Random | None = None) -> Game:
    """Shuffle a fresh deck with ``rng`` and deal it."""

    config = config or SpreadConfig()
    rng = rng if rng is not None else random.Random()
    return deal_new_game(config, new_shuffled_deck(rng), rng=rng)

