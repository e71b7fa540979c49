"""Deck construction, shuffling and drawing."""

from __future__ import annotations

import random
from typing import List

from .cards import Card, iter_full_deck
from .errors import DeckExhausted

DECK_CARD_COUNT = 52


def new_deck() -> List[Card]:
    """Return a deterministic ordering of all 52 cards."""

    return list(iter_full_deck())


def new_shuffled_deck(rng: random.Random | None = None) -> List[Card]:
    """Return a freshly shuffled deck using ``rng`` (or a system-seeded one)."""

    deck = new_deck()
    (rng or random.Random()).shuffle(deck)
    return deck


def draw(deck: List[Card], count: int) -> List[Card]:
    """Remove and return ``count`` cards from the top (end) of ``deck``."""

    if count < 0:
        raise ValueError("count must be non-negative")
    if count > len(deck):
        raise DeckExhausted(f"tried to draw {count} cards from a deck of {len(deck)}")
    return [deck.pop() for _ in range(count)]
