"""Poker-style hand classification for selected cards."""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Collection, Hashable, Iterable

from .cards import Card, Rank

__all__ = ["Hand", "all_equal", "is_straight", "is_flush", "is_full_house", "classify_hand"]


class Hand(str, Enum):
    """Scoring hands, from weakest to strongest."""

    PAIR = "pair"
    STRAIGHT_THREE = "straight_three"
    THREE_OF_A_KIND = "three_of_a_kind"
    STRAIGHT_FIVE = "straight_five"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    FOUR_OF_A_KIND = "four_of_a_kind"
    STRAIGHT_FLUSH = "straight_flush"

    @property
    def points(self) -> int:
        return _HAND_POINTS[self]

    @property
    def label(self) -> str:
        return _HAND_LABELS[self]


_HAND_POINTS: dict[Hand, int] = {
    Hand.PAIR: 1,
    Hand.STRAIGHT_THREE: 2,
    Hand.THREE_OF_A_KIND: 3,
    Hand.STRAIGHT_FIVE: 5,
    Hand.FULL_HOUSE: 7,
    Hand.FLUSH: 9,
    Hand.FOUR_OF_A_KIND: 10,
    Hand.STRAIGHT_FLUSH: 15,
}

_HAND_LABELS: dict[Hand, str] = {
    Hand.PAIR: "Pair",
    Hand.STRAIGHT_THREE: "Three-Card Straight",
    Hand.THREE_OF_A_KIND: "Three of a Kind",
    Hand.STRAIGHT_FIVE: "Five-Card Straight",
    Hand.FULL_HOUSE: "Full House",
    Hand.FLUSH: "Flush",
    Hand.FOUR_OF_A_KIND: "Four of a Kind",
    Hand.STRAIGHT_FLUSH: "Straight Flush!",
}


def all_equal(values: Iterable[Hashable]) -> bool:
    """Return ``True`` when every value matches the first (vacuously for none)."""

    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        return True
    return all(value == first for value in iterator)


def is_straight(ranks: Iterable[Rank]) -> bool:
    """Return whether the distinct ``ranks`` form a consecutive run.

    Ace sits below Two, but a run containing both Ace and King treats the Ace
    as high, so J-Q-K-A and A-2-3 are straights while K-A-2 is not.
    """

    ordered = sorted(set(ranks), key=lambda rank: rank.idx)
    if len(ordered) > 2 and ordered[0] is Rank.ACE and ordered[-1] is Rank.KING:
        ordered = ordered[1:] + ordered[:1]
    return all(current.successor() is following for current, following in zip(ordered, ordered[1:]))


def is_flush(cards: Iterable[Card]) -> bool:
    return all_equal(card.suit for card in cards)


def is_full_house(cards: Iterable[Card]) -> bool:
    counts = sorted(Counter(card.rank for card in cards).values())
    return counts == [2, 3]


def classify_hand(cards: Collection[Card], rows: int) -> Hand | None:
    """Return the hand formed by ``cards`` spanning ``rows`` distinct rows."""

    if rows < 2:
        return None

    selected = list(cards)
    same_rank = all_equal(card.rank for card in selected)
    count = len(selected)

    if count == 2:
        return Hand.PAIR if same_rank else None
    if count == 3:
        if same_rank:
            return Hand.THREE_OF_A_KIND
        return Hand.STRAIGHT_THREE if is_straight(card.rank for card in selected) else None
    if count == 4:
        return Hand.FOUR_OF_A_KIND if same_rank else None
    if count == 5:
        if is_full_house(selected):
            return Hand.FULL_HOUSE
        straight = is_straight(card.rank for card in selected)
        flush = is_flush(selected)
        if straight and flush:
            return Hand.STRAIGHT_FLUSH
        if straight:
            return Hand.STRAIGHT_FIVE
        if flush:
            return Hand.FLUSH
        return None
    return None
