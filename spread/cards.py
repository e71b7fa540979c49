"""Card abstractions and helpers for Spread."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Iterable


class Suit(str, Enum):
    """Enumeration of the four suits, in display order."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @classmethod
    def ordered(cls) -> tuple["Suit", ...]:
        return (cls.CLUBS, cls.DIAMONDS, cls.HEARTS, cls.SPADES)

    @property
    def idx(self) -> int:
        return Suit.ordered().index(self)


class Rank(str, Enum):
    """Enumeration of ranks, Ace low through King high."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return ranks in enumeration order, used for sorting and straights."""

        return (
            cls.ACE,
            cls.TWO,
            cls.THREE,
            cls.FOUR,
            cls.FIVE,
            cls.SIX,
            cls.SEVEN,
            cls.EIGHT,
            cls.NINE,
            cls.TEN,
            cls.JACK,
            cls.QUEEN,
            cls.KING,
        )

    @property
    def idx(self) -> int:
        return Rank.ordered().index(self)

    def successor(self) -> "Rank":
        """Return the next rank in cyclic order; King wraps to Ace."""

        ranks = Rank.ordered()
        return ranks[(self.idx + 1) % len(ranks)]


@total_ordering
@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single playing card."""

    rank: Rank
    suit: Suit

    def sort_key(self) -> tuple[int, int]:
        return (self.rank.idx, self.suit.idx)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def label(self) -> str:
        """Create a display label suitable for CLI representations."""

        return f"{self.rank.value}{self.suit.value}"

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a label such as ``"10H"`` or ``"as"`` back into a card."""

        code = code.strip().upper()
        if len(code) < 2:
            raise ValueError(f"invalid card code '{code}'")
        rank_part, suit_part = code[:-1], code[-1]
        if rank_part == "T":
            rank_part = "10"
        try:
            return cls(Rank(rank_part), Suit(suit_part))
        except ValueError as exc:
            raise ValueError(f"invalid card code '{code}'") from exc


def iter_full_deck() -> Iterable[Card]:
    """Yield all 52 cards of a fresh deck in rank-major order."""

    for rank in Rank.ordered():
        for suit in Suit.ordered():
            yield Card(rank=rank, suit=suit)
