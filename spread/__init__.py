"""Top-level package for the Spread patience engine."""

from . import board, cards, deck, hands, rules, state, update

__all__ = [
    "board",
    "cards",
    "deck",
    "hands",
    "rules",
    "state",
    "update",
]
