"""Exceptions raised when the engine's internal invariants are broken.

Illegal player input is absorbed silently by :func:`spread.update.update`;
these errors signal that move legality was not gated correctly.
"""

from __future__ import annotations

__all__ = [
    "SpreadError",
    "DeckExhausted",
    "EmptyStack",
    "TrashExhausted",
    "HandMismatch",
]


class SpreadError(RuntimeError):
    """Base class for engine invariant violations."""


class DeckExhausted(SpreadError):
    """Raised when drawing more cards than remain in the deck."""


class EmptyStack(SpreadError):
    """Raised when popping a card from an empty stack."""


class TrashExhausted(SpreadError):
    """Raised when spending a trash charge at zero balance."""


class HandMismatch(SpreadError):
    """Raised when a resolved hand no longer matches the selection."""
