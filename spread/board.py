"""Board addressing and the nine card stacks of the spread."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Final, Iterator, List, Mapping

from .cards import Card
from .errors import EmptyStack

__all__ = [
    "RowId",
    "ColumnId",
    "Position",
    "ALL_POSITIONS",
    "DealPattern",
    "DEFAULT_DEAL_PATTERN",
    "DEFAULT_ROW_BONUSES",
    "CardStack",
    "Spread",
]

logger = logging.getLogger(__name__)


class RowId(str, Enum):
    TOP = "t"
    MIDDLE = "m"
    BOTTOM = "b"


class ColumnId(str, Enum):
    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"


@dataclass(frozen=True, slots=True)
class Position:
    """Address of one stack on the board."""

    row: RowId
    column: ColumnId

    @property
    def code(self) -> str:
        return f"{self.row.value}{self.column.value}"

    @classmethod
    def from_code(cls, code: str) -> "Position":
        """Parse a two-letter code such as ``"tl"`` or ``"bc"``."""

        if len(code) != 2:
            raise ValueError(f"invalid position code '{code}'")
        try:
            return cls(RowId(code[0].lower()), ColumnId(code[1].lower()))
        except ValueError as exc:
            raise ValueError(f"invalid position code '{code}'") from exc


ALL_POSITIONS: Final[tuple[Position, ...]] = tuple(
    Position(row, column) for row in RowId for column in ColumnId
)

DEFAULT_ROW_BONUSES: Final[Mapping[RowId, int]] = {
    RowId.TOP: 15,
    RowId.MIDDLE: 10,
    RowId.BOTTOM: 5,
}


def _default_pile_sizes() -> Dict[Position, int]:
    sizes = (8, 8, 8, 7, 6, 5, 4, 3, 2)
    return dict(zip(ALL_POSITIONS, sizes))


@dataclass(frozen=True, slots=True)
class DealPattern:
    """Initial stack sizes for the opening deal, in dealing order."""

    pile_sizes: Mapping[Position, int] = field(default_factory=_default_pile_sizes)

    def size_for(self, position: Position) -> int:
        return self.pile_sizes.get(position, 0)

    @property
    def total(self) -> int:
        return sum(self.pile_sizes.values())

    def items(self) -> Iterator[tuple[Position, int]]:
        """Yield ``(position, size)`` pairs in row-major dealing order."""

        for position in ALL_POSITIONS:
            yield position, self.size_for(position)


DEFAULT_DEAL_PATTERN: Final[DealPattern] = DealPattern()

CardStack = List[Card]


@dataclass(slots=True)
class Spread:
    """Total mapping from every :class:`Position` to its card stack."""

    stacks: Dict[Position, CardStack] = field(
        default_factory=lambda: {position: [] for position in ALL_POSITIONS}
    )

    def __post_init__(self) -> None:
        for position in ALL_POSITIONS:
            self.stacks.setdefault(position, [])

    def stack(self, position: Position) -> CardStack:
        return self.stacks[position]

    def top(self, position: Position) -> Card | None:
        """Return the exposed card at ``position`` or ``None`` when empty."""

        stack = self.stacks[position]
        return stack[-1] if stack else None

    def is_empty(self, position: Position) -> bool:
        return not self.stacks[position]

    def push(self, position: Position, card: Card) -> None:
        self.stacks[position].append(card)

    def pop(self, position: Position) -> Card:
        """Remove and return the top card at ``position``."""

        stack = self.stacks[position]
        if not stack:
            raise EmptyStack(f"stack {position.code} is empty")
        card = stack.pop()
        logger.debug("removed %s from %s", card.label(), position.code)
        return card

    def cards(self) -> Iterator[Card]:
        """Yield every card still on the board."""

        for position in ALL_POSITIONS:
            yield from self.stacks[position]

    def card_count(self) -> int:
        return sum(len(stack) for stack in self.stacks.values())

    def empty_positions(self) -> list[Position]:
        return [position for position in ALL_POSITIONS if not self.stacks[position]]

    def non_empty_positions(self) -> list[Position]:
        return [position for position in ALL_POSITIONS if self.stacks[position]]
