"""Static mapping from terminal key names to game messages."""

from __future__ import annotations

from typing import Final, Mapping

from ..board import ColumnId, Position, RowId
from ..update import MakeMove, Msg, NewGame, ToggleStack

# Numeric keypad layout: 7 8 9 / 4 5 6 / 1 2 3.
_KEYPAD: Final[Mapping[str, Position]] = {
    "7": Position(RowId.TOP, ColumnId.LEFT),
    "8": Position(RowId.TOP, ColumnId.CENTER),
    "9": Position(RowId.TOP, ColumnId.RIGHT),
    "4": Position(RowId.MIDDLE, ColumnId.LEFT),
    "5": Position(RowId.MIDDLE, ColumnId.CENTER),
    "6": Position(RowId.MIDDLE, ColumnId.RIGHT),
    "1": Position(RowId.BOTTOM, ColumnId.LEFT),
    "2": Position(RowId.BOTTOM, ColumnId.CENTER),
    "3": Position(RowId.BOTTOM, ColumnId.RIGHT),
}

KEYMAP: Final[Mapping[str, Msg]] = {
    **{key: ToggleStack(position) for key, position in _KEYPAD.items()},
    "space": MakeMove(),
    "enter": MakeMove(),
    "n": NewGame(),
}


def message_for_key(key: str) -> Msg | None:
    return KEYMAP.get(key)
