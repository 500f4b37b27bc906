"""Cursor state tied to a LineGrid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class CursorState:
    """Mutable cursor position plus the remembered horizontal intent.

    ``preferred_offset`` is the display-cell offset vertical motions try to
    return to; any horizontal move resets it.
    """

    row: int = 0
    col: int = 0
    preferred_offset: int = 0

    @property
    def position(self) -> Cursor:
        return (self.row, self.col)

    def reset(self) -> None:
        self.row = 0
        self.col = 0
        self.preferred_offset = 0
