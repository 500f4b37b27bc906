"""Bounded snapshot history for undo/redo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from vim_textarea.config import DEFAULT_HISTORY_LIMIT


@dataclass(frozen=True, slots=True)
class UndoEntry:
    text: str
    label: str = ""


class UndoTimeline:
    """Linear list of full-text snapshots with a movable pointer.

    The entry at the pointer is the state the buffer is believed to be in.
    Checkpointing after an undo discards the redo branch. When the list grows
    past ``limit`` the oldest snapshots are dropped.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT, initial_text: str = "") -> None:
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._entries: List[UndoEntry] = []
        self._index: int = -1
        self.reset(initial_text)

    def reset(self, text: str = "") -> None:
        self._entries = [UndoEntry(text=text, label="initial")]
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def entries(self) -> tuple[UndoEntry, ...]:
        return tuple(self._entries)

    def current(self) -> UndoEntry:
        return self._entries[self._index]

    def checkpoint(self, text: str, label: str = "") -> bool:
        """Record ``text`` unless it equals the snapshot at the pointer."""

        if self._entries[self._index].text == text:
            return False
        if self._index < len(self._entries) - 1:
            del self._entries[self._index + 1 :]
        self._entries.append(UndoEntry(text=text, label=label))
        overflow = len(self._entries) - self.limit
        if overflow > 0:
            del self._entries[:overflow]
        self._index = len(self._entries) - 1
        return True

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]


__all__ = ["UndoEntry", "UndoTimeline"]
