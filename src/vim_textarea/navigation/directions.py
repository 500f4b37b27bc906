"""Signed parameters shared by the word and character motion algorithms."""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    """Direction of travel along a line or along the buffer tape."""

    LEFT = -1
    RIGHT = 1

    @property
    def opposite(self) -> "Direction":
        return Direction(-self.value)


class WordStop(IntEnum):
    """Where a word motion halts, relative to the direction of travel.

    ``INCIDENCE`` stops on entering a word (whitespace behind the cursor),
    ``TERMINUS`` stops on leaving one (whitespace ahead of the cursor).
    """

    INCIDENCE = -1
    TERMINUS = 1


class CharStop(IntEnum):
    """Land on the searched character or one cell short of it."""

    ON = 0
    BEFORE = 1


__all__ = ["Direction", "WordStop", "CharStop"]
