"""Clamping helpers shared across buffer services."""

from __future__ import annotations

import unicodedata
from typing import Sequence

from vim_textarea.config import clamp

from .state import Cursor

TAB_REPLACEMENT = "    "


def clamp_cursor(
    lines: Sequence[str], row: int, col: int, *, past_end: bool = True
) -> Cursor:
    """Pull ``(row, col)`` back inside ``lines``.

    With ``past_end`` the column may sit one past the last character (the
    insert position at the end of a line); otherwise it stops on the last
    character.
    """

    row = clamp(row, 0, max(0, len(lines) - 1))
    length = len(lines[row]) if lines else 0
    limit = length if past_end else max(0, length - 1)
    return (row, clamp(col, 0, limit))


def sanitize(text: str) -> str:
    """Normalise line breaks, expand tabs and drop other control characters."""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", TAB_REPLACEMENT)
    return "".join(
        char
        for char in text
        if char == "\n" or not unicodedata.category(char).startswith("C")
    )
