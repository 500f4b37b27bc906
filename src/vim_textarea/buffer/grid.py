"""Line-grid text storage and its mutation primitives."""

from __future__ import annotations

from typing import List, Sequence

from vim_textarea.config import DEFAULT_CHAR_LIMIT, DEFAULT_MAX_HEIGHT, clamp

from .state import Cursor, CursorState
from .validation import clamp_cursor, sanitize


class LineGrid:
    """Ordered list of lines plus the cursor that edits them.

    At least one line always exists and no line contains a newline. Every
    mutating primitive finishes with :meth:`_repair_cursor`, so callers never
    have to re-validate the cursor after a structural change. Out-of-range
    requests are clamped or ignored; nothing here raises.
    """

    def __init__(
        self,
        *,
        max_height: int = DEFAULT_MAX_HEIGHT,
        char_limit: int = DEFAULT_CHAR_LIMIT,
    ) -> None:
        self._lines: List[str] = [""]
        self.cursor = CursorState()
        self.max_height = max(1, max_height)
        self.char_limit = char_limit
        self.version = 0

    @classmethod
    def from_text(cls, text: str, **limits: int) -> "LineGrid":
        grid = cls(**limits)
        grid.reset(text)
        return grid

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, row: int) -> str:
        return self._lines[clamp(row, 0, len(self._lines) - 1)]

    @property
    def current_line(self) -> str:
        return self._lines[self.cursor.row]

    @property
    def position(self) -> Cursor:
        return self.cursor.position

    def text(self) -> str:
        return "\n".join(self._lines)

    def length(self) -> int:
        """Character count, with each line break counted as one character."""

        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    @property
    def has_char_limit(self) -> bool:
        return self.char_limit > 0

    def _can_add_line(self) -> bool:
        """A new line costs a line break, so it counts against both limits."""

        if len(self._lines) >= self.max_height:
            return False
        return not (self.has_char_limit and self.length() >= self.char_limit)

    # ------------------------------------------------------------------
    # Cursor placement
    # ------------------------------------------------------------------

    def set_column(self, col: int) -> None:
        """Move horizontally; this forgets the preferred vertical column."""

        self.cursor.col = clamp(col, 0, len(self._lines[self.cursor.row]))
        self.cursor.preferred_offset = 0

    def place(self, row: int, col: int) -> None:
        self.cursor.row = clamp(row, 0, len(self._lines) - 1)
        self.set_column(col)

    def _repair_cursor(self) -> None:
        self.cursor.row, self.cursor.col = clamp_cursor(
            self._lines, self.cursor.row, self.cursor.col
        )

    def _rest_on_character(self) -> None:
        """Normal-mode placement: stop on the last character, never past it."""

        self.place(
            *clamp_cursor(
                self._lines, self.cursor.row, self.cursor.col, past_end=False
            )
        )

    def _touch(self) -> None:
        self.version += 1
        self._repair_cursor()

    # ------------------------------------------------------------------
    # Whole-buffer operations
    # ------------------------------------------------------------------

    def reset(self, text: str = "") -> None:
        """Replace the content, leaving the cursor on the last character.

        A single trailing newline is dropped.
        """

        self._lines = [""]
        self.cursor.reset()
        if text.endswith("\n"):
            text = text[:-1]
        self.insert(text)
        self._rest_on_character()
        self._touch()

    def insert(self, text: str) -> bool:
        """Insert ``text`` at the cursor, splitting on line breaks.

        Input that would exceed the character limit or the maximum line count
        is cut from the end. The cursor finishes after the last inserted
        character.
        """

        chars = sanitize(text)
        if not chars:
            return False
        if self.has_char_limit:
            available = self.char_limit - self.length()
            if available <= 0:
                return False
            chars = chars[:available]

        pieces = chars.split("\n")
        allowed = self.max_height - len(self._lines) + 1
        if len(pieces) > allowed:
            pieces = pieces[: max(0, allowed)]
        if not pieces:
            return False

        row = self.cursor.row
        line = self._lines[row]
        col = clamp(self.cursor.col, 0, len(line))
        head, tail = line[:col], line[col:]
        if len(pieces) == 1:
            self._lines[row] = head + pieces[0] + tail
            self.cursor.row = row
            self.set_column(col + len(pieces[0]))
        else:
            replacement = [head + pieces[0], *pieces[1:-1], pieces[-1] + tail]
            self._lines[row : row + 1] = replacement
            self.cursor.row = row + len(pieces) - 1
            self.set_column(len(pieces[-1]))
        self._touch()
        return True

    # ------------------------------------------------------------------
    # Intra-line deletions
    # ------------------------------------------------------------------

    def delete_before_cursor(self) -> str:
        """Delete from the start of the line up to (not including) the cursor."""

        row = self.cursor.row
        line = self._lines[row]
        col = clamp(self.cursor.col, 0, len(line))
        removed = line[:col]
        self._lines[row] = line[col:]
        self.set_column(0)
        if removed:
            self._touch()
        return removed

    def delete_after_cursor(self) -> str:
        """Delete from the cursor to the end of the line.

        The cursor ends on the new last character.
        """

        row = self.cursor.row
        line = self._lines[row]
        col = clamp(self.cursor.col, 0, len(line))
        removed = line[col:]
        self._lines[row] = line[:col]
        self.set_column(col - 1)
        if removed:
            self._touch()
        return removed

    def delete_on_cursor(self) -> str:
        """Delete the character under the cursor and return it."""

        row = self.cursor.row
        line = self._lines[row]
        if not line:
            return ""
        col = clamp(self.cursor.col, 0, len(line) - 1)
        removed = line[col]
        updated = line[:col] + line[col + 1 :]
        self._lines[row] = updated
        self._rest_on_character()
        self._touch()
        return removed

    def delete_char_before(self) -> str:
        """Backspace: remove the character left of the cursor.

        At column zero the line is merged into the previous one and ``"\\n"``
        is returned.
        """

        row = self.cursor.row
        line = self._lines[row]
        col = clamp(self.cursor.col, 0, len(line))
        if col <= 0:
            return "\n" if self.merge_with_previous(row) else ""
        removed = line[col - 1]
        self._lines[row] = line[: col - 1] + line[col:]
        self.set_column(col - 1)
        self._touch()
        return removed

    def delete_char_forward(self) -> str:
        """Delete the character at the cursor, or join the next line at EOL."""

        row = self.cursor.row
        line = self._lines[row]
        col = clamp(self.cursor.col, 0, len(line))
        if col >= len(line):
            return "\n" if self.merge_with_next(row) else ""
        removed = line[col]
        self._lines[row] = line[:col] + line[col + 1 :]
        self.set_column(col)
        self._touch()
        return removed

    def delete_word_before(self) -> str:
        """Delete the word (and the blanks after it) left of the cursor."""

        row = self.cursor.row
        line = self._lines[row]
        col = clamp(self.cursor.col, 0, len(line))
        if col <= 0:
            return "\n" if self.merge_with_previous(row) else ""
        start = col
        while start > 0 and line[start - 1].isspace():
            start -= 1
        while start > 0 and not line[start - 1].isspace():
            start -= 1
        removed = line[start:col]
        self._lines[row] = line[:start] + line[col:]
        self.set_column(start)
        self._touch()
        return removed

    # ------------------------------------------------------------------
    # Line-level operations
    # ------------------------------------------------------------------

    def delete_line(self) -> str:
        """Remove the cursor line; the last remaining line is emptied instead."""

        row = self.cursor.row
        removed = self._lines[row]
        if len(self._lines) <= 1:
            self._lines = [""]
            self.set_column(0)
        else:
            del self._lines[row]
            self._rest_on_character()
        self._touch()
        return removed

    def clear_line(self) -> str:
        """Empty the cursor line but keep it."""

        row = self.cursor.row
        removed = self._lines[row]
        self._lines[row] = ""
        self.set_column(0)
        if removed:
            self._touch()
        return removed

    def split_at(self, row: int, col: int) -> bool:
        """Move the tail of ``row`` from ``col`` onto a new line below it."""

        if not self._can_add_line():
            return False
        row = clamp(row, 0, len(self._lines) - 1)
        line = self._lines[row]
        col = clamp(col, 0, len(line))
        self._lines[row : row + 1] = [line[:col], line[col:]]
        self.cursor.row = row + 1
        self.set_column(0)
        self._touch()
        return True

    def merge_with_next(self, row: int) -> bool:
        """Append line ``row + 1`` to ``row``; the cursor lands on the seam."""

        if row < 0 or row >= len(self._lines) - 1:
            return False
        join = len(self._lines[row])
        self._lines[row] += self._lines.pop(row + 1)
        self.cursor.row = row
        self.set_column(join)
        self._touch()
        return True

    def merge_with_previous(self, row: int) -> bool:
        """Append ``row`` to line ``row - 1``; the cursor lands on the seam."""

        if row <= 0 or row >= len(self._lines):
            return False
        join = len(self._lines[row - 1])
        self._lines[row - 1] += self._lines.pop(row)
        self.cursor.row = row - 1
        self.set_column(join)
        self._touch()
        return True

    def insert_line_above(self, row: int) -> bool:
        if not self._can_add_line():
            return False
        row = clamp(row, 0, len(self._lines) - 1)
        self._lines.insert(row, "")
        self.cursor.row = row
        self.set_column(0)
        self._touch()
        return True

    def insert_line_below(self, row: int) -> bool:
        if not self._can_add_line():
            return False
        row = clamp(row, 0, len(self._lines) - 1)
        self._lines.insert(row + 1, "")
        self.cursor.row = row + 1
        self.set_column(0)
        self._touch()
        return True


__all__ = ["LineGrid"]
