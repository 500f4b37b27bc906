"""Cursor motions over a LineGrid, aware of soft-wrapped segments."""

from __future__ import annotations

from vim_textarea.buffer import LineGrid
from vim_textarea.config import DEFAULT_WIDTH, MIN_WIDTH
from vim_textarea.layout import LineInfo, char_width, line_info, segment_starts

from .directions import CharStop, Direction, WordStop


class Navigator:
    """Moves the cursor of a :class:`LineGrid`.

    ``width`` is the display width lines are wrapped at; vertical motion
    steps through visual segments before it changes logical line. Every
    motion is a no-op at the edges of the buffer and returns whether the
    cursor actually moved.
    """

    def __init__(self, grid: LineGrid, width: int = DEFAULT_WIDTH) -> None:
        self.grid = grid
        self.width = max(MIN_WIDTH, width)

    def resize(self, width: int) -> None:
        self.width = max(MIN_WIDTH, width)

    def info(self) -> LineInfo:
        cursor = self.grid.cursor
        return line_info(self.grid.current_line, cursor.col, self.width)

    # ------------------------------------------------------------------
    # Horizontal
    # ------------------------------------------------------------------

    def move_left(self, bind_to_line: bool = True) -> bool:
        del bind_to_line  # leftward motion is bounded by column zero either way
        col = self.grid.cursor.col
        if col <= 0:
            return False
        self.grid.set_column(col - 1)
        return True

    def move_right(self, bind_to_line: bool = True) -> bool:
        limit = self._stop_limit(self.grid.current_line, bind_to_line)
        col = self.grid.cursor.col
        if col >= limit:
            return False
        self.grid.set_column(col + 1)
        return True

    def move_to_line_start(self) -> bool:
        before = self.grid.position
        self.grid.set_column(0)
        return self.grid.position != before

    def move_to_line_end(self, bind_to_line: bool = True) -> bool:
        before = self.grid.position
        self.grid.set_column(self._stop_limit(self.grid.current_line, bind_to_line))
        return self.grid.position != before

    def move_to_first_non_blank(self) -> bool:
        line = self.grid.current_line
        target = len(line) - len(line.lstrip())
        if target >= len(line):
            target = max(0, len(line) - 1)
        before = self.grid.position
        self.grid.set_column(target)
        return self.grid.position != before

    # ------------------------------------------------------------------
    # Vertical
    # ------------------------------------------------------------------

    def move_down(self, bind_to_line: bool = True) -> bool:
        grid = self.grid
        cursor = grid.cursor
        line = grid.current_line
        current = self.info()
        preferred = max(cursor.preferred_offset, current.char_offset)

        starts = segment_starts(line, self.width)
        stop = self._stop_limit(line, bind_to_line)
        following = current.row_offset + 1
        if not current.is_last_segment and starts[following] <= stop:
            row, start = cursor.row, starts[following]
        elif cursor.row < grid.line_count - 1:
            row, start = cursor.row + 1, 0
        else:
            return False

        self._land(row, start, preferred, bind_to_line)
        return True

    def move_up(self, bind_to_line: bool = True) -> bool:
        grid = self.grid
        cursor = grid.cursor
        line = grid.current_line
        current = self.info()
        preferred = max(cursor.preferred_offset, current.char_offset)

        if not current.is_first_segment:
            starts = segment_starts(line, self.width)
            row, start = cursor.row, starts[current.row_offset - 1]
        elif cursor.row > 0:
            row = cursor.row - 1
            above = grid.get_line(row)
            last = max(0, self._stop_limit(above, bind_to_line))
            start = line_info(above, last, self.width).start_column
        else:
            return False

        self._land(row, start, preferred, bind_to_line)
        return True

    def set_row(self, target: int) -> bool:
        """Walk vertically, segment by segment, until ``target`` is reached."""

        grid = self.grid
        target = max(0, min(target, grid.line_count - 1))
        moved = False
        while grid.cursor.row != target:
            step = self.move_down if target > grid.cursor.row else self.move_up
            if not step(True):
                break
            moved = True
        return moved

    def move_to_first_row(self) -> bool:
        return self.set_row(0)

    def move_to_last_row(self) -> bool:
        return self.set_row(self.grid.line_count - 1)

    def _land(self, row: int, start: int, preferred: int, bind_to_line: bool) -> None:
        grid = self.grid
        line = grid.get_line(row)
        segment = line_info(line, start, self.width)
        stop = self._stop_limit(line, bind_to_line)

        col = start
        offset = 0
        while offset < preferred and col < stop and offset < segment.char_width - 1:
            offset += char_width(line[col])
            col += 1

        grid.cursor.row = row
        grid.cursor.col = max(0, min(col, len(line)))
        grid.cursor.preferred_offset = preferred

    @staticmethod
    def _stop_limit(line: str, bind_to_line: bool) -> int:
        return max(0, len(line) - 1) if bind_to_line else len(line)

    # ------------------------------------------------------------------
    # Word and character motions
    # ------------------------------------------------------------------

    def move_by_word(self, direction: Direction, stop: WordStop) -> bool:
        """Slide along the buffer tape until a word boundary is crossed.

        Line breaks count as whitespace. Arriving on an empty line always
        stops. When the tape runs out before a boundary is found the cursor
        does not move.
        """

        lines = self.grid.lines
        step = int(direction)
        look = int(stop) * step
        last_row = len(lines) - 1 if step > 0 else 0

        row = self.grid.cursor.row
        line = lines[row]
        col = min(self.grid.cursor.col, len(line) - 1)
        candidate = col + step
        while True:
            last_col = len(line) - 1 if step > 0 else 0
            if step * (last_col - candidate) < 0:
                if step * (last_row - (row + step)) < 0:
                    return False
                row += step
                line = lines[row]
                candidate = 0 if step > 0 else len(line) - 1

            col = max(0, min(candidate, len(line)))
            candidate = col + step
            if not line:
                break

            ahead = col + look
            neighbour = line[ahead] if 0 <= ahead < len(line) else "\n"
            if not line[col].isspace() and neighbour.isspace():
                break

        before = self.grid.position
        self.grid.place(row, col)
        return self.grid.position != before

    def move_by_character(
        self, target: str, direction: Direction, stop: CharStop = CharStop.ON
    ) -> bool:
        """Find ``target`` on the cursor line, starting one past the cursor."""

        if not target:
            return False
        line = self.grid.current_line
        step = int(direction)
        landing = self.grid.cursor.col + step
        examined = landing + int(stop) * step
        while 0 <= examined < len(line):
            if line[examined] == target:
                self.grid.set_column(landing)
                return True
            landing += step
            examined += step
        return False


__all__ = ["Navigator"]
