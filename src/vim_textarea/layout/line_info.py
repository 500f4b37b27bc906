"""Cursor position expressed in wrapped-segment coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .wrap import string_width, wrap


@dataclass(frozen=True, slots=True)
class LineInfo:
    """Where a column sits among the visual segments of its logical line.

    ``width`` and ``char_width`` describe the segment the column falls in, in
    characters and in display cells. ``column_offset`` and ``char_offset`` are
    the column's distance from the segment start, again in characters and in
    display cells; they differ when double-width characters precede it.
    """

    width: int = 0
    char_width: int = 0
    height: int = 0
    start_column: int = 0
    column_offset: int = 0
    row_offset: int = 0
    char_offset: int = 0

    @property
    def is_first_segment(self) -> bool:
        return self.row_offset <= 0

    @property
    def is_last_segment(self) -> bool:
        return self.row_offset + 1 >= self.height


def line_info(line: str, column: int, width: int) -> LineInfo:
    """Locate ``column`` of ``line`` wrapped at ``width``.

    A column sitting exactly on a soft-wrap boundary belongs to the start of
    the following segment.
    """

    segments = wrap(line, width)
    height = len(segments)
    counter = 0
    for index, segment in enumerate(segments):
        end = counter + len(segment)
        if end == column and index + 1 < height:
            following = segments[index + 1]
            return LineInfo(
                width=len(following),
                char_width=string_width(following),
                height=height,
                start_column=column,
                column_offset=0,
                row_offset=index + 1,
                char_offset=0,
            )
        if end >= column:
            offset = max(0, column - counter)
            return LineInfo(
                width=len(segment),
                char_width=string_width(segment),
                height=height,
                start_column=counter,
                column_offset=offset,
                row_offset=index,
                char_offset=string_width(segment[:offset]),
            )
        counter = end
    return LineInfo(height=height)


def segment_starts(line: str, width: int) -> list[int]:
    """Return the starting column of every visual segment of ``line``."""

    starts = []
    counter = 0
    for segment in wrap(line, width):
        starts.append(counter)
        counter += len(segment)
    return starts


__all__ = ["LineInfo", "line_info", "segment_starts"]
