"""Greedy soft-wrap of a logical line into visual segments."""

from __future__ import annotations

from typing import List, Sequence

import wcwidth as _wcwidth


def char_width(char: str) -> int:
    """Return the terminal display width of a single character.

    Non-printable characters (``wcwidth`` reports ``-1``) count as zero.
    """

    return max(_wcwidth.wcwidth(char), 0)


def string_width(chars: Sequence[str]) -> int:
    return sum(char_width(char) for char in chars)


def wrap(line: str, width: int) -> List[str]:
    """Split ``line`` into visual segments no wider than ``width`` columns.

    Words are kept whole unless a single word is wider than ``width``, in which
    case it is cut into width-sized chunks between characters, so a
    double-width character is never split. Every whitespace character becomes
    one space. The final segment carries one extra synthetic space: the
    lengths of all segments sum to ``len(line) + 1``, which gives the cursor a
    landing column at the end of the line.
    """

    segments: List[List[str]] = [[]]
    word: List[str] = []
    row = 0
    spaces = 0

    for char in line:
        if char.isspace():
            spaces += 1
        else:
            word.append(char)

        if spaces > 0:
            if string_width(segments[row]) + string_width(word) + spaces > width:
                row += 1
                segments.append([])
            segments[row].extend(word)
            segments[row].extend(" " * spaces)
            spaces = 0
            word = []
        else:
            # A double-width character that would overflow the budget pushes
            # the pending word onto its own segment.
            if string_width(word) + char_width(word[-1]) > width:
                if segments[row]:
                    row += 1
                    segments.append([])
                segments[row].extend(word)
                word = []

    if string_width(segments[row]) + string_width(word) + spaces >= width:
        segments.append(word + [" "] * (spaces + 1))
    else:
        segments[row].extend(word)
        segments[row].extend(" " * (spaces + 1))

    return ["".join(segment) for segment in segments]


__all__ = ["wrap", "char_width", "string_width"]
