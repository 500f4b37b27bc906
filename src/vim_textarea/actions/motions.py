"""Normal-mode cursor motions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vim_textarea.keymaps.resolver import ResolutionMatch
from vim_textarea.modes.base_mode import ModeContext, ModeResult
from vim_textarea.navigation import CharStop, Direction, WordStop

LAST_SEARCH_KEY = "last_char_search"


@dataclass(frozen=True, slots=True)
class CharSearch:
    """Remembered ``f``/``F``/``t``/``T`` search, replayed by ``;`` and ``,``."""

    target: str
    direction: Direction
    stop: CharStop

    def reversed(self) -> "CharSearch":
        return CharSearch(self.target, self.direction.opposite, self.stop)


def _moved(moved: bool, message: str) -> ModeResult:
    return ModeResult(consumed=True, status="ok" if moved else "noop", message=message)


def move_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_left(bind_to_line=True), "left")


def move_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_right(bind_to_line=True), "right")


def move_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_up(bind_to_line=True), "up")


def move_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_down(bind_to_line=True), "down")


def word_start_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    moved = context.navigator.move_by_word(Direction.RIGHT, WordStop.INCIDENCE)
    return _moved(moved, "word_start_forward")


def word_start_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    moved = context.navigator.move_by_word(Direction.LEFT, WordStop.TERMINUS)
    return _moved(moved, "word_start_backward")


def word_end_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    moved = context.navigator.move_by_word(Direction.RIGHT, WordStop.TERMINUS)
    return _moved(moved, "word_end_forward")


def word_end_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    moved = context.navigator.move_by_word(Direction.LEFT, WordStop.INCIDENCE)
    return _moved(moved, "word_end_backward")


def line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_to_line_start(), "line_start")


def first_non_blank(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_to_first_non_blank(), "first_non_blank")


def line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_to_line_end(bind_to_line=True), "line_end")


def first_row(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_to_first_row(), "first_row")


def last_row(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _moved(context.navigator.move_to_last_row(), "last_row")


def _search(context: ModeContext, search: CharSearch, message: str) -> ModeResult:
    moved = context.navigator.move_by_character(
        search.target, search.direction, search.stop
    )
    return _moved(moved, message)


def _start_search(
    context: ModeContext,
    match: ResolutionMatch,
    direction: Direction,
    stop: CharStop,
    message: str,
) -> ModeResult:
    if not match.argument:
        return ModeResult(consumed=True, status="noop", message=message)
    search = CharSearch(match.argument, direction, stop)
    context.extras[LAST_SEARCH_KEY] = search
    return _search(context, search, message)


def find_char_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    return _start_search(context, match, Direction.RIGHT, CharStop.ON, "find_forward")


def find_char_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    return _start_search(context, match, Direction.LEFT, CharStop.ON, "find_backward")


def till_char_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    return _start_search(
        context, match, Direction.RIGHT, CharStop.BEFORE, "till_forward"
    )


def till_char_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    return _start_search(
        context, match, Direction.LEFT, CharStop.BEFORE, "till_backward"
    )


def _last_search(context: ModeContext) -> Optional[CharSearch]:
    search = context.extras.get(LAST_SEARCH_KEY)
    return search if isinstance(search, CharSearch) else None


def repeat_search(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    search = _last_search(context)
    if search is None:
        return _moved(False, "repeat_search")
    return _search(context, search, "repeat_search")


def repeat_search_reversed(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    search = _last_search(context)
    if search is None:
        return _moved(False, "repeat_search_reversed")
    return _search(context, search.reversed(), "repeat_search_reversed")


__all__ = [
    "CharSearch",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "word_start_forward",
    "word_start_backward",
    "word_end_forward",
    "word_end_backward",
    "line_start",
    "first_non_blank",
    "line_end",
    "first_row",
    "last_row",
    "find_char_forward",
    "find_char_backward",
    "till_char_forward",
    "till_char_backward",
    "repeat_search",
    "repeat_search_reversed",
]
