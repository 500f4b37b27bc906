from __future__ import annotations

import pytest

from vim_textarea.buffer import LineGrid
from vim_textarea.navigation import CharStop, Direction, Navigator, WordStop


def make_navigator(
    text: str, row: int = 0, col: int = 0, *, width: int = 40
) -> Navigator:
    grid = LineGrid.from_text(text)
    grid.place(row, col)
    return Navigator(grid, width)


# ----------------------------------------------------------------------
# Horizontal
# ----------------------------------------------------------------------


def test_move_left_at_column_zero_is_idempotent() -> None:
    nav = make_navigator("abc")

    assert nav.move_left() is False
    assert nav.grid.position == (0, 0)


def test_move_right_stops_on_last_character_when_bound() -> None:
    nav = make_navigator("abc", col=2)

    assert nav.move_right(bind_to_line=True) is False
    assert nav.grid.position == (0, 2)

    assert nav.move_right(bind_to_line=False) is True
    assert nav.grid.position == (0, 3)


def test_line_start_and_end() -> None:
    nav = make_navigator("abc", col=1)

    assert nav.move_to_line_end(bind_to_line=True) is True
    assert nav.grid.cursor.col == 2
    assert nav.move_to_line_end(bind_to_line=False) is True
    assert nav.grid.cursor.col == 3
    assert nav.move_to_line_start() is True
    assert nav.grid.cursor.col == 0


@pytest.mark.parametrize(
    ("text", "expected"),
    [("   abc", 3), ("abc", 0), ("   ", 2), ("", 0)],
)
def test_first_non_blank(text: str, expected: int) -> None:
    nav = make_navigator(text)
    nav.grid.set_column(len(text))

    nav.move_to_first_non_blank()

    assert nav.grid.cursor.col == expected


# ----------------------------------------------------------------------
# Vertical
# ----------------------------------------------------------------------


def test_vertical_motion_keeps_preferred_column() -> None:
    nav = make_navigator("abcdef\nab\nabcdef", col=4)

    assert nav.move_down() is True
    assert nav.grid.position == (1, 1)

    assert nav.move_down() is True
    assert nav.grid.position == (2, 4)


def test_horizontal_move_forgets_preferred_column() -> None:
    nav = make_navigator("abcdef\nab\nabcdef", col=4)
    nav.move_down()

    nav.move_left()
    nav.move_down()

    assert nav.grid.position == (2, 0)


def test_vertical_motion_at_buffer_edges_is_a_noop() -> None:
    nav = make_navigator("one\ntwo")

    assert nav.move_up() is False
    assert nav.grid.position == (0, 0)

    nav.grid.place(1, 1)
    assert nav.move_down() is False
    assert nav.grid.position == (1, 1)


def test_vertical_motion_steps_through_wrapped_segments() -> None:
    nav = make_navigator("hello world\nxy", col=1, width=8)

    assert nav.move_down() is True
    assert nav.grid.position == (0, 7)
    assert nav.info().row_offset == 1

    assert nav.move_down() is True
    assert nav.grid.position == (1, 1)

    assert nav.move_up() is True
    assert nav.grid.position == (0, 7)

    assert nav.move_up() is True
    assert nav.grid.position == (0, 1)


def test_set_row_clamps_target() -> None:
    nav = make_navigator("a\nb\nc")

    assert nav.set_row(10) is True
    assert nav.grid.cursor.row == 2

    assert nav.move_to_first_row() is True
    assert nav.grid.cursor.row == 0
    assert nav.move_to_first_row() is False


def test_last_row_walks_through_wrapped_lines() -> None:
    nav = make_navigator("a long line that wraps\nb\nc", width=6)

    assert nav.move_to_last_row() is True
    assert nav.grid.cursor.row == 2


# ----------------------------------------------------------------------
# Word motion: every direction and stop combination
# ----------------------------------------------------------------------


def test_word_start_forward() -> None:
    nav = make_navigator("foo bar baz")

    assert nav.move_by_word(Direction.RIGHT, WordStop.INCIDENCE) is True
    assert nav.grid.cursor.col == 4
    nav.move_by_word(Direction.RIGHT, WordStop.INCIDENCE)
    assert nav.grid.cursor.col == 8


def test_word_end_forward() -> None:
    nav = make_navigator("foo bar baz")

    nav.move_by_word(Direction.RIGHT, WordStop.TERMINUS)
    assert nav.grid.cursor.col == 2
    nav.move_by_word(Direction.RIGHT, WordStop.TERMINUS)
    assert nav.grid.cursor.col == 6


def test_word_start_backward() -> None:
    nav = make_navigator("foo bar baz", col=8)

    nav.move_by_word(Direction.LEFT, WordStop.TERMINUS)
    assert nav.grid.cursor.col == 4
    nav.move_by_word(Direction.LEFT, WordStop.TERMINUS)
    assert nav.grid.cursor.col == 0


def test_word_end_backward() -> None:
    nav = make_navigator("foo bar baz", col=8)

    nav.move_by_word(Direction.LEFT, WordStop.INCIDENCE)
    assert nav.grid.cursor.col == 6
    nav.move_by_word(Direction.LEFT, WordStop.INCIDENCE)
    assert nav.grid.cursor.col == 2


def test_word_end_then_start_returns_to_word_start() -> None:
    nav = make_navigator("alpha beta gamma", col=6)

    nav.move_by_word(Direction.RIGHT, WordStop.TERMINUS)
    assert nav.grid.cursor.col == 9
    nav.move_by_word(Direction.LEFT, WordStop.TERMINUS)
    assert nav.grid.cursor.col == 6


def test_word_motion_crosses_line_breaks() -> None:
    nav = make_navigator("foo\nbar")

    nav.move_by_word(Direction.RIGHT, WordStop.INCIDENCE)

    assert nav.grid.position == (1, 0)

    nav.move_by_word(Direction.LEFT, WordStop.TERMINUS)

    assert nav.grid.position == (0, 0)


def test_word_motion_stops_on_empty_line() -> None:
    nav = make_navigator("foo\n\nbar")

    nav.move_by_word(Direction.RIGHT, WordStop.INCIDENCE)

    assert nav.grid.position == (1, 0)


def test_word_motion_off_the_last_line_is_a_noop() -> None:
    nav = make_navigator("foo bar", col=4)

    assert nav.move_by_word(Direction.RIGHT, WordStop.INCIDENCE) is False
    assert nav.grid.position == (0, 4)


def test_word_motion_off_the_first_line_is_a_noop() -> None:
    nav = make_navigator("foo bar")

    assert nav.move_by_word(Direction.LEFT, WordStop.TERMINUS) is False
    assert nav.grid.position == (0, 0)


def test_word_motion_over_single_character_lines() -> None:
    nav = make_navigator("a\nb")

    nav.move_by_word(Direction.RIGHT, WordStop.TERMINUS)

    assert nav.grid.position == (1, 0)


# ----------------------------------------------------------------------
# Character search
# ----------------------------------------------------------------------


def test_find_and_till_forward() -> None:
    nav = make_navigator("hello world")

    assert nav.move_by_character("o", Direction.RIGHT) is True
    assert nav.grid.cursor.col == 4

    nav.grid.set_column(0)
    assert nav.move_by_character("o", Direction.RIGHT, CharStop.BEFORE) is True
    assert nav.grid.cursor.col == 3


def test_search_starts_one_past_the_cursor() -> None:
    nav = make_navigator("hello world", col=4)

    nav.move_by_character("o", Direction.RIGHT)

    assert nav.grid.cursor.col == 7


def test_find_and_till_backward() -> None:
    nav = make_navigator("hello world", col=10)

    assert nav.move_by_character("o", Direction.LEFT) is True
    assert nav.grid.cursor.col == 7

    nav.grid.set_column(10)
    assert nav.move_by_character("o", Direction.LEFT, CharStop.BEFORE) is True
    assert nav.grid.cursor.col == 8


def test_missing_character_leaves_cursor() -> None:
    nav = make_navigator("hello world", col=2)

    assert nav.move_by_character("z", Direction.RIGHT) is False
    assert nav.move_by_character("z", Direction.LEFT) is False
    assert nav.grid.cursor.col == 2
