from __future__ import annotations

from vim_textarea.buffer import LineGrid, UnnamedRegister, clamp_cursor, sanitize


def make_grid(text: str = "", **limits: int) -> LineGrid:
    return LineGrid.from_text(text, **limits)


def test_from_text_places_cursor_on_last_character() -> None:
    grid = make_grid("hello\nworld")

    assert grid.lines == ("hello", "world")
    assert grid.position == (1, 4)


def test_empty_grid_is_one_empty_line() -> None:
    grid = LineGrid()

    assert grid.lines == ("",)
    assert grid.line_count == 1
    assert grid.text() == ""
    assert grid.length() == 0


def test_reset_drops_single_trailing_newline() -> None:
    grid = make_grid("one\ntwo\n")

    assert grid.text() == "one\ntwo"


def test_clamp_cursor_stops_on_last_character_unless_past_end() -> None:
    lines = ["abc", ""]

    assert clamp_cursor(lines, 0, 9) == (0, 3)
    assert clamp_cursor(lines, 0, 9, past_end=False) == (0, 2)
    assert clamp_cursor(lines, 5, 4, past_end=False) == (1, 0)


def test_delete_line_lands_on_last_character_of_next_line() -> None:
    grid = make_grid("long line\nab")
    grid.place(0, 8)

    grid.delete_line()

    assert grid.position == (0, 1)


def test_insert_keeps_text_around_the_cursor() -> None:
    grid = make_grid("ad")
    grid.place(0, 1)

    assert grid.insert("b\nc") is True

    assert grid.lines == ("ab", "cd")
    assert grid.position == (1, 1)


def test_insert_truncates_at_char_limit() -> None:
    grid = LineGrid(char_limit=5)

    assert grid.insert("abcdefg") is True
    assert grid.text() == "abcde"
    assert grid.insert("x") is False
    assert grid.text() == "abcde"


def test_line_breaks_count_towards_char_limit() -> None:
    grid = LineGrid(char_limit=4)

    grid.insert("ab\ncd")

    assert grid.text() == "ab\nc"
    assert grid.length() == 4


def test_new_lines_are_refused_at_char_limit() -> None:
    grid = LineGrid(char_limit=5)
    grid.insert("abcde")

    assert grid.split_at(0, 2) is False
    assert grid.insert_line_below(0) is False
    assert grid.insert_line_above(0) is False
    assert grid.lines == ("abcde",)
    assert grid.length() == 5


def test_new_line_allowed_one_below_char_limit() -> None:
    grid = LineGrid(char_limit=5)
    grid.insert("abcd")

    assert grid.insert_line_below(0) is True
    assert grid.length() == 5
    assert grid.insert_line_above(0) is False


def test_insert_drops_lines_beyond_max_height() -> None:
    grid = LineGrid(max_height=2)

    grid.insert("a\nb\nc")

    assert grid.lines == ("a", "b")
    assert grid.position == (1, 1)


def test_insert_sanitizes_tabs_and_carriage_returns() -> None:
    grid = LineGrid()

    grid.insert("a\tb\r\nc\x07")

    assert grid.lines == ("a    b", "c")
    assert sanitize("x\ry") == "x\ny"


def test_insert_of_nothing_is_a_noop() -> None:
    grid = make_grid("abc")
    version = grid.version

    assert grid.insert("") is False
    assert grid.version == version


def test_delete_on_cursor_returns_removed_character() -> None:
    grid = make_grid("abc")
    grid.place(0, 0)

    assert grid.delete_on_cursor() == "a"
    assert grid.current_line == "bc"
    assert grid.position == (0, 0)


def test_delete_on_last_character_steps_back() -> None:
    grid = make_grid("abc")

    assert grid.delete_on_cursor() == "c"
    assert grid.current_line == "ab"
    assert grid.position == (0, 1)


def test_delete_on_empty_line_is_a_noop() -> None:
    grid = LineGrid()

    assert grid.delete_on_cursor() == ""
    assert grid.lines == ("",)


def test_delete_before_and_after_cursor() -> None:
    grid = make_grid("hello world")
    grid.place(0, 6)

    assert grid.delete_before_cursor() == "hello "
    assert grid.current_line == "world"
    assert grid.position == (0, 0)

    grid = make_grid("hello world")
    grid.place(0, 5)

    assert grid.delete_after_cursor() == " world"
    assert grid.current_line == "hello"
    assert grid.position == (0, 4)


def test_delete_line_never_removes_the_last_line() -> None:
    grid = make_grid("a\nb\nc")

    for _ in range(5):
        grid.delete_line()
        assert grid.line_count >= 1

    assert grid.lines == ("",)
    assert grid.position == (0, 0)


def test_delete_line_in_the_middle_clamps_column() -> None:
    grid = make_grid("a\nbb\nc")
    grid.place(1, 1)

    assert grid.delete_line() == "bb"
    assert grid.lines == ("a", "c")
    assert grid.position == (1, 0)


def test_clear_line_keeps_the_line() -> None:
    grid = make_grid("one\ntwo")

    assert grid.clear_line() == "two"
    assert grid.lines == ("one", "")
    assert grid.position == (1, 0)


def test_split_at_moves_tail_to_new_line() -> None:
    grid = make_grid("hello")

    assert grid.split_at(0, 2) is True
    assert grid.lines == ("he", "llo")
    assert grid.position == (1, 0)


def test_split_at_max_height_is_refused() -> None:
    grid = make_grid("a\nb", max_height=2)

    assert grid.split_at(0, 1) is False
    assert grid.lines == ("a", "b")


def test_merge_places_cursor_on_join_point() -> None:
    grid = make_grid("foo\nbar")

    assert grid.merge_with_next(0) is True
    assert grid.lines == ("foobar",)
    assert grid.position == (0, 3)

    grid = make_grid("foo\nbar")
    assert grid.merge_with_previous(1) is True
    assert grid.position == (0, 3)


def test_merge_at_buffer_edges_is_a_noop() -> None:
    grid = make_grid("foo\nbar")

    assert grid.merge_with_previous(0) is False
    assert grid.merge_with_next(1) is False
    assert grid.lines == ("foo", "bar")


def test_insert_line_above_and_below() -> None:
    grid = make_grid("a\nb")

    assert grid.insert_line_below(0) is True
    assert grid.lines == ("a", "", "b")
    assert grid.position == (1, 0)

    assert grid.insert_line_above(0) is True
    assert grid.lines == ("", "a", "", "b")
    assert grid.position == (0, 0)


def test_backspace_at_column_zero_merges_lines() -> None:
    grid = make_grid("ab\ncd")
    grid.place(1, 0)

    assert grid.delete_char_before() == "\n"
    assert grid.lines == ("abcd",)
    assert grid.position == (0, 2)


def test_delete_char_forward_at_end_of_line_joins_next() -> None:
    grid = make_grid("ab\ncd")
    grid.place(0, 2)

    assert grid.delete_char_forward() == "\n"
    assert grid.lines == ("abcd",)


def test_delete_word_before_takes_trailing_blanks() -> None:
    grid = make_grid("foo bar  ")
    grid.place(0, 9)

    assert grid.delete_word_before() == "bar  "
    assert grid.current_line == "foo "
    assert grid.position == (0, 4)


def test_every_mutation_bumps_version() -> None:
    grid = make_grid("abc")
    version = grid.version

    grid.delete_on_cursor()
    grid.split_at(0, 1)

    assert grid.version == version + 2


def test_cursor_stays_inside_line_after_mutations() -> None:
    grid = make_grid("alpha beta\ngamma\ndelta")
    grid.place(0, 10)
    grid.delete_line()
    grid.merge_with_next(0)
    grid.delete_after_cursor()

    row, col = grid.position
    assert 0 <= row < grid.line_count
    assert 0 <= col <= len(grid.get_line(row))


def test_unnamed_register_keeps_empty_text_only_when_linewise() -> None:
    register = UnnamedRegister()

    assert register.store("abc") is True
    assert register.store("") is False
    assert register.text == "abc"

    assert register.store("", register_type="line") is True
    assert register.text == ""
    assert register.get().linewise is True

    register.store("line", register_type="line")
    assert register.get().linewise is True
