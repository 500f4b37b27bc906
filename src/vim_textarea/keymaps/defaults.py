"""Built-in keymaps that seed Normal and Insert mode."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Optional, Sequence

from vim_textarea.actions import core as core_actions
from vim_textarea.actions import editing as edit_actions
from vim_textarea.actions import insert as insert_actions
from vim_textarea.actions import motions as motion_actions

from .models import CHAR_ARGUMENT, ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

NORMAL = "normal"
INSERT = "insert"

_ACTION_TABLE: tuple[tuple[str, Callable[..., object], str], ...] = (
    # mode transitions
    ("core.enter_insert", core_actions.enter_insert_mode, "Insert before the cursor"),
    ("core.append", core_actions.append_after_cursor, "Insert after the cursor"),
    ("core.append_line_end", core_actions.append_at_line_end, "Insert at the end of the line"),
    ("core.insert_line_start", core_actions.insert_at_line_start, "Insert before the first non-blank character"),
    ("core.open_below", core_actions.open_line_below, "Open a line below and insert"),
    ("core.open_above", core_actions.open_line_above, "Open a line above and insert"),
    ("core.exit_to_normal", core_actions.exit_to_normal_mode, "Return to normal mode"),
    ("core.cancel", core_actions.cancel_pending, "Cancel the pending sequence"),
    # motions
    ("motion.left", motion_actions.move_left, "Left"),
    ("motion.right", motion_actions.move_right, "Right"),
    ("motion.up", motion_actions.move_up, "Up"),
    ("motion.down", motion_actions.move_down, "Down"),
    ("motion.word_start_forward", motion_actions.word_start_forward, "Next word start"),
    ("motion.word_start_backward", motion_actions.word_start_backward, "Previous word start"),
    ("motion.word_end_forward", motion_actions.word_end_forward, "Next word end"),
    ("motion.word_end_backward", motion_actions.word_end_backward, "Previous word end"),
    ("motion.line_start", motion_actions.line_start, "Start of line"),
    ("motion.first_non_blank", motion_actions.first_non_blank, "First non-blank character"),
    ("motion.line_end", motion_actions.line_end, "End of line"),
    ("motion.first_row", motion_actions.first_row, "First line"),
    ("motion.last_row", motion_actions.last_row, "Last line"),
    ("motion.find_forward", motion_actions.find_char_forward, "Find character to the right"),
    ("motion.find_backward", motion_actions.find_char_backward, "Find character to the left"),
    ("motion.till_forward", motion_actions.till_char_forward, "Till character to the right"),
    ("motion.till_backward", motion_actions.till_char_backward, "Till character to the left"),
    ("motion.repeat_search", motion_actions.repeat_search, "Repeat last character search"),
    ("motion.repeat_search_reversed", motion_actions.repeat_search_reversed, "Repeat last character search backwards"),
    # operators and history
    ("edit.delete_char", edit_actions.delete_char, "Delete character under cursor"),
    ("edit.delete_line", edit_actions.delete_line, "Delete line"),
    ("edit.delete_to_line_start", edit_actions.delete_to_line_start, "Delete to start of line"),
    ("edit.delete_to_line_end", edit_actions.delete_to_line_end, "Delete to end of line"),
    ("edit.change_line", edit_actions.change_line, "Change line"),
    ("edit.change_to_line_start", edit_actions.change_to_line_start, "Change to start of line"),
    ("edit.change_to_line_end", edit_actions.change_to_line_end, "Change to end of line"),
    ("edit.yank_line", edit_actions.yank_line, "Yank line"),
    ("edit.put_after", edit_actions.put_after, "Put register after cursor"),
    ("edit.put_before", edit_actions.put_before, "Put register before cursor"),
    ("history.undo", edit_actions.undo, "Undo"),
    ("history.redo", edit_actions.redo, "Redo"),
    # insert mode
    ("insert.newline", insert_actions.insert_newline, "Split line at cursor"),
    ("insert.backspace", insert_actions.delete_backward, "Delete previous character"),
    ("insert.delete", insert_actions.delete_forward, "Delete character under cursor"),
    ("insert.kill_line_end", insert_actions.kill_to_line_end, "Delete to end of line"),
    ("insert.kill_line_start", insert_actions.kill_to_line_start, "Delete to start of line"),
    ("insert.delete_word", insert_actions.delete_word_backward, "Delete previous word"),
    ("insert.left", insert_actions.cursor_left, "Left"),
    ("insert.right", insert_actions.cursor_right, "Right"),
    ("insert.up", insert_actions.cursor_up, "Up"),
    ("insert.down", insert_actions.cursor_down, "Down"),
    ("insert.home", insert_actions.cursor_home, "Start of line"),
    ("insert.end", insert_actions.cursor_end, "End of line"),
    ("insert.paste", insert_actions.request_paste, "Paste from the clipboard"),
)

# f, F, t and T read the next key as the character to search for.
_CHAR_ARGUMENT_ACTIONS = frozenset(
    {
        "motion.find_forward",
        "motion.find_backward",
        "motion.till_forward",
        "motion.till_backward",
    }
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = tuple(
    ActionRef(
        id=action_id,
        handler=handler,
        description=description,
        argument=CHAR_ARGUMENT if action_id in _CHAR_ARGUMENT_ACTIONS else None,
    )
    for action_id, handler, description in _ACTION_TABLE
)


def _bind(mode: str, name: str, keys: Sequence[str], action_id: str) -> Binding:
    return Binding(
        id=f"{mode}.{name}",
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind(NORMAL, "cancel", ("ESC",), "core.cancel"),
    _bind(NORMAL, "enter_insert", ("i",), "core.enter_insert"),
    _bind(NORMAL, "append", ("a",), "core.append"),
    _bind(NORMAL, "append_line_end", ("A",), "core.append_line_end"),
    _bind(NORMAL, "insert_line_start", ("I",), "core.insert_line_start"),
    _bind(NORMAL, "open_below", ("o",), "core.open_below"),
    _bind(NORMAL, "open_above", ("O",), "core.open_above"),
    _bind(NORMAL, "left", ("h",), "motion.left"),
    _bind(NORMAL, "down", ("j",), "motion.down"),
    _bind(NORMAL, "up", ("k",), "motion.up"),
    _bind(NORMAL, "right", ("l",), "motion.right"),
    _bind(NORMAL, "arrow_left", ("LEFT",), "motion.left"),
    _bind(NORMAL, "arrow_down", ("DOWN",), "motion.down"),
    _bind(NORMAL, "arrow_up", ("UP",), "motion.up"),
    _bind(NORMAL, "arrow_right", ("RIGHT",), "motion.right"),
    _bind(NORMAL, "word_start_forward", ("w",), "motion.word_start_forward"),
    _bind(NORMAL, "word_start_forward_big", ("W",), "motion.word_start_forward"),
    _bind(NORMAL, "word_start_backward", ("b",), "motion.word_start_backward"),
    _bind(NORMAL, "word_start_backward_big", ("B",), "motion.word_start_backward"),
    _bind(NORMAL, "word_end_forward", ("e",), "motion.word_end_forward"),
    _bind(NORMAL, "word_end_forward_big", ("E",), "motion.word_end_forward"),
    _bind(NORMAL, "word_end_backward", ("g", "e"), "motion.word_end_backward"),
    _bind(NORMAL, "word_end_backward_big", ("g", "E"), "motion.word_end_backward"),
    _bind(NORMAL, "line_start", ("0",), "motion.line_start"),
    _bind(NORMAL, "home", ("HOME",), "motion.line_start"),
    _bind(NORMAL, "first_non_blank", ("^",), "motion.first_non_blank"),
    _bind(NORMAL, "line_end", ("$",), "motion.line_end"),
    _bind(NORMAL, "end", ("END",), "motion.line_end"),
    _bind(NORMAL, "first_row", ("g", "g"), "motion.first_row"),
    _bind(NORMAL, "last_row", ("G",), "motion.last_row"),
    _bind(NORMAL, "find_forward", ("f",), "motion.find_forward"),
    _bind(NORMAL, "find_backward", ("F",), "motion.find_backward"),
    _bind(NORMAL, "till_forward", ("t",), "motion.till_forward"),
    _bind(NORMAL, "till_backward", ("T",), "motion.till_backward"),
    _bind(NORMAL, "repeat_search", (";",), "motion.repeat_search"),
    _bind(NORMAL, "repeat_search_reversed", (",",), "motion.repeat_search_reversed"),
    _bind(NORMAL, "delete_char", ("x",), "edit.delete_char"),
    _bind(NORMAL, "delete_line", ("d", "d"), "edit.delete_line"),
    _bind(NORMAL, "delete_to_line_start", ("d", "^"), "edit.delete_to_line_start"),
    _bind(NORMAL, "delete_to_line_end", ("d", "$"), "edit.delete_to_line_end"),
    _bind(NORMAL, "delete_to_line_end_short", ("D",), "edit.delete_to_line_end"),
    _bind(NORMAL, "change_line", ("c", "c"), "edit.change_line"),
    _bind(NORMAL, "change_to_line_start", ("c", "^"), "edit.change_to_line_start"),
    _bind(NORMAL, "change_to_line_end", ("c", "$"), "edit.change_to_line_end"),
    _bind(NORMAL, "change_to_line_end_short", ("C",), "edit.change_to_line_end"),
    _bind(NORMAL, "yank_line", ("y", "y"), "edit.yank_line"),
    _bind(NORMAL, "put_after", ("p",), "edit.put_after"),
    _bind(NORMAL, "put_before", ("P",), "edit.put_before"),
    _bind(NORMAL, "undo", ("u",), "history.undo"),
    _bind(NORMAL, "redo", ("ctrl+r",), "history.redo"),
    _bind(INSERT, "exit_escape", ("ESC",), "core.exit_to_normal"),
    _bind(INSERT, "newline", ("ENTER",), "insert.newline"),
    _bind(INSERT, "backspace", ("BACKSPACE",), "insert.backspace"),
    _bind(INSERT, "delete", ("DELETE",), "insert.delete"),
    _bind(INSERT, "kill_line_end", ("ctrl+k",), "insert.kill_line_end"),
    _bind(INSERT, "kill_line_start", ("ctrl+u",), "insert.kill_line_start"),
    _bind(INSERT, "delete_word", ("ctrl+w",), "insert.delete_word"),
    _bind(INSERT, "left", ("LEFT",), "insert.left"),
    _bind(INSERT, "right", ("RIGHT",), "insert.right"),
    _bind(INSERT, "up", ("UP",), "insert.up"),
    _bind(INSERT, "down", ("DOWN",), "insert.down"),
    _bind(INSERT, "home", ("HOME",), "insert.home"),
    _bind(INSERT, "end", ("END",), "insert.end"),
    _bind(INSERT, "paste", ("ctrl+v",), "insert.paste"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    per_mode_overrides: Mapping[str, Iterable[Binding]] | None = None,
) -> None:
    """Register the built-in actions and bindings.

    ``include_*``/``exclude_*`` filter the built-ins by id. Overrides are
    registered last and replace whatever they collide with, but each one must
    belong to the mode it is listed under.
    """

    for action in _filtered(DEFAULT_ACTIONS, include_actions, exclude_actions):
        registry.register_action(action, replace=replace)
    for binding in _filtered(DEFAULT_BINDINGS, include_bindings, exclude_bindings):
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)

    for mode, bindings in (per_mode_overrides or {}).items():
        for binding in bindings:
            if binding.mode != mode:
                raise ValueError(
                    f"Override binding '{binding.id}' must target mode '{mode}'"
                )
            registry.register_binding(binding, replace=True)


def _filtered(items, include: Optional[Sequence[str]], exclude: Optional[Sequence[str]]):
    wanted = set(include) if include else None
    unwanted = set(exclude or ())
    for item in items:
        if wanted is not None and item.id not in wanted:
            continue
        if item.id not in unwanted:
            yield item


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
