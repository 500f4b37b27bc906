"""Mode transitions and their positioning side effects."""

from __future__ import annotations

from vim_textarea.config import EditorMode
from vim_textarea.keymaps.resolver import ResolutionMatch
from vim_textarea.modes.base_mode import ModeContext, ModeResult

INSERT = EditorMode.INSERT.value
NORMAL = EditorMode.NORMAL.value


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=INSERT, message="enter_insert")


def append_after_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_right(bind_to_line=False)
    return ModeResult(consumed=True, switch_to=INSERT, message="append")


def append_at_line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_to_line_end(bind_to_line=False)
    return ModeResult(consumed=True, switch_to=INSERT, message="append_line_end")


def insert_at_line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_to_first_non_blank()
    return ModeResult(consumed=True, switch_to=INSERT, message="insert_line_start")


def open_line_below(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.insert_line_below(buffer.cursor.row)
    return ModeResult(consumed=True, switch_to=INSERT, message="open_below")


def open_line_above(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.insert_line_above(buffer.cursor.row)
    return ModeResult(consumed=True, switch_to=INSERT, message="open_above")


def exit_to_normal_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Leave Insert mode, stepping back onto the last typed character."""

    del match
    context.navigator.move_left(bind_to_line=True)
    return ModeResult(
        consumed=True,
        switch_to=NORMAL,
        message="exit_insert",
        edit_boundary=True,
    )


def cancel_pending(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="cancelled")


__all__ = [
    "enter_insert_mode",
    "append_after_cursor",
    "append_at_line_end",
    "insert_at_line_start",
    "open_line_below",
    "open_line_above",
    "exit_to_normal_mode",
    "cancel_pending",
]
