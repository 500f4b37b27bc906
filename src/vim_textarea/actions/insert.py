"""Insert-mode editing keys."""

from __future__ import annotations

from vim_textarea.keymaps.resolver import ResolutionMatch
from vim_textarea.modes.base_mode import ModeContext, ModeResult


def insert_text(context: ModeContext, text: str) -> ModeResult:
    """Insert printable ``text`` at the cursor (unbound fallback of Insert mode)."""

    inserted = context.buffer.insert(text)
    return ModeResult(
        consumed=True, status="ok" if inserted else "noop", message="insert_text"
    )


def insert_newline(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    cursor = context.buffer.cursor
    context.buffer.split_at(cursor.row, cursor.col)
    return ModeResult(consumed=True, message="newline")


def delete_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.delete_char_before()
    return ModeResult(consumed=True, message="backspace")


def delete_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.delete_char_forward()
    return ModeResult(consumed=True, message="delete")


def kill_to_line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    col = buffer.cursor.col
    if col >= len(buffer.current_line):
        buffer.merge_with_next(buffer.cursor.row)
    else:
        buffer.delete_after_cursor()
        buffer.set_column(col)
    return ModeResult(consumed=True, message="kill_line_end")


def kill_to_line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    if buffer.cursor.col <= 0:
        buffer.merge_with_previous(buffer.cursor.row)
    else:
        buffer.delete_before_cursor()
    return ModeResult(consumed=True, message="kill_line_start")


def delete_word_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.delete_word_before()
    return ModeResult(consumed=True, message="delete_word")


def cursor_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_left(bind_to_line=False)
    return ModeResult(consumed=True, message="left")


def cursor_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_right(bind_to_line=False)
    return ModeResult(consumed=True, message="right")


def cursor_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_up(bind_to_line=False)
    return ModeResult(consumed=True, message="up")


def cursor_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_down(bind_to_line=False)
    return ModeResult(consumed=True, message="down")


def cursor_home(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_to_line_start()
    return ModeResult(consumed=True, message="home")


def cursor_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.navigator.move_to_line_end(bind_to_line=False)
    return ModeResult(consumed=True, message="end")


def request_paste(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Ask the host for clipboard text; the host answers via ``ModalEngine.paste``."""

    del context, match
    return ModeResult(consumed=True, message="paste_requested", paste_requested=True)


__all__ = [
    "insert_text",
    "insert_newline",
    "delete_backward",
    "delete_forward",
    "kill_to_line_end",
    "kill_to_line_start",
    "delete_word_backward",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "cursor_down",
    "cursor_home",
    "cursor_end",
    "request_paste",
]
