"""Normal-mode operators, register puts and history navigation."""

from __future__ import annotations

from vim_textarea.config import EditorMode
from vim_textarea.keymaps.resolver import ResolutionMatch
from vim_textarea.modes.base_mode import REGISTER_UPDATED, ModeContext, ModeResult
from vim_textarea.runtime import telemetry

INSERT = EditorMode.INSERT.value


def _store(context: ModeContext, text: str, register_type: str = "character") -> None:
    if context.register.store(text, register_type=register_type):
        context.bus.emit(REGISTER_UPDATED, context.register.get())


def _edited(message: str, *, switch_to: str | None = None) -> ModeResult:
    return ModeResult(
        consumed=True, switch_to=switch_to, message=message, edit_boundary=True
    )


def delete_char(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.delete_on_cursor())
    return _edited("delete_char")


def delete_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.delete_line(), register_type="line")
    return _edited("delete_line")


def delete_to_line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.delete_before_cursor())
    return _edited("delete_to_line_start")


def delete_to_line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.delete_after_cursor())
    return _edited("delete_to_line_end")


def change_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.clear_line())
    return _edited("change_line", switch_to=INSERT)


def change_to_line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.delete_before_cursor())
    return _edited("change_to_line_start", switch_to=INSERT)


def change_to_line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.delete_after_cursor())
    context.navigator.move_right(bind_to_line=False)
    return _edited("change_to_line_end", switch_to=INSERT)


def yank_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    _store(context, context.buffer.current_line, register_type="line")
    return ModeResult(consumed=True, message="yank_line")


def put_after(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Put the register after the cursor, or on a new line below if line-wise."""

    del match
    value = context.register.get()
    if not value.text and not value.linewise:
        return ModeResult(consumed=True, status="noop", message="put_after")
    buffer = context.buffer
    if value.linewise:
        if not buffer.insert_line_below(buffer.cursor.row):
            return ModeResult(consumed=True, status="noop", message="put_after")
        buffer.insert(value.text)
        buffer.set_column(0)
    else:
        context.navigator.move_right(bind_to_line=False)
        buffer.insert(value.text)
        context.navigator.move_left()
    return _edited("put_after")


def put_before(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    value = context.register.get()
    if not value.text and not value.linewise:
        return ModeResult(consumed=True, status="noop", message="put_before")
    buffer = context.buffer
    if value.linewise:
        if not buffer.insert_line_above(buffer.cursor.row):
            return ModeResult(consumed=True, status="noop", message="put_before")
        buffer.insert(value.text)
        buffer.set_column(0)
    else:
        buffer.insert(value.text)
        context.navigator.move_left()
    return _edited("put_before")


def undo(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    entry = context.history.undo()
    if entry is None:
        return ModeResult(consumed=True, status="noop", message="undo")
    context.buffer.reset(entry.text)
    telemetry.record_event(
        "history.undo", data={"index": context.history.index, "label": entry.label}
    )
    return ModeResult(consumed=True, message="undo")


def redo(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    entry = context.history.redo()
    if entry is None:
        return ModeResult(consumed=True, status="noop", message="redo")
    context.buffer.reset(entry.text)
    telemetry.record_event(
        "history.redo", data={"index": context.history.index, "label": entry.label}
    )
    return ModeResult(consumed=True, message="redo")


__all__ = [
    "delete_char",
    "delete_line",
    "delete_to_line_start",
    "delete_to_line_end",
    "change_line",
    "change_to_line_start",
    "change_to_line_end",
    "yank_line",
    "put_after",
    "put_before",
    "undo",
    "redo",
]
