"""Textual-facing controller that wires ModalEngine output into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from vim_textarea.engine import EngineView, KeyOutcome, ModalEngine
from vim_textarea.keymaps import normalize_key_name
from vim_textarea.layout import wrap
from vim_textarea.modes import MODE_CHANGED, REGISTER_UPDATED, KeyInput

# One visual row: its text and the index of the cursor cell, if any.
VisualRow = Tuple[str, Optional[int]]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[EngineView], None]
    update_status: Callable[[str], None] = _noop
    request_clipboard: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def status_line(view: EngineView) -> str:
    """Mode indicator, pending keys and cursor position for the status bar."""

    parts = [f"-- {view.mode.value.upper()} --"]
    if view.pending:
        parts.append(view.pending)
    parts.append(f"{view.row + 1}:{view.column + 1}")
    return "  ".join(parts)


def visual_rows(view: EngineView) -> List[VisualRow]:
    """Lay out ``view`` as wrapped rows, marking the cell under the cursor.

    The last segment of each line carries a trailing landing cell, so a
    cursor one past the end of its line still gets a cell to sit on.
    """

    rows: List[VisualRow] = []
    for index, line in enumerate(view.lines):
        start = 0
        for segment in wrap(line, view.width):
            cursor: Optional[int] = None
            if index == view.row and start <= view.column < start + len(segment):
                cursor = view.column - start
            rows.append((segment, cursor))
            start += len(segment)
    return rows


class TextualEditorAdapter:
    """Bridges ModalEngine results and bus events to a Textual-friendly surface."""

    def __init__(self, engine: ModalEngine, hooks: TextualUIHooks) -> None:
        self.engine = engine
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> KeyOutcome:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        key_input = KeyInput(
            key=normalize_key_name(key), text=text, modifiers=normalized_modifiers
        )
        self._log_state("key ->", key=key_input.key, text=text, mods=normalized_modifiers)
        outcome = self.engine.handle_key(key_input)
        self._log_state(
            "result <-",
            status=outcome.status,
            edited=outcome.edited,
            mode_changed=outcome.mode_changed,
        )
        self._refresh()
        if outcome.paste_requested:
            self.hooks.request_clipboard()
        return outcome

    def paste(self, text: str) -> bool:
        inserted = self.engine.paste(text)
        self._refresh()
        return inserted

    def paste_failed(self, error: BaseException) -> None:
        self.engine.paste_failed(error)
        self.hooks.update_status(f"paste failed: {error}")

    def resize(self, width: int, height: int) -> None:
        self.engine.resize(width, height)
        self._refresh()

    def _subscribe_events(self) -> None:
        bus = self.engine.bus
        for event in (MODE_CHANGED, REGISTER_UPDATED):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh(self) -> None:
        view = self.engine.view()
        self.hooks.update_view(view)
        self.hooks.update_status(status_line(view))

    def _log_state(self, prefix: str, **fields: object) -> None:
        view = self.engine.view()
        snapshot: dict[str, object] = {
            "mode": view.mode.value,
            "cursor": (view.row, view.column),
            "pending": view.pending,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "status_line", "visual_rows"]
