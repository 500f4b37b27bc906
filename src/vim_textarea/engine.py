"""Embeddable modal text-editing engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from vim_textarea.buffer import LineGrid, UndoTimeline, UnnamedRegister
from vim_textarea.config import MIN_HEIGHT, MIN_WIDTH, EditorMode, EngineConfig, clamp
from vim_textarea.keymaps import KeymapRegistry
from vim_textarea.layout import LineInfo, wrap
from vim_textarea.modes import (
    EDIT_BOUNDARY,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    NormalMode,
    parse_key,
)
from vim_textarea.modes.mode_manager import ModeManager
from vim_textarea.navigation import Navigator
from vim_textarea.runtime import telemetry

KeyLike = Union[str, KeyInput]


@dataclass(frozen=True, slots=True)
class KeyOutcome:
    """What one key event did, so the host can decide whether to re-render.

    ``paste_requested`` asks the host to read its clipboard and answer with
    :meth:`ModalEngine.paste` or :meth:`ModalEngine.paste_failed`.
    """

    mode_changed: bool
    edited: bool
    paste_requested: bool = False
    status: str = "ok"
    consumed: bool = True


@dataclass(frozen=True, slots=True)
class EngineView:
    """Immutable snapshot a renderer paints from."""

    lines: tuple[str, ...]
    row: int
    column: int
    mode: EditorMode
    pending: str
    line_info: LineInfo
    width: int
    height: int

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ModalEngine:
    """Normal/Insert editing over a line grid, driven one key at a time.

    The engine owns the buffer, cursor, unnamed register and undo history.
    Snapshots are taken when the interpreter reports an edit boundary
    (leaving Insert mode or completing a Normal-mode change), never per
    keystroke.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        text: str = "",
        keymap_registry: KeymapRegistry | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.logger = telemetry.get_logger("vim_textarea.engine")
        self.width = self.config.width
        self.height = self.config.height
        self.last_error: Optional[BaseException] = None

        self.buffer = LineGrid(
            max_height=self.config.max_height, char_limit=self.config.char_limit
        )
        self.navigator = Navigator(self.buffer, self.width)
        self.register = UnnamedRegister()
        self.history = UndoTimeline(self.config.history_limit)
        self.bus = ModeBus()
        self.context = ModeContext(
            buffer=self.buffer,
            navigator=self.navigator,
            register=self.register,
            history=self.history,
            bus=self.bus,
        )
        self.manager = ModeManager(self.context, keymap_registry=keymap_registry)
        self._normal = self.manager.register_mode(NormalMode)
        self.manager.register_mode(InsertMode)
        self.manager.switch_mode(self.config.initial_mode.value)
        self.bus.subscribe(EDIT_BOUNDARY, self._on_edit_boundary)

        if text:
            self.set_text(text)

    # ------------------------------------------------------------------
    # Key input
    # ------------------------------------------------------------------

    def handle_key(self, key: KeyLike) -> KeyOutcome:
        """Feed one logical key (``"x"``, ``"esc"``, ``"ctrl+r"`` or a KeyInput)."""

        key_input = parse_key(key) if isinstance(key, str) else key
        mode_before = self.manager.active_name
        version_before = self.buffer.version
        result = self.manager.handle_key(key_input)
        return KeyOutcome(
            mode_changed=self.manager.active_name != mode_before,
            edited=self.buffer.version != version_before,
            paste_requested=result.paste_requested,
            status=result.status,
            consumed=result.consumed,
        )

    def handle_keys(self, keys: Iterable[KeyLike]) -> List[KeyOutcome]:
        return [self.handle_key(key) for key in keys]

    # ------------------------------------------------------------------
    # Clipboard collaboration
    # ------------------------------------------------------------------

    def paste(self, text: str) -> bool:
        """Insert clipboard ``text`` at the cursor."""

        self.last_error = None
        inserted = self.buffer.insert(text)
        if inserted and self.mode() is EditorMode.NORMAL:
            self._on_edit_boundary({"label": "paste"})
        return inserted

    def paste_failed(self, error: BaseException) -> None:
        """Record a clipboard failure; the buffer is left untouched."""

        self.last_error = error
        telemetry.record_event(
            "paste.failed",
            level="error",
            data={"error": type(error).__name__, "detail": str(error)},
        )

    # ------------------------------------------------------------------
    # Text and state access
    # ------------------------------------------------------------------

    def current_text(self) -> str:
        return self.buffer.text()

    def set_text(self, text: str) -> None:
        """Replace the buffer and restart history from this single snapshot."""

        self.buffer.reset(text)
        self.history.reset(self.buffer.text())
        self._normal.pending.clear()

    def cursor_row(self) -> int:
        return self.buffer.cursor.row

    def cursor_column(self) -> int:
        return self.buffer.cursor.col

    def mode(self) -> EditorMode:
        return EditorMode(self.manager.active_name)

    def pending_sequence_display(self) -> str:
        mode = self.manager.active_mode
        return mode.pending_display if mode else ""

    def resize(self, width: int, height: int) -> None:
        self.width = clamp(width, MIN_WIDTH, self.config.max_width)
        self.height = clamp(height, MIN_HEIGHT, self.config.max_height)
        self.navigator.resize(self.width)

    def view(self) -> EngineView:
        return EngineView(
            lines=tuple(self.buffer.lines),
            row=self.cursor_row(),
            column=self.cursor_column(),
            mode=self.mode(),
            pending=self.pending_sequence_display(),
            line_info=self.navigator.info(),
            width=self.width,
            height=self.height,
        )

    def visual_lines(self) -> List[List[str]]:
        """Soft-wrapped segments of every line at the current width."""

        return [wrap(line, self.width) for line in self.buffer.lines]

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def _on_edit_boundary(self, payload: object) -> None:
        label = ""
        if isinstance(payload, dict):
            label = str(payload.get("label", ""))
        if self.history.checkpoint(self.buffer.text(), label):
            telemetry.record_event(
                "history.checkpoint",
                level="debug",
                data={"label": label, "index": self.history.index},
            )


__all__ = ["ModalEngine", "KeyOutcome", "EngineView"]
