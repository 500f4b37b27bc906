"""Executable Textual app that hosts the modal engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    import pyperclip
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use vim_textarea.adapters.textual.app"
    ) from exc

from vim_textarea.config import EngineConfig
from vim_textarea.engine import EngineView, ModalEngine
from vim_textarea.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks, visual_rows

CURSOR_STYLE = "reverse"


def render_view(view: EngineView) -> Text:
    """Paint wrapped rows, highlighting the cursor cell."""

    text = Text()
    for index, (segment, cursor) in enumerate(visual_rows(view)):
        if index:
            text.append("\n")
        if cursor is None:
            text.append(segment)
            continue
        # The landing cell past the end of a line is a blank.
        cell = segment[cursor] if cursor < len(segment) else " "
        text.append(segment[:cursor])
        text.append(cell if cell.strip() else " ", style=CURSOR_STYLE)
        text.append(segment[cursor + 1 :])
    return text


@dataclass
class UIState:
    status_text: str = ""
    message_text: str = ""


class VimTextareaApp(App[None]):
    """Minimal Textual UI embedding the modal engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#message-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        config: EngineConfig | None = None,
        text: str = "",
    ) -> None:
        super().__init__()
        self._state = UIState()
        self.engine = ModalEngine(config, text=text)
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        yield self._status_widget
        yield self._message_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            request_clipboard=self._read_clipboard,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.engine, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def on_paste(self, event: events.Paste) -> None:
        if self.adapter and event.text:
            self.adapter.paste(event.text)
            event.stop()

    def _read_clipboard(self) -> None:
        if not self.adapter:
            return
        try:
            clipboard = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            self.adapter.paste_failed(exc)
            self._show_message(f"clipboard unavailable: {exc}")
            return
        if clipboard:
            self.adapter.paste(clipboard)
        else:
            self._show_message("clipboard is empty")

    def _update_view(self, view: EngineView) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_view(view))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_message(self, message: str) -> None:
        self._state.message_text = message
        if self._message_widget:
            self._message_widget.update(message)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "register.updated":
            kind = getattr(payload, "type", "")
            self._show_message(f"register: {kind}" if kind else "register updated")
        elif name == "mode.changed":
            self._show_message("")

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("vim_textarea.adapters.textual").debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        if key == "escape":
            return ("ESC", None, ())
        if key in {"enter", "return"}:
            return ("ENTER", None, ())
        if key.startswith("ctrl+"):
            return (key.split("+", 1)[1], None, ("ctrl",))
        if event.character and event.is_printable:
            return (event.character, event.character, ())
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the vim-textarea Textual demo.")
    parser.add_argument("--width", type=int, help="Wrap width in cells")
    parser.add_argument("--height", type=int, help="Visible rows")
    parser.add_argument("--char-limit", type=int, help="Maximum characters per line")
    parser.add_argument("--file", type=Path, help="Load initial text from a file")
    parser.add_argument(
        "--list-keys",
        action="store_true",
        help="Print the default key bindings and exit",
    )
    return parser.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> EngineConfig:
    overrides = {
        "width": args.width,
        "height": args.height,
        "char_limit": args.char_limit,
    }
    return EngineConfig.from_env(
        **{name: value for name, value in overrides.items() if value is not None}
    )


def _print_bindings(engine: ModalEngine) -> None:
    registry = engine.manager.keymap_registry
    for mode in ("normal", "insert"):
        print(f"[{mode}]")
        for keys, description in registry.describe(mode):
            print(f"  {keys:<12} {description}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config = _config_from_args(args)
    if args.list_keys:
        _print_bindings(ModalEngine(config))
        return
    text = args.file.read_text(encoding="utf-8") if args.file else ""
    app = VimTextareaApp(config=config, text=text)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
