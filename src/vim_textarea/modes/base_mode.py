"""Key events, results and the shared context modes operate on."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, DefaultDict, Dict, List, Optional, Tuple

from vim_textarea.buffer import LineGrid, UndoTimeline, UnnamedRegister
from vim_textarea.navigation import Navigator

# Event names published on the ModeBus.
EDIT_BOUNDARY = "edit.boundary"
MODE_CHANGED = "mode.changed"
REGISTER_UPDATED = "register.updated"
PASTE_REQUESTED = "paste.requested"

Listener = Callable[[Any], None]


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    ``key`` is the logical key name (``"x"``, ``"ESC"``, ``"ENTER"``) and
    ``text`` the printable text the key produces, if any.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """What a mode did with one key.

    ``edit_boundary`` marks the completion of one user-visible change; the
    manager turns it into an ``edit.boundary`` bus event.
    """

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None
    edit_boundary: bool = False
    paste_requested: bool = False


class ModeBus:
    """Synchronous publish/subscribe channel between modes and the host."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, event: str, callback: Listener) -> None:
        self._listeners[event].append(callback)

    def unsubscribe(self, event: str, callback: Listener) -> None:
        listeners = self._listeners[event]
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, event: str, payload: Any = None) -> None:
        # Copy so a listener may unsubscribe itself while being notified.
        for callback in tuple(self._listeners[event]):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Everything an action may touch: text, cursor, register, history."""

    buffer: LineGrid
    navigator: Navigator
    register: UnnamedRegister
    history: UndoTimeline
    bus: ModeBus
    extras: Dict[str, object] = field(default_factory=dict)


class Mode:
    """A named key interpreter. Subclasses implement :meth:`handle_key`."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def pending_display(self) -> str:
        return ""

    def on_enter(self, previous: Optional[str]) -> None:
        """Called after the manager makes this mode active."""

    def on_exit(self, next_mode: Optional[str]) -> None:
        """Called before the manager leaves this mode."""

    def handle_key(self, key: KeyInput) -> ModeResult:
        raise NotImplementedError(f"{type(self).__name__} must handle keys")
