"""Line-grid storage, registers and undo/redo data structures."""

from .grid import LineGrid
from .registers import RegisterValue, UnnamedRegister
from .state import Cursor, CursorState
from .undo import UndoEntry, UndoTimeline
from .validation import clamp_cursor, sanitize

__all__ = [
    "LineGrid",
    "Cursor",
    "CursorState",
    "RegisterValue",
    "UnnamedRegister",
    "UndoTimeline",
    "UndoEntry",
    "clamp_cursor",
    "sanitize",
]
