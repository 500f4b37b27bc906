"""Modal command interpreter: modes, pending sequences and dispatch."""

from .base_mode import (
    EDIT_BOUNDARY,
    MODE_CHANGED,
    PASTE_REQUESTED,
    REGISTER_UPDATED,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
)
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .pending import PendingSequence
from .keymap_helpers import KeymapMode, key_to_token, parse_key

__all__ = [
    "EDIT_BOUNDARY",
    "MODE_CHANGED",
    "PASTE_REQUESTED",
    "REGISTER_UPDATED",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "PendingSequence",
    "KeymapMode",
    "key_to_token",
    "parse_key",
]
