"""Embeddable Vim-style modal text-editing engine."""

from .config import EditorMode, EngineConfig
from .engine import EngineView, KeyOutcome, ModalEngine

__all__ = [
    "EditorMode",
    "EngineConfig",
    "EngineView",
    "KeyOutcome",
    "ModalEngine",
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "layout",
    "modes",
    "navigation",
    "runtime",
]

__version__ = "0.1.0"
