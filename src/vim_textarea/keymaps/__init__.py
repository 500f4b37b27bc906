"""Declarative (mode, key sequence) -> action table."""

from .models import (
    CHAR_ARGUMENT,
    ActionRef,
    Binding,
    KeySequence,
    KeyStroke,
    WhenClause,
    normalize_key_name,
)
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import load_default_keymaps

__all__ = [
    "CHAR_ARGUMENT",
    "ActionRef",
    "Binding",
    "KeySequence",
    "KeyStroke",
    "WhenClause",
    "normalize_key_name",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "load_default_keymaps",
]
