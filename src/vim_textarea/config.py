"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

ENV_PREFIX = "VIM_TEXTAREA_"

MIN_WIDTH = 2
MIN_HEIGHT = 1
DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 6
DEFAULT_MAX_WIDTH = 500
DEFAULT_MAX_HEIGHT = 99
DEFAULT_CHAR_LIMIT = 400
DEFAULT_HISTORY_LIMIT = 20


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"


def clamp(value: int, low: int, high: int) -> int:
    if high < low:
        low, high = high, low
    return min(high, max(low, value))


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Construction-time settings for a :class:`~vim_textarea.engine.ModalEngine`.

    ``max_height`` doubles as the maximum number of buffer lines. A
    ``char_limit`` of zero or less disables the character limit.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    max_width: int = DEFAULT_MAX_WIDTH
    max_height: int = DEFAULT_MAX_HEIGHT
    char_limit: int = DEFAULT_CHAR_LIMIT
    history_limit: int = DEFAULT_HISTORY_LIMIT
    initial_mode: EditorMode = EditorMode.NORMAL

    def __post_init__(self) -> None:
        if self.max_width < MIN_WIDTH:
            raise ValueError(f"max_width must be at least {MIN_WIDTH}")
        if self.max_height < MIN_HEIGHT:
            raise ValueError(f"max_height must be at least {MIN_HEIGHT}")
        if self.history_limit < 1:
            raise ValueError("history_limit must be positive")
        object.__setattr__(self, "initial_mode", EditorMode(self.initial_mode))
        object.__setattr__(self, "width", clamp(self.width, MIN_WIDTH, self.max_width))
        object.__setattr__(
            self, "height", clamp(self.height, MIN_HEIGHT, self.max_height)
        )

    @classmethod
    def from_env(cls, **overrides: object) -> "EngineConfig":
        """Build a config from ``VIM_TEXTAREA_*`` variables.

        Unset or malformed variables fall back to the defaults; keyword
        ``overrides`` win over the environment.
        """

        values: dict[str, object] = {
            "width": _env_int("WIDTH", DEFAULT_WIDTH),
            "height": _env_int("HEIGHT", DEFAULT_HEIGHT),
            "max_width": _env_int("MAX_WIDTH", DEFAULT_MAX_WIDTH),
            "max_height": _env_int("MAX_HEIGHT", DEFAULT_MAX_HEIGHT),
            "char_limit": _env_int("CHAR_LIMIT", DEFAULT_CHAR_LIMIT),
            "history_limit": _env_int("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT),
            "initial_mode": _env_mode("INITIAL_MODE", EditorMode.NORMAL),
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}")


def _env_int(name: str, fallback: int) -> int:
    value = _env(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_mode(name: str, fallback: EditorMode) -> EditorMode:
    value = _env(name)
    if value is None:
        return fallback
    try:
        return EditorMode(value.strip().lower())
    except ValueError:
        return fallback


__all__ = [
    "EditorMode",
    "EngineConfig",
    "MIN_WIDTH",
    "MIN_HEIGHT",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_MAX_WIDTH",
    "DEFAULT_MAX_HEIGHT",
    "DEFAULT_CHAR_LIMIT",
    "DEFAULT_HISTORY_LIMIT",
    "clamp",
]
