"""Operations the keymap table dispatches to."""

from . import core, editing, insert, motions
from .core import enter_insert_mode, exit_to_normal_mode
from .insert import insert_text
from .motions import CharSearch

__all__ = [
    "core",
    "editing",
    "insert",
    "motions",
    "enter_insert_mode",
    "exit_to_normal_mode",
    "insert_text",
    "CharSearch",
]
