"""Cursor/navigation engine: character, line, word and search motions."""

from .directions import CharStop, Direction, WordStop
from .navigator import Navigator

__all__ = ["Navigator", "Direction", "WordStop", "CharStop"]
