"""Soft-wrap layout helpers shared by navigation and renderers."""

from .line_info import LineInfo, line_info, segment_starts
from .wrap import char_width, string_width, wrap

__all__ = [
    "LineInfo",
    "line_info",
    "segment_starts",
    "wrap",
    "char_width",
    "string_width",
]
