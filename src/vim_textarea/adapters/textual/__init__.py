"""Textual host for the modal engine.

Only the controller is imported here; the demo app lives in ``.app`` and
needs the ``textual`` extra.
"""

from .controller import TextualEditorAdapter, TextualUIHooks, status_line, visual_rows

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "status_line", "visual_rows"]
