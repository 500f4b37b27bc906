"""Insert mode: bound editing keys plus literal text insertion."""

from __future__ import annotations

from vim_textarea.actions.insert import insert_text

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode, key_text, key_to_token


class InsertMode(KeymapMode):
    name = "insert"

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self.resolver.resolve(self.name, (key_to_token(key),), context=self.flags)
        if result.status == "match" and result.match:
            return self.run_action(result.match)

        text = key_text(key)
        if text is None:
            return ModeResult(consumed=False, status="miss")
        return insert_text(self.context, text)
