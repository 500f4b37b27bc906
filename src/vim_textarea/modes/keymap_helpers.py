"""Key conversion helpers and the base class for keymap-driven modes."""

from __future__ import annotations

from typing import Mapping, Optional, cast

from vim_textarea.keymaps.models import KeyStroke
from vim_textarea.keymaps.resolver import KeymapResolver, ResolutionMatch
from vim_textarea.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return KeyStroke(key=key.key, modifiers=key.modifiers).token


def key_text(key: KeyInput) -> Optional[str]:
    """Printable text produced by ``key``, or ``None`` for named keys and chords."""

    if key.text is not None:
        return key.text or None
    if key.modifiers or len(key.key) != 1:
        return None
    return key.key


def parse_key(notation: str) -> KeyInput:
    """Turn host notation (``"a"``, ``"esc"``, ``"ctrl+r"``) into a KeyInput.

    Single characters carry themselves as text; named keys and chords carry
    none.
    """

    stroke = KeyStroke.parse(notation)
    printable = not stroke.modifiers and len(stroke.key) == 1
    return KeyInput(
        key=stroke.key,
        modifiers=stroke.modifiers,
        text=stroke.key if printable else None,
    )


class KeymapMode(Mode):
    """Mode whose keys are looked up through the shared keymap resolver.

    The resolver and the ``when``-clause flags live in ``context.extras``
    (the mode manager puts them there).
    """

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        resolver = context.extras.get("keymap_resolver")
        if not isinstance(resolver, KeymapResolver):
            raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
        self.resolver = resolver
        self.flags = cast(
            Mapping[str, bool], context.extras.setdefault("keymap_flags", {})
        )

    def run_action(self, match: ResolutionMatch) -> ModeResult:
        """Invoke the matched action; a handler returning nothing consumed the key."""

        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)
        return outcome if isinstance(outcome, ModeResult) else ModeResult(consumed=True)


__all__ = [
    "KeymapMode",
    "key_to_token",
    "key_text",
    "parse_key",
]
