"""Normal mode: counts, multi-key sequences and argument-taking motions."""

from __future__ import annotations

from dataclasses import replace

from vim_textarea.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult
from .keymap_helpers import KeymapMode, key_text, key_to_token
from .pending import PendingSequence


class NormalMode(KeymapMode):
    """Resolves typed keys against the Normal-mode table.

    A prefix of a longer binding (``d``, ``g``) is held as pending; a key that
    completes no binding abandons the whole sequence without side effects.
    Actions flagged as taking a character argument (``f``, ``t``) hold until
    the next key arrives.
    """

    name = "normal"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._pending = PendingSequence()

    @property
    def pending(self) -> PendingSequence:
        return self._pending

    @property
    def pending_display(self) -> str:
        return self._pending.display

    def on_enter(self, previous: str | None) -> None:
        self._pending.clear()

    def on_exit(self, next_mode: str | None) -> None:
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)

        awaiting = self._pending.awaiting
        if awaiting is not None:
            argument = key_text(key)
            if token == "ESC" or argument is None:
                return self._cancel("argument_cancelled")
            self._pending.clear()
            return self.run_action(replace(awaiting, argument=argument))

        if self._pending.push_digit(token):
            return ModeResult(consumed=True, status="pending", message="count")

        count = self._pending.count
        tokens = self._pending.push(token)
        result = self.resolver.resolve(self.name, tokens, context=self.flags)

        if result.status == "match" and result.match:
            match = replace(result.match, count=count)
            if match.action.wants_argument:
                self._pending.awaiting = match
                return ModeResult(
                    consumed=True, status="pending", message="awaiting_argument"
                )
            self._pending.clear()
            return self.run_action(match)

        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        if len(tokens) > 1 or count is not None:
            return self._cancel("invalid_sequence")
        self._pending.clear()
        return ModeResult(consumed=False, status="miss")

    def _cancel(self, reason: str) -> ModeResult:
        keys = self._pending.display
        self._pending.clear()
        telemetry.record_event(
            "sequence.cancelled",
            level="debug",
            data={"keys": keys, "reason": reason},
        )
        return ModeResult(consumed=True, status="cancelled", message=reason)
