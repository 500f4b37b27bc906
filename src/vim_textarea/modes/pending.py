"""Accumulator for a not-yet-resolved Normal-mode key sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from vim_textarea.keymaps.resolver import ResolutionMatch

_COUNT_START = frozenset("123456789")


@dataclass(slots=True)
class PendingSequence:
    """Count digits, typed tokens and an optional match awaiting its argument.

    A count is a leading run of digits that starts with ``1``-``9``; ``0``
    only extends a count that is already pending.
    """

    digits: str = ""
    tokens: List[str] = field(default_factory=list)
    awaiting: Optional[ResolutionMatch] = None

    @property
    def count(self) -> Optional[int]:
        return int(self.digits) if self.digits else None

    @property
    def is_empty(self) -> bool:
        return not self.digits and not self.tokens and self.awaiting is None

    @property
    def display(self) -> str:
        return self.digits + "".join(_display_token(token) for token in self.tokens)

    def push_digit(self, key: str) -> bool:
        """Absorb ``key`` into the count when it belongs there."""

        if self.tokens or self.awaiting is not None or len(key) != 1:
            return False
        if key in _COUNT_START or (key == "0" and self.digits):
            self.digits += key
            return True
        return False

    def push(self, token: str) -> tuple[str, ...]:
        self.tokens.append(token)
        return tuple(self.tokens)

    def clear(self) -> None:
        self.digits = ""
        self.tokens.clear()
        self.awaiting = None


def _display_token(token: str) -> str:
    return token if len(token) == 1 else f"<{token}>"


__all__ = ["PendingSequence"]
