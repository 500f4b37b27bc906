"""Single unnamed register holding the last deleted or yanked text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegisterValue:
    text: str
    type: str = "character"  # character or line

    @property
    def linewise(self) -> bool:
        return self.type == "line"


class UnnamedRegister:
    """Vim's ``"`` register; there are no named or numbered registers."""

    def __init__(self) -> None:
        self._value = RegisterValue(text="")

    def get(self) -> RegisterValue:
        return self._value

    @property
    def text(self) -> str:
        return self._value.text

    def store(self, text: str, *, register_type: str = "character") -> bool:
        """Replace the content unless ``text`` is empty.

        An empty line-wise value is kept: it is the yank of a blank line.
        """

        if not text and register_type != "line":
            return False
        self._value = RegisterValue(text=text, type=register_type)
        return True
