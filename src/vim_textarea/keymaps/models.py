"""Key strokes, sequences and the bindings that map them onto actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional

# Actions carrying this argument kind consume the next key as a literal
# character (f, F, t, T).
CHAR_ARGUMENT = "char"

_NAMED_KEYS = {
    "ESC": ("esc", "escape", "<esc>"),
    "ENTER": ("enter", "return", "<cr>"),
    "BACKSPACE": ("backspace", "<bs>"),
    "DELETE": ("delete", "del"),
    "UP": ("up",),
    "DOWN": ("down",),
    "LEFT": ("left",),
    "RIGHT": ("right",),
    "HOME": ("home",),
    "END": ("end",),
    " ": ("space",),
}
_KEY_ALIASES = {alias: name for name, aliases in _NAMED_KEYS.items() for alias in aliases}


def normalize_key_name(key: str) -> str:
    """Map host spellings of named keys (``escape``, ``<Esc>``) to one token."""

    if len(key) == 1:
        return key
    return _KEY_ALIASES.get(key.lower(), key)


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One key press, with its modifiers sorted and deduplicated."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        cleaned = {m.strip().lower() for m in self.modifiers} - {""}
        object.__setattr__(self, "key", normalize_key_name(self.key))
        object.__setattr__(self, "modifiers", tuple(sorted(cleaned)))

    @classmethod
    def parse(cls, notation: str) -> "KeyStroke":
        """Build a stroke from ``"x"``, ``"ESC"`` or ``"ctrl+r"`` notation."""

        head, sep, key = notation.rpartition("+")
        if not sep or not head:
            return cls(key=notation)
        return cls(key=key, modifiers=tuple(head.split("+")))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Non-empty run of strokes a binding listens for."""

    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tuple(KeyStroke.parse(key) for key in keys if key))

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    def __str__(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True, slots=True)
class WhenClause:
    """``flag`` must be truthy in the context (or falsy, for ``!flag``)."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        text = expression.strip()
        negated = text.startswith("!")
        return cls(text[1:] if negated else text, not negated)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A named handler. ``argument`` marks actions that need a literal key."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    argument: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    @property
    def wants_argument(self) -> bool:
        return self.argument == CHAR_ARGUMENT

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


def _clauses(when: Iterable[object]) -> tuple[WhenClause, ...]:
    return tuple(
        clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
        for clause in when
    )


@dataclass(frozen=True, slots=True)
class Binding:
    """Ties ``sequence`` in ``mode`` to ``action_id``, gated by ``when``."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        for name in ("id", "mode", "action_id"):
            if not getattr(self, name):
                raise ValueError(f"binding {name} cannot be empty")
        # Accept EditorMode members as well as plain strings.
        object.__setattr__(self, "mode", str(getattr(self.mode, "value", self.mode)))
        object.__setattr__(self, "when", _clauses(self.when))

    def conditions(self) -> dict[str, bool]:
        return {clause.flag: clause.expected for clause in self.when}

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)


__all__ = [
    "CHAR_ARGUMENT",
    "KeyStroke",
    "KeySequence",
    "WhenClause",
    "ActionRef",
    "Binding",
    "normalize_key_name",
]
