"""Mode manager coordinating the Normal and Insert pipelines."""

from __future__ import annotations

from typing import Dict, Optional, Type

from vim_textarea.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from vim_textarea.runtime import telemetry

from .base_mode import (
    EDIT_BOUNDARY,
    MODE_CHANGED,
    PASTE_REQUESTED,
    KeyInput,
    Mode,
    ModeContext,
    ModeResult,
)

KEYMAP_LOGGER = "vim_textarea.keymaps"


class ModeManager:
    """Owns the active mode and routes keys to it.

    Results are post-processed here rather than in the modes: a switch
    request changes the active mode, and an ``edit_boundary`` flag is
    published as an ``edit.boundary`` bus event after any switch has
    happened.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None

        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name=KEYMAP_LOGGER)
            if load_defaults:
                load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            keymap_registry, logger_name=KEYMAP_LOGGER
        )

        shared = {
            "keymap_registry": self.keymap_registry,
            "keymap_resolver": self.keymap_resolver,
            "keymap_flags": {},
            "mode_manager": self,
        }
        for key, value in shared.items():
            context.extras.setdefault(key, value)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self._active) if self._active else None

    @property
    def active_name(self) -> Optional[str]:
        return self._active

    def register_mode(self, mode_cls: Type[Mode], /, *args: object, **kwargs: object) -> Mode:
        """Instantiate and add a mode; the first one registered becomes active."""

        mode = mode_cls(self.context, *args, **kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = str(getattr(name, "value", name))
        if target not in self._modes:
            raise KeyError(f"Unknown mode '{target}'")
        previous = self._active
        if previous == target:
            return
        if previous is not None:
            self._modes[previous].on_exit(target)
        self._active = target
        self._modes[target].on_enter(previous)
        telemetry.record_event("mode.switch", data={"mode": target})
        self.context.bus.emit(MODE_CHANGED, {"previous": previous, "mode": target})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ) as handle:
            result = mode.handle_key(key)
            handle.add_metadata("status", result.status)

        if result.switch_to:
            self.switch_mode(result.switch_to)
        bus = self.context.bus
        if result.edit_boundary:
            bus.emit(EDIT_BOUNDARY, {"label": result.message or mode.name})
        if result.paste_requested:
            bus.emit(PASTE_REQUESTED, None)
        return result
