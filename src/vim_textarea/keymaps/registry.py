"""Keymap registry holding the (mode, key sequence) -> action table."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Dict, Iterable, Iterator, Optional, Sequence

from vim_textarea.runtime.telemetry import span

from .models import ActionRef, Binding

Signature = tuple[str, ...]


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a binding would collide with, or shadow, existing entries.

    Two bindings conflict when their sequences are equal or one is a strict
    prefix of the other: the shorter one would resolve before the longer one
    could ever be typed.
    """

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        names = ", ".join(conflict.id for conflict in self.conflicts)
        super().__init__(f"Binding '{binding.id}' conflicts with: {names}")


class KeymapRegistry:
    """Actions by id, plus bindings indexed per mode by key signature.

    Every change to the binding table bumps :meth:`revision`, which is how
    resolvers know their cached tries are stale.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_mode: Dict[str, Dict[Signature, set[str]]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        action = self._actions.get(action_id)
        if action is None:
            raise KeyError(f"Action '{action_id}' is not registered")
        return action

    def get_binding(self, binding_id: str) -> Binding:
        binding = self._bindings.get(binding_id)
        if binding is None:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return binding

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with self._span("register_action", action_id=action.id):
            if action.id in self._actions and not replace:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``; with ``replace`` it evicts whatever it collides with."""

        with self._span(
            "register_binding", binding_id=binding.id, mode=binding.mode
        ) as handle:
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")
            ignore = (binding.id,) if replace else ()
            conflicts = self._vet(binding, handle, ignore=ignore, evict=replace)
            for stale in conflicts:
                self._forget(stale)
            if binding.id in self._bindings:
                self._forget(self._bindings[binding.id])
            self._store(binding)
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with self._span("unregister_binding", binding_id=binding_id):
            binding = self._bindings.get(binding_id)
            if binding is not None:
                self._forget(binding)
                self._revision += 1
            return binding

    def update_binding(self, binding_id: str, **changes: object) -> Binding:
        """Swap fields of a registered binding, re-checking conflicts."""

        with self._span("update_binding", binding_id=binding_id) as handle:
            current = self.get_binding(binding_id)
            updated = replace(current, **changes)
            self._vet(updated, handle, ignore=(binding_id,), evict=False)
            self._forget(current)
            self._store(updated)
            return updated

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for ids in self._by_mode.get(mode, {}).values():
            for binding_id in sorted(ids):
                yield self._bindings[binding_id]

    def describe(self, mode: str) -> list[tuple[str, str]]:
        """Return ``(keys, description)`` rows for ``mode`` sorted by keys."""

        rows = []
        for binding in self.iter_bindings(mode):
            description = binding.description
            if not description and binding.action_id in self._actions:
                description = self._actions[binding.action_id].description
            rows.append((str(binding.sequence), description))
        return sorted(rows)

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted(self._by_mode)),
        )

    def detect_conflicts(
        self, binding: Binding, *, ignore: Sequence[str] = ()
    ) -> list[Binding]:
        """Bindings in the same mode whose sequence equals, prefixes or extends
        ``binding``'s and whose ``when`` clauses could hold at the same time."""

        tokens = binding.sequence.tokens
        found: list[Binding] = []
        for signature, ids in self._by_mode.get(binding.mode, {}).items():
            if not (_starts_with(signature, tokens) or _starts_with(tokens, signature)):
                continue
            for other_id in sorted(ids):
                other = self._bindings[other_id]
                if other_id not in ignore and _may_fire_together(binding, other):
                    found.append(other)
        return found

    def _vet(
        self, binding: Binding, handle, *, ignore: Sequence[str], evict: bool
    ) -> list[Binding]:
        if binding.action_id not in self._actions:
            handle.add_metadata("missing_action", binding.action_id)
            raise KeyError(
                f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
            )
        conflicts = self.detect_conflicts(binding, ignore=ignore)
        if conflicts and not evict:
            handle.add_metadata("conflicts", ",".join(c.id for c in conflicts))
            raise KeymapConflictError(binding, conflicts)
        return conflicts

    def _store(self, binding: Binding) -> None:
        self._bindings[binding.id] = binding
        index = self._by_mode.setdefault(binding.mode, defaultdict(set))
        index[binding.sequence.tokens].add(binding.id)
        self._revision += 1

    def _forget(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        index = self._by_mode.get(binding.mode, {})
        ids = index.get(binding.sequence.tokens)
        if ids is not None:
            ids.discard(binding.id)
            if not ids:
                del index[binding.sequence.tokens]
        if not index:
            self._by_mode.pop(binding.mode, None)

    def _span(self, operation: str, **metadata: str):
        return span(
            f"keymaps::{operation}",
            logger_name=self._logger_name,
            component="keymaps",
            metadata=metadata,
        )


def _starts_with(longer: Signature, prefix: Signature) -> bool:
    return longer[: len(prefix)] == prefix


def _may_fire_together(left: Binding, right: Binding) -> bool:
    # Unconditional bindings only collide with each other; two conditional
    # ones collide when they test exactly the same flags the same way.
    if not left.when or not right.when:
        return not left.when and not right.when
    return left.conditions() == right.conditions()


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
