"""Resolve typed key tokens against per-mode tries built from the registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Mapping, Optional, Sequence

from vim_textarea.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class TrieNode:
    bindings: list[str] = field(default_factory=list)
    children: Dict[str, "TrieNode"] = field(default_factory=dict)

    def next_tokens(self) -> tuple[str, ...]:
        return tuple(sorted(self.children))


def build_trie(bindings: Sequence[Binding]) -> TrieNode:
    """Fold binding sequences into a token trie; leaves hold binding ids."""

    root = TrieNode()
    for binding in bindings:
        node = root
        for token in binding.sequence.tokens:
            node = node.children.setdefault(token, TrieNode())
        node.bindings.append(binding.id)
    return root


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action.

    ``count`` is the numeric prefix typed before the sequence, if any, and
    ``argument`` the literal character consumed by search actions.
    """

    binding: Binding
    action: ActionRef
    count: Optional[int] = None
    argument: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    consumed: int = 0
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Answers "what do these tokens mean in this mode?".

    Tries are rebuilt lazily, per mode, whenever the registry revision moves.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._tries: Dict[str, tuple[int, TrieNode]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(
        self,
        mode: str,
        tokens: Sequence[str],
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        """Walk ``tokens`` down the mode's trie.

        A sequence that ends on a bound node matches even if longer bindings
        share it as a prefix; the registry refuses such pairs, so in practice
        a node either binds or branches.
        """

        typed = tuple(tokens)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "length": len(typed)},
        ) as handle:
            result = self._walk(self._trie_for(mode), typed, context or {})
            handle.add_metadata("status", result.status)
            if result.match:
                handle.add_metadata("binding_id", result.match.binding.id)
            return result

    def _walk(
        self, node: TrieNode, typed: tuple[str, ...], context: Mapping[str, bool]
    ) -> ResolutionResult:
        for consumed, token in enumerate(typed):
            child = node.children.get(token)
            if child is None:
                return ResolutionResult(status="miss", consumed=consumed)
            node = child
        if not typed:
            return ResolutionResult(status="miss")

        match = self._best_match(node.bindings, context)
        if match:
            return ResolutionResult(status="match", match=match, consumed=len(typed))
        if node.children:
            return ResolutionResult(
                status="pending", consumed=len(typed), next_expected=node.next_tokens()
            )
        return ResolutionResult(status="miss", consumed=len(typed))

    def _trie_for(self, mode: str) -> TrieNode:
        revision = self._registry.revision()
        cached = self._tries.get(mode)
        if cached is None or cached[0] != revision:
            cached = (revision, build_trie(list(self._registry.iter_bindings(mode))))
            self._tries[mode] = cached
        return cached[1]

    def _best_match(
        self, binding_ids: Sequence[str], context: Mapping[str, bool]
    ) -> Optional[ResolutionMatch]:
        candidates = [self._registry.get_binding(bid) for bid in binding_ids]
        allowed = [binding for binding in candidates if binding.allows(context)]
        if not allowed:
            return None
        best = min(allowed, key=lambda binding: (-binding.priority, binding.id))
        return ResolutionMatch(
            binding=best, action=self._registry.get_action(best.action_id)
        )


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "build_trie",
]
